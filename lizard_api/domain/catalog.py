"""Fixed search phrases, denylists and fallback images."""

# Stock, merch and marketplace hosts; matched as host substrings
BLOCKED_SITES = (
    "pinterest.",
    "etsy.",
    "redbubble.",
    "aliexpress.",
    "temu.",
    "vectorstock.",
    "shutterstock.",
    "adobe.",
    "istockphoto.",
    "123rf.",
    "dreamstime.",
    "depositphotos.",
    "freepik.",
    "pngtree.",
)

# Matched as lowercase substrings of the result title
BLOCKED_WORDS = (
    "sticker",
    "clipart",
    "svg",
    "logo",
    "vector",
    "icon",
    "plush",
    "plushie",
    "toy",
    "merch",
    "tattoo",
    "drawing",
    "ai",
    "midjourney",
    "dalle",
    "generated",
    "meme",
    "cartoon",
)

VECTOR_EXTENSIONS = (".svg", ".svgz")

SEED_QUERIES = (
    "lizard wildlife photo",
    "lizard macro photo",
    "gecko close up nature photo",
    "anole close up photo",
    "iguana portrait wildlife photo",
    "lizard basking on rock photo",
    "reptile macro eyes photo",
    "lizard nature photography outdoors",
)

NEGATIVE_TERMS = (
    "-plush",
    "-toy",
    "-merch",
    "-clipart",
    "-sticker",
    "-logo",
    "-vector",
    "-cartoon",
)

# Hotlink-friendly Wikimedia Commons photos
FALLBACK_URLS = (
    "https://upload.wikimedia.org/wikipedia/commons/5/50/Common_lizard.jpg",
    "https://upload.wikimedia.org/wikipedia/commons/f/f4/Anolis_carolinensis.jpg",
    "https://upload.wikimedia.org/wikipedia/commons/3/32/Agama_agama_male.jpg",
    "https://upload.wikimedia.org/wikipedia/commons/2/28/Iguana_iguana_1.jpg",
)
