from pydantic_settings import BaseSettings


class Settings(BaseSettings):
    """Application settings loaded from environment."""

    # Service
    service_name: str = "lizard-api"
    log_level: str = "INFO"

    # SerpAPI (Google Images); unset switches to the scrape source
    serpapi_key: str | None = None
    serpapi_url: str = "https://serpapi.com/search.json"
    serpapi_max_pages: int = 6
    target_candidates: int = 30

    # Scrape source
    scrape_url: str = "https://unsplash.com/s/photos/lizard"

    # Candidate fetching
    max_candidate_tries: int = 15
    http_timeout: float | None = None  # None leaves outbound calls unbounded

    # Response caching
    cache_s_maxage: int = 300
    cache_stale_while_revalidate: int = 3600

    @property
    def has_search_credential(self) -> bool:
        return bool(self.serpapi_key)

    @property
    def cache_control(self) -> str:
        return (
            f"public, s-maxage={self.cache_s_maxage}, "
            f"stale-while-revalidate={self.cache_stale_while_revalidate}"
        )

    class Config:
        env_file = ".env"
        case_sensitive = False


settings = Settings()
