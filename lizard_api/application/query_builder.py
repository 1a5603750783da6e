import random

from ..domain.catalog import NEGATIVE_TERMS, SEED_QUERIES
from ..domain.value_objects import SearchQuery


class QueryBuilder:
    """Builds the search-provider query for a request."""

    def __init__(
        self,
        seed_queries: tuple[str, ...] = SEED_QUERIES,
        negative_terms: tuple[str, ...] = NEGATIVE_TERMS,
        rng: random.Random | None = None,
    ) -> None:
        if not seed_queries:
            raise ValueError("At least one seed query is required")
        self._seed_queries = seed_queries
        self._negative_terms = negative_terms
        self._rng = rng or random.Random()

    def build(self, user_query: str | None = None) -> SearchQuery:
        """Use the caller's query if given, otherwise a random seed phrase."""
        user_query = (user_query or "").strip()
        base = user_query or self._rng.choice(self._seed_queries)
        text = " ".join([base, *self._negative_terms])
        return SearchQuery(base=base, text=text, user_supplied=bool(user_query))
