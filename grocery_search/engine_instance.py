"""Service-wide engine instances, built once and shared by the API routers."""

from .config import get_settings
from .core.engine import HybridSearchEngine
from .core.fuzzy_matcher import FuzzyMatcher
from .core.normalizer import TextNormalizer
from .core.query_engine import QueryEngine
from .core.synonyms import SynonymService

settings = get_settings()

normalizer = TextNormalizer()
synonym_service = SynonymService(normalizer=normalizer)

fuzzy_matcher = FuzzyMatcher(
    threshold=settings.fuzzy_threshold,
    keys=(("name", settings.fuzzy_name_weight), ("category", settings.fuzzy_category_weight)),
    min_match_char_length=settings.fuzzy_min_match_char_length,
    max_pattern_length=settings.fuzzy_max_pattern_length,
    distance=settings.fuzzy_distance,
    location=settings.fuzzy_location,
    normalizer=normalizer
)

search_engine = HybridSearchEngine(
    synonym_service=synonym_service,
    normalizer=normalizer,
    fuzzy_matcher=fuzzy_matcher,
    merge_policy=settings.merge_policy
)

# Shares the service engine instead of lazily building its own
query_engine = QueryEngine(
    synonym_service=synonym_service,
    search_engine_factory=lambda items: search_engine
)
