"""
Grocery Search - Hybrid text search over a grocery catalog.

Finds catalog items by free-text query despite typos, missing accents,
casing differences and regional vocabulary, combining exact, starts-with,
synonym, fuzzy and substring matching into one ranked result list.
"""

__version__ = "1.0.0"

from .core.engine import HybridSearchEngine, MergePolicy
from .core.normalizer import NormalizationOptions, create_search_variations, normalize
from .core.synonyms import SynonymService
from .models.catalog import SearchableItem
from .models.response import SearchResult
from .models.synonym import SynonymMatch

__all__ = [
    "HybridSearchEngine",
    "MergePolicy",
    "NormalizationOptions",
    "create_search_variations",
    "normalize",
    "SynonymService",
    "SearchableItem",
    "SearchResult",
    "SynonymMatch",
]
