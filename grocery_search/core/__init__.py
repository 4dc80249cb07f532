"""Core search engine functionality."""

from .engine import HybridSearchEngine, MergePolicy
from .fuzzy_matcher import FuzzyIndex, FuzzyMatcher
from .normalizer import NormalizationOptions, TextNormalizer, create_search_variations, normalize
from .query_engine import CategoryFilter, QueryEngine, RangeFilter
from .strategies import (
    ExactMatchStrategy,
    FuzzyMatchStrategy,
    MatchStrategy,
    StartsWithMatchStrategy,
    SubstringMatchStrategy,
    SynonymMatchStrategy,
)
from .synonyms import SynonymService, build_synonym_index

__all__ = [
    "HybridSearchEngine",
    "MergePolicy",
    "FuzzyIndex",
    "FuzzyMatcher",
    "NormalizationOptions",
    "TextNormalizer",
    "create_search_variations",
    "normalize",
    "CategoryFilter",
    "QueryEngine",
    "RangeFilter",
    "ExactMatchStrategy",
    "FuzzyMatchStrategy",
    "MatchStrategy",
    "StartsWithMatchStrategy",
    "SubstringMatchStrategy",
    "SynonymMatchStrategy",
    "SynonymService",
    "build_synonym_index",
]
