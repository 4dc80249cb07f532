"""Hybrid search engine combining exact, synonym, fuzzy and partial matching."""

import time
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

import structlog

from ..models.catalog import SearchableItem
from ..models.response import SearchResult
from .fuzzy_matcher import FuzzyIndex, FuzzyMatcher
from .normalizer import TextNormalizer
from .strategies import FuzzyMatchStrategy, MatchStrategy, default_strategies
from .synonyms import SynonymService

logger = structlog.get_logger(__name__)


class MergePolicy(str, Enum):
    """How the outputs of the match strategies are combined."""

    # Every strategy runs; each item keeps its best-scoring result
    CUMULATIVE = "cumulative"
    # Strategies run by priority; the first one with results wins
    HIERARCHICAL = "hierarchical"


@dataclass(frozen=True)
class CatalogSnapshot:
    """Item set and the indexes derived from it, replaced as a whole."""

    items: tuple
    positions: Dict[str, int] = field(default_factory=dict)
    fuzzy_index: Optional[FuzzyIndex] = None


def _empty_stats() -> Dict[str, Any]:
    return {
        "total_queries": 0,
        "exact_matches": 0,
        "synonym_matches": 0,
        "fuzzy_matches": 0,
        "partial_matches": 0,
        "no_matches": 0,
        "total_execution_time": 0.0,
    }


class HybridSearchEngine:
    """Runs the match strategies over a catalog snapshot and ranks the results."""

    def __init__(
        self,
        items: Sequence[SearchableItem] = (),
        synonym_service: Optional[SynonymService] = None,
        normalizer: Optional[TextNormalizer] = None,
        fuzzy_matcher: Optional[FuzzyMatcher] = None,
        merge_policy: MergePolicy = MergePolicy.CUMULATIVE,
        strategies: Optional[Sequence[MatchStrategy]] = None
    ) -> None:
        """
        Initialize the search engine.

        Args:
            items: Initial catalog
            synonym_service: Shared synonym resolver (bundled vocabulary if None)
            normalizer: Normalizer shared by all strategies
            fuzzy_matcher: Configured approximate matcher
            merge_policy: How strategy outputs are combined
            strategies: Custom strategy set (standard set if None)
        """
        self.normalizer = normalizer or TextNormalizer()
        self.synonym_service = synonym_service or SynonymService(normalizer=self.normalizer)
        self.merge_policy = MergePolicy(merge_policy)

        if strategies is None:
            strategies = default_strategies(
                self.synonym_service,
                self.normalizer,
                fuzzy_matcher or FuzzyMatcher(normalizer=self.normalizer)
            )
        self.strategies: List[MatchStrategy] = sorted(
            strategies, key=lambda strategy: -strategy.priority()
        )

        self._stats = _empty_stats()
        self._snapshot = self._build_snapshot(items)

    @property
    def items(self) -> tuple:
        """Current item snapshot."""
        return self._snapshot.items

    @property
    def fuzzy_index(self) -> Optional[FuzzyIndex]:
        """Approximate-match index of the current snapshot."""
        return self._snapshot.fuzzy_index

    def update_items(self, items: Sequence[SearchableItem]) -> None:
        """
        Replace the catalog and rebuild the derived indexes.

        The new snapshot is fully built before it replaces the old one.

        Args:
            items: Complete new item set
        """
        start_time = time.time()
        self._snapshot = self._build_snapshot(items)
        logger.info(
            "Catalog re-indexed",
            total_items=len(self._snapshot.items),
            execution_time_ms=round((time.time() - start_time) * 1000, 2)
        )

    def search(
        self,
        query: str,
        min_score: Optional[float] = None,
        max_results: Optional[int] = None
    ) -> List[SearchResult]:
        """
        Search the catalog.

        Args:
            query: Free-text query
            min_score: Drop results scoring strictly below this value
            max_results: Maximum number of results to return

        Returns:
            Results sorted by descending score, one per item id
        """
        if not query or not query.strip():
            return []

        start_time = time.time()
        snapshot = self._snapshot
        normalized_query = self.normalizer.normalize(query)
        if not normalized_query:
            return []

        if self.merge_policy is MergePolicy.HIERARCHICAL:
            candidates = self._hierarchical(snapshot, query, normalized_query)
        else:
            candidates = self._cumulative(snapshot, query, normalized_query)

        results = self._rank(snapshot, candidates, min_score, max_results)

        execution_time = (time.time() - start_time) * 1000
        self._record(results, execution_time)
        logger.debug(
            "Search completed",
            query=query,
            policy=self.merge_policy.value,
            total_results=len(results),
            execution_time_ms=round(execution_time, 2)
        )

        return results

    def _cumulative(
        self,
        snapshot: CatalogSnapshot,
        query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        best: Dict[str, SearchResult] = {}
        for strategy in self.strategies:
            for result in strategy.find_matches(snapshot.items, query, normalized_query):
                current = best.get(result.item.id)
                # Strict comparison: on a tie the higher-priority strategy keeps the item
                if current is None or result.score > current.score:
                    best[result.item.id] = result
        return list(best.values())

    def _hierarchical(
        self,
        snapshot: CatalogSnapshot,
        query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        for strategy in self.strategies:
            results = strategy.find_matches(snapshot.items, query, normalized_query)
            if results:
                best: Dict[str, SearchResult] = {}
                for result in results:
                    current = best.get(result.item.id)
                    if current is None or result.score > current.score:
                        best[result.item.id] = result
                return list(best.values())
        return []

    @staticmethod
    def _rank(
        snapshot: CatalogSnapshot,
        results: List[SearchResult],
        min_score: Optional[float],
        max_results: Optional[int]
    ) -> List[SearchResult]:
        if min_score is not None:
            results = [result for result in results if result.score >= min_score]

        fallback = len(snapshot.items)
        results.sort(key=lambda r: (-r.score, snapshot.positions.get(r.item.id, fallback)))

        if max_results is not None:
            results = results[:max_results]
        return results

    def _build_snapshot(self, items: Sequence[SearchableItem]) -> CatalogSnapshot:
        frozen_items = tuple(items)
        positions: Dict[str, int] = {}
        for position, item in enumerate(frozen_items):
            positions.setdefault(item.id, position)

        fuzzy_index = None
        for strategy in self.strategies:
            if isinstance(strategy, FuzzyMatchStrategy):
                fuzzy_index = strategy.index_for(frozen_items)

        return CatalogSnapshot(items=frozen_items, positions=positions, fuzzy_index=fuzzy_index)

    def _record(self, results: List[SearchResult], execution_time: float) -> None:
        self._stats["total_queries"] += 1
        self._stats["total_execution_time"] += execution_time
        if results:
            self._stats[f"{results[0].match_type}_matches"] += 1
        else:
            self._stats["no_matches"] += 1

    def get_stats(self) -> Dict[str, Any]:
        """Get engine statistics."""
        stats = self._stats.copy()

        total = stats["total_queries"]
        if total > 0:
            stats["average_execution_time_ms"] = stats["total_execution_time"] / total
            stats["no_match_rate"] = stats["no_matches"] / total
        else:
            stats["average_execution_time_ms"] = 0.0
            stats["no_match_rate"] = 0.0

        stats["total_items"] = len(self._snapshot.items)
        stats["merge_policy"] = self.merge_policy.value
        stats["strategies"] = [strategy.type for strategy in self.strategies]
        return stats

    def clear_stats(self) -> None:
        """Reset statistics."""
        self._stats = _empty_stats()
