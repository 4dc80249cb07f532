"""Catalog queries: hybrid text search followed by attribute filters and sorting."""

from typing import Any, Callable, Dict, List, Optional, Protocol, Sequence

import structlog

from ..models.catalog import SearchableItem
from ..models.query import FilterCriteria, QueryOptions, QueryResult
from .engine import HybridSearchEngine
from .normalizer import TextNormalizer
from .synonyms import SynonymService

logger = structlog.get_logger(__name__)


class FilterDefinition(Protocol):
    """A filter that can be registered with the query engine."""

    type: str

    def apply_filter(
        self,
        items: List[SearchableItem],
        criteria: FilterCriteria
    ) -> List[SearchableItem]:
        ...


class CategoryFilter:
    """Keeps items whose category matches one of the given values."""

    type = "category"

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()

    def apply_filter(
        self,
        items: List[SearchableItem],
        criteria: FilterCriteria
    ) -> List[SearchableItem]:
        values = criteria.value if isinstance(criteria.value, (list, tuple, set)) else [criteria.value]
        wanted = set(self.normalizer.normalize_terms(str(v) for v in values if v is not None))
        if not wanted:
            return items

        return [
            item for item in items
            if self.normalizer.normalize(item.category or "") in wanted
        ]


class RangeFilter:
    """Keeps items whose numeric field lies within [min_value, max_value]."""

    type = "range"

    def apply_filter(
        self,
        items: List[SearchableItem],
        criteria: FilterCriteria
    ) -> List[SearchableItem]:
        if not criteria.field:
            return items

        filtered = []
        for item in items:
            value = getattr(item, criteria.field, None)
            if not isinstance(value, (int, float)) or isinstance(value, bool):
                continue
            if criteria.min_value is not None and value < criteria.min_value:
                continue
            if criteria.max_value is not None and value > criteria.max_value:
                continue
            filtered.append(item)

        return filtered


SearchEngineFactory = Callable[[Sequence[SearchableItem]], HybridSearchEngine]


class QueryEngine:
    """Applies search, registered filters and sorting to an item list."""

    def __init__(
        self,
        synonym_service: Optional[SynonymService] = None,
        search_engine_factory: Optional[SearchEngineFactory] = None,
        register_defaults: bool = True
    ) -> None:
        """
        Initialize the query engine.

        Args:
            synonym_service: Shared synonym resolver handed to the search engine
            search_engine_factory: Builds the search engine on first search
            register_defaults: Register the category and range filters
        """
        self.synonym_service = synonym_service
        self._search_engine_factory = search_engine_factory or self._default_factory
        self._search_engine: Optional[HybridSearchEngine] = None
        self._indexed_items: Optional[Sequence[SearchableItem]] = None
        self._filter_registry: Dict[str, FilterDefinition] = {}

        if register_defaults:
            self.register_filter(CategoryFilter())
            self.register_filter(RangeFilter())

    @property
    def search_engine(self) -> Optional[HybridSearchEngine]:
        """Search engine, None until the first search."""
        return self._search_engine

    def register_filter(self, definition: FilterDefinition) -> None:
        """Register a filter under its type, replacing any previous one."""
        self._filter_registry[definition.type] = definition

    def get_registered_filters(self) -> List[FilterDefinition]:
        """Get all registered filters."""
        return list(self._filter_registry.values())

    def execute_query(
        self,
        items: Sequence[SearchableItem],
        options: Optional[QueryOptions] = None
    ) -> QueryResult:
        """
        Run a catalog query.

        Args:
            items: Items to query
            options: Search term, filters and sort order

        Returns:
            QueryResult with the remaining items and the filters applied
        """
        options = options or QueryOptions()

        if options.search_term and options.search_term.strip():
            engine = self._engine_for(items)
            results = engine.search(
                options.search_term,
                min_score=options.min_score,
                max_results=options.max_results
            )
            filtered_items = [result.item for result in results]
        else:
            filtered_items = list(items)

        applied_filters: List[FilterCriteria] = []
        for criteria in options.filters:
            definition = self._filter_registry.get(criteria.type)
            if definition is None:
                logger.debug("Skipping unknown filter", filter_type=criteria.type)
                continue
            filtered_items = definition.apply_filter(filtered_items, criteria)
            applied_filters.append(criteria)

        if options.sort_by:
            filtered_items = self._sort(filtered_items, options.sort_by, options.sort_order == "desc")

        return QueryResult(
            items=filtered_items,
            total_count=len(filtered_items),
            applied_filters=applied_filters
        )

    def _engine_for(self, items: Sequence[SearchableItem]) -> HybridSearchEngine:
        if self._search_engine is None:
            self._search_engine = self._search_engine_factory(items)
            self._indexed_items = items
        elif self._indexed_items is not items:
            self._search_engine.update_items(items)
            self._indexed_items = items
        return self._search_engine

    def _default_factory(self, items: Sequence[SearchableItem]) -> HybridSearchEngine:
        return HybridSearchEngine(items, synonym_service=self.synonym_service)

    @staticmethod
    def _sort(items: List[SearchableItem], sort_by: str, descending: bool) -> List[SearchableItem]:
        present = [item for item in items if getattr(item, sort_by, None) is not None]
        missing = [item for item in items if getattr(item, sort_by, None) is None]

        def sort_key(item: SearchableItem) -> Any:
            return getattr(item, sort_by)

        return sorted(present, key=sort_key, reverse=descending) + missing
