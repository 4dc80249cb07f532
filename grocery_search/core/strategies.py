"""Match strategies: independent techniques for scoring a query against items."""

from typing import List, Optional, Protocol, Sequence, Tuple

from ..models.catalog import SearchableItem
from ..models.response import SearchResult
from .fuzzy_matcher import FuzzyIndex, FuzzyMatcher
from .normalizer import TextNormalizer
from .synonyms import SynonymService


class MatchStrategy(Protocol):
    """Interface every match strategy implements.

    ``find_matches`` receives the items, the raw query and its normalized
    form, and returns at most one result per item. Strategies with a higher
    ``priority`` run first and win score ties.
    """

    type: str

    def find_matches(
        self,
        items: Sequence[SearchableItem],
        raw_query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        ...

    def priority(self) -> int:
        ...


def _normalized_fields(normalizer: TextNormalizer, item: SearchableItem) -> Tuple[str, str]:
    return normalizer.normalize(item.name), normalizer.normalize(item.category or "")


class ExactMatchStrategy:
    """Normalized name or category equals the normalized query."""

    type = "exact"

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()

    def find_matches(
        self,
        items: Sequence[SearchableItem],
        raw_query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        if not normalized_query:
            return []

        results = []
        for item in items:
            name, category = _normalized_fields(self.normalizer, item)

            if name == normalized_query:
                results.append(SearchResult(
                    item=item,
                    score=1.0,
                    match_type="exact",
                    matched_terms=[item.name],
                    original_query=raw_query
                ))
            elif category == normalized_query:
                results.append(SearchResult(
                    item=item,
                    score=0.95,
                    match_type="exact",
                    matched_terms=[item.category or ""],
                    original_query=raw_query
                ))

        return results

    def priority(self) -> int:
        return 100


class StartsWithMatchStrategy:
    """Normalized name starts with the normalized query.

    Scores 0.85 plus up to 0.1 for how much of the name the query covers.
    """

    type = "starts_with"

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()

    def find_matches(
        self,
        items: Sequence[SearchableItem],
        raw_query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        if not normalized_query:
            return []

        results = []
        for item in items:
            name = self.normalizer.normalize(item.name)
            if not name.startswith(normalized_query):
                continue

            length_ratio = len(normalized_query) / len(name)
            results.append(SearchResult(
                item=item,
                score=0.85 + length_ratio * 0.1,
                match_type="partial",
                matched_terms=[item.name],
                original_query=raw_query
            ))

        return results

    def priority(self) -> int:
        return 90


class SynonymMatchStrategy:
    """Resolves the query through the synonym index and matches the canonical term."""

    type = "synonym"

    # Shorter canonical terms only match whole names or prefixes
    MIN_SUBSTRING_LENGTH = 4

    def __init__(
        self,
        synonym_service: SynonymService,
        normalizer: Optional[TextNormalizer] = None
    ) -> None:
        self.synonym_service = synonym_service
        self.normalizer = normalizer or TextNormalizer()

    def find_matches(
        self,
        items: Sequence[SearchableItem],
        raw_query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        if not normalized_query:
            return []

        synonym_match = self.synonym_service.find_synonyms(raw_query)
        if synonym_match is None:
            return []

        canonical = self.normalizer.normalize(synonym_match.canonical_term)
        confidence = synonym_match.confidence
        resolution = f"{synonym_match.original_term} → {synonym_match.canonical_term}"

        results = []
        for item in items:
            name, category = _normalized_fields(self.normalizer, item)
            score, matched = self._score(name, category, canonical, confidence, item)
            if score <= 0:
                continue

            results.append(SearchResult(
                item=item,
                score=score,
                match_type="synonym",
                matched_terms=[matched, resolution],
                original_query=raw_query
            ))

        return results

    def _score(
        self,
        name: str,
        category: str,
        canonical: str,
        confidence: float,
        item: SearchableItem
    ) -> Tuple[float, str]:
        if name:
            if name == canonical:
                return confidence * 0.95, item.name

            length_ratio = len(canonical) / len(name)

            if name.startswith(canonical):
                return confidence * (0.85 + length_ratio * 0.1), item.name

            if len(canonical) >= self.MIN_SUBSTRING_LENGTH and canonical in name:
                position_penalty = name.index(canonical) / len(name)
                score = confidence * (0.7 + length_ratio * 0.15) * (1 - position_penalty * 0.3)
                return score, item.name

        if category and category == canonical:
            return confidence * 0.8, item.category or ""

        return 0.0, ""

    def get_debug_info(self, query: str) -> dict:
        """Describe how a query resolves through the synonym index."""
        synonym_match = self.synonym_service.find_synonyms(query)
        synonyms = []
        if synonym_match is not None:
            region = synonym_match.region_info
            synonyms.append({
                "original": synonym_match.original_term,
                "canonical": synonym_match.canonical_term,
                "confidence": synonym_match.confidence,
                "region": region.country if region else "Generic"
            })

        return {"query": query, "synonyms_found": len(synonyms), "synonyms": synonyms}

    def priority(self) -> int:
        return 85


class FuzzyMatchStrategy:
    """Typo-tolerant matching over the weighted name and category fields."""

    type = "fuzzy"

    def __init__(self, matcher: Optional[FuzzyMatcher] = None) -> None:
        self.matcher = matcher or FuzzyMatcher()
        self._index: Optional[FuzzyIndex] = None

    def index_for(self, items: Sequence[SearchableItem]) -> FuzzyIndex:
        """
        Get the index for an item snapshot, rebuilding it for a new snapshot.

        Args:
            items: Item snapshot

        Returns:
            FuzzyIndex built from exactly these items
        """
        index = self._index
        if index is None or not self._same_snapshot(index, items):
            index = self.matcher.build_index(items)
            self._index = index
        return index

    def find_matches(
        self,
        items: Sequence[SearchableItem],
        raw_query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        if not normalized_query:
            return []

        hits = self.matcher.search(self.index_for(items), normalized_query)
        return [
            SearchResult(
                item=hit.item,
                score=max(0.0, (1 - hit.distance) * 0.8),
                match_type="fuzzy",
                matched_terms=list(hit.matches),
                original_query=raw_query
            )
            for hit in hits
        ]

    def priority(self) -> int:
        return 80

    @staticmethod
    def _same_snapshot(index: FuzzyIndex, items: Sequence[SearchableItem]) -> bool:
        if index.source is items:
            return True
        return len(index.source) == len(items) and all(
            indexed is item for indexed, item in zip(index.source, items)
        )


class SubstringMatchStrategy:
    """Normalized name or category contains the normalized query."""

    type = "substring"

    def __init__(self, normalizer: Optional[TextNormalizer] = None) -> None:
        self.normalizer = normalizer or TextNormalizer()

    def find_matches(
        self,
        items: Sequence[SearchableItem],
        raw_query: str,
        normalized_query: str
    ) -> List[SearchResult]:
        if not normalized_query:
            return []

        results = []
        for item in items:
            name, category = _normalized_fields(self.normalizer, item)
            score = 0.0
            matched_terms = []

            if normalized_query in name:
                score = max(score, 0.6)
                matched_terms.append(item.name)

            if normalized_query in category:
                score = max(score, 0.5)
                matched_terms.append(item.category or "")

            if score > 0:
                results.append(SearchResult(
                    item=item,
                    score=score,
                    match_type="partial",
                    matched_terms=matched_terms,
                    original_query=raw_query
                ))

        return results

    def priority(self) -> int:
        return 70


def default_strategies(
    synonym_service: Optional[SynonymService] = None,
    normalizer: Optional[TextNormalizer] = None,
    fuzzy_matcher: Optional[FuzzyMatcher] = None
) -> List[MatchStrategy]:
    """Build the standard strategy set, highest priority first."""
    normalizer = normalizer or TextNormalizer()
    strategies: List[MatchStrategy] = [
        ExactMatchStrategy(normalizer),
        StartsWithMatchStrategy(normalizer),
        FuzzyMatchStrategy(fuzzy_matcher or FuzzyMatcher(normalizer=normalizer)),
        SubstringMatchStrategy(normalizer),
    ]
    if synonym_service is not None:
        strategies.append(SynonymMatchStrategy(synonym_service, normalizer))

    return sorted(strategies, key=lambda strategy: -strategy.priority())
