"""Approximate (typo-tolerant) matching over a prebuilt field index."""

import math
import sys
from dataclasses import dataclass
from typing import Dict, List, Optional, Sequence, Tuple

from rapidfuzz.distance import Levenshtein

from ..models.catalog import SearchableItem
from .normalizer import TextNormalizer

# Stands in for a perfect field score so weighted products stay informative
EPSILON = sys.float_info.epsilon

DEFAULT_KEYS: Tuple[Tuple[str, float], ...] = (("name", 0.8), ("category", 0.3))


@dataclass(frozen=True)
class IndexedField:
    """One searchable field of an item, pre-normalized."""

    key: str
    raw: str
    normalized: str
    weight: float
    norm: float


@dataclass(frozen=True)
class IndexedRecord:
    """An item and its indexed fields."""

    position: int
    item: SearchableItem
    fields: Tuple[IndexedField, ...]


@dataclass(frozen=True)
class FuzzyIndex:
    """Immutable approximate-match index built from one item snapshot."""

    source: Tuple[SearchableItem, ...]
    records: Tuple[IndexedRecord, ...]

    def __len__(self) -> int:
        return len(self.records)


@dataclass(frozen=True)
class FuzzyHit:
    """An approximate match: lower distance is better, 0 is perfect."""

    item: SearchableItem
    position: int
    distance: float
    matches: Tuple[str, ...]


class FuzzyMatcher:
    """Handles approximate matching of a query against indexed item fields."""

    def __init__(
        self,
        threshold: float = 0.4,
        keys: Sequence[Tuple[str, float]] = DEFAULT_KEYS,
        min_match_char_length: int = 2,
        max_pattern_length: int = 32,
        distance: int = 100,
        location: int = 0,
        normalizer: Optional[TextNormalizer] = None
    ) -> None:
        """
        Initialize the fuzzy matcher.

        Args:
            threshold: Maximum accepted distance per field (0 exact, 1 anything)
            keys: Item fields to index with their weights
            min_match_char_length: Shortest query attempted
            max_pattern_length: Longer queries are truncated to this length
            distance: How far from ``location`` a match may start before
                the position penalty alone exhausts the threshold
            location: Expected match position within a field
            normalizer: Normalizer applied to fields and queries
        """
        self.threshold = threshold
        self.keys = tuple(keys)
        self.min_match_char_length = min_match_char_length
        self.max_pattern_length = max_pattern_length
        self.distance = distance
        self.location = location
        self.normalizer = normalizer or TextNormalizer()

        total_weight = sum(weight for _, weight in self.keys)
        self._weights: Dict[str, float] = {
            key: (weight / total_weight if total_weight > 0 else 0.0)
            for key, weight in self.keys
        }

    def build_index(self, items: Sequence[SearchableItem]) -> FuzzyIndex:
        """
        Index the weighted fields of every item.

        Args:
            items: Item snapshot

        Returns:
            FuzzyIndex tied to the given snapshot
        """
        source = tuple(items)
        records = []

        for position, item in enumerate(source):
            fields = []
            for key, _ in self.keys:
                raw = getattr(item, key, None) or ""
                normalized = self.normalizer.normalize(raw)
                if not normalized:
                    continue
                fields.append(IndexedField(
                    key=key,
                    raw=raw,
                    normalized=normalized,
                    weight=self._weights[key],
                    norm=self._field_norm(normalized)
                ))
            records.append(IndexedRecord(position=position, item=item, fields=tuple(fields)))

        return FuzzyIndex(source=source, records=tuple(records))

    def search(self, index: FuzzyIndex, query: str) -> List[FuzzyHit]:
        """
        Find approximate matches for a query.

        Args:
            index: Index to search
            query: Search query (normalized here)

        Returns:
            Hits in index order
        """
        pattern = self.normalizer.normalize(query)[:self.max_pattern_length]
        if len(pattern) < self.min_match_char_length:
            return []

        hits = []
        for record in index.records:
            total = 1.0
            matches = []

            for indexed_field in record.fields:
                field_distance = self.field_distance(pattern, indexed_field.normalized)
                if field_distance is None:
                    continue

                base = EPSILON if field_distance == 0 else field_distance
                total *= base ** (indexed_field.weight * indexed_field.norm)
                matches.append(indexed_field.raw)

            if matches:
                hits.append(FuzzyHit(
                    item=record.item,
                    position=record.position,
                    distance=total,
                    matches=tuple(matches)
                ))

        return hits

    def field_distance(self, pattern: str, text: str) -> Optional[float]:
        """
        Distance of the best approximate occurrence of a pattern in a text.

        The pattern is aligned against every window of the text. The cost of
        a window is its edit distance relative to the pattern length, plus a
        penalty for starting away from the expected location.

        Args:
            pattern: Normalized query
            text: Normalized field value

        Returns:
            Best cost, or None when no window is within the threshold
        """
        if not pattern or not text:
            return None

        pattern_length = len(pattern)
        max_errors = int(self.threshold * pattern_length)
        min_window = max(1, self.min_match_char_length, pattern_length - max_errors)
        max_window = pattern_length + max_errors

        best: Optional[float] = None
        for start in range(len(text)):
            proximity = abs(self.location - start) / self.distance if self.distance else 0.0
            if proximity > self.threshold or (best is not None and proximity >= best):
                # Proximity only grows once past the expected location
                if start >= self.location:
                    break
                continue

            for window_length in range(min_window, max_window + 1):
                if start + window_length > len(text):
                    break
                errors = Levenshtein.distance(
                    pattern, text[start:start + window_length], score_cutoff=max_errors
                )
                if errors > max_errors:
                    continue

                score = errors / pattern_length + proximity
                if score <= self.threshold and (best is None or score < best):
                    best = score

        return best

    @staticmethod
    def _field_norm(text: str) -> float:
        tokens = len(text.split())
        return round(1 / math.sqrt(tokens), 3) if tokens else 1.0
