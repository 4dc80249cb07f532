"""Regional synonym resolution backed by a flat, read-only lookup table."""

from types import MappingProxyType
from typing import Dict, List, Mapping, Optional

import structlog

from ..data.vocabulary import COUNTRY_NAMES, REGIONAL_VOCABULARY
from ..models.synonym import RegionInfo, SynonymEntry, SynonymMatch
from .normalizer import TextNormalizer

logger = structlog.get_logger(__name__)

CANONICAL_CONFIDENCE = 1.0
SYNONYM_CONFIDENCE = 0.9

SynonymIndex = Mapping[str, SynonymEntry]


def build_synonym_index(
    vocabulary: Mapping[str, Mapping[str, List[str]]],
    normalizer: Optional[TextNormalizer] = None,
    country_names: Optional[Mapping[str, str]] = None
) -> SynonymIndex:
    """
    Flatten a regional vocabulary into a normalized-term lookup table.

    Args:
        vocabulary: Canonical term -> {synonym: [region codes]}
        normalizer: Normalizer used for the keys
        country_names: Region code -> country name

    Returns:
        Read-only mapping from normalized term to SynonymEntry
    """
    normalizer = normalizer or TextNormalizer()
    country_names = COUNTRY_NAMES if country_names is None else country_names
    index: Dict[str, SynonymEntry] = {}

    # Canonical keys go in first so no synonym can shadow them
    for canonical in vocabulary:
        key = normalizer.normalize(canonical)
        if key and key not in index:
            index[key] = SynonymEntry(
                canonical_term=canonical,
                confidence=CANONICAL_CONFIDENCE
            )

    for canonical, synonyms in vocabulary.items():
        for synonym, regions in synonyms.items():
            key = normalizer.normalize(synonym)
            if not key:
                continue
            if key in index:
                logger.debug(
                    "Skipping duplicate synonym key",
                    term=synonym,
                    canonical=canonical,
                    existing=index[key].canonical_term
                )
                continue

            index[key] = SynonymEntry(
                canonical_term=canonical,
                confidence=SYNONYM_CONFIDENCE,
                region_info=_region_info(regions, country_names)
            )

    return MappingProxyType(index)


def _region_info(regions: List[str], country_names: Mapping[str, str]) -> Optional[RegionInfo]:
    if not regions:
        return None

    primary = regions[0]
    return RegionInfo(
        region=primary,
        country=country_names.get(primary, primary),
        language="es" if len(primary) == 2 else "en"
    )


class SynonymService:
    """Resolves regional and foreign terms to canonical catalog terms."""

    def __init__(
        self,
        index: Optional[SynonymIndex] = None,
        normalizer: Optional[TextNormalizer] = None
    ) -> None:
        """
        Initialize the synonym service.

        Args:
            index: Prebuilt synonym index (built from the bundled vocabulary if None)
            normalizer: Normalizer applied to looked-up terms
        """
        self.normalizer = normalizer or TextNormalizer()
        if index is None:
            index = build_synonym_index(REGIONAL_VOCABULARY, self.normalizer)
        self._index = index

    @classmethod
    def from_vocabulary(
        cls,
        vocabulary: Mapping[str, Mapping[str, List[str]]],
        normalizer: Optional[TextNormalizer] = None
    ) -> "SynonymService":
        """Build a service from a raw vocabulary mapping."""
        normalizer = normalizer or TextNormalizer()
        return cls(build_synonym_index(vocabulary, normalizer), normalizer)

    @property
    def index(self) -> SynonymIndex:
        """The read-only lookup table."""
        return self._index

    def find_synonyms(self, term: str) -> Optional[SynonymMatch]:
        """
        Resolve a term to its canonical form.

        Args:
            term: Term as typed by the user

        Returns:
            SynonymMatch on hit, None when the term is blank or unknown
        """
        entry = self._lookup(term)
        if entry is None:
            return None

        return SynonymMatch(
            canonical_term=entry.canonical_term,
            original_term=term,
            confidence=entry.confidence,
            region_info=entry.region_info
        )

    def has_synonyms(self, term: str) -> bool:
        """Check whether a term is present in the index."""
        return self._lookup(term) is not None

    def get_canonical_term(self, term: str) -> Optional[str]:
        """Get the canonical term for a term, if any."""
        entry = self._lookup(term)
        return entry.canonical_term if entry else None

    def get_region_info(self, term: str) -> Optional[RegionInfo]:
        """Get the region metadata of a term, if any."""
        entry = self._lookup(term)
        return entry.region_info if entry else None

    def find_all_variations(self, canonical_term: str) -> List[SynonymMatch]:
        """
        List every indexed term resolving to the given canonical term.

        This scans the whole index and is meant for display and debugging,
        not for the search path.

        Args:
            canonical_term: Canonical term (any casing or accents)

        Returns:
            Matches for every synonym, excluding the canonical entry itself
        """
        normalized_canonical = self.normalizer.normalize(canonical_term)
        if not normalized_canonical:
            return []

        variations = []
        for term, entry in self._index.items():
            if term == normalized_canonical:
                continue
            if self.normalizer.normalize(entry.canonical_term) == normalized_canonical:
                variations.append(SynonymMatch(
                    canonical_term=entry.canonical_term,
                    original_term=term,
                    confidence=entry.confidence,
                    region_info=entry.region_info
                ))

        return variations

    def get_stats(self) -> Dict[str, int]:
        """Get synonym index statistics."""
        return {
            "total_terms": len(self._index),
            "with_region_info": sum(
                1 for entry in self._index.values() if entry.region_info is not None
            )
        }

    def _lookup(self, term: str) -> Optional[SynonymEntry]:
        if not term or not term.strip():
            return None
        return self._index.get(self.normalizer.normalize(term))
