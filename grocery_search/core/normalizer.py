"""Text normalization utilities for accent, case and punctuation insensitive search."""

import re
import unicodedata
from dataclasses import dataclass
from typing import Iterable, List, Optional


@dataclass(frozen=True)
class NormalizationOptions:
    """Independent toggles for each normalization step."""

    remove_accents: bool = True
    to_lower_case: bool = True
    remove_special_chars: bool = True
    trim_whitespace: bool = True


DEFAULT_OPTIONS = NormalizationOptions()


class TextNormalizer:
    """Turns arbitrary text into a canonical, comparable form."""

    def __init__(self) -> None:
        """Initialize the normalizer."""
        # Compile regex patterns for performance
        self.special_chars_regex = re.compile(r'[^\w\s]')
        self.whitespace_regex = re.compile(r'\s+')

    def normalize(self, text: Optional[str], options: Optional[NormalizationOptions] = None) -> str:
        """
        Normalize text for search comparisons.

        Args:
            text: Input text to normalize
            options: Steps to apply (all enabled by default)

        Returns:
            Normalized text, empty string for empty input
        """
        if not text:
            return ""

        options = options or DEFAULT_OPTIONS
        normalized = text

        if options.trim_whitespace:
            normalized = normalized.strip()

        if options.to_lower_case:
            normalized = normalized.lower()

        if options.remove_accents:
            normalized = self._strip_accents(normalized)

        # Keep spaces, drop punctuation and symbols
        if options.remove_special_chars:
            normalized = self.special_chars_regex.sub('', normalized)

        normalized = self.whitespace_regex.sub(' ', normalized)

        # Removing characters can leave a dangling space at either end
        if options.trim_whitespace:
            normalized = normalized.strip()

        return normalized

    def normalize_terms(
        self,
        terms: Iterable[str],
        options: Optional[NormalizationOptions] = None
    ) -> List[str]:
        """Normalize several terms, dropping those that end up empty."""
        normalized_terms = (self.normalize(term, options) for term in terms)
        return [term for term in normalized_terms if term]

    def create_search_variations(self, term: str) -> List[str]:
        """
        Build the forms of a term worth searching under.

        Args:
            term: Input term

        Returns:
            Original, fully normalized, accent-stripped and lowercase-only
            forms, de-duplicated in that order, without empty strings
        """
        variations = [
            term,
            self.normalize(term),
            self.normalize(term, NormalizationOptions(to_lower_case=False)),
            self.normalize(term, NormalizationOptions(remove_accents=False)),
        ]

        unique: List[str] = []
        for variation in variations:
            if variation and variation not in unique:
                unique.append(variation)
        return unique

    @staticmethod
    def _strip_accents(text: str) -> str:
        decomposed = unicodedata.normalize('NFD', text)
        return ''.join(c for c in decomposed if not unicodedata.combining(c))


_default_normalizer = TextNormalizer()


def normalize(text: Optional[str], options: Optional[NormalizationOptions] = None) -> str:
    """Normalize text with a shared normalizer instance."""
    return _default_normalizer.normalize(text, options)


def create_search_variations(term: str) -> List[str]:
    """Search variations of a term using a shared normalizer instance."""
    return _default_normalizer.create_search_variations(term)
