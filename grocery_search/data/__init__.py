"""Static datasets shipped with grocery search."""

from .vocabulary import COUNTRY_NAMES, REGIONAL_VOCABULARY

__all__ = ["COUNTRY_NAMES", "REGIONAL_VOCABULARY"]
