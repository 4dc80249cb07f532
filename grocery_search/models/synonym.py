"""Synonym index models."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class RegionInfo(BaseModel):
    """Where a regional term is used."""

    model_config = ConfigDict(frozen=True)

    region: str = Field(..., description="Region code, e.g. 'AR'")
    country: str = Field(..., description="Country name")
    language: Optional[str] = Field(None, description="Language tag, e.g. 'es'")


class SynonymEntry(BaseModel):
    """Value stored in the synonym index for one normalized term."""

    model_config = ConfigDict(frozen=True)

    canonical_term: str = Field(..., description="Generic term the key resolves to")
    confidence: float = Field(..., gt=0.0, le=1.0, description="Confidence of the mapping")
    region_info: Optional[RegionInfo] = Field(None, description="Region metadata for synonyms")


class SynonymMatch(BaseModel):
    """Result of resolving a term through the synonym index."""

    canonical_term: str = Field(..., description="Generic term the input resolves to")
    original_term: str = Field(..., description="Term that was looked up")
    confidence: float = Field(..., gt=0.0, le=1.0, description="Confidence of the mapping")
    region_info: Optional[RegionInfo] = Field(None, description="Region metadata")
