"""Synonym lookup API endpoints."""

from typing import List

from fastapi import APIRouter, HTTPException, Path

from ..engine_instance import synonym_service
from ..models.response import SynonymStatsResponse
from ..models.synonym import SynonymMatch

router = APIRouter(prefix="/api/v1", tags=["synonyms"])


@router.get(
    "/synonyms/stats",
    response_model=SynonymStatsResponse,
    summary="Synonym index statistics",
    description="Get the number of indexed terms and how many carry region info"
)
async def synonym_stats() -> SynonymStatsResponse:
    """Get synonym index statistics."""
    return SynonymStatsResponse(**synonym_service.get_stats())


@router.get(
    "/synonyms/{term}",
    response_model=SynonymMatch,
    summary="Resolve a term",
    description="Resolve a regional or foreign term to its canonical catalog term"
)
async def find_synonym(
    term: str = Path(..., description="Term to resolve")
) -> SynonymMatch:
    """
    Resolve a term through the synonym index.

    Returns the canonical term, the confidence of the mapping and, for
    regional terms, where the term is used.
    """
    match = synonym_service.find_synonyms(term)
    if match is None:
        raise HTTPException(
            status_code=404,
            detail=f"No synonym found for '{term}'"
        )
    return match


@router.get(
    "/synonyms/{term}/variations",
    response_model=List[SynonymMatch],
    summary="Regional variations",
    description="List every indexed term that resolves to the given canonical term"
)
async def find_variations(
    term: str = Path(..., description="Canonical term (or any of its synonyms)")
) -> List[SynonymMatch]:
    """List regional variations of a canonical term."""
    canonical = synonym_service.get_canonical_term(term) or term
    return synonym_service.find_all_variations(canonical)
