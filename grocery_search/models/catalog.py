"""Catalog item models consumed by the search engine."""

from typing import Optional

from pydantic import BaseModel, ConfigDict, Field


class SearchableItem(BaseModel):
    """A catalog item the engine can search.

    Identity is ``id``. Any extra fields (price, rating, image...) are kept
    on the instance but ignored by the matching strategies.
    """

    model_config = ConfigDict(extra="allow", frozen=True)

    id: str = Field(..., description="Unique item identifier")
    name: str = Field(..., description="Display name of the item")
    category: Optional[str] = Field(None, description="Optional item category")
