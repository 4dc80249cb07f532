"""Catalog loading for the service."""

import json
from typing import List

from .models.catalog import SearchableItem

SAMPLE_CATALOG = [
    {"id": "1", "name": "Zanahoria", "category": "Verduras", "price": 1.2},
    {"id": "2", "name": "Aguacate", "category": "Frutas", "price": 2.5},
    {"id": "3", "name": "Plátano", "category": "Frutas", "price": 0.9},
    {"id": "4", "name": "Brócoli", "category": "Verduras", "price": 1.8},
    {"id": "5", "name": "Yogur griego natural", "category": "Lácteos", "price": 3.1},
    {"id": "6", "name": "Quinoa", "category": "Granos", "price": 4.0},
    {"id": "7", "name": "Papas fritas", "category": "Snacks", "price": 1.5},
    {"id": "8", "name": "Salmón", "category": "Pescados", "price": 12.0},
]


def parse_catalog(raw_items: List[dict]) -> List[SearchableItem]:
    """Validate raw item dictionaries into catalog items."""
    return [SearchableItem.model_validate(raw) for raw in raw_items]


def load_catalog(path: str) -> List[SearchableItem]:
    """
    Load a catalog from a JSON file.

    The file holds either a list of items or an object with an "items" list.

    Args:
        path: JSON file path

    Returns:
        Parsed catalog items

    Raises:
        FileNotFoundError: If the file does not exist
        ValueError: If the JSON does not describe a list of items
    """
    with open(path, 'r', encoding='utf-8') as f:
        data = json.load(f)

    if isinstance(data, dict):
        data = data.get("items")
    if not isinstance(data, list):
        raise ValueError(f"Catalog file {path} does not contain a list of items")

    return parse_catalog(data)
