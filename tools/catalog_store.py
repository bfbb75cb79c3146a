"""Catalog storage abstractions and the in-memory implementation."""
from __future__ import annotations

from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from models.catalog_data import DEFAULT_CATALOG
from models.outfit_item import OutfitItem, from_raw
from models.taxonomy import CATEGORIES, validate_category


class CatalogStore:
    """Read-only access interface for catalog items."""

    def items(self, category: str) -> Tuple[OutfitItem, ...]:
        raise NotImplementedError

    def all_items(self) -> Tuple[OutfitItem, ...]:
        raise NotImplementedError

    def get_item(self, item_id: str, category: Optional[str] = None) -> Optional[OutfitItem]:
        raise NotImplementedError


class InMemoryCatalogStore(CatalogStore):
    """Immutable catalog built once and shared by every request.

    Each category keeps its definition order. Item ids must be unique across
    the whole catalog, not just within a category.
    """

    def __init__(self, categories: Mapping[str, Iterable[OutfitItem]]) -> None:
        self._categories: Dict[str, Tuple[OutfitItem, ...]] = {name: () for name in CATEGORIES}
        for name, items in categories.items():
            self._categories[validate_category(name)] = tuple(items)

        self._index: Dict[str, Tuple[str, OutfitItem]] = {}
        duplicates: List[str] = []
        for name in CATEGORIES:
            for item in self._categories[name]:
                if item.id in self._index:
                    duplicates.append(item.id)
                    continue
                self._index[item.id] = (name, item)
        if duplicates:
            raise ValueError(f"Duplicate catalog item ids: {sorted(set(duplicates))}")

    @classmethod
    def from_definition(cls, definition: Mapping[str, Iterable[dict]]) -> "InMemoryCatalogStore":
        return cls({name: [from_raw(raw) for raw in entries] for name, entries in definition.items()})

    def items(self, category: str) -> Tuple[OutfitItem, ...]:
        return self._categories[validate_category(category)]

    def all_items(self) -> Tuple[OutfitItem, ...]:
        return tuple(item for name in CATEGORIES for item in self._categories[name])

    def get_item(self, item_id: str, category: Optional[str] = None) -> Optional[OutfitItem]:
        """Look up an item by id, optionally requiring it to live in ``category``."""

        entry = self._index.get(item_id)
        if entry is None:
            return None
        item_category, item = entry
        if category is not None and item_category != validate_category(category):
            return None
        return item

    def category_of(self, item_id: str) -> Optional[str]:
        entry = self._index.get(item_id)
        return entry[0] if entry else None

    def __len__(self) -> int:
        return len(self._index)


def build_default_store() -> InMemoryCatalogStore:
    """Return a store holding the built-in catalog."""

    return InMemoryCatalogStore.from_definition(DEFAULT_CATALOG)


__all__ = ["CatalogStore", "InMemoryCatalogStore", "build_default_store"]
