"""Outfit item data model and helpers."""

from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Any, Dict, Optional, Tuple

from models.taxonomy import normalise_tags

ABSOLUTE_URL_PREFIXES = ("http://", "https://")


@dataclass(frozen=True)
class OutfitItem:
    """A single catalog entry. Instances are immutable once built."""

    id: str
    name: str
    description: str
    image_path: str
    tags: Tuple[str, ...] = field(default_factory=tuple)
    price_usd: Optional[float] = None

    def __post_init__(self) -> None:
        if not self.id:
            raise ValueError("OutfitItem requires a non-empty id")
        # frozen dataclass: normalised values are written through object.__setattr__
        object.__setattr__(self, "tags", tuple(normalise_tags(self.tags)))
        if self.price_usd is not None:
            price = float(self.price_usd)
            if not math.isfinite(price) or price < 0:
                raise ValueError(f"Price for '{self.id}' must be a non-negative number, got {price}")
            object.__setattr__(self, "price_usd", price)

    @property
    def has_absolute_image(self) -> bool:
        return self.image_path.startswith(ABSOLUTE_URL_PREFIXES)

    def has_tag(self, occasion: str) -> bool:
        return occasion in self.tags


def from_raw(data: Dict[str, Any]) -> OutfitItem:
    """Build an :class:`OutfitItem` from a loose definition dict.

    Accepts both the snake_case field names and the camelCase wire names
    (``imagePath``, ``priceUsd``).
    """

    required_fields = ["id", "name", "description"]
    missing = [name for name in required_fields if not data.get(name)]
    image_path = data.get("image_path") or data.get("imagePath")
    if not image_path:
        missing.append("image_path")
    if missing:
        raise ValueError(f"Missing required fields for OutfitItem: {missing}")

    price = data.get("price_usd", data.get("priceUsd"))
    return OutfitItem(
        id=str(data["id"]),
        name=str(data["name"]),
        description=str(data["description"]),
        image_path=str(image_path),
        tags=tuple(data.get("tags") or ()),
        price_usd=float(price) if price is not None else None,
    )


__all__ = ["ABSOLUTE_URL_PREFIXES", "OutfitItem", "from_raw"]
