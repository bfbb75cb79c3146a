"""Canonical categories and occasion labels for the outfit catalog.

Helper functions keep normalisation consistent between the catalog store, the
occasion filter and the tool layer.
"""

from typing import Dict, Iterable, List, Optional, Tuple

CATEGORIES: Tuple[str, ...] = ("tops", "bottoms", "shoes")

# Selection field -> category it must resolve in.
SELECTION_FIELDS: Dict[str, str] = {
    "top_id": "tops",
    "bottom_id": "bottoms",
    "shoes_id": "shoes",
}

OCCASIONS = [
    "casual",
    "street",
    "weekend",
    "business",
    "smart-casual",
    "work",
    "date",
    "winter",
    "cocktail",
    "formal",
    "gala",
]


def normalize_occasion(value: Optional[str]) -> str:
    """Trim and lowercase an occasion; ``None`` becomes an empty string."""

    return (value or "").strip().lower()


def validate_category(value: str) -> str:
    """Validate and normalise a category value.

    Raises a :class:`ValueError` if the category is not one of the three
    catalog partitions.
    """

    key = value.strip().lower()
    if key not in CATEGORIES:
        raise ValueError(f"Unsupported category '{value}'. Allowed: {list(CATEGORIES)}")
    return key


def normalise_tags(values: Iterable[str]) -> List[str]:
    """Lowercase and deduplicate tags, keeping their first-seen order."""

    normalised = []
    seen = set()
    for value in values:
        key = normalize_occasion(str(value))
        if key and key not in seen:
            normalised.append(key)
            seen.add(key)
    return normalised


__all__ = [
    "CATEGORIES",
    "OCCASIONS",
    "SELECTION_FIELDS",
    "normalize_occasion",
    "normalise_tags",
    "validate_category",
]
