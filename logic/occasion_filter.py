"""Deterministic occasion filtering with fallback to the unfiltered list."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from models.outfit_item import OutfitItem
from models.taxonomy import normalize_occasion


@dataclass(frozen=True)
class OccasionFilterResult:
    """Outcome of filtering one category.

    ``applied`` is false when no occasion was given. ``matched`` is true only
    when at least one item carried the occasion tag; when it is false the
    ``items`` are the unfiltered input.
    """

    items: Sequence[OutfitItem]
    applied: bool
    matched: bool


def apply_occasion_filter(items: Sequence[OutfitItem], occasion: Optional[str]) -> OccasionFilterResult:
    """Filter ``items`` by occasion tag, reporting whether the filter matched."""

    key = normalize_occasion(occasion)
    if not key:
        return OccasionFilterResult(items=items, applied=False, matched=False)

    kept = [item for item in items if item.has_tag(key)]
    if not kept:
        return OccasionFilterResult(items=items, applied=True, matched=False)
    return OccasionFilterResult(items=kept, applied=True, matched=True)


def filter_by_occasion(items: Sequence[OutfitItem], occasion: Optional[str]) -> Sequence[OutfitItem]:
    """Return items tagged with ``occasion``, or ``items`` itself when none are.

    An empty occasion also returns ``items`` unchanged, so callers always get a
    non-empty suggestion list from a non-empty category.
    """

    return apply_occasion_filter(items, occasion).items


__all__ = ["OccasionFilterResult", "apply_occasion_filter", "filter_by_occasion"]
