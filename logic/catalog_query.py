"""Catalog query engine: occasion listings, selection resolution and widget props."""

from __future__ import annotations

import logging
from enum import Enum
from typing import Any, Dict, List, Optional, Sequence

from catalog_app.config import DEFAULT_PUBLIC_ROUTE
from catalog_app.logging_config import get_logger, log_event
from logic.image_location import resolve_image_url
from logic.occasion_filter import apply_occasion_filter
from logic.validation import ItemPathRecord, ItemUrlRecord, ListingRecord
from models.outfit_item import OutfitItem
from models.taxonomy import CATEGORIES, SELECTION_FIELDS
from tools.catalog_store import CatalogStore

LOGGER = get_logger(__name__)

SELECTION_KEYS = {"top_id": "top", "bottom_id": "bottom", "shoes_id": "shoes"}


class ImageMode(str, Enum):
    """How item images are addressed in a resolved selection."""

    PATH = "path"
    URL = "url"


class ItemNotFound(LookupError):
    """Raised when one or more selected ids do not resolve in their category."""

    def __init__(self, missing: Dict[str, str]) -> None:
        self.missing = dict(missing)
        super().__init__("One or more selected items were not found. Please re-check the ids.")


class CatalogQueryService:
    """Answer listing and selection queries over an immutable catalog store."""

    def __init__(
        self,
        store: CatalogStore,
        base_url: str,
        public_route: str = DEFAULT_PUBLIC_ROUTE,
    ) -> None:
        self.store = store
        self.base_url = base_url
        self.public_route = public_route

    def list_outfit_options(self, occasion: Optional[str] = None) -> Dict[str, Any]:
        """List every category filtered by ``occasion``.

        Categories where the occasion matched nothing come back unfiltered;
        ``occasion_matched`` tells the caller which ones those are.
        """

        payload: Dict[str, Any] = {"occasion": occasion}
        matched: Dict[str, bool] = {}
        for category in CATEGORIES:
            result = apply_occasion_filter(self.store.items(category), occasion)
            payload[category] = [self._listing_record(item) for item in result.items]
            matched[category] = result.matched
        payload["occasion_matched"] = matched
        log_event(
            LOGGER,
            logging.DEBUG,
            "catalog_listed",
            occasion=occasion,
            occasion_matched=matched,
        )
        return payload

    def resolve_selection(
        self,
        top_id: str,
        bottom_id: str,
        shoes_id: str,
        mode: ImageMode = ImageMode.URL,
    ) -> Dict[str, Dict[str, Any]]:
        """Resolve one id per category into records shaped for ``mode``.

        Each id must belong to the category of the field it was supplied for.
        Raises :class:`ItemNotFound` if any of them does not; nothing partial is
        returned.
        """

        items = self._lookup_selection(top_id=top_id, bottom_id=bottom_id, shoes_id=shoes_id)
        mode = ImageMode(mode)
        return {SELECTION_KEYS[field]: self._item_record(item, mode) for field, item in items.items()}

    def build_widget_props(
        self,
        top_id: str,
        bottom_id: str,
        shoes_id: str,
        occasion: Optional[str] = None,
    ) -> Dict[str, Any]:
        """Props for the outfit carousel widget.

        The widget receives the occasion-filtered lists for every category in
        path mode, plus the selected ids to open each carousel on.
        """

        self._lookup_selection(top_id=top_id, bottom_id=bottom_id, shoes_id=shoes_id)
        props: Dict[str, Any] = {
            "occasion": occasion,
            "selected": {"topId": top_id, "bottomId": bottom_id, "shoesId": shoes_id},
        }
        for category in CATEGORIES:
            result = apply_occasion_filter(self.store.items(category), occasion)
            props[category] = self._records(result.items, ImageMode.PATH)
        return props

    def _lookup_selection(self, **ids: str) -> Dict[str, OutfitItem]:
        found: Dict[str, OutfitItem] = {}
        missing: Dict[str, str] = {}
        for field, category in SELECTION_FIELDS.items():
            item_id = ids[field]
            item = self.store.get_item(item_id, category=category)
            if item is None:
                missing[field] = item_id
            else:
                found[field] = item
        if missing:
            log_event(LOGGER, logging.INFO, "selection_not_found", missing=missing)
            raise ItemNotFound(missing)
        return found

    def _records(self, items: Sequence[OutfitItem], mode: ImageMode) -> List[Dict[str, Any]]:
        return [self._item_record(item, mode) for item in items]

    def _item_record(self, item: OutfitItem, mode: ImageMode) -> Dict[str, Any]:
        if mode is ImageMode.PATH:
            record = ItemPathRecord(
                id=item.id,
                name=item.name,
                description=item.description,
                image_path=item.image_path,
                price_usd=item.price_usd,
            )
        else:
            record = ItemUrlRecord(
                id=item.id,
                name=item.name,
                description=item.description,
                image_url=resolve_image_url(item, self.base_url, self.public_route),
                price_usd=item.price_usd,
            )
        return record.model_dump(by_alias=True, exclude_none=True)

    @staticmethod
    def _listing_record(item: OutfitItem) -> Dict[str, Any]:
        return ListingRecord(
            id=item.id, name=item.name, description=item.description, tags=list(item.tags)
        ).model_dump()


__all__ = ["CatalogQueryService", "ImageMode", "ItemNotFound"]
