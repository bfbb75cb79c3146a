"""Model package exports."""

from models.taxonomy import *  # noqa: F401,F403
from models.outfit_item import OutfitItem, from_raw

__all__ = ["OutfitItem", "from_raw"]
