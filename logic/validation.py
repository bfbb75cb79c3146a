"""Pydantic schemas for tool inputs, response records and error results."""

from __future__ import annotations

from typing import Any, Dict, List, Literal, Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError


class _WireModel(BaseModel):
    """Accept camelCase wire names as well as snake_case field names."""

    model_config = ConfigDict(populate_by_name=True)


class OccasionQuery(_WireModel):
    """Input contract for catalog listing."""

    occasion: Optional[str] = Field(None, description="Occasion (e.g., gala, business, date, casual)")


class SelectionQuery(_WireModel):
    """One selected item id per category."""

    top_id: str = Field(..., alias="topId", min_length=1, description="Selected top id")
    bottom_id: str = Field(..., alias="bottomId", min_length=1, description="Selected bottom id")
    shoes_id: str = Field(..., alias="shoesId", min_length=1, description="Selected shoes id")


class WidgetQuery(SelectionQuery):
    """Selection plus the occasion used to fill the widget carousels."""

    occasion: Optional[str] = Field(None, description="Occasion (e.g., gala, business, date, casual)")


class ListingRecord(_WireModel):
    id: str
    name: str
    description: str
    tags: List[str] = []


class ItemPathRecord(_WireModel):
    """Item record for in-widget use; the image path is resolved by the widget host."""

    id: str
    name: str
    description: str
    image_path: str = Field(..., alias="imagePath")
    price_usd: Optional[float] = Field(None, alias="priceUsd")


class ItemUrlRecord(_WireModel):
    """Item record for external consumers carrying an absolute image URL."""

    id: str
    name: str
    description: str
    image_url: str = Field(..., alias="imageUrl")
    price_usd: Optional[float] = Field(None, alias="priceUsd")


class ErrorResult(BaseModel):
    """Structured failure returned by tools instead of raising."""

    status: Literal["error"] = "error"
    error: str
    message: str
    details: Optional[List[Dict[str, Any]]] = None


def error_result(error: str, message: str, details: Optional[List[Dict[str, Any]]] = None) -> Dict[str, Any]:
    return ErrorResult(error=error, message=message, details=details).model_dump(exclude_none=True)


def validation_failure(exc: ValidationError) -> Dict[str, Any]:
    """Translate Pydantic errors into a consistent error payload."""

    details = [
        {"loc": list(error.get("loc", ())), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    return error_result("ValidationError", "Invalid tool input", details)


__all__ = [
    "OccasionQuery",
    "SelectionQuery",
    "WidgetQuery",
    "ListingRecord",
    "ItemPathRecord",
    "ItemUrlRecord",
    "ErrorResult",
    "error_result",
    "validation_failure",
]
