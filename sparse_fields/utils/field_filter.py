"""
Field Filtering Utility

Projects response data down to a set of field names. Works on plain
mappings, Pydantic models, plain objects and lists of any of those.
"""

from __future__ import annotations

from collections.abc import Iterable, Mapping
from typing import Any


def filter_object(obj: Mapping[str, Any], fields: Iterable[str]) -> dict[str, Any]:
    """
    Keep only the entries of ``obj`` whose key is in ``fields``.

    Key order follows ``obj`` and values are passed through untouched.
    Requested fields missing from ``obj`` are left out rather than set to None.
    """
    if not isinstance(fields, (set, frozenset)):
        fields = set(fields)
    return {k: v for k, v in obj.items() if k in fields}


def filter_item(item: Any, fields: Iterable[str]) -> Any:
    """Filter a single item to the given fields."""
    if isinstance(item, Mapping):
        return filter_object(item, fields)
    # Pydantic model
    if hasattr(item, "model_dump"):
        return filter_object(item.model_dump(mode="json"), fields)
    # Plain object
    if hasattr(item, "__dict__"):
        public = {k: v for k, v in vars(item).items() if not k.startswith("_")}
        return filter_object(public, fields)
    return item


def apply_fields(data: Any, fields: Iterable[str] | None) -> Any:
    """Filter response data, item by item for lists. ``None`` means no filtering."""
    if fields is None:
        return data
    fields = frozenset(fields)
    if isinstance(data, list):
        return [filter_item(item, fields) for item in data]
    return filter_item(data, fields)
