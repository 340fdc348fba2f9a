"""
FastAPI Integration

Reads the selection from a Starlette request and exposes it as a dependency::

    user_fields = FieldSelection(user_selector)

    @router.get("/users/{user_id}")
    async def get_user(user_id: int, fields: SelectedFields = Depends(user_fields)):
        user = await get_user_by_id(db, user_id)
        return fields.apply(user)
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any

from fastapi import Request

from sparse_fields.config import ResolvedConfig
from sparse_fields.schemas import RequestParams
from sparse_fields.selector import FieldSelector
from sparse_fields.utils.field_filter import apply_fields


def request_params_from(request: Request, config: ResolvedConfig) -> RequestParams:
    """
    Build selection input from a Starlette request.

    Values are kept as lists so repeated parameters reach the selector in
    their original order. Header lookup is case-insensitive.
    """
    return RequestParams(
        query={config.query_param: request.query_params.getlist(config.query_param)},
        headers={config.header_name: request.headers.getlist(config.header_name)},
    )


@dataclass(frozen=True)
class SelectedFields:
    """Fields resolved for one request"""

    fields: frozenset[str]

    def __contains__(self, field: str) -> bool:
        return field in self.fields

    def apply(self, data: Any) -> Any:
        """Filter response data to the selected fields."""
        return apply_fields(data, self.fields)


class FieldSelection:
    """
    FastAPI dependency resolving the selected fields for a request.

    One instance per selector; create it at import time alongside the router.
    """

    def __init__(self, selector: FieldSelector):
        self.selector = selector

    def __call__(self, request: Request) -> SelectedFields:
        params = request_params_from(request, self.selector.config)
        return SelectedFields(fields=frozenset(self.selector.get_selected_fields(params)))
