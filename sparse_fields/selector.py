"""
Field Selector

Validates a flat field schema once and resolves per-request selections
against it::

    selector = FieldSelector(
        {
            "available_fields": ["id", "name", "email", "phone"],
            "default_fields": ["id", "name"],
            "field_groups": {"contact": ["email", "phone"]},
        }
    )
    fields = selector.get_selected_fields({"query": {"fields": "id,@contact"}})
    selector.filter_object(user, fields)

A selector holds no per-request state and may be shared between requests
once constructed.
"""

import logging
from collections.abc import Iterable, Mapping, Sequence
from typing import Any

from sparse_fields.config import FieldSelectorConfig, ResolvedConfig, resolve_config
from sparse_fields.constants import GROUP_PREFIX
from sparse_fields.exceptions import ConfigurationError, InvalidGroupError
from sparse_fields.schemas import FieldSelectorOptions, RequestParams
from sparse_fields.utils.field_filter import filter_object

logger = logging.getLogger(__name__)


def _unique(fields: Iterable[str]) -> tuple[str, ...]:
    """Drop duplicates, keeping first occurrences in order."""
    return tuple(dict.fromkeys(fields))


def _first_value(value: Any) -> str | None:
    """Reduce a single or multi-valued query/header entry to one string."""
    if value is None or isinstance(value, str):
        return value or None
    if isinstance(value, Sequence) and value:
        # Later values are ignored, even when the first is empty
        return value[0]
    return None


class FieldSelector:
    """Resolve client field selections against a validated schema."""

    def __init__(
        self,
        options: FieldSelectorOptions | Mapping[str, Any],
        config: FieldSelectorConfig | dict | None = None,
    ):
        if not isinstance(options, FieldSelectorOptions):
            options = FieldSelectorOptions.model_validate(dict(options))

        if not options.available_fields:
            logger.error("FieldSelector created without available fields")
            raise ConfigurationError("availableFields must be provided and non-empty")
        if not options.default_fields:
            logger.error("FieldSelector created without default fields")
            raise ConfigurationError("defaultFields must be provided and non-empty")

        self._available_order = _unique(options.available_fields)
        self._available = frozenset(self._available_order)

        if not self._available.issuperset(options.default_fields):
            unknown = [f for f in options.default_fields if f not in self._available]
            logger.error(f"Default fields not in available fields: {unknown}")
            raise ConfigurationError(
                "default fields contain values not present in available fields",
                details={"fields": unknown},
            )
        self._default_order = _unique(options.default_fields)
        self._defaults = frozenset(self._default_order)

        self._groups: dict[str, tuple[str, ...]] = {}
        for group_name, group_fields in (options.field_groups or {}).items():
            if not self._available.issuperset(group_fields):
                logger.error(f"Group '{group_name}' references unavailable fields")
                raise InvalidGroupError(group_name, list(group_fields))
            self._groups[group_name] = _unique(group_fields)

        self.config: ResolvedConfig = resolve_config(config)

        logger.debug(
            f"FieldSelector ready: {len(self._available)} available, "
            f"{len(self._defaults)} default, {len(self._groups)} groups"
        )

    def get_selected_fields(self, request: RequestParams | Mapping[str, Any] | None = None) -> set[str]:
        """
        Resolve the fields a request asked for.

        The query parameter wins over the header. Unknown fields and groups are
        dropped; if nothing valid remains the default fields are returned.

        Args:
            request: Object or mapping with optional ``query`` and ``headers``

        Returns:
            A new set of field names
        """
        raw = self._extract_fields_input(request)
        if raw is None:
            return set(self._default_order)

        selected = self.parse_fields(raw)
        if not selected:
            logger.debug(f"No valid fields in selection {raw!r}, using defaults")
            return set(self._default_order)

        return set(selected)

    def parse_fields(self, raw: str) -> tuple[str, ...]:
        """
        Resolve a raw selection string into field names, in token order.

        Group references expand to their members. Invalid tokens are skipped
        silently, so the result may be empty.
        """
        resolved: dict[str, None] = {}

        for token in raw.split(self.config.separator):
            token = token.strip()
            if not token:
                continue

            if token.startswith(GROUP_PREFIX):
                group = self._groups.get(token[len(GROUP_PREFIX):])
                if group is None:
                    logger.debug(f"Ignoring unknown field group {token!r}")
                    continue
                resolved.update(dict.fromkeys(group))
            elif token in self._available:
                resolved[token] = None
            else:
                logger.debug(f"Ignoring unknown field {token!r}")

        return tuple(resolved)

    def filter_object(self, obj: Mapping[str, Any], selected_fields: Iterable[str]) -> dict[str, Any]:
        """Project ``obj`` onto ``selected_fields``. The schema is not consulted."""
        return filter_object(obj, selected_fields)

    def get_available_fields(self) -> list[str]:
        """Get all available fields, in the order supplied."""
        return list(self._available_order)

    def get_default_fields(self) -> list[str]:
        """Get default fields, in the order supplied."""
        return list(self._default_order)

    def get_field_groups(self) -> dict[str, list[str]]:
        return {name: list(fields) for name, fields in self._groups.items()}

    def _extract_fields_input(self, request: RequestParams | Mapping[str, Any] | None) -> str | None:
        """Read the raw selection string, query parameter first, then header."""
        if request is None:
            return None
        if isinstance(request, Mapping):
            query, headers = request.get("query"), request.get("headers")
        else:
            query, headers = getattr(request, "query", None), getattr(request, "headers", None)

        if query:
            fields_input = _first_value(query.get(self.config.query_param))
            if fields_input is not None:
                return fields_input

        if headers:
            return _first_value(headers.get(self.config.header_name))

        return None
