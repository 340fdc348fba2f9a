"""Sparse field selection for API responses."""

from .config import FieldSelectorConfig, Settings, resolve_config, settings
from .constants import GROUP_PREFIX
from .exceptions import ConfigurationError, FieldSelectionError, InvalidGroupError
from .schemas import FieldSelectorOptions, RequestParams
from .selector import FieldSelector
from .utils.field_filter import apply_fields, filter_item, filter_object

__all__ = [
    # Core
    "FieldSelector",
    "FieldSelectorOptions",
    "RequestParams",
    # Configuration
    "FieldSelectorConfig",
    "Settings",
    "settings",
    "resolve_config",
    "GROUP_PREFIX",
    # Exceptions
    "FieldSelectionError",
    "ConfigurationError",
    "InvalidGroupError",
    # Filtering
    "filter_object",
    "filter_item",
    "apply_fields",
]
