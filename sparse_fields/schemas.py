"""
Selector input shapes.

``FieldSelectorOptions`` accepts both snake_case and camelCase keys so a
schema can be loaded straight from JSON/YAML written for other clients.
"""

from typing import Optional, Union

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

# A query/header value as the host parsed it: single or multi-valued
FieldValue = Union[str, list[str]]


class FieldSelectorOptions(BaseModel):
    """The field schema a selector validates at construction time"""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    available_fields: Optional[list[str]] = Field(default=None, description="Every field a client may select")
    default_fields: Optional[list[str]] = Field(default=None, description="Fields returned without a valid selection")
    field_groups: Optional[dict[str, list[str]]] = Field(
        default=None, description="Named presets, referenced as @name in a selection"
    )


class RequestParams(BaseModel):
    """Request data consumed by the selection engine"""

    query: Optional[dict[str, FieldValue]] = None
    headers: Optional[dict[str, FieldValue]] = None
