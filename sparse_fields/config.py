from pydantic import BaseModel, ConfigDict
from pydantic.alias_generators import to_camel
from pydantic_settings import BaseSettings, SettingsConfigDict
from dotenv import load_dotenv
from typing import Optional

from sparse_fields.constants import DEFAULT_HEADER_NAME, DEFAULT_QUERY_PARAM, DEFAULT_SEPARATOR

load_dotenv()


class Settings(BaseSettings):
    # Process-wide defaults, overridable per selector
    query_param: str = DEFAULT_QUERY_PARAM
    header_name: str = DEFAULT_HEADER_NAME
    separator: str = DEFAULT_SEPARATOR

    model_config = SettingsConfigDict(
        env_prefix="SPARSE_FIELDS_",
        env_file=".env",
        env_file_encoding="utf-8",
        case_sensitive=False,
        extra="ignore"
    )


class FieldSelectorConfig(BaseModel):
    """Per-selector overrides. Unset or empty values fall back to settings."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    query_param: Optional[str] = None
    header_name: Optional[str] = None
    separator: Optional[str] = None


class ResolvedConfig(BaseModel):
    """Configuration a selector keeps for its whole lifetime."""

    model_config = ConfigDict(frozen=True)

    query_param: str
    header_name: str
    separator: str


def resolve_config(
    config: FieldSelectorConfig | dict | None = None, base: Settings | None = None
) -> ResolvedConfig:
    """Fill in every option, preferring explicit overrides, then settings, then built-ins."""
    if config is None:
        config = FieldSelectorConfig()
    elif isinstance(config, dict):
        config = FieldSelectorConfig.model_validate(config)
    base = base or settings

    return ResolvedConfig(
        query_param=config.query_param or base.query_param or DEFAULT_QUERY_PARAM,
        header_name=config.header_name or base.header_name or DEFAULT_HEADER_NAME,
        separator=config.separator or base.separator or DEFAULT_SEPARATOR,
    )


settings = Settings()
