"""Configuration loading."""

from __future__ import annotations

from pydantic import Field
from pydantic_settings import BaseSettings

DEFAULT_AREA = "dummy"
DEFAULT_BASE_URL = "http://example.com"
DEFAULT_STACK_BOUNDARIES = (".wrangler", "node_modules")


class Settings(BaseSettings):
    model_config = {"env_prefix": "REQLOG_"}

    default_area: str = Field(
        default=DEFAULT_AREA,
        description="Area used by get_area() when no name is given.",
    )
    base_url: str = Field(
        default=DEFAULT_BASE_URL,
        description="Dummy authority the request path is parsed against.",
    )
    stack_boundaries: list[str] = Field(
        default_factory=lambda: list(DEFAULT_STACK_BOUNDARIES),
        description="Directory names marking where stack frame paths are cut.",
    )
    diagnostics: bool = Field(
        default=False,
        description="Write internal diagnostic events to stderr.",
    )


def get_settings() -> Settings:
    """Create settings from the environment."""
    return Settings()
