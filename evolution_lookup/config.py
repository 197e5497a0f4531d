from __future__ import annotations

from pathlib import Path
from typing import Optional

import yaml
from pydantic import BaseModel, Field, ValidationError, field_validator

DEFAULT_FEED_URL = "https://download.swift.org/swift-evolution/proposals.json"
DEFAULT_PROPOSALS_BASE_URL = "https://github.com/apple/swift-evolution/blob/main/proposals"
DEFAULT_ICON = "Swift-Logo"

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


class AppConfig(BaseModel):
    feed_url: str = Field(
        DEFAULT_FEED_URL,
        description="Location of the JSON proposals feed (http(s) or file URL)",
    )
    proposals_base_url: str = Field(
        DEFAULT_PROPOSALS_BASE_URL,
        description="Directory URL that relative proposal links are resolved against",
    )
    icon: str = Field(
        DEFAULT_ICON,
        description="Icon identifier attached to every proposal result item",
    )
    user_agent: str = Field(
        "swift-evolution-lookup/1.0",
        description="User-Agent header sent when fetching the feed",
    )
    request_timeout: Optional[float] = Field(
        None,
        gt=0,
        description="Optional timeout in seconds for the feed request; no timeout when unset",
    )
    log_level: str = Field(
        "WARNING",
        description="Logging level for diagnostics written to stderr",
    )

    @field_validator("feed_url", "proposals_base_url")
    @classmethod
    def _require_url(cls, value: str) -> str:
        value = value.strip()
        if not value:
            raise ValueError("URL must not be empty")
        return value

    @field_validator("log_level")
    @classmethod
    def _normalize_log_level(cls, value: str) -> str:
        level = value.strip().upper()
        if level not in _LOG_LEVELS:
            msg = f"log_level must be one of: {', '.join(_LOG_LEVELS)}"
            raise ValueError(msg)
        return level


def load_config(path: str | Path) -> AppConfig:
    """Load configuration from a YAML file and return a validated object."""

    config_path = Path(path).expanduser().resolve()
    if not config_path.exists():
        msg = f"Configuration file not found: {config_path}"
        raise FileNotFoundError(msg)

    with config_path.open("r", encoding="utf-8") as fh:
        data = yaml.safe_load(fh)

    if data is None:
        msg = f"Configuration file is empty: {config_path}"
        raise ValueError(msg)

    try:
        return AppConfig.model_validate(data)
    except ValidationError as exc:
        raise ValueError(f"Invalid configuration: {exc}") from exc
