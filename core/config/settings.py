"""Connection settings loaded from YAML with environment overrides."""

from __future__ import annotations

import os
from pathlib import Path

import httpx
import yaml  # type: ignore[import-untyped]
from pydantic import BaseModel, ConfigDict, ValidationError, field_validator

ENV_API_URL = "LSUPPORT_API_URL"
ENV_TOKEN = "LSUPPORT_TOKEN"
ENV_TIMEOUT_SECONDS = "LSUPPORT_TIMEOUT_SECONDS"


class Settings(BaseModel):
    """Management API connection settings."""

    model_config = ConfigDict(extra="forbid")

    api_url: str
    token: str | None = None
    timeout_seconds: float = 30.0

    @field_validator("api_url")
    @classmethod
    def _check_api_url(cls, value: str) -> str:
        try:
            url = httpx.URL(value)
        except httpx.InvalidURL as exc:
            raise ValueError(f"invalid api_url: {exc}") from exc
        if url.scheme not in {"http", "https"} or not url.host:
            raise ValueError("api_url must be an absolute http(s) URL")
        return value


def load_settings(path: Path | None = None) -> Settings:
    """Load and validate settings, then apply ``LSUPPORT_*`` overrides."""

    settings_path = path or Path(__file__).with_name("settings.yaml")

    try:
        raw = yaml.safe_load(settings_path.read_text(encoding="utf-8"))
    except FileNotFoundError as exc:
        raise ValueError(f"Settings file not found: {settings_path}") from exc
    except yaml.YAMLError as exc:
        raise ValueError(f"Invalid YAML in settings file: {settings_path}") from exc

    if not isinstance(raw, dict):
        raise ValueError(f"Settings file must contain a mapping: {settings_path}")

    try:
        settings = Settings.model_validate(raw)
    except ValidationError as exc:
        raise ValueError(f"Invalid settings schema: {settings_path}") from exc

    return _apply_env_overrides(settings)


def _apply_env_overrides(settings: Settings) -> Settings:
    overrides: dict[str, object] = {}

    api_url = os.getenv(ENV_API_URL, "").strip()
    if api_url:
        overrides["api_url"] = api_url

    token = os.getenv(ENV_TOKEN, "").strip()
    if token:
        overrides["token"] = token

    timeout = _timeout_seconds(settings.timeout_seconds)
    if timeout != settings.timeout_seconds:
        overrides["timeout_seconds"] = timeout

    if not overrides:
        return settings
    try:
        return Settings.model_validate({**settings.model_dump(), **overrides})
    except ValidationError as exc:
        raise ValueError(f"Invalid settings from environment: {ENV_API_URL}") from exc


def _timeout_seconds(default: float) -> float:
    raw = os.getenv(ENV_TIMEOUT_SECONDS)
    if raw is None:
        return default
    try:
        parsed = float(raw)
    except ValueError:
        return default
    return parsed if parsed > 0 else default
