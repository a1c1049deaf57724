from __future__ import annotations

from enum import Enum
from typing import Any, Mapping

from pydantic import BaseModel, ConfigDict, Field

from .errors import ConfigurationError


class BackendKind(str, Enum):
    """Closed set of backends the facade can bind to."""

    GEMINI = "gemini"
    OPENAI = "openai"
    LOCAL = "local"

    @property
    def label(self) -> str:
        return _LABELS[self]

    @classmethod
    def parse(cls, value: "BackendKind | str") -> "BackendKind":
        if isinstance(value, cls):
            return value
        key = str(value).strip().lower()
        key = _ALIASES.get(key, key)
        try:
            return cls(key)
        except ValueError:
            raise ConfigurationError(f"Unsupported backend: {value}") from None


_LABELS = {
    BackendKind.GEMINI: "Gemini",
    BackendKind.OPENAI: "OpenAI",
    BackendKind.LOCAL: "Local",
}

_ALIASES = {
    "google": "gemini",
    "gpt": "openai",
    "self-hosted": "local",
}


class BackendConfig(BaseModel):
    """Per-backend settings handed to an adapter at construction time."""

    model_config = ConfigDict(extra="ignore", frozen=True, populate_by_name=True)

    api_key: str | None = Field(default=None, alias="apiKey")
    url: str | None = None
    model: str | None = None
    timeout: float | None = None  # None = wait indefinitely

    @classmethod
    def coerce(cls, config: "BackendConfig | Mapping[str, Any] | None") -> "BackendConfig":
        if config is None:
            return cls()
        if isinstance(config, cls):
            return config
        try:
            return cls.model_validate(dict(config))
        except (TypeError, ValueError) as exc:
            raise ConfigurationError(f"Invalid backend configuration: {exc}") from exc


class ChatOptions(BaseModel):
    """Per-call overrides. Unrecognised keys are dropped."""

    model_config = ConfigDict(extra="ignore", frozen=True)

    model: str | None = None
    temperature: float | None = Field(default=None, ge=0.0, le=2.0)
    max_tokens: int | None = Field(default=None, gt=0)

    def to_dict(self) -> dict[str, Any]:
        return self.model_dump(exclude_none=True)


def merge_options(
    default_model: str | None,
    options: "ChatOptions | Mapping[str, Any] | None" = None,
) -> ChatOptions:
    """Overlay call-site options on top of the facade's default model.

    Keys explicitly set to None at the call site do not clear the default.
    Raises pydantic's ValidationError for out-of-range values.
    """
    merged: dict[str, Any] = {}
    if default_model:
        merged["model"] = default_model
    if isinstance(options, ChatOptions):
        options = options.to_dict()
    for key, value in (options or {}).items():
        if value is not None:
            merged[key] = value
    return ChatOptions.model_validate(merged)


__all__ = [
    "BackendKind",
    "BackendConfig",
    "ChatOptions",
    "merge_options",
]
