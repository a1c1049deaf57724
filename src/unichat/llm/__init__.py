from __future__ import annotations

"""Factory helpers for backend adapters."""

from typing import Any, Dict, Mapping, Type

from ..settings import BackendConfig, BackendKind
from .base import BackendAdapter
from .gemini_client import GeminiClient
from .local_client import LocalClient
from .openai_client import OpenAIClient

__all__ = [
    "ADAPTERS",
    "BackendAdapter",
    "create_backend",
    "GeminiClient",
    "LocalClient",
    "OpenAIClient",
]


ADAPTERS: Dict[BackendKind, Type[BackendAdapter]] = {
    BackendKind.GEMINI: GeminiClient,
    BackendKind.OPENAI: OpenAIClient,
    BackendKind.LOCAL: LocalClient,
}


def create_backend(
    kind: BackendKind | str,
    config: BackendConfig | Mapping[str, Any] | None = None,
) -> BackendAdapter:
    """Validate `config` for `kind` and return an instantiated adapter.

    Raises ConfigurationError for an unknown kind or a config missing a
    required field; nothing is constructed in that case.
    """

    kind = BackendKind.parse(kind)
    config = BackendConfig.coerce(config)
    return ADAPTERS[kind](config)
