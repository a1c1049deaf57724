from __future__ import annotations

"""Common interface for all backend adapters.

Each concrete adapter implements a synchronous `send` that takes a single
user message plus `ChatOptions` and returns the generated text. Any
lower-level fault (network, HTTP status, malformed body, SDK error) must be
surfaced as `BackendError`.

Adapters copy what they need from their `BackendConfig` at construction and
hold no per-call state, so one instance can serve concurrent calls.
"""

from abc import ABC, abstractmethod
from typing import Any, ClassVar, Dict, List

from ..errors import ConfigurationError
from ..settings import BackendConfig, BackendKind, ChatOptions


class BackendAdapter(ABC):
    """Abstract base class for backend adapters."""

    kind: ClassVar[BackendKind]
    requires_api_key: ClassVar[bool] = False

    def __init__(self, config: BackendConfig):
        if self.requires_api_key and not config.api_key:
            raise ConfigurationError(f"{self.kind.label} credential is required")
        self.timeout = config.timeout

    @abstractmethod
    def send(self, message: str, options: ChatOptions | None = None) -> str:  # noqa: D401
        """Send one user message and return the model reply as text."""
        ...

    @property
    def name(self) -> str:
        return type(self).__name__

    @staticmethod
    def user_messages(message: str) -> List[Dict[str, Any]]:
        return [{"role": "user", "content": message}]

    def __repr__(self) -> str:
        return f"<{self.name} kind={self.kind.value}>"
