from __future__ import annotations

"""Single entry point that hides which backend is active.

`ChatClient` owns one bound adapter at a time. Construction and
`switch_backend` build a fully validated candidate adapter before touching any
state, so a failed switch leaves the previous backend bound and usable.
"""

import asyncio
import logging
from typing import Any, Mapping, Union

from .config import ChatClientConfig
from .errors import ChatError, NotInitializedError
from .llm import BackendAdapter, create_backend
from .settings import BackendConfig, BackendKind, ChatOptions, merge_options

Options = Union[ChatOptions, Mapping[str, Any], None]


class ChatClient:
    """Facade over the Gemini, OpenAI and local backends."""

    _backend: BackendAdapter | None = None

    def __init__(
        self,
        kind: BackendKind | str = BackendKind.GEMINI,
        config: BackendConfig | Mapping[str, Any] | None = None,
        model: str | None = None,
        logger: logging.Logger | None = None,
    ):
        self.logger = logger or logging.getLogger("unichat.chat")
        kind = BackendKind.parse(kind)
        config = BackendConfig.coerce(config)
        backend = create_backend(kind, config)

        self.kind = kind
        self.config = config
        self.model = model
        self._backend = backend

    @classmethod
    def from_config(
        cls,
        settings: ChatClientConfig,
        kind: BackendKind | str | None = None,
        logger: logging.Logger | None = None,
    ) -> "ChatClient":
        kind = BackendKind.parse(kind or settings.provider)
        return cls(kind, settings.backend_config(kind), settings.default_model(kind), logger=logger)

    @property
    def backend(self) -> BackendAdapter | None:
        return self._backend

    # ------------------------------------------------------------------
    # Chat
    # ------------------------------------------------------------------
    def _prepare(self, options: Options) -> tuple[BackendAdapter, BackendKind, ChatOptions]:
        # Read the bound adapter exactly once; a concurrent switch does not
        # redirect a call that has already started.
        backend = self._backend
        if backend is None:
            self.logger.error("Error in chat: Client not initialized")
            raise NotInitializedError("Client not initialized")
        try:
            merged = merge_options(self.model, options)
        except Exception as exc:
            raise self._fail(exc, backend.kind) from exc
        return backend, backend.kind, merged

    def _fail(self, exc: Exception, kind: BackendKind) -> ChatError:
        self.logger.error("Error in chat: %s", exc)
        return ChatError(str(exc), backend=kind.value)

    def chat(self, message: str, options: Options = None) -> str:
        """Send `message` to the active backend and return its reply."""
        backend, kind, merged = self._prepare(options)
        try:
            return backend.send(message, merged)
        except Exception as exc:
            raise self._fail(exc, kind) from exc

    async def achat(self, message: str, options: Options = None) -> str:
        """Awaitable `chat`; the blocking round trip runs in a worker thread."""
        backend, kind, merged = self._prepare(options)
        try:
            return await asyncio.to_thread(backend.send, message, merged)
        except Exception as exc:
            raise self._fail(exc, kind) from exc

    # ------------------------------------------------------------------
    # Runtime re-binding
    # ------------------------------------------------------------------
    def switch_backend(
        self,
        kind: BackendKind | str,
        config: BackendConfig | Mapping[str, Any] | None = None,
        model: str | None = None,
    ) -> None:
        """Bind a new backend. On ConfigurationError nothing changes."""
        kind = BackendKind.parse(kind)
        config = BackendConfig.coerce(config)
        backend = create_backend(kind, config)

        previous = self.kind
        self.kind, self.config, self._backend = kind, config, backend
        if model is not None:
            self.model = model
        self.logger.info("[switch] %s -> %s model=%s", previous.value, kind.value, self.model)

    def switch_to(self, kind: BackendKind | str, settings: ChatClientConfig) -> None:
        kind = BackendKind.parse(kind)
        self.switch_backend(kind, settings.backend_config(kind), settings.default_model(kind))

    def __repr__(self) -> str:
        return f"<ChatClient kind={self.kind.value} model={self.model!r}>"
