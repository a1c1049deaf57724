from __future__ import annotations

"""Exception hierarchy shared by the facade and the backend adapters."""


class UniChatError(Exception):
    """Base class for every error raised by this package."""


class ConfigurationError(UniChatError, ValueError):
    """Missing or invalid configuration for the selected backend."""


class NotInitializedError(UniChatError, RuntimeError):
    """`chat()` was called while no backend adapter is bound."""


class BackendError(UniChatError, RuntimeError):
    """Communication with the underlying backend failed."""


class ChatError(BackendError):
    """Envelope raised by `ChatClient.chat` around any failure of the active backend.

    The message is the original error's message; `backend` names the kind that
    was active when the call started.
    """

    def __init__(self, message: str, backend: str | None = None):
        super().__init__(message)
        self.backend = backend
