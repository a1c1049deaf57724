"""One chat call shape over Gemini, OpenAI and a self-hosted endpoint."""

from .chat import ChatClient
from .config import ChatClientConfig
from .errors import (
    BackendError,
    ChatError,
    ConfigurationError,
    NotInitializedError,
    UniChatError,
)
from .llm import BackendAdapter, GeminiClient, LocalClient, OpenAIClient, create_backend
from .settings import BackendConfig, BackendKind, ChatOptions

__version__ = "0.1.0"

__all__ = [
    "BackendAdapter",
    "BackendConfig",
    "BackendError",
    "BackendKind",
    "ChatClient",
    "ChatClientConfig",
    "ChatError",
    "ChatOptions",
    "ConfigurationError",
    "GeminiClient",
    "LocalClient",
    "NotInitializedError",
    "OpenAIClient",
    "UniChatError",
    "create_backend",
]
