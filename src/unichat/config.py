from __future__ import annotations

import os
from dataclasses import dataclass, field

from dotenv import load_dotenv

from .errors import ConfigurationError
from .llm.gemini_client import DEFAULT_MODEL as GEMINI_DEFAULT_MODEL
from .llm.local_client import DEFAULT_MODEL as LOCAL_DEFAULT_MODEL, DEFAULT_URL as LOCAL_DEFAULT_URL
from .llm.openai_client import DEFAULT_MODEL as OPENAI_DEFAULT_MODEL
from .settings import BackendConfig, BackendKind


@dataclass
class ChatClientConfig:
    """Credentials and default models for every backend, usually read from the environment."""

    gemini: BackendConfig = field(default_factory=BackendConfig)
    openai: BackendConfig = field(default_factory=BackendConfig)
    local: BackendConfig = field(default_factory=BackendConfig)
    provider: str = BackendKind.GEMINI.value

    @classmethod
    def from_env(cls, dotenv_path: str | None = ".env") -> "ChatClientConfig":
        # Variables already present in the process environment win over .env
        if dotenv_path:
            load_dotenv(dotenv_path, override=False)
        return cls(
            gemini=BackendConfig(
                api_key=os.getenv("GEMINI_API_KEY", ""),
                model=os.getenv("GEMINI_MODEL") or GEMINI_DEFAULT_MODEL,
            ),
            openai=BackendConfig(
                api_key=os.getenv("OPENAI_API_KEY", ""),
                model=os.getenv("OPENAI_MODEL") or OPENAI_DEFAULT_MODEL,
            ),
            local=BackendConfig(
                url=os.getenv("LOCAL_AI_URL") or LOCAL_DEFAULT_URL,
                model=os.getenv("LOCAL_AI_MODEL") or LOCAL_DEFAULT_MODEL,
            ),
            provider=os.getenv("CHAT_BACKEND") or BackendKind.GEMINI.value,
        )

    def validate(self) -> None:
        if not self.gemini.api_key and not self.openai.api_key and not self.local.url:
            raise ConfigurationError("At least one AI service configuration must be provided")

    def backend_config(self, kind: BackendKind | str) -> BackendConfig:
        return getattr(self, BackendKind.parse(kind).value)

    def default_model(self, kind: BackendKind | str) -> str | None:
        return self.backend_config(kind).model

    def to_dict(self):
        # Credentials are never echoed back
        return {
            "provider": self.provider,
            "gemini": {"configured": bool(self.gemini.api_key), "model": self.gemini.model},
            "openai": {"configured": bool(self.openai.api_key), "model": self.openai.model},
            "local": {"url": self.local.url, "model": self.local.model},
        }
