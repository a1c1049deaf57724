from __future__ import annotations

"""Minimal wrapper around Google Gemini via the `google-genai` SDK.
If the SDK is not installed, we raise a helpful error message.

Each adapter owns its own `genai.Client`, so two adapters with different
keys never share credentials.
"""

import logging
from typing import Any, Dict

from ..errors import BackendError, ConfigurationError
from ..settings import BackendConfig, BackendKind, ChatOptions
from .base import BackendAdapter

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gemini-1.5-pro"


class GeminiClient(BackendAdapter):
    kind = BackendKind.GEMINI
    requires_api_key = True

    def __init__(self, config: BackendConfig):
        super().__init__(config)
        try:
            from google import genai  # noqa: WPS433 (dynamic import)
            from google.genai import types
        except ImportError as exc:  # pragma: no cover
            raise ConfigurationError(
                "google-genai package not installed. Run: pip install google-genai"
            ) from exc
        self.types = types
        self.client = genai.Client(api_key=config.api_key)
        self.model = config.model or DEFAULT_MODEL

    def send(self, message: str, options: ChatOptions | None = None) -> str:
        options = options or ChatOptions()
        model_name = options.model or self.model

        generation_config: Dict[str, Any] = {}
        if options.temperature is not None:
            generation_config["temperature"] = options.temperature
        if options.max_tokens is not None:
            generation_config["max_output_tokens"] = options.max_tokens

        logger.debug("[gemini] send model=%s", model_name)
        try:
            if generation_config:
                session = self.client.chats.create(
                    model=model_name,
                    config=self.types.GenerateContentConfig(**generation_config),
                )
            else:
                session = self.client.chats.create(model=model_name)
            text = session.send_message(message).text
        except Exception as exc:  # SDK raises google.genai.errors and httpx variants
            raise BackendError(f"{self.name} chat error: {exc}") from exc
        if not isinstance(text, str):
            raise BackendError(f"{self.name} chat error: response carried no text")
        return text
