from __future__ import annotations

"""Client for a self-hosted, OpenAI-compatible chat completion server."""

import logging

import requests

from ..errors import BackendError
from ..settings import BackendConfig, BackendKind, ChatOptions
from .base import BackendAdapter

logger = logging.getLogger(__name__)

DEFAULT_URL = "http://localhost:6969"
DEFAULT_MODEL = "gemini-1.5-flash"
COMPLETIONS_PATH = "/v1/chat/completions"


class LocalClient(BackendAdapter):
    kind = BackendKind.LOCAL

    def __init__(self, config: BackendConfig):
        super().__init__(config)
        self.url = (config.url or DEFAULT_URL).rstrip("/")
        self.model = config.model or DEFAULT_MODEL

    def send(self, message: str, options: ChatOptions | None = None) -> str:
        options = options or ChatOptions()
        url = f"{self.url}{COMPLETIONS_PATH}"
        headers = {
            "accept": "application/json",
            "Content-Type": "application/json",
        }
        payload = {
            "model": options.model or self.model,
            "messages": self.user_messages(message),
        }
        if options.temperature is not None:
            payload["temperature"] = options.temperature
        if options.max_tokens is not None:
            payload["max_tokens"] = options.max_tokens

        logger.debug("[local] POST %s model=%s", url, payload["model"])
        try:
            resp = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
        except requests.RequestException as exc:
            raise BackendError(f"{self.name} chat error: {exc}") from exc

        if not 200 <= resp.status_code < 300:
            raise BackendError(f"{self.name} chat error: HTTP error status: {resp.status_code}")

        try:
            data = resp.json()
        except ValueError as exc:
            raise BackendError(f"{self.name} chat error: malformed JSON body: {exc}") from exc

        try:
            content = data["choices"][0]["message"]["content"]
        except (KeyError, IndexError, TypeError) as exc:
            raise BackendError(
                f"{self.name} chat error: response missing choices[0].message.content"
            ) from exc
        if not isinstance(content, str):
            raise BackendError(f"{self.name} chat error: message content is not a string")
        return content
