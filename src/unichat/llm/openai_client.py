from __future__ import annotations

import logging

import requests

from ..errors import BackendError
from ..settings import BackendConfig, BackendKind, ChatOptions
from .base import BackendAdapter

logger = logging.getLogger(__name__)

DEFAULT_MODEL = "gpt-3.5-turbo"
DEFAULT_TEMPERATURE = 0.7


class OpenAIClient(BackendAdapter):
    """Tiny wrapper around the OpenAI Chat Completion endpoint.

    We avoid the heavyweight `openai` SDK and rely on plain `requests`.
    `config.url` can point the client at another base URL that speaks the same
    REST shape.
    """

    kind = BackendKind.OPENAI
    requires_api_key = True

    def __init__(self, config: BackendConfig):
        super().__init__(config)
        self.api_key = config.api_key
        self.base_url = (config.url or "https://api.openai.com/v1").rstrip("/")
        self.model = config.model or DEFAULT_MODEL

    def send(self, message: str, options: ChatOptions | None = None) -> str:
        options = options or ChatOptions()
        url = f"{self.base_url}/chat/completions"
        headers = {
            "Authorization": f"Bearer {self.api_key}",
            "Content-Type": "application/json",
        }
        payload = {
            "model": options.model or self.model,
            "messages": self.user_messages(message),
            "temperature": options.temperature if options.temperature is not None else DEFAULT_TEMPERATURE,
        }
        if options.max_tokens is not None:
            payload["max_tokens"] = options.max_tokens

        logger.debug("[openai] POST %s model=%s", url, payload["model"])
        try:
            resp = requests.post(url, json=payload, headers=headers, timeout=self.timeout)
            resp.raise_for_status()
            data = resp.json()
            content = data["choices"][0]["message"]["content"]
        except requests.HTTPError as exc:
            status = exc.response.status_code if exc.response is not None else "?"
            raise BackendError(f"{self.name} chat error: HTTP error status: {status}") from exc
        except (requests.RequestException, ValueError, KeyError, IndexError, TypeError) as exc:
            raise BackendError(f"{self.name} chat error: {exc}") from exc
        if not isinstance(content, str):
            raise BackendError(f"{self.name} chat error: message content is not a string")
        return content
