import pytest
import requests

from unichat import BackendError, ChatOptions, ConfigurationError, OpenAIClient, create_backend
from unichat.llm import openai_client


class FakeResponse:
    def __init__(self, status_code=200, payload=None):
        self.status_code = status_code
        self._payload = payload if payload is not None else {"choices": [{"message": {"content": "hello"}}]}

    def raise_for_status(self):
        if self.status_code >= 400:
            raise requests.HTTPError(f"{self.status_code} Error", response=self)

    def json(self):
        if isinstance(self._payload, Exception):
            raise self._payload
        return self._payload


@pytest.fixture
def captured(monkeypatch):
    calls = []
    response = {"value": FakeResponse()}

    def fake_post(url, json=None, headers=None, timeout=None):
        calls.append({"url": url, "json": json, "headers": headers, "timeout": timeout})
        if isinstance(response["value"], Exception):
            raise response["value"]
        return response["value"]

    monkeypatch.setattr(openai_client.requests, "post", fake_post)
    return calls, response


@pytest.mark.parametrize("config", [None, {}, {"api_key": ""}])
def test_missing_key_rejected(config):
    with pytest.raises(ConfigurationError, match="OpenAI credential is required"):
        create_backend("openai", config)


def test_send_uses_defaults(captured):
    calls, _ = captured
    client = create_backend("openai", {"api_key": "sk-test"})
    assert isinstance(client, OpenAIClient)

    assert client.send("hi") == "hello"
    call = calls[0]
    assert call["url"] == "https://api.openai.com/v1/chat/completions"
    assert call["headers"]["Authorization"] == "Bearer sk-test"
    assert call["json"] == {
        "model": "gpt-3.5-turbo",
        "messages": [{"role": "user", "content": "hi"}],
        "temperature": 0.7,
    }
    assert call["timeout"] is None


def test_send_honours_zero_temperature_and_overrides(captured):
    calls, _ = captured
    client = create_backend("openai", {"apiKey": "sk-test", "url": "https://proxy.example/v1/", "timeout": 5})
    client.send("hi", ChatOptions(model="gpt-4o-mini", temperature=0.0, max_tokens=10))

    call = calls[0]
    assert call["url"] == "https://proxy.example/v1/chat/completions"
    assert call["json"]["model"] == "gpt-4o-mini"
    assert call["json"]["temperature"] == 0.0
    assert call["json"]["max_tokens"] == 10
    assert call["timeout"] == 5


def test_http_error_wrapped(captured):
    _, response = captured
    response["value"] = FakeResponse(status_code=401, payload={"error": "bad key"})
    client = create_backend("openai", {"api_key": "sk-test"})
    with pytest.raises(BackendError, match="401"):
        client.send("hi")


def test_network_error_wrapped(captured):
    _, response = captured
    response["value"] = requests.ConnectionError("connection refused")
    client = create_backend("openai", {"api_key": "sk-test"})
    with pytest.raises(BackendError, match="OpenAIClient chat error: connection refused") as exc:
        client.send("hi")
    assert isinstance(exc.value.__cause__, requests.ConnectionError)


def test_unexpected_body_wrapped(captured):
    _, response = captured
    response["value"] = FakeResponse(payload={"id": "x"})
    client = create_backend("openai", {"api_key": "sk-test"})
    with pytest.raises(BackendError):
        client.send("hi")


def test_null_content_is_backend_error(captured):
    _, response = captured
    response["value"] = FakeResponse(payload={"choices": [{"message": {"content": None, "tool_calls": []}}]})
    client = create_backend("openai", {"api_key": "sk-test"})
    with pytest.raises(BackendError, match="not a string"):
        client.send("hi")
