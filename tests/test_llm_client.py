"""Tests for the OpenAI wrapper's failure mapping."""
from types import SimpleNamespace

import httpx
import openai
import pytest

from core.exceptions import GenerationError
from services.llm_client import LLMClient


class _Completions:
    def __init__(self, result=None, error=None):
        self.result = result
        self.error = error
        self.calls = []

    def create(self, **kwargs):
        self.calls.append(kwargs)
        if self.error is not None:
            raise self.error
        return self.result


def _client_with(completions):
    client = LLMClient(api_key="test-key", model="test-model", timeout=5)
    client._client = SimpleNamespace(chat=SimpleNamespace(completions=completions))
    return client


def _completion(content):
    return SimpleNamespace(choices=[SimpleNamespace(message=SimpleNamespace(content=content))])


def test_missing_api_key_is_a_generation_error():
    with pytest.raises(GenerationError):
        LLMClient(api_key="").complete_json("hello")


def test_returns_content_and_requests_json_mode():
    completions = _Completions(result=_completion('{"ok": true}'))
    assert _client_with(completions).complete_json("prompt", temperature=0.3, role="user") == '{"ok": true}'

    call = completions.calls[0]
    assert call["response_format"] == {"type": "json_object"}
    assert call["temperature"] == 0.3
    assert call["messages"] == [{"role": "user", "content": "prompt"}]


def test_empty_content_is_a_generation_error():
    with pytest.raises(GenerationError):
        _client_with(_Completions(result=_completion(""))).complete_json("prompt")


def test_timeout_is_a_generation_error():
    request = httpx.Request("POST", "https://api.openai.com/v1/chat/completions")
    error = openai.APITimeoutError(request=request)
    with pytest.raises(GenerationError) as exc_info:
        _client_with(_Completions(error=error)).complete_json("prompt")
    assert exc_info.value.cause is error


if __name__ == "__main__":
    pytest.main([__file__, "-v"])
