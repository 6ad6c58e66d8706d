"""
Tests for the Gemini provider, using a stub in place of the SDK client.
"""
from types import SimpleNamespace

import pytest

from app.core.errors import AIServiceError, ConfigError
from app.llm.gemini_provider import GeminiProvider, first_candidate_text
from app.schemas.analysis import AnalysisResult


def _response(text=None, candidates=True):
    parts = [SimpleNamespace(text=text)] if text is not None else []
    return SimpleNamespace(
        candidates=[SimpleNamespace(content=SimpleNamespace(parts=parts), finish_reason="STOP")] if candidates else [],
        usage_metadata=SimpleNamespace(prompt_token_count=120, candidates_token_count=45),
    )


class StubModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    def generate_content(self, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


def _provider(response=None, error=None):
    models = StubModels(response=response, error=error)
    return GeminiProvider(api_key="test-key", client=SimpleNamespace(models=models)), models


def test_generate_json_returns_first_text_part():
    provider, models = _provider(_response('{"ats_score": 70}'))
    schema = AnalysisResult.model_json_schema()

    result = provider.generate_json("prompt text", schema, model="gemini-2.5-flash")

    assert result.content == '{"ats_score": 70}'
    assert result.tokens_in == 120
    assert result.tokens_out == 45
    assert result.model == "gemini-2.5-flash"

    call = models.calls[0]
    assert call["contents"] == "prompt text"
    assert call["config"].response_mime_type == "application/json"
    assert call["config"].response_json_schema == schema


def test_generate_json_without_candidates_returns_none():
    provider, _ = _provider(_response(candidates=False))
    assert provider.generate_json("p", {}, model="m").content is None


def test_generate_json_without_parts_returns_none():
    provider, _ = _provider(_response(text=None))
    assert provider.generate_json("p", {}, model="m").content is None


def test_service_errors_wrapped_with_message():
    provider, _ = _provider(error=RuntimeError("API key not valid"))

    with pytest.raises(AIServiceError) as exc_info:
        provider.generate_json("p", {}, model="m")
    assert exc_info.value.message == "API key not valid"
    assert isinstance(exc_info.value.__cause__, RuntimeError)


def test_empty_api_key_rejected():
    with pytest.raises(ConfigError):
        GeminiProvider(api_key="", client=SimpleNamespace(models=StubModels()))


def test_first_candidate_text_handles_missing_content():
    response = SimpleNamespace(candidates=[SimpleNamespace(content=None)])
    assert first_candidate_text(response) is None
    assert first_candidate_text(SimpleNamespace()) is None
