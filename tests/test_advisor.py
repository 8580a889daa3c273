import asyncio
import json
from unittest import mock

import httpx
import openai

from portfolio_advisor.advisor import (
    AdvisoryFailure,
    AdvisorySuccess,
    FailureKind,
    request_advisory,
)
from portfolio_advisor.prompts import SYSTEM_PROMPT
from portfolio_advisor.settings import Settings

SETTINGS = Settings(openai_api_key="sk-test", openai_model="gpt-4-turbo")
COMPLETIONS_URL = "https://api.openai.com/v1/chat/completions"


def mock_completion(content):
    class MockCompletion:
        class Choice:
            class Message:
                pass

            message = Message()

        choices = [Choice()]

    MockCompletion.Choice.Message.content = content
    return MockCompletion()


def run_with_create(create, prompt="prompt"):
    with mock.patch("openai.AsyncOpenAI") as mock_openai:
        mock_client = mock.MagicMock()
        mock_openai.return_value = mock_client
        mock_client.chat.completions.create = create
        return asyncio.run(request_advisory(prompt, SETTINGS)), mock_openai


def test_success_parses_completion_json():
    advisory = {"userProfile": {}, "portfolio": {}, "advisorAnalysis": {}}
    captured = {}

    async def mock_create(**kwargs):
        captured.update(kwargs)
        return mock_completion(json.dumps(advisory))

    result, mock_openai = run_with_create(mock_create, prompt="my prompt")

    assert result == AdvisorySuccess(advisory=advisory)
    mock_openai.assert_called_once_with(api_key="sk-test")
    assert captured["model"] == "gpt-4-turbo"
    assert captured["response_format"] == {"type": "json_object"}
    assert captured["messages"][0] == {"role": "system", "content": SYSTEM_PROMPT}
    assert captured["messages"][1] == {"role": "user", "content": "my prompt"}


def test_api_error_is_upstream_failure():
    async def mock_create(**kwargs):
        request = httpx.Request("POST", COMPLETIONS_URL)
        raise openai.AuthenticationError(
            "Incorrect API key provided",
            response=httpx.Response(401, request=request),
            body=None,
        )

    result, _ = run_with_create(mock_create)

    assert isinstance(result, AdvisoryFailure)
    assert result.kind is FailureKind.UPSTREAM
    assert "Incorrect API key provided" in result.detail


def test_connection_error_is_upstream_failure():
    async def mock_create(**kwargs):
        raise openai.APIConnectionError(request=httpx.Request("POST", COMPLETIONS_URL))

    result, _ = run_with_create(mock_create)

    assert result.kind is FailureKind.UPSTREAM


def test_non_json_completion_is_invalid_response():
    async def mock_create(**kwargs):
        return mock_completion("Sure! Here is your advice.")

    result, _ = run_with_create(mock_create)

    assert result.kind is FailureKind.INVALID_RESPONSE


def test_empty_completion_is_invalid_response():
    async def mock_create(**kwargs):
        return mock_completion(None)

    result, _ = run_with_create(mock_create)

    assert result == AdvisoryFailure(
        kind=FailureKind.INVALID_RESPONSE, detail="Completion returned no content"
    )


def test_other_exceptions_are_unexpected():
    async def mock_create(**kwargs):
        raise RuntimeError("boom")

    result, _ = run_with_create(mock_create)

    assert result == AdvisoryFailure(kind=FailureKind.UNEXPECTED, detail="boom")


def test_missing_api_key_is_configuration_failure(monkeypatch):
    monkeypatch.delenv("OPENAI_API_KEY", raising=False)

    result = asyncio.run(request_advisory("prompt", Settings(openai_api_key=None)))

    assert isinstance(result, AdvisoryFailure)
    assert result.kind is FailureKind.CONFIGURATION


def test_non_standard_json_constants_are_invalid_response():
    async def mock_create(**kwargs):
        return mock_completion('{"potentialROI": {"estimatedReturn": NaN}}')

    result, _ = run_with_create(mock_create)

    assert result.kind is FailureKind.INVALID_RESPONSE
    assert "NaN" in result.detail


def test_client_is_closed_after_the_call():
    async def mock_create(**kwargs):
        return mock_completion("{}")

    with mock.patch("openai.AsyncOpenAI") as mock_openai:
        mock_client = mock.MagicMock()
        mock_openai.return_value = mock_client
        mock_client.chat.completions.create = mock_create

        result = asyncio.run(request_advisory("prompt", SETTINGS))

    assert result == AdvisorySuccess(advisory={})
    mock_client.__aexit__.assert_awaited_once()
