import logging

import pytest
from google.genai import errors, types

from miyazaki_dialect.errors import UpstreamError
from miyazaki_dialect.request import Direction
from miyazaki_dialect.settings import Settings
from miyazaki_dialect.translation import CompletionGateway, extract_text

from conftest import FakeGeminiClient, make_response


def make_gateway(gemini):
    settings = Settings(GEMINI_API_KEY="test-key")
    return CompletionGateway(gemini, settings.GEMINI_MODEL, settings.GEMINI_CONFIG)


def test_extract_text_reads_first_candidate():
    response = types.GenerateContentResponse(
        candidates=[
            types.Candidate(content=types.Content(parts=[types.Part(text="一つ目")])),
            types.Candidate(content=types.Content(parts=[types.Part(text="二つ目")])),
        ]
    )
    assert extract_text(response) == "一つ目"


@pytest.mark.parametrize(
    "response",
    [
        None,
        types.GenerateContentResponse(),
        types.GenerateContentResponse(candidates=[]),
        types.GenerateContentResponse(candidates=[types.Candidate()]),
        types.GenerateContentResponse(candidates=[types.Candidate(content=types.Content())]),
        types.GenerateContentResponse(
            candidates=[types.Candidate(content=types.Content(parts=[types.Part()]))]
        ),
    ],
)
def test_extract_text_returns_empty_string_for_missing_path(response):
    assert extract_text(response) == ""


@pytest.mark.anyio
async def test_translate_makes_one_call_with_fixed_parameters():
    gemini = FakeGeminiClient(response=make_response("疲れました"))
    gateway = make_gateway(gemini)

    result = await gateway.translate("ひんだれた", Direction.TO_STANDARD)

    assert result == "疲れました"
    assert len(gemini.calls) == 1
    call = gemini.calls[0]
    assert call["model"] == "gemini-2.0-flash"
    assert call["contents"].endswith("宮崎弁: ひんだれた")
    assert call["config"] == {
        "temperature": 0.1,
        "top_k": 40,
        "top_p": 0.95,
        "max_output_tokens": 1024,
    }


@pytest.mark.anyio
async def test_unexpected_shape_yields_empty_string():
    gateway = make_gateway(FakeGeminiClient(response=types.GenerateContentResponse()))
    assert await gateway.translate("疲れた", Direction.TO_DIALECT) == ""


@pytest.mark.anyio
async def test_api_error_becomes_upstream_error(caplog):
    payload = {"error": {"code": 403, "message": "API key not valid", "status": "PERMISSION_DENIED"}}
    gemini = FakeGeminiClient(error=errors.ClientError(403, payload))
    gateway = make_gateway(gemini)

    with caplog.at_level(logging.ERROR, logger="miyazaki_dialect.translation"):
        with pytest.raises(UpstreamError) as exc_info:
            await gateway.translate("ひんだれた", Direction.TO_STANDARD)

    assert exc_info.value.status_code == 403
    assert exc_info.value.payload == payload
    assert len(gemini.calls) == 1

    errors_logged = [r for r in caplog.records if r.levelno == logging.ERROR]
    assert len(errors_logged) == 1
    assert "403" in errors_logged[0].getMessage()
    assert "API key not valid" in errors_logged[0].getMessage()


@pytest.mark.anyio
async def test_other_exceptions_propagate():
    gateway = make_gateway(FakeGeminiClient(error=ConnectionError("network down")))
    with pytest.raises(ConnectionError):
        await gateway.generate("prompt")
