import json

import httpx
import pytest

from miyazaki_dialect.api_client import ApiTranslator
from miyazaki_dialect.client import get_gemini_client
from miyazaki_dialect.errors import TranslationRequestError
from miyazaki_dialect.main import app
from miyazaki_dialect.request import Direction
from miyazaki_dialect.session import TranslatorSession
from miyazaki_dialect.settings import get_settings

from conftest import FakeGeminiClient, make_response


def mock_translator(handler):
    return ApiTranslator(
        "http://translator.test/",
        httpx.AsyncClient(transport=httpx.MockTransport(handler)),
    )


@pytest.mark.anyio
async def test_posts_text_to_direction_route():
    requests = []

    def handler(request):
        requests.append(request)
        return httpx.Response(200, json={"translatedText": "てげうまい"})

    translator = mock_translator(handler)
    assert await translator("とても美味しい", Direction.TO_DIALECT) == "てげうまい"
    await translator.aclose()

    assert len(requests) == 1
    assert str(requests[0].url) == "http://translator.test/api/to-dialect"
    assert json.loads(requests[0].content) == {"text": "とても美味しい"}


@pytest.mark.anyio
async def test_error_status_raises():
    translator = mock_translator(lambda request: httpx.Response(500, json={"error": "x"}))
    with pytest.raises(TranslationRequestError):
        await translator("ひんだれた", Direction.TO_STANDARD)


@pytest.mark.anyio
async def test_transport_error_raises():
    def handler(request):
        raise httpx.ConnectError("refused", request=request)

    with pytest.raises(TranslationRequestError):
        await mock_translator(handler)("ひんだれた", Direction.TO_STANDARD)


@pytest.mark.anyio
async def test_session_against_service(test_settings):
    gemini = FakeGeminiClient(response=make_response("疲れました"))
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    translator = ApiTranslator(
        "http://testserver",
        httpx.AsyncClient(transport=httpx.ASGITransport(app=app)),
    )
    try:
        session = TranslatorSession(translator)
        session.set_input("ひんだれた")
        await session.submit()
    finally:
        await translator.aclose()
        app.dependency_overrides.clear()

    assert session.translated_text == "疲れました"
    assert session.error is None
    assert len(gemini.calls) == 1
    assert "宮崎弁: ひんだれた" in gemini.calls[0]["contents"]


@pytest.mark.anyio
async def test_async_context_manager_closes_client():
    http_client = httpx.AsyncClient(
        transport=httpx.MockTransport(lambda request: httpx.Response(200, json={"translatedText": "疲れました"}))
    )

    async with ApiTranslator("http://translator.test", http_client) as translator:
        assert await translator("ひんだれた", Direction.TO_STANDARD) == "疲れました"

    assert http_client.is_closed
