import pytest
from fastapi.testclient import TestClient
from google.genai import types

from miyazaki_dialect.client import get_gemini_client
from miyazaki_dialect.main import app
from miyazaki_dialect.settings import Settings, get_settings


def make_response(text):
    return types.GenerateContentResponse(
        candidates=[
            types.Candidate(
                content=types.Content(role="model", parts=[types.Part(text=text)])
            )
        ]
    )


class FakeModels:
    def __init__(self, response=None, error=None):
        self.response = response
        self.error = error
        self.calls = []

    async def generate_content(self, *, model, contents, config=None):
        self.calls.append({"model": model, "contents": contents, "config": config})
        if self.error is not None:
            raise self.error
        return self.response


class FakeAio:
    def __init__(self, models):
        self.models = models


class FakeGeminiClient:
    def __init__(self, response=None, error=None):
        self.models = FakeModels(response, error)
        self.aio = FakeAio(self.models)

    @property
    def calls(self):
        return self.models.calls


@pytest.fixture
def anyio_backend():
    return "asyncio"


@pytest.fixture
def test_settings():
    return Settings(GEMINI_API_KEY="test-key")


@pytest.fixture
def gemini():
    return FakeGeminiClient(response=make_response("疲れました"))


@pytest.fixture
def client(gemini, test_settings):
    app.dependency_overrides[get_settings] = lambda: test_settings
    app.dependency_overrides[get_gemini_client] = lambda: gemini
    yield TestClient(app)
    app.dependency_overrides.clear()
