from miyazaki_dialect.errors import ConfigurationError
from miyazaki_dialect.settings import Settings, get_settings
from miyazaki_dialect.translation import CompletionGateway
from google import genai
from fastapi import Depends


def get_gemini_client(settings: Settings = Depends(get_settings)):
    if not settings.GEMINI_API_KEY:
        raise ConfigurationError()
    return genai.Client(api_key=settings.GEMINI_API_KEY)


def get_completion_gateway(
    client: genai.Client = Depends(get_gemini_client),
    settings: Settings = Depends(get_settings),
) -> CompletionGateway:
    return CompletionGateway(client, settings.GEMINI_MODEL, settings.GEMINI_CONFIG)
