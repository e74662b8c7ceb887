import logging
from typing import Optional

import httpx

from miyazaki_dialect.errors import TranslationRequestError
from miyazaki_dialect.request import Direction

logger = logging.getLogger(__name__)

ROUTES = {
    Direction.TO_STANDARD: "/api/translate",
    Direction.TO_DIALECT: "/api/to-dialect",
}


class ApiTranslator:
    """Calls a running translator service; usable as a session translator."""

    def __init__(self, base_url: str, http_client: Optional[httpx.AsyncClient] = None):
        self.base_url = base_url.rstrip("/")
        self.http_client = http_client or httpx.AsyncClient()

    async def __call__(self, text: str, direction: Direction) -> str:
        url = f"{self.base_url}{ROUTES[direction]}"
        try:
            response = await self.http_client.post(url, json={"text": text})
        except httpx.HTTPError as e:
            logger.error(f"Request to {url} failed: {e}")
            raise TranslationRequestError() from e

        if not response.is_success:
            logger.error(f"Translator service returned {response.status_code}: {response.text}")
            raise TranslationRequestError()

        try:
            return response.json()["translatedText"]
        except (ValueError, KeyError, TypeError) as e:
            logger.error(f"Unexpected response from {url}: {response.text}")
            raise TranslationRequestError() from e

    async def aclose(self):
        await self.http_client.aclose()

    async def __aenter__(self):
        return self

    async def __aexit__(self, exc_type, exc, tb):
        await self.aclose()
