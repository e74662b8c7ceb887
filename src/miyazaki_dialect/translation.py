import logging
from typing import Any, Dict, Mapping

from google import genai
from google.genai import errors

from miyazaki_dialect.errors import UpstreamError
from miyazaki_dialect.prompts import PROMPT_TEMPLATES, build_prompt
from miyazaki_dialect.request import Direction

logger = logging.getLogger(__name__)


def extract_text(response) -> str:
    """Text of the first candidate's first part, or "" if the path is missing."""
    candidates = getattr(response, "candidates", None)
    if not candidates:
        return ""
    content = getattr(candidates[0], "content", None)
    parts = getattr(content, "parts", None)
    if not parts:
        return ""
    return getattr(parts[0], "text", None) or ""


class CompletionGateway:
    def __init__(
        self,
        client: genai.Client,
        model: str,
        config: Dict[str, Any],
        templates: Mapping[Direction, str] = PROMPT_TEMPLATES,
    ):
        self.client = client
        self.model = model
        self.config = config
        self.templates = templates

    async def generate(self, prompt: str) -> str:
        logger.info(f"Requesting completion from {self.model}")
        try:
            response = await self.client.aio.models.generate_content(
                model=self.model,
                contents=prompt,
                config=self.config,
            )
        except errors.APIError as e:
            logger.error(f"Gemini API error: {e.code} {e.details}")
            raise UpstreamError(status_code=e.code, payload=e.details) from e

        text = extract_text(response)
        if not text:
            logger.warning("Gemini response carried no candidate text")
        return text

    async def translate(self, text: str, direction: Direction) -> str:
        prompt = build_prompt(text, direction, self.templates)
        return await self.generate(prompt)
