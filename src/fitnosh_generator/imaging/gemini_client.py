"""Google Gemini image client implementation."""

import base64
import logging
from typing import Any

from google import genai
from google.genai import types

from fitnosh_generator.config import get_settings
from fitnosh_generator.imaging.base import ImageModelClient, MissingApiKeyError, ResponsePart

logger = logging.getLogger(__name__)

RESPONSE_MODALITIES = ["TEXT", "IMAGE"]


class GeminiImageClient(ImageModelClient):
    """Gemini client via google-genai. Requires GOOGLE_API_KEY; no fallback key."""

    def __init__(
        self,
        *,
        api_key: str | None = None,
        model: str | None = None,
    ) -> None:
        settings = get_settings()
        self._api_key = api_key if api_key is not None else settings.google_api_key
        self._model = model or settings.image_model
        self._client: genai.Client | None = None

    @property
    def is_configured(self) -> bool:
        return bool(self._api_key)

    def _get_client(self) -> genai.Client:
        """Lazy-init SDK client."""
        if not self._api_key:
            raise MissingApiKeyError("GOOGLE_API_KEY is not configured")
        if self._client is None:
            self._client = genai.Client(api_key=self._api_key)
        return self._client

    async def generate(
        self,
        prompt: str,
        *,
        model: str | None = None,
    ) -> list[ResponsePart]:
        """Call generate_content with text+image response modalities."""
        client = self._get_client()
        response = await client.aio.models.generate_content(
            model=model or self._model,
            contents=prompt,
            config=types.GenerateContentConfig(response_modalities=RESPONSE_MODALITIES),
        )
        return parts_from_response(response)


def parts_from_response(response: Any) -> list[ResponsePart]:
    """Flatten the first candidate's content into ResponseParts."""
    candidates = getattr(response, "candidates", None) or []
    if not candidates:
        logger.warning("Model response has no candidates")
        return []
    content = candidates[0].content
    raw_parts = (content.parts if content else None) or []
    parts: list[ResponsePart] = []
    for part in raw_parts:
        if part.text:
            parts.append(ResponsePart(text=part.text))
        elif part.inline_data is not None and part.inline_data.data:
            data = part.inline_data.data
            if isinstance(data, str):
                data = base64.b64decode(data)
            parts.append(ResponsePart(image_data=data, mime_type=part.inline_data.mime_type))
    return parts
