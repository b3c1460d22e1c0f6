"""Image service - prompt the model and retry failed calls."""

import asyncio
import logging
import random
from dataclasses import dataclass, field
from datetime import datetime, timezone
from typing import Awaitable, Callable

from fitnosh_generator.imaging.base import (
    ImageModelClient,
    MissingApiKeyError,
    NoImageReturnedError,
    ResponsePart,
)
from fitnosh_generator.models import MealPlan
from fitnosh_generator.services.prompts import build_food_prompt

logger = logging.getLogger(__name__)

MAX_SEED = 9999


@dataclass
class GenerationResult:
    """Raw base image plus how it was obtained."""

    image_bytes: bytes
    attempts: int
    notes: list[str] = field(default_factory=list)


class ImageService:
    """
    Fixed-count retry around the model call: every failure is retried the
    same way with a constant pause. The last error propagates.
    """

    def __init__(
        self,
        client: ImageModelClient,
        *,
        max_attempts: int = 3,
        retry_delay: float = 5.0,
        sleep: Callable[[float], Awaitable[None]] = asyncio.sleep,
    ) -> None:
        self._client = client
        self._max_attempts = max(1, max_attempts)
        self._retry_delay = retry_delay
        self._sleep = sleep

    async def generate_base_image(self, meal: MealPlan) -> GenerationResult:
        """Generate the unbranded food photo for a meal."""
        if not self._client.is_configured:
            raise MissingApiKeyError("GOOGLE_API_KEY is not configured")

        seed = random.randint(0, MAX_SEED)
        prompt = build_food_prompt(meal, seed=seed, generated_at=datetime.now(timezone.utc))
        logger.info("Generating image for %s (seed %s)", meal.Day, seed)
        logger.debug("Prompt: %s", prompt)

        parts, attempts = await self._call_with_retry(prompt)

        notes = [p.text for p in parts if p.text]
        for note in notes:
            logger.info("Model text: %s", note)
        image = next((p.image_data for p in parts if p.image_data), None)
        if image is None:
            raise NoImageReturnedError(f"Model returned no image after {attempts} attempt(s)")
        logger.info("Base food image generated (%d bytes)", len(image))
        return GenerationResult(image_bytes=image, attempts=attempts, notes=notes)

    async def _call_with_retry(self, prompt: str) -> tuple[list[ResponsePart], int]:
        attempt = 0
        while True:
            attempt += 1
            try:
                return await self._client.generate(prompt), attempt
            except Exception as e:
                logger.warning("Attempt %d failed: %s", attempt, e)
                if attempt >= self._max_attempts:
                    raise
                logger.info(
                    "Retrying in %s seconds... (%d/%d)",
                    self._retry_delay,
                    attempt,
                    self._max_attempts,
                )
                await self._sleep(self._retry_delay)
