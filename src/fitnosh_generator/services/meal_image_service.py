"""Meal image service - generate, brand and store one image per request."""

import asyncio
import logging
import secrets
from dataclasses import dataclass
from typing import Any

from fitnosh_generator.media import Compositor
from fitnosh_generator.models import MealPlan
from fitnosh_generator.persistence import ImageStore
from fitnosh_generator.services.image_service import ImageService

logger = logging.getLogger(__name__)


@dataclass
class GeneratedImage:
    """Outcome of one generation request."""

    filename: str
    attempts: int


class MealImageService:
    """Orchestrates generation. Separates transport from business logic."""

    def __init__(
        self,
        image_service: ImageService,
        compositor: Compositor,
        store: ImageStore,
    ) -> None:
        self._images = image_service
        self._compositor = compositor
        self._store = store

    async def generate(self, payload: Any) -> GeneratedImage:
        """
        Generate a branded image for the meal in payload.
        Raises when the model call ultimately fails.
        """
        meal = MealPlan.from_payload(payload)
        logger.info("Final meal data: %s", meal.model_dump())
        result = await self._images.generate_base_image(meal)

        async with self._store.lock:
            filename = await asyncio.to_thread(self._store_composite, result.image_bytes, meal)

        logger.info("Generated %s in %d attempt(s)", filename, result.attempts)
        return GeneratedImage(filename=filename, attempts=result.attempts)

    def _store_composite(self, image_bytes: bytes, meal: MealPlan) -> str:
        """Prune, compose and write. Blocking; called in a worker thread under the store lock."""
        temp_path = self._store.directory / f"temp-{meal.slug()}-base-{secrets.token_hex(4)}.png"
        temp_path.write_bytes(image_bytes)
        try:
            self._store.prune(reserve=1)
            final_path = self._store.directory / self._store.new_filename(meal)
            written = self._compositor.compose(temp_path, meal, final_path)
            if written == temp_path:
                # Compositing failed: serve the unbranded photo instead
                temp_path.replace(final_path)
                logger.warning("Serving unbranded image as %s", final_path.name)
        finally:
            if temp_path.exists():
                temp_path.unlink()
                logger.debug("Temporary file cleaned up")
        return final_path.name
