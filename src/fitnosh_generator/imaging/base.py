"""Image model client abstract interface."""

from abc import ABC, abstractmethod
from dataclasses import dataclass


class ImageGenerationError(Exception):
    """Base error for image generation."""


class MissingApiKeyError(ImageGenerationError):
    """No credential configured. Raised before any API call."""


class NoImageReturnedError(ImageGenerationError):
    """The model answered without an image part."""


@dataclass
class ResponsePart:
    """One part of a model response: text or decoded image bytes."""

    text: str | None = None
    image_data: bytes | None = None
    mime_type: str | None = None


class ImageModelClient(ABC):
    """Generative model that can answer a prompt with text and image parts."""

    @property
    @abstractmethod
    def is_configured(self) -> bool:
        """Whether a credential is available."""
        ...

    @abstractmethod
    async def generate(
        self,
        prompt: str,
        *,
        model: str | None = None,
    ) -> list[ResponsePart]:
        """
        Send prompt requesting text and image output.
        Returns response parts in model order.
        """
        ...
