"""Image model abstraction - Google Gemini."""

from fitnosh_generator.imaging.base import (
    ImageGenerationError,
    ImageModelClient,
    MissingApiKeyError,
    NoImageReturnedError,
    ResponsePart,
)
from fitnosh_generator.imaging.gemini_client import GeminiImageClient

__all__ = [
    "GeminiImageClient",
    "ImageGenerationError",
    "ImageModelClient",
    "MissingApiKeyError",
    "NoImageReturnedError",
    "ResponsePart",
]
