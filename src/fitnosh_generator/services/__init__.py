"""Business logic services."""

from fitnosh_generator.services.image_service import GenerationResult, ImageService
from fitnosh_generator.services.meal_image_service import GeneratedImage, MealImageService

__all__ = ["GeneratedImage", "GenerationResult", "ImageService", "MealImageService"]
