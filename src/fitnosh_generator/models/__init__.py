"""Data models."""

from fitnosh_generator.models.layout import LayoutElement, OverlayLayout, Placeholder, TextStyle
from fitnosh_generator.models.meal_plan import DEFAULT_MEAL, MealPlan
from fitnosh_generator.models.responses import (
    GenerateImageResponse,
    ImageEntry,
    ImageListResponse,
)

__all__ = [
    "DEFAULT_MEAL",
    "GenerateImageResponse",
    "ImageEntry",
    "ImageListResponse",
    "LayoutElement",
    "MealPlan",
    "OverlayLayout",
    "Placeholder",
    "TextStyle",
]
