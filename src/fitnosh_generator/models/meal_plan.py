"""Meal record data model."""

import re
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

DEFAULT_MEAL: dict[str, str] = {
    "Day": "Tuesday",
    "Breakfast": "Smoothie Bowl + Granola",
    "Snack": "Mixed Nuts + Dates",
    "Lunch": "Millet Roti + Mixed Veg Curry",
}


class MealPlan(BaseModel):
    """One day's meals. Drives both the prompt and the overlay labels."""

    model_config = ConfigDict(frozen=True)

    Day: str = Field(default=DEFAULT_MEAL["Day"], description="Day name, e.g. Friday")
    Breakfast: str = Field(default=DEFAULT_MEAL["Breakfast"])
    Snack: str = Field(default=DEFAULT_MEAL["Snack"])
    Lunch: str = Field(default=DEFAULT_MEAL["Lunch"])

    @classmethod
    def from_payload(cls, payload: Any) -> "MealPlan":
        """
        Build from a decoded request body: a record or a list of records.
        Missing, empty or unusable fields fall back to DEFAULT_MEAL one by one.
        """
        data: Any = payload
        if isinstance(data, list):
            data = data[0] if data else {}
        if not isinstance(data, dict):
            data = {}
        fields = {}
        for name, default in DEFAULT_MEAL.items():
            value = data.get(name)
            fields[name] = str(value) if value else default
        return cls(**fields)

    def dishes(self) -> tuple[str, str, str]:
        """Dish names in label order."""
        return (self.Breakfast, self.Snack, self.Lunch)

    def slug(self) -> str:
        """Lowercase day usable in a file name."""
        return re.sub(r"\W+", "_", self.Day.strip().lower()) or "meal"
