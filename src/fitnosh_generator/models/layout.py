"""Overlay layout model - where the logo and dish labels go."""

from typing import Any, Literal

from pydantic import BaseModel, Field

from fitnosh_generator.models.meal_plan import MealPlan

Role = Literal["logo", "breakfast", "snack", "lunch"]

LABEL_ROLES: tuple[Role, ...] = ("breakfast", "snack", "lunch")

DEFAULT_FONTS = [
    "/System/Library/Fonts/Arial.ttf",
    "/System/Library/Fonts/Helvetica.ttc",
    "/usr/share/fonts/truetype/dejavu/DejaVuSans-Bold.ttf",
    "/usr/share/fonts/truetype/liberation/LiberationSans-Bold.ttf",
    "/usr/share/fonts/TTF/arial.ttf",
    "C:\\Windows\\Fonts\\arial.ttf",
    "C:\\Windows\\Fonts\\calibri.ttf",
]


class LayoutElement(BaseModel):
    """A positioned element. Labels are anchored left-middle at (x, y)."""

    role: Role
    x: int
    y: int
    width: int | None = Field(default=None, description="Box width, logo only")
    height: int | None = Field(default=None, description="Box height, logo only")


class TextStyle(BaseModel):
    size: int = Field(default=32, gt=0)
    fill: str = Field(default="#FDCF16", description="Brand yellow")


class Placeholder(BaseModel):
    """Drawn in the logo box when the logo file cannot be loaded."""

    enabled: bool = False
    fill: str = "#FDCF16"
    text: str = "STREET NOSH"
    text_fill: str = "#000000"


def _default_elements() -> list[LayoutElement]:
    logo_x, logo_y, logo_size = 30, 30, 250
    logo_bottom = logo_y + logo_size
    return [
        LayoutElement(role="logo", x=logo_x, y=logo_y, width=logo_size, height=logo_size),
        LayoutElement(role="breakfast", x=logo_x, y=logo_bottom + 40),
        LayoutElement(role="snack", x=logo_x, y=logo_bottom + 80),
        LayoutElement(role="lunch", x=logo_x, y=logo_bottom + 120),
    ]


class OverlayLayout(BaseModel):
    """Declarative overlay: elements by role, label style, font chain, placeholder."""

    elements: list[LayoutElement] = Field(default_factory=_default_elements)
    text_style: TextStyle = Field(default_factory=TextStyle)
    fonts: list[str] = Field(default_factory=lambda: list(DEFAULT_FONTS))
    placeholder: Placeholder = Field(default_factory=Placeholder)

    @classmethod
    def from_config(cls, config: dict[str, Any]) -> "OverlayLayout":
        """Build from the `overlay` section of layout.yaml. Absent keys keep defaults."""
        section = config.get("overlay", config) or {}
        return cls.model_validate(section)

    def element(self, role: Role) -> LayoutElement | None:
        for el in self.elements:
            if el.role == role:
                return el
        return None

    def logo_box(self) -> tuple[int, int, int, int] | None:
        """(x, y, width, height) of the logo, or None when the layout has no logo."""
        el = self.element("logo")
        if el is None:
            return None
        return (el.x, el.y, el.width or 0, el.height or 0)

    def label_positions(self, meal: MealPlan) -> list[tuple[str, int, int]]:
        """(text, x, y) for every non-empty dish that has a placed label."""
        positions = []
        for role, dish in zip(LABEL_ROLES, meal.dishes()):
            el = self.element(role)
            if dish and el is not None:
                positions.append((dish, el.x, el.y))
        return positions
