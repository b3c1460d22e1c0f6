"""Compositor - brand logo and dish labels over the generated photo."""

import logging
from dataclasses import dataclass
from pathlib import Path

from PIL import Image, ImageDraw, ImageFont

from fitnosh_generator.models import MealPlan, OverlayLayout

logger = logging.getLogger(__name__)

PNG_COMPRESS_LEVEL = 3


@dataclass(frozen=True)
class FontChoice:
    """Resolved label font. `source` is the file path or "default"."""

    font: ImageFont.FreeTypeFont | ImageFont.ImageFont
    source: str


def resolve_font(font_paths: list[str], size: int) -> FontChoice:
    """First loadable font in the chain, else Pillow's default at `size`."""
    for fp in font_paths:
        try:
            font = ImageFont.truetype(fp, size)
        except OSError:
            continue
        logger.info("Using font: %s", fp)
        return FontChoice(font=font, source=fp)
    logger.info("No system fonts found, using default font")
    return FontChoice(font=ImageFont.load_default(size=size), source="default")


class Compositor:
    """Draws the overlay described by an OverlayLayout."""

    def __init__(self, layout: OverlayLayout, logo_path: Path) -> None:
        self._layout = layout
        self._logo_path = Path(logo_path)
        self._font = resolve_font(layout.fonts, layout.text_style.size)

    def compose(self, base_path: Path, meal: MealPlan, output_path: Path) -> Path:
        """
        Write the branded image to output_path and return it.
        On failure the untouched base_path is returned instead.
        """
        try:
            with Image.open(base_path) as base:
                canvas = Image.new("RGBA", base.size, (0, 0, 0, 0))
                canvas.paste(base.convert("RGBA"), (0, 0))
            draw = ImageDraw.Draw(canvas)
            self._draw_logo(canvas, draw)
            self._draw_labels(draw, meal)
            canvas.save(output_path, format="PNG", compress_level=PNG_COMPRESS_LEVEL)
        except Exception as e:
            logger.exception("Error adding logo and labels: %s", e)
            return base_path
        logger.info("Final branded and labeled image saved as %s", output_path.name)
        return output_path

    def _draw_logo(self, canvas: Image.Image, draw: ImageDraw.ImageDraw) -> None:
        box = self._layout.logo_box()
        if box is None:
            return
        x, y, width, height = box
        try:
            with Image.open(self._logo_path) as logo_file:
                logo = logo_file.convert("RGBA").resize((width, height), Image.Resampling.LANCZOS)
        except (OSError, ValueError) as e:
            logger.warning("Could not load logo %s: %s", self._logo_path, e)
            self._draw_placeholder(draw, box)
            return
        canvas.paste(logo, (x, y), logo)
        logger.info("Logo placed at %s, %s with size %sx%s", x, y, width, height)

    def _draw_placeholder(self, draw: ImageDraw.ImageDraw, box: tuple[int, int, int, int]) -> None:
        placeholder = self._layout.placeholder
        if not placeholder.enabled:
            logger.info("Skipping logo - leaving space empty")
            return
        x, y, width, height = box
        draw.rectangle([x, y, x + width, y + height], fill=placeholder.fill)
        draw.text(
            (x + width // 2, y + height // 2),
            placeholder.text,
            font=self._font.font,
            fill=placeholder.text_fill,
            anchor="mm",
        )

    def _draw_labels(self, draw: ImageDraw.ImageDraw, meal: MealPlan) -> None:
        style = self._layout.text_style
        for text, x, y in self._layout.label_positions(meal):
            draw.text((x, y), text, font=self._font.font, fill=style.fill, anchor="lm")
            logger.info('Added label "%s" at position %s, %s', text, x, y)
