"""Shared test doubles."""

import io

from PIL import Image

from fitnosh_generator.imaging.base import ImageModelClient, ResponsePart


def png_bytes(size: tuple[int, int] = (600, 600), color: str = "#202020") -> bytes:
    buf = io.BytesIO()
    Image.new("RGB", size, color).save(buf, format="PNG")
    return buf.getvalue()


class FakeImageClient(ImageModelClient):
    """Fails `failures` times, then answers with a text part and a PNG."""

    def __init__(self, *, failures: int = 0, configured: bool = True, with_image: bool = True) -> None:
        self.failures = failures
        self.configured = configured
        self.with_image = with_image
        self.calls = 0
        self.prompts: list[str] = []

    @property
    def is_configured(self) -> bool:
        return self.configured

    async def generate(self, prompt: str, *, model: str | None = None) -> list[ResponsePart]:
        self.calls += 1
        self.prompts.append(prompt)
        if self.calls <= self.failures:
            raise RuntimeError(f"upstream unavailable ({self.calls})")
        parts = [ResponsePart(text="Here is your food photo.")]
        if self.with_image:
            parts.append(ResponsePart(image_data=png_bytes(), mime_type="image/png"))
        return parts
