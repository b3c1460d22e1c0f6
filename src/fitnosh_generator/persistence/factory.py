"""Store factory - creates the image store from config."""

from pathlib import Path

from fitnosh_generator.config import Settings, get_settings
from fitnosh_generator.persistence.image_store import ImageStore


def create_image_store(settings: Settings | None = None) -> ImageStore:
    """
    Create the generated-image store in OUTPUT_DIR.
    The directory is created if missing.
    """
    settings = settings or get_settings()
    return ImageStore(Path(settings.output_dir), keep_latest=settings.keep_latest)
