"""Persistence layer."""

from fitnosh_generator.persistence.factory import create_image_store
from fitnosh_generator.persistence.image_store import (
    FILENAME_PATTERN,
    ImageStore,
    StoredImage,
    unique_id,
)

__all__ = [
    "FILENAME_PATTERN",
    "ImageStore",
    "StoredImage",
    "create_image_store",
    "unique_id",
]
