"""Generated image persistence - PNG files in one directory, no index."""

import asyncio
import logging
import re
import secrets
import time
from dataclasses import dataclass
from datetime import datetime, timezone
from pathlib import Path

from fitnosh_generator.models import MealPlan

logger = logging.getLogger(__name__)

FILENAME_PATTERN = re.compile(r"^\w+-meals-\d+-[a-f0-9]+\.png$")
KEEP_LATEST = 10


@dataclass
class StoredImage:
    """A generated file as seen in the directory listing."""

    filename: str
    path: Path
    created: datetime
    size: int


def unique_id(filename: str) -> str:
    stem = filename.removesuffix(".png")
    return "-".join(stem.split("-")[-2:])


def _millis(filename: str) -> int:
    """Creation time embedded in the name. Breaks mtime ties."""
    return int(filename.rsplit("-", 2)[-2])


class ImageStore:
    """
    File-based store for generated images. The directory listing is the
    catalog. Only the newest `keep_latest` files are retained.
    """

    def __init__(self, directory: Path, keep_latest: int = KEEP_LATEST) -> None:
        self._dir = Path(directory)
        self._dir.mkdir(parents=True, exist_ok=True)
        self._keep_latest = keep_latest
        self._lock = asyncio.Lock()

    @property
    def directory(self) -> Path:
        return self._dir

    @property
    def lock(self) -> asyncio.Lock:
        """Held around prune + write so two generations never interleave."""
        return self._lock

    def new_filename(self, meal: MealPlan) -> str:
        """<day>-meals-<epoch millis>-<16 hex>.png, unique per call."""
        millis = time.time_ns() // 1_000_000
        return f"{meal.slug()}-meals-{millis}-{secrets.token_hex(8)}.png"

    def list_images(self) -> list[StoredImage]:
        """Generated files, newest first."""
        images = []
        for path in self._dir.iterdir():
            if not FILENAME_PATTERN.match(path.name) or not path.is_file():
                continue
            try:
                stat = path.stat()
            except OSError as e:
                # Removed between listing and stat
                logger.warning("Could not stat %s: %s", path, e)
                continue
            images.append(
                StoredImage(
                    filename=path.name,
                    path=path,
                    created=datetime.fromtimestamp(stat.st_mtime, tz=timezone.utc),
                    size=stat.st_size,
                )
            )
        images.sort(key=lambda img: (img.created, _millis(img.filename)), reverse=True)
        return images

    def prune(self, reserve: int = 0) -> list[str]:
        """
        Delete all but the newest files. `reserve` leaves room for files about
        to be written, so the limit still holds afterwards.
        Returns deleted file names.
        """
        keep = max(0, self._keep_latest - reserve)
        deleted = []
        for image in self.list_images()[keep:]:
            try:
                image.path.unlink()
                deleted.append(image.filename)
                logger.info("Cleaned up old image: %s", image.filename)
            except OSError as e:
                logger.warning("Failed to delete %s: %s", image.filename, e)
        return deleted

    def path_for(self, filename: str) -> Path | None:
        """Path of an existing generated file, or None."""
        if not FILENAME_PATTERN.match(filename):
            return None
        path = self._dir / filename
        if not path.is_file():
            return None
        return path
