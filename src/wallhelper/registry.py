"""
Image registry: one-shot scan of the daypart and hour bucket directories.
"""

import logging
import os
from pathlib import Path
from typing import Dict, List, Tuple

from .config import DAYPART_DIR, HOURS_DIR
from .exceptions import RegistryError
from .schedule import Daypart

logger = logging.getLogger(__name__)


def scan_bucket(bucket_dir: Path) -> Tuple[str, ...]:
    """
    List the files directly inside a bucket directory.

    Paths are absolute and kept in directory listing order. Subdirectories
    are skipped.

    Raises:
        RegistryError: If the directory is missing or unreadable
    """
    bucket_dir = Path(os.path.abspath(bucket_dir))
    try:
        with os.scandir(bucket_dir) as it:
            names = [entry.name for entry in it if entry.is_file()]
    except FileNotFoundError:
        raise RegistryError(
            f"Image folder not found: {bucket_dir}\n"
            "Run 'wallhelper init' to create the folder layout."
        )
    except NotADirectoryError:
        raise RegistryError(f"Image folder is not a directory: {bucket_dir}")
    except OSError as e:
        raise RegistryError(f"Failed to read image folder {bucket_dir}: {e}")

    return tuple(str(bucket_dir / name) for name in names)


class ImageRegistry:
    """
    Candidate images for each daypart and each hour of the day.

    Built once at startup and read-only afterwards; files added later are
    not picked up until restart.
    """

    def __init__(
        self,
        daypart_buckets: Dict[Daypart, Tuple[str, ...]],
        hour_buckets: List[Tuple[str, ...]],
    ) -> None:
        if len(hour_buckets) != 24:
            raise ValueError(f"Expected 24 hour buckets, got {len(hour_buckets)}")
        self._dayparts = {daypart: tuple(daypart_buckets.get(daypart, ())) for daypart in Daypart}
        self._hours = tuple(tuple(bucket) for bucket in hour_buckets)

    @classmethod
    def scan(cls, images_dir: Path) -> 'ImageRegistry':
        """
        Scan <images_dir>/dayparts/<daypart>/ and <images_dir>/hours/<0..23>/.

        Raises:
            RegistryError: If any bucket directory is missing or unreadable
        """
        images_dir = Path(images_dir)
        daypart_buckets = {
            daypart: scan_bucket(images_dir / DAYPART_DIR / daypart.value)
            for daypart in Daypart
        }
        hour_buckets = [scan_bucket(images_dir / HOURS_DIR / str(hour)) for hour in range(24)]

        registry = cls(daypart_buckets, hour_buckets)
        logger.info(
            f"Registered {registry.total_images()} images from {images_dir} "
            f"({sum(1 for b in hour_buckets if b)} hours with specific images)"
        )
        return registry

    def daypart_images(self, daypart: Daypart) -> Tuple[str, ...]:
        return self._dayparts[Daypart(daypart)]

    def hour_images(self, hour: int) -> Tuple[str, ...]:
        if not 0 <= hour < 24:
            raise ValueError(f"Hour out of range: {hour}")
        return self._hours[hour]

    def bucket_counts(self) -> Dict[str, int]:
        """Number of images per bucket, keyed by daypart name or hour."""
        counts = {daypart.value: len(images) for daypart, images in self._dayparts.items()}
        counts.update({str(hour): len(images) for hour, images in enumerate(self._hours)})
        return counts

    def total_images(self) -> int:
        return sum(len(b) for b in self._dayparts.values()) + sum(len(b) for b in self._hours)
