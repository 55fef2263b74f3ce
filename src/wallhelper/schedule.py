"""
Daypart scheduling and image selection.

Maps the wall-clock hour onto one of four dayparts using configured boundary
hours, then picks an image with hour-specific buckets taking priority over
the daypart bucket.
"""

import logging
import random
from dataclasses import dataclass
from enum import Enum
from typing import TYPE_CHECKING, List, Optional

from .config.dataclasses import BoundaryConfig
from .exceptions import ResolutionError

if TYPE_CHECKING:
    from .registry import ImageRegistry

logger = logging.getLogger(__name__)


class Daypart(str, Enum):
    """The four segments of the day, in cyclical order."""
    MORNING = "morning"
    DAY = "day"
    EVENING = "evening"
    NIGHT = "night"

    def __str__(self) -> str:
        return self.value


def resolve_daypart(hour: int, boundaries: BoundaryConfig) -> Daypart:
    """
    Determine which daypart an hour falls in.

    Intervals are half-open and tested in order; night is the wrap-around
    catch-all and is checked last.

    Args:
        hour: Hour of day (0-23)
        boundaries: Configured starting hour of each daypart

    Returns:
        The matching Daypart

    Raises:
        ResolutionError: If no interval claims the hour (boundaries out of order)
    """
    if boundaries.morning <= hour < boundaries.day:
        return Daypart.MORNING
    if boundaries.day <= hour < boundaries.evening:
        return Daypart.DAY
    if boundaries.evening <= hour < boundaries.night:
        return Daypart.EVENING
    if hour >= boundaries.night or hour < boundaries.morning:
        return Daypart.NIGHT
    raise ResolutionError(hour, boundaries)


@dataclass(frozen=True)
class Selection:
    """Result of image selection for one tick."""
    path: Optional[str]
    candidate_count: int
    daypart: Daypart
    hour: int
    from_hour_bucket: bool = False

    @property
    def found(self) -> bool:
        return self.path is not None


def select_image(
    daypart: Daypart,
    hour: int,
    registry: 'ImageRegistry',
    rng: Optional[random.Random] = None,
) -> Selection:
    """
    Pick an image for the given daypart and hour.

    A non-empty hour bucket fully overrides the daypart bucket. Selection is
    uniform within the winning bucket; repeats are not excluded here.

    Args:
        daypart: Resolved daypart
        hour: Current hour (0-23)
        registry: Scanned image buckets
        rng: Random source with a choice() method (default: random module)

    Returns:
        Selection with path None and candidate_count 0 if both buckets are empty
    """
    rng = rng or random

    hour_bucket = registry.hour_images(hour)
    if hour_bucket:
        path = rng.choice(hour_bucket)
        logger.debug(f"Picked {path} from hour {hour} bucket ({len(hour_bucket)} images)")
        return Selection(path, len(hour_bucket), daypart, hour, from_hour_bucket=True)

    daypart_bucket = registry.daypart_images(daypart)
    if daypart_bucket:
        path = rng.choice(daypart_bucket)
        logger.debug(f"Picked {path} from {daypart} bucket ({len(daypart_bucket)} images)")
        return Selection(path, len(daypart_bucket), daypart, hour)

    return Selection(None, 0, daypart, hour)


@dataclass
class ScheduleEntry:
    """Entry in the 24-hour schedule table."""
    hour: int
    daypart: Daypart
    hour_images: int
    daypart_images: int

    @property
    def uses_hour_bucket(self) -> bool:
        return self.hour_images > 0


def get_24h_schedule(
    boundaries: BoundaryConfig,
    registry: Optional['ImageRegistry'] = None,
) -> List[ScheduleEntry]:
    """Resolve every hour of the day, with bucket sizes if a registry is given."""
    entries = []
    for hour in range(24):
        daypart = resolve_daypart(hour, boundaries)
        entries.append(ScheduleEntry(
            hour=hour,
            daypart=daypart,
            hour_images=len(registry.hour_images(hour)) if registry else 0,
            daypart_images=len(registry.daypart_images(daypart)) if registry else 0,
        ))
    return entries


def format_schedule_table(entries: List[ScheduleEntry]) -> str:
    """
    Format schedule as human-readable table.

    Hours served from their own bucket are marked with '*'.
    """
    lines = [
        "Daypart Schedule (24h):",
        "HOUR   DAYPART    IMAGES",
        "-" * 30,
    ]

    for entry in entries:
        if entry.uses_hour_bucket:
            images = f"{entry.hour_images}*"
        else:
            images = str(entry.daypart_images)
        lines.append(f"{entry.hour:02d}:00  {entry.daypart.value:<10} {images}")

    return "\n".join(lines)
