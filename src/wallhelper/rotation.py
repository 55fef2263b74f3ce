"""
Rotation loop.

Each tick resolves the daypart for the current hour, selects an image,
decides whether to apply it, and reports how long to sleep before the next
tick. The only state carried between ticks is the last applied path, passed
in and returned explicitly so ticks can be driven without real timers.
"""

import logging
import random
import time
from dataclasses import dataclass
from datetime import datetime
from enum import Enum
from typing import Callable, Optional

from .config import Config
from .exceptions import CommandError
from .registry import ImageRegistry
from .schedule import Selection, resolve_daypart, select_image
from .wallpaper import CommandSetter, WallpaperSetter

logger = logging.getLogger(__name__)


class TickAction(str, Enum):
    APPLIED = "applied"
    FAILED = "failed"     # Setter raised CommandError
    EMPTY = "empty"       # No image for this daypart/hour
    SKIPPED = "skipped"   # Gate denied a repeat


@dataclass(frozen=True)
class TickResult:
    action: TickAction
    selection: Selection
    last_applied: str
    sleep_seconds: int


def should_apply(
    candidate: Optional[str],
    last_applied: str,
    candidate_count: int,
    always_change: bool,
) -> bool:
    """
    Gate deciding whether this tick applies its selection.

    With always_change off every tick applies. With it on, a repeat of the
    last applied image is skipped unless the bucket has at most one image,
    where a different pick can never occur.
    """
    if not always_change:
        return True
    if candidate_count <= 1:
        return True
    return candidate != last_applied


class RotationLoop:
    """
    Drives periodic wallpaper selection and application.

    Args:
        config: Validated configuration
        registry: Scanned image buckets
        setter: Capability that applies an image (default: CommandSetter
            reading wallpaper_command from config on each tick)
        clock: Returns the current local datetime
        sleep: Blocking sleep taking seconds
        rng: Random source with a choice() method
    """

    def __init__(
        self,
        config: Config,
        registry: ImageRegistry,
        setter: Optional[WallpaperSetter] = None,
        clock: Callable[[], datetime] = datetime.now,
        sleep: Callable[[float], None] = time.sleep,
        rng: Optional[random.Random] = None,
    ) -> None:
        self.config = config
        self.registry = registry
        self.setter = setter or CommandSetter(config)
        self.clock = clock
        self.sleep = sleep
        self.rng = rng

    def select(self) -> Selection:
        """Select an image for the current hour without applying it."""
        hour = self.clock().hour
        daypart = resolve_daypart(hour, self.config.boundaries)
        return select_image(daypart, hour, self.registry, self.rng)

    def tick(self, last_applied: str = "") -> TickResult:
        """
        Run one iteration of the loop.

        Args:
            last_applied: Path applied by a previous tick ("" at startup)

        Returns:
            TickResult with the next last_applied and the sleep duration

        Raises:
            ResolutionError: If the boundaries leave the current hour unclaimed
        """
        selection = self.select()
        rotation = self.config.rotation
        interval = rotation.update_interval_seconds

        if not should_apply(selection.path, last_applied, selection.candidate_count,
                            rotation.always_change):
            logger.debug(
                f"Skipping repeat of {selection.path}, retrying in {rotation.retry_delay}s"
            )
            return TickResult(TickAction.SKIPPED, selection, last_applied, rotation.retry_delay)

        if selection.path is None:
            logger.info(
                f"No image could be found for daypart {selection.daypart} "
                f"and hour {selection.hour}"
            )
            return TickResult(TickAction.EMPTY, selection, last_applied, interval)

        try:
            self.setter.set(selection.path)
        except CommandError as e:
            logger.error(f"Failed to set wallpaper: {e}")
            return TickResult(TickAction.FAILED, selection, last_applied, interval)

        logger.info(
            f"Applied {selection.path} ({selection.daypart}, hour {selection.hour}, "
            f"{selection.candidate_count} candidates)"
        )
        return TickResult(TickAction.APPLIED, selection, selection.path, interval)

    def run(self, max_ticks: Optional[int] = None, last_applied: str = "") -> str:
        """
        Tick and sleep until the process is killed.

        Args:
            max_ticks: Stop after this many ticks (None = run forever)
            last_applied: Initial rotation state

        Returns:
            Last applied path when max_ticks is reached
        """
        ticks = 0
        while max_ticks is None or ticks < max_ticks:
            result = self.tick(last_applied)
            last_applied = result.last_applied
            ticks += 1
            if result.sleep_seconds > 0:
                logger.debug(f"Sleeping {result.sleep_seconds}s after {result.action.value} tick")
                self.sleep(result.sleep_seconds)
        return last_applied
