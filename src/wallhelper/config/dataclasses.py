"""
Configuration dataclasses for wallhelper.
"""

from dataclasses import dataclass, field
from typing import Optional


# Placeholder substituted with the chosen image path in wallpaper_command
IMAGE_PLACEHOLDER = "{{image}}"

DEFAULT_RETRY_DELAY = 5

# Upper limits; longer sleeps overflow the platform timeout
MAX_UPDATE_INTERVAL = 7 * 24 * 60  # Minutes
MAX_RETRY_DELAY = 24 * 60 * 60  # Seconds


@dataclass(frozen=True)
class BoundaryConfig:
    """
    Starting hour of each daypart.

    Together with the wrap past midnight these partition the day into four
    half-open intervals. Ordering is checked by the validation pass, not here.
    """
    morning: int = 6
    day: int = 12
    evening: int = 18
    night: int = 24

    def as_tuple(self) -> tuple:
        return (self.morning, self.day, self.evening, self.night)

    def __str__(self) -> str:
        return (
            f"morning={self.morning}, day={self.day}, "
            f"evening={self.evening}, night={self.night}"
        )


@dataclass
class RotationConfig:
    """Rotation loop settings."""
    wallpaper_command: str
    always_change: bool
    update_interval: int  # Minutes
    retry_delay: int = DEFAULT_RETRY_DELAY  # Seconds to wait after a skipped tick
    command_timeout: Optional[int] = None  # Seconds; None waits for the command forever

    @property
    def update_interval_seconds(self) -> int:
        return self.update_interval * 60


@dataclass
class LoggingConfig:
    """Logging configuration."""
    level: str = "INFO"
