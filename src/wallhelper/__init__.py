"""
wallhelper - Time-of-day wallpaper rotator.

Picks a background from per-daypart and per-hour image folders and applies
it with a user-supplied shell command on a fixed interval.
"""

__version__ = "0.1.0"

from .config import Config, BoundaryConfig, RotationConfig
from .registry import ImageRegistry
from .schedule import Daypart, Selection, resolve_daypart, select_image
from .rotation import RotationLoop, TickAction, TickResult, should_apply
from .wallpaper import WallpaperSetter, CommandSetter

__all__ = [
    "Config",
    "BoundaryConfig",
    "RotationConfig",
    "ImageRegistry",
    "Daypart",
    "Selection",
    "resolve_daypart",
    "select_image",
    "RotationLoop",
    "TickAction",
    "TickResult",
    "should_apply",
    "WallpaperSetter",
    "CommandSetter",
]
