"""Rotation commands."""

import logging
from typing import Optional

from ..config import Config
from ..registry import ImageRegistry
from ..rotation import RotationLoop, TickAction
from ..wallpaper import CommandSetter, DryRunSetter

logger = logging.getLogger(__name__)


def build_loop(config: Config, dry_run: bool = False) -> RotationLoop:
    """Scan the image buckets and wire up a RotationLoop for this config."""
    registry = ImageRegistry.scan(config.get_images_dir())
    setter_cls = DryRunSetter if dry_run else CommandSetter
    setter = setter_cls(config)
    return RotationLoop(config, registry, setter=setter)


def run_rotation(config: Config, dry_run: bool = False, max_ticks: Optional[int] = None) -> None:
    """
    Run the rotation loop.

    Does not return unless max_ticks is given; stop with Ctrl-C or a signal.
    """
    loop = build_loop(config, dry_run=dry_run)
    logger.info(
        f"Starting rotation: every {config.rotation.update_interval} min, "
        f"always_change={config.rotation.always_change}, boundaries ({config.boundaries})"
    )
    loop.run(max_ticks=max_ticks)


def apply_once(config: Config, dry_run: bool = False) -> bool:
    """
    Select and apply a single image for the current hour, then return.

    Returns:
        True if an image was applied
    """
    loop = build_loop(config, dry_run=dry_run)
    result = loop.tick()

    if result.action == TickAction.APPLIED:
        print(f"Applied: {result.selection.path}")
        return True
    if result.action == TickAction.EMPTY:
        print(
            f"No image found for daypart {result.selection.daypart} "
            f"and hour {result.selection.hour}"
        )
    else:
        print(f"Failed to apply {result.selection.path}")
    return False
