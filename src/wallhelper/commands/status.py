"""Status command.

JSON output is meant for status bars such as waybar or polybar.
"""

import json
from datetime import datetime
from typing import Any, Dict, Optional

from ..config import Config
from ..registry import ImageRegistry
from ..schedule import format_schedule_table, get_24h_schedule, resolve_daypart


def get_status_json(config: Config, registry: ImageRegistry,
                    now: Optional[datetime] = None) -> Dict[str, Any]:
    """Get full status as JSON-serializable dict."""
    now = now or datetime.now()
    daypart = resolve_daypart(now.hour, config.boundaries)
    hour_count = len(registry.hour_images(now.hour))

    return {
        "config_dir": str(config.get_images_dir()),
        "hour": now.hour,
        "daypart": daypart.value,
        "candidates": hour_count or len(registry.daypart_images(daypart)),
        "uses_hour_bucket": hour_count > 0,
        "boundaries": {
            "morning": config.boundaries.morning,
            "day": config.boundaries.day,
            "evening": config.boundaries.evening,
            "night": config.boundaries.night,
        },
        "always_change": config.rotation.always_change,
        "update_interval": config.rotation.update_interval,
        "buckets": registry.bucket_counts(),
    }


def show_status(config: Config, json_output: bool = False,
                now: Optional[datetime] = None) -> None:
    """
    Display current configuration and status.

    Args:
        config: Config instance
        json_output: If True, output JSON instead of human-readable text
    """
    registry = ImageRegistry.scan(config.get_images_dir())
    status = get_status_json(config, registry, now)

    if json_output:
        print(json.dumps(status, indent=2))
        return

    print("wallhelper Status")
    print("=" * 40)

    print(f"\nConfiguration")
    print(f"  Config dir: {status['config_dir']}")
    print(f"  Command:    {config.rotation.wallpaper_command}")
    print(f"  Interval:   {config.rotation.update_interval} min")
    print(f"  Always change: {'yes' if config.rotation.always_change else 'no'}")

    print(f"\nNow")
    print(f"  Hour:       {status['hour']:02d}:00")
    print(f"  Daypart:    {status['daypart']}")
    source = f"hours/{status['hour']}" if status['uses_hour_bucket'] else f"dayparts/{status['daypart']}"
    print(f"  Candidates: {status['candidates']} from {source}")

    print(f"\nDayparts")
    for name in ("morning", "day", "evening", "night"):
        print(f"  {name:12} {status['buckets'][name]} images")

    print()
    print(format_schedule_table(get_24h_schedule(config.boundaries, registry)))
