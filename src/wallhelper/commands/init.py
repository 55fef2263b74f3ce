"""Initialization and validation commands."""

import logging
from pathlib import Path
from typing import Optional

from ..config import Config, ConfigError, ConfigValidationError
from ..exceptions import RegistryError
from ..registry import ImageRegistry
from ..schedule import get_24h_schedule


def init_config(config_dir: Optional[Path] = None) -> None:
    """Create the config directory skeleton and default config.toml."""
    logger = logging.getLogger(__name__)
    config_dir = config_dir or Config.get_config_dir()

    try:
        Config.initialize_config(config_dir)
    except ConfigError as e:
        logger.error(f"Initialization failed: {e}")
        raise

    print(f"Configuration initialized at {config_dir}")
    print(f"  Put images in {config_dir / 'dayparts'}/<morning|day|evening|night>/")
    print(f"  or in {config_dir / 'hours'}/<0-23>/ to pin them to an hour.")


def validate_config(config_dir: Optional[Path] = None) -> None:
    """
    Validate configuration and image folders and report every issue.

    Raises:
        SystemExit: With status 1 if any errors were found
    """
    errors = []
    warnings = []

    print("Validating configuration...")
    config = None
    try:
        config = Config.load(config_dir=config_dir, initialize=False)
        print("  ✓ config.toml is valid")
    except ConfigValidationError as e:
        errors.extend(e.problems)
        for problem in e.problems:
            print(f"  ✗ {problem}")
    except ConfigError as e:
        errors.append(str(e))
        print(f"  ✗ {e}")

    print("\nChecking image folders...")
    try:
        registry = ImageRegistry.scan(config_dir or Config.get_config_dir())
        print(f"  ✓ {registry.total_images()} images registered")
        counts = registry.bucket_counts()
        for name in ("morning", "day", "evening", "night"):
            if counts[name] == 0:
                warnings.append(f"No images in dayparts/{name}")
                print(f"  ⚠ dayparts/{name}: no images")
        if config is not None:
            uncovered = [
                entry.hour for entry in get_24h_schedule(config.boundaries, registry)
                if entry.hour_images == 0 and entry.daypart_images == 0
            ]
            if uncovered:
                warnings.append(f"No images at all for hours {uncovered}")
                print(f"  ⚠ hours {uncovered}: nothing to display")
    except RegistryError as e:
        errors.append(str(e))
        print(f"  ✗ {e}")

    print("\nValidation complete")
    print(f"Errors: {len(errors)}")
    print(f"Warnings: {len(warnings)}")

    if errors:
        print(f"\nConfiguration validation FAILED with {len(errors)} errors")
        raise SystemExit(1)
    else:
        print("\nConfiguration validation PASSED")
