"""
Main Config class for wallhelper.
"""

import os
import logging
from pathlib import Path
from typing import Any, Dict, Optional
from dataclasses import dataclass, field

try:
    import tomli
except ImportError:
    raise ImportError("Required package 'tomli' not found. Install with: pip install tomli")

from ..exceptions import ConfigError, ConfigValidationError

from .dataclasses import (
    BoundaryConfig,
    RotationConfig,
    LoggingConfig,
    DEFAULT_RETRY_DELAY,
)
from .validation import BOUNDARY_KEYS, collect_problems


DAYPART_DIR = "dayparts"
HOURS_DIR = "hours"
CONFIG_FILENAME = "config.toml"

DEFAULT_CONFIG_TOML = """\
# Hour at which each daypart starts (0-24). Night wraps past midnight.
morning = 6
day = 12
evening = 18
night = 24

# Command used to set the wallpaper. {{image}} is replaced with the image path.
wallpaper_command = "feh --bg-fill \\"{{image}}\\""

# Only switch when a different image is available
always_change = true

# Minutes between wallpaper changes
update_interval = 60

# Seconds to wait before re-checking when always_change skipped a repeat
retry_delay = 5

# Seconds before a hung wallpaper_command is killed (unset waits forever)
# command_timeout = 30

[logging]
level = "INFO"
"""


@dataclass
class Config:
    """
    Main configuration class for wallhelper.

    Configuration is loaded from a TOML file in the config directory, which
    also holds the dayparts/ and hours/ image buckets.
    """

    rotation: RotationConfig
    boundaries: BoundaryConfig = field(default_factory=BoundaryConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)
    config_dir: Optional[Path] = None

    def get_images_dir(self) -> Path:
        """Directory holding the dayparts/ and hours/ buckets."""
        return self.config_dir if self.config_dir is not None else self.get_config_dir()

    @classmethod
    def get_config_dir(cls) -> Path:
        """
        Get user configuration directory.

        Uses XDG_CONFIG_HOME if set, otherwise defaults to ~/.config.
        """
        xdg_config = os.environ.get("XDG_CONFIG_HOME")
        if xdg_config:
            return Path(xdg_config) / "wallhelper"
        return Path.home() / ".config" / "wallhelper"

    @classmethod
    def initialize_config(cls, config_dir: Optional[Path] = None) -> None:
        """
        Create the config directory skeleton if parts of it are missing.

        Creates dayparts/<name>/ for each daypart, hours/0..23/, and a default
        config.toml. Existing files and directories are left untouched.

        Args:
            config_dir: Directory to initialize (defaults to get_config_dir())
        """
        from ..schedule import Daypart

        logger = logging.getLogger(__name__)
        config_dir = config_dir or cls.get_config_dir()

        bucket_dirs = [config_dir / DAYPART_DIR / daypart.value for daypart in Daypart]
        bucket_dirs += [config_dir / HOURS_DIR / str(hour) for hour in range(24)]

        try:
            for bucket_dir in bucket_dirs:
                if not bucket_dir.exists():
                    bucket_dir.mkdir(parents=True)
                    logger.debug(f"Created bucket directory {bucket_dir}")
        except OSError as e:
            raise ConfigError(f"Failed to create config directory {bucket_dir}: {e}")

        config_file = config_dir / CONFIG_FILENAME
        if not config_file.exists():
            try:
                config_file.write_text(DEFAULT_CONFIG_TOML, encoding="utf-8")
            except OSError as e:
                raise ConfigError(f"Failed to create default config file {config_file}: {e}")
            logger.info(f"Wrote default config to {config_file}")

    @classmethod
    def from_dict(cls, config_dict: Dict[str, Any], config_dir: Optional[Path] = None,
                  config_file: Optional[Path] = None) -> 'Config':
        """
        Validate a parsed config document and build a Config from it.

        Raises:
            ConfigValidationError: Listing every problem found
        """
        problems = collect_problems(config_dict)
        if problems:
            raise ConfigValidationError(problems, config_file)

        boundaries = BoundaryConfig(
            **{key: config_dict[key] for key in BOUNDARY_KEYS if key in config_dict}
        )
        rotation = RotationConfig(
            wallpaper_command=config_dict['wallpaper_command'],
            always_change=config_dict['always_change'],
            update_interval=config_dict['update_interval'],
            retry_delay=config_dict.get('retry_delay', DEFAULT_RETRY_DELAY),
            command_timeout=config_dict.get('command_timeout'),
        )
        logging_config = LoggingConfig(**config_dict.get('logging', {}))

        return cls(
            rotation=rotation,
            boundaries=boundaries,
            logging=logging_config,
            config_dir=config_dir,
        )

    @classmethod
    def load(
        cls,
        config_dir: Optional[Path] = None,
        config_file: Optional[Path] = None,
        initialize: bool = True,
    ) -> 'Config':
        """
        Load and validate configuration from TOML.

        Args:
            config_dir: Config directory (defaults to get_config_dir())
            config_file: Config file path (defaults to <config_dir>/config.toml)
            initialize: Whether to create missing directories and default config

        Returns:
            Validated Config instance
        """
        logger = logging.getLogger(__name__)

        config_dir = config_dir or cls.get_config_dir()
        if initialize:
            cls.initialize_config(config_dir)

        config_file = config_file or config_dir / CONFIG_FILENAME

        try:
            with open(config_file, 'rb') as f:
                config_dict = tomli.load(f)
        except FileNotFoundError:
            raise ConfigError(
                f"Config file not found: {config_file}\n"
                "Run 'wallhelper init' to create a default one."
            )
        except tomli.TOMLDecodeError as e:
            raise ConfigError(f"Failed to parse {config_file}: {e}")
        except OSError as e:
            raise ConfigError(f"Failed to read config file {config_file}: {e}")

        config = cls.from_dict(config_dict, config_dir=config_dir, config_file=config_file)
        logger.info(f"Loaded config from {config_file}")
        return config
