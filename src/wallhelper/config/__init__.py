"""
Configuration package for wallhelper.
"""

from .main import Config, CONFIG_FILENAME, DAYPART_DIR, HOURS_DIR
from .dataclasses import (
    BoundaryConfig,
    RotationConfig,
    LoggingConfig,
    IMAGE_PLACEHOLDER,
)
from ..exceptions import ConfigError, ConfigValidationError
