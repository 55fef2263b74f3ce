"""CLI commands module."""

from .run import run_rotation, apply_once, build_loop
from .status import show_status, get_status_json
from .init import init_config, validate_config

__all__ = [
    "run_rotation",
    "apply_once",
    "build_loop",
    "show_status",
    "get_status_json",
    "init_config",
    "validate_config",
]
