"""
Configuration validation for wallhelper.

Every check appends to a list of problems instead of raising on the first
one, so a broken config is reported in full at startup.
"""

from typing import Any, Dict, List

from .dataclasses import (
    BoundaryConfig,
    IMAGE_PLACEHOLDER,
    MAX_RETRY_DELAY,
    MAX_UPDATE_INTERVAL,
)


BOUNDARY_KEYS = ('morning', 'day', 'evening', 'night')
REQUIRED_KEYS = ('wallpaper_command', 'always_change', 'update_interval')
VALID_LOG_LEVELS = ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']

# Top-level keys and their types; nested dicts describe tables
VALID_STRUCTURE: Dict[str, Any] = {
    'morning': int,
    'day': int,
    'evening': int,
    'night': int,
    'wallpaper_command': str,
    'always_change': bool,
    'update_interval': int,
    'retry_delay': int,
    'command_timeout': int,
    'logging': {
        'level': str,
    },
}


def _type_matches(value: Any, expected: type) -> bool:
    # bool is a subclass of int, but `update_interval = true` is a mistake
    if expected is int:
        return isinstance(value, int) and not isinstance(value, bool)
    return isinstance(value, expected)


def check_toml_structure(config_dict: Dict[str, Any]) -> List[str]:
    """
    Check for unknown keys, mistyped values and missing required keys.

    Args:
        config_dict: Loaded TOML configuration dictionary

    Returns:
        List of human-readable problems (empty if the structure is valid)
    """
    problems: List[str] = []

    for key, value in config_dict.items():
        if key not in VALID_STRUCTURE:
            problems.append(
                f"Unknown key '{key}'. Valid keys: {list(VALID_STRUCTURE.keys())}"
            )
            continue

        expected = VALID_STRUCTURE[key]
        if isinstance(expected, dict):
            if not isinstance(value, dict):
                problems.append(f"'{key}' must be a table, got {type(value).__name__}")
                continue
            for sub_key, sub_value in value.items():
                if sub_key not in expected:
                    problems.append(
                        f"Unknown key '{sub_key}' in table '{key}'. "
                        f"Valid keys: {list(expected.keys())}"
                    )
                elif not _type_matches(sub_value, expected[sub_key]):
                    problems.append(
                        f"Key '{key}.{sub_key}' must be of type {expected[sub_key].__name__}, "
                        f"got {type(sub_value).__name__}"
                    )
        elif not _type_matches(value, expected):
            problems.append(
                f"Key '{key}' must be of type {expected.__name__}, got {type(value).__name__}"
            )

    for key in REQUIRED_KEYS:
        if key not in config_dict:
            problems.append(f"Required key '{key}' is missing")

    return problems


def check_boundaries(boundaries: BoundaryConfig) -> List[str]:
    """
    Check boundary hours are in range and strictly increasing.

    Only night wraps past midnight, so morning < day < evening < night must
    hold as plain integers. Out-of-order boundaries never fail resolution;
    they silently starve a daypart, which is why they are rejected here.
    """
    from ..schedule import get_24h_schedule

    problems: List[str] = []
    for key, value in zip(BOUNDARY_KEYS, boundaries.as_tuple()):
        if not 0 <= value <= 24:
            problems.append(f"Boundary '{key}' ({value}) out of range. Must be between 0 and 24.")
    if problems:
        return problems

    values = boundaries.as_tuple()
    if any(earlier >= later for earlier, later in zip(values, values[1:])):
        reachable = {entry.daypart.value for entry in get_24h_schedule(boundaries)}
        unreachable = [key for key in BOUNDARY_KEYS if key not in reachable]
        problems.append(
            f"Boundaries ({boundaries}) must satisfy morning < day < evening < night; "
            f"dayparts never shown: {unreachable}. "
            "Ensure that your dayparts are in order and don't overlap."
        )
    return problems


def check_values(config_dict: Dict[str, Any]) -> List[str]:
    """Range and format checks for keys whose types are already correct."""
    problems: List[str] = []

    command = config_dict.get('wallpaper_command')
    if isinstance(command, str):
        if not command.strip():
            problems.append("'wallpaper_command' must not be empty")
        elif IMAGE_PLACEHOLDER not in command:
            problems.append(
                f"'wallpaper_command' must contain {IMAGE_PLACEHOLDER} placeholder, got: {command!r}"
            )

    interval = config_dict.get('update_interval')
    if _type_matches(interval, int):
        if interval <= 0:
            problems.append(f"Update interval ({interval} min) must be at least 1 minute.")
        elif interval > MAX_UPDATE_INTERVAL:
            problems.append(
                f"Update interval ({interval} min) must be at most {MAX_UPDATE_INTERVAL} minutes (one week)."
            )

    retry_delay = config_dict.get('retry_delay')
    if _type_matches(retry_delay, int):
        if retry_delay < 0:
            problems.append(f"Retry delay ({retry_delay}s) must not be negative.")
        elif retry_delay > MAX_RETRY_DELAY:
            problems.append(f"Retry delay ({retry_delay}s) must be at most {MAX_RETRY_DELAY}s.")

    timeout = config_dict.get('command_timeout')
    if _type_matches(timeout, int) and timeout <= 0:
        problems.append(f"Command timeout ({timeout}s) must be at least 1 second.")

    logging_table = config_dict.get('logging')
    level = logging_table.get('level') if isinstance(logging_table, dict) else None
    if isinstance(level, str) and level.upper() not in VALID_LOG_LEVELS:
        problems.append(f"Invalid log level: {level}. Must be one of: {VALID_LOG_LEVELS}")

    return problems


def collect_problems(config_dict: Dict[str, Any]) -> List[str]:
    """Run every check over a parsed config document."""
    problems = check_toml_structure(config_dict)
    problems.extend(check_values(config_dict))

    boundary_values = {
        key: config_dict[key] for key in BOUNDARY_KEYS
        if key in config_dict and _type_matches(config_dict[key], int)
    }
    if all(_type_matches(config_dict.get(key, 0), int) for key in BOUNDARY_KEYS):
        problems.extend(check_boundaries(BoundaryConfig(**boundary_values)))

    return problems
