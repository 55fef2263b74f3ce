"""
Common exception classes for wallhelper.

Provides domain-specific exceptions for consistent error handling across modules.
All exceptions inherit from WallHelperError for unified catching at CLI level.
"""

from typing import List, Optional


class WallHelperError(Exception):
    """
    Base exception for all wallhelper errors.

    All domain-specific exceptions inherit from this class, allowing
    callers to catch all wallhelper errors with a single except clause.
    """
    pass


# ============================================================================
# Configuration Errors
# ============================================================================

class ConfigError(WallHelperError):
    """
    Configuration-related errors.

    Raised when:
    - Config file is unreadable or not valid TOML
    - Config directory cannot be created
    - Unknown keys are present in the config document
    """
    pass


class ConfigValidationError(ConfigError):
    """
    Config value validation failed.

    Collects every problem found during the startup validation pass so the
    operator can fix them all at once instead of one per run.
    """

    def __init__(self, problems: List[str], config_file: Optional[object] = None) -> None:
        self.problems = list(problems)
        self.config_file = config_file
        where = f" in {config_file}" if config_file else ""
        lines = [f"{len(self.problems)} configuration problem(s){where}:"]
        lines.extend(f"  - {problem}" for problem in self.problems)
        super().__init__("\n".join(lines))


# ============================================================================
# Registry Errors
# ============================================================================

class RegistryError(WallHelperError):
    """
    Image registry scan failed.

    Raised when a daypart or hour bucket directory is missing or unreadable.
    """
    pass


# ============================================================================
# Schedule Errors
# ============================================================================

class ScheduleError(WallHelperError):
    """Daypart scheduling errors."""
    pass


class ResolutionError(ScheduleError):
    """
    No daypart claims the given hour.

    Never defaulted to a daypart; the caller must surface it.
    """

    def __init__(self, hour: int, boundaries: object) -> None:
        self.hour = hour
        self.boundaries = boundaries
        super().__init__(
            f"Hour {hour} doesn't match any daypart for boundaries {boundaries}. "
            "Ensure that your dayparts are in order and don't overlap."
        )


# ============================================================================
# Command Errors
# ============================================================================

class CommandError(WallHelperError):
    """
    Wallpaper command execution errors.

    Raised when the external setter command cannot be started or exits
    with a non-zero status.
    """
    pass
