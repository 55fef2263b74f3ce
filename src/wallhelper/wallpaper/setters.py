"""
Wallpaper setter implementations.

A setter is the capability the rotation loop calls to put an image on the
desktop. Failures are raised as CommandError so the caller decides how to
report them.
"""

import logging
import subprocess
from abc import ABC, abstractmethod
from typing import Optional

from ..config import Config
from ..config.dataclasses import IMAGE_PLACEHOLDER
from ..exceptions import CommandError


class WallpaperSetter(ABC):
    """Abstract base class for wallpaper setters."""

    def __init__(self) -> None:
        self.logger = logging.getLogger(f"{__name__}.{self.__class__.__name__}")

    @abstractmethod
    def set(self, image_path: str) -> None:
        """
        Set the desktop background.

        Args:
            image_path: Absolute path to the image

        Raises:
            CommandError: If the wallpaper could not be applied
        """
        pass


class CommandSetter(WallpaperSetter):
    """
    Wallpaper setter using the wallpaper_command template.

    The template and timeout are read from the config on every call, so
    edits to the live config apply to the next image. The {{image}}
    placeholder is replaced verbatim with the image path, so templates
    should quote it themselves, e.g. feh --bg-fill "{{image}}".
    """

    def __init__(self, config: Config) -> None:
        super().__init__()
        self.config = config

    @property
    def template(self) -> str:
        return self.config.rotation.wallpaper_command

    @property
    def timeout(self) -> Optional[int]:
        return self.config.rotation.command_timeout

    def render(self, image_path: str) -> str:
        """
        Raises:
            CommandError: If the template has lost its {{image}} placeholder
        """
        template = self.template
        if IMAGE_PLACEHOLDER not in template:
            raise CommandError(
                f"wallpaper_command must contain {IMAGE_PLACEHOLDER}: {template!r}"
            )
        return template.replace(IMAGE_PLACEHOLDER, image_path)

    def set(self, image_path: str) -> None:
        cmd_str = self.render(image_path)
        self.logger.info(f"Running: {cmd_str}")
        self._run_command(cmd_str)

    def _run_command(self, cmd_str: str) -> None:
        """
        Run a command through the shell and wait for it to exit.

        Raises:
            CommandError: On non-zero exit, timeout, or OS failure
        """
        try:
            result = subprocess.run(
                cmd_str,
                shell=True,
                capture_output=True,
                text=True,
                timeout=self.timeout,
            )
        except subprocess.TimeoutExpired:
            raise CommandError(f"Command timed out after {self.timeout}s: {cmd_str}")
        except OSError as e:
            raise CommandError(f"OS error executing command {cmd_str}: {e}")

        if result.returncode != 0:
            error_msg = f"Command failed with exit code {result.returncode}: {cmd_str}"
            if result.stderr:
                error_msg += f"\nStderr: {result.stderr.strip()}"
            elif result.stdout:
                error_msg += f"\nStdout: {result.stdout.strip()}"
            raise CommandError(error_msg)

        self.logger.debug(f"Command succeeded: {cmd_str}")


class DryRunSetter(CommandSetter):
    """Logs the rendered command instead of running it."""

    def set(self, image_path: str) -> None:
        self.logger.info(f"Would run: {self.render(image_path)}")
