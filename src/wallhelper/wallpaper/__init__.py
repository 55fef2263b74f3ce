"""Wallpaper management module."""

from .setters import WallpaperSetter, CommandSetter, DryRunSetter

__all__ = ["WallpaperSetter", "CommandSetter", "DryRunSetter"]
