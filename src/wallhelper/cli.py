"""
Command-line interface for wallhelper.

Usage:
    wallhelper [command] [options]

Commands:
    run       Rotate wallpapers forever (default)
    once      Apply one wallpaper for the current hour and exit
    status    Show configuration, current daypart and schedule
    init      Create the config directory skeleton
    validate  Validate configuration and image folders
"""

import argparse
import logging
import sys
from pathlib import Path

from .config import Config
from .exceptions import (
    WallHelperError,
    ConfigError,
    ConfigValidationError,
    RegistryError,
    ScheduleError,
)
from .commands import (
    run_rotation,
    apply_once,
    show_status,
    init_config,
    validate_config,
)


def setup_logging(level: str = "INFO") -> None:
    """Configure logging."""
    logging.basicConfig(
        level=getattr(logging, level.upper()),
        format="%(asctime)s %(levelname)-8s %(name)s: %(message)s",
        datefmt="%H:%M:%S",
        stream=sys.stderr,
    )


def build_parser() -> argparse.ArgumentParser:
    parser = argparse.ArgumentParser(
        prog="wallhelper",
        description="Rotate desktop wallpapers by time of day"
    )

    parser.add_argument(
        "-v", "--verbose",
        action="store_true",
        help="Enable debug logging"
    )
    parser.add_argument(
        "-c", "--config-dir",
        type=Path,
        help="Config directory (default: $XDG_CONFIG_HOME/wallhelper)"
    )
    parser.add_argument(
        "--no-init",
        action="store_true",
        help="Skip auto-initialization of the config directory"
    )
    parser.add_argument(
        "--dry-run",
        action="store_true",
        help="Log the wallpaper command instead of running it"
    )

    subparsers = parser.add_subparsers(dest="command", help="Commands")

    subparsers.add_parser("run", help="Rotate wallpapers forever (default)")
    subparsers.add_parser("once", help="Apply one wallpaper and exit")
    status_parser = subparsers.add_parser("status", help="Show status")
    status_parser.add_argument(
        "--json",
        action="store_true",
        help="Output status as JSON"
    )
    subparsers.add_parser("init", help="Initialize config directory")
    subparsers.add_parser("validate", help="Validate configuration")

    return parser


def main(argv=None) -> int:
    """Main entry point."""
    parser = build_parser()
    args = parser.parse_args(argv)

    logger = logging.getLogger(__name__)
    command = args.command or "run"

    try:
        # These work on a missing or broken config
        if command == "init":
            setup_logging("DEBUG" if args.verbose else "INFO")
            init_config(args.config_dir)
            return 0
        if command == "validate":
            setup_logging("DEBUG" if args.verbose else "WARNING")
            validate_config(args.config_dir)
            return 0

        config = Config.load(
            config_dir=args.config_dir,
            initialize=not args.no_init,
        )

        level = "DEBUG" if args.verbose else config.logging.level
        setup_logging(level)

        if command == "run":
            run_rotation(config, dry_run=args.dry_run)
        elif command == "once":
            if not apply_once(config, dry_run=args.dry_run):
                return 1
        elif command == "status":
            show_status(config, json_output=args.json)
        else:
            parser.print_help()
            return 1

        return 0

    except KeyboardInterrupt:
        print("\nCancelled by user", file=sys.stderr)
        return 130

    except ConfigValidationError as e:
        print(f"\n❌ Configuration Validation Error: {e}", file=sys.stderr)
        print("\nRun 'wallhelper validate' for detailed diagnostics.", file=sys.stderr)
        return 78  # EX_CONFIG

    except ConfigError as e:
        print(f"\n❌ Configuration Error: {e}", file=sys.stderr)
        return 78  # EX_CONFIG

    except RegistryError as e:
        print(f"\n❌ Image Folder Error: {e}", file=sys.stderr)
        return 66  # EX_NOINPUT

    except ScheduleError as e:
        print(f"\n❌ Schedule Error: {e}", file=sys.stderr)
        return 78  # EX_CONFIG

    except WallHelperError as e:
        print(f"\n❌ Error: {e}", file=sys.stderr)
        logger.error(str(e))
        if args.verbose:
            raise
        return 1

    except Exception as e:
        # Unexpected errors - show full traceback in verbose mode
        print(f"\n❌ Unexpected Error: {type(e).__name__}: {e}", file=sys.stderr)
        logger.error(f"Unexpected error: {type(e).__name__}: {e}")
        if args.verbose:
            raise
        print("\nRun with -v/--verbose for full traceback.", file=sys.stderr)
        return 1


if __name__ == "__main__":
    sys.exit(main())
