"""Test configuration and fixtures."""

import tempfile
from datetime import datetime
from pathlib import Path
from typing import Generator, List, Optional

import pytest

from wallhelper.config import Config
from wallhelper.exceptions import CommandError
from wallhelper.registry import ImageRegistry
from wallhelper.schedule import Daypart
from wallhelper.wallpaper import WallpaperSetter


TEST_CONFIG_TOML = """
morning = 6
day = 12
evening = 18
night = 24

wallpaper_command = "feh --bg-fill \\"{{image}}\\""
always_change = true
update_interval = 30
retry_delay = 2

[logging]
level = "INFO"
"""


class FirstChoice:
    """Deterministic random source: always picks the first element."""

    def choice(self, seq):
        return seq[0]


class SequenceChoice:
    """Deterministic random source cycling through indices."""

    def __init__(self, indices: List[int]) -> None:
        self.indices = list(indices)
        self.calls = 0

    def choice(self, seq):
        index = self.indices[self.calls % len(self.indices)]
        self.calls += 1
        return seq[index % len(seq)]


class RecordingSetter(WallpaperSetter):
    """Setter that records applied paths and optionally fails."""

    def __init__(self, fail: bool = False) -> None:
        super().__init__()
        self.applied: List[str] = []
        self.fail = fail

    def set(self, image_path: str) -> None:
        if self.fail:
            raise CommandError(f"Command failed with exit code 1: setter {image_path}")
        self.applied.append(image_path)


class FakeClock:
    """Clock returning a settable hour."""

    def __init__(self, hour: int = 9) -> None:
        self.hour = hour

    def __call__(self) -> datetime:
        return datetime(2024, 3, 1, self.hour, 15)


def make_registry(
    dayparts: Optional[dict] = None,
    hours: Optional[dict] = None,
) -> ImageRegistry:
    """Build a registry from {Daypart: [paths]} and {hour: [paths]}."""
    dayparts = dayparts or {}
    hours = hours or {}
    return ImageRegistry(
        {Daypart(k): tuple(v) for k, v in dayparts.items()},
        [tuple(hours.get(hour, ())) for hour in range(24)],
    )


@pytest.fixture
def temp_config_dir() -> Generator[Path, None, None]:
    """Create a temporary config directory with bucket folders and a few images."""
    with tempfile.TemporaryDirectory() as temp_dir:
        config_dir = Path(temp_dir)

        for daypart in Daypart:
            (config_dir / "dayparts" / daypart.value).mkdir(parents=True)
        for hour in range(24):
            (config_dir / "hours" / str(hour)).mkdir(parents=True)

        (config_dir / "dayparts" / "morning" / "sunrise.jpg").write_bytes(b"jpg")
        (config_dir / "dayparts" / "morning" / "coffee.png").write_bytes(b"png")
        (config_dir / "dayparts" / "night" / "stars.jpg").write_bytes(b"jpg")
        (config_dir / "hours" / "12" / "noon.jpg").write_bytes(b"jpg")

        (config_dir / "config.toml").write_text(TEST_CONFIG_TOML)

        yield config_dir


@pytest.fixture
def test_config(temp_config_dir: Path) -> Config:
    """Load the test config without touching the user's config directory."""
    return Config.load(config_dir=temp_config_dir, initialize=False)


@pytest.fixture
def registry(temp_config_dir: Path) -> ImageRegistry:
    return ImageRegistry.scan(temp_config_dir)


@pytest.fixture
def recording_setter() -> RecordingSetter:
    return RecordingSetter()


@pytest.fixture
def fake_clock() -> FakeClock:
    return FakeClock()
