"""Tests for configuration loading and validation."""

import pytest
from pathlib import Path

from wallhelper.config import (
    BoundaryConfig,
    Config,
    ConfigError,
    ConfigValidationError,
)
from wallhelper.config.validation import check_boundaries, collect_problems


VALID_KEYS = """
wallpaper_command = "setbg {{image}}"
always_change = false
update_interval = 10
"""


def write_config(config_dir: Path, text: str) -> Path:
    config_file = config_dir / "config.toml"
    config_file.write_text(text)
    return config_file


def test_load_valid_config(test_config, temp_config_dir):
    """Test that all keys are parsed into dataclasses."""
    assert test_config.boundaries == BoundaryConfig(6, 12, 18, 24)
    assert test_config.rotation.wallpaper_command == 'feh --bg-fill "{{image}}"'
    assert test_config.rotation.always_change is True
    assert test_config.rotation.update_interval == 30
    assert test_config.rotation.update_interval_seconds == 1800
    assert test_config.rotation.retry_delay == 2
    assert test_config.logging.level == "INFO"
    assert test_config.get_images_dir() == temp_config_dir


def test_boundaries_default_when_absent(temp_config_dir):
    """Test that missing boundary keys fall back to 6/12/18/24."""
    write_config(temp_config_dir, VALID_KEYS)

    config = Config.load(config_dir=temp_config_dir, initialize=False)

    assert config.boundaries.as_tuple() == (6, 12, 18, 24)
    assert config.rotation.retry_delay == 5


def test_partial_boundaries(temp_config_dir):
    write_config(temp_config_dir, VALID_KEYS + "evening = 17\nnight = 22\n")

    config = Config.load(config_dir=temp_config_dir, initialize=False)

    assert config.boundaries.as_tuple() == (6, 12, 17, 22)


@pytest.mark.parametrize("missing", ["wallpaper_command", "always_change", "update_interval"])
def test_required_key_missing(temp_config_dir, missing):
    """Test that each required key is reported when absent."""
    lines = [line for line in VALID_KEYS.strip().splitlines() if not line.startswith(missing)]
    write_config(temp_config_dir, "\n".join(lines))

    with pytest.raises(ConfigValidationError) as exc_info:
        Config.load(config_dir=temp_config_dir, initialize=False)

    assert f"Required key '{missing}' is missing" in exc_info.value.problems


def test_all_problems_reported_together(temp_config_dir):
    """Test that validation aggregates every problem instead of stopping at the first."""
    write_config(temp_config_dir, """
always_change = "yes"
update_interval = 0
wallpaper_command = "feh --bg-fill"
colour = "blue"
""")

    with pytest.raises(ConfigValidationError) as exc_info:
        Config.load(config_dir=temp_config_dir, initialize=False)

    problems = exc_info.value.problems
    assert len(problems) == 4
    assert any("'always_change' must be of type bool" in p for p in problems)
    assert any("Update interval (0 min)" in p for p in problems)
    assert any("{{image}} placeholder" in p for p in problems)
    assert any("Unknown key 'colour'" in p for p in problems)
    assert "4 configuration problem(s)" in str(exc_info.value)


def test_bool_rejected_for_integer_key():
    """Test that TOML booleans are not accepted as integers."""
    problems = collect_problems({
        "wallpaper_command": "x {{image}}",
        "always_change": True,
        "update_interval": True,
    })

    assert problems == ["Key 'update_interval' must be of type int, got bool"]


def test_integer_rejected_for_bool_key():
    problems = collect_problems({
        "wallpaper_command": "x {{image}}",
        "always_change": 1,
        "update_interval": 5,
    })

    assert problems == ["Key 'always_change' must be of type bool, got int"]


def test_out_of_order_boundaries_rejected(temp_config_dir):
    """Test that boundaries which would starve a daypart fail at load time."""
    write_config(temp_config_dir, VALID_KEYS + "morning = 6\nday = 18\nevening = 12\nnight = 24\n")

    with pytest.raises(ConfigValidationError) as exc_info:
        Config.load(config_dir=temp_config_dir, initialize=False)

    message = str(exc_info.value)
    assert "morning < day < evening < night" in message
    assert "dayparts never shown: ['day']" in message


def test_equal_boundaries_rejected():
    problems = check_boundaries(BoundaryConfig(6, 12, 12, 24))

    assert len(problems) == 1
    assert "dayparts never shown: ['day']" in problems[0]


def test_boundary_out_of_range():
    problems = check_boundaries(BoundaryConfig(morning=-1, night=25))

    assert len(problems) == 2
    assert "Boundary 'morning' (-1) out of range" in problems[0]
    assert "Boundary 'night' (25) out of range" in problems[1]


def test_wrapping_boundaries_accepted():
    """Test that a night which ends before the end of the day is valid."""
    assert check_boundaries(BoundaryConfig(6, 12, 18, 20)) == []
    assert check_boundaries(BoundaryConfig(6, 12, 18, 24)) == []


def test_update_interval_upper_bound():
    """Test that an interval too long to sleep on is rejected at load time."""
    base = {"wallpaper_command": "x {{image}}", "always_change": True}

    assert collect_problems({**base, "update_interval": 7 * 24 * 60}) == []
    problems = collect_problems({**base, "update_interval": 300_000_000})

    assert len(problems) == 1
    assert "must be at most 10080 minutes" in problems[0]


def test_retry_delay_upper_bound():
    problems = collect_problems({
        "wallpaper_command": "x {{image}}",
        "always_change": True,
        "update_interval": 5,
        "retry_delay": 10 ** 12,
    })

    assert len(problems) == 1
    assert "Retry delay" in problems[0]


def test_command_timeout_loaded(temp_config_dir):
    write_config(temp_config_dir, VALID_KEYS + "command_timeout = 30\n")

    config = Config.load(config_dir=temp_config_dir, initialize=False)

    assert config.rotation.command_timeout == 30


def test_command_timeout_defaults_to_none(test_config):
    assert test_config.rotation.command_timeout is None


def test_command_timeout_must_be_positive():
    problems = collect_problems({
        "wallpaper_command": "x {{image}}",
        "always_change": True,
        "update_interval": 5,
        "command_timeout": 0,
    })

    assert problems == ["Command timeout (0s) must be at least 1 second."]


def test_invalid_log_level(temp_config_dir):
    write_config(temp_config_dir, VALID_KEYS + "[logging]\nlevel = \"LOUD\"\n")

    with pytest.raises(ConfigValidationError) as exc_info:
        Config.load(config_dir=temp_config_dir, initialize=False)

    assert "Invalid log level: LOUD" in str(exc_info.value)


def test_unparseable_config(temp_config_dir):
    """Test that a TOML syntax error is a ConfigError, not a validation error."""
    write_config(temp_config_dir, "always_change = \n")

    with pytest.raises(ConfigError) as exc_info:
        Config.load(config_dir=temp_config_dir, initialize=False)

    assert not isinstance(exc_info.value, ConfigValidationError)
    assert "Failed to parse" in str(exc_info.value)


def test_missing_config_file_without_init(tmp_path):
    with pytest.raises(ConfigError) as exc_info:
        Config.load(config_dir=tmp_path, initialize=False)

    assert "Config file not found" in str(exc_info.value)


def test_config_dir_uses_xdg(monkeypatch, tmp_path):
    monkeypatch.setenv("XDG_CONFIG_HOME", str(tmp_path))

    assert Config.get_config_dir() == tmp_path / "wallhelper"


def test_config_dir_defaults_to_home(monkeypatch, tmp_path):
    monkeypatch.delenv("XDG_CONFIG_HOME", raising=False)
    monkeypatch.setenv("HOME", str(tmp_path))

    assert Config.get_config_dir() == tmp_path / ".config" / "wallhelper"


class TestInitializeConfig:
    """Tests for config directory bootstrapping."""

    def test_creates_skeleton(self, tmp_path):
        config_dir = tmp_path / "wallhelper"

        Config.initialize_config(config_dir)

        for name in ("morning", "day", "evening", "night"):
            assert (config_dir / "dayparts" / name).is_dir()
        for hour in range(24):
            assert (config_dir / "hours" / str(hour)).is_dir()
        assert (config_dir / "config.toml").is_file()

    def test_default_config_is_valid(self, tmp_path):
        """Test that the generated default config loads cleanly."""
        config = Config.load(config_dir=tmp_path, initialize=True)

        assert config.boundaries.as_tuple() == (6, 12, 18, 24)
        assert config.rotation.always_change is True
        assert config.rotation.update_interval == 60
        assert "{{image}}" in config.rotation.wallpaper_command

    def test_preserves_existing_files(self, temp_config_dir):
        original = (temp_config_dir / "config.toml").read_text()

        Config.initialize_config(temp_config_dir)

        assert (temp_config_dir / "config.toml").read_text() == original
        assert (temp_config_dir / "dayparts" / "morning" / "sunrise.jpg").exists()
