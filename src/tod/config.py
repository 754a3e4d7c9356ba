# SPDX-FileCopyrightText: 2025 Tod Contributors
# SPDX-License-Identifier: MPL-2.0

"""Configuration loading and sort weights."""

import logging
import os
from dataclasses import asdict, dataclass, field, fields
from pathlib import Path

import yaml

from tod.errors import ConfigError
from tod.time import SystemClock, TimeProvider, timezone_from_str

logger = logging.getLogger(__name__)

DEFAULT_CONFIG_PATH = Path.home() / ".config" / "tod" / "tod.yaml"


@dataclass(frozen=True)
class ScoreWeights:
    """Points added to a task's sort value.

    Higher values sort first. Date weights are additive: a non-recurring
    task due today earns both due_today and not_recurring.
    """

    priority_none: int = 2
    priority_low: int = 1
    priority_medium: int = 3
    priority_high: int = 4
    no_due_date: int = 80
    overdue: int = 150
    not_recurring: int = 50
    due_today: int = 100
    # Date-time tasks within 15 minutes of now
    due_within_window: int = 200
    # Per day inside the deadline horizon
    deadline: int = 30
    deadline_days: int = 5

    @classmethod
    def from_dict(cls, data: dict | None) -> "ScoreWeights":
        """Build weights from a partial mapping, defaults for the rest.

        Raises:
            ConfigError: On unknown keys or non-integer/negative values
        """
        if not data:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError("sort_value must be a mapping")

        known = {f.name for f in fields(cls)}
        unknown = sorted(set(data) - known)
        if unknown:
            raise ConfigError(f"Unknown sort_value keys: {', '.join(unknown)}")

        for key, value in data.items():
            if isinstance(value, bool) or not isinstance(value, int) or value < 0:
                raise ConfigError(f"sort_value.{key} must be a non-negative integer, got {value!r}")

        return cls(**data)

    def to_dict(self) -> dict:
        return asdict(self)


@dataclass
class Config:
    """Runtime configuration."""

    timezone: str | None = None
    sort_value: ScoreWeights = field(default_factory=ScoreWeights)
    time_provider: TimeProvider = field(default_factory=SystemClock)
    path: Path | None = None

    def with_timezone(self, timezone: str) -> "Config":
        return Config(
            timezone=timezone,
            sort_value=self.sort_value,
            time_provider=self.time_provider,
            path=self.path,
        )


def config_path() -> Path:
    """Config file location, $TOD_CONFIG if set."""
    env_path = os.environ.get("TOD_CONFIG")
    if env_path:
        return Path(env_path).expanduser()
    return DEFAULT_CONFIG_PATH


def load_config(path: Path | None = None, time_provider: TimeProvider | None = None) -> Config:
    """Load configuration from YAML.

    A missing file yields the defaults.

    Args:
        path: Config file path, defaults to config_path()
        time_provider: Clock override, SystemClock if not given

    Returns:
        Config with timezone and sort weights from the file

    Raises:
        ConfigError: If the file can't be read or holds invalid values
    """
    path = path or config_path()
    clock = time_provider or SystemClock()

    if not path.exists():
        logger.debug(f"No config at {path}, using defaults")
        return Config(time_provider=clock, path=path)

    try:
        with open(path) as f:
            data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, OSError) as e:
        raise ConfigError(f"Could not load config {path}: {e}") from e

    if not isinstance(data, dict):
        raise ConfigError(f"Config {path} must be a mapping")

    timezone = data.get("timezone")
    if timezone is not None:
        # Raises TimezoneError for an unknown zone
        timezone_from_str(timezone)

    return Config(
        timezone=timezone,
        sort_value=ScoreWeights.from_dict(data.get("sort_value")),
        time_provider=clock,
        path=path,
    )
