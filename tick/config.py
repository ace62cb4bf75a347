"""
Configuration -- Centralized settings management

Config hierarchy (highest to lowest priority):
  1. --home flag (selects the tick home directory)
  2. Environment variables (TICK_HOME, TICK_HABITS_FILE, TICK_LOG_FILE, TICK_SYMBOLS)
  3. User config (<home>/config.yaml)
  4. Defaults

The resolved paths are handed to the stores explicitly. Nothing else in the
package looks at the environment or the home directory.
"""

import logging
import os
import sys
import yaml
from pathlib import Path
from dataclasses import dataclass, field
from typing import Optional, Dict, Any

from .presentation.symbols import get_symbols

logger = logging.getLogger(__name__)

DEFAULT_HOME = Path.home() / ".tick"
CONFIG_FILE = "config.yaml"
HABITS_FILE = "habits"
LOG_FILE = "log"

DEFAULT_NAME_WIDTH = 25
DEFAULT_HISTORY_DAYS = 61


def resolve_home(home: Optional[Path] = None) -> Path:
    """Tick home directory: explicit argument, then TICK_HOME, then ~/.tick."""
    if home:
        return Path(home).expanduser()
    if os.environ.get("TICK_HOME"):
        return Path(os.environ["TICK_HOME"]).expanduser()
    return DEFAULT_HOME


@dataclass
class PathsConfig:
    """Locations of the two text sources. None = inside the home directory."""
    habits: Optional[str] = None
    log: Optional[str] = None

    def habits_path(self, home: Path) -> Path:
        return Path(self.habits).expanduser() if self.habits else home / HABITS_FILE

    def log_path(self, home: Path) -> Path:
        return Path(self.log).expanduser() if self.log else home / LOG_FILE


@dataclass
class DisplayConfig:
    """Display preferences."""
    symbols: str = "auto"  # "unicode" | "ascii" | "auto"
    name_width: int = DEFAULT_NAME_WIDTH

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        valid_symbols = ("unicode", "ascii", "auto")
        if self.symbols not in valid_symbols:
            return f"Unknown symbols setting '{self.symbols}'. Valid: {', '.join(valid_symbols)}"
        if not isinstance(self.name_width, int) or self.name_width < 1:
            return f"Invalid name_width '{self.name_width}'. Must be a positive integer"
        return None


@dataclass
class HistoryConfig:
    """History view preferences."""
    days: int = DEFAULT_HISTORY_DAYS  # window length, today included

    def validate(self) -> Optional[str]:
        """Validate config. Returns error message or None if valid."""
        if not isinstance(self.days, int) or self.days < 1:
            return f"Invalid history days '{self.days}'. Must be a positive integer"
        return None


@dataclass
class Config:
    """Application configuration."""
    paths: PathsConfig = field(default_factory=PathsConfig)
    display: DisplayConfig = field(default_factory=DisplayConfig)
    history: HistoryConfig = field(default_factory=HistoryConfig)

    def to_dict(self) -> Dict[str, Any]:
        """Convert to dictionary for serialization."""
        return {
            "paths": {
                "habits": self.paths.habits,
                "log": self.paths.log
            },
            "display": {
                "symbols": self.display.symbols,
                "name_width": self.display.name_width
            },
            "history": {
                "days": self.history.days
            }
        }

    @classmethod
    def from_dict(cls, data: Dict[str, Any]) -> 'Config':
        """Create from dictionary."""
        paths_data = data.get("paths") or {}
        display_data = data.get("display") or {}
        history_data = data.get("history") or {}

        return cls(
            paths=PathsConfig(
                habits=paths_data.get("habits"),
                log=paths_data.get("log")
            ),
            display=DisplayConfig(
                symbols=display_data.get("symbols", "auto"),
                name_width=display_data.get("name_width", DEFAULT_NAME_WIDTH)
            ),
            history=HistoryConfig(
                days=history_data.get("days", DEFAULT_HISTORY_DAYS)
            )
        )

    def validate(self) -> Optional[str]:
        return self.display.validate() or self.history.validate()


class ConfigManager:
    """
    Manages configuration loading and persistence.

    Hierarchy:
      1. Environment variables
      2. User config (<home>/config.yaml)
      3. Defaults
    """

    def __init__(self, home: Optional[Path] = None):
        self.home = resolve_home(home)
        self._config: Optional[Config] = None

    @property
    def config_path(self) -> Path:
        return self.home / CONFIG_FILE

    @property
    def habits_path(self) -> Path:
        return self.load().paths.habits_path(self.home)

    @property
    def log_path(self) -> Path:
        return self.load().paths.log_path(self.home)

    def load(self) -> Config:
        """Load configuration from all sources."""
        if self._config is not None:
            return self._config

        # Layer 1: User config
        config_data = self._read_user_data()

        # Layer 2: Environment overrides
        if os.environ.get("TICK_HABITS_FILE"):
            config_data.setdefault("paths", {})["habits"] = os.environ["TICK_HABITS_FILE"]
        if os.environ.get("TICK_LOG_FILE"):
            config_data.setdefault("paths", {})["log"] = os.environ["TICK_LOG_FILE"]
        if os.environ.get("TICK_SYMBOLS"):
            config_data.setdefault("display", {})["symbols"] = os.environ["TICK_SYMBOLS"]

        config = Config.from_dict(config_data)
        error = config.validate()
        if error:
            print(f"Warning: {error}. Using defaults.", file=sys.stderr)
            config = Config(paths=config.paths)

        logger.debug("Config loaded (home=%s)", self.home)
        self._config = config
        return self._config

    def _read_user_data(self) -> Dict[str, Any]:
        """Read the user config file alone, without environment overrides."""
        if not self.config_path.exists():
            return {}
        try:
            with open(self.config_path) as f:
                user_data = yaml.safe_load(f) or {}
            if not isinstance(user_data, dict):
                raise ValueError("top level must be a mapping")
            return self._merge({}, user_data)
        except (OSError, yaml.YAMLError, ValueError) as e:
            print(f"Warning: Ignoring malformed config {self.config_path}: {e}", file=sys.stderr)
            return {}

    def save(self, config: Config):
        """
        Save configuration to the user config file.

        The next load() re-applies environment overrides on top of what
        was written.
        """
        self.home.mkdir(parents=True, exist_ok=True)

        with open(self.config_path, 'w') as f:
            yaml.dump(config.to_dict(), f, default_flow_style=False)

        self._config = None

    def set(self, key: str, value: str) -> Optional[str]:
        """
        Set a configuration value.

        Args:
            key: Dot-separated key (e.g., "display.symbols")
            value: Value to set

        Returns:
            Error message or None if successful
        """
        # File layer only; environment overrides stay out of config.yaml
        config = Config.from_dict(self._read_user_data())

        parts = key.split(".")
        if len(parts) != 2:
            return f"Invalid key format: {key}. Use 'section.setting' (e.g., 'display.symbols')"

        section, setting = parts

        if section == "paths":
            if setting == "habits":
                config.paths.habits = value or None
            elif setting == "log":
                config.paths.log = value or None
            else:
                return f"Unknown paths setting: {setting}. Valid: habits, log"

        elif section == "display":
            if setting == "symbols":
                config.display.symbols = value
            elif setting == "name_width":
                number = _parse_int(value)
                if number is None:
                    return f"Invalid name_width '{value}'. Must be a positive integer"
                config.display.name_width = number
            else:
                return f"Unknown display setting: {setting}. Valid: symbols, name_width"
            error = config.display.validate()
            if error:
                return error

        elif section == "history":
            if setting == "days":
                number = _parse_int(value)
                if number is None:
                    return f"Invalid history days '{value}'. Must be a positive integer"
                config.history.days = number
            else:
                return f"Unknown history setting: {setting}. Valid: days"
            error = config.history.validate()
            if error:
                return error
        else:
            return f"Unknown section: {section}. Valid: paths, display, history"

        self.save(config)
        return None

    def get(self, key: str) -> Optional[str]:
        """Get a configuration value."""
        config = self.load()

        parts = key.split(".")
        if len(parts) != 2:
            return None

        section, setting = parts

        if section == "paths":
            if setting == "habits":
                return str(self.habits_path)
            elif setting == "log":
                return str(self.log_path)
        elif section == "display":
            if setting == "symbols":
                return config.display.symbols
            elif setting == "name_width":
                return str(config.display.name_width)
        elif section == "history":
            if setting == "days":
                return str(config.history.days)

        return None

    def _merge(self, base: Dict, override: Dict) -> Dict:
        """Deep merge two dicts, override wins."""
        result = base.copy()
        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._merge(result[key], value)
            else:
                result[key] = value
        return result

    def display(self) -> str:
        """Format config for display."""
        config = self.load()
        symbols = get_symbols(config.display.symbols)

        def status(path: Path) -> str:
            return f"{symbols.check_pass}" if path.exists() else f"{symbols.check_fail} missing"

        lines = [
            "Configuration:",
            "",
            "Paths:",
            f"  Habits: {self.habits_path} {status(self.habits_path)}",
            f"  Log: {self.log_path} {status(self.log_path)}",
            "",
            "Display:",
            f"  Symbols: {config.display.symbols}",
            f"  Name width: {config.display.name_width}",
            "",
            "History:",
            f"  Days: {config.history.days}",
            "",
            "Config file:",
            f"  {self.config_path}",
        ]

        return "\n".join(lines)


def _parse_int(value: str) -> Optional[int]:
    try:
        return int(value)
    except (TypeError, ValueError):
        return None


# Convenience function
def get_config(home: Optional[Path] = None) -> Config:
    """Load configuration for a tick home directory."""
    return ConfigManager(home).load()
