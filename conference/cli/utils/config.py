"""Configuration file management for CLI."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path
from typing import Optional

import yaml

logger = logging.getLogger(__name__)

_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class AppConfig:
    """Session configuration loaded from config file."""

    username: str
    db_path: Path
    log_level: str = "WARNING"


class ConfigError(Exception):
    """Configuration file error."""

    pass


def _normalise_level(value: Optional[str], default: str) -> str:
    if not value:
        return default
    level = value.upper()
    if level not in _LOG_LEVELS:
        logger.warning("Unrecognised log level %r, using %s", value, default)
        return default
    return level


class ConfigManager:
    """Manages session configuration in ~/.conference/config.yaml.

    ``CONFERENCE_DB_PATH`` and ``CONFERENCE_LOG_LEVEL`` override the
    database location and log level stored in the file.
    """

    DEFAULT_DIR = Path.home() / ".conference"
    CONFIG_FILE = "config.yaml"
    DB_FILE = "conference.db"

    def __init__(self, config_dir: Optional[Path] = None) -> None:
        self._config_dir = config_dir or self.DEFAULT_DIR
        self._config_path = self._config_dir / self.CONFIG_FILE

    @property
    def config_dir(self) -> Path:
        return self._config_dir

    @property
    def config_path(self) -> Path:
        return self._config_path

    @property
    def db_path(self) -> Path:
        override = os.environ.get("CONFERENCE_DB_PATH")
        return Path(override) if override else self._config_dir / self.DB_FILE

    def exists(self) -> bool:
        """Check if configuration exists."""
        return self._config_path.exists()

    def load(self) -> AppConfig:
        """Load configuration from file. Raises ConfigError if not found."""
        if not self._config_path.exists():
            raise ConfigError(
                f"Config not found at {self._config_path}. Run 'conference init' first."
            )

        with open(self._config_path) as f:
            try:
                data = yaml.safe_load(f)
            except yaml.YAMLError as e:
                raise ConfigError(f"Invalid config file: {e}") from e

        if not isinstance(data, dict) or not data.get("username"):
            raise ConfigError("Invalid config: missing username")

        level = _normalise_level(data.get("log_level"), "WARNING")
        level = _normalise_level(os.environ.get("CONFERENCE_LOG_LEVEL"), level)

        return AppConfig(
            username=str(data["username"]),
            db_path=self.db_path,
            log_level=level,
        )

    def save(self, username: str, log_level: str = "WARNING") -> None:
        """Save configuration to file."""
        self._config_dir.mkdir(parents=True, exist_ok=True)

        config_data = {"username": username, "log_level": log_level}

        with open(self._config_path, "w") as f:
            yaml.safe_dump(config_data, f, default_flow_style=False)


def configure_logging(verbose: bool = False) -> None:
    """Send log records to stderr at the configured level."""
    if verbose:
        level = "DEBUG"
    else:
        level = _normalise_level(os.environ.get("CONFERENCE_LOG_LEVEL"), "WARNING")
        manager = ConfigManager()
        if manager.exists():
            try:
                level = manager.load().log_level
            except ConfigError:
                # reported by the command once it loads the config
                pass
    logging.basicConfig(
        level=getattr(logging, level),
        format="%(asctime)s %(name)s %(levelname)s %(message)s",
    )
