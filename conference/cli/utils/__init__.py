"""CLI utilities."""

from .config import AppConfig, ConfigError, ConfigManager, configure_logging
from .session import CommandError, load_config, require_organizer, run_session
from .validation import (
    parse_recipients,
    validate_message_content,
    validate_user_type,
    validate_username,
)

__all__ = [
    "AppConfig",
    "CommandError",
    "ConfigError",
    "ConfigManager",
    "configure_logging",
    "load_config",
    "parse_recipients",
    "require_organizer",
    "run_session",
    "validate_message_content",
    "validate_user_type",
    "validate_username",
]
