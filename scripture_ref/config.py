"""Configuration management for scripture-ref."""

import json
import logging
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)

CONFIG_DIR = Path.home() / ".config" / "scripture-ref"
CONFIG_FILE = CONFIG_DIR / "config.json"

DEFAULT_REFERENCE = "Gen 1:1"
DEFAULT_LOG_LEVEL = "WARNING"


@dataclass
class Config:
    """User configuration for the command line and explorer."""

    default_reference: str = DEFAULT_REFERENCE
    log_level: str = DEFAULT_LOG_LEVEL
    json_indent: int = 2

    @classmethod
    def load(cls) -> "Config":
        """Load config from file, or return defaults."""
        if not CONFIG_FILE.exists():
            return cls()

        try:
            with open(CONFIG_FILE) as f:
                data = json.load(f)
                return cls(
                    default_reference=data.get("default_reference", DEFAULT_REFERENCE),
                    log_level=str(data.get("log_level", DEFAULT_LOG_LEVEL)).upper(),
                    json_indent=int(data.get("json_indent", 2)),
                )
        except (json.JSONDecodeError, OSError, AttributeError, TypeError, ValueError) as exc:
            logger.warning("Ignoring unreadable config %s: %s", CONFIG_FILE, exc)
            return cls()

    def save(self) -> None:
        """Save config to file."""
        CONFIG_FILE.parent.mkdir(parents=True, exist_ok=True)
        data = {
            "default_reference": self.default_reference,
            "log_level": self.log_level,
            "json_indent": self.json_indent,
        }
        with open(CONFIG_FILE, "w") as f:
            json.dump(data, f, indent=2)


def get_config() -> Config:
    """Get the application config."""
    return Config.load()
