"""Configuration management for Yerushalmi Yomi."""

import logging
import os
from dataclasses import dataclass
from pathlib import Path

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class Config:
    """Immutable application configuration."""

    telegram_bot_token: str
    telegram_chat_id: str
    log_level: str = "INFO"
    timezone: str = "Asia/Jerusalem"
    broadcast_hour: int = 3

    @classmethod
    def from_env(cls) -> "Config":
        """Load configuration from environment variables."""
        token = os.getenv("TELEGRAM_BOT_TOKEN")
        chat_id = os.getenv("TELEGRAM_CHAT_ID")

        if not token:
            raise ValueError("TELEGRAM_BOT_TOKEN environment variable is required")
        if not chat_id:
            raise ValueError("TELEGRAM_CHAT_ID environment variable is required")

        hour = os.getenv("BROADCAST_HOUR", "3")
        if not hour.isdigit() or not 0 <= int(hour) <= 23:
            raise ValueError(f"BROADCAST_HOUR must be 0-23, got {hour!r}")

        config = cls(
            telegram_bot_token=token,
            telegram_chat_id=chat_id,
            log_level=os.getenv("LOG_LEVEL", "INFO"),
            timezone=os.getenv("BROADCAST_TZ", "Asia/Jerusalem"),
            broadcast_hour=int(hour),
        )
        logger.info(
            f"Daily broadcast at {config.broadcast_hour:02d}:00 {config.timezone}"
        )
        return config

    def setup_logging(self) -> None:
        """Configure application logging."""
        logging.basicConfig(
            level=getattr(logging, self.log_level.upper()),
            format="%(asctime)s | %(levelname)-8s | %(name)s | %(message)s",
            datefmt="%Y-%m-%d %H:%M:%S",
        )


def get_project_root() -> Path:
    """Get the project root directory."""
    return Path(__file__).parent.parent


def get_state_dir() -> Path:
    """Get the directory holding persisted bot state."""
    return get_project_root() / ".github" / "state"
