"""Subscriber management for individual daf broadcasts."""

import json
import logging
from pathlib import Path

from .config import get_state_dir

logger = logging.getLogger(__name__)

SUBSCRIBERS_FILE = get_state_dir() / "subscribers.json"


class SubscriberStore:
    """Chat IDs subscribed to the daily daf, kept in a JSON file."""

    def __init__(self, path: Path | None = None):
        self.path = path or SUBSCRIBERS_FILE

    def load(self) -> set[int]:
        """Load subscriber chat IDs from the state file."""
        if not self.path.exists():
            return set()
        try:
            data = json.loads(self.path.read_text())
            return {int(chat_id) for chat_id in data.get("subscribers", [])}
        except (json.JSONDecodeError, AttributeError, TypeError, ValueError):
            logger.warning(f"Failed to load subscribers from {self.path}, starting fresh")
            return set()

    def save(self, subscribers: set[int]) -> None:
        self.path.parent.mkdir(parents=True, exist_ok=True)
        self.path.write_text(
            json.dumps({"subscribers": sorted(subscribers)}, indent=2)
        )
        logger.info(f"Saved {len(subscribers)} subscribers")

    def add(self, chat_id: int) -> bool:
        """Add a subscriber. Returns True if newly added."""
        subscribers = self.load()
        if chat_id in subscribers:
            return False
        subscribers.add(chat_id)
        self.save(subscribers)
        logger.info(f"Added subscriber: {chat_id}")
        return True

    def remove(self, chat_id: int) -> bool:
        """Remove a subscriber. Returns True if removed."""
        subscribers = self.load()
        if chat_id not in subscribers:
            return False
        subscribers.discard(chat_id)
        self.save(subscribers)
        logger.info(f"Removed subscriber: {chat_id}")
        return True

    def __contains__(self, chat_id: int) -> bool:
        return chat_id in self.load()

    def __len__(self) -> int:
        return len(self.load())
