"""Torah Yomi Unified Channel Publisher for the Yerushalmi Yomi bot."""

from __future__ import annotations

import asyncio
import logging
import os
from typing import Any

from telegram import Bot
from telegram.constants import ParseMode
from telegram.error import TelegramError

from ..models import DailyDaf

logger = logging.getLogger(__name__)

SOURCE = "yerushalmi_yomi"
BADGE = "📖 Yerushalmi Yomi | ירושלמי יומי"

MAX_RETRIES = 3
RETRY_DELAY = 1.0


def format_for_unified_channel(content: str) -> str:
    """Format message with unified channel header."""
    header = f"{BADGE}\n{'─' * 30}\n\n"
    return f"{header}{content}"


def format_unified_summary(daily: DailyDaf) -> str:
    """One-line summary of the day's daf for the unified channel."""
    date_line = f"📅 {daily.for_date.strftime('%d/%m/%Y')}"
    if daily.daf is None:
        holy_day = daily.holy_day.hebrew_name if daily.holy_day else ""
        return f"<b>ירושלמי יומי</b>\n{date_line}\n\n{holy_day} — אין דף היום"
    return f"<b>ירושלמי יומי</b>\n{date_line}\n\n{daily.daf.hebrew_reference}"


class TorahYomiPublisher:
    """Publisher for the unified Torah Yomi channel."""

    def __init__(
        self,
        channel_id: str | None = None,
        bot_token: str | None = None,
        enabled: bool | None = None,
    ) -> None:
        self.channel_id = channel_id or os.getenv("TORAH_YOMI_CHANNEL_ID")
        self.bot_token = bot_token or os.getenv("TORAH_YOMI_CHANNEL_BOT_TOKEN")
        if enabled is None:
            enabled = os.getenv("TORAH_YOMI_PUBLISH_ENABLED", "true").lower() == "true"
        self.enabled = enabled

    @property
    def is_enabled(self) -> bool:
        """Check if unified channel publishing is enabled and configured."""
        return self.enabled and bool(self.channel_id) and bool(self.bot_token)

    async def publish_text(
        self,
        text: str,
        *,
        parse_mode: str = ParseMode.HTML,
        disable_web_page_preview: bool = True,
        **kwargs: Any,
    ) -> bool:
        """Publish a text message to the unified channel."""
        if not self.is_enabled:
            logger.debug("Unified channel publish disabled or not configured")
            return False

        formatted_text = format_for_unified_channel(text)

        async with Bot(token=self.bot_token) as bot:
            for attempt in range(1, MAX_RETRIES + 1):
                try:
                    await bot.send_message(
                        chat_id=self.channel_id,
                        text=formatted_text,
                        parse_mode=parse_mode,
                        disable_web_page_preview=disable_web_page_preview,
                        **kwargs,
                    )
                    logger.info(f"Published text to unified channel ({SOURCE})")
                    return True
                except TelegramError as e:
                    logger.error(f"Publish attempt {attempt} failed: {e}")
                    if attempt < MAX_RETRIES:
                        await asyncio.sleep(RETRY_DELAY * attempt)

        logger.error("All publish attempts failed")
        return False


def is_unified_channel_enabled() -> bool:
    """Check if unified channel publishing is enabled."""
    return TorahYomiPublisher().is_enabled


async def publish_daily_daf(daily: DailyDaf) -> bool:
    """Publish the day's daf summary to the unified channel."""
    return await TorahYomiPublisher().publish_text(format_unified_summary(daily))
