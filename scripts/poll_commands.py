#!/usr/bin/env python3
"""Poll Telegram for commands and respond.

This script is designed to run via GitHub Actions every 5 minutes.
It polls for new updates, handles commands, and persists state.
"""

import asyncio
import json
import logging
import sys
from datetime import datetime
from pathlib import Path
from zoneinfo import ZoneInfo

sys.path.insert(0, str(Path(__file__).parent.parent))

from yerushalmi_yomi.calculator import YerushalmiYomiCalculator
from yerushalmi_yomi.commands import (
    get_date_messages,
    get_error_message,
    get_info_message,
    get_start_messages,
    get_today_messages,
)
from yerushalmi_yomi.config import Config, get_state_dir
from yerushalmi_yomi.subscribers import SubscriberStore

logging.basicConfig(
    level=logging.INFO,
    format="%(asctime)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

STATE_FILE = get_state_dir() / "last_update_id.json"


def load_state() -> int:
    """Load last processed update ID from state file."""
    if STATE_FILE.exists():
        try:
            data = json.loads(STATE_FILE.read_text())
            return int(data.get("last_update_id", 0))
        except (json.JSONDecodeError, KeyError, ValueError):
            return 0
    return 0


def save_state(last_update_id: int) -> None:
    """Save last processed update ID to state file."""
    STATE_FILE.parent.mkdir(parents=True, exist_ok=True)
    STATE_FILE.write_text(json.dumps({"last_update_id": last_update_id}, indent=2))
    logger.info(f"Saved state: last_update_id={last_update_id}")


async def _send(bot: object, chat_id: int, messages: list[str]) -> None:
    for msg in messages:
        await bot.send_message(  # type: ignore[attr-defined]
            chat_id=chat_id,
            text=msg,
            parse_mode="HTML",
            disable_web_page_preview=True,
        )


async def handle_command(
    bot: object,
    chat_id: int,
    text: str,
    calculator: YerushalmiYomiCalculator,
    subscribers: SubscriberStore,
    tz: ZoneInfo,
) -> None:
    """Handle a single command message."""
    command = text.split()[0].split("@")[0].lower()
    today = datetime.now(tz).date()
    try:
        if command == "/start":
            if subscribers.add(chat_id):
                logger.info(f"Auto-subscribed new user {chat_id}")
            await _send(bot, chat_id, get_start_messages(calculator, today))

        elif command == "/today":
            await _send(bot, chat_id, get_today_messages(calculator, today))

        elif command == "/date":
            await _send(bot, chat_id, get_date_messages(calculator, text))

        elif command in ("/info", "/about", "/help"):
            await _send(bot, chat_id, [get_info_message()])

        elif command == "/subscribe":
            if subscribers.add(chat_id):
                reply = "✅ נרשמת בהצלחה! תקבל את הדף היומי כל בוקר."
            else:
                reply = "✅ אתה כבר רשום לקבלת הדף היומי."
            await _send(bot, chat_id, [reply])

        elif command == "/unsubscribe":
            if subscribers.remove(chat_id):
                reply = "✅ הסרת את הרישום. אפשר להירשם מחדש עם /subscribe"
            else:
                reply = "אתה לא רשום כרגע. להרשמה שלח /subscribe"
            await _send(bot, chat_id, [reply])

        else:
            logger.debug(f"Unknown command '{command}' from {chat_id} - ignoring")
            return

        logger.info(f"Handled {command} for {chat_id}")

    except Exception as e:
        logger.error(f"Error handling command {command} for {chat_id}: {e}")
        try:
            await _send(bot, chat_id, [get_error_message()])
        except Exception as send_error:
            logger.warning(f"Could not send error reply to {chat_id}: {send_error}")


async def poll_and_respond() -> bool:
    """Poll for updates and respond to commands."""
    from telegram import Bot
    from telegram.error import NetworkError, TimedOut

    try:
        config = Config.from_env()
    except ValueError as e:
        logger.error(f"Configuration error: {e}")
        return False

    calculator = YerushalmiYomiCalculator()
    subscribers = SubscriberStore()
    tz = ZoneInfo(config.timezone)

    last_update_id = load_state()
    logger.info(f"Starting poll with offset {last_update_id + 1}")

    max_retries = 3
    async with Bot(token=config.telegram_bot_token) as bot:
        try:
            if await bot.delete_webhook(drop_pending_updates=False):
                logger.info("Webhook cleared, ready for polling")
        except (TimedOut, NetworkError) as e:
            logger.warning(f"Could not clear webhook (will retry on next run): {e}")

        updates = None
        for attempt in range(1, max_retries + 1):
            try:
                updates = await bot.get_updates(
                    offset=last_update_id + 1,
                    timeout=10,
                    allowed_updates=["message"],
                )
                break
            except (TimedOut, NetworkError) as e:
                if attempt < max_retries:
                    wait = attempt * 2
                    logger.warning(
                        f"get_updates attempt {attempt}/{max_retries} failed: {e}. "
                        f"Retrying in {wait}s..."
                    )
                    await asyncio.sleep(wait)
                else:
                    logger.warning(
                        f"get_updates failed after {max_retries} attempts: {e}. "
                        "Will retry on next scheduled run."
                    )
                    return True

        if not updates:
            logger.info("No new updates")
            return True

        logger.info(f"Processing {len(updates)} update(s)")

        new_last_update_id = last_update_id
        for update in updates:
            new_last_update_id = max(new_last_update_id, update.update_id)

            if not update.message or not update.message.text:
                continue

            text = update.message.text.strip()
            if text.startswith("/"):
                await handle_command(
                    bot, update.message.chat_id, text, calculator, subscribers, tz
                )

        if new_last_update_id > last_update_id:
            save_state(new_last_update_id)

        return True


def main() -> None:
    """Main entry point."""
    logger.info("=== Poll Commands Script Started ===")

    try:
        success = asyncio.run(poll_and_respond())
    except Exception as e:
        logger.warning(f"Poll encountered error (non-fatal): {e}")
        success = True

    if success:
        logger.info("=== Poll completed successfully ===")
    else:
        logger.warning("=== Poll completed with issues (non-fatal) ===")

    sys.exit(0)


if __name__ == "__main__":
    main()
