#!/usr/bin/env python3
"""
Yerushalmi Yomi - The daily daf of the Talmud Yerushalmi.

Usage:
    python main.py              # Send daily broadcast (for cron/CI)
    python main.py --serve      # Run interactive bot
    python main.py --preview    # Preview today's message
"""

import argparse
import asyncio
import logging
import re
import sys
from datetime import datetime
from zoneinfo import ZoneInfo

from dotenv import load_dotenv

from yerushalmi_yomi.bot import YerushalmiYomiBot
from yerushalmi_yomi.calculator import DateOutOfRangeError, YerushalmiYomiCalculator
from yerushalmi_yomi.config import Config
from yerushalmi_yomi.formatter import format_daily_message

logger = logging.getLogger(__name__)

ISRAEL_TZ = ZoneInfo("Asia/Jerusalem")


def is_broadcast_hour(config: Config) -> bool:
    """Check if it's currently the broadcast hour in the configured timezone."""
    now = datetime.now(ZoneInfo(config.timezone))
    return now.hour == config.broadcast_hour


def parse_args(argv: list[str] | None = None) -> argparse.Namespace:
    """Parse command line arguments."""
    parser = argparse.ArgumentParser(
        description="Yerushalmi Yomi Telegram Bot",
        formatter_class=argparse.RawDescriptionHelpFormatter,
        epilog="""
Examples:
    python main.py                          Send daily message to configured chat
    python main.py --serve                  Run interactive bot with polling
    python main.py --preview                Preview today's message locally
    python main.py --preview --date 1980-02-02
        """,
    )
    parser.add_argument(
        "--serve",
        action="store_true",
        help="Run bot in interactive polling mode",
    )
    parser.add_argument(
        "--preview",
        action="store_true",
        help="Preview today's message without sending",
    )
    parser.add_argument(
        "--date",
        type=str,
        help="Override date for preview (YYYY-MM-DD format)",
    )
    parser.add_argument(
        "--force",
        action="store_true",
        help="Send broadcast regardless of time (for manual triggers)",
    )
    return parser.parse_args(argv)


def preview_message(date_override: str | None = None) -> int:
    """Preview a day's message without sending."""
    calculator = YerushalmiYomiCalculator()

    if date_override:
        try:
            target_date = datetime.strptime(date_override, "%Y-%m-%d").date()
        except ValueError:
            print(f"Invalid date: {date_override} (expected YYYY-MM-DD)", file=sys.stderr)
            return 1
    else:
        target_date = datetime.now(ISRAEL_TZ).date()

    print(f"\n{'=' * 60}")
    print(f"Preview for: {target_date}")
    print("=" * 60)

    try:
        daily = calculator.get_daily_daf(target_date)
    except DateOutOfRangeError as e:
        print(f"ERROR: {e}", file=sys.stderr)
        return 1

    for i, msg in enumerate(format_daily_message(daily), 1):
        print(f"\n--- Message {i} ---")
        print(re.sub(r"<[^>]+>", "", msg))

    print(f"\n{'=' * 60}")
    if daily.daf:
        print(f"Daf: {daily.daf.reference}")
    else:
        print(f"No daf: {daily.holy_day.value}")
    return 0


async def send_broadcast(config: Config) -> bool:
    """Send the daily broadcast."""
    bot = YerushalmiYomiBot(config)
    return await bot.send_daily_broadcast()


def run_server(config: Config) -> None:
    """Run the bot in interactive mode."""
    bot = YerushalmiYomiBot(config)
    bot.run_polling()


def main(argv: list[str] | None = None) -> int:
    """Main entry point."""
    load_dotenv()

    args = parse_args(argv)

    if args.preview:
        return preview_message(args.date)

    try:
        config = Config.from_env()
    except ValueError as e:
        print(f"Configuration error: {e}", file=sys.stderr)
        return 1

    config.setup_logging()
    logger.info("Yerushalmi Yomi starting...")
    logger.info(f"Chat ID: {config.telegram_chat_id}")

    if args.serve:
        run_server(config)
        return 0

    if not args.force and not is_broadcast_hour(config):
        now = datetime.now(ZoneInfo(config.timezone))
        logger.info(
            f"Skipping broadcast: local time is {now.strftime('%H:%M')} "
            f"(not {config.broadcast_hour:02d}:00). DST handling - other scheduled run will send."
        )
        return 0

    logger.info("Sending daily broadcast...")
    success = asyncio.run(send_broadcast(config))
    if success:
        logger.info("Broadcast completed successfully!")
    else:
        logger.error("Broadcast failed!")
    return 0 if success else 1


if __name__ == "__main__":
    sys.exit(main())
