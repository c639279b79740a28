"""Telegram bot implementation."""

import logging
from datetime import date, datetime, time
from zoneinfo import ZoneInfo

from telegram import Bot, BotCommand, Update
from telegram.constants import ParseMode
from telegram.ext import (
    Application,
    CommandHandler,
    ContextTypes,
    MessageHandler,
    filters,
)

from .calculator import YerushalmiYomiCalculator
from .commands import (
    get_date_messages,
    get_info_message,
    get_start_messages,
    get_today_messages,
)
from .config import Config
from .formatter import format_daily_message
from .models import DailyDaf
from .subscribers import SubscriberStore
from .unified import is_unified_channel_enabled, publish_daily_daf

logger = logging.getLogger(__name__)


class YerushalmiYomiBot:
    """Telegram bot for the daily Yerushalmi daf."""

    def __init__(self, config: Config, subscribers: SubscriberStore | None = None):
        self.config = config
        self.tz = ZoneInfo(config.timezone)
        self.calculator = YerushalmiYomiCalculator()
        self.subscribers = subscribers or SubscriberStore()

    def today(self) -> date:
        """Today's date in the broadcast timezone."""
        return datetime.now(self.tz).date()

    async def _post_init(self, app: Application) -> None:
        """Post-initialization: set up commands."""
        commands = [
            BotCommand("today", "📚 הדף של היום"),
            BotCommand("date", "📅 הדף לתאריך אחר"),
            BotCommand("subscribe", "✅ הרשמה לדף היומי"),
            BotCommand("unsubscribe", "❌ ביטול הרשמה"),
            BotCommand("info", "ℹ️ מידע ועזרה"),
        ]
        await app.bot.set_my_commands(commands)
        logger.info("Bot commands configured")

        await app.bot.set_my_short_description("הדף היומי בתלמוד ירושלמי")
        await app.bot.set_my_description(
            "ירושלמי יומי\n\n"
            "דף אחד ביום בתלמוד ירושלמי.\n\n"
            "✅ התחל עם /start להרשמה אוטומטית\n"
            "📚 קבל את הדף היומי כל בוקר"
        )
        logger.info("Bot description configured")

    async def _reply(self, update: Update, messages: list[str]) -> None:
        for msg in messages:
            await update.message.reply_text(
                msg, parse_mode=ParseMode.HTML, disable_web_page_preview=True
            )

    async def start_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /start command: subscribe and send today's daf."""
        if not update.message:
            return
        chat_id = update.message.chat_id
        if self.subscribers.add(chat_id):
            logger.info(f"Auto-subscribed new user {chat_id}")
        await self._reply(update, get_start_messages(self.calculator, self.today()))

    async def today_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /today command."""
        if not update.message:
            return
        logger.info(f"/today from chat {update.message.chat_id}")
        await self._reply(update, get_today_messages(self.calculator, self.today()))

    async def date_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /date YYYY-MM-DD command."""
        if not update.message:
            return
        text = update.message.text or ""
        logger.info(f"{text!r} from chat {update.message.chat_id}")
        await self._reply(update, get_date_messages(self.calculator, text))

    async def subscribe_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /subscribe command."""
        if not update.message:
            return
        if self.subscribers.add(update.message.chat_id):
            text = "✅ נרשמת בהצלחה! תקבל את הדף היומי כל בוקר."
        else:
            text = "✅ אתה כבר רשום לקבלת הדף היומי."
        await update.message.reply_text(text, parse_mode=ParseMode.HTML)

    async def unsubscribe_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /unsubscribe command."""
        if not update.message:
            return
        if self.subscribers.remove(update.message.chat_id):
            text = "✅ הסרת את הרישום. אפשר להירשם מחדש עם /subscribe"
        else:
            text = "אתה לא רשום כרגע. להרשמה שלח /subscribe"
        await update.message.reply_text(text, parse_mode=ParseMode.HTML)

    async def info_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle /info command."""
        if not update.message:
            return
        await self._reply(update, [get_info_message()])

    async def unknown_command(
        self, update: Update, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Handle unknown commands - silently ignore."""
        if not update.message:
            return
        command = update.message.text.split()[0] if update.message.text else "unknown"
        logger.info(f"Unknown command {command} from chat {update.message.chat_id}")

    async def _error_handler(
        self, update: object, context: ContextTypes.DEFAULT_TYPE
    ) -> None:
        """Log errors caused by updates."""
        logger.error(f"Exception while handling an update: {context.error}")

    async def _scheduled_broadcast(self, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Send daily broadcast via scheduled job."""
        logger.info("Running scheduled daily broadcast...")
        if not await self.send_daily_broadcast():
            logger.error("Scheduled broadcast failed")

    def build_app(self) -> Application:
        """Build the Telegram application."""
        app = (
            Application.builder()
            .token(self.config.telegram_bot_token)
            .post_init(self._post_init)
            .build()
        )

        app.add_handler(CommandHandler("start", self.start_command))
        app.add_handler(CommandHandler("today", self.today_command))
        app.add_handler(CommandHandler("date", self.date_command))
        app.add_handler(CommandHandler("subscribe", self.subscribe_command))
        app.add_handler(CommandHandler("unsubscribe", self.unsubscribe_command))
        app.add_handler(CommandHandler(["info", "help"], self.info_command))
        app.add_handler(MessageHandler(filters.COMMAND, self.unknown_command))

        app.add_error_handler(self._error_handler)

        return app

    async def send_daily_broadcast(self, for_date: date | None = None) -> bool:
        """Send the day's daf to the channel and individual subscribers."""
        if for_date is None:
            for_date = self.today()
        channel_id = self.config.telegram_chat_id
        logger.info(f"Broadcasting {for_date} to channel={channel_id}")

        try:
            daily = self.calculator.get_daily_daf(for_date)
            messages = format_daily_message(daily)

            subscribers = self.subscribers.load()
            subscribers.discard(int(channel_id) if channel_id.lstrip("-").isdigit() else 0)
            logger.info(
                f"Will broadcast to channel + {len(subscribers)} individual subscribers"
            )

            async with Bot(token=self.config.telegram_bot_token) as bot:
                for i, msg in enumerate(messages, 1):
                    result = await bot.send_message(
                        chat_id=channel_id,
                        text=msg,
                        parse_mode=ParseMode.HTML,
                        disable_web_page_preview=True,
                    )
                    if not (result and result.message_id):
                        logger.error(f"Channel message {i}/{len(messages)} failed")
                        return False
                    logger.info(
                        f"Channel message {i}/{len(messages)} sent "
                        f"(message_id={result.message_id})"
                    )

                failed_subscribers = []
                for subscriber_id in sorted(subscribers):
                    try:
                        for msg in messages:
                            await bot.send_message(
                                chat_id=subscriber_id,
                                text=msg,
                                parse_mode=ParseMode.HTML,
                                disable_web_page_preview=True,
                            )
                    except Exception as e:
                        logger.warning(
                            f"Failed to send to subscriber {subscriber_id}: {e}"
                        )
                        failed_subscribers.append(subscriber_id)

                if failed_subscribers:
                    logger.warning(
                        f"Failed to reach {len(failed_subscribers)} subscribers"
                    )

            logger.info("Broadcast completed successfully")

            await self._send_to_unified_channel(daily)
            return True

        except Exception as e:
            logger.exception(f"Broadcast failed: {e}")
            return False

    async def _send_to_unified_channel(self, daily: DailyDaf) -> None:
        """Send a condensed message to the unified Torah Yomi channel."""
        if not is_unified_channel_enabled():
            logger.debug("Unified channel not configured, skipping")
            return

        try:
            if await publish_daily_daf(daily):
                logger.info("Published to unified channel successfully")
        except Exception as e:
            logger.error(f"Failed to publish to unified channel: {e}")

    def run_polling(self) -> None:
        """Run bot in polling mode with daily scheduling."""
        logger.info("Building application...")
        app = self.build_app()

        if self.config.telegram_chat_id and app.job_queue:
            broadcast_time = time(
                hour=self.config.broadcast_hour, minute=0, second=0, tzinfo=self.tz
            )
            app.job_queue.run_daily(
                self._scheduled_broadcast,
                time=broadcast_time,
                name="daily_broadcast",
            )
            logger.info(f"Daily broadcast scheduled for {broadcast_time}")

        logger.info("Starting polling...")
        app.run_polling(allowed_updates=Update.ALL_TYPES)
