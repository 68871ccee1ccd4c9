"""
main.py
-------
Entry point for the Telegram → CleverTap welcome bot.

Responsibilities:
    - Load settings from the environment and fail fast if credentials are missing.
    - Create the shared CleverTap client and the message dispatcher.
    - Configure and start the Telegram bot (long polling, one update at a time).
"""

import sys

from telegram import BotCommand
from telegram.ext import Application, MessageHandler, filters

from config import ConfigError, Settings, load_settings
from handlers.dispatcher import CommandDispatcher
from services.clevertap_client import CleverTapClient
from utils.logger import get_logger, set_level

logger = get_logger(__name__)


async def on_startup(application: Application) -> None:
    """Log the bot identity and register the commands menu."""
    logger.info(f"Authorized as {application.bot.username}")
    await application.bot.set_my_commands([BotCommand("start", "Начать")])
    logger.info("Bot commands menu registered successfully.")


def build_application(settings: Settings, client: CleverTapClient) -> Application:
    """Build the Telegram application with the single text dispatcher."""
    dispatcher = CommandDispatcher(client)

    async def on_shutdown(application: Application) -> None:
        await client.aclose()
        logger.info("CleverTap client closed.")

    app = (
        Application.builder()
        .token(settings.telegram_bot_token)
        .concurrent_updates(False)
        .post_init(on_startup)
        .post_shutdown(on_shutdown)
        .build()
    )

    # Commands are text too, so /start goes through the same handler.
    app.add_handler(MessageHandler(filters.TEXT, dispatcher.handle_message))
    return app


def main() -> None:
    """Initialize and run the bot."""

    # ── 1. Configuration ──────────────────────────────────
    try:
        settings = load_settings()
    except ConfigError as e:
        logger.critical(f"Configuration error: {e}")
        sys.exit(1)

    set_level(settings.log_level, debug_transport=settings.telegram_debug)

    # ── 2. CleverTap client + Telegram application ────────
    client = CleverTapClient(settings)
    app = build_application(settings, client)

    # ── 3. Start polling ──────────────────────────────────
    logger.info(f"Bot is running, uploading to {settings.upload_url}. Press Ctrl+C to stop.")
    app.run_polling(allowed_updates=["message"])
    logger.info("Bot stopped.")


if __name__ == "__main__":
    main()
