"""
handlers/dispatcher.py
----------------------
Routes every incoming text message to one action:

    /start                    -> upload profile, show welcome keyboard
    Текст / Картинка / Видео  -> push the matching event, confirm it
    anything else             -> fallback hint

CleverTap failures are logged and never shown to the user.
"""

from telegram import Update
from telegram.error import TelegramError
from telegram.ext import ContextTypes

from handlers.start_handler import BTN_PICTURE, BTN_TEXT, BTN_VIDEO, send_welcome_keyboard
from services.clevertap_client import CleverTapClient, CleverTapError
from services.record_builder import identity_for
from utils.logger import get_logger

logger = get_logger(__name__)

START_COMMAND = "/start"

EVENT_BY_BUTTON = {
    BTN_TEXT: "TestWelcomeText",
    BTN_PICTURE: "TestWelcomePicture",
    BTN_VIDEO: "TestWelcomeVideo",
}

FALLBACK_TEXT = "Используйте кнопки ниже или команду /start"


def event_confirmation(event_name: str) -> str:
    return f"Событие '{event_name}' отправлено!"


class CommandDispatcher:
    """
    Stateless message router. Nothing is remembered between messages, so
    /start can be sent repeatedly and uploads the profile every time.
    """

    def __init__(self, client: CleverTapClient):
        self.client = client

    async def handle_message(self, update: Update, context: ContextTypes.DEFAULT_TYPE) -> None:
        """Entry point registered with the Telegram application."""
        message = update.message
        if message is None or message.text is None:
            return

        user = message.from_user
        chat_id = message.chat_id
        text = message.text
        identity = identity_for(user.id)

        logger.info(f"[{user.username or ''}] ({chat_id}) {text}")

        if text == START_COMMAND:
            await self._handle_start(context.bot, user, chat_id)
        elif text in EVENT_BY_BUTTON:
            await self._handle_button(context.bot, identity, chat_id, EVENT_BY_BUTTON[text])
        else:
            await self._reply(context.bot, chat_id, FALLBACK_TEXT)

    async def _handle_start(self, bot, user, chat_id: int) -> None:
        try:
            await self.client.upload_profile(
                user.id, user.first_name, user.last_name, user.username, chat_id
            )
        except CleverTapError as e:
            logger.error(f"Failed to upload profile to CleverTap: {e}")

        await send_welcome_keyboard(bot, chat_id)

    async def _handle_button(self, bot, identity: str, chat_id: int, event_name: str) -> None:
        try:
            await self.client.push_event(identity, chat_id, event_name)
        except CleverTapError as e:
            logger.error(f"Failed to push event to CleverTap: {e}")

        await self._reply(bot, chat_id, event_confirmation(event_name))

    @staticmethod
    async def _reply(bot, chat_id: int, text: str) -> None:
        try:
            await bot.send_message(chat_id=chat_id, text=text)
        except TelegramError as e:
            logger.error(f"Failed to send message to chat {chat_id}: {e}")
