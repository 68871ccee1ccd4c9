"""
handlers/start_handler.py
--------------------------
Welcome message and the static choice keyboard shown after /start.
"""

from telegram import KeyboardButton, ReplyKeyboardMarkup
from telegram.error import TelegramError

from utils.logger import get_logger

logger = get_logger(__name__)

# Keyboard button labels
BTN_TEXT = "Текст"
BTN_PICTURE = "Картинка"
BTN_VIDEO = "Видео"

WELCOME_TEXT = "Добро пожаловать! Выберите опцию:"


def build_welcome_keyboard() -> ReplyKeyboardMarkup:
    """One row with the three option buttons, resized to fit."""
    return ReplyKeyboardMarkup(
        [[KeyboardButton(BTN_TEXT), KeyboardButton(BTN_PICTURE), KeyboardButton(BTN_VIDEO)]],
        resize_keyboard=True,
    )


async def send_welcome_keyboard(bot, chat_id: int) -> None:
    """Send the welcome text with the option keyboard. Send failures are only logged."""
    try:
        await bot.send_message(
            chat_id=chat_id,
            text=WELCOME_TEXT,
            reply_markup=build_welcome_keyboard(),
        )
    except TelegramError as e:
        logger.error(f"Failed to send welcome keyboard to chat {chat_id}: {e}")
