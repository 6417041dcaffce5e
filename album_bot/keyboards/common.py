from aiogram.types import (
    ReplyKeyboardMarkup,
    KeyboardButton,
    InlineKeyboardMarkup,
)
from aiogram.utils.keyboard import InlineKeyboardBuilder

SEND_FILE_BTN = "📁 Отправить файл"
ALL_FILES_BTN = "Все полученные файлы"
UNREPLIED_FILES_BTN = "Файлы без ответа"
BACK_BTN = "Назад ↩️"

REPLY_PREFIX = "reply-"


def main_menu() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text=SEND_FILE_BTN)],
        ],
        resize_keyboard=True
    )


def admin_menu() -> ReplyKeyboardMarkup:
    return ReplyKeyboardMarkup(
        keyboard=[
            [KeyboardButton(text=ALL_FILES_BTN)],
            [KeyboardButton(text=UNREPLIED_FILES_BTN)],
            [KeyboardButton(text=BACK_BTN)],
        ],
        resize_keyboard=True
    )


def reply_kb(submission_id: int) -> InlineKeyboardMarkup:
    b = InlineKeyboardBuilder()
    b.button(text="Ответить", callback_data=f"{REPLY_PREFIX}{submission_id}")
    return b.as_markup()


def parse_reply_data(data: str | None) -> int | None:
    """reply-<id> -> id"""
    if not data or not data.startswith(REPLY_PREFIX):
        return None
    raw = data[len(REPLY_PREFIX):]
    return int(raw) if raw.isdigit() else None
