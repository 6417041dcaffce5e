import logging

from aiogram import Router
from aiogram.filters import CommandStart
from aiogram.types import Message

from album_bot.keyboards.common import main_menu
from album_bot.services.activity import record_start

log = logging.getLogger("album_bot.handlers.start")

router = Router()


@router.message(CommandStart())
async def cmd_start(message: Message):
    log.info("User %s started the bot", message.from_user.id)
    await record_start(message.from_user.id)

    await message.answer("Привет! Я бот для сбора файлов к выпускному!")
    await message.answer(
        "📁 Отправить файл — тут вы можете отправить файлы для выпускного альбома или презентации."
    )
    await message.answer("🟢 Поддерживаются фото, видео, аудио/видеосообщения, документы.")
    await message.answer("Нажмите кнопку ниже, чтобы отправить файл 👇", reply_markup=main_menu())
