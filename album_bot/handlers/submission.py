from aiogram import Router, F
from aiogram.fsm.context import FSMContext
from aiogram.types import Message

from album_bot.keyboards.common import SEND_FILE_BTN, admin_menu
from album_bot.services.content import content_from_message
from album_bot.services.moderation import Moderator

router = Router()


@router.message(F.text == SEND_FILE_BTN)
async def send_file_pressed(message: Message, state: FSMContext, moderator: Moderator):
    entered = await moderator.request_submission_mode(message.from_user.id, state)
    if not entered:
        await message.answer("Выберите действие:", reply_markup=admin_menu())
        return

    await message.answer(
        "Отправьте файл, который вы хотите поделиться для выпускного альбома или презентации."
    )


@router.message(F.from_user)
async def any_message(message: Message, state: FSMContext, moderator: Moderator):
    await moderator.route_message(message.from_user, content_from_message(message), state)
