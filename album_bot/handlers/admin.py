from aiogram import Router, F
from aiogram.filters import Command
from aiogram.fsm.context import FSMContext
from aiogram.types import Message, CallbackQuery

from album_bot.db.models import Submission
from album_bot.keyboards.common import (
    ALL_FILES_BTN,
    BACK_BTN,
    REPLY_PREFIX,
    UNREPLIED_FILES_BTN,
    main_menu,
    parse_reply_data,
    reply_kb,
)
from album_bot.services.activity import compute_stats, format_stats
from album_bot.services.content import send_content
from album_bot.services.moderation import Moderator
from album_bot.services.submissions import list_all, list_unreplied, submission_content

router = Router()


def denial_text(user_id: int) -> str:
    return "У вас нет прав администратора!" + str(user_id)


def submission_header(s: Submission) -> str:
    return f"Файл от {s.first_name} (@{s.username}, ID: {s.user_id})"


async def send_submission_cards(bot, chat_id: int, submissions: list[Submission]) -> None:
    for s in submissions:
        await send_content(
            bot,
            chat_id,
            submission_content(s),
            caption=submission_header(s),
            reply_markup=reply_kb(s.id),
        )


@router.message(Command("admin"))
async def cmd_admin(message: Message, moderator: Moderator):
    if not moderator.is_admin(message.from_user.id):
        await message.answer(denial_text(message.from_user.id))
        return

    stats = await compute_stats()
    await message.answer(format_stats(stats))


@router.message(F.text == ALL_FILES_BTN)
async def show_all_files(message: Message, moderator: Moderator):
    if not moderator.is_admin(message.from_user.id):
        return

    submissions = await list_all()
    if not submissions:
        await message.answer("Файлов нет.")
        return
    await send_submission_cards(message.bot, message.chat.id, submissions)


@router.message(F.text == UNREPLIED_FILES_BTN)
async def show_unreplied_files(message: Message, moderator: Moderator):
    if not moderator.is_admin(message.from_user.id):
        return

    submissions = await list_unreplied()
    if not submissions:
        await message.answer("Файлов без ответа нет.")
        return
    await send_submission_cards(message.bot, message.chat.id, submissions)


@router.message(F.text == BACK_BTN)
async def back_to_menu(message: Message):
    await message.answer("Выберите действие:", reply_markup=main_menu())


@router.callback_query(F.data.startswith(REPLY_PREFIX))
async def reply_pressed(call: CallbackQuery, state: FSMContext, moderator: Moderator):
    submission_id = parse_reply_data(call.data)
    if submission_id is None or not moderator.is_admin(call.from_user.id):
        await call.answer()
        return

    submission = await moderator.activate_reply(call.from_user.id, submission_id, state)
    if submission is None:
        await call.answer("Сообщение не найдено.", show_alert=True)
        return

    await call.answer("Вы можете ответить текстом, аудио, видео или фото.")
