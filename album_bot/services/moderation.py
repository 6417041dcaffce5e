"""
Submission / reply correlation.

Per-user state lives in the dispatcher's FSM storage:
  - SubmissionFlow.waiting_file  -> the next message from this user is a submission
  - ReplyFlow.waiting_answer     -> the next message from this admin is relayed to
                                    ``reply_to_user`` and resolves ``reply_to_submission``
The unread counter lives on the Moderator. Nothing here survives a restart.
"""
import asyncio
import logging
from dataclasses import dataclass
from enum import Enum

from aiogram.exceptions import TelegramAPIError, TelegramForbiddenError
from aiogram.fsm.context import FSMContext
from aiogram.types import User

from album_bot.db.models import Submission
from album_bot.services.content import Content, send_content
from album_bot.services.submissions import add_submission, get_submission, mark_replied
from album_bot.utils.states import ReplyFlow, SubmissionFlow

log = logging.getLogger("album_bot.moderation")

ANSWER_NOTICE = "На ваше сообщение получен ответ от организатора выпускного."
REPLY_SENT = "Ответ направлен."
SUBMISSION_ACCEPTED = "Ваш файл успешно отправлен организаторам выпускного."
PRESS_BUTTON_FIRST = (
    'Пожалуйста, сначала нажмите кнопку "📁 Отправить файл" '
    "для отправки файла организаторам выпускного!"
)
UNSUPPORTED_CONTENT = (
    "Этот тип сообщения не поддерживается. "
    "Отправьте текст, фото, видео, документ, аудио или голосовое/видеосообщение."
)
USER_BLOCKED_BOT = "Пользователь заблокировал бота, ответ не доставлен."


def new_file_notice(unread: int) -> str:
    return f"Получен новый файл для выпускного. Неотвеченных сообщений: {unread}"


class Route(str, Enum):
    RELAYED = "relayed"
    SUBMITTED = "submitted"
    ADMIN_NOTE = "admin_note"
    REJECTED = "rejected"
    UNSUPPORTED = "unsupported"
    UNDELIVERED = "undelivered"


@dataclass
class UnreadCounter:
    value: int = 0

    def increment(self) -> int:
        self.value += 1
        return self.value

    def decrement(self) -> int:
        if self.value > 0:
            self.value -= 1
        return self.value


class Moderator:
    def __init__(self, bot, admin_ids, count_admin_notes: bool = True) -> None:
        self.bot = bot
        self.admin_ids = tuple(admin_ids)
        self.count_admin_notes = count_admin_notes
        self.unread = UnreadCounter()
        # state read -> decision -> state clear is one critical section
        self._lock = asyncio.Lock()

    def is_admin(self, user_id: int) -> bool:
        return user_id in self.admin_ids

    async def request_submission_mode(self, user_id: int, state: FSMContext) -> bool:
        """
        Put the user into submission mode. Admins never submit files:
        returns False for them and the caller shows the moderation menu instead.
        """
        if self.is_admin(user_id):
            return False
        async with self._lock:
            await state.set_state(SubmissionFlow.waiting_file)
        return True

    async def activate_reply(self, admin_id: int, submission_id: int, state: FSMContext) -> Submission | None:
        async with self._lock:
            submission = await get_submission(submission_id)
            if submission is None:
                log.info("Admin %s tried to reply to missing submission #%s", admin_id, submission_id)
                return None

            # last write wins
            if await state.get_state() == ReplyFlow.waiting_answer.state:
                previous = await state.get_data()
                log.info(
                    "Admin %s switched reply target from #%s to #%s",
                    admin_id,
                    previous.get("reply_to_submission"),
                    submission_id,
                )

            await state.set_state(ReplyFlow.waiting_answer)
            await state.set_data({
                "reply_to_user": submission.user_id,
                "reply_to_submission": submission.id,
            })
            return submission

    async def route_message(self, sender: User, content: Content | None, state: FSMContext) -> Route:
        async with self._lock:
            return await self._route(sender, content, state)

    async def _route(self, sender: User, content: Content | None, state: FSMContext) -> Route:
        current = await state.get_state()

        # 1) admin answering a submission
        if self.is_admin(sender.id) and current == ReplyFlow.waiting_answer.state:
            if content is None:
                await self.bot.send_message(chat_id=sender.id, text=UNSUPPORTED_CONTENT)
                return Route.UNSUPPORTED
            return await self._relay_reply(sender, content, state)

        # 2) user after pressing "send a file"
        if current == SubmissionFlow.waiting_file.state:
            if content is None:
                await self.bot.send_message(chat_id=sender.id, text=UNSUPPORTED_CONTENT)
                return Route.UNSUPPORTED
            await self._store_submission(sender, content, state)
            return Route.SUBMITTED

        # 3) admin message without a reply target
        if self.is_admin(sender.id):
            if self.count_admin_notes:
                self.unread.increment()
                log.info("Admin %s sent a note, unread=%s", sender.id, self.unread.value)
                await self.notify_admins()
            else:
                log.info("Admin %s sent a note without reply target, ignored", sender.id)
            return Route.ADMIN_NOTE

        # 4) everybody else
        await self.bot.send_message(chat_id=sender.id, text=PRESS_BUTTON_FIRST)
        return Route.REJECTED

    async def _relay_reply(self, admin: User, content: Content, state: FSMContext) -> Route:
        data = await state.get_data()
        target_user = data["reply_to_user"]
        submission_id = data["reply_to_submission"]

        # flag is set only after the answer reached the user
        try:
            await self.bot.send_message(chat_id=target_user, text=ANSWER_NOTICE)
            await send_content(self.bot, target_user, content)
        except TelegramForbiddenError as e:
            # пользователь заблокировал бота: повтор не поможет
            await state.clear()
            log.warning("Answer to submission #%s not delivered to user %s: %s", submission_id, target_user, e)
            await self.bot.send_message(chat_id=admin.id, text=USER_BLOCKED_BOT)
            return Route.UNDELIVERED

        await mark_replied(submission_id)

        await self.bot.send_message(chat_id=admin.id, text=REPLY_SENT)
        await state.clear()
        self.unread.decrement()
        log.info(
            "Admin %s answered submission #%s of user %s, unread=%s",
            admin.id, submission_id, target_user, self.unread.value,
        )
        return Route.RELAYED

    async def _store_submission(self, sender: User, content: Content, state: FSMContext) -> None:
        submission_id = await add_submission(sender.id, content, sender.first_name, sender.username)
        await state.clear()
        self.unread.increment()
        log.info("User %s sent submission #%s, unread=%s", sender.id, submission_id, self.unread.value)

        await self.notify_admins()
        await self.bot.send_message(chat_id=sender.id, text=SUBMISSION_ACCEPTED)

    async def notify_admins(self) -> None:
        text = new_file_notice(self.unread.value)
        for admin_id in self.admin_ids:
            try:
                await self.bot.send_message(chat_id=admin_id, text=text)
            except TelegramAPIError as e:
                # один недоступный админ не мешает остальным
                log.warning("Could not notify admin %s: %s", admin_id, e)
