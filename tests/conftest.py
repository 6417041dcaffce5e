import pytest
from aiogram.exceptions import TelegramForbiddenError
from aiogram.fsm.context import FSMContext
from aiogram.fsm.storage.base import StorageKey
from aiogram.fsm.storage.memory import MemoryStorage
from aiogram.methods import SendMessage
from aiogram.types import User

from album_bot.db import database

ADMIN_A = 1001
ADMIN_B = 1002
USER_U = 2001


class FakeBot:
    """Records outgoing Bot API calls instead of sending them."""

    id = 42

    def __init__(self):
        self.calls = []
        self.blocked = set()
        self.requests = []

    async def __call__(self, method, request_timeout=None):
        # shortcuts like message.answer() / call.answer() end up here
        self.requests.append(method)
        return True

    async def _send(self, method, **kwargs):
        if kwargs.get("chat_id") in self.blocked:
            raise TelegramForbiddenError(
                method=SendMessage(chat_id=kwargs["chat_id"], text="-"),
                message="Forbidden: bot was blocked by the user",
            )
        self.calls.append((method, kwargs))

    async def send_message(self, **kwargs):
        await self._send("send_message", **kwargs)

    async def send_photo(self, **kwargs):
        await self._send("send_photo", **kwargs)

    async def send_video(self, **kwargs):
        await self._send("send_video", **kwargs)

    async def send_document(self, **kwargs):
        await self._send("send_document", **kwargs)

    async def send_audio(self, **kwargs):
        await self._send("send_audio", **kwargs)

    async def send_voice(self, **kwargs):
        await self._send("send_voice", **kwargs)

    async def send_video_note(self, **kwargs):
        await self._send("send_video_note", **kwargs)

    def sent_to(self, chat_id):
        return [(m, kw) for m, kw in self.calls if kw.get("chat_id") == chat_id]

    def texts_to(self, chat_id):
        return [kw["text"] for m, kw in self.sent_to(chat_id) if m == "send_message"]


@pytest.fixture
async def db(tmp_path, monkeypatch):
    monkeypatch.setattr(database, "DB_PATH", str(tmp_path / "test.db"))
    await database.init_db()
    return database


@pytest.fixture
def bot():
    return FakeBot()


@pytest.fixture
def storage():
    return MemoryStorage()


@pytest.fixture
def state_for(storage):
    def make(user_id: int) -> FSMContext:
        return FSMContext(storage=storage, key=StorageKey(bot_id=FakeBot.id, chat_id=user_id, user_id=user_id))
    return make


def make_user(user_id: int, first_name: str = "Anna", username: str | None = "anna") -> User:
    return User(id=user_id, is_bot=False, first_name=first_name, username=username)
