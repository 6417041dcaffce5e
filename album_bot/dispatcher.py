from aiogram import Dispatcher
from aiogram.fsm.storage.base import BaseStorage
from aiogram.fsm.storage.memory import MemoryStorage

from album_bot.handlers.admin import router as admin_router
from album_bot.handlers.errors import router as errors_router
from album_bot.handlers.start import router as start_router
from album_bot.handlers.submission import router as submission_router
from album_bot.middlewares.interaction import InteractionMiddleware
from album_bot.services.moderation import Moderator


def create_dispatcher(moderator: Moderator, storage: BaseStorage | None = None) -> Dispatcher:
    # Состояния (ожидание файла / ответа) хранятся в памяти и теряются при перезапуске
    dp = Dispatcher(storage=storage or MemoryStorage(), moderator=moderator)
    dp.update.outer_middleware(InteractionMiddleware())

    dp.include_router(errors_router)
    # Команды и кнопки админа — раньше общего обработчика сообщений
    dp.include_router(admin_router)
    dp.include_router(start_router)
    dp.include_router(submission_router)

    return dp
