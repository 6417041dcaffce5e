from typing import Any, Awaitable, Callable

from aiogram import BaseMiddleware
from aiogram.types import TelegramObject, User

from album_bot.services.activity import record_interaction


class InteractionMiddleware(BaseMiddleware):
    """Writes one interactions row for every update that has a sender."""

    async def __call__(
        self,
        handler: Callable[[TelegramObject, dict[str, Any]], Awaitable[Any]],
        event: TelegramObject,
        data: dict[str, Any],
    ) -> Any:
        user: User | None = data.get("event_from_user")
        if user is not None:
            await record_interaction(user.id)
        return await handler(event, data)
