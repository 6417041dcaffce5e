import logging

from aiogram import Router
from aiogram.types import ErrorEvent

log = logging.getLogger("album_bot.errors")

router = Router()


@router.errors()
async def on_error(event: ErrorEvent):
    log.exception(
        "Error while handling update %s: %s",
        event.update.update_id,
        event.exception,
        exc_info=event.exception,
    )
    return True
