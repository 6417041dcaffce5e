import logging

from aiogram.exceptions import TelegramAPIError

from album_bot.services.activity import compute_stats, format_stats
from album_bot.services.submissions import count_unreplied

log = logging.getLogger("album_bot.report")


async def build_daily_report() -> str:
    stats = await compute_stats()
    unreplied = await count_unreplied()
    return (
        "📊 Ежедневный отчёт\n"
        f"{format_stats(stats)}\n"
        f"Файлов без ответа: {unreplied}"
    )


async def send_daily_admin_report(bot, admin_ids) -> None:
    """
    Send usage stats and the number of unanswered files to every admin.
    The unanswered count comes from the database, not from the in-memory counter.
    """
    text = await build_daily_report()
    for admin_id in admin_ids:
        try:
            await bot.send_message(chat_id=admin_id, text=text)
        except TelegramAPIError as e:
            log.warning("Daily report to admin %s failed: %s", admin_id, e)
