import asyncio
import logging

from aiogram import Bot

from album_bot.config import load_config
from album_bot.db.database import init_db
from album_bot.dispatcher import create_dispatcher
from album_bot.services.moderation import Moderator
from album_bot.services.scheduler import setup_scheduler

log = logging.getLogger("album_bot")


async def main():
    logging.basicConfig(
        level=logging.INFO,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )

    cfg = load_config()
    await init_db(cfg.db_path)

    bot = Bot(token=cfg.bot_token)
    moderator = Moderator(bot, cfg.admin_ids, count_admin_notes=cfg.count_admin_notes)
    dp = create_dispatcher(moderator)

    if cfg.report_hour is not None:
        scheduler = setup_scheduler(bot, cfg.admin_ids, cfg.timezone, cfg.report_hour)
        scheduler.start()

    log.info("Bot started, admins: %s", ", ".join(map(str, cfg.admin_ids)) or "-")

    # Обновления обрабатываются по одному, как и в исходном боте
    await dp.start_polling(bot, handle_as_tasks=False)


if __name__ == "__main__":
    asyncio.run(main())
