from zoneinfo import ZoneInfo

from apscheduler.schedulers.asyncio import AsyncIOScheduler
from apscheduler.triggers.cron import CronTrigger

from album_bot.services.report import send_daily_admin_report


def setup_scheduler(bot, admin_ids, timezone: str, report_hour: int) -> AsyncIOScheduler:
    scheduler = AsyncIOScheduler(timezone=ZoneInfo(timezone))

    # ✅ ежедневный отчёт админам
    scheduler.add_job(
        send_daily_admin_report,
        CronTrigger(hour=report_hour, minute=0),
        args=[bot, tuple(admin_ids)],
    )

    return scheduler
