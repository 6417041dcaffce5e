from dataclasses import dataclass

from album_bot.db.database import execute, now_str, query_one


@dataclass(frozen=True)
class UsageStats:
    total_starts: int
    today_starts: int
    total_interactions: int
    today_interactions: int


async def record_start(user_id: int) -> None:
    """Register the user on first /start, otherwise bump the counter."""
    await execute(
        """
        INSERT INTO users (id, timesStarted, lastSeen)
        VALUES (?, 0, ?)
        ON CONFLICT(id) DO UPDATE SET
            timesStarted=users.timesStarted + 1,
            lastSeen=excluded.lastSeen
        """,
        (user_id, now_str()),
    )


async def record_interaction(user_id: int) -> None:
    await execute(
        "INSERT INTO interactions (userId, interactionTime) VALUES (?, ?)",
        (user_id, now_str()),
    )


async def _count(sql: str) -> int:
    row = await query_one(sql)
    return int(row[0]) if row else 0


async def compute_stats() -> UsageStats:
    return UsageStats(
        total_starts=await _count("SELECT COUNT(1) FROM users"),
        today_starts=await _count(
            "SELECT COUNT(1) FROM users WHERE date(lastSeen) = date('now', 'localtime')"
        ),
        total_interactions=await _count("SELECT COUNT(1) FROM interactions"),
        today_interactions=await _count(
            "SELECT COUNT(1) FROM interactions WHERE date(interactionTime) = date('now', 'localtime')"
        ),
    )


def format_stats(stats: UsageStats) -> str:
    return (
        "Статистика использования бота для выпускного:\n"
        f"Всего запусков: {stats.total_starts}\n"
        f"Использовали бота сегодня: {stats.today_starts}\n"
        f"Всего взаимодействий: {stats.total_interactions}\n"
        f"Взаимодействий сегодня: {stats.today_interactions}"
    )
