import logging
from datetime import datetime
from typing import Any, Iterable

import aiosqlite

from .models import SCHEMA_SQL

log = logging.getLogger("album_bot.db")

DB_PATH = "userData.db"


def now_str() -> str:
    # Локальное время, как и date('now', 'localtime') в запросах статистики
    return datetime.now().isoformat(sep=" ", timespec="seconds")


async def init_db(path: str | None = None) -> None:
    global DB_PATH
    if path:
        DB_PATH = path

    async with aiosqlite.connect(DB_PATH) as db:
        await db.executescript(SCHEMA_SQL)
        await db.commit()

    log.info("Database ready at %s", DB_PATH)


async def execute(sql: str, params: Iterable[Any] = ()) -> int:
    """Run a write statement and commit. Returns ``lastrowid``."""
    async with aiosqlite.connect(DB_PATH) as db:
        cur = await db.execute(sql, tuple(params))
        await db.commit()
        return int(cur.lastrowid or 0)


async def query_one(sql: str, params: Iterable[Any] = ()) -> aiosqlite.Row | None:
    async with aiosqlite.connect(DB_PATH) as db:
        db.row_factory = aiosqlite.Row
        cur = await db.execute(sql, tuple(params))
        return await cur.fetchone()


async def query_all(sql: str, params: Iterable[Any] = ()) -> list[aiosqlite.Row]:
    async with aiosqlite.connect(DB_PATH) as db:
        db.row_factory = aiosqlite.Row
        cur = await db.execute(sql, tuple(params))
        return list(await cur.fetchall())
