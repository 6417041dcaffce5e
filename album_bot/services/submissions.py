import aiosqlite

from album_bot.db.database import execute, now_str, query_all, query_one
from album_bot.db.models import Submission
from album_bot.services.content import Content, Media, MediaKind, Text

_COLUMNS = "id, userId, message, media_type, media_id, first_name, username, replied, timestamp"


def _from_row(row: aiosqlite.Row) -> Submission:
    return Submission(
        id=row["id"],
        user_id=row["userId"],
        message=row["message"],
        media_type=row["media_type"],
        media_id=row["media_id"],
        first_name=row["first_name"],
        username=row["username"],
        replied=bool(row["replied"]),
        timestamp=row["timestamp"],
    )


def submission_content(submission: Submission) -> Content:
    if submission.message is not None:
        return Text(submission.message)
    try:
        kind = MediaKind(submission.media_type)
    except ValueError:
        # старые записи без типа вложения
        return Text("")
    return Media(kind, submission.media_id)


async def add_submission(
    user_id: int,
    content: Content,
    first_name: str | None,
    username: str | None,
) -> int:
    if isinstance(content, Text):
        message, media_type, media_id = content.text, None, None
    else:
        message, media_type, media_id = None, content.kind.value, content.file_id

    return await execute(
        """
        INSERT INTO messages (userId, message, media_type, media_id, first_name, username, timestamp)
        VALUES (?, ?, ?, ?, ?, ?, ?)
        """,
        (user_id, message, media_type, media_id, first_name, username, now_str()),
    )


async def get_submission(submission_id: int) -> Submission | None:
    row = await query_one(f"SELECT {_COLUMNS} FROM messages WHERE id=?", (submission_id,))
    return _from_row(row) if row else None


async def list_all() -> list[Submission]:
    rows = await query_all(f"SELECT {_COLUMNS} FROM messages ORDER BY id")
    return [_from_row(r) for r in rows]


async def list_unreplied() -> list[Submission]:
    rows = await query_all(f"SELECT {_COLUMNS} FROM messages WHERE replied=0 ORDER BY id")
    return [_from_row(r) for r in rows]


async def count_unreplied() -> int:
    row = await query_one("SELECT COUNT(1) FROM messages WHERE replied=0")
    return int(row[0]) if row else 0


async def mark_replied(submission_id: int) -> None:
    await execute("UPDATE messages SET replied=1 WHERE id=?", (submission_id,))
