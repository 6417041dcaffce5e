from dataclasses import dataclass

SCHEMA_SQL = """
CREATE TABLE IF NOT EXISTS users (
    id INTEGER PRIMARY KEY,
    timesStarted INTEGER DEFAULT 0,
    lastSeen TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE TABLE IF NOT EXISTS interactions (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    userId INTEGER,
    interactionTime TIMESTAMP
);

CREATE TABLE IF NOT EXISTS messages (
    id INTEGER PRIMARY KEY AUTOINCREMENT,
    userId INTEGER,
    message TEXT,               -- текстовая заявка
    media_type TEXT,            -- photo / video / document / audio / voice / video_note
    media_id TEXT,              -- file_id в Telegram
    replied INTEGER DEFAULT 0,  -- 0 -> 1, обратно не сбрасывается
    first_name TEXT,
    username TEXT,
    timestamp TIMESTAMP DEFAULT CURRENT_TIMESTAMP
);

CREATE INDEX IF NOT EXISTS idx_messages_replied
ON messages(replied);
"""


@dataclass(frozen=True)
class Submission:
    id: int
    user_id: int
    message: str | None
    media_type: str | None
    media_id: str | None
    first_name: str | None
    username: str | None
    replied: bool
    timestamp: str
