from dataclasses import dataclass
import os
from dotenv import load_dotenv


@dataclass
class Config:
    bot_token: str
    admin_ids: tuple[int, ...]
    db_path: str
    timezone: str
    report_hour: int | None  # None — ежедневный отчёт отключён
    count_admin_notes: bool


def _parse_admin_ids(raw_values: list[str | None]) -> tuple[int, ...]:
    ids = []
    for raw in raw_values:
        raw = (raw or "").strip()
        if not raw:
            continue
        try:
            ids.append(int(raw))
        except ValueError:
            raise RuntimeError(f"Некорректный ADMIN_ID: {raw!r}") from None
    return tuple(ids)


def _parse_bool(raw: str) -> bool:
    return raw.strip().lower() in {"1", "true", "yes", "on"}


def load_config() -> Config:
    load_dotenv()

    bot_token = os.getenv("BOT_API_KEY")
    if not bot_token:
        raise RuntimeError("BOT_API_KEY не найден (проверьте .env).")

    admin_ids = _parse_admin_ids([os.getenv("ADMIN_ID"), os.getenv("ADMIN_ID2")])

    db_path = os.getenv("DB_PATH", "userData.db")
    timezone = os.getenv("TIMEZONE", "Europe/Moscow")

    report_hour_raw = os.getenv("REPORT_HOUR", "9").strip()
    try:
        report_hour = int(report_hour_raw) if report_hour_raw else None
    except ValueError:
        raise RuntimeError(f"Некорректный REPORT_HOUR: {report_hour_raw!r}") from None
    if report_hour is not None and not 0 <= report_hour <= 23:
        raise RuntimeError("REPORT_HOUR должен быть в диапазоне 0..23.")

    count_admin_notes = _parse_bool(os.getenv("COUNT_ADMIN_NOTES", "true"))

    return Config(
        bot_token=bot_token,
        admin_ids=admin_ids,
        db_path=db_path,
        timezone=timezone,
        report_hour=report_hour,
        count_admin_notes=count_admin_notes,
    )
