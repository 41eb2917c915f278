import re
from datetime import UTC, datetime

UUID_RE = re.compile(r"^[0-9a-f]{8}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{4}-[0-9a-f]{12}$", re.IGNORECASE)
DIGITS_RE = re.compile(r"^[0-9]+$")


def is_uuid(value: str) -> bool:
    return bool(UUID_RE.fullmatch(value))


def is_digits(value: str) -> bool:
    return bool(DIGITS_RE.fullmatch(value))


def now() -> datetime:
    return datetime.now(UTC)
