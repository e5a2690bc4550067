# marketplace_api/utils.py
from fastapi import HTTPException

# largest value a 64-bit INTEGER primary key can hold
MAX_ID = 2 ** 63 - 1


def ensure_not_none(value, message: str):
    if value is None:
        raise HTTPException(status_code=404, detail=message)
    return value


def parse_id(value: str):
    """Integer id from a path or header value, or None when it cannot name a row."""
    value = (value or "").strip()
    if not value.isascii() or not value.isdigit():
        return None
    key = int(value)
    return key if key <= MAX_ID else None
