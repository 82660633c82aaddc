from datetime import datetime, timezone

from sqlalchemy.orm import DeclarativeBase


class Base(DeclarativeBase):
    pass


def utc_now() -> datetime:
    """Current UTC time as a naive datetime; timestamps are stored without tzinfo."""
    return datetime.now(timezone.utc).replace(tzinfo=None)
