# storefront/utils/time.py
from datetime import datetime, timedelta, timezone


def utc_now() -> datetime:
    # naive UTC, SQLite drops tzinfo on the way in
    return datetime.now(timezone.utc).replace(tzinfo=None)


def utc_after(seconds: int) -> datetime:
    return utc_now() + timedelta(seconds=seconds)
