from datetime import date, datetime, time, timedelta, timezone


def parse_iso_date(value) -> date:
    """Parse an ISO-8601 date or datetime string into a calendar date.

    Accepts:
      - 'YYYY-MM-DD'
      - full datetimes such as '2025-01-05T00:00:00.000Z' (date part kept)
      - date / datetime objects (passed through / truncated)

    Raises ValueError for anything else, including impossible dates like
    '2025-02-30'.
    """
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    if not isinstance(value, str):
        raise ValueError("Date must be an ISO-8601 string")
    s = value.strip()
    if s == "":
        raise ValueError("Date is required")
    if "T" in s or " " in s:
        # fromisoformat only learned the 'Z' suffix in 3.11
        if s.endswith("Z"):
            s = s[:-1] + "+00:00"
        try:
            return datetime.fromisoformat(s).date()
        except ValueError:
            raise ValueError(f"Invalid date: {value!r}")
    try:
        return date.fromisoformat(s)
    except ValueError:
        raise ValueError(f"Invalid date: {value!r}")


def hhmm_to_time(hhmm: str):
    """Parse time strings into datetime.time.

    Accepts common formats:
      - 'HH:MM' (24h)
      - 'HH:MM:SS' (24h)
      - 'H:MM AM/PM' (12h), case-insensitive
      - 'H AM/PM'

    Returns None for empty strings.
    """
    if hhmm is None:
        return None
    if isinstance(hhmm, time):
        return hhmm
    s = hhmm.strip()
    if s == "":
        return None

    candidates = [
        "%H:%M",
        "%H:%M:%S",
        "%I:%M %p",
        "%I %p",
    ]
    for fmt in candidates:
        try:
            return datetime.strptime(s, fmt).time()
        except ValueError:
            continue
    raise ValueError("Time must be in formats like 'HH:MM' or '10:00 AM'")


def time_to_hhmm(t) -> str | None:
    """Format datetime.time -> 'HH:MM'. Returns None if t is None."""
    if t is None:
        return None
    if isinstance(t, str):
        return t
    return f"{t.hour:02d}:{t.minute:02d}"


def as_utc(dt: datetime | None) -> datetime | None:
    """Attach UTC to naive datetimes (SQLite drops tzinfo) and convert aware ones."""
    if dt is None:
        return None
    if dt.tzinfo is None:
        return dt.replace(tzinfo=timezone.utc)
    return dt.astimezone(timezone.utc)


def utcnow() -> datetime:
    return datetime.now(timezone.utc)


def next_timestamp(previous: datetime | None = None) -> datetime:
    """Current UTC time, nudged forward so it is strictly after `previous`.

    Two updates landing in the same clock tick would otherwise share an
    updated_at value.
    """
    now = utcnow()
    previous = as_utc(previous)
    if previous is not None and now <= previous:
        now = previous + timedelta(microseconds=1)
    return now
