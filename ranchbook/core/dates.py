from datetime import date, datetime, timedelta, timezone

def utc_now() -> datetime:
    """Naive UTC wall clock; every stored timestamp uses this convention."""
    return datetime.now(timezone.utc).replace(tzinfo=None)

def to_naive_utc(value):
    if value is None:
        return None
    if isinstance(value, datetime):
        if value.tzinfo is not None:
            value = value.astimezone(timezone.utc).replace(tzinfo=None)
        return value
    if isinstance(value, date):
        return datetime(value.year, value.month, value.day)
    return value

def month_start(now: datetime) -> datetime:
    return datetime(now.year, now.month, 1)

def upcoming_window(now: datetime, days: int) -> tuple[datetime, datetime]:
    return now, now + timedelta(days=days)

def _plural(count, unit):
    return "{} {}{}".format(count, unit, "" if count == 1 else "s")

def describe_age(birth_date, now: datetime | None = None) -> str:
    if birth_date is None:
        return "unknown"
    now = now or utc_now()
    birth = to_naive_utc(birth_date)
    days = (now - birth) // timedelta(days=1)

    if days < 30:
        return "{} days".format(days)
    if days < 365:
        return _plural(days // 30, "month")

    years = days // 365
    remaining_months = (days % 365) // 30
    if remaining_months > 0:
        return "{}y {}m".format(years, remaining_months)
    return _plural(years, "year")
