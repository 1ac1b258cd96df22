from datetime import date, datetime, timedelta
from calendar import monthrange


def today() -> date:
    """Current calendar date (server local)."""
    return date.today()


def now() -> datetime:
    """Current naive local datetime, used for entity timestamps."""
    return datetime.now()


def is_future(d: date) -> bool:
    return d > today()


def is_past(d: date) -> bool:
    return d < today()


def is_within_range(d: date, start: date, end: date) -> bool:
    """Inclusive on both ends."""
    return start <= d <= end


def start_of_week(ref: date = None) -> date:
    """Monday of the week containing ref (defaults to today)."""
    ref = ref or today()
    return ref - timedelta(days=ref.weekday())


def end_of_week(ref: date = None) -> date:
    """Friday of the week containing ref. Weekends are not working days."""
    return start_of_week(ref) + timedelta(days=4)


def start_of_month(ref: date = None) -> date:
    ref = ref or today()
    return ref.replace(day=1)


def end_of_month(ref: date = None) -> date:
    ref = ref or today()
    return ref.replace(day=monthrange(ref.year, ref.month)[1])


def format_display_date(d: date) -> str:
    """Format a date for display, e.g. 'Jan 05, 2026'."""
    return d.strftime("%b %d, %Y")
