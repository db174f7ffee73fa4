"""Date formatting for pass.json.

Wallet dates are written with minute precision and a signed numeric UTC
offset (``yyyy-MM-dd'T'HH:mmZZZZZ``), e.g. ``2025-01-03T19:00+01:00``.
"""

from datetime import UTC, datetime

PASS_DATE_FORMAT = "%Y-%m-%dT%H:%M%z"


def format_pass_date(dt: datetime) -> str:
    """Format a datetime the way pass.json expects it.

    Naive datetimes are treated as UTC. Seconds and microseconds are dropped.

    Args:
        dt: The datetime to format.

    Returns:
        String like ``2025-01-03T19:00+01:00``.
    """
    if dt.tzinfo is None or dt.utcoffset() is None:
        dt = dt.replace(tzinfo=UTC)

    formatted = dt.strftime(PASS_DATE_FORMAT)

    # Insert colon in timezone offset: +0000 -> +00:00
    if len(formatted) >= 5 and formatted[-5] in ("+", "-"):
        formatted = formatted[:-2] + ":" + formatted[-2:]

    return formatted


def parse_pass_date(value: str) -> datetime:
    """Parse a pass.json date back into an aware datetime.

    Raises:
        ValueError: If the value does not follow the pass date pattern.
    """
    return datetime.strptime(value, PASS_DATE_FORMAT)
