"""Month/date stamps for allocation rows."""

from typing import Optional, Tuple

import pendulum


def current_month_and_date(
    timezone: str = "UTC",
    now: Optional[pendulum.DateTime] = None,
) -> Tuple[str, str]:
    """
    Month name and DD/MM/YYYY date in the given timezone.

    Args:
        timezone: IANA timezone name, e.g. "Asia/Kolkata"
        now: Point in time to format (defaults to the current time)

    Returns:
        Tuple like ("December", "05/12/2025")
    """
    moment = (now or pendulum.now("UTC")).in_timezone(timezone)
    return moment.format("MMMM", locale="en"), moment.format("DD/MM/YYYY")
