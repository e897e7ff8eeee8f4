"""Input checks shared by the wizard controller and the terminal screens.

Each check returns (ok, reason). reason is "ok" on success and a
human-readable message otherwise.
"""

from typing import Any

from quote.models import PeriodUnit

MONTHS_PER_YEAR = 12


def is_whole_number(value: Any) -> bool:
    """True for int values; bool is rejected even though it subclasses int."""
    return isinstance(value, int) and not isinstance(value, bool)


def check_monthly_fee(amount: Any) -> tuple[bool, str]:
    if not is_whole_number(amount):
        return False, "monthly fee must be a whole number"
    if amount <= 0:
        return False, "monthly fee must be greater than 0"
    return True, "ok"


def check_fee_bucket(value: Any, buckets: list[int]) -> tuple[bool, str]:
    if not is_whole_number(value) or value not in buckets:
        return False, f"unknown fee range {value!r}"
    return True, "ok"


def parse_period_unit(unit: Any) -> PeriodUnit | None:
    """Accept a PeriodUnit or its string value. Returns None if unrecognized."""
    if isinstance(unit, PeriodUnit):
        return unit
    try:
        return PeriodUnit(unit)
    except ValueError:
        return None


def check_period(amount: Any, unit: Any) -> tuple[bool, str]:
    if not is_whole_number(amount):
        return False, "period must be a whole number"
    if amount <= 0:
        return False, "period must be greater than 0"
    if parse_period_unit(unit) is None:
        return False, f"unknown period unit {unit!r}"
    return True, "ok"


def period_to_months(amount: int, unit: PeriodUnit) -> int:
    """Normalize a period to months."""
    if unit is PeriodUnit.YEAR:
        return amount * MONTHS_PER_YEAR
    return amount


def check_camera_counts(outdoor: Any, indoor: Any) -> tuple[bool, str]:
    if not is_whole_number(outdoor) or not is_whole_number(indoor):
        return False, "camera counts must be whole numbers"
    if outdoor < 0 or indoor < 0:
        return False, "camera counts cannot be negative"
    if outdoor + indoor < 1:
        return False, "at least one camera is required"
    return True, "ok"


def parse_whole_number(text: str) -> int | None:
    """Parse user-typed digits, allowing thousands separators. None if not a number."""
    cleaned = text.strip().replace(",", "").replace("_", "")
    if not cleaned.isdigit():
        return None
    return int(cleaned)
