"""Human-friendly formatting of amounts and counts for the calculator screens.

Thin facade over the `humanize` library, so screens never depend on its
signatures directly.
"""

import humanize

CURRENCY_SUFFIX = "원"


def format_won(amount: int) -> str:
    """Format a currency amount with thousands separators, e.g. '480,000원'."""
    return f"{humanize.intcomma(amount)}{CURRENCY_SUFFIX}"


def format_months(months: int) -> str:
    """Format a month count, e.g. '1 month', '24 months (2 years)'."""
    label = f"{months} month" if months == 1 else f"{humanize.intcomma(months)} months"
    years, rest = divmod(months, 12)
    if years and not rest:
        label += f" ({years} year)" if years == 1 else f" ({years} years)"
    return label


def format_cameras(outdoor: int, indoor: int) -> str:
    """Summarize a camera inventory, e.g. '3 cameras (2 outdoor, 1 indoor)'."""
    total = outdoor + indoor
    noun = "camera" if total == 1 else "cameras"
    return f"{total} {noun} ({outdoor} outdoor, {indoor} indoor)"
