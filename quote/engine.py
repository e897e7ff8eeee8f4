"""Penalty and exemption calculation.

Pure functions over Answers. Nothing here keeps state, so results are
recomputed on every call and can never go stale after an earlier answer
is edited.
"""

from decimal import ROUND_FLOOR, Decimal

from quote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from quote.models import Answers, Provider, QuoteResult


def penalty_rate(provider: Provider, config: QuoteConfig = DEFAULT_QUOTE_CONFIG) -> Decimal:
    """Rate applied to the remaining payments. Defined for every Provider."""
    return config.penalty_rates[provider]


def compute_penalty(answers: Answers, config: QuoteConfig = DEFAULT_QUOTE_CONFIG) -> int:
    """floor(monthly_fee * remaining_months * rate(provider)).

    Raises ValueError if no provider has been selected.
    """
    if answers.provider is None:
        raise ValueError("provider must be selected before computing a penalty")
    remaining_payments = Decimal(answers.monthly_fee) * answers.remaining_months
    penalty = remaining_payments * penalty_rate(answers.provider, config)
    return int(penalty.to_integral_value(rounding=ROUND_FLOOR))


def raw_camera_credit(answers: Answers, config: QuoteConfig = DEFAULT_QUOTE_CONFIG) -> int:
    """Uncapped credit for the existing camera inventory."""
    if not answers.has_existing_cameras:
        return 0
    return (
        answers.outdoor_camera_count * config.outdoor_camera_credit
        + answers.indoor_camera_count * config.indoor_camera_credit
    )


def compute_exemption(answers: Answers, config: QuoteConfig = DEFAULT_QUOTE_CONFIG) -> int:
    """Camera credit capped at the penalty it offsets."""
    credit = raw_camera_credit(answers, config)
    if credit == 0:
        return 0
    return min(credit, compute_penalty(answers, config))


def compute_quote(answers: Answers, config: QuoteConfig = DEFAULT_QUOTE_CONFIG) -> QuoteResult:
    return QuoteResult(
        penalty=compute_penalty(answers, config),
        exemption=compute_exemption(answers, config),
    )
