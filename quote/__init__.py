"""Early-termination penalty and exemption calculation."""

from quote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from quote.engine import compute_exemption, compute_penalty, compute_quote
from quote.models import Answers, PeriodUnit, Provider, QuoteResult

__all__ = [
    "Answers",
    "DEFAULT_QUOTE_CONFIG",
    "PeriodUnit",
    "Provider",
    "QuoteConfig",
    "QuoteResult",
    "compute_exemption",
    "compute_penalty",
    "compute_quote",
]
