"""Quote parameters: Pydantic model and settings loader."""

from decimal import Decimal
from typing import Any

from pydantic import BaseModel, Field, field_validator, model_validator

from quote.models import Provider


class FeeBucket(BaseModel):
    """One choice of the "I don't know my fee" shortcut."""

    label: str
    value: int = Field(gt=0)


def _default_fee_buckets() -> list[FeeBucket]:
    return [
        FeeBucket(label="Around 30,000원", value=30000),
        FeeBucket(label="Around 50,000원", value=50000),
        FeeBucket(label="Around 70,000원", value=70000),
        FeeBucket(label="100,000원 or more", value=100000),
    ]


class QuoteConfig(BaseModel):
    """Rates and credits used by the quote engine (settings.yaml `quote` section)."""

    penalty_rates: dict[Provider, Decimal] = Field(
        default_factory=lambda: {
            Provider.S1: Decimal("0.80"),
            Provider.CAPS: Decimal("0.10"),
        }
    )
    outdoor_camera_credit: int = Field(default=50000, ge=0)
    indoor_camera_credit: int = Field(default=30000, ge=0)
    fee_buckets: list[FeeBucket] = Field(default_factory=_default_fee_buckets)
    max_cameras_per_location: int = Field(default=99, ge=1)

    @field_validator("penalty_rates")
    @classmethod
    def _rates_in_range(cls, rates: dict[Provider, Decimal]) -> dict[Provider, Decimal]:
        for provider, rate in rates.items():
            if not Decimal(0) <= rate <= Decimal(1):
                raise ValueError(f"penalty rate for {provider.value!r} must be between 0 and 1")
        return rates

    @model_validator(mode="after")
    def _rates_cover_all_providers(self) -> "QuoteConfig":
        missing = [p.value for p in Provider if p not in self.penalty_rates]
        if missing:
            raise ValueError(f"penalty_rates missing providers: {', '.join(missing)}")
        return self

    def bucket_values(self) -> list[int]:
        return [b.value for b in self.fee_buckets]


DEFAULT_QUOTE_CONFIG = QuoteConfig()


def load_quote_config(settings: dict[str, Any]) -> QuoteConfig:
    """Build QuoteConfig from the `quote` section of merged settings.

    Raises pydantic.ValidationError when the section is malformed.
    """
    section = settings.get("quote") or {}
    if not isinstance(section, dict):
        raise ValueError("quote settings must be a YAML object")
    return QuoteConfig.model_validate(section)
