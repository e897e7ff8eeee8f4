"""Value types shared by the quote engine and the wizard."""

from dataclasses import dataclass
from enum import Enum


class Provider(str, Enum):
    """Security-service vendor whose contract is being terminated."""

    S1 = "s1"
    CAPS = "caps"

    @property
    def label(self) -> str:
        return _PROVIDER_LABELS[self]


_PROVIDER_LABELS = {
    Provider.S1: "S-1 (에스원)",
    Provider.CAPS: "ADT Caps (캡스)",
}


class PeriodUnit(str, Enum):
    """Unit the remaining contract period is entered in."""

    YEAR = "year"
    MONTH = "month"


@dataclass(frozen=True)
class Answers:
    """Facts collected by the wizard.

    monthly_fee and remaining_months are 0 until their steps complete.
    Camera counts only matter when has_existing_cameras is True.
    """

    provider: Provider | None = None
    monthly_fee: int = 0
    remaining_months: int = 0
    has_existing_cameras: bool = False
    outdoor_camera_count: int = 0
    indoor_camera_count: int = 0

    @property
    def total_camera_count(self) -> int:
        return self.outdoor_camera_count + self.indoor_camera_count


@dataclass(frozen=True)
class QuoteResult:
    """Penalty and exemption derived from one set of answers. Never stored."""

    penalty: int
    exemption: int

    @property
    def remaining(self) -> int:
        """Penalty left to pay after the exemption credit."""
        return self.penalty - self.exemption
