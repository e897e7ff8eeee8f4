"""Wizard state: current step plus collected answers."""

from dataclasses import dataclass, field
from enum import IntEnum

from quote.models import Answers


class Step(IntEnum):
    """Screens of the calculator, in forward order."""

    PROVIDER_SELECT = 1
    MONTHLY_FEE_ENTRY = 2
    PERIOD_ENTRY = 3
    PENALTY_REVEAL = 4
    HAS_CAMERAS_QUERY = 5
    CAMERA_COUNT_ENTRY = 6
    EXEMPTION_REVEAL = 7


@dataclass
class WizardState:
    """Mutable state owned by WizardController. Starts at step 1 with empty answers."""

    step: Step = Step.PROVIDER_SELECT
    answers: Answers = field(default_factory=Answers)


@dataclass(frozen=True)
class WizardSnapshot:
    """Read-only view of WizardState handed to the screens."""

    step: Step
    answers: Answers
