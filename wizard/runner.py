"""Calculator session orchestration."""

import logging
from dataclasses import dataclass
from typing import Callable

from wizard.controller import WizardController
from wizard.state import Step
from wizard.steps import (
    run_camera_count_step,
    run_exemption_step,
    run_has_cameras_step,
    run_monthly_fee_step,
    run_penalty_step,
    run_period_step,
    run_provider_step,
)
from wizard.ui import FINISH

logger = logging.getLogger(__name__)

_SCREENS: dict[Step, Callable[[WizardController], bool | str]] = {
    Step.PROVIDER_SELECT: run_provider_step,
    Step.MONTHLY_FEE_ENTRY: run_monthly_fee_step,
    Step.PERIOD_ENTRY: run_period_step,
    Step.PENALTY_REVEAL: run_penalty_step,
    Step.HAS_CAMERAS_QUERY: run_has_cameras_step,
    Step.CAMERA_COUNT_ENTRY: run_camera_count_step,
    Step.EXEMPTION_REVEAL: run_exemption_step,
}


@dataclass
class WizardResult:
    """Result of running the calculator."""

    finished: bool  # True if the user closed the final screen
    last_step: Step


def run_wizard(controller: WizardController) -> WizardResult:
    """Render screens for the controller's current step until the user leaves.

    A screen returns True after a transition, FINISH when the user closes
    a terminal screen and False when they cancel.
    """
    print("\nCCTV contract penalty calculator\n")

    while True:
        step = controller.step
        screen = _SCREENS[step]
        outcome = screen(controller)
        if outcome is True:
            continue

        finished = outcome == FINISH
        logger.info("Session ended at %s (finished=%s)", step.name, finished)
        return WizardResult(finished=finished, last_step=step)
