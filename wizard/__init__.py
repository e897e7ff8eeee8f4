"""Step-by-step CCTV contract penalty calculator."""

from wizard.constants import WIZARD_CANCELLED, WIZARD_CONFIG_ERROR, WIZARD_FINISHED
from wizard.controller import WizardController
from wizard.state import Step, WizardSnapshot

__all__ = [
    "WIZARD_CANCELLED",
    "WIZARD_CONFIG_ERROR",
    "WIZARD_FINISHED",
    "Step",
    "WizardController",
    "WizardSnapshot",
]
