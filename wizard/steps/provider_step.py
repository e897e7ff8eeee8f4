"""Step 1: which security provider the contract is with."""

import questionary
from questionary import Choice

from quote.models import Provider
from wizard.controller import WizardController
from wizard.ui import STYLE


def run_provider_step(controller: WizardController) -> bool:
    """Ask for the provider. Returns False if user cancelled."""
    current = controller.answers.provider
    choices = [Choice(p.label, p.value) for p in Provider]

    choice = questionary.select(
        "Which CCTV provider are you with?",
        choices=choices,
        default=current.value if current else None,
        style=STYLE,
    ).ask()
    if choice is None:
        return False

    if current is not None and choice == current.value:
        return controller.resume()
    return controller.select_provider(choice)
