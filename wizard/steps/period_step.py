"""Step 3: remaining contract period, in years or months."""

import questionary
from questionary import Choice

from core.utils.formatting import format_won
from quote.models import PeriodUnit
from quote.validation import check_period
from wizard.controller import WizardController
from wizard.ui import BACK, STYLE, ask_number, back_choice


def run_period_step(controller: WizardController) -> bool:
    """Collect the remaining contract period. Returns False if user cancelled."""
    print(f"\nMonthly fee: {format_won(controller.answers.monthly_fee)}\n")

    while True:
        unit = questionary.select(
            "How long is left on your contract?",
            choices=[
                Choice("In months", PeriodUnit.MONTH.value),
                Choice("In years", PeriodUnit.YEAR.value),
                back_choice(),
            ],
            style=STYLE,
        ).ask()
        if unit is None:
            return False
        if unit == BACK:
            return controller.go_back()

        prompt = "Remaining years:" if unit == PeriodUnit.YEAR.value else "Remaining months:"
        amount = ask_number(prompt, lambda n: check_period(n, unit))
        if amount is None:
            return False
        if amount == BACK:
            continue
        if controller.submit_period(amount, unit):
            return True
