"""Step 2: monthly fee, typed in or picked from a range."""

import questionary
from questionary import Choice

from core.utils.formatting import format_won
from quote.validation import check_monthly_fee
from wizard.controller import WizardController
from wizard.ui import BACK, STYLE, ask_number, back_choice

_TYPE_IN = "type_in"
_RANGE = "range"


def run_monthly_fee_step(controller: WizardController) -> bool:
    """Collect the monthly fee. Returns False if user cancelled."""
    while True:
        how = questionary.select(
            "How much do you pay per month?",
            choices=[
                Choice("Enter my monthly fee", _TYPE_IN),
                Choice("I don't know my exact fee", _RANGE),
                back_choice(),
            ],
            style=STYLE,
        ).ask()
        if how is None:
            return False
        if how == BACK:
            return controller.go_back()

        if how == _TYPE_IN:
            current = controller.answers.monthly_fee or None
            amount = ask_number("Monthly fee (원):", check_monthly_fee, default=current)
            if amount is None:
                return False
            if amount == BACK:
                continue
            if controller.submit_monthly_fee(amount):
                return True
            continue

        bucket = _select_fee_bucket(controller)
        if bucket is None:
            return False
        if bucket == BACK:
            continue
        if controller.submit_fee_range(bucket):
            return True


def _select_fee_bucket(controller: WizardController) -> int | str | None:
    """Pick one of the configured fee ranges. Returns value, BACK, or None if cancelled."""
    choices: list[Choice] = [
        Choice(b.label, b.value) for b in controller.config.fee_buckets
    ]
    choices.append(back_choice())
    return questionary.select(
        "Roughly how much do you pay per month?",
        choices=choices,
        instruction=f"(current: {format_won(controller.answers.monthly_fee)})"
        if controller.answers.monthly_fee
        else None,
        style=STYLE,
    ).ask()
