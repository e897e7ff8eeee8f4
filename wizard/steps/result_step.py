"""Steps 4 and 7: penalty and exemption results."""

import questionary
from questionary import Choice

from core.utils.formatting import format_cameras, format_months, format_won
from wizard.controller import WizardController
from wizard.ui import BACK, FINISH, STYLE, back_choice

_NEXT = "next"

PENALTY_DISCLAIMER = (
    "* Based on the publicly announced penalty rates. This estimate has no legal effect."
)
EXEMPTION_DISCLAIMER = "* The final exemption amount is confirmed after consultation."


def run_penalty_step(controller: WizardController) -> bool | str:
    """Show the penalty. Returns FINISH when the user closes a terminal penalty screen."""
    answers = controller.answers
    penalty = controller.compute_penalty()

    print()
    print(f"  Provider:          {answers.provider.label}")
    print(f"  Monthly fee:       {format_won(answers.monthly_fee)}")
    print(f"  Remaining period:  {format_months(answers.remaining_months)}")
    print()
    print(f"  Your remaining penalty is {format_won(penalty)}")
    print(f"\n{PENALTY_DISCLAIMER}\n")

    choices: list[Choice] = []
    if controller.include_exemption:
        choices.append(Choice("Check exemption eligibility", _NEXT))
    else:
        choices.append(Choice("Finish", FINISH))
    choices.append(back_choice())

    choice = questionary.select("What next?", choices=choices, style=STYLE).ask()
    if choice is None:
        return False
    if choice == FINISH:
        return FINISH
    if choice == BACK:
        return controller.go_back()
    return controller.proceed_to_exemption_check()


def run_exemption_step(controller: WizardController) -> bool | str:
    """Show penalty, exemption and what is left. Returns FINISH, or False if cancelled."""
    answers = controller.answers
    result = controller.quote()

    print()
    if answers.has_existing_cameras:
        print(
            "  Existing cameras:  "
            f"{format_cameras(answers.outdoor_camera_count, answers.indoor_camera_count)}"
        )
    print(f"  Original penalty:  {format_won(result.penalty)}")
    print(f"  Exemption:         {format_won(result.exemption)}")
    print(f"  Left to pay:       {format_won(result.remaining)}")
    print()
    if result.exemption > 0:
        print(f"  Congratulations! You can be exempted from {format_won(result.exemption)}.")
    else:
        print("  No camera exemption applies to your contract.")
    print(f"\n{EXEMPTION_DISCLAIMER}\n")

    choice = questionary.select(
        "What next?",
        choices=[Choice("Finish", FINISH), back_choice()],
        style=STYLE,
    ).ask()
    if choice is None:
        return False
    if choice == BACK:
        return controller.go_back()
    return FINISH
