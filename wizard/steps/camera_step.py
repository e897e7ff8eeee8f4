"""Steps 5 and 6: existing camera inventory."""

import questionary
from questionary import Choice

from wizard.controller import WizardController
from wizard.ui import BACK, STYLE, ask_number, back_choice


def run_has_cameras_step(controller: WizardController) -> bool:
    """Ask whether cameras are already installed. Returns False if user cancelled."""
    print("\nIf you already have CCTV installed, you may get an extra benefit.\n")
    choice = questionary.select(
        "Do you have CCTV cameras installed already?",
        choices=[
            Choice("Yes, I do", True),
            Choice("No, I don't", False),
            back_choice(),
        ],
        style=STYLE,
    ).ask()
    if choice is None:
        return False
    if choice == BACK:
        return controller.go_back()
    return controller.select_has_cameras(choice)


def run_camera_count_step(controller: WizardController) -> bool:
    """Ask for outdoor and indoor camera counts. Returns False if user cancelled."""
    limit = controller.config.max_cameras_per_location
    answers = controller.answers
    has_counts = answers.total_camera_count > 0

    def _check(count: int) -> tuple[bool, str]:
        if count > limit:
            return False, f"enter at most {limit}"
        return True, "ok"

    outdoor_default = answers.outdoor_camera_count if has_counts else 1
    indoor_default = answers.indoor_camera_count if has_counts else 0

    print("\nA rough count is fine.\n")
    while True:
        outdoor = ask_number(
            "Outdoor cameras (building exterior, parking lot):",
            _check,
            default=outdoor_default,
        )
        if outdoor is None:
            return False
        if outdoor == BACK:
            return controller.go_back()
        outdoor_default = outdoor

        indoor = ask_number(
            "Indoor cameras (office, store interior):",
            _check,
            default=indoor_default,
        )
        if indoor is None:
            return False
        if indoor == BACK:
            continue
        indoor_default = indoor

        if controller.submit_camera_counts(outdoor, indoor):
            return True
        print("Please enter at least one camera.\n")
