"""Shared UI styling and prompt helpers for the calculator screens."""

from typing import Callable

import questionary
from questionary import Choice, Style

from quote.validation import parse_whole_number

STYLE = Style(
    [
        ("qmark", "fg:cyan bold"),
        ("question", "bold"),
        ("answer", "fg:green bold"),
        ("pointer", "fg:cyan bold"),
        ("highlighted", "fg:cyan bold"),
        ("selected", "fg:green"),
        ("instruction", "fg:gray"),
    ]
)

BACK = "__back__"
FINISH = "finish"


def back_choice() -> Choice:
    return Choice("← Back", BACK)


def ask_number(
    prompt: str,
    check: Callable[[int], tuple[bool, str]],
    default: int | None = None,
) -> int | str | None:
    """Prompt for a whole number until it passes `check`.

    Returns the number, BACK when the user typed "b", or None if cancelled.
    """
    def _validate(text: str) -> bool | str:
        if text.strip().lower() == "b":
            return True
        value = parse_whole_number(text)
        if value is None:
            return "Please enter digits only"
        ok, reason = check(value)
        return True if ok else reason.capitalize()

    answer = questionary.text(
        prompt,
        default="" if default is None else str(default),
        instruction="(b = back)",
        validate=_validate,
        style=STYLE,
    ).ask()
    if answer is None:
        return None
    if answer.strip().lower() == "b":
        return BACK
    return parse_whole_number(answer)
