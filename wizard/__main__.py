"""Entry point: python -m wizard. Exit codes in wizard.constants."""

import logging
import sys
from pathlib import Path

from core.config_check import is_configured
from core.logging_config import setup_logging
from core.settings import get_setting, load_settings
from quote.config import load_quote_config
from wizard.constants import WIZARD_CANCELLED, WIZARD_CONFIG_ERROR, WIZARD_FINISHED
from wizard.controller import WizardController
from wizard.runner import run_wizard

logger = logging.getLogger(__name__)


def build_controller(settings: dict) -> WizardController:
    """Create a fresh controller for one session from merged settings."""
    return WizardController(
        config=load_quote_config(settings),
        include_exemption=get_setting(settings, "wizard.flow", "full") != "penalty_only",
    )


def main() -> int:
    """Run one calculator session. Returns the process exit code."""
    project_root = Path(__file__).resolve().parent.parent

    ok, reason = is_configured(project_root=project_root)
    if not ok:
        print(f"Configuration error: {reason}", file=sys.stderr)
        return WIZARD_CONFIG_ERROR

    settings = load_settings(project_root / "config")
    setup_logging(project_root, settings)
    controller = build_controller(settings)
    logger.info("Starting session (exemption flow: %s)", controller.include_exemption)

    try:
        result = run_wizard(controller)
    except KeyboardInterrupt:
        print("\n\nCancelled.")
        return WIZARD_CANCELLED

    if result.finished:
        print("\nThanks for using the calculator.\n")
        return WIZARD_FINISHED

    print("\nCancelled.")
    return WIZARD_CANCELLED


if __name__ == "__main__":
    sys.exit(main())
