"""Settings validation run before the calculator starts."""

from pathlib import Path

import yaml
from pydantic import ValidationError

from core.settings import WIZARD_FLOWS, check_sections
from quote.config import load_quote_config


def _read_settings(settings_file: Path) -> tuple[dict, str | None]:
    """Load and parse settings YAML. Returns (settings, None) or ({}, error_message)."""
    try:
        data = yaml.safe_load(settings_file.read_text(encoding="utf-8")) or {}
    except yaml.YAMLError as e:
        return ({}, f"settings.yaml parse error: {e}")
    if not isinstance(data, dict):
        return ({}, "settings.yaml must be a YAML object")
    return (data, None)


def _check_quote(settings: dict) -> tuple[bool, str]:
    try:
        load_quote_config(settings)
    except (ValidationError, ValueError) as e:
        return False, f"invalid quote settings: {e}"
    return True, "ok"


def _check_flow(settings: dict) -> tuple[bool, str]:
    flow = (settings.get("wizard") or {}).get("flow", "full")
    if flow not in WIZARD_FLOWS:
        return False, f"wizard.flow must be one of {', '.join(WIZARD_FLOWS)}, got {flow!r}"
    return True, "ok"


def _check_logging(settings: dict) -> tuple[bool, str]:
    cfg = settings.get("logging") or {}
    for key in ("max_bytes", "backup_count"):
        if key not in cfg:
            continue
        try:
            int(cfg[key])
        except (TypeError, ValueError):
            return False, f"logging.{key} must be a whole number, got {cfg[key]!r}"
    return True, "ok"


def is_configured(
    settings_path: Path | None = None,
    project_root: Path | None = None,
) -> tuple[bool, str]:
    """Check whether settings are usable. Returns (ok, reason).

    A missing settings file is fine: built-in defaults apply.
    """
    root = project_root or Path.cwd()
    settings_file = settings_path or (root / "config" / "settings.yaml")
    if not settings_file.exists():
        return True, "using defaults"
    settings, err = _read_settings(settings_file)
    if err is not None:
        return False, err
    for check in (check_sections, _check_flow, _check_logging, _check_quote):
        ok, reason = check(settings)
        if not ok:
            return False, reason
    return True, "ok"
