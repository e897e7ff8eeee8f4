"""Exit codes for `python -m wizard`."""

WIZARD_FINISHED = 0  # User reached the final screen and closed it
WIZARD_CANCELLED = 1  # User cancelled (Ctrl+C or Esc on a prompt)
WIZARD_CONFIG_ERROR = 2  # config/settings.yaml failed validation
