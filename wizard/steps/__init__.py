"""Calculator screens, one per wizard step."""

from wizard.steps.camera_step import run_camera_count_step, run_has_cameras_step
from wizard.steps.fee_step import run_monthly_fee_step
from wizard.steps.period_step import run_period_step
from wizard.steps.provider_step import run_provider_step
from wizard.steps.result_step import run_exemption_step, run_penalty_step

__all__ = [
    "run_provider_step",
    "run_monthly_fee_step",
    "run_period_step",
    "run_penalty_step",
    "run_has_cameras_step",
    "run_camera_count_step",
    "run_exemption_step",
]
