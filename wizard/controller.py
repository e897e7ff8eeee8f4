"""Step-flow state machine for the penalty calculator.

One WizardController per session. Screens read `snapshot()` and call the
intent methods; every intent returns True when the transition applied and
False when it was rejected, in which case step and answers are unchanged.
"""

import logging
from dataclasses import replace
from typing import Any

from quote.config import DEFAULT_QUOTE_CONFIG, QuoteConfig
from quote.engine import compute_exemption, compute_penalty, compute_quote
from quote.models import Answers, Provider, QuoteResult
from quote.validation import (
    check_camera_counts,
    check_fee_bucket,
    check_monthly_fee,
    check_period,
    parse_period_unit,
    period_to_months,
)
from wizard.state import Step, WizardSnapshot, WizardState

logger = logging.getLogger(__name__)


class WizardController:
    """Owns the current step, the collected answers and the transition rules."""

    def __init__(
        self,
        config: QuoteConfig = DEFAULT_QUOTE_CONFIG,
        include_exemption: bool = True,
    ) -> None:
        self._config = config
        self._include_exemption = include_exemption
        self._state = WizardState()

    @property
    def config(self) -> QuoteConfig:
        return self._config

    @property
    def include_exemption(self) -> bool:
        return self._include_exemption

    @property
    def step(self) -> Step:
        return self._state.step

    @property
    def answers(self) -> Answers:
        return self._state.answers

    @property
    def terminal_step(self) -> Step:
        if self._include_exemption:
            return Step.EXEMPTION_REVEAL
        return Step.PENALTY_REVEAL

    @property
    def is_finished(self) -> bool:
        return self._state.step == self.terminal_step

    def snapshot(self) -> WizardSnapshot:
        return WizardSnapshot(step=self._state.step, answers=self._state.answers)

    # Derived values

    def compute_penalty(self) -> int:
        return compute_penalty(self._state.answers, self._config)

    def compute_exemption(self) -> int:
        return compute_exemption(self._state.answers, self._config)

    def quote(self) -> QuoteResult:
        return compute_quote(self._state.answers, self._config)

    # Intents

    def select_provider(self, provider: Any) -> bool:
        if not self._expect(Step.PROVIDER_SELECT, "select_provider"):
            return False
        try:
            provider = Provider(provider)
        except ValueError:
            return self._reject("select_provider", f"unknown provider {provider!r}")
        self._apply(Step.MONTHLY_FEE_ENTRY, provider=provider)
        return True

    def resume(self) -> bool:
        """Continue from step 1 with the provider chosen on an earlier pass."""
        if not self._expect(Step.PROVIDER_SELECT, "resume"):
            return False
        if self._state.answers.provider is None:
            return self._reject("resume", "no provider selected yet")
        self._apply(Step.MONTHLY_FEE_ENTRY)
        return True

    def submit_monthly_fee(self, amount: Any) -> bool:
        if not self._expect(Step.MONTHLY_FEE_ENTRY, "submit_monthly_fee"):
            return False
        ok, reason = check_monthly_fee(amount)
        if not ok:
            return self._reject("submit_monthly_fee", reason)
        self._apply(Step.PERIOD_ENTRY, monthly_fee=amount)
        return True

    def submit_fee_range(self, bucket_value: Any) -> bool:
        """Shortcut for users who don't know their fee: pick a configured bucket."""
        if not self._expect(Step.MONTHLY_FEE_ENTRY, "submit_fee_range"):
            return False
        ok, reason = check_fee_bucket(bucket_value, self._config.bucket_values())
        if not ok:
            return self._reject("submit_fee_range", reason)
        return self.submit_monthly_fee(bucket_value)

    def submit_period(self, amount: Any, unit: Any = "month") -> bool:
        if not self._expect(Step.PERIOD_ENTRY, "submit_period"):
            return False
        ok, reason = check_period(amount, unit)
        if not ok:
            return self._reject("submit_period", reason)
        months = period_to_months(amount, parse_period_unit(unit))
        self._apply(Step.PENALTY_REVEAL, remaining_months=months)
        return True

    def proceed_to_exemption_check(self) -> bool:
        if not self._expect(Step.PENALTY_REVEAL, "proceed_to_exemption_check"):
            return False
        if not self._include_exemption:
            return self._reject("proceed_to_exemption_check", "exemption flow disabled")
        self._apply(Step.HAS_CAMERAS_QUERY)
        return True

    def select_has_cameras(self, has: bool) -> bool:
        if not self._expect(Step.HAS_CAMERAS_QUERY, "select_has_cameras"):
            return False
        if not isinstance(has, bool):
            return self._reject("select_has_cameras", f"expected a yes/no answer, got {has!r}")
        if has:
            self._apply(Step.CAMERA_COUNT_ENTRY, has_existing_cameras=True)
        else:
            self._apply(
                Step.EXEMPTION_REVEAL,
                has_existing_cameras=False,
                outdoor_camera_count=0,
                indoor_camera_count=0,
            )
        return True

    def submit_camera_counts(self, outdoor: Any, indoor: Any) -> bool:
        if not self._expect(Step.CAMERA_COUNT_ENTRY, "submit_camera_counts"):
            return False
        ok, reason = check_camera_counts(outdoor, indoor)
        if not ok:
            return self._reject("submit_camera_counts", reason)
        self._apply(
            Step.EXEMPTION_REVEAL,
            outdoor_camera_count=outdoor,
            indoor_camera_count=indoor,
        )
        return True

    def go_back(self) -> bool:
        """Move to the previous screen. No-op at step 1. Answers are kept."""
        target = previous_step(self._state.step, self._state.answers)
        if target is None:
            return False
        self._apply(target)
        return True

    # Internals

    def _expect(self, step: Step, intent: str) -> bool:
        if self._state.step != step:
            self._reject(intent, f"not accepted at {self._state.step.name}")
            return False
        return True

    def _reject(self, intent: str, reason: str) -> bool:
        logger.info("Rejected %s at %s: %s", intent, self._state.step.name, reason)
        return False

    def _apply(self, target: Step, **changes: Any) -> None:
        answers = replace(self._state.answers, **changes) if changes else self._state.answers
        logger.debug("Step %s -> %s", self._state.step.name, target.name)
        self._state = WizardState(step=target, answers=answers)


def previous_step(step: Step, answers: Answers) -> Step | None:
    """Back target for a step. Step 7 depends on the stored camera answer, not on history."""
    if step == Step.PROVIDER_SELECT:
        return None
    if step == Step.EXEMPTION_REVEAL:
        if answers.has_existing_cameras:
            return Step.CAMERA_COUNT_ENTRY
        return Step.HAS_CAMERAS_QUERY
    return Step(step - 1)
