"""Tests for wizard.controller.WizardController."""

import logging

import pytest

from quote.config import QuoteConfig
from quote.models import Answers, PeriodUnit, Provider
from wizard.controller import WizardController, previous_step
from wizard.state import Step


def _at_penalty(
    provider: Provider = Provider.S1, fee: int = 50000, months: int = 12
) -> WizardController:
    """Controller advanced to PenaltyReveal."""
    c = WizardController()
    assert c.select_provider(provider)
    assert c.submit_monthly_fee(fee)
    assert c.submit_period(months, "month")
    return c


def _at_exemption_with_cameras(outdoor: int = 2, indoor: int = 1) -> WizardController:
    c = _at_penalty(Provider.CAPS, 30000, 10)
    assert c.proceed_to_exemption_check()
    assert c.select_has_cameras(True)
    assert c.submit_camera_counts(outdoor, indoor)
    return c


class TestInitialState:
    def test_starts_at_provider_select_with_defaults(self) -> None:
        c = WizardController()
        snap = c.snapshot()
        assert snap.step == Step.PROVIDER_SELECT
        assert snap.answers == Answers()
        assert snap.answers.provider is None
        assert snap.answers.monthly_fee == 0
        assert snap.answers.has_existing_cameras is False

    def test_sessions_are_independent(self) -> None:
        a = WizardController()
        b = WizardController()
        a.select_provider(Provider.S1)
        assert b.step == Step.PROVIDER_SELECT
        assert b.answers.provider is None


class TestForwardFlow:
    """Happy-path transitions through the seven steps."""

    def test_select_provider(self) -> None:
        c = WizardController()
        assert c.select_provider(Provider.CAPS) is True
        assert c.step == Step.MONTHLY_FEE_ENTRY
        assert c.answers.provider is Provider.CAPS

    def test_select_provider_by_value(self) -> None:
        c = WizardController()
        assert c.select_provider("s1") is True
        assert c.answers.provider is Provider.S1

    def test_submit_monthly_fee(self) -> None:
        c = WizardController()
        c.select_provider(Provider.S1)
        assert c.submit_monthly_fee(50000) is True
        assert c.step == Step.PERIOD_ENTRY
        assert c.answers.monthly_fee == 50000

    def test_submit_period_in_years_normalizes_to_months(self) -> None:
        c = WizardController()
        c.select_provider(Provider.S1)
        c.submit_monthly_fee(50000)
        assert c.submit_period(2, PeriodUnit.YEAR) is True
        assert c.step == Step.PENALTY_REVEAL
        assert c.answers.remaining_months == 24

    def test_submit_period_defaults_to_months(self) -> None:
        c = WizardController()
        c.select_provider(Provider.S1)
        c.submit_monthly_fee(50000)
        assert c.submit_period(7) is True
        assert c.answers.remaining_months == 7

    def test_penalty_scenario(self) -> None:
        c = _at_penalty(Provider.S1, 50000, 12)
        assert c.compute_penalty() == 480000

    def test_proceed_to_exemption_check(self) -> None:
        c = _at_penalty()
        assert c.proceed_to_exemption_check() is True
        assert c.step == Step.HAS_CAMERAS_QUERY

    def test_no_cameras_skips_count_entry(self) -> None:
        c = _at_penalty()
        c.proceed_to_exemption_check()
        assert c.select_has_cameras(False) is True
        assert c.step == Step.EXEMPTION_REVEAL
        assert c.answers.has_existing_cameras is False
        assert c.answers.outdoor_camera_count == 0
        assert c.answers.indoor_camera_count == 0
        assert c.compute_exemption() == 0
        assert c.is_finished

    def test_with_cameras_scenario(self) -> None:
        c = _at_exemption_with_cameras(2, 1)
        assert c.step == Step.EXEMPTION_REVEAL
        assert c.compute_penalty() == 30000
        assert c.compute_exemption() == 30000
        result = c.quote()
        assert (result.penalty, result.exemption, result.remaining) == (30000, 30000, 0)

    def test_fee_range_shortcut_matches_typed_fee(self) -> None:
        typed = WizardController()
        typed.select_provider(Provider.S1)
        typed.submit_monthly_fee(50000)

        bucket = WizardController()
        bucket.select_provider(Provider.S1)
        assert bucket.submit_fee_range(50000) is True
        assert bucket.snapshot() == typed.snapshot()

    def test_fee_range_uses_configured_buckets(self) -> None:
        config = QuoteConfig.model_validate({"fee_buckets": [{"label": "~45k", "value": 45000}]})
        c = WizardController(config=config)
        c.select_provider(Provider.S1)
        assert c.submit_fee_range(50000) is False
        assert c.submit_fee_range(45000) is True
        assert c.answers.monthly_fee == 45000


class TestRejections:
    """Invalid input leaves step and answers untouched."""

    def test_zero_fee_rejected(self) -> None:
        c = WizardController()
        c.select_provider(Provider.S1)
        before = c.snapshot()
        assert c.submit_monthly_fee(0) is False
        assert c.step == Step.MONTHLY_FEE_ENTRY
        assert c.snapshot() == before

    @pytest.mark.parametrize("amount", [-100, 1.5, "50000", None])
    def test_bad_fee_rejected(self, amount: object) -> None:
        c = WizardController()
        c.select_provider(Provider.S1)
        assert c.submit_monthly_fee(amount) is False
        assert c.step == Step.MONTHLY_FEE_ENTRY
        assert c.answers.monthly_fee == 0

    def test_unknown_provider_rejected(self) -> None:
        c = WizardController()
        assert c.select_provider("acme") is False
        assert c.step == Step.PROVIDER_SELECT
        assert c.answers.provider is None

    def test_bad_period_rejected(self) -> None:
        c = WizardController()
        c.select_provider(Provider.S1)
        c.submit_monthly_fee(50000)
        assert c.submit_period(0, "month") is False
        assert c.submit_period(3, "week") is False
        assert c.step == Step.PERIOD_ENTRY
        assert c.answers.remaining_months == 0

    def test_zero_cameras_rejected(self) -> None:
        c = _at_penalty()
        c.proceed_to_exemption_check()
        c.select_has_cameras(True)
        before = c.snapshot()
        assert c.submit_camera_counts(0, 0) is False
        assert c.snapshot() == before
        assert c.step == Step.CAMERA_COUNT_ENTRY

    def test_negative_camera_count_rejected(self) -> None:
        c = _at_penalty()
        c.proceed_to_exemption_check()
        c.select_has_cameras(True)
        assert c.submit_camera_counts(-1, 2) is False
        assert c.step == Step.CAMERA_COUNT_ENTRY

    def test_non_bool_camera_answer_rejected(self) -> None:
        c = _at_penalty()
        c.proceed_to_exemption_check()
        assert c.select_has_cameras("yes") is False
        assert c.step == Step.HAS_CAMERAS_QUERY

    def test_intent_at_wrong_step_rejected(self) -> None:
        c = WizardController()
        assert c.submit_monthly_fee(50000) is False
        assert c.submit_period(3, "month") is False
        assert c.proceed_to_exemption_check() is False
        assert c.select_has_cameras(True) is False
        assert c.submit_camera_counts(1, 1) is False
        assert c.step == Step.PROVIDER_SELECT
        assert c.answers == Answers()

    def test_rejection_is_logged(self, caplog: pytest.LogCaptureFixture) -> None:
        c = WizardController()
        c.select_provider(Provider.S1)
        with caplog.at_level(logging.INFO, logger="wizard.controller"):
            c.submit_monthly_fee(0)
        assert "Rejected submit_monthly_fee" in caplog.text


class TestGoBack:
    """Back navigation."""

    def test_noop_at_first_step(self) -> None:
        c = WizardController()
        for _ in range(5):
            assert c.go_back() is False
        assert c.step == Step.PROVIDER_SELECT
        assert c.answers == Answers()

    def test_back_keeps_answers(self) -> None:
        c = _at_penalty()
        assert c.go_back() is True
        assert c.step == Step.PERIOD_ENTRY
        assert c.answers.remaining_months == 12
        assert c.answers.monthly_fee == 50000

    def test_exemption_back_to_count_entry_when_cameras(self) -> None:
        c = _at_exemption_with_cameras()
        c.go_back()
        assert c.step == Step.CAMERA_COUNT_ENTRY
        assert c.answers.outdoor_camera_count == 2

    def test_exemption_back_to_query_without_cameras(self) -> None:
        c = _at_penalty()
        c.proceed_to_exemption_check()
        c.select_has_cameras(False)
        c.go_back()
        assert c.step == Step.HAS_CAMERAS_QUERY

    def test_back_target_follows_current_answer(self) -> None:
        c = _at_exemption_with_cameras()
        c.go_back()
        c.go_back()
        assert c.step == Step.HAS_CAMERAS_QUERY
        c.select_has_cameras(False)
        c.go_back()
        assert c.step == Step.HAS_CAMERAS_QUERY

    def test_round_trip_keeps_answers(self) -> None:
        c = _at_exemption_with_cameras(2, 1)
        forward = c.answers
        # 7 -> 6 -> 5 -> 4 -> 3 -> 2 -> 1, then a no-op
        for _ in range(7):
            c.go_back()
        assert c.step == Step.PROVIDER_SELECT
        assert c.answers == forward

    def test_resume_after_back_to_first_step(self) -> None:
        c = WizardController()
        c.select_provider(Provider.CAPS)
        c.go_back()
        assert c.resume() is True
        assert c.step == Step.MONTHLY_FEE_ENTRY
        assert c.answers.provider is Provider.CAPS

    def test_resume_without_provider_rejected(self) -> None:
        c = WizardController()
        assert c.resume() is False
        assert c.step == Step.PROVIDER_SELECT

    def test_reselect_provider_after_back(self) -> None:
        c = _at_penalty(Provider.S1, 50000, 12)
        for _ in range(3):
            c.go_back()
        c.select_provider(Provider.CAPS)
        c.submit_monthly_fee(c.answers.monthly_fee)
        c.submit_period(12, "month")
        assert c.compute_penalty() == 60000


class TestPenaltyOnlyFlow:
    """Reduced configuration: penalty screen is terminal."""

    def test_penalty_is_terminal(self) -> None:
        c = WizardController(include_exemption=False)
        c.select_provider(Provider.S1)
        c.submit_monthly_fee(50000)
        c.submit_period(1, "year")
        assert c.is_finished
        assert c.terminal_step == Step.PENALTY_REVEAL
        assert c.proceed_to_exemption_check() is False
        assert c.step == Step.PENALTY_REVEAL

    def test_full_flow_not_finished_at_penalty(self) -> None:
        c = _at_penalty()
        assert not c.is_finished


class TestPreviousStep:
    def test_table(self) -> None:
        plain = Answers()
        assert previous_step(Step.PROVIDER_SELECT, plain) is None
        assert previous_step(Step.MONTHLY_FEE_ENTRY, plain) == Step.PROVIDER_SELECT
        assert previous_step(Step.PERIOD_ENTRY, plain) == Step.MONTHLY_FEE_ENTRY
        assert previous_step(Step.PENALTY_REVEAL, plain) == Step.PERIOD_ENTRY
        assert previous_step(Step.HAS_CAMERAS_QUERY, plain) == Step.PENALTY_REVEAL
        assert previous_step(Step.CAMERA_COUNT_ENTRY, plain) == Step.HAS_CAMERAS_QUERY
        assert previous_step(Step.EXEMPTION_REVEAL, plain) == Step.HAS_CAMERAS_QUERY
        with_cameras = Answers(has_existing_cameras=True, outdoor_camera_count=1)
        assert previous_step(Step.EXEMPTION_REVEAL, with_cameras) == Step.CAMERA_COUNT_ENTRY
