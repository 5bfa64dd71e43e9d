"""Tests for step execution entities and invocation plans."""

from __future__ import annotations

from pathlib import Path

from proguard_step.invocation_building import InvocationPlan, SkipReason
from proguard_step.run_execution.step_contracts import StepOutcome, StepRequest


def test_step_request_defaults_to_configured_behaviour() -> None:
    request = StepRequest(config_path="proguard-step.yaml")

    assert request.skip is False
    assert request.extra_dependencies == ()


def test_step_outcome_for_skipped_step_has_no_output() -> None:
    outcome = StepOutcome(
        executed=False,
        skip_reason=SkipReason.NO_INPUT,
        arguments=(),
        output_path=None,
    )

    assert outcome.skip_reason.value == "no input artifact configured"
    assert outcome.output_path is None


def test_invocation_plan_factories() -> None:
    executed = InvocationPlan.ready(["-injars", "/t/a.jar"], outjar_path="/t/b.jar")
    skipped = InvocationPlan.skipped(SkipReason.DISABLED)

    assert executed.should_execute is True
    assert executed.arguments == ("-injars", "/t/a.jar")
    assert Path(executed.outjar_path or "").name == "b.jar"
    assert skipped.should_execute is False
    assert skipped.arguments == ()
