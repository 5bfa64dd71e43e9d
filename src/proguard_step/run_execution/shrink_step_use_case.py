"""Step execution use-case service."""

from __future__ import annotations

import dataclasses
import logging
from pathlib import Path

from proguard_step.configuration import Configuration, load_configuration, load_skip_flag
from proguard_step.invocation_building import SkipReason, build_invocation
from proguard_step.process_running import CommandRunner, locate_tool_artifact, run_tool

from .step_contracts import StepOutcome, StepRequest

logger = logging.getLogger(__name__)


def execute_shrink_step(
    request: StepRequest,
    *,
    run_command: CommandRunner | None = None,
) -> StepOutcome:
    """Load the step configuration, prepare the ProGuard invocation and run it.

    A disabled step returns before the rest of the configuration is validated.

    Raises:
      ConfigurationError: If the configuration file is invalid.
      BuildStepError: If preparing or running the tool fails.
    """
    if request.skip or load_skip_flag(request.config_path):
        logger.info("Proguard is skipped.")
        return _skipped_outcome(SkipReason.DISABLED)

    configuration = _apply_request_overrides(load_configuration(request.config_path), request)
    return run_configured_step(configuration, run_command=run_command)


def run_configured_step(
    configuration: Configuration,
    *,
    run_command: CommandRunner | None = None,
) -> StepOutcome:
    """Run the step for an already loaded configuration."""
    project = configuration.project
    plan = build_invocation(
        configuration.settings,
        project.dependencies,
        packaging=project.packaging,
        final_name=project.final_name,
    )
    if plan.skip_reason is not None:
        return _skipped_outcome(plan.skip_reason)

    tool = configuration.tool
    tool_jar = locate_tool_artifact(tool.artifacts, tool.artifact_id)
    run_tool(
        tool_jar,
        plan.arguments,
        working_directory=project.base_dir,
        java_executable=tool.java_executable,
        main_class=tool.main_class,
        run_command=run_command,
    )
    return StepOutcome(
        executed=True,
        skip_reason=None,
        arguments=plan.arguments,
        output_path=Path(plan.outjar_path) if plan.outjar_path else None,
    )


def _skipped_outcome(reason: SkipReason) -> StepOutcome:
    return StepOutcome(executed=False, skip_reason=reason, arguments=(), output_path=None)


def _apply_request_overrides(configuration: Configuration, request: StepRequest) -> Configuration:
    if not request.extra_dependencies:
        return configuration
    project = configuration.project
    extra = tuple(Path(item).absolute() for item in request.extra_dependencies)
    project = dataclasses.replace(project, dependencies=project.dependencies + extra)
    return dataclasses.replace(configuration, project=project)
