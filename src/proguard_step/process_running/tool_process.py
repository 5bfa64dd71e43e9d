"""Launching the external shrinking tool."""

from __future__ import annotations

import logging
import shlex
import subprocess
from collections.abc import Callable, Iterable, Sequence
from pathlib import Path

from proguard_step.configuration.runtime_settings import (
    DEFAULT_JAVA_EXECUTABLE,
    DEFAULT_TOOL_ARTIFACT_ID,
    DEFAULT_TOOL_MAIN_CLASS,
    PluginArtifact,
)
from proguard_step.step_failures import ExecutionFailedError, LaunchError, ToolNotFoundError

CommandRunner = Callable[[tuple[str, ...], Path], int]

logger = logging.getLogger(__name__)


def locate_tool_artifact(
    plugin_artifacts: Iterable[PluginArtifact],
    artifact_id: str = DEFAULT_TOOL_ARTIFACT_ID,
) -> Path:
    """Return the absolute path of the plugin artifact carrying the tool."""
    for artifact in plugin_artifacts:
        logger.debug("Plugin Artifact: %s", artifact.path)
        if artifact.artifact_id == artifact_id:
            logger.debug("Proguard Artifact: %s", artifact.path)
            return artifact.path.absolute()
    raise ToolNotFoundError(f"ProGuard not found: no plugin artifact named {artifact_id!r}")


def build_tool_command(
    tool_jar: Path,
    arguments: Sequence[str],
    *,
    java_executable: str = DEFAULT_JAVA_EXECUTABLE,
    main_class: str = DEFAULT_TOOL_MAIN_CLASS,
) -> tuple[str, ...]:
    return (java_executable, "-cp", str(tool_jar), main_class, *arguments)


def run_tool(
    tool_jar: Path,
    arguments: Sequence[str],
    *,
    working_directory: Path,
    java_executable: str = DEFAULT_JAVA_EXECUTABLE,
    main_class: str = DEFAULT_TOOL_MAIN_CLASS,
    run_command: CommandRunner | None = None,
) -> None:
    """Run the tool once and block until it exits.

    Raises:
      LaunchError: If the process cannot be started.
      ExecutionFailedError: If the process exits with a non-zero code.
    """
    command_runner = run_command or _run_inheriting_streams
    command = build_tool_command(
        tool_jar, arguments, java_executable=java_executable, main_class=main_class
    )
    logger.info("Execute ProGuard: %s", list(arguments))
    logger.debug("ProGuard command: %s", shlex.join(command))

    try:
        exit_code = command_runner(command, working_directory)
    except OSError as exc:
        raise LaunchError(f"Could not start ProGuard ({command[0]}): {exc}") from exc

    if exit_code != 0:
        raise ExecutionFailedError(exit_code)


def _run_inheriting_streams(command: tuple[str, ...], cwd: Path) -> int:
    """Run one command with this process's stdout/stderr and return its exit code."""
    completed = subprocess.run(list(command), cwd=cwd, check=False)
    return completed.returncode
