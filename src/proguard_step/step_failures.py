"""Failures that abort the ProGuard build step."""

from __future__ import annotations


class BuildStepError(Exception):
    """Base class for every failure fatal to the build step."""


class MissingInputError(BuildStepError):
    """Raised when the input artifact does not exist under the target directory."""


class CleanupError(BuildStepError):
    """Raised when a stale side-path or output artifact cannot be removed."""


class RelocationError(BuildStepError):
    """Raised when the input artifact cannot be renamed to its side-path."""


class ToolNotFoundError(BuildStepError):
    """Raised when no plugin artifact carries the shrinking tool."""


class LaunchError(BuildStepError):
    """Raised when the tool process cannot be started."""


class ExecutionFailedError(BuildStepError):
    """Raised when the tool process exits with a non-zero code."""

    def __init__(self, exit_code: int) -> None:
        super().__init__(f"ProGuard failed (result={exit_code})")
        self.exit_code = exit_code
