"""Invocation building entities."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum


class SkipReason(str, Enum):
    """Why the tool is not executed for this build."""

    DISABLED = "disabled"
    NO_INPUT = "no input artifact configured"


@dataclass(frozen=True)
class InvocationPlan:
    """Outcome of building the tool invocation."""

    arguments: tuple[str, ...]
    skip_reason: SkipReason | None
    outjar_path: str | None = None

    @property
    def should_execute(self) -> bool:
        return self.skip_reason is None

    @staticmethod
    def ready(arguments: list[str], outjar_path: str) -> InvocationPlan:
        return InvocationPlan(
            arguments=tuple(arguments),
            skip_reason=None,
            outjar_path=outjar_path,
        )

    @staticmethod
    def skipped(reason: SkipReason) -> InvocationPlan:
        return InvocationPlan(arguments=(), skip_reason=reason)
