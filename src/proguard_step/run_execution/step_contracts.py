"""Step execution entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

from proguard_step.invocation_building.invocation_plan import SkipReason


@dataclass(frozen=True)
class StepRequest:
    """Input contract for executing the step once."""

    config_path: str
    skip: bool = False
    extra_dependencies: tuple[str, ...] = ()


@dataclass(frozen=True)
class StepOutcome:
    """Output contract for one completed step."""

    executed: bool
    skip_reason: SkipReason | None
    arguments: tuple[str, ...]
    output_path: Path | None
