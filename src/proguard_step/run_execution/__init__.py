"""Step execution domain exports."""

from .shrink_step_use_case import execute_shrink_step, run_configured_step
from .step_contracts import StepOutcome, StepRequest

__all__ = [
    "StepRequest",
    "StepOutcome",
    "execute_shrink_step",
    "run_configured_step",
]
