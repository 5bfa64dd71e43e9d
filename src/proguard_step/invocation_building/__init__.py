"""Invocation building domain exports."""

from .argument_builder import DEFAULT_OPTIONS, build_invocation, resolve_default_names, with_filter
from .artifact_relocation import clear_output, relocate_input, remove_existing, side_path_for
from .invocation_plan import InvocationPlan, SkipReason

__all__ = [
    "DEFAULT_OPTIONS",
    "InvocationPlan",
    "SkipReason",
    "build_invocation",
    "resolve_default_names",
    "with_filter",
    "clear_output",
    "relocate_input",
    "remove_existing",
    "side_path_for",
]
