"""Derivation of the ProGuard argument list from build settings."""

from __future__ import annotations

import dataclasses
import logging
from collections.abc import Iterable
from pathlib import Path

from proguard_step.configuration.runtime_settings import ShrinkSettings

from .artifact_relocation import clear_output, relocate_input
from .invocation_plan import InvocationPlan, SkipReason

DEFAULT_OPTIONS: tuple[str, ...] = (
    "-dontoptimize",
    "-keepattributes *Annotation*",
    "-keepattributes Signature",
    "-keepattributes InnerClasses",
    "-keepclassmembers class * { @**.* *; }",
    "-keep public class * { public protected *; }",
)

WAR_CLASSES_DIRECTORY = "classes"

logger = logging.getLogger(__name__)


def build_invocation(
    settings: ShrinkSettings,
    resolved_artifacts: Iterable[Path],
    *,
    packaging: str,
    final_name: str,
) -> InvocationPlan:
    """Build the ProGuard invocation and prepare the file system for it.

    The input artifact is renamed to its side-path and any existing output artifact
    is removed before the plan is returned, so the plan must be executed or the
    build reported as failed.
    """
    if settings.skip:
        logger.info("Proguard is skipped.")
        return InvocationPlan.skipped(SkipReason.DISABLED)

    effective = resolve_default_names(settings, packaging=packaging, final_name=final_name)
    if not effective.injar or not effective.outjar:
        logger.info("Proguard has no input artifact for packaging %r; nothing to do.", packaging)
        return InvocationPlan.skipped(SkipReason.NO_INPUT)

    arguments: list[str] = []
    _add_config_file(arguments, effective.config_file)
    _add_injar(arguments, effective, effective.injar)
    outjar_path = _add_outjar(arguments, effective, effective.outjar)
    _add_libs(arguments, effective.libs)
    _add_dependencies(arguments, effective, resolved_artifacts)
    _add_options(arguments, effective.options)

    logger.debug("ProGuard arguments: %s", arguments)
    return InvocationPlan.ready(arguments, outjar_path=outjar_path)


def resolve_default_names(
    settings: ShrinkSettings, *, packaging: str, final_name: str
) -> ShrinkSettings:
    """Return settings whose injar/outjar are defaulted from the packaging type."""
    logger.debug("Package Type: %s", packaging)
    injar = settings.injar
    if not injar:
        if packaging == "jar":
            injar = f"{final_name}.jar"
        elif packaging == "war":
            injar = WAR_CLASSES_DIRECTORY
    outjar = settings.outjar or injar

    logger.debug("injar %s", injar)
    logger.debug("outjar %s", outjar)
    return dataclasses.replace(settings, injar=injar, outjar=outjar)


def with_filter(classpath: str, filter_expression: str | None) -> str:
    """Attach a ProGuard filter in parentheses; empty filters add nothing."""
    if not filter_expression:
        return classpath
    return f"{classpath}({filter_expression})"


def _add_config_file(arguments: list[str], config_file: Path | None) -> None:
    if config_file is None or not config_file.exists():
        return
    arguments.extend(["-include", str(config_file.absolute())])
    logger.debug("ProGuard Configuration File: %s", config_file)


def _add_injar(arguments: list[str], settings: ShrinkSettings, injar: str) -> None:
    side_path = relocate_input(settings.target_directory, injar)
    arguments.extend(["-injars", with_filter(str(side_path), settings.in_filter)])


def _add_outjar(arguments: list[str], settings: ShrinkSettings, outjar: str) -> str:
    output_path = clear_output(settings.target_directory, outjar)
    arguments.extend(["-outjars", with_filter(str(output_path), settings.out_filter)])
    return str(output_path)


def _add_libs(arguments: list[str], libs: Iterable[str]) -> None:
    for lib in libs:
        arguments.extend(["-libraryjars", lib])


def _add_dependencies(
    arguments: list[str], settings: ShrinkSettings, resolved_artifacts: Iterable[Path]
) -> None:
    if not settings.include_dependency:
        return
    option = "-injars" if settings.include_dependency_injar else "-libraryjars"
    for artifact in resolved_artifacts:
        classpath = str(Path(artifact).absolute())
        arguments.extend([option, with_filter(classpath, settings.dependency_filter)])


def _add_options(arguments: list[str], options: tuple[str, ...]) -> None:
    if options:
        arguments.extend(options)
    else:
        arguments.extend(DEFAULT_OPTIONS)
