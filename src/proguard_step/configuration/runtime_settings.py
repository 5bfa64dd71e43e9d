"""Configuration domain entities."""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

DEFAULT_TOOL_ARTIFACT_ID = "proguard-base"
DEFAULT_TOOL_MAIN_CLASS = "proguard.ProGuard"
DEFAULT_JAVA_EXECUTABLE = "java"


@dataclass(frozen=True)
class ShrinkSettings:  # pylint: disable=too-many-instance-attributes
    """Build-time parameters of one ProGuard invocation."""

    target_directory: Path
    skip: bool = False
    config_file: Path | None = None
    injar: str | None = None
    outjar: str | None = None
    in_filter: str | None = None
    out_filter: str | None = None
    dependency_filter: str | None = None
    include_dependency: bool = False
    include_dependency_injar: bool = False
    libs: tuple[str, ...] = ()
    options: tuple[str, ...] = ()


@dataclass(frozen=True)
class BuildProject:
    """The build project the step runs for, with its resolved dependency artifacts."""

    name: str
    packaging: str
    final_name: str
    base_dir: Path
    dependencies: tuple[Path, ...] = ()


@dataclass(frozen=True)
class PluginArtifact:
    """One artifact managed by the build tool for this step."""

    artifact_id: str
    path: Path


@dataclass(frozen=True)
class ToolSettings:
    """How the external shrinking tool is located and launched."""

    artifacts: tuple[PluginArtifact, ...]
    java_executable: str = DEFAULT_JAVA_EXECUTABLE
    artifact_id: str = DEFAULT_TOOL_ARTIFACT_ID
    main_class: str = DEFAULT_TOOL_MAIN_CLASS


@dataclass(frozen=True)
class Configuration:
    """Top-level configuration aggregate."""

    path: Path
    project: BuildProject
    settings: ShrinkSettings
    tool: ToolSettings
