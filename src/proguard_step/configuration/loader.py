"""Configuration loader service."""

from __future__ import annotations

from collections.abc import Mapping, Sequence
from pathlib import Path
from typing import Any

import yaml

from .runtime_settings import (
    DEFAULT_JAVA_EXECUTABLE,
    DEFAULT_TOOL_ARTIFACT_ID,
    DEFAULT_TOOL_MAIN_CLASS,
    BuildProject,
    Configuration,
    PluginArtifact,
    ShrinkSettings,
    ToolSettings,
)

DEFAULT_TARGET_DIRECTORY = "target"
DEFAULT_CONFIG_FILE = "proguard.conf"
DEFAULT_IN_FILTER = "!module-info.class,!META-INF/maven/**"
DEFAULT_OUT_FILTER = "!META-INF/maven/**"
DEFAULT_DEPENDENCY_FILTER = "!module-info.class,!META-INF/**"


class ConfigurationError(Exception):
    """Raised when the configuration file is invalid."""


def load_configuration(config_path: Path | str) -> Configuration:
    """Load and validate the step configuration file.

    Keys that are absent fall back to the defaults of the original build plugin;
    an explicit ``null`` for a filter or the config file disables it.
    """
    path = Path(config_path)
    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {path}")

    parsed = _read_document(path)
    project = _parse_project_section(parsed.get("project"), path.resolve().parent)
    settings = _parse_proguard_section(
        parsed.get("proguard", {}),
        base_dir=project.base_dir,
        skip=_require_bool(parsed.get("skip", False), "skip"),
    )
    tool = _parse_tool_section(parsed.get("tool"), project.base_dir)

    return Configuration(path=path, project=project, settings=settings, tool=tool)


def load_skip_flag(config_path: Path | str) -> bool:
    """Return the top-level ``skip`` flag without validating the rest of the file.

    A missing file is not disabled; ``load_configuration`` reports it.
    """
    path = Path(config_path)
    if not path.exists():
        return False
    return _require_bool(_read_document(path).get("skip", False), "skip")


def _read_document(path: Path) -> Mapping[str, Any]:
    text = path.read_text(encoding="utf-8")
    try:
        parsed = yaml.safe_load(text)
    except yaml.YAMLError as exc:  # pragma: no cover - exercised indirectly
        raise ConfigurationError(f"Failed to parse configuration file: {exc}") from exc

    if parsed is None:
        parsed = {}

    if not isinstance(parsed, Mapping):
        raise ConfigurationError("Configuration root must be a mapping.")
    return parsed


def _parse_project_section(value: Any, config_dir: Path) -> BuildProject:
    section = _require_mapping(value, "project")
    name = _require_non_empty_string(section.get("name"), "project.name")
    packaging = _require_non_empty_string(section.get("packaging", "jar"), "project.packaging")
    final_name = _optional_string(section.get("final_name"), "project.final_name") or name
    base_dir_raw = _optional_string(section.get("base_dir"), "project.base_dir") or "."
    base_dir = _resolve_path(config_dir, base_dir_raw)
    dependencies = tuple(
        _resolve_path(base_dir, item)
        for item in _normalize_string_sequence(
            section.get("dependencies"), "project.dependencies"
        )
    )
    return BuildProject(
        name=name,
        packaging=packaging.lower(),
        final_name=final_name,
        base_dir=base_dir,
        dependencies=dependencies,
    )


def _parse_proguard_section(value: Any, *, base_dir: Path, skip: bool) -> ShrinkSettings:
    if value is None:
        value = {}
    section = _require_mapping(value, "proguard")

    target_raw = _optional_string(
        section.get("target_directory", DEFAULT_TARGET_DIRECTORY), "proguard.target_directory"
    )
    config_file_raw = _optional_string(
        section.get("config_file", DEFAULT_CONFIG_FILE), "proguard.config_file"
    )
    return ShrinkSettings(
        target_directory=_resolve_path(base_dir, target_raw or DEFAULT_TARGET_DIRECTORY),
        skip=skip,
        config_file=_resolve_path(base_dir, config_file_raw) if config_file_raw else None,
        injar=_optional_string(section.get("injar"), "proguard.injar"),
        outjar=_optional_string(section.get("outjar"), "proguard.outjar"),
        in_filter=_optional_filter(section, "in_filter", DEFAULT_IN_FILTER),
        out_filter=_optional_filter(section, "out_filter", DEFAULT_OUT_FILTER),
        dependency_filter=_optional_filter(section, "dependency_filter", DEFAULT_DEPENDENCY_FILTER),
        include_dependency=_require_bool(
            section.get("include_dependency", True), "proguard.include_dependency"
        ),
        include_dependency_injar=_require_bool(
            section.get("include_dependency_injar", False), "proguard.include_dependency_injar"
        ),
        libs=_normalize_string_sequence(section.get("libs"), "proguard.libs"),
        options=_normalize_string_sequence(section.get("options"), "proguard.options"),
    )


def _parse_tool_section(value: Any, base_dir: Path) -> ToolSettings:
    section = _require_mapping(value, "tool")
    raw_artifacts = section.get("artifacts")
    if not isinstance(raw_artifacts, Sequence) or isinstance(raw_artifacts, str):
        raise ConfigurationError("tool.artifacts must be a list of mappings.")
    artifacts = []
    for index, item in enumerate(raw_artifacts):
        entry = _require_mapping(item, f"tool.artifacts[{index}]")
        artifacts.append(
            PluginArtifact(
                artifact_id=_require_non_empty_string(
                    entry.get("artifact_id"), f"tool.artifacts[{index}].artifact_id"
                ),
                path=_resolve_path(
                    base_dir,
                    _require_non_empty_string(entry.get("path"), f"tool.artifacts[{index}].path"),
                ),
            )
        )
    return ToolSettings(
        artifacts=tuple(artifacts),
        java_executable=_require_non_empty_string(
            section.get("java", DEFAULT_JAVA_EXECUTABLE), "tool.java"
        ),
        artifact_id=_require_non_empty_string(
            section.get("artifact_id", DEFAULT_TOOL_ARTIFACT_ID), "tool.artifact_id"
        ),
        main_class=_require_non_empty_string(
            section.get("main_class", DEFAULT_TOOL_MAIN_CLASS), "tool.main_class"
        ),
    )


def _optional_filter(section: Mapping[str, Any], key: str, default: str) -> str | None:
    if key not in section:
        return default
    value = section[key]
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"proguard.{key} must be a string.")
    return value.strip()


def _normalize_string_sequence(value: Any, field_name: str) -> tuple[str, ...]:
    if value is None:
        return ()
    if isinstance(value, str):
        stripped = value.strip()
        return (stripped,) if stripped else ()
    if isinstance(value, Sequence):
        normalized = []
        for item in value:
            if not isinstance(item, str):
                raise ConfigurationError(f"{field_name} entries must be strings.")
            stripped = item.strip()
            if stripped:
                normalized.append(stripped)
        return tuple(normalized)
    raise ConfigurationError(f"{field_name} must be a string or list of strings.")


def _resolve_path(base_path: Path, raw_path: str) -> Path:
    candidate = Path(raw_path).expanduser()
    if not candidate.is_absolute():
        return (base_path / candidate).resolve()
    return candidate


def _require_mapping(value: Any, section_name: str) -> Mapping[str, Any]:
    if not isinstance(value, Mapping):
        raise ConfigurationError(f"Configuration section '{section_name}' is required.")
    return value


def _require_non_empty_string(value: Any, field_name: str) -> str:
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    if not stripped:
        raise ConfigurationError(f"{field_name} must not be empty.")
    return stripped


def _optional_string(value: Any, field_name: str) -> str | None:
    if value is None:
        return None
    if not isinstance(value, str):
        raise ConfigurationError(f"{field_name} must be a string.")
    stripped = value.strip()
    return stripped or None


def _require_bool(value: Any, field_name: str) -> bool:
    if not isinstance(value, bool):
        raise ConfigurationError(f"{field_name} must be a boolean.")
    return value
