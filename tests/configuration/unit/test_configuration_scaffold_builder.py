"""Configuration scaffold builder tests."""

from __future__ import annotations

from pathlib import Path

import pytest
import yaml
from proguard_step.configuration.config_scaffold_builder import (
    build_placeholder_configuration,
    write_placeholder_configuration,
)


def test_build_placeholder_configuration_contains_all_supported_sections() -> None:
    scaffold = build_placeholder_configuration()

    assert "Step configuration template" in scaffold
    assert "project:" in scaffold
    assert "proguard:" in scaffold
    assert "tool:" in scaffold
    assert "include_dependency_injar:" in scaffold
    assert "<REQUIRED>" in scaffold
    assert "<OPTIONAL>" in scaffold
    assert "PROGUARD_SKIP" in scaffold


def test_placeholder_configuration_is_valid_yaml() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert parsed["skip"] is False
    assert parsed["project"]["packaging"] == "jar"
    assert parsed["tool"]["artifacts"][0]["artifact_id"] == "proguard-base"


def test_placeholder_configuration_lists_no_dependency_placeholders() -> None:
    parsed = yaml.safe_load(build_placeholder_configuration())

    assert parsed["project"]["dependencies"] == []


def test_write_placeholder_configuration_writes_file(tmp_path: Path) -> None:
    output_path = tmp_path / "proguard-step.yaml"

    written_path = write_placeholder_configuration(output_path)

    assert written_path == output_path.resolve()
    assert output_path.exists()
    assert "<REQUIRED>" in output_path.read_text(encoding="utf-8")


def test_write_placeholder_configuration_fails_when_file_exists(tmp_path: Path) -> None:
    output_path = tmp_path / "proguard-step.yaml"
    output_path.write_text("existing", encoding="utf-8")

    with pytest.raises(FileExistsError):
        write_placeholder_configuration(output_path)
