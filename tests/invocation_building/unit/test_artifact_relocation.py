"""Tests for input relocation and output clearing."""

from __future__ import annotations

import shutil
from pathlib import Path

import pytest
from proguard_step.invocation_building.artifact_relocation import (
    clear_output,
    relocate_input,
    remove_existing,
    side_path_for,
)
from proguard_step.step_failures import CleanupError, MissingInputError, RelocationError


def test_relocates_jar_file_to_side_path(tmp_path: Path) -> None:
    (tmp_path / "app.jar").write_bytes(b"PK")

    side_path = relocate_input(tmp_path, "app.jar")

    assert side_path == tmp_path / "app_proguard_base.jar"
    assert side_path.read_bytes() == b"PK"
    assert not (tmp_path / "app.jar").exists()


def test_relocates_classes_directory_without_jar_extension(tmp_path: Path) -> None:
    classes = tmp_path / "classes"
    (classes / "demo").mkdir(parents=True)
    (classes / "demo" / "Main.class").write_bytes(b"\xca\xfe")

    side_path = relocate_input(tmp_path, "classes")

    assert side_path == tmp_path / "classes_proguard_base"
    assert (side_path / "demo" / "Main.class").exists()
    assert not classes.exists()


def test_side_path_for_non_jar_file_keeps_jar_extension(tmp_path: Path) -> None:
    war = tmp_path / "shop.war"
    war.write_bytes(b"PK")

    assert side_path_for(war) == tmp_path / "shop_proguard_base.jar"


def test_relocation_replaces_stale_side_path_tree(tmp_path: Path) -> None:
    (tmp_path / "classes").mkdir()
    stale = tmp_path / "classes_proguard_base" / "old"
    stale.mkdir(parents=True)
    (stale / "Old.class").write_bytes(b"old")

    side_path = relocate_input(tmp_path, "classes")

    assert not (side_path / "old").exists()


def test_missing_input_raises(tmp_path: Path) -> None:
    with pytest.raises(MissingInputError, match="Can't find file"):
        relocate_input(tmp_path, "app.jar")


def test_failed_rename_raises_relocation_error(tmp_path: Path, monkeypatch) -> None:
    (tmp_path / "app.jar").write_bytes(b"PK")

    def _refuse_rename(self: Path, target: Path) -> Path:
        raise PermissionError("read-only file system")

    monkeypatch.setattr(Path, "rename", _refuse_rename)

    with pytest.raises(RelocationError, match="Can't rename"):
        relocate_input(tmp_path, "app.jar")


def test_clear_output_removes_existing_file(tmp_path: Path) -> None:
    (tmp_path / "app.jar").write_bytes(b"PK")

    output_path = clear_output(tmp_path, "app.jar")

    assert output_path == tmp_path / "app.jar"
    assert not output_path.exists()


def test_clear_output_ignores_missing_path(tmp_path: Path) -> None:
    assert clear_output(tmp_path, "app.jar") == tmp_path / "app.jar"


def test_remove_existing_wraps_os_errors(tmp_path: Path, monkeypatch) -> None:
    tree = tmp_path / "classes"
    tree.mkdir()

    def _refuse_rmtree(path, *args, **kwargs) -> None:
        raise OSError("directory busy")

    monkeypatch.setattr(shutil, "rmtree", _refuse_rmtree)

    with pytest.raises(CleanupError, match="Can't delete"):
        remove_existing(tree)
