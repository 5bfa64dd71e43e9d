"""File-system preparation around the tool's input and output artifacts."""

from __future__ import annotations

import logging
import shutil
from pathlib import Path

from proguard_step.step_failures import CleanupError, MissingInputError, RelocationError

SIDE_PATH_SUFFIX = "_proguard_base"

logger = logging.getLogger(__name__)


def side_path_for(input_path: Path) -> Path:
    """Return the side-path the input artifact is moved to before the tool runs.

    ``app.jar`` becomes ``app_proguard_base.jar``; a directory such as ``classes``
    becomes ``classes_proguard_base``.
    """
    extension = "" if input_path.is_dir() else ".jar"
    return input_path.with_name(f"{input_path.stem}{SIDE_PATH_SUFFIX}{extension}")


def relocate_input(target_directory: Path, injar: str) -> Path:
    """Move the input artifact out of the way of the tool's output and return its new path.

    Raises:
      MissingInputError: If ``injar`` does not exist under ``target_directory``.
      CleanupError: If a stale side-path cannot be removed.
      RelocationError: If the rename fails.
    """
    input_path = (target_directory / injar).absolute()
    if not input_path.exists():
        raise MissingInputError(f"Can't find file {input_path}")

    side_path = side_path_for(input_path)
    remove_existing(side_path)
    try:
        input_path.rename(side_path)
    except OSError as exc:
        raise RelocationError(f"Can't rename {input_path}: {exc}") from exc

    logger.debug("injar file %s", side_path)
    return side_path


def clear_output(target_directory: Path, outjar: str) -> Path:
    """Remove whatever occupies the output path and return that path."""
    output_path = (target_directory / outjar).absolute()
    remove_existing(output_path)
    logger.debug("outjar file %s", output_path)
    return output_path


def remove_existing(path: Path) -> None:
    """Remove a file or directory tree; a missing path is not an error.

    Raises:
      CleanupError: If the path exists but cannot be removed.
    """
    if not path.exists() and not path.is_symlink():
        return
    try:
        if path.is_dir() and not path.is_symlink():
            shutil.rmtree(path)
        else:
            path.unlink()
    except OSError as exc:
        raise CleanupError(f"Can't delete {path}: {exc}") from exc
