"""
writer.py - Writes the banner file
"""

from __future__ import annotations

import logging
import os
from pathlib import Path
import stat
import uuid

from springbanner.errors import WriteError

logger = logging.getLogger(__name__)


def _existing_mode(path: Path) -> int | None:
    try:
        return stat.S_IMODE(path.stat().st_mode)
    except FileNotFoundError:
        return None


def write_banner(output_directory: Path, filename: str, banner: str) -> Path:
    """
    Write the banner as UTF-8, replacing any existing file.

    Uses a temp file + atomic rename so the target never holds a partially
    written banner. An existing target keeps its mode, a new file gets the
    umask default like any other created file.
    """
    try:
        output_directory.mkdir(parents=True, exist_ok=True)
    except OSError as e:
        raise WriteError(f"Failed to create output directory {output_directory}") from e

    path = output_directory / filename
    logger.debug("Writing banner to file %s", path)

    # Temp file must live in the same directory for the rename to be atomic
    temp_path = output_directory / f".{filename}.{uuid.uuid4().hex}.tmp"
    try:
        fd = os.open(temp_path, os.O_WRONLY | os.O_CREAT | os.O_EXCL, 0o666)
        with open(fd, "wb") as f:
            f.write(banner.encode("utf-8"))
        mode = _existing_mode(path)
        if mode is not None:
            temp_path.chmod(mode)
        temp_path.replace(path)
    except OSError as e:
        temp_path.unlink(missing_ok=True)
        raise WriteError(f"Failed to write banner file {path}: {e}") from e

    return path
