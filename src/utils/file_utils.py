# ============================================================================
# src/utils/file_utils.py
# ============================================================================
"""
File utilities for the critical medication registry.
"""

import os
import shutil
from pathlib import Path
from typing import Any
import json
import tempfile


def read_json(file_path: Path) -> Any:
    """
    Read JSON file.

    Args:
        file_path: Path to JSON file

    Returns:
        Parsed JSON data
    """
    with open(file_path, 'r', encoding='utf-8') as f:
        return json.load(f)


def _current_umask() -> int:
    # os.umask can only be read by setting it
    mask = os.umask(0)
    os.umask(mask)
    return mask


def write_json_atomic(data: Any, file_path: Path, indent: int = 2) -> None:
    """
    Write JSON file atomically.

    The document is written to a temporary file in the destination directory
    and renamed over the target, so readers never observe a partial file.
    The destination directory must already exist. An existing target keeps
    its permission bits; a new file gets the usual umask-derived mode rather
    than the 0600 of the temporary file.

    Args:
        data: Data to write
        file_path: Path to JSON file
        indent: Indentation level

    Raises:
        OSError: If the temporary file cannot be created, written or renamed
    """
    payload = json.dumps(data, indent=indent, ensure_ascii=False) + "\n"

    fd, tmp_name = tempfile.mkstemp(
        dir=file_path.parent,
        prefix=f".{file_path.name}.",
        suffix=".tmp"
    )
    try:
        with os.fdopen(fd, 'w', encoding='utf-8') as f:
            f.write(payload)
            f.flush()
            os.fsync(f.fileno())
        if file_path.exists():
            shutil.copymode(file_path, tmp_name)
        else:
            os.chmod(tmp_name, 0o666 & ~_current_umask())
        os.replace(tmp_name, file_path)
    except BaseException:
        # os.fdopen owns fd once it succeeds; the temp file may still exist
        if os.path.exists(tmp_name):
            os.unlink(tmp_name)
        raise
