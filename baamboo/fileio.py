"""Whole-file binary reading and writing."""

from __future__ import annotations

import os
from pathlib import Path
from typing import Union

PathLike = Union[str, "os.PathLike[str]"]


def file_exists(filepath: PathLike) -> bool:
    """True if something exists at ``filepath``."""
    return os.path.exists(filepath)


def read_binary(filepath: PathLike) -> bytes:
    """Return the whole content of a file."""
    return Path(filepath).read_bytes()


def write_binary(directory: PathLike, filename: str, data: bytes) -> Path:
    """Write ``data`` to ``directory`` joined textually with ``filename``.

    Missing parent directories are created. Returns the written path.
    """
    path = Path(os.fspath(directory) + filename)
    path.parent.mkdir(parents=True, exist_ok=True)
    path.write_bytes(data)
    return path