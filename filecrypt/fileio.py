"""Opening files for in-place rewriting and reading the ``.env`` file."""

from __future__ import annotations

import os
from typing import BinaryIO, Union

PathLike = Union[str, "os.PathLike[str]"]

ENV_FILE = ".env"


def open_read_write(path: PathLike) -> BinaryIO:
    """Open an existing file for binary reading and writing.

    Raises ``OSError`` when the file cannot be opened.
    """
    return open(path, "r+b")


def read_env(path: PathLike = ENV_FILE) -> str:
    """Return the whole content of the env file, or ``""`` if it cannot be opened."""
    try:
        with open_read_write(path) as stream:
            data = stream.read()
    except OSError:
        return ""
    return data.decode("utf-8", errors="surrogateescape")