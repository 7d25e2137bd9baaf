from __future__ import annotations

"""
File Term Model.

A term is a single file-presence requirement. Its identity is the lexically
normalized path, so that textual variants of one path ('a/./b', 'a//b')
compare equal without touching the filesystem.
"""

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Union

PathInput = Union[str, bytes, "os.PathLike[str]", "os.PathLike[bytes]"]


# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def canonicalize_path(path: PathInput) -> str:
    """
    Reduce a path-like value to its canonical textual key.

    Normalization is purely lexical: repeated and trailing separators and
    '.' segments are dropped. '..' segments are kept, since collapsing them
    would change the target when a symlink precedes them. Relative paths are
    not anchored to the working directory.

    Args:
        path: A str, bytes or os.PathLike value.

    Returns:
        str: The canonical key.

    Raises:
        TypeError: If the value is not path-like.
        ValueError: If the path is empty.
    """
    raw = os.fsdecode(os.fspath(path))
    if not raw:
        raise ValueError("A file term requires a non-empty path.")

    drive, rest = os.path.splitdrive(raw)
    if os.altsep:
        rest = rest.replace(os.altsep, os.sep)
    root = os.sep if rest.startswith(os.sep) else ""
    parts = [p for p in rest.split(os.sep) if p and p != "."]
    key = drive + root + os.sep.join(parts)
    return key or "."


@dataclass(frozen=True)
class Term:
    """
    A canonicalized required-file path.

    Attributes:
        key: Lexically normalized path used for equality and hashing.
    """
    key: str

    @classmethod
    def from_path(cls, path: PathInput) -> "Term":
        """Build a term from any path-like value."""
        return cls(key=canonicalize_path(path))

    @property
    def path(self) -> Path:
        return Path(self.key)

    def __str__(self) -> str:
        return self.key
