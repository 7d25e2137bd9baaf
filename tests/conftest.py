from __future__ import annotations

"""
Global Pytest Configuration and Fixtures.

This module sets up the testing environment, including:
1. Path manipulation to ensure the 'src' directory is importable.
2. Shared fixtures describing the index-directory layout used across tests.
"""

import os
import sys
from pathlib import Path
from typing import Callable, List

import pytest

# -----------------------------------------------------------------------------
# Path Configuration
# -----------------------------------------------------------------------------
_SRC_PATH = os.path.abspath(os.path.join(os.path.dirname(__file__), "..", "src"))
if _SRC_PATH not in sys.path:
    sys.path.insert(0, _SRC_PATH)

from filereq import RequirementBuilder, new  # noqa: E402
from filereq.core.requirement import Requirement  # noqa: E402

# Files every index must carry, regardless of the hash flavour
INDEX_REQUIRED_SUFFIXES: List[str] = [
    "ctab", "ectab", "poison", "poison.json", "refinfo", "sigs.json",
]


# -----------------------------------------------------------------------------
# Shared Fixtures
# -----------------------------------------------------------------------------
@pytest.fixture
def index_base(tmp_path: Path) -> Path:
    """
    Return the prefix path of an index living in a temporary directory.

    Nothing is created on disk; tests touch the files they need.
    """
    return tmp_path / "idx"


@pytest.fixture
def touch() -> Callable[..., None]:
    """Create empty files for each given path."""
    def _touch(*paths: Path) -> None:
        for p in paths:
            p.parent.mkdir(parents=True, exist_ok=True)
            p.write_text("", encoding="utf-8")
    return _touch


@pytest.fixture
def index_requirement(index_base: Path) -> Requirement:
    """
    Requirement of a complete index: six mandatory files plus either the
    sshash dictionary or the ssi dictionary with its mphf companion.
    """
    def suffixed(suffix: str) -> str:
        return f"{index_base}.{suffix}"

    builder: RequirementBuilder = new()
    for suffix in INDEX_REQUIRED_SUFFIXES:
        builder.require_file(suffixed(suffix))
    with builder.any_of() as any_:
        any_.require_file(suffixed("sshash"))
        with any_.all_of() as all_:
            all_.require_file(suffixed("ssi"))
            all_.require_file(suffixed("ssi.mphf"))
    return builder.build()
