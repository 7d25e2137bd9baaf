from __future__ import annotations

"""
Unit tests for the finalized Requirement.

Verifies immutability, rendering and the raising ensure() entry point.
"""

from pathlib import Path

import pytest

from filereq import (
    AllOf,
    AnyOf,
    DuplicateTermError,
    Leaf,
    Requirement,
    RequirementCheckError,
    Term,
    new,
)


def test_requirement_is_frozen(tmp_path: Path) -> None:
    builder = new()
    builder.require_file(tmp_path / "a")
    req = builder.build()
    with pytest.raises(Exception):
        req.root = None  # type: ignore[misc]


def test_ensure_passes_silently(tmp_path: Path, touch) -> None:
    a = tmp_path / "a"
    touch(a)
    builder = new()
    builder.require_file(a)
    assert builder.build().ensure() is None


def test_ensure_raises_with_result(tmp_path: Path) -> None:
    missing = tmp_path / "missing.json"
    builder = new()
    builder.require_file(missing)
    req = builder.build()

    with pytest.raises(RequirementCheckError) as exc:
        req.ensure()

    assert exc.value.result == req.check()
    assert exc.value.result.missing_files == [str(missing)]
    assert f"missing files: {missing}" in str(exc.value)


def test_direct_construction_rejects_repeated_terms() -> None:
    """The uniqueness rule holds even without going through the builder."""
    a = Term.from_path("a")
    with pytest.raises(DuplicateTermError) as exc:
        Requirement(AllOf((Leaf(a), AnyOf((Leaf(Term.from_path("b")), Leaf(a))))))
    assert exc.value.path == "a"


def test_direct_construction_with_unique_terms() -> None:
    req = Requirement(AllOf((Leaf(Term.from_path("a")), AnyOf((Leaf(Term.from_path("b")),)))))
    assert [t.key for t in req.terms] == ["a", "b"]
