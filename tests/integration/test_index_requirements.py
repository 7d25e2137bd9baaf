from __future__ import annotations

"""
Integration tests: validating an on-disk index layout.

An index needs six mandatory files plus one of two hash dictionaries:
either '<base>.sshash', or both '<base>.ssi' and '<base>.ssi.mphf'.
"""

from pathlib import Path
from typing import Callable, List

import pytest

from filereq import GroupUnsatisfied, RequirementCheckError, render_check_report

INDEX_REQUIRED_SUFFIXES = ["ctab", "ectab", "poison", "poison.json", "refinfo", "sigs.json"]


def _paths(base: Path, suffixes: List[str]) -> List[Path]:
    return [Path(f"{base}.{s}") for s in suffixes]


def test_complete_index_with_sshash(index_requirement, index_base: Path, touch: Callable[..., None]) -> None:
    touch(*_paths(index_base, INDEX_REQUIRED_SUFFIXES + ["sshash"]))

    result = index_requirement.check()
    assert result.ok is True
    index_requirement.ensure()


def test_complete_index_with_ssi_pair(index_requirement, index_base: Path, touch) -> None:
    touch(*_paths(index_base, INDEX_REQUIRED_SUFFIXES + ["ssi", "ssi.mphf"]))

    assert index_requirement.check().ok is True


def test_ssi_without_mphf_is_incomplete(index_requirement, index_base: Path, touch) -> None:
    touch(*_paths(index_base, INDEX_REQUIRED_SUFFIXES + ["ssi"]))

    result = index_requirement.check()
    assert result.ok is False
    assert result.missing_files == sorted([f"{index_base}.sshash", f"{index_base}.ssi.mphf"])

    with pytest.raises(RequirementCheckError) as exc:
        index_requirement.ensure()
    message = str(exc.value)
    assert "unsatisfied disjunction" in message
    assert "sshash" in message
    assert "ssi.mphf" in message


def test_missing_everything_reports_all_leaves_and_both_branches(
        index_requirement, index_base: Path
) -> None:
    result = index_requirement.check()

    expected_missing = [str(p) for p in _paths(
        index_base, INDEX_REQUIRED_SUFFIXES + ["sshash", "ssi", "ssi.mphf"]
    )]
    assert result.missing_files == sorted(expected_missing)

    root = result.failure
    assert isinstance(root, GroupUnsatisfied)
    # Six missing leaves, then the unsatisfied OR
    assert len(root.failures) == len(INDEX_REQUIRED_SUFFIXES) + 1
    disjunction = root.failures[-1]
    assert isinstance(disjunction, GroupUnsatisfied) and disjunction.group == "OR"
    assert len(disjunction.failures) == 2


def test_partial_mandatory_files_with_hash_present(index_requirement, index_base: Path, touch) -> None:
    present = INDEX_REQUIRED_SUFFIXES[:4]
    touch(*_paths(index_base, present + ["sshash"]))

    result = index_requirement.check()
    assert result.missing_files == sorted(
        str(p) for p in _paths(index_base, INDEX_REQUIRED_SUFFIXES[4:])
    )
    assert result.unsatisfied_disjunctions == []

    report = "\n".join(render_check_report(result))
    assert "refinfo" in report
    assert "sigs.json" in report
    assert "OR group" not in report
