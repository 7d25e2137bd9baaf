from __future__ import annotations

"""
Check Report Renderer.

Converts CheckResult failure trees into human-readable diagnostics: an ASCII
tree mirroring the requirement structure, and a single-line summary
suitable for exception messages and logs.
"""

from typing import List

from filereq.domain.check_models import (
    CheckResult,
    Failure,
    GroupUnsatisfied,
    MissingFile,
    ProbeFailure,
)

SATISFIED_TEXT = "All required input files are present."
SUMMARY_PREFIX = "Required input files were missing or incomplete"

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def render_check_report(result: CheckResult) -> List[str]:
    """
    Render a check result as indented report lines.

    Example:
        Required input files were missing or incomplete:
        └── AND group unsatisfied: (idx.ctab AND (idx.sshash OR idx.ssi))
            ├── missing file: idx.ctab
            └── OR group unsatisfied: (idx.sshash OR idx.ssi)
                ├── missing file: idx.sshash
                └── missing file: idx.ssi

    Args:
        result: Outcome of Requirement.check().

    Returns:
        List[str]: Report lines, without trailing newlines.
    """
    if result.ok or result.failure is None:
        return [SATISFIED_TEXT]
    lines: List[str] = [f"{SUMMARY_PREFIX}:"]
    render_failure_tree([result.failure], lines, prefix="")
    return lines


def render_failure_tree(failures: List[Failure], lines: List[str], prefix: str = "") -> None:
    """
    Recursively append failures to lines using ├── / └── connectors.

    Args:
        failures: Sibling failures at the current level.
        lines: Accumulator list for output strings.
        prefix: Indentation prefix for the current recursion level.
    """
    total = len(failures)
    for i, failure in enumerate(failures):
        is_last = (i == total - 1)
        connector = "└── " if is_last else "├── "
        lines.append(f"{prefix}{connector}{describe_failure(failure)}")

        if isinstance(failure, GroupUnsatisfied):
            new_prefix = prefix + ("    " if is_last else "│   ")
            render_failure_tree(list(failure.failures), lines, prefix=new_prefix)


def describe_failure(failure: Failure) -> str:
    """One-line label of a single failure node."""
    if isinstance(failure, MissingFile):
        return f"missing file: {failure.path}"
    if isinstance(failure, ProbeFailure):
        return f"path check error: {failure.path} ({failure.error})"
    return f"{failure.group} group unsatisfied: {failure.expression}"


def summarize_check_result(result: CheckResult) -> str:
    """
    Build the single-line diagnostic for an unsatisfied result.

    Sections are only included when non-empty: missing files, path check
    errors and unsatisfied disjunctions, each sorted and comma-joined.
    """
    if result.ok:
        return SATISFIED_TEXT

    sections: List[str] = []
    if result.missing_files:
        sections.append("missing files: " + ", ".join(result.missing_files))
    if result.probe_failures:
        sections.append("path check errors: " + ", ".join(result.probe_failures))
    if result.unsatisfied_disjunctions:
        sections.append(
            "unsatisfied disjunction(s): " + ", ".join(result.unsatisfied_disjunctions)
        )
    return f"{SUMMARY_PREFIX} ({'; '.join(sections)})"
