from __future__ import annotations

"""
Check Result Domain Models.

Defines the failure values produced by evaluating a requirement against the
filesystem. Failures mirror the shape of the expression tree, and the
CheckResult wrapper offers flattened views of them for reporting.
"""

from dataclasses import dataclass, field
from typing import Iterator, List, Optional, Tuple, Union

# -----------------------------------------------------------------------------
# FAILURE MODELS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class MissingFile:
    """
    A leaf whose path does not exist.

    Attributes:
        path: Canonical path of the missing file.
    """
    path: str


@dataclass(frozen=True)
class ProbeFailure:
    """
    A leaf whose existence could not be determined.

    Attributes:
        path: Canonical path that was probed.
        error: Description of the OS error raised by the probe.
    """
    path: str
    error: str


@dataclass(frozen=True)
class GroupUnsatisfied:
    """
    An AND/OR group whose condition failed.

    For an AND group, failures lists only the unsatisfied children.
    For an OR group, failures lists every alternative, in tree order.

    Attributes:
        group: 'AND' or 'OR'.
        expression: Rendered expression of the group.
        failures: Nested failure detail of the relevant children.
    """
    group: str
    expression: str
    failures: Tuple["Failure", ...] = field(default_factory=tuple)


Failure = Union[MissingFile, ProbeFailure, GroupUnsatisfied]

# -----------------------------------------------------------------------------
# RESULT MODEL
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class CheckResult:
    """
    Outcome of evaluating a requirement once.

    Attributes:
        ok: True when the requirement is satisfied.
        failure: Root failure detail, None when ok.
    """
    ok: bool
    failure: Optional[Failure] = None

    def __bool__(self) -> bool:
        return self.ok

    @property
    def missing_files(self) -> List[str]:
        """Sorted, de-duplicated paths reported as missing anywhere."""
        return sorted({f.path for f in self.iter_failures() if isinstance(f, MissingFile)})

    @property
    def probe_failures(self) -> List[str]:
        """Sorted 'path (error)' entries for probes that errored."""
        return sorted({
            f"{f.path} ({f.error})"
            for f in self.iter_failures()
            if isinstance(f, ProbeFailure)
        })

    @property
    def unsatisfied_disjunctions(self) -> List[str]:
        """Sorted expressions of every OR group that was not satisfied."""
        return sorted({
            f.expression
            for f in self.iter_failures()
            if isinstance(f, GroupUnsatisfied) and f.group == "OR"
        })

    def iter_failures(self) -> Iterator[Failure]:
        """Walk the failure tree depth-first, parents before children."""
        if self.failure is None:
            return
        stack: List[Failure] = [self.failure]
        while stack:
            current = stack.pop()
            yield current
            if isinstance(current, GroupUnsatisfied):
                stack.extend(reversed(current.failures))

# -----------------------------------------------------------------------------
# FACTORY FUNCTIONS
# -----------------------------------------------------------------------------

def create_success_result() -> CheckResult:
    """Create a satisfied check result."""
    return CheckResult(ok=True)


def create_failure_result(failure: Failure) -> CheckResult:
    """
    Create an unsatisfied check result.

    Args:
        failure: Failure detail of the root node.

    Returns:
        CheckResult: An immutable failed result.
    """
    return CheckResult(ok=False, failure=failure)
