from __future__ import annotations

"""
Exception Taxonomy.

Build-time errors abort the construction of a requirement and always reach
the caller unchanged. Check-time problems are reported as data (see
check_models); RequirementCheckError only exists for callers that opt into
raising via Requirement.ensure().
"""

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from filereq.domain.check_models import CheckResult


class FileRequirementError(Exception):
    """Base class for every error raised by filereq."""


# -----------------------------------------------------------------------------
# BUILD ERRORS
# -----------------------------------------------------------------------------

class RequirementBuildError(FileRequirementError):
    """A requirement expression could not be constructed."""


class DuplicateTermError(RequirementBuildError):
    """The same canonical path was required more than once in one tree."""

    def __init__(self, path: str) -> None:
        self.path = path
        super().__init__(
            f"File term `{path}` was inserted more than once. "
            f"Each file can appear in at most one clause."
        )


class EmptyGroupError(RequirementBuildError):
    """An AND/OR group was closed without any child."""

    def __init__(self, group: str) -> None:
        self.group = group
        super().__init__(f"Cannot create an empty `{group}` group.")


class BuilderConsumedError(RequirementBuildError):
    """A builder was used after build() or after its group was closed."""


# -----------------------------------------------------------------------------
# CHECK ERRORS
# -----------------------------------------------------------------------------

class RequirementCheckError(FileRequirementError):
    """
    Raised by Requirement.ensure() when the filesystem does not satisfy it.

    Attributes:
        result: The full CheckResult, including the structured failure tree.
    """

    def __init__(self, result: "CheckResult", message: str) -> None:
        self.result = result
        super().__init__(message)
