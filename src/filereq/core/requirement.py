from __future__ import annotations

"""
Finalized File Requirement.

The immutable product of a build. Safe to share and to evaluate any number
of times, from any number of threads.
"""

from dataclasses import dataclass
from typing import List, Set

from filereq.core.evaluator import check_requirement
from filereq.core.report_renderer import summarize_check_result
from filereq.domain.check_models import CheckResult
from filereq.domain.errors import DuplicateTermError, RequirementCheckError
from filereq.domain.expression_models import AllOf, iter_terms, render_expression
from filereq.domain.terms import Term


@dataclass(frozen=True)
class Requirement:
    """
    Root of a validated requirement expression.

    Attributes:
        root: Implicit top-level AND group.

    Raises:
        DuplicateTermError: If a term appears more than once in the tree.
    """
    root: AllOf

    def __post_init__(self) -> None:
        seen: Set[Term] = set()
        for term in iter_terms(self.root):
            if term in seen:
                raise DuplicateTermError(term.key)
            seen.add(term)

    @property
    def terms(self) -> List[Term]:
        """Every required term, in tree order."""
        return list(iter_terms(self.root))

    def check(self) -> CheckResult:
        """Evaluate against the filesystem, returning the outcome as data."""
        return check_requirement(self.root)

    def ensure(self) -> None:
        """
        Evaluate against the filesystem and raise if unsatisfied.

        Raises:
            RequirementCheckError: Carrying the full CheckResult.
        """
        result = self.check()
        if not result.ok:
            raise RequirementCheckError(result, summarize_check_result(result))

    def __str__(self) -> str:
        return render_expression(self.root)
