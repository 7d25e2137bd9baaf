from __future__ import annotations

"""
Requirement Builder.

Assembles an expression tree through nested calls. Every builder spawned
during one build shares a single BuildContext holding the set of terms seen
so far, which is what makes duplicate detection global across branches.

Usage:
    builder = new()
    builder.require_file("idx.ctab")
    with builder.any_of() as any_:
        any_.require_file("idx.sshash")
        any_.require_all(
            lambda all_: all_.require_file("idx.ssi").require_file("idx.ssi.mphf")
        )
    requirement = builder.build()
"""

import logging
from contextlib import contextmanager
from typing import Any, Callable, Iterator, List, Optional, Set, Type, Union

from filereq.core.requirement import Requirement
from filereq.domain.errors import BuilderConsumedError, DuplicateTermError
from filereq.domain.expression_models import AllOf, AnyOf, Leaf, Node
from filereq.domain.terms import PathInput, Term

logger = logging.getLogger(__name__)

GroupRoutine = Callable[["GroupBuilder"], Any]


# -----------------------------------------------------------------------------
# SHARED BUILD STATE
# -----------------------------------------------------------------------------

class BuildContext:
    """
    State shared by every builder of one build.

    Attributes:
        seen: Terms already placed anywhere in the tree.
        error: First error that aborted the build, if any.
    """

    def __init__(self) -> None:
        self.seen: Set[Term] = set()
        self.error: Optional[Exception] = None

    def register(self, term: Term) -> None:
        """Claim a term for this build, rejecting repeats."""
        if term in self.seen:
            raise DuplicateTermError(term.key)
        self.seen.add(term)

    def abort(self, error: Exception) -> None:
        """Remember the first error so the build can never be finalized."""
        if self.error is None:
            logger.debug(f"Requirement build aborted: {error}")
            self.error = error


# -----------------------------------------------------------------------------
# BUILDERS
# -----------------------------------------------------------------------------

class GroupBuilder:
    """
    Collects the children of one group under construction.

    Instances are handed to group routines by require_any/require_all (and
    yielded by any_of/all_of). They are sealed once the group is closed.
    """

    def __init__(self, context: BuildContext) -> None:
        self._context = context
        self._nodes: List[Node] = []
        self._sealed = False

    def require_file(self, path: PathInput) -> "GroupBuilder":
        """
        Add a required file to this group.

        Raises:
            DuplicateTermError: If the canonical path is already in the tree.
            ValueError: If the path is empty.
        """
        self._ensure_open()
        try:
            term = Term.from_path(path)
            self._context.register(term)
        except Exception as e:
            self._context.abort(e)
            raise
        self._nodes.append(Leaf(term))
        logger.debug(f"Required file term: {term.key}")
        return self

    def require_all(self, routine: GroupRoutine) -> "GroupBuilder":
        """
        Add a nested AND group populated by routine.

        Raises:
            EmptyGroupError: If routine adds nothing.
        """
        return self._require_group(AllOf, routine)

    def require_any(self, routine: GroupRoutine) -> "GroupBuilder":
        """
        Add a nested OR group populated by routine.

        Raises:
            EmptyGroupError: If routine adds nothing.
        """
        return self._require_group(AnyOf, routine)

    @contextmanager
    def all_of(self) -> Iterator["GroupBuilder"]:
        """Context-manager form of require_all; the group closes on exit."""
        with self._group(AllOf) as child:
            yield child

    @contextmanager
    def any_of(self) -> Iterator["GroupBuilder"]:
        """Context-manager form of require_any; the group closes on exit."""
        with self._group(AnyOf) as child:
            yield child

    # -------------------------------------------------------------------------
    # Internal helpers
    # -------------------------------------------------------------------------

    def _require_group(
            self,
            group_cls: Type[Union[AllOf, AnyOf]],
            routine: GroupRoutine,
    ) -> "GroupBuilder":
        with self._group(group_cls) as child:
            routine(child)
        return self

    @contextmanager
    def _group(self, group_cls: Type[Union[AllOf, AnyOf]]) -> Iterator["GroupBuilder"]:
        self._ensure_open()
        child = GroupBuilder(self._context)
        try:
            yield child
            child._sealed = True
            # AllOf/AnyOf reject an empty child list themselves
            node = group_cls(tuple(child._nodes))
        except Exception as e:
            child._sealed = True
            self._context.abort(e)
            raise
        self._nodes.append(node)

    def _ensure_open(self) -> None:
        if self._context.error is not None:
            raise self._context.error
        if self._sealed:
            raise BuilderConsumedError("This builder has already been finalized.")


class RequirementBuilder(GroupBuilder):
    """
    Top-level builder. Its group is the implicit root AND of the requirement.
    """

    def __init__(self) -> None:
        super().__init__(BuildContext())

    def build(self) -> Requirement:
        """
        Finalize the builder into an immutable Requirement.

        The builder is spent afterwards, whether or not this call succeeds.

        Raises:
            EmptyGroupError: If nothing was required.
            RequirementBuildError: The error that aborted an earlier require
                                   call of this build, re-raised.
        """
        self._ensure_open()
        self._sealed = True
        root = AllOf(tuple(self._nodes))
        term_count = len(self._context.seen)
        self._context.seen = set()
        logger.debug(f"Built file requirement with {term_count} term(s): {root}")
        return Requirement(root=root)


def new() -> RequirementBuilder:
    """Create an empty top-level builder."""
    return RequirementBuilder()
