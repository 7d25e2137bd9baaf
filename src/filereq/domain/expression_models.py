from __future__ import annotations

"""
Requirement Expression Tree Models.

Immutable recursive node types describing which files must exist:
a Leaf wraps one Term, AllOf is a conjunction and AnyOf a disjunction.
Groups always hold at least one child.
"""

from dataclasses import dataclass
from typing import Iterable, Iterator, Tuple, Union

from filereq.domain.errors import EmptyGroupError
from filereq.domain.terms import Term

AND = "AND"
OR = "OR"

# -----------------------------------------------------------------------------
# STRUCTURAL COMPONENTS
# -----------------------------------------------------------------------------

@dataclass(frozen=True)
class Leaf:
    """
    A single file that must exist.

    Attributes:
        term: The canonical path requirement.
    """
    term: Term

    def __str__(self) -> str:
        return self.term.key


@dataclass(frozen=True)
class AllOf:
    """
    Conjunction: satisfied only when every child is satisfied.

    Attributes:
        children: Ordered, non-empty child nodes.
    """
    children: Tuple["Node", ...]

    def __post_init__(self) -> None:
        _freeze_children(self, AND)

    def __str__(self) -> str:
        return render_expression(self)


@dataclass(frozen=True)
class AnyOf:
    """
    Disjunction: satisfied when at least one child is satisfied.

    Attributes:
        children: Ordered, non-empty child nodes.
    """
    children: Tuple["Node", ...]

    def __post_init__(self) -> None:
        _freeze_children(self, OR)

    def __str__(self) -> str:
        return render_expression(self)


Node = Union[Leaf, AllOf, AnyOf]

# -----------------------------------------------------------------------------
# PUBLIC HELPERS
# -----------------------------------------------------------------------------

def group_label(node: Node) -> str:
    """Return the operator name of a group node ('AND' or 'OR')."""
    return OR if isinstance(node, AnyOf) else AND


def render_expression(node: Node) -> str:
    """
    Render a node as a parenthesized boolean expression.

    Example: '(idx.ctab AND (idx.sshash OR (idx.ssi AND idx.ssi.mphf)))'
    """
    if isinstance(node, Leaf):
        return node.term.key
    joiner = f" {group_label(node)} "
    return "(" + joiner.join(render_expression(c) for c in node.children) + ")"


def iter_terms(node: Node) -> Iterator[Term]:
    """Yield every term of the tree in depth-first, left-to-right order."""
    if isinstance(node, Leaf):
        yield node.term
        return
    for child in node.children:
        yield from iter_terms(child)

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _freeze_children(group: Union[AllOf, AnyOf], label: str) -> None:
    """Store children as a tuple and reject empty groups."""
    children: Iterable[Node] = group.children
    frozen = tuple(children)
    if not frozen:
        raise EmptyGroupError(label)
    object.__setattr__(group, "children", frozen)
