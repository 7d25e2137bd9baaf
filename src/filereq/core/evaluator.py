from __future__ import annotations

"""
Requirement Evaluator.

Walks an expression tree against the live filesystem. AND groups visit
every child so the report lists every missing artifact at once; OR groups
stop at the first satisfied alternative and otherwise report all of them.
"""

import logging
from typing import List, Optional

from filereq.domain.check_models import (
    CheckResult,
    Failure,
    GroupUnsatisfied,
    MissingFile,
    ProbeFailure,
    create_failure_result,
    create_success_result,
)
from filereq.domain.expression_models import (
    AND,
    OR,
    AllOf,
    AnyOf,
    Leaf,
    Node,
    render_expression,
)
from filereq.infra.fs import probe_path

logger = logging.getLogger(__name__)

# -----------------------------------------------------------------------------
# PUBLIC API
# -----------------------------------------------------------------------------

def check_requirement(root: Node) -> CheckResult:
    """
    Evaluate a requirement tree once.

    Args:
        root: Root node, usually the implicit AND of a Requirement.

    Returns:
        CheckResult: Success, or the failure tree of every unmet condition.
    """
    failure = evaluate_node(root)
    if failure is None:
        logger.debug(f"File requirement satisfied: {render_expression(root)}")
        return create_success_result()

    result = create_failure_result(failure)
    logger.info(
        f"File requirement not satisfied "
        f"({len(result.missing_files)} missing, "
        f"{len(result.probe_failures)} probe error(s))"
    )
    return result


def evaluate_node(node: Node) -> Optional[Failure]:
    """
    Recursively evaluate one node.

    Returns:
        Optional[Failure]: None when satisfied, otherwise the failure detail.
    """
    if isinstance(node, Leaf):
        return _evaluate_leaf(node)
    if isinstance(node, AllOf):
        return _evaluate_all(node)
    if isinstance(node, AnyOf):
        return _evaluate_any(node)
    raise TypeError(f"Unsupported requirement node: {type(node).__name__}")

# -----------------------------------------------------------------------------
# PRIVATE HELPERS
# -----------------------------------------------------------------------------

def _evaluate_leaf(node: Leaf) -> Optional[Failure]:
    path = node.term.key
    exists, error = probe_path(path)
    if exists:
        return None
    if error is not None:
        return ProbeFailure(path=path, error=error)
    logger.debug(f"Missing required file: {path}")
    return MissingFile(path=path)


def _evaluate_all(node: AllOf) -> Optional[Failure]:
    # No short-circuit: every child is visited to collect a complete report
    failures: List[Failure] = []
    for child in node.children:
        failure = evaluate_node(child)
        if failure is not None:
            failures.append(failure)

    if not failures:
        return None
    return GroupUnsatisfied(
        group=AND,
        expression=render_expression(node),
        failures=tuple(failures),
    )


def _evaluate_any(node: AnyOf) -> Optional[Failure]:
    failures: List[Failure] = []
    for child in node.children:
        failure = evaluate_node(child)
        if failure is None:
            return None
        failures.append(failure)

    return GroupUnsatisfied(
        group=OR,
        expression=render_expression(node),
        failures=tuple(failures),
    )
