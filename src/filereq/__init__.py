from __future__ import annotations

from filereq.core.builder import BuildContext, GroupBuilder, RequirementBuilder, new
from filereq.core.report_renderer import render_check_report, summarize_check_result
from filereq.core.requirement import Requirement
from filereq.domain.check_models import (
    CheckResult,
    GroupUnsatisfied,
    MissingFile,
    ProbeFailure,
)
from filereq.domain.errors import (
    BuilderConsumedError,
    DuplicateTermError,
    EmptyGroupError,
    FileRequirementError,
    RequirementBuildError,
    RequirementCheckError,
)
from filereq.domain.expression_models import AllOf, AnyOf, Leaf
from filereq.domain.terms import Term, canonicalize_path
from filereq.infra.logging import LoggingConfig, configure_logging

__version__ = "0.1.0"

__all__ = [
    "AllOf",
    "AnyOf",
    "BuildContext",
    "BuilderConsumedError",
    "CheckResult",
    "DuplicateTermError",
    "EmptyGroupError",
    "FileRequirementError",
    "GroupBuilder",
    "GroupUnsatisfied",
    "Leaf",
    "LoggingConfig",
    "MissingFile",
    "ProbeFailure",
    "Requirement",
    "RequirementBuildError",
    "RequirementBuilder",
    "RequirementCheckError",
    "Term",
    "canonicalize_path",
    "configure_logging",
    "new",
    "render_check_report",
    "summarize_check_result",
]
