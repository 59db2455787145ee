"""Scoring package for AI readiness evaluation."""

# Lazy imports so submodules can be imported on their own
# Use explicit imports when needed:
# from readiness.scoring.engine import ScoringEngine, score_page
# from readiness.scoring.issues import IssueCode, lookup
# from readiness.scoring.platforms import calculate_platform_scores

from importlib import import_module
from typing import Any

_EXPORTS = {
    # Engine
    "ScoringEngine": "readiness.scoring.engine",
    "score_page": "readiness.scoring.engine",
    "legacy_scores": "readiness.scoring.engine",
    "dimensions_from_issues": "readiness.scoring.engine",
    # Registry
    "IssueCode": "readiness.scoring.issues",
    "IssueDefinition": "readiness.scoring.issues",
    "ISSUE_DEFINITIONS": "readiness.scoring.issues",
    "lookup": "readiness.scoring.issues",
    "build_issue": "readiness.scoring.issues",
    "sort_issues": "readiness.scoring.issues",
    # Models
    "DimensionId": "readiness.scoring.models",
    "Severity": "readiness.scoring.models",
    "PageState": "readiness.scoring.models",
    "PageData": "readiness.scoring.models",
    "ExtractedData": "readiness.scoring.models",
    "SiteContext": "readiness.scoring.models",
    "Issue": "readiness.scoring.models",
    "DimensionScores": "readiness.scoring.models",
    "PlatformScore": "readiness.scoring.models",
    "ScoringResult": "readiness.scoring.models",
    # Weights
    "DimensionWeights": "readiness.scoring.weights",
    "DEFAULT_DIMENSION_WEIGHTS": "readiness.scoring.weights",
    # Platforms
    "calculate_platform_scores": "readiness.scoring.platforms",
    "check_platform_requirements": "readiness.scoring.platforms",
    # Grades
    "letter_grade": "readiness.scoring.grades",
    # Content type
    "ContentType": "readiness.scoring.content_type",
    "detect_content_type": "readiness.scoring.content_type",
}

__all__ = list(_EXPORTS)


def __getattr__(name: str) -> Any:
    module = _EXPORTS.get(name)
    if module is None:
        raise AttributeError(f"module 'readiness.scoring' has no attribute '{name}'")
    return getattr(import_module(module), name)
