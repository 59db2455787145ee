"""Shared pieces for dimension evaluators.

Each evaluator owns a fresh ScoreState that starts at 100; nothing is shared
between evaluators.
"""

import math
from dataclasses import dataclass, field
from typing import Any

from readiness.scoring.issues import IssueCode, build_issue
from readiness.scoring.models import Issue


@dataclass
class DimensionResult:
    """Score and triggered issues for a single dimension."""

    score: int  # 0-100
    issues: list[Issue] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "score": self.score,
            "issues": [i.to_dict() for i in self.issues],
        }


@dataclass
class ScoreState:
    """Running score for one evaluator call."""

    score: int = 100
    issues: list[Issue] = field(default_factory=list)

    def result(self) -> DimensionResult:
        return DimensionResult(score=max(0, self.score), issues=self.issues)


def deduct(
    state: ScoreState,
    code: IssueCode,
    impact: int | None = None,
    data: dict[str, Any] | None = None,
) -> None:
    """Record an issue and apply its deduction.

    ``impact`` overrides the registry default for tiered and capped rules.
    """
    issue = build_issue(code, score_impact=impact, data=data)
    state.score += issue.score_impact
    state.issues.append(issue)


def round_half_up(value: float) -> int:
    """Round .5 away from zero for non-negative values."""
    return int(math.floor(value + 0.5))
