"""Page scoring engine.

Runs the seven dimension evaluators over one page, aggregates their scores
into a weighted overall score and grade, and projects the result onto the
legacy four pillars and the AI platforms. Pure and synchronous: safe to
call concurrently for different pages.
"""

from collections.abc import Iterable, Mapping

import structlog

from readiness.scoring.dimensions import DIMENSION_EVALUATORS
from readiness.scoring.dimensions.base import round_half_up
from readiness.scoring.grades import clamp_score, letter_grade
from readiness.scoring.issues import IssueCode, build_issue, sort_issues
from readiness.scoring.models import (
    DIMENSION_IDS,
    DimensionId,
    DimensionScores,
    Issue,
    PageData,
    PageState,
    ScoringResult,
)
from readiness.scoring.platforms import calculate_platform_scores
from readiness.scoring.thresholds import THRESHOLDS
from readiness.scoring.weights import DimensionWeights, get_dimension_weights

logger = structlog.get_logger(__name__)

# Dimensions averaged into each legacy pillar
LEGACY_PILLARS: dict[str, tuple[DimensionId, ...]] = {
    "technical": (
        DimensionId.META_TAGS,
        DimensionId.SITEMAP,
        DimensionId.ROBOTS_CRAWLABILITY,
        DimensionId.BOT_ACCESS,
    ),
    "content": (DimensionId.CONTENT_CITEABILITY,),
    "ai_readiness": (
        DimensionId.LLMS_TXT,
        DimensionId.ROBOTS_CRAWLABILITY,
        DimensionId.SCHEMA_MARKUP,
    ),
    "performance": (DimensionId.BOT_ACCESS,),
}


def legacy_scores(dimension_scores: DimensionScores) -> dict[str, int]:
    """
    Project dimension scores onto the four legacy pillars.

    Args:
        dimension_scores: The seven dimension scores

    Returns:
        technical, content, ai_readiness and performance, each 0-100
    """
    pillars = {}
    for pillar, dimensions in LEGACY_PILLARS.items():
        values = [dimension_scores[d] for d in dimensions]
        pillars[pillar] = round_half_up(sum(values) / len(values))
    return pillars


def dimensions_from_issues(issues: Iterable[Issue]) -> DimensionScores:
    """Recompute dimension scores from an issue list.

    Each dimension starts at 100 and takes every recorded impact of its
    issues. Used after a caller drops issues (e.g. dismissed ones).
    """
    scores = {dim: 100 for dim in DIMENSION_IDS}
    for issue in issues:
        scores[issue.dimension] += issue.score_impact
    return DimensionScores(**{dim.value: clamp_score(s) for dim, s in scores.items()})


class ScoringEngine:
    """Scores pages with one resolved set of dimension weights."""

    def __init__(self, weights: DimensionWeights | Mapping[str, float] | None = None):
        """
        Initialize the engine.

        Args:
            weights: Optional dimension weight override. If None, uses the
                     SCORING_WEIGHTS setting or the defaults.

        Raises:
            InvalidWeightsError: If the override is incomplete, negative or all zero
        """
        self._weights = get_dimension_weights(weights)
        self._normalized = self._weights.normalized()

    @property
    def weights(self) -> DimensionWeights:
        return self._weights

    def score(self, page: PageData) -> ScoringResult:
        """
        Score a single page.

        Args:
            page: Extracted page data

        Returns:
            ScoringResult in state FAILED for HTTP error pages, else SCORED
        """
        if page.status_code >= THRESHOLDS.http_error_status:
            return self._failed(page)

        scores: dict[str, int] = {}
        issues: list[Issue] = []
        for dimension, evaluate in DIMENSION_EVALUATORS.items():
            result = evaluate(page)
            scores[dimension.value] = result.score
            issues.extend(result.issues)
            logger.debug(
                "dimension_scored", url=page.url, dimension=dimension.value, **result.to_dict()
            )

        dimension_scores = DimensionScores(**scores)

        weighted = sum(
            dimension_scores[dim] * weight for dim, weight in self._normalized.items()
        )
        overall = clamp_score(round_half_up(weighted))
        grade = letter_grade(overall)

        pillars = legacy_scores(dimension_scores)

        result = ScoringResult(
            url=page.url,
            state=PageState.SCORED,
            overall_score=overall,
            letter_grade=grade,
            dimension_scores=dimension_scores,
            technical_score=pillars["technical"],
            content_score=pillars["content"],
            ai_readiness_score=pillars["ai_readiness"],
            performance_score=pillars["performance"],
            platform_scores=calculate_platform_scores(pillars),
            issues=sort_issues(issues),
        )

        logger.info(
            "page_scored",
            url=page.url,
            overall_score=overall,
            letter_grade=grade,
            issue_count=len(result.issues),
            critical_count=len(result.critical_issues),
        )

        return result

    def _failed(self, page: PageData) -> ScoringResult:
        issue = build_issue(IssueCode.HTTP_STATUS, data={"status_code": page.status_code})

        logger.info("page_failed", url=page.url, status_code=page.status_code)

        return ScoringResult(
            url=page.url,
            state=PageState.FAILED,
            overall_score=0,
            letter_grade="F",
            dimension_scores=DimensionScores.zeros(),
            technical_score=0,
            content_score=0,
            ai_readiness_score=0,
            performance_score=0,
            platform_scores={},
            issues=[issue],
        )


def score_page(
    page: PageData,
    weights: DimensionWeights | Mapping[str, float] | None = None,
) -> ScoringResult:
    """
    Convenience function to score one page.

    Args:
        page: Extracted page data
        weights: Optional dimension weight override (ratios only matter)

    Returns:
        ScoringResult with dimension, legacy and platform scores
    """
    return ScoringEngine(weights).score(page)
