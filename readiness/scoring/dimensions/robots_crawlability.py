"""Robots / crawlability dimension."""

from readiness.scoring.dimensions.base import DimensionResult, ScoreState, deduct
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import PageData


def score_robots_crawlability(page: PageData) -> DimensionResult:
    state = ScoreState()

    if page.site_context and page.site_context.ai_crawlers_blocked:
        deduct(
            state,
            IssueCode.AI_CRAWLER_BLOCKED,
            data={"blocked_crawlers": list(page.site_context.ai_crawlers_blocked)},
        )

    directives = [d.strip().lower() for d in page.extracted.robots_directives]
    if page.extracted.has_robots_meta and "noindex" in directives:
        deduct(state, IssueCode.NOINDEX_SET)

    return state.result()
