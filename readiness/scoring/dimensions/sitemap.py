"""Sitemap dimension."""

from readiness.scoring.dimensions.base import (
    DimensionResult,
    ScoreState,
    deduct,
    round_half_up,
)
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import PageData
from readiness.scoring.thresholds import THRESHOLDS


def score_sitemap(page: PageData) -> DimensionResult:
    state = ScoreState()
    site = page.site_context

    if site is None:
        return state.result()

    if not site.has_sitemap:
        deduct(state, IssueCode.MISSING_SITEMAP)

    analysis = site.sitemap_analysis
    if analysis is None:
        return state.result()

    # Format is only meaningful when a sitemap was actually found
    if site.has_sitemap and not analysis.is_valid:
        deduct(state, IssueCode.SITEMAP_INVALID_FORMAT)

    if analysis.stale_url_count > 0:
        deduct(
            state,
            IssueCode.SITEMAP_STALE_URLS,
            data={
                "stale_url_count": analysis.stale_url_count,
                "total_urls": analysis.url_count,
            },
        )

    if analysis.discovered_page_count > 0:
        coverage = analysis.url_count / analysis.discovered_page_count
        if coverage < THRESHOLDS.sitemap_coverage_min:
            deduct(
                state,
                IssueCode.SITEMAP_LOW_COVERAGE,
                data={
                    "sitemap_urls": analysis.url_count,
                    "discovered_pages": analysis.discovered_page_count,
                    "coverage": round_half_up(coverage * 100),
                },
            )

    return state.result()
