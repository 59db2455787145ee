"""Bot access dimension.

Can an AI crawler actually fetch this page quickly and cleanly? Covers HTTP
status, server latency, redirect chains, mixed content and the optional
Lighthouse audit.
"""

from readiness.scoring.dimensions.base import DimensionResult, ScoreState, deduct
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import PageData
from readiness.scoring.thresholds import THRESHOLDS


def score_bot_access(page: PageData) -> DimensionResult:
    state = ScoreState()
    site = page.site_context
    extracted = page.extracted

    if page.status_code >= THRESHOLDS.http_error_status:
        deduct(state, IssueCode.HTTP_STATUS, data={"status_code": page.status_code})

    if site and site.response_time_ms and site.response_time_ms > THRESHOLDS.slow_response_ms:
        deduct(
            state,
            IssueCode.SLOW_RESPONSE,
            data={"response_time_ms": site.response_time_ms},
        )

    if page.redirect_chain and len(page.redirect_chain) >= THRESHOLDS.redirect_chain_max_hops:
        deduct(
            state,
            IssueCode.REDIRECT_CHAIN,
            data={
                "hops": len(page.redirect_chain),
                "chain": [f"{hop.status_code} {hop.url}" for hop in page.redirect_chain],
            },
        )

    if extracted.cors_mixed_content > 0:
        deduct(
            state,
            IssueCode.CORS_MIXED_CONTENT,
            data={"mixed_content_count": extracted.cors_mixed_content},
        )

    if extracted.cors_unsafe_blank_links > 0:
        deduct(
            state,
            IssueCode.CORS_UNSAFE_LINKS,
            data={"unsafe_blank_links": extracted.cors_unsafe_blank_links},
        )

    lighthouse = page.lighthouse
    if lighthouse is not None:
        lh = THRESHOLDS.lighthouse

        # Tiered: full deduction below perf_low, reduced below perf_moderate
        if lighthouse.performance < lh.perf_low:
            deduct(state, IssueCode.LH_PERF_LOW, data={"performance": lighthouse.performance})
        elif lighthouse.performance < lh.perf_moderate:
            deduct(
                state,
                IssueCode.LH_PERF_LOW,
                impact=lh.perf_moderate_impact,
                data={"performance": lighthouse.performance},
            )

        if lighthouse.seo < lh.seo_low:
            deduct(state, IssueCode.LH_SEO_LOW, data={"seo": lighthouse.seo})

        if lighthouse.accessibility < lh.a11y_low:
            deduct(
                state,
                IssueCode.LH_A11Y_LOW,
                data={"accessibility": lighthouse.accessibility},
            )

        if lighthouse.best_practices < lh.best_practices_low:
            deduct(
                state,
                IssueCode.LH_BP_LOW,
                data={"best_practices": lighthouse.best_practices},
            )

    if site and site.page_size_bytes and site.page_size_bytes > THRESHOLDS.large_page_size_bytes:
        deduct(
            state,
            IssueCode.LARGE_PAGE_SIZE,
            data={
                "page_size_bytes": site.page_size_bytes,
                "page_size_mb": round(site.page_size_bytes / (1024 * 1024), 2),
            },
        )

    return state.result()
