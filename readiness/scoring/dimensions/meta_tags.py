"""Meta tags dimension."""

from readiness.scoring.dimensions.base import DimensionResult, ScoreState, deduct
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import PageData
from readiness.scoring.thresholds import THRESHOLDS

REQUIRED_OG_TAGS = ("og:title", "og:description", "og:image")


def score_meta_tags(page: PageData) -> DimensionResult:
    state = ScoreState()

    title_length = len(page.title) if page.title else 0
    if not page.title or not THRESHOLDS.title.contains(title_length):
        deduct(state, IssueCode.MISSING_TITLE, data={"title_length": title_length})

    desc_length = len(page.meta_description) if page.meta_description else 0
    if not page.meta_description or not THRESHOLDS.meta_desc.contains(desc_length):
        deduct(state, IssueCode.MISSING_META_DESC, data={"desc_length": desc_length})

    og_tags = page.extracted.og_tags or {}
    missing_og = [tag for tag in REQUIRED_OG_TAGS if not og_tags.get(tag)]
    if missing_og:
        deduct(state, IssueCode.MISSING_OG_TAGS, data={"missing_tags": missing_og})

    if not page.canonical_url:
        deduct(state, IssueCode.MISSING_CANONICAL)

    return state.result()
