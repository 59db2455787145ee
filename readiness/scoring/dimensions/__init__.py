"""Dimension evaluators, one pure function per scoring dimension."""

from collections.abc import Callable

from readiness.scoring.dimensions.base import DimensionResult
from readiness.scoring.dimensions.bot_access import score_bot_access
from readiness.scoring.dimensions.content_citeability import score_content_citeability
from readiness.scoring.dimensions.llms_txt import score_llms_txt
from readiness.scoring.dimensions.meta_tags import score_meta_tags
from readiness.scoring.dimensions.robots_crawlability import score_robots_crawlability
from readiness.scoring.dimensions.schema_markup import score_schema_markup
from readiness.scoring.dimensions.sitemap import score_sitemap
from readiness.scoring.models import DimensionId, PageData

Evaluator = Callable[[PageData], DimensionResult]

# Invocation order determines issue order before severity sorting
DIMENSION_EVALUATORS: dict[DimensionId, Evaluator] = {
    DimensionId.LLMS_TXT: score_llms_txt,
    DimensionId.ROBOTS_CRAWLABILITY: score_robots_crawlability,
    DimensionId.SITEMAP: score_sitemap,
    DimensionId.SCHEMA_MARKUP: score_schema_markup,
    DimensionId.META_TAGS: score_meta_tags,
    DimensionId.BOT_ACCESS: score_bot_access,
    DimensionId.CONTENT_CITEABILITY: score_content_citeability,
}

__all__ = [
    "DIMENSION_EVALUATORS",
    "DimensionResult",
    "Evaluator",
    "score_bot_access",
    "score_content_citeability",
    "score_llms_txt",
    "score_meta_tags",
    "score_robots_crawlability",
    "score_schema_markup",
    "score_sitemap",
]
