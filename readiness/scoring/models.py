"""Data model for page scoring.

Inputs (PageData and its nested records) are produced once per crawled page
by the extraction pipeline and are never mutated here. Outputs
(ScoringResult and friends) are plain dataclasses with ``to_dict()`` for
persistence and report rendering.
"""

from collections.abc import Mapping
from dataclasses import dataclass, field, fields
from enum import Enum
from typing import Any


class DimensionId(str, Enum):
    """The seven scoring dimensions."""

    LLMS_TXT = "llms_txt"
    ROBOTS_CRAWLABILITY = "robots_crawlability"
    SITEMAP = "sitemap"
    SCHEMA_MARKUP = "schema_markup"
    META_TAGS = "meta_tags"
    BOT_ACCESS = "bot_access"
    CONTENT_CITEABILITY = "content_citeability"


# Evaluation order; also the order issues are merged in before sorting
DIMENSION_IDS: tuple[DimensionId, ...] = tuple(DimensionId)


class Severity(str, Enum):
    """Issue severity, most urgent first."""

    CRITICAL = "critical"
    WARNING = "warning"
    INFO = "info"

    @property
    def rank(self) -> int:
        return SEVERITY_RANK[self]


SEVERITY_RANK: dict[Severity, int] = {
    Severity.CRITICAL: 0,
    Severity.WARNING: 1,
    Severity.INFO: 2,
}


class PageState(str, Enum):
    """Terminal states of a single page evaluation."""

    SCORED = "scored"
    FAILED = "failed"


# ============================================================================
# Inputs
# ============================================================================


@dataclass(frozen=True)
class RedirectHop:
    """One hop of the redirect chain that led to the page."""

    url: str
    status_code: int


@dataclass(frozen=True)
class LighthouseScores:
    """Lighthouse category scores, each 0-1."""

    performance: float
    seo: float
    accessibility: float
    best_practices: float


@dataclass(frozen=True)
class LLMContentScores:
    """LLM-judged content quality, each 0-100."""

    clarity: float
    authority: float
    comprehensiveness: float
    structure: float
    citation_worthiness: float


@dataclass(frozen=True)
class SitemapAnalysis:
    """Summary of the site's sitemap produced by the crawler."""

    is_valid: bool
    url_count: int
    stale_url_count: int
    discovered_page_count: int


@dataclass(frozen=True)
class SiteContext:
    """Crawl-wide facts shared by every page of one crawl.

    ``content_hashes`` maps a content hash to the canonical URL that owns it
    and must be complete before any page of the crawl is scored.
    """

    has_llms_txt: bool
    ai_crawlers_blocked: list[str] = field(default_factory=list)
    has_sitemap: bool = True
    content_hashes: Mapping[str, str] = field(default_factory=dict)
    llms_txt_content: str | None = None
    sitemap_analysis: SitemapAnalysis | None = None
    response_time_ms: float | None = None
    page_size_bytes: int | None = None
    stale_content: bool = False


@dataclass(frozen=True)
class ExtractedData:
    """HTML-derived signals for one page."""

    h1: list[str] = field(default_factory=list)
    h2: list[str] = field(default_factory=list)
    h3: list[str] = field(default_factory=list)
    h4: list[str] = field(default_factory=list)
    h5: list[str] = field(default_factory=list)
    h6: list[str] = field(default_factory=list)
    schema_types: list[str] = field(default_factory=list)
    internal_links: list[str] = field(default_factory=list)
    external_links: list[str] = field(default_factory=list)
    pdf_links: list[str] = field(default_factory=list)
    images_without_alt: int = 0
    has_robots_meta: bool = False
    robots_directives: list[str] = field(default_factory=list)
    og_tags: dict[str, str] | None = None
    structured_data: list[dict[str, Any]] | None = None

    # CORS / link safety
    cors_unsafe_blank_links: int = 0
    cors_mixed_content: int = 0
    cors_has_issues: bool = False

    # Readability
    flesch_score: float | None = None
    flesch_classification: str | None = None
    text_html_ratio: float | None = None
    sentence_length_variance: float | None = None
    top_transition_words: list[str] = field(default_factory=list)

    def headings(self, level: int) -> list[str]:
        """Headings for a level 1-6."""
        return getattr(self, f"h{level}")


@dataclass(frozen=True)
class PageData:
    """Everything the engine knows about one crawled page."""

    url: str
    status_code: int
    title: str | None = None
    meta_description: str | None = None
    canonical_url: str | None = None
    word_count: int = 0
    content_hash: str | None = None
    extracted: ExtractedData = field(default_factory=ExtractedData)
    lighthouse: LighthouseScores | None = None
    llm_scores: LLMContentScores | None = None
    redirect_chain: list[RedirectHop] | None = None
    site_context: SiteContext | None = None


# ============================================================================
# Outputs
# ============================================================================


@dataclass
class Issue:
    """A single triggered rule."""

    code: str
    severity: Severity
    dimension: DimensionId
    score_impact: int  # Negative
    message: str
    recommendation: str
    data: dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> dict:
        return {
            "code": self.code,
            "severity": self.severity.value,
            "dimension": self.dimension.value,
            "score_impact": self.score_impact,
            "message": self.message,
            "recommendation": self.recommendation,
            "data": self.data,
        }


@dataclass
class DimensionScores:
    """Per-dimension scores, each an integer in [0, 100]."""

    llms_txt: int
    robots_crawlability: int
    sitemap: int
    schema_markup: int
    meta_tags: int
    bot_access: int
    content_citeability: int

    @classmethod
    def zeros(cls) -> "DimensionScores":
        return cls(**{dim.value: 0 for dim in DIMENSION_IDS})

    def __getitem__(self, dimension: DimensionId | str) -> int:
        return getattr(self, DimensionId(dimension).value)

    def to_dict(self) -> dict[str, int]:
        return {f.name: getattr(self, f.name) for f in fields(self)}


@dataclass
class PlatformScore:
    """Readiness projection for one AI platform."""

    platform: str
    name: str
    score: int
    grade: str
    tips: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "platform": self.platform,
            "name": self.name,
            "score": self.score,
            "grade": self.grade,
            "tips": self.tips,
        }


@dataclass
class ScoringResult:
    """Complete score for one page."""

    url: str
    state: PageState
    overall_score: int  # 0-100
    letter_grade: str
    dimension_scores: DimensionScores

    # Legacy four-pillar projection
    technical_score: int
    content_score: int
    ai_readiness_score: int
    performance_score: int

    platform_scores: dict[str, PlatformScore] = field(default_factory=dict)
    issues: list[Issue] = field(default_factory=list)

    @property
    def critical_issues(self) -> list[Issue]:
        return [i for i in self.issues if i.severity == Severity.CRITICAL]

    def to_dict(self) -> dict:
        return {
            "url": self.url,
            "state": self.state.value,
            "overall_score": self.overall_score,
            "letter_grade": self.letter_grade,
            "dimension_scores": self.dimension_scores.to_dict(),
            "technical_score": self.technical_score,
            "content_score": self.content_score,
            "ai_readiness_score": self.ai_readiness_score,
            "performance_score": self.performance_score,
            "platform_scores": {k: v.to_dict() for k, v in self.platform_scores.items()},
            "issues": [i.to_dict() for i in self.issues],
        }

    def show_the_math(self) -> str:
        """Generate human-readable calculation breakdown."""
        lines = [
            "=" * 50,
            "AI READINESS SCORE",
            "=" * 50,
            "",
            f"URL: {self.url}",
            f"Overall: {self.overall_score}/100 (Grade {self.letter_grade})",
        ]

        if self.state == PageState.FAILED:
            lines.append("Page failed to load; no dimension was evaluated.")
        else:
            lines.extend(["", "-" * 50, "DIMENSIONS", "-" * 50])
            for name, score in self.dimension_scores.to_dict().items():
                lines.append(f"  {name:<22} {score:>3}/100")

            lines.extend(["", "-" * 50, "LEGACY PILLARS", "-" * 50])
            lines.append(f"  {'technical':<22} {self.technical_score:>3}/100")
            lines.append(f"  {'content':<22} {self.content_score:>3}/100")
            lines.append(f"  {'ai_readiness':<22} {self.ai_readiness_score:>3}/100")
            lines.append(f"  {'performance':<22} {self.performance_score:>3}/100")

            if self.platform_scores:
                lines.extend(["", "-" * 50, "PLATFORMS", "-" * 50])
                for platform in self.platform_scores.values():
                    lines.append(
                        f"  {platform.name:<22} {platform.score:>3}/100 ({platform.grade})"
                    )

        if self.issues:
            lines.extend(["", "-" * 50, f"ISSUES ({len(self.issues)})", "-" * 50])
            for issue in self.issues:
                lines.append(
                    f"  [{issue.severity.value.upper()}] {issue.code} "
                    f"({issue.score_impact:+d} {issue.dimension.value})"
                )
                lines.append(f"     -> {issue.message}")

        lines.append("")
        lines.append("=" * 50)

        return "\n".join(lines)
