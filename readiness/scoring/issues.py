"""Issue registry.

Every rule an evaluator can trigger is listed here with its owning
dimension, severity, default deduction and report text. Evaluators refer to
codes through the ``IssueCode`` enum, so a misspelled code fails on import.
"""

from collections.abc import Iterable
from dataclasses import dataclass
from enum import Enum
from typing import Any

from readiness.exceptions import UnknownIssueCodeError
from readiness.scoring.models import SEVERITY_RANK, DimensionId, Issue, Severity


class IssueCode(str, Enum):
    """Stable identifiers for triggered rules."""

    # llms.txt
    MISSING_LLMS_TXT = "MISSING_LLMS_TXT"
    LLMS_TXT_QUALITY = "LLMS_TXT_QUALITY"
    LLMS_TXT_INCOMPLETE = "LLMS_TXT_INCOMPLETE"

    # Robots / crawlability
    AI_CRAWLER_BLOCKED = "AI_CRAWLER_BLOCKED"
    NOINDEX_SET = "NOINDEX_SET"

    # Sitemap
    MISSING_SITEMAP = "MISSING_SITEMAP"
    SITEMAP_INVALID_FORMAT = "SITEMAP_INVALID_FORMAT"
    SITEMAP_STALE_URLS = "SITEMAP_STALE_URLS"
    SITEMAP_LOW_COVERAGE = "SITEMAP_LOW_COVERAGE"

    # Schema markup
    NO_STRUCTURED_DATA = "NO_STRUCTURED_DATA"
    INCOMPLETE_SCHEMA = "INCOMPLETE_SCHEMA"
    INVALID_SCHEMA = "INVALID_SCHEMA"
    MISSING_ENTITY_MARKUP = "MISSING_ENTITY_MARKUP"

    # Meta tags
    MISSING_TITLE = "MISSING_TITLE"
    MISSING_META_DESC = "MISSING_META_DESC"
    MISSING_OG_TAGS = "MISSING_OG_TAGS"
    MISSING_CANONICAL = "MISSING_CANONICAL"

    # Bot access
    HTTP_STATUS = "HTTP_STATUS"
    SLOW_RESPONSE = "SLOW_RESPONSE"
    REDIRECT_CHAIN = "REDIRECT_CHAIN"
    CORS_MIXED_CONTENT = "CORS_MIXED_CONTENT"
    CORS_UNSAFE_LINKS = "CORS_UNSAFE_LINKS"
    LH_PERF_LOW = "LH_PERF_LOW"
    LH_SEO_LOW = "LH_SEO_LOW"
    LH_A11Y_LOW = "LH_A11Y_LOW"
    LH_BP_LOW = "LH_BP_LOW"
    LARGE_PAGE_SIZE = "LARGE_PAGE_SIZE"

    # Content citeability
    MISSING_H1 = "MISSING_H1"
    MULTIPLE_H1 = "MULTIPLE_H1"
    HEADING_HIERARCHY = "HEADING_HIERARCHY"
    MISSING_ALT_TEXT = "MISSING_ALT_TEXT"
    THIN_CONTENT = "THIN_CONTENT"
    CONTENT_DEPTH = "CONTENT_DEPTH"
    CONTENT_CLARITY = "CONTENT_CLARITY"
    CONTENT_AUTHORITY = "CONTENT_AUTHORITY"
    DUPLICATE_CONTENT = "DUPLICATE_CONTENT"
    NO_INTERNAL_LINKS = "NO_INTERNAL_LINKS"
    EXCESSIVE_LINKS = "EXCESSIVE_LINKS"
    MISSING_FAQ_STRUCTURE = "MISSING_FAQ_STRUCTURE"
    POOR_READABILITY = "POOR_READABILITY"
    LOW_TEXT_HTML_RATIO = "LOW_TEXT_HTML_RATIO"
    AI_ASSISTANT_SPEAK = "AI_ASSISTANT_SPEAK"
    UNIFORM_SENTENCE_LENGTH = "UNIFORM_SENTENCE_LENGTH"
    LOW_EEAT_SCORE = "LOW_EEAT_SCORE"
    MISSING_AUTHORITATIVE_CITATIONS = "MISSING_AUTHORITATIVE_CITATIONS"
    CITATION_WORTHINESS = "CITATION_WORTHINESS"
    NO_DIRECT_ANSWERS = "NO_DIRECT_ANSWERS"
    NO_SUMMARY_SECTION = "NO_SUMMARY_SECTION"
    POOR_QUESTION_COVERAGE = "POOR_QUESTION_COVERAGE"
    PDF_ONLY_CONTENT = "PDF_ONLY_CONTENT"
    STALE_CONTENT = "STALE_CONTENT"


@dataclass(frozen=True)
class IssueDefinition:
    """Registry entry for an issue code."""

    code: IssueCode
    dimension: DimensionId
    severity: Severity
    score_impact: int  # Default deduction, negative
    message: str
    recommendation: str

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "code": self.code.value,
            "dimension": self.dimension.value,
            "severity": self.severity.value,
            "score_impact": self.score_impact,
            "message": self.message,
            "recommendation": self.recommendation,
        }


def _define(
    code: IssueCode,
    dimension: DimensionId,
    severity: Severity,
    score_impact: int,
    message: str,
    recommendation: str,
) -> tuple[IssueCode, IssueDefinition]:
    return code, IssueDefinition(
        code=code,
        dimension=dimension,
        severity=severity,
        score_impact=score_impact,
        message=message,
        recommendation=recommendation,
    )


_C = Severity.CRITICAL
_W = Severity.WARNING
_I = Severity.INFO

ISSUE_DEFINITIONS: dict[IssueCode, IssueDefinition] = dict(
    [
        # ------------------------------------------------------------------
        # llms_txt
        # ------------------------------------------------------------------
        _define(
            IssueCode.MISSING_LLMS_TXT,
            DimensionId.LLMS_TXT,
            _C,
            -20,
            "No llms.txt file found at the site root",
            "Publish /llms.txt with a title, a short description and links to "
            "your most important pages so AI assistants can find them.",
        ),
        _define(
            IssueCode.LLMS_TXT_QUALITY,
            DimensionId.LLMS_TXT,
            _W,
            -10,
            "llms.txt is missing several key structural elements",
            "Add a '# Title' line, a '> description' line, '## Section' "
            "headings and markdown links to key pages.",
        ),
        _define(
            IssueCode.LLMS_TXT_INCOMPLETE,
            DimensionId.LLMS_TXT,
            _I,
            -5,
            "llms.txt is missing one structural element",
            "Complete llms.txt so it has a title, description, sections and links.",
        ),
        # ------------------------------------------------------------------
        # robots_crawlability
        # ------------------------------------------------------------------
        _define(
            IssueCode.AI_CRAWLER_BLOCKED,
            DimensionId.ROBOTS_CRAWLABILITY,
            _C,
            -25,
            "robots.txt blocks one or more AI crawlers",
            "Allow GPTBot, ClaudeBot, PerplexityBot and Google-Extended in "
            "robots.txt unless you intend to opt out of AI answers.",
        ),
        _define(
            IssueCode.NOINDEX_SET,
            DimensionId.ROBOTS_CRAWLABILITY,
            _C,
            -20,
            "Page carries a noindex robots directive",
            "Remove 'noindex' from the robots meta tag if this page should "
            "appear in search and AI results.",
        ),
        # ------------------------------------------------------------------
        # sitemap
        # ------------------------------------------------------------------
        _define(
            IssueCode.MISSING_SITEMAP,
            DimensionId.SITEMAP,
            _I,
            -5,
            "No XML sitemap found",
            "Publish sitemap.xml and reference it from robots.txt.",
        ),
        _define(
            IssueCode.SITEMAP_INVALID_FORMAT,
            DimensionId.SITEMAP,
            _W,
            -8,
            "Sitemap exists but could not be parsed as a valid sitemap",
            "Validate sitemap.xml against the sitemaps.org schema.",
        ),
        _define(
            IssueCode.SITEMAP_STALE_URLS,
            DimensionId.SITEMAP,
            _I,
            -3,
            "Sitemap lists URLs that no longer resolve or have stale lastmod dates",
            "Remove dead URLs and keep <lastmod> values current.",
        ),
        _define(
            IssueCode.SITEMAP_LOW_COVERAGE,
            DimensionId.SITEMAP,
            _W,
            -5,
            "Sitemap covers less than half of the pages discovered by crawling",
            "Add every indexable page to the sitemap.",
        ),
        # ------------------------------------------------------------------
        # schema_markup
        # ------------------------------------------------------------------
        _define(
            IssueCode.NO_STRUCTURED_DATA,
            DimensionId.SCHEMA_MARKUP,
            _W,
            -15,
            "No JSON-LD structured data found",
            "Add schema.org JSON-LD describing the page (Article, Product, "
            "Organization, FAQPage, ...).",
        ),
        _define(
            IssueCode.INCOMPLETE_SCHEMA,
            DimensionId.SCHEMA_MARKUP,
            _W,
            -8,
            "Structured data is missing required properties",
            "Fill in the required properties for each schema.org type you use.",
        ),
        _define(
            IssueCode.INVALID_SCHEMA,
            DimensionId.SCHEMA_MARKUP,
            _W,
            -8,
            "Structured data item has no @type",
            "Give every JSON-LD object an explicit @type.",
        ),
        _define(
            IssueCode.MISSING_ENTITY_MARKUP,
            DimensionId.SCHEMA_MARKUP,
            _I,
            -5,
            "Structured data does not describe any entity",
            "Mark up the Person, Organization, Product, Place or Event the "
            "page is about.",
        ),
        # ------------------------------------------------------------------
        # meta_tags
        # ------------------------------------------------------------------
        _define(
            IssueCode.MISSING_TITLE,
            DimensionId.META_TAGS,
            _C,
            -15,
            "Title tag is missing or not between 30 and 60 characters",
            "Write a descriptive 30-60 character <title>.",
        ),
        _define(
            IssueCode.MISSING_META_DESC,
            DimensionId.META_TAGS,
            _W,
            -10,
            "Meta description is missing or not between 120 and 160 characters",
            "Write a 120-160 character meta description that summarizes the page.",
        ),
        _define(
            IssueCode.MISSING_OG_TAGS,
            DimensionId.META_TAGS,
            _I,
            -5,
            "Open Graph tags are incomplete",
            "Add og:title, og:description and og:image.",
        ),
        _define(
            IssueCode.MISSING_CANONICAL,
            DimensionId.META_TAGS,
            _W,
            -8,
            "No canonical URL declared",
            'Add <link rel="canonical"> pointing at the preferred URL.',
        ),
        # ------------------------------------------------------------------
        # bot_access
        # ------------------------------------------------------------------
        _define(
            IssueCode.HTTP_STATUS,
            DimensionId.BOT_ACCESS,
            _C,
            -25,
            "Page returned an HTTP error status",
            "Fix or redirect the URL so it returns 200.",
        ),
        _define(
            IssueCode.SLOW_RESPONSE,
            DimensionId.BOT_ACCESS,
            _W,
            -10,
            "Server took longer than 2 seconds to respond",
            "Reduce server response time; AI crawlers time out on slow pages.",
        ),
        _define(
            IssueCode.REDIRECT_CHAIN,
            DimensionId.BOT_ACCESS,
            _W,
            -8,
            "Page is reached through a chain of 3 or more redirects",
            "Link directly to the final URL and collapse the redirect chain.",
        ),
        _define(
            IssueCode.CORS_MIXED_CONTENT,
            DimensionId.BOT_ACCESS,
            _W,
            -5,
            "HTTPS page loads resources over HTTP",
            "Serve every resource over HTTPS.",
        ),
        _define(
            IssueCode.CORS_UNSAFE_LINKS,
            DimensionId.BOT_ACCESS,
            _I,
            -3,
            'Links with target="_blank" lack rel="noopener"',
            'Add rel="noopener noreferrer" to links that open a new tab.',
        ),
        _define(
            IssueCode.LH_PERF_LOW,
            DimensionId.BOT_ACCESS,
            _W,
            -20,
            "Lighthouse performance score is low",
            "Reduce render-blocking resources, compress images and defer "
            "non-critical JavaScript.",
        ),
        _define(
            IssueCode.LH_SEO_LOW,
            DimensionId.BOT_ACCESS,
            _W,
            -15,
            "Lighthouse SEO score is below 0.8",
            "Resolve the failing Lighthouse SEO audits.",
        ),
        _define(
            IssueCode.LH_A11Y_LOW,
            DimensionId.BOT_ACCESS,
            _I,
            -5,
            "Lighthouse accessibility score is below 0.7",
            "Resolve the failing Lighthouse accessibility audits.",
        ),
        _define(
            IssueCode.LH_BP_LOW,
            DimensionId.BOT_ACCESS,
            _I,
            -5,
            "Lighthouse best-practices score is below 0.8",
            "Resolve the failing Lighthouse best-practices audits.",
        ),
        _define(
            IssueCode.LARGE_PAGE_SIZE,
            DimensionId.BOT_ACCESS,
            _W,
            -10,
            "Page weighs more than 3 MB",
            "Trim page weight; crawlers may truncate or skip large documents.",
        ),
        # ------------------------------------------------------------------
        # content_citeability
        # ------------------------------------------------------------------
        _define(
            IssueCode.MISSING_H1,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -8,
            "Page has no H1 heading",
            "Add a single H1 that states the page topic.",
        ),
        _define(
            IssueCode.MULTIPLE_H1,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -5,
            "Page has more than one H1 heading",
            "Keep one H1 and demote the others to H2.",
        ),
        _define(
            IssueCode.HEADING_HIERARCHY,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -3,
            "Heading levels are skipped",
            "Nest headings sequentially (H1 > H2 > H3).",
        ),
        _define(
            IssueCode.MISSING_ALT_TEXT,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -3,
            "Images are missing alt text",
            "Describe every meaningful image with alt text.",
        ),
        _define(
            IssueCode.THIN_CONTENT,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -15,
            "Page has too little text to be cited",
            "Expand the page to at least 500 words of substantive content.",
        ),
        _define(
            IssueCode.CONTENT_DEPTH,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -20,
            "Content lacks depth and comprehensiveness",
            "Cover the topic completely, including sub-questions readers ask.",
        ),
        _define(
            IssueCode.CONTENT_CLARITY,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -20,
            "Content is hard to follow",
            "Use short paragraphs, plain language and clear topic sentences.",
        ),
        _define(
            IssueCode.CONTENT_AUTHORITY,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -20,
            "Content shows weak authority signals",
            "Cite sources, name the author and show credentials.",
        ),
        _define(
            IssueCode.DUPLICATE_CONTENT,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -15,
            "Page content duplicates another URL on the site",
            "Consolidate duplicates or point them at one canonical URL.",
        ),
        _define(
            IssueCode.NO_INTERNAL_LINKS,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -8,
            "Page has fewer than 2 internal links",
            "Link to related pages on your site.",
        ),
        _define(
            IssueCode.EXCESSIVE_LINKS,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -3,
            "External links outnumber internal links more than 3 to 1",
            "Balance outbound links with links to your own content.",
        ),
        _define(
            IssueCode.MISSING_FAQ_STRUCTURE,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -5,
            "Question headings are not marked up as an FAQ",
            "Add FAQPage schema for question-and-answer sections.",
        ),
        _define(
            IssueCode.POOR_READABILITY,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -10,
            "Text is difficult to read (low Flesch reading ease)",
            "Shorten sentences and prefer common words.",
        ),
        _define(
            IssueCode.LOW_TEXT_HTML_RATIO,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -8,
            "Visible text is a small fraction of the HTML",
            "Reduce markup bloat or add more visible content.",
        ),
        _define(
            IssueCode.AI_ASSISTANT_SPEAK,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -10,
            "Text leans on generic AI-assistant phrasing",
            "Rewrite boilerplate transitions in a specific, human voice.",
        ),
        _define(
            IssueCode.UNIFORM_SENTENCE_LENGTH,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -5,
            "Sentence lengths are unusually uniform",
            "Vary sentence length to read more naturally.",
        ),
        _define(
            IssueCode.LOW_EEAT_SCORE,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -15,
            "No first-hand experience signals in the main headings",
            "Show first-hand experience: testing notes, case studies, author voice.",
        ),
        _define(
            IssueCode.MISSING_AUTHORITATIVE_CITATIONS,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -5,
            "No links to authoritative .gov, .edu or .org sources",
            "Back key claims with links to authoritative sources.",
        ),
        _define(
            IssueCode.CITATION_WORTHINESS,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -20,
            "Content offers few quotable facts or original insight",
            "Add statistics, definitions and original findings worth citing.",
        ),
        _define(
            IssueCode.NO_DIRECT_ANSWERS,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -10,
            "Question headings are not followed by structured direct answers",
            "Answer each question in the first sentence below its heading and "
            "mark the section up as an FAQ.",
        ),
        _define(
            IssueCode.NO_SUMMARY_SECTION,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -5,
            "Long page has no summary or key-takeaways section",
            "Add a 'Key Takeaways' or 'Summary' section.",
        ),
        _define(
            IssueCode.POOR_QUESTION_COVERAGE,
            DimensionId.CONTENT_CITEABILITY,
            _W,
            -10,
            "Content structure covers few of the questions users ask",
            "Organize content around the questions your audience asks.",
        ),
        _define(
            IssueCode.PDF_ONLY_CONTENT,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -5,
            "Main content appears to live in linked PDFs",
            "Publish the PDF content as HTML on the page.",
        ),
        _define(
            IssueCode.STALE_CONTENT,
            DimensionId.CONTENT_CITEABILITY,
            _I,
            -5,
            "Content has not been updated recently",
            "Review and refresh the page; expose the updated date.",
        ),
    ]
)


def lookup(code: IssueCode | str) -> IssueDefinition:
    """Get the registry entry for an issue code."""
    try:
        return ISSUE_DEFINITIONS[IssueCode(code)]
    except (ValueError, KeyError) as e:
        raise UnknownIssueCodeError(str(code)) from e


def build_issue(
    code: IssueCode | str,
    score_impact: int | None = None,
    data: dict[str, Any] | None = None,
) -> Issue:
    """Create an Issue from the registry, optionally overriding the deduction."""
    definition = lookup(code)
    return Issue(
        code=definition.code.value,
        severity=definition.severity,
        dimension=definition.dimension,
        score_impact=definition.score_impact if score_impact is None else score_impact,
        message=definition.message,
        recommendation=definition.recommendation,
        data=data or {},
    )


def sort_issues(issues: Iterable[Issue]) -> list[Issue]:
    """Stable sort by severity: critical, then warning, then info."""
    return sorted(issues, key=lambda issue: SEVERITY_RANK[issue.severity])


def get_codes_by_dimension(dimension: DimensionId | str) -> list[IssueCode]:
    """Get all issue codes owned by a dimension."""
    dimension = DimensionId(dimension)
    return [
        definition.code
        for definition in ISSUE_DEFINITIONS.values()
        if definition.dimension == dimension
    ]


def get_codes_by_severity(severity: Severity | str) -> list[IssueCode]:
    """Get all issue codes with a severity level."""
    severity = Severity(severity)
    return [
        definition.code
        for definition in ISSUE_DEFINITIONS.values()
        if definition.severity == severity
    ]
