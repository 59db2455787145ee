"""AI platform readiness projections.

Each platform weighs the four legacy pillars differently, so a page's
readiness can be projected per platform without re-running any rule. The
requirement checklist maps issue codes to how much each platform cares
about them.
"""

from collections.abc import Iterable, Mapping
from dataclasses import dataclass, field
from enum import Enum

from readiness.scoring.dimensions.base import round_half_up
from readiness.scoring.grades import clamp_score, letter_grade
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import Issue, PlatformScore


class Platform(str, Enum):
    CHATGPT = "chatgpt"
    PERPLEXITY = "perplexity"
    CLAUDE = "claude"
    GEMINI = "gemini"
    GROK = "grok"


PLATFORM_NAMES: dict[Platform, str] = {
    Platform.CHATGPT: "ChatGPT (OpenAI)",
    Platform.PERPLEXITY: "Perplexity",
    Platform.CLAUDE: "Claude (Anthropic)",
    Platform.GEMINI: "Gemini (Google)",
    Platform.GROK: "Grok (xAI)",
}

# Weights over the legacy pillars; each row sums to 1.0
PLATFORM_WEIGHTS: dict[Platform, dict[str, float]] = {
    Platform.CHATGPT: {
        "technical": 0.10,
        "content": 0.30,
        "ai_readiness": 0.50,
        "performance": 0.10,
    },
    Platform.PERPLEXITY: {
        "technical": 0.25,
        "content": 0.35,
        "ai_readiness": 0.25,
        "performance": 0.15,
    },
    Platform.CLAUDE: {
        "technical": 0.18,
        "content": 0.40,
        "ai_readiness": 0.30,
        "performance": 0.12,
    },
    Platform.GEMINI: {
        "technical": 0.30,
        "content": 0.25,
        "ai_readiness": 0.30,
        "performance": 0.15,
    },
    Platform.GROK: {
        "technical": 0.15,
        "content": 0.40,
        "ai_readiness": 0.25,
        "performance": 0.20,
    },
}

PLATFORM_TIPS: dict[Platform, list[str]] = {
    Platform.CHATGPT: [
        "Use clear hierarchical heading structure (H1 > H2 > H3)",
        "Create comprehensive, in-depth content (2000+ words optimal)",
        "Include statistics and quotable facts for higher citation odds",
        "Reinforce brand/entity data with schema",
    ],
    Platform.PERPLEXITY: [
        "Expose publish/update dates so recency filters detect freshness",
        "Add current-year statistics and sources",
        "Implement schema markup (Article, FAQ) for trust",
        "Use answer-first formatting for quick extraction",
    ],
    Platform.CLAUDE: [
        "Use strong heading hierarchy with self-contained sections",
        "Maximize factual density with data-backed claims",
        "Link Article > Author > Organization in schema",
        "Break content into focused, scannable sections",
    ],
    Platform.GEMINI: [
        "Implement comprehensive JSON-LD schema (Article, FAQ, HowTo)",
        "Connect Author and Organization schema for E-E-A-T",
        "Use semantic HTML5 structure for sections",
        "Include E-E-A-T signals and cite reputable sources",
    ],
    Platform.GROK: [
        "Reference current events and trending topics",
        "Include quotable statements and statistics",
        "Keep readability between 55-70 Flesch score",
        "Use schema markup to reinforce technical credibility",
    ],
}


def calculate_platform_scores(pillars: Mapping[str, float]) -> dict[str, PlatformScore]:
    """
    Project legacy pillar scores onto every supported platform.

    Args:
        pillars: technical, content, ai_readiness and performance scores (0-100)

    Returns:
        Platform id -> PlatformScore
    """
    results: dict[str, PlatformScore] = {}
    for platform in Platform:
        weights = PLATFORM_WEIGHTS[platform]
        raw = sum(pillars[pillar] * weight for pillar, weight in weights.items())
        score = clamp_score(round_half_up(raw))
        results[platform.value] = PlatformScore(
            platform=platform.value,
            name=PLATFORM_NAMES[platform],
            score=score,
            grade=letter_grade(score),
            tips=list(PLATFORM_TIPS[platform]),
        )
    return results


# ============================================================================
# Requirement checklist
# ============================================================================


class Importance(str, Enum):
    CRITICAL = "critical"
    IMPORTANT = "important"
    RECOMMENDED = "recommended"


@dataclass(frozen=True)
class PlatformCheck:
    """One factor a platform cares about, satisfied when its issue is absent."""

    factor: str
    label: str
    issue_code: IssueCode
    importance: Importance


@dataclass
class PlatformCheckResult:
    check: PlatformCheck
    passed: bool

    def to_dict(self) -> dict:
        return {
            "factor": self.check.factor,
            "label": self.check.label,
            "issue_code": self.check.issue_code.value,
            "importance": self.check.importance.value,
            "passed": self.passed,
        }


@dataclass
class PlatformReadiness:
    """Checklist outcome for one platform."""

    platform: str
    results: list[PlatformCheckResult] = field(default_factory=list)

    @property
    def passed(self) -> int:
        return sum(1 for r in self.results if r.passed)

    @property
    def failed_critical(self) -> list[PlatformCheckResult]:
        return [
            r
            for r in self.results
            if not r.passed and r.check.importance == Importance.CRITICAL
        ]

    def to_dict(self) -> dict:
        return {
            "platform": self.platform,
            "passed": self.passed,
            "total": len(self.results),
            "checks": [r.to_dict() for r in self.results],
        }


def _check(factor: str, label: str, code: IssueCode, importance: Importance) -> PlatformCheck:
    return PlatformCheck(factor=factor, label=label, issue_code=code, importance=importance)


_CRIT = Importance.CRITICAL
_IMP = Importance.IMPORTANT
_REC = Importance.RECOMMENDED

PLATFORM_REQUIREMENTS: dict[Platform, list[PlatformCheck]] = {
    Platform.CHATGPT: [
        _check("ai_crawlers", "GPTBot allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _CRIT),
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _IMP),
        _check("direct_answers", "Direct answers", IssueCode.NO_DIRECT_ANSWERS, _IMP),
        _check("title", "Title tag", IssueCode.MISSING_TITLE, _IMP),
        _check("meta_desc", "Meta description", IssueCode.MISSING_META_DESC, _REC),
        _check("sitemap", "Sitemap", IssueCode.MISSING_SITEMAP, _REC),
        _check("citation", "Citation worthy", IssueCode.CITATION_WORTHINESS, _IMP),
    ],
    Platform.CLAUDE: [
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _CRIT),
        _check("ai_crawlers", "ClaudeBot allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _IMP),
        _check("content_depth", "Content depth", IssueCode.THIN_CONTENT, _CRIT),
        _check("direct_answers", "Direct answers", IssueCode.NO_DIRECT_ANSWERS, _IMP),
        _check("citation", "Citation worthy", IssueCode.CITATION_WORTHINESS, _CRIT),
        _check("summary", "Summary section", IssueCode.NO_SUMMARY_SECTION, _REC),
        _check("faq", "FAQ structure", IssueCode.MISSING_FAQ_STRUCTURE, _REC),
    ],
    Platform.PERPLEXITY: [
        _check("ai_crawlers", "PerplexityBot allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("citation", "Citation worthy", IssueCode.CITATION_WORTHINESS, _CRIT),
        _check("direct_answers", "Direct answers", IssueCode.NO_DIRECT_ANSWERS, _CRIT),
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _IMP),
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _IMP),
        _check("title", "Title tag", IssueCode.MISSING_TITLE, _IMP),
        _check("internal_links", "Internal links", IssueCode.NO_INTERNAL_LINKS, _REC),
        _check("questions", "Question coverage", IssueCode.POOR_QUESTION_COVERAGE, _IMP),
    ],
    Platform.GROK: [
        _check("content_depth", "Content depth", IssueCode.THIN_CONTENT, _CRIT),
        _check("citation", "Citation worthy", IssueCode.CITATION_WORTHINESS, _CRIT),
        _check("direct_answers", "Direct answers", IssueCode.NO_DIRECT_ANSWERS, _IMP),
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _IMP),
        _check("ai_crawlers", "AI crawlers allowed", IssueCode.AI_CRAWLER_BLOCKED, _IMP),
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _REC),
        _check("faq", "FAQ structure", IssueCode.MISSING_FAQ_STRUCTURE, _REC),
        _check("freshness", "Content freshness", IssueCode.STALE_CONTENT, _IMP),
    ],
    Platform.GEMINI: [
        _check("structured_data", "JSON-LD schema", IssueCode.NO_STRUCTURED_DATA, _CRIT),
        _check("ai_crawlers", "Google-Extended allowed", IssueCode.AI_CRAWLER_BLOCKED, _CRIT),
        _check("title", "Title tag", IssueCode.MISSING_TITLE, _IMP),
        _check("meta_desc", "Meta description", IssueCode.MISSING_META_DESC, _IMP),
        _check("sitemap", "Sitemap", IssueCode.MISSING_SITEMAP, _IMP),
        _check("canonical", "Canonical URL", IssueCode.MISSING_CANONICAL, _IMP),
        _check("llms_txt", "llms.txt file", IssueCode.MISSING_LLMS_TXT, _REC),
        _check("entity_markup", "Entity markup", IssueCode.MISSING_ENTITY_MARKUP, _REC),
    ],
}


def check_platform_requirements(issues: Iterable[Issue]) -> dict[str, PlatformReadiness]:
    """Evaluate every platform's checklist against a page's issues."""
    fired = {issue.code for issue in issues}
    return {
        platform.value: PlatformReadiness(
            platform=platform.value,
            results=[
                PlatformCheckResult(check=check, passed=check.issue_code.value not in fired)
                for check in PLATFORM_REQUIREMENTS[platform]
            ],
        )
        for platform in Platform
    }
