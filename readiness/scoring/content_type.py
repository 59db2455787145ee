"""Content type detection from a page URL and its schema.org types.

Labels a page (blog post, documentation, product, ...) so reports can show
which kind of content was scored. Nothing in the score depends on it.
"""

import re
from collections.abc import Iterable
from dataclasses import dataclass, field
from enum import Enum
from urllib.parse import urlparse


class ContentType(str, Enum):
    """Kinds of pages distinguished in reports."""

    HOMEPAGE = "homepage"
    ABOUT = "about"
    BLOG_POST = "blog_post"
    BLOG_INDEX = "blog_index"
    PRODUCT = "product"
    SERVICE = "service"
    PRICING = "pricing"
    CONTACT = "contact"
    FAQ = "faq"
    DOCUMENTATION = "documentation"
    LEGAL = "legal"
    UNKNOWN = "unknown"


@dataclass
class ContentTypeResult:
    """Detected content type and what pointed to it."""

    content_type: ContentType
    confidence: float  # 0-1
    signals: list[str] = field(default_factory=list)

    def to_dict(self) -> dict:
        return {
            "content_type": self.content_type.value,
            "confidence": round(self.confidence, 2),
            "signals": self.signals,
        }


HOMEPAGE_PATHS = ("", "/", "/index.html", "/index.php")

# Checked in order; the first type with a matching pattern wins
URL_PATTERNS: dict[ContentType, list[str]] = {
    ContentType.ABOUT: [r"/about", r"/company", r"/team", r"/who-we-are"],
    ContentType.BLOG_INDEX: [r"/blog/?$", r"/posts/?$", r"/articles/?$", r"/news/?$"],
    ContentType.BLOG_POST: [r"/blog/[^/]+", r"/posts?/[^/]+", r"/articles?/[^/]+", r"/news/[^/]+"],
    ContentType.PRODUCT: [r"/products?/", r"/solutions?/", r"/features?/"],
    ContentType.SERVICE: [r"/services?/"],
    ContentType.PRICING: [r"/pricing", r"/plans?\b"],
    ContentType.CONTACT: [r"/contact", r"/support", r"/help"],
    ContentType.FAQ: [r"/faq", r"/frequently-asked", r"/questions"],
    ContentType.DOCUMENTATION: [r"/docs?/", r"/documentation", r"/guide", r"/tutorial"],
    ContentType.LEGAL: [r"/privacy", r"/terms", r"/legal", r"/cookie"],
}

SCHEMA_TYPE_MAP: dict[str, ContentType] = {
    "BlogPosting": ContentType.BLOG_POST,
    "Article": ContentType.BLOG_POST,
    "NewsArticle": ContentType.BLOG_POST,
    "Blog": ContentType.BLOG_INDEX,
    "TechArticle": ContentType.DOCUMENTATION,
    "HowTo": ContentType.DOCUMENTATION,
    "FAQPage": ContentType.FAQ,
    "Product": ContentType.PRODUCT,
    "Service": ContentType.SERVICE,
    "AboutPage": ContentType.ABOUT,
    "ContactPage": ContentType.CONTACT,
}

HOMEPAGE_CONFIDENCE = 0.9
URL_CONFIDENCE = 0.7
SCHEMA_CONFIDENCE = 0.6
AGREEMENT_BOOST = 0.2
MAX_CONFIDENCE = 0.95
MAX_SIGNALS = 5


def _from_url(path: str) -> tuple[ContentType, str | None]:
    for content_type, patterns in URL_PATTERNS.items():
        for pattern in patterns:
            if re.search(pattern, path, re.IGNORECASE):
                return content_type, pattern
    return ContentType.UNKNOWN, None


def _from_schema(schema_types: Iterable[str]) -> tuple[ContentType, str | None]:
    for schema_type in schema_types:
        content_type = SCHEMA_TYPE_MAP.get(schema_type)
        if content_type is not None:
            return content_type, schema_type
    return ContentType.UNKNOWN, None


def detect_content_type(url: str, schema_types: Iterable[str] = ()) -> ContentTypeResult:
    """
    Detect the content type of a page.

    The URL decides first. Schema types fill in when the URL says nothing,
    and raise confidence when they agree with it.

    Args:
        url: Page URL
        schema_types: schema.org @type values found on the page

    Returns:
        ContentTypeResult; UNKNOWN with confidence 0 when nothing matches
    """
    path = urlparse(url).path.lower()
    signals: list[str] = []

    if path in HOMEPAGE_PATHS:
        content_type = ContentType.HOMEPAGE
        confidence = HOMEPAGE_CONFIDENCE
        signals.append("Root URL path")
    else:
        content_type, pattern = _from_url(path)
        confidence = URL_CONFIDENCE if pattern else 0.0
        if pattern:
            signals.append(f"URL matches {pattern}")

    schema_type_found, schema_type = _from_schema(schema_types)
    if schema_type is not None:
        if content_type == ContentType.UNKNOWN:
            content_type = schema_type_found
            confidence = SCHEMA_CONFIDENCE
            signals.append(f"Schema type {schema_type}")
        elif schema_type_found == content_type:
            confidence = min(MAX_CONFIDENCE, confidence + AGREEMENT_BOOST)
            signals.append(f"Schema type {schema_type}")

    return ContentTypeResult(
        content_type=content_type,
        confidence=confidence,
        signals=signals[:MAX_SIGNALS],
    )
