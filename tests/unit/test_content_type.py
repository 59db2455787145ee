"""Tests for content type detection."""

import pytest

from readiness.scoring.content_type import (
    ContentType,
    ContentTypeResult,
    detect_content_type,
)


class TestUrlDetection:
    """Tests for URL-based detection."""

    def test_documentation_from_url(self) -> None:
        result = detect_content_type("https://example.com/docs/getting-started", [])

        assert result.content_type == ContentType.DOCUMENTATION
        assert result.confidence == 0.7
        assert result.signals == ["URL matches /docs?/"]

    @pytest.mark.parametrize(
        "url,expected",
        [
            ("https://example.com/", ContentType.HOMEPAGE),
            ("https://example.com", ContentType.HOMEPAGE),
            ("https://example.com/index.html", ContentType.HOMEPAGE),
            ("https://example.com/about-us", ContentType.ABOUT),
            ("https://example.com/blog/", ContentType.BLOG_INDEX),
            ("https://example.com/blog/ai-search", ContentType.BLOG_POST),
            ("https://example.com/products/widget", ContentType.PRODUCT),
            ("https://example.com/pricing", ContentType.PRICING),
            ("https://example.com/FAQ", ContentType.FAQ),
            ("https://example.com/privacy-policy", ContentType.LEGAL),
            ("https://example.com/planet", ContentType.UNKNOWN),
        ],
    )
    def test_url_patterns(self, url: str, expected: ContentType) -> None:
        assert detect_content_type(url).content_type == expected

    def test_no_signals_is_unknown(self) -> None:
        result = detect_content_type("https://example.com/page", [])

        assert result.content_type == ContentType.UNKNOWN
        assert result.confidence == 0
        assert result.signals == []


class TestSchemaDetection:
    """Tests for schema.org type signals."""

    def test_blog_post_with_schema(self) -> None:
        result = detect_content_type("https://example.com/blog/ai", ["BlogPosting"])

        assert result.content_type == ContentType.BLOG_POST
        assert result.confidence > 0.4

    def test_agreement_raises_confidence(self) -> None:
        url_only = detect_content_type("https://example.com/blog/ai", [])
        both = detect_content_type("https://example.com/blog/ai", ["BlogPosting"])

        assert both.confidence > url_only.confidence
        assert both.signals == ["URL matches /blog/[^/]+", "Schema type BlogPosting"]

    def test_homepage_ignores_site_level_schema(self) -> None:
        result = detect_content_type("https://example.com/", ["WebSite", "Organization"])

        assert result.content_type == ContentType.HOMEPAGE
        assert result.confidence == 0.9

    def test_schema_fills_unknown_url(self) -> None:
        result = detect_content_type("https://example.com/p/123", ["Organization", "Product"])

        assert result.content_type == ContentType.PRODUCT
        assert result.confidence == 0.6
        assert result.signals == ["Schema type Product"]

    def test_url_wins_on_disagreement(self) -> None:
        """A conflicting schema type neither changes the type nor the confidence."""
        result = detect_content_type("https://example.com/pricing", ["FAQPage"])

        assert result.content_type == ContentType.PRICING
        assert result.confidence == 0.7

    def test_unmapped_schema_types_ignored(self) -> None:
        result = detect_content_type("https://example.com/page", ["WebPage", "BreadcrumbList"])
        assert result.content_type == ContentType.UNKNOWN


def test_to_dict() -> None:
    result = ContentTypeResult(
        content_type=ContentType.FAQ,
        confidence=0.8999999,
        signals=["URL matches /faq"],
    )

    assert result.to_dict() == {
        "content_type": "faq",
        "confidence": 0.9,
        "signals": ["URL matches /faq"],
    }
