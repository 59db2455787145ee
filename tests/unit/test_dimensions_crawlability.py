"""Tests for the robots/crawlability and sitemap dimensions."""

from readiness.scoring.dimensions.robots_crawlability import score_robots_crawlability
from readiness.scoring.dimensions.sitemap import score_sitemap
from readiness.scoring.models import SitemapAnalysis, Severity
from tests.fixtures.pages import make_extracted, make_page, make_site_context


class TestRobotsCrawlability:
    """Tests for score_robots_crawlability()."""

    def test_clean_page(self) -> None:
        result = score_robots_crawlability(make_page())
        assert result.score == 100
        assert result.issues == []

    def test_blocked_crawler(self) -> None:
        site = make_site_context(ai_crawlers_blocked=["GPTBot", "ClaudeBot"])
        result = score_robots_crawlability(make_page(site_context=site))

        assert result.score == 75
        assert result.issues[0].code == "AI_CRAWLER_BLOCKED"
        assert result.issues[0].data == {"blocked_crawlers": ["GPTBot", "ClaudeBot"]}

    def test_blocked_crawler_and_noindex(self) -> None:
        """One blocked crawler plus noindex: 100 - 25 - 20."""
        page = make_page(
            site_context=make_site_context(ai_crawlers_blocked=["GPTBot"]),
            extracted=make_extracted(has_robots_meta=True, robots_directives=["noindex"]),
        )

        result = score_robots_crawlability(page)

        assert result.score == 55
        assert [i.code for i in result.issues] == ["AI_CRAWLER_BLOCKED", "NOINDEX_SET"]
        assert all(i.severity == Severity.CRITICAL for i in result.issues)

    def test_noindex_is_case_insensitive(self) -> None:
        page = make_page(
            extracted=make_extracted(has_robots_meta=True, robots_directives=[" NOINDEX "])
        )
        assert score_robots_crawlability(page).score == 80

    def test_directives_without_robots_meta_are_ignored(self) -> None:
        page = make_page(
            extracted=make_extracted(has_robots_meta=False, robots_directives=["noindex"])
        )
        assert score_robots_crawlability(page).score == 100

    def test_no_site_context(self) -> None:
        assert score_robots_crawlability(make_page(site_context=None)).score == 100


class TestSitemap:
    """Tests for score_sitemap()."""

    def test_sitemap_present(self) -> None:
        assert score_sitemap(make_page()).score == 100

    def test_missing_sitemap(self) -> None:
        result = score_sitemap(make_page(site_context=make_site_context(has_sitemap=False)))

        assert result.score == 95
        assert [i.code for i in result.issues] == ["MISSING_SITEMAP"]

    def test_invalid_format(self) -> None:
        analysis = SitemapAnalysis(
            is_valid=False, url_count=10, stale_url_count=0, discovered_page_count=10
        )
        site = make_site_context(sitemap_analysis=analysis)

        result = score_sitemap(make_page(site_context=site))

        assert result.score == 92
        assert [i.code for i in result.issues] == ["SITEMAP_INVALID_FORMAT"]

    def test_invalid_format_ignored_without_sitemap(self) -> None:
        analysis = SitemapAnalysis(
            is_valid=False, url_count=0, stale_url_count=0, discovered_page_count=0
        )
        site = make_site_context(has_sitemap=False, sitemap_analysis=analysis)

        result = score_sitemap(make_page(site_context=site))

        assert [i.code for i in result.issues] == ["MISSING_SITEMAP"]

    def test_stale_urls(self) -> None:
        analysis = SitemapAnalysis(
            is_valid=True, url_count=40, stale_url_count=7, discovered_page_count=40
        )
        result = score_sitemap(make_page(site_context=make_site_context(sitemap_analysis=analysis)))

        assert result.score == 97
        assert result.issues[0].data == {"stale_url_count": 7, "total_urls": 40}

    def test_low_coverage(self) -> None:
        analysis = SitemapAnalysis(
            is_valid=True, url_count=10, stale_url_count=0, discovered_page_count=40
        )
        result = score_sitemap(make_page(site_context=make_site_context(sitemap_analysis=analysis)))

        assert result.score == 95
        assert result.issues[0].code == "SITEMAP_LOW_COVERAGE"
        assert result.issues[0].data["coverage"] == 25

    def test_half_coverage_is_enough(self) -> None:
        analysis = SitemapAnalysis(
            is_valid=True, url_count=20, stale_url_count=0, discovered_page_count=40
        )
        result = score_sitemap(make_page(site_context=make_site_context(sitemap_analysis=analysis)))
        assert result.issues == []

    def test_no_discovered_pages_skips_coverage(self) -> None:
        analysis = SitemapAnalysis(
            is_valid=True, url_count=0, stale_url_count=0, discovered_page_count=0
        )
        result = score_sitemap(make_page(site_context=make_site_context(sitemap_analysis=analysis)))
        assert result.score == 100

    def test_no_site_context(self) -> None:
        assert score_sitemap(make_page(site_context=None)).score == 100
