"""Tests for the page scoring engine."""

import random

import pytest
from structlog.testing import capture_logs

from readiness.exceptions import InvalidWeightsError
from readiness.scoring.dimensions import DIMENSION_EVALUATORS
from readiness.scoring.dimensions.meta_tags import score_meta_tags
from readiness.scoring.engine import (
    ScoringEngine,
    dimensions_from_issues,
    legacy_scores,
    score_page,
)
from readiness.scoring.issues import IssueCode, build_issue
from readiness.scoring.models import (
    DIMENSION_IDS,
    DimensionScores,
    LighthouseScores,
    PageState,
    SEVERITY_RANK,
)
from readiness.scoring.weights import DEFAULT_DIMENSION_WEIGHTS
from tests.fixtures.generators import random_page, random_weights
from tests.fixtures.pages import make_extracted, make_page, make_site_context

SEEDS = list(range(40))

EQUAL_WEIGHTS = {dim.value: 1.0 for dim in DIMENSION_IDS}


def _scores(**overrides: int) -> DimensionScores:
    values = {dim.value: 100 for dim in DIMENSION_IDS}
    values.update(overrides)
    return DimensionScores(**values)


class TestScoredPath:
    """Tests for pages that load successfully."""

    def test_perfect_page(self) -> None:
        result = score_page(make_page())

        assert result.state == PageState.SCORED
        assert result.overall_score == 100
        assert result.letter_grade == "A"
        assert result.issues == []
        assert result.technical_score == 100
        assert set(result.platform_scores) == {
            "chatgpt",
            "perplexity",
            "claude",
            "gemini",
            "grok",
        }

    def test_weighted_overall(self) -> None:
        """Missing llms.txt costs 20 points on a 0.10 weight dimension."""
        page = make_page(site_context=make_site_context(has_llms_txt=False))

        result = score_page(page)

        assert result.dimension_scores.llms_txt == 80
        assert result.overall_score == 98

    def test_dimension_scores_collected(self) -> None:
        page = make_page(title=None, extracted=make_extracted(og_tags=None))

        result = score_page(page)

        assert result.dimension_scores.meta_tags == 80
        assert result.dimension_scores.content_citeability == 100

    def test_issues_sorted_by_severity(self) -> None:
        page = make_page(
            title=None,
            extracted=make_extracted(og_tags=None, has_robots_meta=True, robots_directives=["noindex"]),
            site_context=make_site_context(has_sitemap=False, response_time_ms=5000),
        )

        result = score_page(page)

        ranks = [SEVERITY_RANK[i.severity] for i in result.issues]
        assert ranks == sorted(ranks)
        assert result.issues[0].code == "NOINDEX_SET"

    def test_equal_severity_keeps_evaluator_order(self) -> None:
        """Warnings from meta_tags precede warnings from bot_access."""
        page = make_page(
            meta_description=None,
            site_context=make_site_context(response_time_ms=5000),
        )

        codes = [i.code for i in score_page(page).issues]

        assert codes.index("MISSING_META_DESC") < codes.index("SLOW_RESPONSE")

    def test_critical_issues(self) -> None:
        result = score_page(make_page(title=None))
        assert [i.code for i in result.critical_issues] == ["MISSING_TITLE"]

    def test_redirect_status_is_scored(self) -> None:
        """3xx pages are evaluated normally."""
        result = score_page(make_page(status_code=301))
        assert result.state == PageState.SCORED
        assert result.overall_score == 100


class TestFailedPath:
    """Tests for HTTP error pages."""

    def test_server_error_short_circuits(self) -> None:
        """Lighthouse data is ignored entirely on failure."""
        page = make_page(
            status_code=500,
            lighthouse=LighthouseScores(
                performance=0.2, seo=0.3, accessibility=0.3, best_practices=0.3
            ),
        )

        result = score_page(page)

        assert result.state == PageState.FAILED
        assert result.overall_score == 0
        assert result.letter_grade == "F"
        assert result.dimension_scores == DimensionScores.zeros()
        assert result.technical_score == 0
        assert result.content_score == 0
        assert result.ai_readiness_score == 0
        assert result.performance_score == 0
        assert result.platform_scores == {}
        assert len(result.issues) == 1
        assert result.issues[0].code == "HTTP_STATUS"
        assert result.issues[0].data == {"status_code": 500}
        assert result.issues[0].severity.value == "critical"

    def test_not_found(self) -> None:
        result = score_page(make_page(status_code=404))
        assert result.state == PageState.FAILED
        assert result.issues[0].data == {"status_code": 404}

    def test_failed_page_ignores_other_problems(self) -> None:
        page = make_page(
            status_code=403,
            title=None,
            site_context=make_site_context(has_llms_txt=False),
        )
        assert [i.code for i in score_page(page).issues] == ["HTTP_STATUS"]

    def test_evaluators_not_invoked(self, monkeypatch: pytest.MonkeyPatch) -> None:
        import readiness.scoring.engine as engine_module

        def explode(page):
            raise AssertionError("evaluator called on failed page")

        monkeypatch.setattr(
            engine_module,
            "DIMENSION_EVALUATORS",
            {dim: explode for dim in DIMENSION_IDS},
        )

        assert score_page(make_page(status_code=502)).state == PageState.FAILED


class TestWeights:
    """Tests for weight overrides."""

    def test_llms_txt_emphasis(self) -> None:
        page = make_page(site_context=make_site_context(has_llms_txt=False))
        weights = {dim.value: 0.0 for dim in DIMENSION_IDS}
        weights["llms_txt"] = 0.9

        result = score_page(page, weights=weights)

        assert result.overall_score == 80

    def test_override_does_not_change_dimension_scores(self) -> None:
        page = make_page(title=None)

        default = score_page(page)
        weighted = score_page(page, weights={**EQUAL_WEIGHTS, "meta_tags": 5.0})

        assert default.dimension_scores == weighted.dimension_scores
        assert default.overall_score != weighted.overall_score

    def test_scaling_weights_is_invariant(self) -> None:
        page = make_page(title=None, word_count=150)
        weights = {dim.value: i + 1.0 for i, dim in enumerate(DIMENSION_IDS)}
        scaled = {k: v * 10 for k, v in weights.items()}

        assert score_page(page, weights).overall_score == score_page(page, scaled).overall_score

    def test_invalid_weights_fail_before_scoring(self) -> None:
        """Weights are validated even for pages that would fail."""
        with pytest.raises(InvalidWeightsError):
            score_page(make_page(status_code=500), weights={"llms_txt": 1.0})

    def test_all_zero_weights_rejected(self) -> None:
        with pytest.raises(InvalidWeightsError):
            score_page(make_page(), weights={dim.value: 0 for dim in DIMENSION_IDS})

    def test_engine_exposes_resolved_weights(self) -> None:
        assert ScoringEngine().weights == DEFAULT_DIMENSION_WEIGHTS

    def test_settings_weights_apply(self, monkeypatch: pytest.MonkeyPatch) -> None:
        monkeypatch.setenv(
            "SCORING_WEIGHTS",
            '{"llms_txt": 1, "robots_crawlability": 0, "sitemap": 0, "schema_markup": 0, '
            '"meta_tags": 0, "bot_access": 0, "content_citeability": 0}',
        )
        page = make_page(site_context=make_site_context(has_llms_txt=False))

        assert score_page(page).overall_score == 80


class TestLegacyScores:
    """Tests for legacy_scores()."""

    def test_projection(self) -> None:
        scores = _scores(
            meta_tags=85,
            sitemap=95,
            robots_crawlability=55,
            bot_access=90,
            content_citeability=72,
            llms_txt=80,
            schema_markup=85,
        )

        assert legacy_scores(scores) == {
            "technical": 81,  # (85 + 95 + 55 + 90) / 4 = 81.25
            "content": 72,
            "ai_readiness": 73,  # (80 + 55 + 85) / 3 = 73.33
            "performance": 90,
        }

    def test_average_rounds_half_up(self) -> None:
        """(100 + 100 + 100 + 94) / 4 = 98.5."""
        assert legacy_scores(_scores(bot_access=94))["technical"] == 99

    def test_result_matches_projection(self) -> None:
        page = make_page(
            title=None,
            site_context=make_site_context(ai_crawlers_blocked=["GPTBot"], has_llms_txt=False),
        )

        result = score_page(page)
        pillars = legacy_scores(result.dimension_scores)

        assert result.technical_score == pillars["technical"]
        assert result.content_score == pillars["content"]
        assert result.ai_readiness_score == pillars["ai_readiness"]
        assert result.performance_score == pillars["performance"]


class TestDimensionsFromIssues:
    """Tests for dimensions_from_issues()."""

    def test_no_issues(self) -> None:
        assert dimensions_from_issues([]) == _scores()

    def test_applies_recorded_impacts(self) -> None:
        issues = [
            build_issue(IssueCode.MISSING_TITLE),
            build_issue(IssueCode.LH_PERF_LOW, score_impact=-10),
        ]

        scores = dimensions_from_issues(issues)

        assert scores.meta_tags == 85
        assert scores.bot_access == 90
        assert scores.llms_txt == 100

    def test_clamps_at_zero(self) -> None:
        issues = [build_issue(IssueCode.AI_CRAWLER_BLOCKED)] * 5
        assert dimensions_from_issues(issues).robots_crawlability == 0

    def test_matches_engine_output(self) -> None:
        page = make_page(
            title=None,
            word_count=150,
            site_context=make_site_context(has_sitemap=False, stale_content=True),
        )

        result = score_page(page)

        assert dimensions_from_issues(result.issues) == result.dimension_scores


class TestSerialization:
    """Tests for to_dict() and show_the_math()."""

    def test_to_dict(self) -> None:
        d = score_page(make_page(title=None)).to_dict()

        assert d["state"] == "scored"
        assert d["dimension_scores"]["meta_tags"] == 85
        assert d["issues"][0]["code"] == "MISSING_TITLE"
        assert d["issues"][0]["severity"] == "critical"
        assert d["platform_scores"]["chatgpt"]["name"] == "ChatGPT (OpenAI)"

    def test_dimension_results_logged(self) -> None:
        """Each dimension's score and serialized issues reach the debug log."""
        with capture_logs() as logs:
            score_page(make_page(title=None))

        dimension_events = [e for e in logs if e["event"] == "dimension_scored"]
        assert [e["dimension"] for e in dimension_events] == [d.value for d in DIMENSION_EVALUATORS]

        meta = next(e for e in dimension_events if e["dimension"] == "meta_tags")
        assert meta["score"] == 85
        assert meta["issues"][0]["code"] == "MISSING_TITLE"
        assert meta["issues"][0]["severity"] == "critical"

    def test_dimension_result_to_dict(self) -> None:
        result = score_meta_tags(make_page(title=None))

        assert result.to_dict() == {
            "score": result.score,
            "issues": [i.to_dict() for i in result.issues],
        }

    def test_show_the_math(self) -> None:
        text = score_page(make_page(title=None)).show_the_math()

        assert "AI READINESS SCORE" in text
        assert "meta_tags" in text
        assert "MISSING_TITLE" in text
        assert "Claude (Anthropic)" in text

    def test_show_the_math_failed(self) -> None:
        text = score_page(make_page(status_code=500)).show_the_math()

        assert "Grade F" in text
        assert "DIMENSIONS" not in text
        assert "HTTP_STATUS" in text


class TestInvariants:
    """Invariants over seeded random pages."""

    @pytest.mark.parametrize("seed", SEEDS)
    def test_scores_in_range(self, seed: int) -> None:
        result = score_page(random_page(random.Random(seed)))

        assert 0 <= result.overall_score <= 100
        assert isinstance(result.overall_score, int)
        for score in result.dimension_scores.to_dict().values():
            assert isinstance(score, int)
            assert 0 <= score <= 100
        for platform in result.platform_scores.values():
            assert 0 <= platform.score <= 100

    @pytest.mark.parametrize("seed", SEEDS)
    def test_failed_pages(self, seed: int) -> None:
        rng = random.Random(seed)
        page = random_page(rng, status_code=rng.randint(400, 599))

        result = score_page(page)

        assert result.overall_score == 0
        assert result.letter_grade == "F"
        assert result.dimension_scores == DimensionScores.zeros()
        assert result.platform_scores == {}
        assert [i.code for i in result.issues] == ["HTTP_STATUS"]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_issue_order(self, seed: int) -> None:
        result = score_page(random_page(random.Random(seed)))

        ranks = [SEVERITY_RANK[i.severity] for i in result.issues]
        assert ranks == sorted(ranks)

    @pytest.mark.parametrize("seed", SEEDS)
    def test_weight_scaling_invariance(self, seed: int) -> None:
        rng = random.Random(seed)
        page = random_page(rng, status_code=200)
        weights = random_weights(rng)
        scaled = {k: v * 10 for k, v in weights.items()}

        result = score_page(page, weights)

        assert 0 <= result.overall_score <= 100
        assert result.overall_score == score_page(page, scaled).overall_score

    @pytest.mark.parametrize("seed", SEEDS)
    def test_legacy_is_exact_projection(self, seed: int) -> None:
        result = score_page(random_page(random.Random(seed), status_code=200))
        d = result.dimension_scores

        assert result.content_score == d.content_citeability
        assert result.performance_score == d.bot_access
        assert result.technical_score == legacy_scores(d)["technical"]
        assert result.ai_readiness_score == legacy_scores(d)["ai_readiness"]

    @pytest.mark.parametrize("seed", SEEDS)
    def test_dimension_scores_match_issues(self, seed: int) -> None:
        """Every dimension score is 100 minus its deductions, clamped."""
        result = score_page(random_page(random.Random(seed), status_code=200))
        assert dimensions_from_issues(result.issues) == result.dimension_scores
