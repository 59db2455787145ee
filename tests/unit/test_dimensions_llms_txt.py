"""Tests for the llms.txt dimension."""

from readiness.scoring.dimensions.llms_txt import llms_txt_elements, score_llms_txt
from tests.fixtures.pages import make_page, make_site_context


def _codes(result) -> list[str]:
    return [i.code for i in result.issues]


class TestLlmsTxtElements:
    """Tests for llms_txt_elements()."""

    def test_complete_file(self) -> None:
        content = "# Site\n> About us\n## Docs\n- [API](https://example.com/api)"
        assert llms_txt_elements(content) == {
            "title": True,
            "description": True,
            "sections": True,
            "links": True,
        }

    def test_empty_file(self) -> None:
        assert not any(llms_txt_elements("").values())

    def test_section_heading_is_not_a_title(self) -> None:
        """A ## line does not count as the # title."""
        elements = llms_txt_elements("## Docs\n[a](b)")
        assert elements["title"] is False
        assert elements["sections"] is True


class TestScoreLlmsTxt:
    """Tests for score_llms_txt()."""

    def test_complete_llms_txt_scores_100(self) -> None:
        result = score_llms_txt(make_page())
        assert result.score == 100
        assert result.issues == []

    def test_no_site_context_scores_100(self) -> None:
        """Unknown crawl-wide facts never deduct."""
        result = score_llms_txt(make_page(site_context=None))
        assert result.score == 100
        assert result.issues == []

    def test_missing_llms_txt_short_circuits(self) -> None:
        """Only one issue when the file is absent, even with bad content."""
        site = make_site_context(has_llms_txt=False, llms_txt_content="")
        result = score_llms_txt(make_page(site_context=site))

        assert result.score == 80
        assert _codes(result) == ["MISSING_LLMS_TXT"]

    def test_content_not_fetched_skips_quality_checks(self) -> None:
        site = make_site_context(llms_txt_content=None)
        result = score_llms_txt(make_page(site_context=site))
        assert result.score == 100

    def test_one_missing_element_is_incomplete(self) -> None:
        site = make_site_context(llms_txt_content="# Site\n> About\n## Docs\nno links here")
        result = score_llms_txt(make_page(site_context=site))

        assert result.score == 95
        assert _codes(result) == ["LLMS_TXT_INCOMPLETE"]
        assert result.issues[0].data == {"missing_elements": ["links"]}

    def test_several_missing_elements_is_low_quality(self) -> None:
        site = make_site_context(llms_txt_content="# Site\nplain text")
        result = score_llms_txt(make_page(site_context=site))

        assert result.score == 90
        assert _codes(result) == ["LLMS_TXT_QUALITY"]
        assert result.issues[0].data["missing_elements"] == ["description", "links", "sections"]

    def test_empty_content_is_low_quality(self) -> None:
        """An empty file is present but has none of the elements."""
        site = make_site_context(llms_txt_content="")
        result = score_llms_txt(make_page(site_context=site))

        assert _codes(result) == ["LLMS_TXT_QUALITY"]
        assert len(result.issues[0].data["missing_elements"]) == 4
