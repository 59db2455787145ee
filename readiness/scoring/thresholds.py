"""Numeric thresholds used by the dimension evaluators."""

from dataclasses import dataclass


@dataclass(frozen=True)
class LengthRange:
    min: int
    max: int

    def contains(self, length: int) -> bool:
        return self.min <= length <= self.max


@dataclass(frozen=True)
class LighthouseThresholds:
    perf_low: float = 0.5  # Below: full LH_PERF_LOW deduction
    perf_moderate: float = 0.8  # Below: reduced deduction
    perf_moderate_impact: int = -10
    seo_low: float = 0.8
    a11y_low: float = 0.7
    best_practices_low: float = 0.8


@dataclass(frozen=True)
class Thresholds:
    # meta_tags
    title: LengthRange = LengthRange(30, 60)
    meta_desc: LengthRange = LengthRange(120, 160)

    # bot_access
    http_error_status: int = 400
    slow_response_ms: float = 2000
    redirect_chain_max_hops: int = 3
    large_page_size_bytes: int = 3 * 1024 * 1024
    lighthouse: LighthouseThresholds = LighthouseThresholds()

    # sitemap
    sitemap_coverage_min: float = 0.5

    # content_citeability
    thin_content_words: int = 200
    short_content_words: int = 500
    short_content_impact: int = -8
    alt_text_per_image: int = 3
    alt_text_cap: int = 15
    llm_shortfall_factor: float = 0.2
    llm_structure_min: float = 50
    min_internal_links: int = 2
    external_link_ratio_max: int = 3
    flesch_difficult: float = 50
    flesch_fairly_difficult: float = 60
    flesch_fairly_difficult_impact: int = -5
    text_html_ratio_min: float = 15
    ai_assistant_phrase_min: int = 3
    sentence_variance_min: float = 15
    sentence_variance_min_words: int = 200
    eeat_min_words: int = 500
    citation_min_words: int = 300  # Exclusive
    direct_answer_min_words: int = 200
    summary_min_words: int = 500
    pdf_only_max_words: int = 300  # Exclusive


THRESHOLDS = Thresholds()
