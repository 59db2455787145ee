"""Content citeability dimension.

The largest rule set: heading structure, content depth, readability,
linking, first-hand experience signals and, when an LLM judgment is
available, the judged quality sub-scores. Missing optional signals
(readability metrics, LLM scores, site context) never deduct.
"""

import re
from urllib.parse import urlparse

from readiness.scoring.dimensions.base import (
    DimensionResult,
    ScoreState,
    deduct,
    round_half_up,
)
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import ExtractedData, PageData
from readiness.scoring.thresholds import THRESHOLDS

QUESTION_START = re.compile(r"^(what|why|how|when|where|who|which)\b", re.IGNORECASE)

EXPERIENCE_MARKERS = re.compile(
    r"\b(i|i've|my|we|we've|our|experience|tested|testing|hands-on|"
    r"review|case study|lessons learned)\b",
    re.IGNORECASE,
)

SUMMARY_MARKERS = re.compile(
    r"\b(summary|takeaways?|tl;?dr|conclusion|key points|recap|bottom line)\b",
    re.IGNORECASE,
)

# Transition phrases over-represented in assistant-generated text
AI_ASSISTANT_PHRASES = frozenset(
    {
        "in conclusion",
        "moreover",
        "furthermore",
        "essentially",
        "delve",
        "delve into",
        "it's important to note",
        "it is important to note",
        "in today's digital landscape",
        "in summary",
        "ultimately",
        "notably",
        "tapestry",
    }
)

AUTHORITATIVE_TLDS = frozenset({"gov", "edu", "org"})

# (code, LLM score attribute)
LLM_SHORTFALL_RULES = (
    (IssueCode.CONTENT_DEPTH, "comprehensiveness"),
    (IssueCode.CONTENT_CLARITY, "clarity"),
    (IssueCode.CONTENT_AUTHORITY, "authority"),
    (IssueCode.CITATION_WORTHINESS, "citation_worthiness"),
)


def is_question_heading(heading: str) -> bool:
    text = heading.strip()
    return text.endswith("?") or bool(QUESTION_START.match(text))


def is_authoritative_link(url: str) -> bool:
    host = (urlparse(url).hostname or "").lower()
    labels = host.split(".")
    tld = labels[-1]
    if tld in AUTHORITATIVE_TLDS:
        return True
    # Country second-level domains such as gov.uk / edu.au need a registrable label in front
    return (
        len(labels) >= 3
        and labels[-2] in AUTHORITATIVE_TLDS
        and len(tld) == 2
        and tld.isalpha()
    )


def _all_headings(extracted: ExtractedData) -> list[str]:
    return [h for level in range(1, 7) for h in extracted.headings(level)]


def _first_skipped_level(extracted: ExtractedData) -> tuple[int, int] | None:
    present = [level for level in range(1, 7) if extracted.headings(level)]
    for previous, current in zip(present, present[1:]):
        if current - previous > 1:
            return previous, current
    return None


def _llm_shortfall(score: float) -> int:
    return round_half_up((100 - score) * THRESHOLDS.llm_shortfall_factor)


def score_content_citeability(page: PageData) -> DimensionResult:
    state = ScoreState()
    extracted = page.extracted
    site = page.site_context
    word_count = page.word_count
    t = THRESHOLDS

    # === Heading structure ===
    h1_count = len(extracted.h1)
    if h1_count == 0:
        deduct(state, IssueCode.MISSING_H1)
    elif h1_count > 1:
        deduct(state, IssueCode.MULTIPLE_H1, data={"h1_count": h1_count})

    skipped = _first_skipped_level(extracted)
    if skipped:
        deduct(
            state,
            IssueCode.HEADING_HIERARCHY,
            data={"skipped_from": f"H{skipped[0]}", "skipped_to": f"H{skipped[1]}"},
        )

    if extracted.images_without_alt > 0:
        deduct(
            state,
            IssueCode.MISSING_ALT_TEXT,
            impact=-min(t.alt_text_cap, t.alt_text_per_image * extracted.images_without_alt),
            data={"images_without_alt": extracted.images_without_alt},
        )

    # === Content depth ===
    if word_count < t.thin_content_words:
        deduct(state, IssueCode.THIN_CONTENT, data={"word_count": word_count})
    elif word_count < t.short_content_words:
        deduct(
            state,
            IssueCode.THIN_CONTENT,
            impact=t.short_content_impact,
            data={"word_count": word_count},
        )

    llm = page.llm_scores
    if llm is not None:
        for code, attribute in LLM_SHORTFALL_RULES:
            llm_score = getattr(llm, attribute)
            shortfall = _llm_shortfall(llm_score)
            if shortfall > 0:
                deduct(state, code, impact=-shortfall, data={"llm_score": llm_score})

        if llm.structure < t.llm_structure_min:
            deduct(
                state,
                IssueCode.POOR_QUESTION_COVERAGE,
                data={"llm_score": llm.structure},
            )

    if site and page.content_hash:
        owner = site.content_hashes.get(page.content_hash)
        if owner and owner != page.url:
            deduct(state, IssueCode.DUPLICATE_CONTENT, data={"duplicate_of": owner})

    # === Linking ===
    internal_count = len(extracted.internal_links)
    external_count = len(extracted.external_links)
    if internal_count < t.min_internal_links:
        deduct(state, IssueCode.NO_INTERNAL_LINKS, data={"internal_links": internal_count})

    if external_count > internal_count * t.external_link_ratio_max:
        deduct(
            state,
            IssueCode.EXCESSIVE_LINKS,
            data={"internal_links": internal_count, "external_links": external_count},
        )

    # === Answer structure ===
    headings = _all_headings(extracted)
    question_headings = [h for h in headings if is_question_heading(h)]
    has_faq_schema = "FAQPage" in extracted.schema_types
    if question_headings and not has_faq_schema:
        deduct(
            state,
            IssueCode.MISSING_FAQ_STRUCTURE,
            data={"question_headings": len(question_headings)},
        )
        if word_count >= t.direct_answer_min_words:
            deduct(state, IssueCode.NO_DIRECT_ANSWERS)

    if word_count >= t.summary_min_words and not any(
        SUMMARY_MARKERS.search(h) for h in headings
    ):
        deduct(state, IssueCode.NO_SUMMARY_SECTION)

    # === Readability ===
    if extracted.flesch_score is not None:
        readability = {
            "flesch_score": extracted.flesch_score,
            "classification": extracted.flesch_classification,
        }
        if extracted.flesch_score < t.flesch_difficult:
            deduct(state, IssueCode.POOR_READABILITY, data=readability)
        elif extracted.flesch_score < t.flesch_fairly_difficult:
            deduct(
                state,
                IssueCode.POOR_READABILITY,
                impact=t.flesch_fairly_difficult_impact,
                data=readability,
            )

    if extracted.text_html_ratio is not None and extracted.text_html_ratio < t.text_html_ratio_min:
        deduct(
            state,
            IssueCode.LOW_TEXT_HTML_RATIO,
            data={"text_html_ratio": extracted.text_html_ratio},
        )

    assistant_phrases = sorted(
        {w.strip().lower() for w in extracted.top_transition_words} & AI_ASSISTANT_PHRASES
    )
    if len(assistant_phrases) >= t.ai_assistant_phrase_min:
        deduct(state, IssueCode.AI_ASSISTANT_SPEAK, data={"phrases": assistant_phrases})

    if (
        extracted.sentence_length_variance is not None
        and extracted.sentence_length_variance < t.sentence_variance_min
        and word_count >= t.sentence_variance_min_words
    ):
        deduct(
            state,
            IssueCode.UNIFORM_SENTENCE_LENGTH,
            data={"sentence_length_variance": extracted.sentence_length_variance},
        )

    # === Trust ===
    if word_count >= t.eeat_min_words and not any(
        EXPERIENCE_MARKERS.search(h) for h in extracted.h1 + extracted.h2
    ):
        deduct(state, IssueCode.LOW_EEAT_SCORE)

    if word_count > t.citation_min_words and not any(
        is_authoritative_link(url) for url in extracted.external_links
    ):
        deduct(state, IssueCode.MISSING_AUTHORITATIVE_CITATIONS)

    if extracted.pdf_links and word_count < t.pdf_only_max_words:
        deduct(state, IssueCode.PDF_ONLY_CONTENT, data={"pdf_links": len(extracted.pdf_links)})

    if site and site.stale_content:
        deduct(state, IssueCode.STALE_CONTENT)

    return state.result()
