"""llms.txt dimension.

Checks that the site publishes /llms.txt and that it follows the
llmstxt.org layout: a ``# Title``, a ``> description``, ``## Section``
headings and markdown links.
"""

import re

from readiness.scoring.dimensions.base import DimensionResult, ScoreState, deduct
from readiness.scoring.issues import IssueCode
from readiness.scoring.models import PageData

SECTION_PATTERN = re.compile(r"^##\s+(.+)$", re.MULTILINE)
LINK_PATTERN = re.compile(r"\[([^\]]+)\]\(([^)]+)\)")


def llms_txt_elements(content: str) -> dict[str, bool]:
    """Which structural elements an llms.txt body contains."""
    lines = [line.strip() for line in content.strip().split("\n")]
    return {
        "title": any(line.startswith("# ") for line in lines),
        "description": any(line.startswith("> ") for line in lines),
        "sections": bool(SECTION_PATTERN.search(content)),
        "links": bool(LINK_PATTERN.search(content)),
    }


def score_llms_txt(page: PageData) -> DimensionResult:
    state = ScoreState()
    site = page.site_context

    if site is None:
        return state.result()

    if not site.has_llms_txt:
        deduct(state, IssueCode.MISSING_LLMS_TXT)
        return state.result()

    if site.llms_txt_content is not None:
        elements = llms_txt_elements(site.llms_txt_content)
        missing = sorted(name for name, present in elements.items() if not present)
        if len(missing) >= 2:
            deduct(state, IssueCode.LLMS_TXT_QUALITY, data={"missing_elements": missing})
        elif len(missing) == 1:
            deduct(state, IssueCode.LLMS_TXT_INCOMPLETE, data={"missing_elements": missing})

    return state.result()
