"""AI Readiness Engine - page scoring package."""

# Lazy imports to avoid paying for the full scoring stack at import time
# Use explicit imports when needed:
# from readiness.scoring.engine import score_page

__all__ = [
    "score_page",
    "ScoringResult",
    "PageData",
]


from typing import Any


def __getattr__(name: str) -> Any:
    """Lazy import for scoring entry points."""
    if name == "score_page":
        from readiness.scoring.engine import score_page

        return score_page
    elif name in ("ScoringResult", "PageData"):
        from readiness.scoring.models import PageData, ScoringResult

        return locals()[name]
    raise AttributeError(f"module 'readiness' has no attribute '{name}'")
