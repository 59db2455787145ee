"""Letter grades for overall and platform scores.

Coarse five-band grades only; finer display bands (A+, B-, ...) belong to
the presentation layer.
"""

GRADE_THRESHOLDS: tuple[tuple[int, str], ...] = (
    (90, "A"),
    (80, "B"),
    (70, "C"),
    (60, "D"),
)


def letter_grade(score: float) -> str:
    """Map a 0-100 score to A/B/C/D/F."""
    for minimum, grade in GRADE_THRESHOLDS:
        if score >= minimum:
            return grade
    return "F"


def clamp_score(score: float) -> int:
    """Clamp to the [0, 100] integer range."""
    return int(max(0, min(100, score)))
