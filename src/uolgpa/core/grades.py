from types import MappingProxyType
from typing import Any, Mapping, Optional, Tuple


class UnknownGradeError(ValueError):
    """Raised when a letter grade is not in the UOL grade table."""


# UOL grading policy, in the order grades are offered to the user.
GRADE_POINTS: Mapping[str, float] = MappingProxyType(
    {
        "A": 4.0,
        "A-": 3.75,
        "B+": 3.5,
        "B": 3.0,
        "C+": 2.5,
        "C": 2.0,
        "D+": 1.5,
        "D": 1.0,
        "F": 0.0,
    }
)

ALLOWED_CREDIT_HOURS: Tuple[int, ...] = (1, 2, 3, 4)


def points_for(grade: Any) -> Optional[float]:
    if not isinstance(grade, str):
        return None
    return GRADE_POINTS.get(grade)


def require_points(grade: str) -> float:
    try:
        return GRADE_POINTS[grade]
    except (KeyError, TypeError) as exc:
        raise UnknownGradeError(f"Unsupported letter grade: {grade}") from exc


def allowed_grades() -> Tuple[str, ...]:
    return tuple(GRADE_POINTS)


def allowed_credit_hours() -> Tuple[int, ...]:
    """Credit-hour choices offered by the form; not a validation rule."""
    return ALLOWED_CREDIT_HOURS
