import logging
import math
import numbers
from dataclasses import dataclass
from decimal import Decimal
from typing import Any, Iterable, Optional

from uolgpa.core.grades import points_for


logger = logging.getLogger(__name__)

DEFAULT_CREDIT_HOURS = 3
DEFAULT_GRADE = "A"


@dataclass(frozen=True)
class Course:
    credit_hours: Optional[float]
    grade: Optional[str]
    name: str = ""


@dataclass(frozen=True)
class TermSummary:
    gpa: Optional[float]
    credit_hours: Optional[float]
    name: str = ""


@dataclass(frozen=True)
class GpaResult:
    gpa: float
    total_credit_hours: float

    @property
    def value(self) -> float:
        return self.gpa


@dataclass(frozen=True)
class CgpaResult:
    cgpa: Optional[float]
    total_credit_hours: float

    @property
    def value(self) -> Optional[float]:
        return self.cgpa


def default_course() -> Course:
    return Course(credit_hours=DEFAULT_CREDIT_HOURS, grade=DEFAULT_GRADE)


def default_term(position: int = 1) -> TermSummary:
    return TermSummary(gpa=None, credit_hours=None, name=f"Semester {position}")


def round_to_two(value: float) -> float:
    """
    Round to two decimals, halves away from zero.
    The builtin round() rounds halves to even, so round_to_two(0.125) == 0.13
    where round(0.125, 2) == 0.12.
    """
    scaled = abs(value) * 100
    if not math.isfinite(scaled):
        return value
    whole = math.floor(scaled)
    if scaled - whole >= 0.5:
        whole += 1
    return math.copysign(whole / 100, value)


def _finite(value: Any) -> Optional[float]:
    if isinstance(value, bool) or not isinstance(value, (numbers.Real, Decimal)):
        return None
    try:
        number = float(value)
    except (OverflowError, ValueError):
        return None
    if not math.isfinite(number):
        return None
    return number


def calculate_gpa(courses: Optional[Iterable[Course]]) -> GpaResult:
    """
    GPA = Σ(credit_hours * grade_points) / Σ(credit_hours)
    Courses with non-positive or non-finite credit hours, or a grade outside
    the table, are left out of both sums.
    """
    weighted_sum = 0.0
    total_credit_hours = 0.0

    for course in courses or ():
        credit_hours = _finite(getattr(course, "credit_hours", None))
        grade_points = points_for(getattr(course, "grade", None))
        if credit_hours is None or credit_hours <= 0 or grade_points is None:
            logger.debug("Skipping course %r", course)
            continue
        weighted_sum += credit_hours * grade_points
        total_credit_hours += credit_hours

    if total_credit_hours <= 0 or not math.isfinite(total_credit_hours):
        return GpaResult(gpa=0.0, total_credit_hours=0.0)

    raw_gpa = weighted_sum / total_credit_hours
    gpa = round_to_two(raw_gpa) if math.isfinite(raw_gpa) else 0.0
    return GpaResult(gpa=gpa, total_credit_hours=total_credit_hours)


def calculate_cgpa(terms: Optional[Iterable[TermSummary]]) -> CgpaResult:
    """
    CGPA = Σ(term_gpa * term_credit_hours) / Σ(term_credit_hours)
    Weighted by credit hours, not a plain mean of term GPAs. Returns a cgpa of
    None when no term has a GPA in [0, 4] and positive credit hours.
    """
    weighted_sum = 0.0
    total_credit_hours = 0.0
    counted = 0

    for term in terms or ():
        gpa = _finite(getattr(term, "gpa", None))
        credit_hours = _finite(getattr(term, "credit_hours", None))
        if gpa is None or not 0 <= gpa <= 4 or credit_hours is None or credit_hours <= 0:
            logger.debug("Skipping term %r", term)
            continue
        weighted_sum += gpa * credit_hours
        total_credit_hours += credit_hours
        counted += 1

    if counted == 0 or total_credit_hours <= 0 or not math.isfinite(total_credit_hours):
        return CgpaResult(cgpa=None, total_credit_hours=0.0)

    raw_cgpa = weighted_sum / total_credit_hours
    cgpa = round_to_two(raw_cgpa) if math.isfinite(raw_cgpa) else 0.0
    return CgpaResult(cgpa=cgpa, total_credit_hours=total_credit_hours)
