import logging
from dataclasses import asdict
from typing import Dict, List, Optional

from fastapi import FastAPI, HTTPException, status
from fastapi.middleware.cors import CORSMiddleware
from pydantic import BaseModel, Field

from uolgpa.config.settings import settings
from uolgpa.core.gpa import (
    Course,
    TermSummary,
    calculate_cgpa,
    calculate_gpa,
    default_course,
    default_term,
)
from uolgpa.core.grades import (
    GRADE_POINTS,
    UnknownGradeError,
    allowed_credit_hours,
    require_points,
)


logging.basicConfig(
    level=settings.log_level,
    format="%(asctime)s - %(name)s - %(levelname)s - %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.api_title, version="1.0.0")

app.add_middleware(
    CORSMiddleware,
    allow_origins=list(settings.cors_allowed_origins),
    allow_origin_regex=settings.cors_allow_origin_regex,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


class CoursePayload(BaseModel):
    name: Optional[str] = None
    credit_hours: Optional[float] = None
    grade: Optional[str] = None


class TermPayload(BaseModel):
    name: Optional[str] = None
    gpa: Optional[float] = None
    credit_hours: Optional[float] = None


class GpaPayload(BaseModel):
    courses: List[CoursePayload] = Field(default_factory=list)


class CgpaPayload(BaseModel):
    terms: List[TermPayload] = Field(default_factory=list)


@app.get("/health")
def health() -> Dict[str, str]:
    return {"status": "ok"}


@app.get("/grades")
def list_grades() -> List[Dict]:
    return [{"grade": grade, "points": points} for grade, points in GRADE_POINTS.items()]


@app.get("/grades/{grade}")
def get_grade(grade: str) -> Dict:
    try:
        return {"grade": grade, "points": require_points(grade)}
    except UnknownGradeError as exc:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail=str(exc)) from exc


@app.get("/credit-hours")
def list_credit_hours() -> List[int]:
    return list(allowed_credit_hours())


@app.get("/defaults")
def get_defaults() -> Dict:
    return {"course": asdict(default_course()), "term": asdict(default_term())}


@app.post("/gpa")
def post_gpa(payload: GpaPayload) -> Dict:
    courses = [
        Course(credit_hours=c.credit_hours, grade=c.grade, name=c.name or "")
        for c in payload.courses
    ]
    result = calculate_gpa(courses)
    logger.info("GPA over %d course(s): %s", len(courses), result.gpa)
    return {"gpa": result.gpa, "total_credit_hours": result.total_credit_hours}


@app.post("/cgpa")
def post_cgpa(payload: CgpaPayload) -> Dict:
    terms = [
        TermSummary(gpa=t.gpa, credit_hours=t.credit_hours, name=t.name or "")
        for t in payload.terms
    ]
    result = calculate_cgpa(terms)
    logger.info("CGPA over %d term(s): %s", len(terms), result.cgpa)
    return {"cgpa": result.cgpa, "total_credit_hours": result.total_credit_hours}
