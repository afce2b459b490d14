from fastapi import APIRouter, Depends
from sqlalchemy.orm import Session

from backend.database import get_db
from backend.models.school_class import APPROVED_STATUS, SchoolClass
from backend.models.user import Role, User

router = APIRouter(tags=['reports'])

TOP_LIMIT = 6


def rank_top_classes(classes: list[SchoolClass], limit: int = TOP_LIMIT) -> list[SchoolClass]:
    approved = [school_class for school_class in classes if school_class.status == APPROVED_STATUS]
    # sorted() is stable, so ties keep the order the rows were read in.
    return sorted(approved, key=lambda school_class: school_class.total_enrolled or 0, reverse=True)[:limit]


def rank_top_instructors(
    instructors: list[User],
    classes: list[SchoolClass],
    limit: int = TOP_LIMIT,
) -> list[dict]:
    classes_by_email: dict[str, list[SchoolClass]] = {}
    for school_class in classes:
        classes_by_email.setdefault(school_class.instructor_email, []).append(school_class)

    summaries: list[dict] = []
    for instructor in instructors:
        instructor_classes = classes_by_email.get(instructor.email, [])
        summary = instructor.to_document()
        summary['totalEnrolled'] = sum(school_class.total_enrolled or 0 for school_class in instructor_classes)
        summary['classCount'] = len(instructor_classes)
        summary['classNames'] = [school_class.name for school_class in instructor_classes]
        summaries.append(summary)

    return sorted(summaries, key=lambda summary: summary['totalEnrolled'], reverse=True)[:limit]


@router.get('/topclasses')
def list_top_classes(db: Session = Depends(get_db)):
    classes = db.query(SchoolClass).order_by(SchoolClass.id.asc()).all()
    return [school_class.to_document() for school_class in rank_top_classes(classes)]


@router.get('/topInstructor')
def list_top_instructors(db: Session = Depends(get_db)):
    instructors = db.query(User).filter(User.role == Role.INSTRUCTOR.value).order_by(User.id.asc()).all()
    classes = db.query(SchoolClass).order_by(SchoolClass.id.asc()).all()
    return rank_top_instructors(instructors, classes)
