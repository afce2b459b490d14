import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_email
from backend.core.results import insert_document, update_result
from backend.database import get_db
from backend.models.school_class import APPROVED_STATUS, PENDING_STATUS, SchoolClass

router = APIRouter(tags=['classes'])

logger = logging.getLogger(__name__)


class CreateClassRequest(BaseModel):
    name: str
    image: str | None = None
    instructor_name: str | None = Field(default=None, alias='instructorName')
    instructor_email: str = Field(alias='instructorEmail')
    price: float = Field(default=0, ge=0)
    quantity: int = 0
    total_enrolled: int = Field(default=0, alias='totalEnrolled')

    class Config:
        extra = 'allow'
        populate_by_name = True


class UpdateClassRequest(BaseModel):
    id: int
    status: str
    feedback: str | None = None


@router.get('/class-list')
def list_classes(_: str = Depends(get_current_email), db: Session = Depends(get_db)):
    classes = db.query(SchoolClass).order_by(SchoolClass.id.asc()).all()
    return [school_class.to_document() for school_class in classes]


@router.get('/all-classes')
def list_approved_classes(db: Session = Depends(get_db)):
    classes = db.query(SchoolClass).filter(
        SchoolClass.status == APPROVED_STATUS,
    ).order_by(SchoolClass.created_at.desc()).all()
    return [school_class.to_document() for school_class in classes]


@router.get('/instructor-classes/{email}')
def list_instructor_classes(
    email: str,
    _: str = Depends(get_current_email),
    db: Session = Depends(get_db),
):
    classes = db.query(SchoolClass).filter(
        SchoolClass.instructor_email == email,
    ).order_by(SchoolClass.created_at.desc()).all()
    return [school_class.to_document() for school_class in classes]


@router.post('/add-class')
def add_class(data: CreateClassRequest, db: Session = Depends(get_db)):
    document = data.model_dump(by_alias=True, exclude_none=True)
    document['status'] = PENDING_STATUS
    document['createdAt'] = datetime.now()

    return insert_document(db, SchoolClass.from_document(document))


@router.patch('/class-update')
def update_class(data: UpdateClassRequest, db: Session = Depends(get_db)):
    school_class = db.get(SchoolClass, data.id)
    if school_class is None:
        return update_result(0, 0)

    modified = (school_class.status, school_class.feedback) != (data.status, data.feedback)
    school_class.status = data.status
    school_class.feedback = data.feedback
    db.commit()

    if modified:
        logger.info('Class %s status set to %s', school_class.id, data.status)
    return update_result(1, int(modified))
