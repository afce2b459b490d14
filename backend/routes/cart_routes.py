from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import AliasChoices, BaseModel, Field
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_email
from backend.core.exceptions import NotFoundError
from backend.core.results import delete_result, insert_document
from backend.database import get_db
from backend.models.selected_class import SelectedClass

router = APIRouter(tags=['cart'])

ALREADY_SELECTED_MESSAGE = 'Already select'


class SelectClassRequest(BaseModel):
    # The client posts the whole class document, so its ``_id`` is the class id.
    class_id: int = Field(alias='classId', validation_alias=AliasChoices('classId', '_id'))
    student_email: str = Field(alias='studentEmail')

    class Config:
        extra = 'allow'
        populate_by_name = True


@router.post('/add-select-class')
def add_selected_class(data: SelectClassRequest, db: Session = Depends(get_db)):
    existing_entry = db.query(SelectedClass).filter(
        SelectedClass.class_id == data.class_id,
        SelectedClass.student_email == data.student_email,
    ).first()
    if existing_entry:
        return {'message': ALREADY_SELECTED_MESSAGE}

    document = data.model_dump(by_alias=True, exclude_none=True)
    document['createdAt'] = datetime.now()

    return insert_document(db, SelectedClass.from_document(document))


@router.get('/all-select-class/{email}')
def list_selected_classes(
    email: str,
    _: str = Depends(get_current_email),
    db: Session = Depends(get_db),
):
    entries = db.query(SelectedClass).filter(
        SelectedClass.student_email == email,
    ).order_by(SelectedClass.created_at.desc()).all()
    return [entry.to_document() for entry in entries]


@router.get('/select-class/{entry_id}')
def get_selected_class(
    entry_id: int,
    _: str = Depends(get_current_email),
    db: Session = Depends(get_db),
):
    entry = db.get(SelectedClass, entry_id)
    if entry is None:
        raise NotFoundError('Selected class not found.')
    return entry.to_document()


@router.delete('/select-class/{entry_id}')
def remove_selected_class(entry_id: int, db: Session = Depends(get_db)):
    deleted_count = db.query(SelectedClass).filter(SelectedClass.id == entry_id).delete()
    db.commit()
    return delete_result(deleted_count)
