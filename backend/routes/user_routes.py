import logging
from datetime import datetime

from fastapi import APIRouter, Depends
from pydantic import BaseModel, field_validator
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_email, has_role, require_admin
from backend.core.results import insert_result, update_result
from backend.database import get_db
from backend.models.user import Role, User

router = APIRouter(tags=['users'])

logger = logging.getLogger(__name__)

USER_EXISTS_MESSAGE = 'user already exists'


class CreateUserRequest(BaseModel):
    email: str
    name: str | None = None
    photo: str | None = None

    class Config:
        extra = 'allow'

    @field_validator('email')
    @classmethod
    def validate_email(cls, value: str) -> str:
        normalized = value.strip()
        if not normalized:
            raise ValueError('Email is required.')
        return normalized


class SetRoleRequest(BaseModel):
    id: int
    role: Role


@router.get('/users')
def list_users(_: str = Depends(require_admin), db: Session = Depends(get_db)):
    users = db.query(User).order_by(User.id.asc()).all()
    return [user.to_document() for user in users]


@router.get('/all-users')
def list_instructors(db: Session = Depends(get_db)):
    instructors = db.query(User).filter(
        User.role == Role.INSTRUCTOR.value,
    ).order_by(User.created_at.desc()).all()
    return [instructor.to_document() for instructor in instructors]


@router.post('/add-user')
def add_user(data: CreateUserRequest, db: Session = Depends(get_db)):
    existing_user = db.query(User).filter(User.email == data.email).first()
    if existing_user:
        return {'message': USER_EXISTS_MESSAGE}

    document = data.model_dump(exclude_none=True)
    document['role'] = Role.STUDENT.value
    document['createdAt'] = datetime.now()

    user = User.from_document(document)
    db.add(user)
    db.commit()
    db.refresh(user)

    return insert_result(user.id)


@router.patch('/user/roleset')
def set_user_role(data: SetRoleRequest, db: Session = Depends(get_db)):
    user = db.get(User, data.id)
    if user is None:
        return update_result(0, 0)

    modified = user.role != data.role.value
    user.role = data.role.value
    db.commit()

    if modified:
        logger.info('User %s role set to %s', user.id, data.role.value)
    return update_result(1, int(modified))


def _role_probe(role: Role, email: str, current_email: str, db: Session) -> bool:
    # Callers may only ask about themselves.
    if current_email != email:
        return False
    return has_role(db, email, role)


@router.get('/users/admin/{email}')
def is_admin(email: str, current_email: str = Depends(get_current_email), db: Session = Depends(get_db)):
    return {'admin': _role_probe(Role.ADMIN, email, current_email, db)}


@router.get('/users/instructor/{email}')
def is_instructor(email: str, current_email: str = Depends(get_current_email), db: Session = Depends(get_db)):
    return {'instructor': _role_probe(Role.INSTRUCTOR, email, current_email, db)}


@router.get('/users/student/{email}')
def is_student(email: str, current_email: str = Depends(get_current_email), db: Session = Depends(get_db)):
    return {'student': _role_probe(Role.STUDENT, email, current_email, db)}
