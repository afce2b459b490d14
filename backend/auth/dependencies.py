from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from backend.auth import jwt_handler
from backend.core.exceptions import ForbiddenError, UnauthorizedError
from backend.database import get_db
from backend.models.user import Role, User

security = HTTPBearer(auto_error=False)


def get_current_email(
    credentials: HTTPAuthorizationCredentials | None = Depends(security),
) -> str:
    if credentials is None:
        raise UnauthorizedError()

    try:
        payload = jwt_handler.decode_access_token(credentials.credentials)
    except Exception as exc:
        raise UnauthorizedError() from exc

    email = payload.get("email")
    if not email:
        raise UnauthorizedError()
    return email


def has_role(db: Session, email: str, role: Role) -> bool:
    user = db.query(User).filter(User.email == email).first()
    return user is not None and user.role == role.value


def require_role(role: Role):
    """Build a dependency that only lets users whose stored role is ``role`` through."""

    def guard(
        email: str = Depends(get_current_email),
        db: Session = Depends(get_db),
    ) -> str:
        if not has_role(db, email, role):
            raise ForbiddenError()
        return email

    return guard


require_admin = require_role(Role.ADMIN)
require_student = require_role(Role.STUDENT)
