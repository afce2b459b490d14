"""User model definitions."""

from enum import Enum

from sqlalchemy import Column, DateTime, Integer, String

from backend.database import Base
from backend.models.document import DocumentMixin


class Role(str, Enum):
    ADMIN = "admin"
    INSTRUCTOR = "instructor"
    STUDENT = "student"


class User(DocumentMixin, Base):
    """Represents an application user."""
    __tablename__ = "users"
    __document_fields__ = {
        "email": "email",
        "name": "name",
        "photo": "photo",
        "role": "role",
        "created_at": "createdAt",
    }

    id = Column(Integer, primary_key=True, index=True)
    # Not unique: duplicates are only prevented by the add-user route.
    email = Column(String, index=True)
    name = Column(String)
    photo = Column(String)
    role = Column(String, default=Role.STUDENT.value)
    created_at = Column(DateTime)
