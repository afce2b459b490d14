"""Cart entry model definitions."""

from sqlalchemy import Column, DateTime, Integer, String

from backend.database import Base
from backend.models.document import DocumentMixin


class SelectedClass(DocumentMixin, Base):
    """Represents a class a student has added to their cart but not paid for."""
    __tablename__ = "selected_classes"
    __document_fields__ = {
        "class_id": "classId",
        "student_email": "studentEmail",
        "created_at": "createdAt",
    }

    id = Column(Integer, primary_key=True, index=True)
    class_id = Column(Integer, index=True)
    student_email = Column(String, index=True)
    created_at = Column(DateTime)
