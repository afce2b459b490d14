"""Class listing model definitions."""

from sqlalchemy import Column, DateTime, Float, Integer, String

from backend.database import Base
from backend.models.document import DocumentMixin

PENDING_STATUS = "pending"
APPROVED_STATUS = "approved"


class SchoolClass(DocumentMixin, Base):
    """Represents a class offered by an instructor."""
    __tablename__ = "classes"
    __document_fields__ = {
        "name": "name",
        "image": "image",
        "instructor_name": "instructorName",
        "instructor_email": "instructorEmail",
        "price": "price",
        "quantity": "quantity",
        "total_enrolled": "totalEnrolled",
        "status": "status",
        "feedback": "feedback",
        "created_at": "createdAt",
    }

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String)
    image = Column(String)
    instructor_name = Column(String)
    instructor_email = Column(String, index=True)
    price = Column(Float)
    quantity = Column(Integer)  # remaining seats
    total_enrolled = Column(Integer, default=0)
    status = Column(String, default=PENDING_STATUS)
    feedback = Column(String)
    created_at = Column(DateTime)
