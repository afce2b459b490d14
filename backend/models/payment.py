"""Payment model definitions."""

from sqlalchemy import Column, DateTime, Float, Integer, String

from backend.database import Base
from backend.models.document import DocumentMixin


class Payment(DocumentMixin, Base):
    """Represents a completed class payment. Rows are never updated or deleted."""
    __tablename__ = "payments"
    __document_fields__ = {
        "email": "email",
        "class_item_id": "classItemId",
        "cart_item": "cartItem",
        "amount": "amount",
        "transaction_id": "transactionId",
        "created_at": "createdAt",
    }

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String, index=True)
    class_item_id = Column(Integer, index=True)
    cart_item = Column(Integer)
    amount = Column(Float)
    transaction_id = Column(String)
    created_at = Column(DateTime)
