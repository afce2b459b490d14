"""Payment intents, payment recording and enrollment history."""

import logging
from datetime import datetime

from fastapi import APIRouter, Depends, Query
from pydantic import AliasChoices, BaseModel, Field
from sqlalchemy.orm import Session

from backend.auth.dependencies import get_current_email, require_student
from backend.core.exceptions import NotFoundError
from backend.core.results import delete_result, insert_result, update_result
from backend.database import get_db
from backend.models.payment import Payment
from backend.models.school_class import SchoolClass
from backend.models.selected_class import SelectedClass
from backend.payments import gateway

router = APIRouter(tags=['payments'])

logger = logging.getLogger(__name__)


class PaymentIntentRequest(BaseModel):
    price: float = Field(gt=0)


class CreatePaymentRequest(BaseModel):
    email: str
    class_item_id: int = Field(alias='classItemId')
    cart_item: int = Field(alias='cartItem')
    amount: float = Field(alias='amount', validation_alias=AliasChoices('amount', 'price'))
    transaction_id: str | None = Field(default=None, alias='transactionId')

    class Config:
        extra = 'allow'
        populate_by_name = True


@router.post('/create-payment-intent')
def create_payment_intent(data: PaymentIntentRequest, _: str = Depends(get_current_email)):
    client_secret = gateway.create_payment_intent(data.price)
    return {'clientSecret': client_secret}


@router.post('/payments')
def record_payment(
    data: CreatePaymentRequest,
    _: str = Depends(require_student),
    db: Session = Depends(get_db),
):
    """Record a confirmed payment and enroll the student in the paid class.

    The payment insert, cart removal and seat update are committed together,
    so a failure in any of them leaves the store untouched.
    """
    school_class = db.get(SchoolClass, data.class_item_id)
    if school_class is None:
        raise NotFoundError('Class not found.')

    total_enrolled = (school_class.total_enrolled or 0) + 1
    quantity = (school_class.quantity or 0) - 1

    document = data.model_dump(by_alias=True, exclude_none=True)
    document['createdAt'] = datetime.now()
    payment = Payment.from_document(document)
    db.add(payment)

    deleted_count = db.query(SelectedClass).filter(SelectedClass.id == data.cart_item).delete()

    school_class.total_enrolled = total_enrolled
    school_class.quantity = quantity

    db.commit()
    db.refresh(payment)

    logger.info(
        'Payment %s recorded for class %s by %s (%s seats left)',
        payment.id,
        school_class.id,
        data.email,
        quantity,
    )

    return {
        'result': insert_result(payment.id),
        'deleteResult': delete_result(deleted_count),
        'updateResult': update_result(1, 1),
    }


@router.get('/enrollClasses')
def list_enrolled_classes(
    email: str = Query(...),
    _: str = Depends(require_student),
    db: Session = Depends(get_db),
):
    payments = db.query(Payment).filter(Payment.email == email).order_by(Payment.id.asc()).all()
    return [payment.to_document() for payment in payments]


@router.get('/student/paymentHistory')
def list_payment_history(
    email: str = Query(...),
    _: str = Depends(require_student),
    db: Session = Depends(get_db),
):
    payments = db.query(Payment).filter(Payment.email == email).order_by(Payment.created_at.desc()).all()
    return [payment.to_document() for payment in payments]
