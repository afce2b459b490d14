"""Write acknowledgements returned by insert, update and delete routes."""

import logging

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from backend.core.exceptions import InsertFailedError

logger = logging.getLogger(__name__)


def insert_result(inserted_id: int) -> dict:
    return {'acknowledged': True, 'insertedId': inserted_id}


def update_result(matched_count: int, modified_count: int) -> dict:
    return {'acknowledged': True, 'matchedCount': matched_count, 'modifiedCount': modified_count}


def delete_result(deleted_count: int) -> dict:
    return {'acknowledged': True, 'deletedCount': deleted_count}


def insert_document(db: Session, document) -> dict:
    """Insert a new row, reporting a failed write as :class:`InsertFailedError`."""
    try:
        db.add(document)
        db.commit()
        db.refresh(document)
    except SQLAlchemyError as exc:
        db.rollback()
        logger.exception('Insert into %s failed', document.__tablename__)
        raise InsertFailedError() from exc

    if document.id is None:
        raise InsertFailedError()
    return insert_result(document.id)
