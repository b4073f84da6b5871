"""Storage operations shared by every record type.

All writes go through here so that integrity failures reported by the
database surface as a single ``ConstraintViolation`` error.
"""
import logging
from typing import Any, Dict, List

from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from ..exceptions import ConstraintViolation, RecordNotFound

logger = logging.getLogger(__name__)

#Columns owned by the database and the creation step
PROTECTED_FIELDS = frozenset({"id", "created_at"})


def _commit(db: Session, record) -> None:
    table = record.__tablename__
    try:
        db.commit()
    except IntegrityError as exc:
        db.rollback()
        message = str(exc.orig)
        logger.warning("Constraint violation on %s: %s", table, message)
        raise ConstraintViolation(table, message) from exc
    db.refresh(record)


def save_new(db: Session, record):
    """Insert a record built with ``Model.create`` and return it with its id."""
    db.add(record)
    _commit(db, record)
    logger.info("Created %s id=%s", record.__tablename__, record.id)
    return record


def get_record(db: Session, model, record_id: int):
    record = db.get(model, record_id)
    if record is None:
        raise RecordNotFound(model.__name__, record_id)
    return record


def _filtered(db: Session, model, filters: Dict[str, Any]):
    #column equality filters, None means "no filter"
    query = db.query(model)
    for field, value in filters.items():
        if value is not None:
            query = query.filter(getattr(model, field) == value)
    return query


def list_records(db: Session, model, skip: int = 0, limit: int = 100, **filters) -> List[Any]:
    """One page of records ordered by id, optionally filtered by column equality."""
    return _filtered(db, model, filters).order_by(model.id).offset(skip).limit(limit).all()


def count_records(db: Session, model, **filters) -> int:
    """Total number of records matching the same filters as ``list_records``, ignoring paging."""
    return _filtered(db, model, filters).count()


def update_record(db: Session, record, changes: Dict[str, Any]):
    """Apply field changes; ``id`` and ``created_at`` are never touched."""
    for field, value in changes.items():
        if field in PROTECTED_FIELDS:
            continue
        setattr(record, field, value)
    _commit(db, record)
    logger.info("Updated %s id=%s fields=%s", record.__tablename__, record.id,
                sorted(set(changes) - PROTECTED_FIELDS))
    return record


def delete_record(db: Session, record) -> None:
    table, record_id = record.__tablename__, record.id
    db.delete(record)
    db.commit()
    logger.info("Deleted %s id=%s", table, record_id)
