from enum import Enum
from typing import Any, Dict, Optional, Type
import logging

from sqlalchemy.orm.exc import StaleDataError
from sqlmodel import SQLModel, Session, select

logger = logging.getLogger(__name__)


class UpdateOutcome(str, Enum):
    OK = "ok"
    CONFLICT_GONE = "conflict_gone"
    CONFLICT_STILL_PRESENT = "conflict_still_present"


def get_by_id(session: Session, model: Type[SQLModel], record_id: int) -> Optional[SQLModel]:
    # MultipleResultsFound if the key is not unique
    return session.exec(select(model).where(model.id == record_id)).one_or_none()


def record_exists(session: Session, model: Type[SQLModel], record_id: int) -> bool:
    return session.exec(select(model.id).where(model.id == record_id)).first() is not None


def add_record(session: Session, record: SQLModel) -> SQLModel:
    session.add(record)
    session.commit()
    session.refresh(record)
    return record


def update_record(
        session: Session,
        model: Type[SQLModel],
        record_id: int,
        values: Dict[str, Any]
) -> UpdateOutcome:
    record = session.get(model, record_id)
    if record is None:
        return UpdateOutcome.CONFLICT_GONE

    for field, value in values.items():
        setattr(record, field, value)

    try:
        session.add(record)
        session.commit()
    except StaleDataError as e:
        session.rollback()
        logger.warning(f"Stale update of {model.__name__} ID {record_id}: {e}")
        if record_exists(session, model, record_id):
            return UpdateOutcome.CONFLICT_STILL_PRESENT
        return UpdateOutcome.CONFLICT_GONE

    return UpdateOutcome.OK


def delete_record(session: Session, model: Type[SQLModel], record_id: int) -> bool:
    """Delete by primary key. Returns False when there was nothing to delete."""
    record = session.get(model, record_id)
    if record is None:
        return False

    session.delete(record)
    session.commit()
    return True
