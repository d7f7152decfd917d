from fastapi import HTTPException, status
from fastapi.responses import JSONResponse, RedirectResponse
from sqlmodel import SQLModel, Session
from typing import Optional, Type
import logging

from mvcmovie.binding import parse_id
from mvcmovie.database.repository import get_by_id

logger = logging.getLogger(__name__)


def not_found(label: str) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"The {label} was not found"
    )


def id_or_404(raw_id: Optional[str], label: str) -> int:
    record_id = parse_id(raw_id)
    if record_id is None:
        logger.warning(f"A {label} was requested without a usable ID: {raw_id!r}")
        raise not_found(label)
    return record_id


def get_or_404(session: Session, model: Type[SQLModel], raw_id: Optional[str]) -> SQLModel:
    label = model.__name__.lower()
    record_id = id_or_404(raw_id, label)

    record = get_by_id(session, model, record_id)
    if record is None:
        logger.warning(f"A non-existent {label} ID was requested {record_id}")
        raise not_found(label)
    return record


def redirect_to_index(prefix: str) -> RedirectResponse:
    return RedirectResponse(url=prefix, status_code=status.HTTP_303_SEE_OTHER)


def conflict_error(label: str, record_id: int) -> JSONResponse:
    logger.error(f"Conflicting concurrent update of {label} ID {record_id}, giving up")
    return JSONResponse(
        content={"detail": f"The {label} was changed by someone else"},
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR
    )
