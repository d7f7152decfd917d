from fastapi import APIRouter, Depends, Request
from sqlmodel import Session, select
from typing import List, Optional
import logging

from mvcmovie.binding import FormView, bind_form, rejected_form, submitted_id, validate_form
from mvcmovie.database.db import get_session
from mvcmovie.database.repository import UpdateOutcome, add_record, delete_record, update_record
from mvcmovie.models import Actor, ActorForm, ACTOR_BIND_FIELDS
from mvcmovie.routers.common import conflict_error, get_or_404, id_or_404, not_found, redirect_to_index

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Actors", tags=["actors"])


@router.get("", response_model=List[Actor], summary="Get a list of all actors")
@router.get("/Index", response_model=List[Actor], include_in_schema=False)
async def index(session: Session = Depends(get_session)):
    actors = session.exec(select(Actor)).all()
    logger.info(f"A list of actors was requested, {len(actors)} entries were found")
    return actors


@router.get("/Details", response_model=Actor, include_in_schema=False)
@router.get("/Details/{actor_id}",
            response_model=Actor,
            summary="Get an actor by ID",
            responses={404: {"description": "The actor was not found"}})
async def details(actor_id: Optional[str] = None, session: Session = Depends(get_session)):
    return get_or_404(session, Actor, actor_id)


@router.get("/Create", response_model=FormView, summary="Empty actor form")
async def create_form():
    return FormView.empty(ACTOR_BIND_FIELDS)


@router.post("/Create", response_model=FormView, summary="Add a new actor")
async def create(request: Request, session: Session = Depends(get_session)):
    data = bind_form(await request.form(), ACTOR_BIND_FIELDS)
    data.pop("id", None)

    form, errors = validate_form(ActorForm, data)
    if errors:
        logger.info(f"Rejected actor form with {len(errors)} error(s)")
        return rejected_form(data, ACTOR_BIND_FIELDS, errors)

    actor = add_record(session, Actor.model_validate(form.model_dump(exclude={"id"})))
    logger.info(f"A new actor has been added: ID {actor.id}, {actor.first_name} {actor.last_name}")
    return redirect_to_index(router.prefix)


@router.get("/Edit", response_model=FormView, include_in_schema=False)
@router.get("/Edit/{actor_id}",
            response_model=FormView,
            summary="Actor form filled from the stored record",
            responses={404: {"description": "The actor was not found"}})
async def edit_form(actor_id: Optional[str] = None, session: Session = Depends(get_session)):
    actor = get_or_404(session, Actor, actor_id)
    return FormView.for_record(actor, ACTOR_BIND_FIELDS)


@router.post("/Edit/{actor_id}",
             response_model=FormView,
             summary="Update actor data",
             responses={404: {"description": "The actor was not found"}})
async def edit(actor_id: str, request: Request, session: Session = Depends(get_session)):
    record_id = id_or_404(actor_id, "actor")
    data = bind_form(await request.form(), ACTOR_BIND_FIELDS)
    if submitted_id(data) != record_id:
        logger.warning(f"Actor ID {record_id} does not match the submitted ID {data.get('id')}")
        raise not_found("actor")

    form, errors = validate_form(ActorForm, data)
    if errors:
        logger.info(f"Rejected edit of actor ID {record_id} with {len(errors)} error(s)")
        return rejected_form(data, ACTOR_BIND_FIELDS, errors)

    outcome = update_record(session, Actor, record_id, form.model_dump(exclude={"id"}))
    if outcome is UpdateOutcome.CONFLICT_GONE:
        logger.warning(f"Attempt to update a non-existent actor ID {record_id}")
        raise not_found("actor")
    if outcome is UpdateOutcome.CONFLICT_STILL_PRESENT:
        return conflict_error("actor", record_id)

    logger.info(f"Updated actor ID {record_id}")
    return redirect_to_index(router.prefix)


@router.get("/Delete", response_model=Actor, include_in_schema=False)
@router.get("/Delete/{actor_id}",
            response_model=Actor,
            summary="Actor to confirm for deletion",
            responses={404: {"description": "The actor was not found"}})
async def delete_confirm(actor_id: Optional[str] = None, session: Session = Depends(get_session)):
    return get_or_404(session, Actor, actor_id)


@router.post("/Delete/{actor_id}", summary="Delete an actor")
async def delete(actor_id: str, session: Session = Depends(get_session)):
    record_id = id_or_404(actor_id, "actor")
    if delete_record(session, Actor, record_id):
        logger.info(f"Deleted actor ID {record_id}")
    else:
        logger.warning(f"Actor ID {record_id} was already gone at delete time")
    return redirect_to_index(router.prefix)
