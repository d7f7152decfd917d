from fastapi import APIRouter, Depends, Query, Request
from sqlmodel import Session
from typing import Optional
import logging

from mvcmovie.binding import FormView, bind_form, rejected_form, submitted_id, validate_form
from mvcmovie.database.db import get_session
from mvcmovie.database.repository import UpdateOutcome, add_record, delete_record, update_record
from mvcmovie.models import Movie, MovieForm, MovieGenreView, MOVIE_BIND_FIELDS
from mvcmovie.queries import MovieFilter, genre_choices, search_movies
from mvcmovie.routers.common import conflict_error, get_or_404, id_or_404, not_found, redirect_to_index

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/Movies", tags=["movies"])


@router.get("",
            response_model=MovieGenreView,
            summary="List movies, optionally filtered by title and genre")
@router.get("/Index", response_model=MovieGenreView, include_in_schema=False)
async def index(
        selected_genre: Optional[str] = Query(None, alias="selectedGenre"),
        search_string: Optional[str] = Query(None, alias="searchString"),
        session: Session = Depends(get_session)
):
    movie_filter = MovieFilter(search_string=search_string, selected_genre=selected_genre)
    genres = genre_choices(session)
    movies = search_movies(session, movie_filter)
    logger.info(f"A list of movies was requested, {len(movies)} entries were found")
    return MovieGenreView(
        movies=movies,
        genres=genres,
        selected_genre=selected_genre,
        search_string=search_string
    )


@router.get("/Details",
            response_model=Movie,
            include_in_schema=False)
@router.get("/Details/{movie_id}",
            response_model=Movie,
            summary="Get a movie by ID",
            responses={404: {"description": "The movie was not found"}})
async def details(movie_id: Optional[str] = None, session: Session = Depends(get_session)):
    return get_or_404(session, Movie, movie_id)


@router.get("/Create", response_model=FormView, summary="Empty movie form")
async def create_form():
    return FormView.empty(MOVIE_BIND_FIELDS)


@router.post("/Create",
             response_model=FormView,
             summary="Add a new movie",
             response_description="The rejected form, or a redirect to the list")
async def create(request: Request, session: Session = Depends(get_session)):
    data = bind_form(await request.form(), MOVIE_BIND_FIELDS)
    data.pop("id", None)

    form, errors = validate_form(MovieForm, data)
    if errors:
        logger.info(f"Rejected movie form with {len(errors)} error(s)")
        return rejected_form(data, MOVIE_BIND_FIELDS, errors)

    movie = add_record(session, Movie.model_validate(form.model_dump(exclude={"id"})))
    logger.info(f"A new movie has been added: ID {movie.id}, {movie.title}")
    return redirect_to_index(router.prefix)


@router.get("/Edit", response_model=FormView, include_in_schema=False)
@router.get("/Edit/{movie_id}",
            response_model=FormView,
            summary="Movie form filled from the stored record",
            responses={404: {"description": "The movie was not found"}})
async def edit_form(movie_id: Optional[str] = None, session: Session = Depends(get_session)):
    movie = get_or_404(session, Movie, movie_id)
    return FormView.for_record(movie, MOVIE_BIND_FIELDS)


@router.post("/Edit/{movie_id}",
             response_model=FormView,
             summary="Update movie data",
             responses={404: {"description": "The movie was not found"}})
async def edit(movie_id: str, request: Request, session: Session = Depends(get_session)):
    record_id = id_or_404(movie_id, "movie")
    data = bind_form(await request.form(), MOVIE_BIND_FIELDS)
    if submitted_id(data) != record_id:
        logger.warning(f"Movie ID {record_id} does not match the submitted ID {data.get('id')}")
        raise not_found("movie")

    form, errors = validate_form(MovieForm, data)
    if errors:
        logger.info(f"Rejected edit of movie ID {record_id} with {len(errors)} error(s)")
        return rejected_form(data, MOVIE_BIND_FIELDS, errors)

    outcome = update_record(session, Movie, record_id, form.model_dump(exclude={"id"}))
    if outcome is UpdateOutcome.CONFLICT_GONE:
        logger.warning(f"Attempt to update a non-existent movie ID {record_id}")
        raise not_found("movie")
    if outcome is UpdateOutcome.CONFLICT_STILL_PRESENT:
        return conflict_error("movie", record_id)

    logger.info(f"Updated movie ID {record_id}: {form.title}")
    return redirect_to_index(router.prefix)


@router.get("/Delete", response_model=Movie, include_in_schema=False)
@router.get("/Delete/{movie_id}",
            response_model=Movie,
            summary="Movie to confirm for deletion",
            responses={404: {"description": "The movie was not found"}})
async def delete_confirm(movie_id: Optional[str] = None, session: Session = Depends(get_session)):
    return get_or_404(session, Movie, movie_id)


@router.post("/Delete/{movie_id}", summary="Delete a movie")
async def delete(movie_id: str, session: Session = Depends(get_session)):
    record_id = id_or_404(movie_id, "movie")
    if delete_record(session, Movie, record_id):
        logger.info(f"Deleted movie ID {record_id}")
    else:
        logger.warning(f"Movie ID {record_id} was already gone at delete time")
    return redirect_to_index(router.prefix)
