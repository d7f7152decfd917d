from datetime import date
from decimal import Decimal

from mvcmovie.models import Actor, Movie


def add_movie(session, **fields):
    values = {
        "title": "When Harry Met Sally",
        "genre": "Romantic Comedy",
        "price": Decimal("7.99"),
        "release_date": date(1989, 2, 12),
        "rating": "R",
    }
    values.update(fields)
    movie = Movie(**values)
    session.add(movie)
    session.commit()
    session.refresh(movie)
    return movie


def add_actor(session, **fields):
    values = {
        "age": 62,
        "born_date": date(1962, 1, 17),
        "first_name": "Jim",
        "last_name": "Carrey",
    }
    values.update(fields)
    actor = Actor(**values)
    session.add(actor)
    session.commit()
    session.refresh(actor)
    return actor
