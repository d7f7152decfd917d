from dataclasses import dataclass
from typing import List, Optional

from sqlmodel import Session, col, select

from mvcmovie.models import Movie


@dataclass(frozen=True)
class MovieFilter:
    search_string: Optional[str] = None
    selected_genre: Optional[str] = None

    def apply(self, statement):
        if self.search_string:
            statement = statement.where(
                col(Movie.title).icontains(self.search_string, autoescape=True)
            )
        if self.selected_genre:
            statement = statement.where(Movie.genre == self.selected_genre)
        return statement


def search_movies(session: Session, movie_filter: MovieFilter) -> List[Movie]:
    return list(session.exec(movie_filter.apply(select(Movie))).all())


def genre_choices(session: Session) -> List[str]:
    statement = select(Movie.genre).distinct().order_by(Movie.genre)
    return list(session.exec(statement).all())
