from sqlmodel import SQLModel, Field
from datetime import date
from decimal import Decimal
from typing import List

MOVIE_BIND_FIELDS = ("id", "genre", "price", "release_date", "title", "rating")


class MovieBase(SQLModel):
    title: str = Field(min_length=3, max_length=60, index=True)
    genre: str = Field(min_length=1, max_length=30, index=True)
    price: Decimal = Field(ge=0, le=1000, max_digits=18, decimal_places=2)
    release_date: date | None = None
    rating: str | None = Field(default=None, max_length=5)


class Movie(MovieBase, table=True):
    id: int | None = Field(default=None, primary_key=True)


class MovieForm(MovieBase):
    id: int | None = None


class MovieGenreView(SQLModel):
    movies: List[Movie]
    genres: List[str]
    selected_genre: str | None = None
    search_string: str | None = None
