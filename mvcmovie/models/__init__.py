from .movies import Movie, MovieForm, MovieGenreView, MOVIE_BIND_FIELDS
from .actors import Actor, ActorForm, ACTOR_BIND_FIELDS

__all__ = [
    "Movie", "MovieForm", "MovieGenreView", "MOVIE_BIND_FIELDS",
    "Actor", "ActorForm", "ACTOR_BIND_FIELDS",
]
