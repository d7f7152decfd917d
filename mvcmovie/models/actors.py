from sqlmodel import SQLModel, Field
from datetime import date

ACTOR_BIND_FIELDS = ("id", "age", "born_date", "first_name", "last_name")


class ActorBase(SQLModel):
    age: int = Field(ge=0, le=150)
    born_date: date | None = None
    first_name: str = Field(min_length=1, max_length=60)
    last_name: str = Field(min_length=1, max_length=60)


class Actor(ActorBase, table=True):
    # singular table name; the legacy "actors" table is renamed on startup
    id: int | None = Field(default=None, primary_key=True)


class ActorForm(ActorBase):
    id: int | None = None
