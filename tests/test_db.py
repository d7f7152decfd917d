import pytest
from sqlalchemy import inspect, text
from sqlalchemy.pool import StaticPool

from mvcmovie.database.db import create_catalog_engine, init_db, rename_legacy_actor_table, wait_for_db


def memory_engine():
    return create_catalog_engine("sqlite://", poolclass=StaticPool)


def test_init_db_creates_tables():
    engine = memory_engine()
    init_db(engine)
    inspector = inspect(engine)
    assert inspector.has_table("movie")
    assert inspector.has_table("actor")


def test_legacy_actors_table_is_renamed():
    engine = memory_engine()
    with engine.begin() as conn:
        conn.execute(text(
            "CREATE TABLE actors (id INTEGER PRIMARY KEY, age INTEGER NOT NULL, born_date DATE, "
            "first_name VARCHAR NOT NULL, last_name VARCHAR NOT NULL)"
        ))
        conn.execute(text("INSERT INTO actors (age, first_name, last_name) VALUES (74, 'Bill', 'Murray')"))

    init_db(engine)

    inspector = inspect(engine)
    assert not inspector.has_table("actors")
    with engine.connect() as conn:
        assert conn.execute(text("SELECT first_name FROM actor")).scalar_one() == "Bill"


def test_rename_skipped_when_actor_table_exists():
    engine = memory_engine()
    init_db(engine)
    assert rename_legacy_actor_table(engine) is False


def test_wait_for_db_connects_and_initializes():
    engine = memory_engine()
    wait_for_db(engine, max_retries=1, retry_delay=0)
    assert inspect(engine).has_table("movie")


def test_wait_for_db_gives_up(tmp_path):
    engine = create_catalog_engine(f"sqlite:///{tmp_path}/missing/dir/catalog.db")
    with pytest.raises(RuntimeError):
        wait_for_db(engine, max_retries=2, retry_delay=0)
