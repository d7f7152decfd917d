from sqlmodel import SQLModel, create_engine, Session
from sqlalchemy import event, inspect, text
import time
import logging

from mvcmovie.config import DATABASE_URL, DB_ECHO, DB_CONNECT_RETRIES, DB_RETRY_DELAY
import mvcmovie.models  # noqa: F401  registers the tables on SQLModel.metadata

logger = logging.getLogger(__name__)

LEGACY_ACTOR_TABLE = "actors"


def _connect_args(url: str) -> dict:
    if url.startswith("sqlite"):
        # sessions are opened in the threadpool and used on the event loop
        return {"check_same_thread": False}
    return {"connect_timeout": 10}


def _unicode_lower(value):
    return value.lower() if isinstance(value, str) else value


def _register_sqlite_functions(dbapi_connection, connection_record):
    # the built-in lower() only folds ASCII; title search relies on it
    dbapi_connection.create_function("lower", 1, _unicode_lower, deterministic=True)


def create_catalog_engine(url: str, **kwargs):
    catalog_engine = create_engine(url, connect_args=_connect_args(url), **kwargs)
    if catalog_engine.dialect.name == "sqlite":
        event.listen(catalog_engine, "connect", _register_sqlite_functions)
    return catalog_engine


engine = create_catalog_engine(DATABASE_URL, pool_pre_ping=True, echo=DB_ECHO)


def rename_legacy_actor_table(bind) -> bool:
    """Rename the pluralized ``actors`` table to ``actor``.

    Only runs when the legacy table exists and the new one does not. There
    is no way back: the rename is never reverted.
    """
    inspector = inspect(bind)
    if not inspector.has_table(LEGACY_ACTOR_TABLE) or inspector.has_table("actor"):
        return False

    with bind.begin() as conn:
        conn.execute(text(f"ALTER TABLE {LEGACY_ACTOR_TABLE} RENAME TO actor"))
    logger.info(f"Renamed table {LEGACY_ACTOR_TABLE} to actor")
    return True


def init_db(bind=None):
    bind = bind if bind is not None else engine
    rename_legacy_actor_table(bind)
    SQLModel.metadata.create_all(bind)
    logger.info("Database tables are in place")


def wait_for_db(bind=None, max_retries: int = DB_CONNECT_RETRIES, retry_delay: float = DB_RETRY_DELAY):
    bind = bind if bind is not None else engine

    for attempt in range(1, max_retries + 1):
        try:
            logger.info(f"Attempt {attempt}/{max_retries}: Connecting to DB...")
            with Session(bind) as session:
                session.exec(text("SELECT 1"))
            logger.info(f"Connected to {bind.dialect.name} database")
            break
        except Exception as e:
            logger.error(f"Connection failed: {type(e).__name__}: {str(e)}")
            if attempt == max_retries:
                raise RuntimeError(f"Failed to connect to DB after {max_retries} attempts")
            time.sleep(retry_delay)

    init_db(bind)


def get_session():
    with Session(engine) as session:
        yield session
