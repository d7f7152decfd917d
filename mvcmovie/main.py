from fastapi import FastAPI
import logging

from mvcmovie.config import LOG_LEVEL
from mvcmovie.database.db import wait_for_db
from mvcmovie.routers import actors, movies

logging.basicConfig(level=LOG_LEVEL)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="Movie catalog",
    description="Movies and actors: list, search, create, edit and delete",
    version="1.0.0"
)


@app.on_event("startup")
async def startup_event():
    logger.info("Launching the movie catalog...")
    wait_for_db()
    logger.info("The service is ready to work")


app.include_router(movies.router)
app.include_router(actors.router)


@app.get("/")
def health_check():
    return {"status": "online"}
