import logging
from contextlib import asynccontextmanager
from fastapi import FastAPI

from app.config import settings
from app.elastic import check_connection, get_client
from app.exceptions import EngineError, JobNotFoundError, engine_error_handler, job_not_found_handler
from app.routers import jobs, search

logger = logging.getLogger("app")

VERSION = "0.1.0"


@asynccontextmanager
async def lifespan(app: FastAPI):
    logging.basicConfig(level=settings.log_level)
    logger.info("Starting Job Search Service...")
    app.state.es = get_client()
    await check_connection(app.state.es)
    yield
    logger.info("Shutting down gracefully...")
    await app.state.es.close()


app = FastAPI(
    title="Job Search Service",
    description="Job listings API backed by Elasticsearch full-text search",
    version=VERSION,
    lifespan=lifespan,
)

app.add_exception_handler(JobNotFoundError, job_not_found_handler)
app.add_exception_handler(EngineError, engine_error_handler)

app.include_router(jobs.router, prefix=settings.api_prefix)
app.include_router(search.router, prefix=settings.api_prefix)


@app.get("/health")
async def health():
    return {"status": "ok", "version": VERSION}


if __name__ == "__main__":
    import uvicorn

    uvicorn.run("app.main:app", host=settings.host, port=settings.port, log_level=settings.log_level.lower())
