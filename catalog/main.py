import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI

from catalog.api.v1.endpoints.course import router as courses_router
from catalog.core.config import settings
from catalog.core.logging import configure_logging
from catalog.db.bootstrap import init_schema
from catalog.db.postgres.crud import CourseRepository
from catalog.db.postgres.session import engine, async_session

logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("starting course catalog microservices ...")
    try:
        try:
            await init_schema(engine, reset=settings.reset_schema_on_startup)
        except Exception:
            # the server must not come up on a half-initialized catalog
            logger.exception("schema initialization failed")
            raise
        app.state.course_repository = CourseRepository(async_session)
        yield
    finally:
        await engine.dispose()


app = FastAPI(
    title="MSDS Course Catalog API",
    version="0.1.0",
    lifespan=lifespan,
)

configure_logging(settings.log_level)


@app.get("/health", tags=["health"])
def health():
    return {"status": "ok", "service": "course-catalog-api"}


app.include_router(courses_router)


def run() -> None:
    if "port" not in settings.model_fields_set:
        logger.info("defaulting to port %s", settings.port)
    logger.info("listening on port %s", settings.port)
    uvicorn.run(app, host=settings.host, port=settings.port, log_config=None)


if __name__ == "__main__":
    run()
