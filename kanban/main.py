import logging
import logging.config
import os
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from sqlalchemy import text
from sqlalchemy.exc import SQLAlchemyError

from kanban import models  # noqa: F401  registers the tables on Base.metadata
from kanban.api.v1 import api_router
from kanban.config import settings
from kanban.database import Base, SessionLocal, engine
from kanban.errors import KanbanError

# Load logging config if present
if os.path.exists(settings.LOGGING_CONFIG):
    logging.config.fileConfig(settings.LOGGING_CONFIG, disable_existing_loggers=False)
else:
    logging.basicConfig(
        level=settings.LOG_LEVEL,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    Base.metadata.create_all(bind=engine)
    logger.info("Database initialized (%s)", engine.url.render_as_string(hide_password=True))

    yield

    engine.dispose()
    logger.info("Shutting down...")


app = FastAPI(
    title=settings.APP_NAME,
    version=settings.APP_VERSION,
    debug=settings.DEBUG,
    lifespan=lifespan,
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins_list,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(KanbanError)
async def kanban_error_handler(request: Request, exc: KanbanError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.detail)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.detail})


app.include_router(api_router, prefix="/api/v1")


@app.get("/api/health")
def health():
    status = {"api": "ok", "database": None}
    http_status = 200

    try:
        with SessionLocal() as db:
            db.execute(text("SELECT 1"))
        status["database"] = "connected"
    except SQLAlchemyError as e:
        status["database"] = f"error: {e}"
        http_status = 503

    return JSONResponse(content=status, status_code=http_status)


def run():
    """Console entry point: serve the API with uvicorn."""
    uvicorn.run("kanban.main:app", host=settings.HOST, port=settings.PORT, reload=settings.DEBUG)
