import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from app.api.v1.routes_checkout import router as checkout_router
from app.api.v1.routes_reports import router as reports_router
from app.api.v1.routes_treatments import router as treatments_router
from app.core.config import settings
from app.core.errors import AppError
from app.core.logging import configure_logging
from app.db.base import create_all

configure_logging()
logger = logging.getLogger(__name__)


@asynccontextmanager
async def lifespan(app: FastAPI):
    if settings.DB_CREATE_ALL:
        await create_all()
        logger.info("Database tables ensured")
    yield
    logger.info("Application shutting down...")


app = FastAPI(title="Spa Office API", lifespan=lifespan)

app.include_router(checkout_router)
app.include_router(treatments_router)
app.include_router(reports_router)


@app.exception_handler(AppError)
async def app_error_handler(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("%s %s failed: %s", request.method, request.url.path, exc.message)
    else:
        logger.warning("%s %s rejected: %s", request.method, request.url.path, exc.message)
    return JSONResponse(status_code=exc.status_code, content={"detail": exc.message})


@app.get("/health")
async def health():
    return {"status": "ok"}
