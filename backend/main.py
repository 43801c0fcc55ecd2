import logging
import time
from contextlib import asynccontextmanager

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse

from api.routes.authors import router as authors_router
from api.routes.database import router as database_router
from api.schemas.database import ErrorResponse
from scientometrics.config import Config
from scientometrics.database.db.session import engine
from scientometrics.exceptions import ErrorKind, ScholarServiceError
from scientometrics.logging_setup import setup_logging
from scientometrics.scripts.init_db import init_db

logger = logging.getLogger("scientometrics.web")

ERROR_STATUS = {
    ErrorKind.INVALID_ARGUMENT: 400,
    ErrorKind.UPSTREAM: 502,
    ErrorKind.PERSISTENCE: 500,
}


@asynccontextmanager
async def lifespan(app: FastAPI):
    setup_logging()
    # Create any missing tables on startup
    init_db(engine)
    logger.info("🚀 Scholar Integration API started")
    yield
    engine.dispose()


app = FastAPI(title="Scholar Integration API", lifespan=lifespan)

app.add_middleware(
    CORSMiddleware,
    allow_origins=Config.cors_origins,
    allow_credentials="*" not in Config.cors_origins,  # 使用 "*" 时不能设置 credentials=True
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.middleware("http")
async def log_requests(request: Request, call_next):
    start = time.time()
    response = await call_next(request)
    duration_ms = (time.time() - start) * 1000
    logger.info(
        f"{request.method} {request.url.path} -> {response.status_code} in {duration_ms:.2f}ms"
    )
    return response


@app.exception_handler(ScholarServiceError)
async def handle_service_error(request: Request, exc: ScholarServiceError):
    status = ERROR_STATUS[exc.kind]
    if status >= 500:
        logger.error(f"❌ {exc.kind.value} error on {request.url.path}: {exc.message}")
    else:
        logger.info(f"⚠️ Rejected {request.url.path}: {exc.message}")

    body = ErrorResponse(
        error=exc.kind.value,
        message=exc.message,
        upstream_status=exc.status_code if exc.kind is ErrorKind.UPSTREAM else None,
    )
    return JSONResponse(status_code=status, content=body.model_dump())


app.include_router(authors_router)
app.include_router(database_router)


@app.get("/api/health")
async def health_check():
    return {"status": "ok"}
