"""FastAPI application entry point. Registers middleware, error handlers and API routers."""

import logging

from fastapi import FastAPI, Request, Response
from fastapi.encoders import jsonable_encoder
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from cpms.config import settings
from cpms.database import Base, engine
from cpms.errors import AuthenticationError, CPMSError, NotFoundError
import cpms.models  # noqa: F401 - model import registers metadata
from cpms.routers import constructions, health, users

logging.basicConfig(
    level=settings.LOG_LEVEL,
    format="[%(asctime)s] [%(levelname)s] [%(name)s] %(message)s",
)
logger = logging.getLogger(__name__)

app = FastAPI(
    title="CPMS - Construction Project Management System",
    description="Construction projects and user accounts",
    version="1.0.0",
    docs_url="/docs",
    redoc_url="/redoc",
)

app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.ALLOWED_ORIGINS,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)


@app.exception_handler(CPMSError)
def handle_cpms_error(request: Request, exc: CPMSError):
    if isinstance(exc, NotFoundError):
        return Response(status_code=exc.status_code)
    body = {"message": exc.message}
    if exc.errors:
        body["errors"] = exc.errors
    headers = {"WWW-Authenticate": "Bearer"} if isinstance(exc, AuthenticationError) else None
    return JSONResponse(status_code=exc.status_code, content=body, headers=headers)


@app.exception_handler(RequestValidationError)
def handle_request_validation_error(request: Request, exc: RequestValidationError):
    errors = [
        {"field": ".".join(str(part) for part in err.get("loc", ())[1:]), "message": err.get("msg", "")}
        for err in exc.errors()
    ]
    logger.debug("request validation failed on %s: %s", request.url.path, errors)
    return JSONResponse(
        status_code=400,
        content=jsonable_encoder({"message": "One or more validation errors occurred.", "errors": errors}),
    )


app.include_router(health.router)
app.include_router(constructions.router)
app.include_router(users.router)


@app.on_event("startup")
def ensure_schema():
    Base.metadata.create_all(bind=engine)
