# groupboard/main.py
import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from tortoise.exceptions import BaseORMException

from groupboard.config import settings
from groupboard.core.db import init_db, close_db
from groupboard.core.bootstrap import ensure_site_admin
from groupboard.core.errors import AppError, StorageError, ValidationError

from groupboard.api.routers import auth, user, groups, posts

logger = logging.getLogger("uvicorn.error")

app = FastAPI(title=settings.APP_NAME)

# CORS (with Cookie)
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.CORS_ORIGINS,
    allow_credentials=True,
    allow_methods=["GET", "POST", "PUT", "DELETE"],
    allow_headers=["*"],
)


def _error_response(exc: AppError) -> JSONResponse:
    return JSONResponse(status_code=exc.status_code, content={"message": exc.message})


@app.exception_handler(AppError)
async def handle_app_error(request: Request, exc: AppError):
    if exc.status_code >= 500:
        logger.error("[errors] %s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    else:
        logger.warning("[errors] %s %s -> %s %s", request.method, request.url.path, exc.status_code, exc.message)
    return _error_response(exc)


@app.exception_handler(RequestValidationError)
async def handle_request_validation_error(request: Request, exc: RequestValidationError):
    # Malformed bodies are reported like missing fields: 400 with a message
    errors = exc.errors()
    field = None
    if errors and errors[0].get("type") != "json_invalid":
        loc = [str(part) for part in errors[0].get("loc", ()) if part != "body"]
        field = ".".join(loc) or None
    message = f"Invalid value for '{field}'." if field else "Malformed request body."
    logger.warning("[errors] %s %s -> 400 %s", request.method, request.url.path, message)
    return _error_response(ValidationError(message))


@app.exception_handler(BaseORMException)
async def handle_storage_error(request: Request, exc: BaseORMException):
    # Never leak database details to the caller
    logger.error("[errors] %s %s -> storage failure", request.method, request.url.path, exc_info=exc)
    return _error_response(StorageError())


@app.on_event("startup")
async def on_startup():
    await init_db(generate_schemas=settings.env == "dev")
    # Ensure there's a site admin account on first run (when configured)
    await ensure_site_admin()


@app.on_event("shutdown")
async def on_shutdown():
    await close_db()


# REST
app.include_router(auth.router, prefix="/api")
app.include_router(user.router, prefix="/api")
app.include_router(groups.router, prefix="/api")
app.include_router(posts.router, prefix="/api")


@app.get("/healthz")
def healthz():
    return {"ok": True}
