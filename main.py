# main.py
import logging
from contextlib import asynccontextmanager

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse
from fastapi.staticfiles import StaticFiles
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST

from config import get_settings

settings = get_settings()

logging.basicConfig(
    level=settings.log_level.upper(),
    format="%(asctime)s %(levelname)s %(name)s: %(message)s",
)
logger = logging.getLogger(__name__)

# --- Local Module Imports ---
import storage
from routers import tasks

# --- App Lifecycle (Lifespan) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """
    Manages application startup and shutdown events.
    """
    logger.info("Todo task API starting up, store at %s", storage.TASKS_FILE)
    # Ensure the tasks file exists on startup
    try:
        storage.initialize_tasks_file()
    except OSError as e:
        logger.error("Failed to create %s: %s", storage.TASKS_FILE.name, e)

    yield

    logger.info("Todo task API shutting down...")


# --- FastAPI App Initialization ---
app = FastAPI(
    title="Todo Task API",
    description="A small task board API backed by a JSON file.",
    version="1.0.0",
    lifespan=lifespan
)

# Enable CORS for all routes so a frontend on any origin can call the API
app.add_middleware(
    CORSMiddleware,
    allow_origins=["*"],
    allow_methods=["*"],
    allow_headers=["*"],
)

# --- Error Shape ---
@app.exception_handler(StarletteHTTPException)
async def http_exception_handler(request: Request, exc: StarletteHTTPException):
    return JSONResponse(
        status_code=exc.status_code,
        content={"message": exc.detail},
        headers=getattr(exc, "headers", None),
    )

@app.exception_handler(RequestValidationError)
async def validation_exception_handler(request: Request, exc: RequestValidationError):
    errors = exc.errors()
    first = errors[0] if errors else {}
    location = ".".join(str(part) for part in first.get("loc", ()) if part != "body")
    message = first.get("msg", "Invalid request.")
    if location:
        message = f"{location}: {message}"
    return JSONResponse(status_code=HTTP_400_BAD_REQUEST, content={"message": message})

# --- Include API Routers ---
app.include_router(tasks.router)

# --- Mount Static Files ---
# Mounted last so /api routes take precedence
if settings.public_dir.is_dir():
    app.mount("/", StaticFiles(directory=settings.public_dir, html=True), name="public")

# --- Main Entry Point ---
if __name__ == "__main__":
    uvicorn.run(app, host=settings.host, port=settings.port)
