# main.py
import logging
import time
from contextlib import asynccontextmanager
from typing import Optional

import uvicorn
from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import PlainTextResponse, Response
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.status import HTTP_400_BAD_REQUEST, HTTP_405_METHOD_NOT_ALLOWED

import config
from errors import TodoError
from routers import tasks
from storage import TaskStore

logger = logging.getLogger(__name__)

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
    "Access-Control-Allow-Headers": "Content-Type, Authorization",
}

ENDPOINTS = [
    ("GET", "/tasks", "List all tasks"),
    ("POST", "/tasks", "Create new task"),
    ("GET", "/tasks/{id}", "Get specific task"),
    ("PUT", "/tasks/{id}", "Update task"),
    ("DELETE", "/tasks/{id}", "Delete task"),
    ("PUT", "/tasks/{id}/done", "Mark task as done"),
    ("GET", "/tasks/search?q=query", "Search tasks"),
]


# --- App Lifecycle (Lifespan) ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    """Loads the task file before the first request is served."""
    app.state.store.load()
    print(f"To-Do API Server running on http://localhost:{config.PORT}")
    print("Endpoints:")
    for method, path, purpose in ENDPOINTS:
        print(f"  {method:<6} {path:<22} - {purpose}")
    yield
    print("To-Do API Server shutting down...")


# --- Exception Handlers ---
# Every error leaves the API as plain text with its status code.

async def todo_error_handler(request: Request, exc: TodoError):
    return PlainTextResponse(exc.message, status_code=exc.status_code)


async def http_error_handler(request: Request, exc: StarletteHTTPException):
    detail = "Method not allowed" if exc.status_code == HTTP_405_METHOD_NOT_ALLOWED else str(exc.detail)
    return PlainTextResponse(detail, status_code=exc.status_code, headers=exc.headers)


async def validation_error_handler(request: Request, exc: RequestValidationError):
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors()
    )
    return PlainTextResponse(f"Invalid JSON: {details}", status_code=HTTP_400_BAD_REQUEST)


# --- Middleware ---

async def cors_middleware(request: Request, call_next):
    if request.method == "OPTIONS":
        response = Response(status_code=200)
    else:
        response = await call_next(request)
    response.headers.update(CORS_HEADERS)
    return response


async def logging_middleware(request: Request, call_next):
    start = time.perf_counter()
    response = await call_next(request)
    elapsed_ms = (time.perf_counter() - start) * 1000
    logger.info("%s %s %.3fms", request.method, request.url.path, elapsed_ms)
    return response


# --- FastAPI App Initialization ---
def create_app(store: Optional[TaskStore] = None) -> FastAPI:
    app = FastAPI(
        title="To-Do API",
        description="A small task list with JSON file persistence.",
        version="1.0.0",
        lifespan=lifespan,
    )
    app.state.store = store if store is not None else TaskStore(config.TASKS_FILE)

    app.add_exception_handler(TodoError, todo_error_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RequestValidationError, validation_error_handler)

    # The last middleware added runs first: logging wraps CORS wraps the routes.
    app.middleware("http")(cors_middleware)
    app.middleware("http")(logging_middleware)

    app.include_router(tasks.router)
    return app


app = create_app()


def run():
    config.setup_logging()
    uvicorn.run(app, host=config.HOST, port=config.PORT)


# --- Main Entry Point ---
if __name__ == "__main__":
    run()
