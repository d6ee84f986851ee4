"""crud-api — FastAPI application factories for the users and todos services.

Invariants:
    - Each service is its own FastAPI app with its own routers and listener
    - Routes registered explicitly (no auto-discovery)
    - Global error handlers map CrudApiError → structured JSON responses
    - The todos app owns exactly one TodoStore, created with the app

Design Decisions:
    - Factories over module-level singletons: tests build a fresh app (and list) each time;
      users_app/todos_app still exist for `uvicorn crud_api.main:users_app`
    - Lifespan over @app.on_event: FastAPI recommended pattern
"""

import logging
from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from crud_api import __version__
from crud_api.api.error_handlers import register_error_handlers
from crud_api.api.routes import health, root, todos, users
from crud_api.config import Settings, get_settings
from crud_api.core.domain_types import ServiceName
from crud_api.infrastructure.observability import setup_logging
from crud_api.services.todo_store import TodoStore

logger = logging.getLogger(__name__)


def _build_app(service: ServiceName, settings: Settings) -> FastAPI:
    @asynccontextmanager
    async def lifespan(app: FastAPI):
        """Startup/shutdown lifecycle."""
        setup_logging(settings.log_level, settings.log_format)
        logger.info("Service started", extra={"service": service.value})
        yield
        logger.info("Service shutting down", extra={"service": service.value})

    app = FastAPI(
        title=f"crud-api {service.value}", version=__version__,
        lifespan=lifespan,
    )
    app.state.service_name = service.value
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_methods=["*"],
        allow_headers=["*"],
    )
    register_error_handlers(app)
    app.include_router(health.router)
    return app


def create_users_app(settings: Settings | None = None) -> FastAPI:
    """Mock users service: GET /, /users CRUD."""
    app = _build_app(ServiceName.USERS, settings or get_settings())
    app.include_router(root.router)
    app.include_router(users.router)
    return app


def create_todos_app(settings: Settings | None = None) -> FastAPI:
    """Todos service: /todos list, create, delete over one shared list."""
    app = _build_app(ServiceName.TODOS, settings or get_settings())
    app.state.todo_store = TodoStore()
    app.include_router(todos.router)
    return app


users_app = create_users_app()
todos_app = create_todos_app()
