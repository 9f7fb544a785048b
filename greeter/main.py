# greeter/main.py

import logging
from contextlib import asynccontextmanager
from typing import Optional

from fastapi import FastAPI, Request

from greeter.api.greetings import router as greetings_router
from greeter.api.users import router as users_router
from greeter.core.config import Settings, get_settings
from greeter.registry.users import UserRegistry
from greeter.seed import seed_registry

logger = logging.getLogger(__name__)


def create_app(
    settings: Optional[Settings] = None,
    registry: Optional[UserRegistry] = None,
) -> FastAPI:
    """
    Build the application. The registry belongs to the app instance
    (`app.state.registry`); pass one in to share or pre-populate it.

    A registry created here is seeded from `settings.users_csv` at startup.
    """
    settings = settings or get_settings()
    seed_csv = settings.users_csv if registry is None else None
    if registry is None:
        registry = UserRegistry()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        if seed_csv:
            seed_registry(app.state.registry, seed_csv)
        yield

    app = FastAPI(
        title="Greeter API",
        version="0.1.0",
        lifespan=lifespan,
    )
    app.state.settings = settings
    app.state.registry = registry

    @app.middleware("http")
    async def log_requested_path(request: Request, call_next):
        logger.info("Requested path: %s", request.url.path)
        return await call_next(request)

    @app.get("/health")
    def health_check():
        return {"status": "ok"}

    app.include_router(greetings_router)
    app.include_router(users_router)

    return app


app = create_app()
