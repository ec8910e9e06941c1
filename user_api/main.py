# user_api/main.py

import logging
from contextlib import asynccontextmanager
from datetime import datetime, timezone
from typing import Optional

from fastapi import FastAPI

from user_api.api.users import router as users_router
from user_api.config import Settings, get_settings
from user_api.db.store import UserStore
from user_api.errors import register_error_handlers
from user_api.models.users import HealthOut

logger = logging.getLogger(__name__)


def setup_logging(level: str = "INFO") -> None:
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format="%(asctime)s [%(levelname)s] %(message)s",
    )


def create_app(
    store: Optional[UserStore] = None,
    settings: Optional[Settings] = None,
) -> FastAPI:
    """
    Build the application around its own user store.

    Pass a store to control the initial data (tests use this); otherwise the
    store is seeded or empty according to settings.
    """
    settings = settings or get_settings()
    if store is None:
        store = UserStore.seeded() if settings.seed_users else UserStore()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        setup_logging(settings.log_level)
        logger.info(f"{settings.app_name} {settings.app_version} started with {len(store)} users")
        yield
        logger.info(f"{settings.app_name} shutting down")

    app = FastAPI(
        title=settings.app_name,
        version=settings.app_version,
        lifespan=lifespan,
        redirect_slashes=False,
    )
    app.state.store = store
    app.state.settings = settings

    @app.api_route("/health", methods=["GET", "HEAD"], response_model=HealthOut)
    def health_check() -> HealthOut:
        return HealthOut(
            status="healthy",
            timestamp=datetime.now(timezone.utc),
            version=settings.app_version,
        )

    app.include_router(users_router)
    register_error_handlers(app)

    return app


app = create_app()
