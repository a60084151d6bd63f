"""FastAPI application factory."""

import logging
from contextlib import asynccontextmanager
from collections.abc import AsyncIterator
from pathlib import Path

from fastapi import FastAPI
from fastapi.middleware.cors import CORSMiddleware

from mozuk.config import get_settings
from mozuk.infrastructure.database import Base, engine
from mozuk.infrastructure.database.session import async_session_factory
from mozuk.infrastructure.database.repositories import SQLAlchemyUserRepository
from mozuk.application.services import AuthService
from mozuk.infrastructure.dependencies import get_token_service
from mozuk.infrastructure.logging.log_config import setup_logging
from mozuk.presentation.api.router import router as api_router

logger = logging.getLogger(__name__)


async def _seed_admin_user() -> None:
    """Ensure the default administrator account exists.

    Idempotent — an existing user with the configured email is left as is.
    """
    settings = get_settings()
    try:
        async with async_session_factory() as session:
            service = AuthService(
                SQLAlchemyUserRepository(session),
                get_token_service(),
                bcrypt_rounds=settings.bcrypt_rounds,
            )
            await service.ensure_user(
                settings.admin_email,
                settings.admin_password,
                name=settings.admin_name,
            )
            await session.commit()
    except Exception as exc:
        logger.warning("Could not seed admin user '%s': %s", settings.admin_email, exc)


@asynccontextmanager
async def lifespan(app: FastAPI) -> AsyncIterator[None]:
    """Application lifespan — configure logging, create tables, seed the admin."""
    settings = get_settings()
    setup_logging()

    # 1. Create all database tables
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    # 2. Seed the default administrator
    await _seed_admin_user()

    # 3. Ensure upload directory exists
    Path(settings.upload_dir).mkdir(parents=True, exist_ok=True)

    logger.info("%s %s started (%s)", settings.app_title, settings.app_version, settings.app_env)

    yield

    await engine.dispose()


def create_app() -> FastAPI:
    """Factory function that builds and configures the FastAPI application."""
    settings = get_settings()

    app = FastAPI(
        title=settings.app_title,
        version=settings.app_version,
        lifespan=lifespan,
    )

    # CORS middleware
    app.add_middleware(
        CORSMiddleware,
        allow_origins=settings.cors_origins,
        allow_credentials=True,
        allow_methods=["*"],
        allow_headers=["*"],
    )

    # Mount API routes
    app.include_router(api_router)

    return app


app = create_app()


if __name__ == "__main__":
    import uvicorn

    uvicorn.run(
        "mozuk.main:app",
        host="0.0.0.0",
        port=3001,
        reload=True,
    )
