from typing import Optional
from fastapi import FastAPI
from contextlib import asynccontextmanager
from hello_world_app.api.status import router as status_router
from hello_world_app.api.health import router as health_router
from hello_world_app.clients.identity_client import IdentityTokenClient
from hello_world_app.clients.sql_client import SqlClient
from hello_world_app.config.settings import Settings, get_settings
from hello_world_app.services.probe_service import DatabaseProbeService
from hello_world_app.utils.log import app_logger


def create_app(
    settings: Optional[Settings] = None,
    token_client: Optional[IdentityTokenClient] = None,
    sql_client: Optional[SqlClient] = None,
) -> FastAPI:
    """Build the application around a read-only settings value."""
    settings = settings or get_settings()

    @asynccontextmanager
    async def lifespan(app: FastAPI):
        # Startup logic
        app_logger.set_level(settings.LOG_LEVEL)
        app_logger.info(
            "app.startup",
            greeting=settings.GREETING,
            database_configured=settings.database_configured,
        )
        yield
        app_logger.info("app.shutdown")

    app = FastAPI(lifespan=lifespan)
    app.state.settings = settings
    app.state.probe_service = DatabaseProbeService(settings, token_client=token_client, sql_client=sql_client)

    # include routes
    app.include_router(status_router)
    app.include_router(health_router)
    return app


app = create_app()
