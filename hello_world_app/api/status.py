from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse

from hello_world_app.config.settings import Settings
from hello_world_app.services.page_renderer import render_page
from hello_world_app.services.probe_service import DatabaseProbeService

router = APIRouter(tags=["Status"])


def settings_from_app(request: Request) -> Settings:
    return request.app.state.settings


def probe_service_from_app(request: Request) -> DatabaseProbeService:
    return request.app.state.probe_service


@router.get(
    "/",
    response_class=HTMLResponse,
    summary="Greeting page with database status",
    description="Acquires an Entra ID token, opens a connection to the configured "
                "database and runs one query. The outcome is rendered into the page; "
                "the status code is 200 whatever happens.",
)
def root(
    settings: Settings = Depends(settings_from_app),
    probe_service: DatabaseProbeService = Depends(probe_service_from_app),
) -> HTMLResponse:
    # sync handler: FastAPI runs it in the threadpool, so the blocking token
    # and ODBC calls don't stall the event loop
    result = probe_service.probe()
    return HTMLResponse(content=render_page(settings.GREETING, result), status_code=200)
