from fastapi import APIRouter

from hello_world_app.schemas.probe import HealthResponse

router = APIRouter(tags=["Health"])


@router.get("/health", response_model=HealthResponse, summary="Liveness check")
async def health() -> HealthResponse:
    """Static liveness; touches nothing else."""
    return HealthResponse(status="healthy")
