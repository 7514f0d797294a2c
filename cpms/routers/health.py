from fastapi import APIRouter

from cpms.schemas.common import HealthResponse

router = APIRouter(tags=["health"])


@router.get("/healthz", response_model=HealthResponse)
def health_check():
    # Liveness only; no database round trip.
    return HealthResponse()
