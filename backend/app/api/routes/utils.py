from fastapi import APIRouter

from app.core.config import settings
from app.models import HealthStatus

router = APIRouter(tags=["utils"])


@router.get("/health", response_model=HealthStatus)
async def health_check() -> HealthStatus:
    return HealthStatus(ok=True, has_api_key=settings.has_api_key, model=settings.OPENAI_MODEL)
