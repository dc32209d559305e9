from fastapi import APIRouter

from fintrack.services.deps import get_settings_service

router = APIRouter(tags=["health"])


@router.get("/health")
async def health():
    return {"status": "ok", "environment": get_settings_service().settings.environment}
