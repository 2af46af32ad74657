# unimatch/api/routes/health.py

from fastapi import APIRouter

from unimatch.core import config

router = APIRouter(prefix="/api/v1", tags=["v1"])


@router.get("/health")
async def health():
    return {
        "service": config.APP_NAME,
        "version": config.VERSION,
        "status": "ok",
        "endpoint": config.DIAGNOSTIC_API_URL,
    }
