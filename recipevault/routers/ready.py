from fastapi import APIRouter

from ..core.ai_client import GenerationClient

router = APIRouter()


@router.get("/ready")
async def ready():
    client = GenerationClient.get_instance()
    return {
        "status": "ok",
        "generation_endpoint": client.endpoint_url,
        "last_error": client.last_error,
        "last_error_at": client.last_error_at.isoformat() if client.last_error_at else None,
    }
