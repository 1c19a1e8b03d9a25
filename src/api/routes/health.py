"""Health check endpoint."""

from datetime import datetime, timezone

from fastapi import APIRouter, Depends

from api.dependencies import get_user_repo
from port.user_repository import UserRepository

router = APIRouter(prefix="/health", tags=["health"])


@router.get("")
async def health(repo: UserRepository = Depends(get_user_repo)):
    """Health check endpoint with user store status."""
    return {
        "status": "healthy",
        "timestamp": datetime.now(timezone.utc).isoformat().replace('+00:00', 'Z'),
        "services": {
            "user_store": {
                "status": "healthy",
                "users": repo.count(),
            }
        },
    }
