"""REST user directory endpoints.

Endpoints:
- GET /rest/getAllUsers: every user in insertion order
- GET /api/users/search?q=: users whose name or email contains q
"""

import logging

from fastapi import APIRouter, Depends

from api.dependencies import get_user_repo
from api.models import UserResponse
from port.user_repository import UserRepository
from services import user_service
from services.search_service import search

logger = logging.getLogger(__name__)

router = APIRouter(tags=["users"])


@router.get("/rest/getAllUsers", response_model=list[UserResponse])
async def get_all_users(repo: UserRepository = Depends(get_user_repo)):
    """Return the full, unfiltered user collection."""
    return [UserResponse.from_domain(user) for user in user_service.get_all(repo)]


@router.get("/api/users/search", response_model=list[UserResponse])
async def search_users(q: str = "", repo: UserRepository = Depends(get_user_repo)):
    """Search users by first name, last name or email (case-insensitive)."""
    results = search(q, repo.all())

    logger.debug("User search", extra={"query": q, "matches": len(results)})

    return [UserResponse.from_domain(user) for user in results]
