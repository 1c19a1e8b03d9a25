from fastapi import Request

from port.user_repository import UserRepository


def get_user_repo(request: Request) -> UserRepository:
    """Return the user repository owned by the running app."""
    return request.app.state.user_repo
