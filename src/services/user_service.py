"""User service — read and create operations over the user collection.

Pure business logic with no HTTP dependencies. The repository is passed
in by the caller; nothing here keeps its own copy of the users.
"""

import logging

from domain.model.user import User
from port.user_repository import UserRepository

logger = logging.getLogger(__name__)


# ── queries ──────────────────────────────────────────────────

def get_all(repo: UserRepository) -> list[User]:
    """Return every user in insertion order, unfiltered."""
    return repo.all()


def find_by_id(repo: UserRepository, user_id: int) -> User | None:
    """Return the first user with the given id, or None if there is none."""
    for user in repo.all():
        if user.id == user_id:
            return user
    return None


# ── mutations ────────────────────────────────────────────────

def create_user(
    repo: UserRepository,
    first_name: str | None = None,
    last_name: str | None = None,
    email: str | None = None,
    password: str | None = None,
) -> User:
    """Create a user with the next free id and append it to the repository.

    Omitted fields are stored as None. Duplicate emails are allowed.

    Returns the stored User including its assigned id.
    """
    user = User(
        id=repo.next_id(),
        first_name=first_name,
        last_name=last_name,
        email=email,
        password=password,
    )
    stored = repo.append(user)

    logger.info("User created", extra={"userId": stored.id})
    return stored
