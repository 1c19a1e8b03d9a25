"""In-memory implementation of UserRepository.

The list is the single source of truth for the running service. Users are
only ever appended, so ``count() + 1`` is a fresh id as long as ids were
assigned 1..N in insertion order.
"""

from collections.abc import Iterable

from domain.model.user import User


class InMemoryUserRepository:
    def __init__(self, users: Iterable[User] = ()):
        self.store: list[User] = []
        for user in users:
            self.append(user)

    # ── write operations ─────────────────────────────────────

    def append(self, user: User) -> User:
        self.store.append(user)
        return user

    # ── read operations ──────────────────────────────────────

    def all(self) -> list[User]:
        return self.store

    def count(self) -> int:
        return len(self.store)

    def next_id(self) -> int:
        return self.count() + 1
