from typing import Protocol
from domain.model.user import User


class UserRepository(Protocol):
    """Protocol defining the interface for the user collection."""
    def append(self, user: User) -> User:
        """Add a user to the end of the collection. Return the stored User."""
        ...

    def all(self) -> list[User]:
        """Return every user in insertion order."""
        ...

    def count(self) -> int:
        """Return the number of stored users."""
        ...

    def next_id(self) -> int:
        """Return the id the next created user should receive."""
        ...
