from dataclasses import dataclass


@dataclass
class User:
    """Domain model representing a user directory record."""
    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None
