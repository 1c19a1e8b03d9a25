"""Domain-level exceptions.

Services and adapters raise these errors to express unusable input.
Not-found is never an error here: lookups return None instead.
"""


class DomainError(Exception):
    """Base class for all domain errors."""


class DatasetError(DomainError):
    """Seed dataset is malformed or breaks the id invariant."""

    def __init__(self, message: str, path: str | None = None):
        self.path = path
        super().__init__(message)
