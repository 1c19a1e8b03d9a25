"""Search service — free-text filtering over the user collection.

Pure business logic with no HTTP dependencies. Matching is a
case-insensitive substring test against a haystack built from the
searchable fields; it filters, it never re-ranks.
"""

from collections.abc import Sequence

from domain.model.user import User

# password must never be matchable
SEARCHABLE_FIELDS = ('first_name', 'last_name', 'email')


def normalize(text) -> str:
    """Lowercase and trim a query or field value."""
    return str(text).lower().strip()


def _haystack(user: User) -> str:
    values = (getattr(user, field) for field in SEARCHABLE_FIELDS)
    return " ".join(normalize(value) for value in values if value)


def search(query: str | None, records: Sequence[User]) -> Sequence[User]:
    """Filter records whose searchable fields contain the query.

    Returns ``records`` itself when the query is absent, empty or
    whitespace-only. Otherwise returns a new list of matching records
    in their original order.

    Example:
        search('doe', [jane_doe, john_smith]) → [jane_doe]
    """
    if not query:
        return records

    needle = normalize(query)
    if not needle:
        return records

    return [user for user in records if needle in _haystack(user)]
