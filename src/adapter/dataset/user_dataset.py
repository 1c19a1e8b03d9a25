"""Seed dataset loader for the user directory.

The dataset is a JSON array of objects using the wire field names
(``id``, ``firstName``, ``lastName``, ``email``, ``password``).
"""

import json
import logging
from pathlib import Path

from pydantic import BaseModel, ConfigDict, ValidationError
from pydantic.alias_generators import to_camel

from domain.model.errors import DatasetError
from domain.model.user import User

logger = logging.getLogger(__name__)


class UserSeed(BaseModel):
    """One record of the seed dataset."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: int
    first_name: str | None = None
    last_name: str | None = None
    email: str | None = None
    password: str | None = None


def load_users(path: str | Path) -> list[User]:
    """Load and validate the seed dataset.

    Ids must run 1..N in file order, since new users take ``count + 1``.

    Raises:
        FileNotFoundError: dataset file does not exist
        DatasetError: file is not a JSON array of valid user records
    """
    path = Path(path)
    with open(path, encoding="utf-8") as f:
        try:
            raw = json.load(f)
        except json.JSONDecodeError as e:
            raise DatasetError(f"Invalid JSON: {e}", path=str(path)) from e

    if not isinstance(raw, list):
        raise DatasetError("Dataset must be a JSON array of user objects", path=str(path))

    users: list[User] = []
    for position, item in enumerate(raw, start=1):
        try:
            seed = UserSeed.model_validate(item)
        except ValidationError as e:
            raise DatasetError(f"Invalid user record at position {position}: {e}", path=str(path)) from e

        if seed.id != position:
            raise DatasetError(
                f"User id {seed.id} at position {position} breaks the 1..N id sequence",
                path=str(path),
            )

        users.append(User(
            id=seed.id,
            first_name=seed.first_name,
            last_name=seed.last_name,
            email=seed.email,
            password=seed.password,
        ))

    logger.info("User dataset loaded", extra={"path": str(path), "count": len(users)})
    return users
