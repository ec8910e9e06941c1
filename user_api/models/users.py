# user_api/models/users.py

from datetime import datetime
from typing import Any, List

from pydantic import BaseModel, ConfigDict, Field
from pydantic import ValidationError as PydanticValidationError

from user_api.errors import ValidationError


class User(BaseModel):
    id: int
    name: str
    email: str

    model_config = ConfigDict(frozen=True)


class UserCreate(BaseModel):
    name: str = Field(min_length=1)
    email: str = Field(min_length=1)


class UserOut(BaseModel):
    user: User


class UserListOut(BaseModel):
    users: List[User]
    count: int


class HealthOut(BaseModel):
    status: str = "healthy"
    timestamp: datetime
    version: str


def decode_user_create(payload: Any) -> UserCreate:
    """
    Turn a decoded JSON body into a UserCreate, or raise ValidationError.

    Anything that isn't an object with non-empty string name and email
    counts as missing fields.
    """
    if not isinstance(payload, dict):
        raise ValidationError()

    try:
        return UserCreate.model_validate(payload)
    except PydanticValidationError as exc:
        raise ValidationError() from exc
