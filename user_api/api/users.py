# user_api/api/users.py

import json
import logging
from typing import Any

from fastapi import APIRouter, Depends, Request, status

from user_api.db.store import UserStore
from user_api.errors import USER_NOT_FOUND, NotFoundError, ValidationError
from user_api.models.users import UserListOut, UserOut, decode_user_create

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/api/users", tags=["users"])


def get_store(request: Request) -> UserStore:
    return request.app.state.store


@router.get("", response_model=UserListOut)
def list_users(store: UserStore = Depends(get_store)) -> UserListOut:
    """
    Return every user in insertion order, with the total count.
    """
    users = store.list_users()
    return UserListOut(users=users, count=len(users))


@router.get("/{user_id}", response_model=UserOut)
def get_user(user_id: str, store: UserStore = Depends(get_store)) -> UserOut:
    """
    Return a single user by ID. Anything but plain ASCII digits matches nothing.
    """
    if not (user_id.isascii() and user_id.isdigit()):
        raise NotFoundError(USER_NOT_FOUND)

    user = store.get_user(int(user_id))
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)

    return UserOut(user=user)


async def read_json_body(request: Request) -> Any:
    try:
        return await request.json()
    except (json.JSONDecodeError, UnicodeDecodeError):
        raise ValidationError()


@router.post("", response_model=UserOut, status_code=status.HTTP_201_CREATED)
def create_user(
    payload: Any = Depends(read_json_body),
    store: UserStore = Depends(get_store),
) -> UserOut:
    """
    Create a user from a JSON body with name and email.

    The body is read on the event loop; the store write runs in the
    threadpool alongside the readers that share its lock.
    """
    data = decode_user_create(payload)
    user = store.create_user(data)
    logger.info(f"Created user {user.id}")

    return UserOut(user=user)
