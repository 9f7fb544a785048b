# greeter/api/users.py

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException

from greeter.api.deps import get_registry
from greeter.models.users import UserIn, UserOut
from greeter.registry.errors import NoResultFound, UserRegistryError
from greeter.registry.users import UserRegistry

logger = logging.getLogger(__name__)

router = APIRouter(prefix="/users", tags=["users"])


@router.get("/", response_model=List[UserOut])
def list_users(registry: UserRegistry = Depends(get_registry)) -> List[UserOut]:
    """
    Return all users in the order they were added.
    """
    return [UserOut.from_user(user) for user in registry.list_users()]


@router.post("/", response_model=UserOut, status_code=201)
def create_user(
    payload: UserIn,
    registry: UserRegistry = Depends(get_registry),
) -> UserOut:
    try:
        user = registry.add_user(payload.first_name, payload.last_name, payload.email)
    except UserRegistryError as e:
        logger.info("Rejected user %r %r: %s", payload.first_name, payload.last_name, e)
        raise HTTPException(status_code=400, detail=str(e))

    return UserOut.from_user(user)


@router.get("/{first_name}/{last_name}", response_model=UserOut)
def get_user(
    first_name: str,
    last_name: str,
    registry: UserRegistry = Depends(get_registry),
) -> UserOut:
    """
    Look up a single user by exact first and last name.
    """
    try:
        user = registry.get_user_by_name(first_name, last_name)
    except NoResultFound:
        raise HTTPException(status_code=404, detail="User not found")

    return UserOut.from_user(user)
