"""
Users API Endpoints.

Profile management for the people in the network.
"""

from __future__ import annotations

from fastapi import APIRouter, status

from stay_with_friends.core.models.io.users import EmailCheck, EmailCheckResult, UserCreate, UserRead, UserUpdate
from stay_with_friends.server.services.deps import IdentityDep, UserServiceDep

router = APIRouter(tags=["users"])


@router.post(
    "",
    response_model=UserRead,
    status_code=status.HTTP_201_CREATED,
    summary="Create User",
    description="Create a user account from an email address and an optional name and avatar.",
    response_description="The created user.",
    responses={
        201: {"description": "User created successfully"},
        400: {"description": "Invalid email, name or image"},
        409: {"description": "A user with this email already exists"},
    },
)
async def create_user(data: UserCreate, service: UserServiceDep) -> UserRead:
    """
    Create a user.

    - **email**: Sign-in address, unique across users.
    - **name**: Optional display name.
    - **image**: Optional avatar URL.
    """
    return UserRead.model_validate(await service.create_user(data))


@router.post(
    "/check-email",
    response_model=EmailCheckResult,
    summary="Check Email",
    description="Tell whether an email address already belongs to a user.",
    responses={400: {"description": "Malformed email"}},
)
async def check_email(data: EmailCheck, service: UserServiceDep) -> EmailCheckResult:
    return EmailCheckResult(exists=await service.check_email_exists(data.email))


@router.get(
    "/email/{email}",
    response_model=UserRead,
    summary="Get User by Email",
    description="Retrieve a user by sign-in email address.",
    responses={404: {"description": "User not found"}},
)
async def get_user_by_email(email: str, service: UserServiceDep) -> UserRead:
    return UserRead.model_validate(await service.get_user_by_email(email))


@router.get(
    "/{user_id}",
    response_model=UserRead,
    summary="Get User",
    description="Retrieve a user by ID.",
    responses={404: {"description": "User not found"}},
)
async def get_user(user_id: str, service: UserServiceDep) -> UserRead:
    return UserRead.model_validate(await service.get_user(user_id))


@router.patch(
    "/{user_id}",
    response_model=UserRead,
    summary="Update User",
    description="Update the caller's own name and/or avatar.",
    responses={
        400: {"description": "Nothing to update or invalid values"},
        401: {"description": "No signed-in user"},
        403: {"description": "The profile belongs to someone else"},
        404: {"description": "User not found"},
    },
)
async def update_user(user_id: str, data: UserUpdate, identity: IdentityDep, service: UserServiceDep) -> UserRead:
    """
    Update a user profile.

    At least one of **name** or **image** must be given. A profile counts as
    the caller's own when its ID or its email matches the signed-in user.
    """
    return UserRead.model_validate(await service.update_user(user_id, data, identity))
