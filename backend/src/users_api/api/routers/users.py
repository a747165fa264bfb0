from __future__ import annotations

from fastapi import APIRouter, Depends, Response, status

from users_api.api.deps import get_user_service
from users_api.api.errors import not_found_response
from users_api.api.schemas import ErrorResponse, UserCreateRequest, UserResponse, UserUpdateRequest
from users_api.infra.repositories import UserRecord
from users_api.services.results import UserNotFound
from users_api.services.user_service import UserService

router = APIRouter(prefix="/users", tags=["users"])

_NOT_FOUND = {status.HTTP_404_NOT_FOUND: {"model": ErrorResponse}}
_CONFLICT = {status.HTTP_409_CONFLICT: {"model": ErrorResponse}}


def _to_response(user: UserRecord) -> UserResponse:
    return UserResponse(
        id=user.id,
        username=user.username,
        name=user.name,
        email=user.email,
        created_at=user.created_at,
        updated_at=user.updated_at,
    )


@router.get("", response_model=list[UserResponse])
def list_users(service: UserService = Depends(get_user_service)) -> list[UserResponse]:
    return [_to_response(user) for user in service.list_users()]


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED, responses=_CONFLICT)
def create_user(
    body: UserCreateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = service.create_user(username=body.username, name=body.name, email=body.email)
    return _to_response(user)


@router.get("/{user_id}", response_model=UserResponse, responses=_NOT_FOUND)
def get_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
):
    result = service.lookup_user(user_id)
    if isinstance(result, UserNotFound):
        return not_found_response(result.to_error())
    return _to_response(result)


@router.put("/{user_id}", response_model=UserResponse, responses={**_NOT_FOUND, **_CONFLICT})
def update_user(
    user_id: int,
    body: UserUpdateRequest,
    service: UserService = Depends(get_user_service),
) -> UserResponse:
    user = service.update_user(user_id, username=body.username, name=body.name, email=body.email)
    return _to_response(user)


@router.delete("/{user_id}", status_code=status.HTTP_204_NO_CONTENT, responses=_NOT_FOUND)
def delete_user(
    user_id: int,
    service: UserService = Depends(get_user_service),
) -> Response:
    service.delete_user(user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
