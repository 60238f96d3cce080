"""
Name: Users API Controllers

Responsibilities:
  - Expose HTTP endpoints to list, fetch, create and delete users
  - Delegate business logic to application use cases
  - Validate requests and serialize responses using Pydantic models
  - Map use case errors to RFC 7807 responses

Collaborators:
  - application.use_cases: List/Get/Create/Delete user use cases
  - container: Dependency providers for use cases
  - error_responses: RFC 7807 factories

Notes:
  - This module stays thin (controllers only)
  - User ids are serialized as "_id", matching the stored documents
"""

from fastapi import APIRouter, Depends, Query
from pydantic import BaseModel, ConfigDict, Field

from .application.use_cases import (
    CreateUserInput,
    CreateUserUseCase,
    DeleteUserUseCase,
    GetUserUseCase,
    ListUsersInput,
    ListUsersUseCase,
    UserError,
    UserErrorCode,
)
from .container import (
    get_create_user_use_case,
    get_delete_user_use_case,
    get_get_user_use_case,
    get_list_users_use_case,
)
from .domain.entities import User
from .error_responses import (
    OPENAPI_ERROR_RESPONSES,
    bad_request,
    not_found,
    validation_error,
)

# R: Create API router for user endpoints
router = APIRouter(responses=OPENAPI_ERROR_RESPONSES)


class UserRes(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    id: str = Field(alias="_id")
    name: str
    age: int
    company: str
    email: str
    role: str
    avatar: str


class CreateUserReq(BaseModel):
    name: str | None = None
    age: int | None = None
    company: str | None = None
    email: str | None = None
    role: str | None = None
    avatar: str | None = None


class DeleteUserRes(BaseModel):
    deleted: bool


def _to_response(user: User) -> UserRes:
    return UserRes(
        id=user.id,
        name=user.name,
        age=user.age,
        company=user.company,
        email=user.email,
        role=user.role,
        avatar=user.avatar,
    )


def _raise_user_error(error: UserError) -> None:
    """R: Translate UserErrorCode -> HTTP."""
    if error.code == UserErrorCode.NOT_FOUND:
        raise not_found(error.message)
    if error.code == UserErrorCode.BAD_REQUEST:
        raise bad_request(error.message)
    raise validation_error(error.message, error.errors)


@router.get("/users", response_model=list[UserRes], tags=["users"])
def list_users(
    age: str | None = Query(None, description="Exact age (integer)"),
    company: str | None = Query(None, description="Exact company name"),
    role: str | None = Query(None, description="Exact role"),
    use_case: ListUsersUseCase = Depends(get_list_users_use_case),
):
    result = use_case.execute(ListUsersInput(age=age, company=company, role=role))
    if result.error:
        _raise_user_error(result.error)
    return [_to_response(user) for user in result.users]


@router.get("/users/{user_id}", response_model=UserRes, tags=["users"])
def get_user(
    user_id: str,
    use_case: GetUserUseCase = Depends(get_get_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error:
        _raise_user_error(result.error)
    return _to_response(result.user)


@router.post("/users", response_model=UserRes, status_code=201, tags=["users"])
def create_user(
    req: CreateUserReq,
    use_case: CreateUserUseCase = Depends(get_create_user_use_case),
):
    result = use_case.execute(
        CreateUserInput(
            name=req.name,
            age=req.age,
            company=req.company,
            email=req.email,
            role=req.role,
            avatar=req.avatar,
        )
    )
    if result.error:
        _raise_user_error(result.error)
    return _to_response(result.user)


@router.delete("/users/{user_id}", response_model=DeleteUserRes, tags=["users"])
def delete_user(
    user_id: str,
    use_case: DeleteUserUseCase = Depends(get_delete_user_use_case),
):
    result = use_case.execute(user_id)
    if result.error:
        _raise_user_error(result.error)
    return DeleteUserRes(deleted=True)
