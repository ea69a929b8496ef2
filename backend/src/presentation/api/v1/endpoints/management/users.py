"""Management endpoints for users."""

from fastapi import APIRouter, Depends, Request, status

from application.services import NewExternalUser, UserService
from presentation.api.v1.dependencies import get_authenticated_user, get_user_service
from presentation.api.v1.pagination import PaginationParams, create_list_response, get_pagination
from presentation.schemas import ListResponse, NewExternalUserInput, UserResponse

router = APIRouter(
    prefix="/users",
    tags=["users"],
    dependencies=[Depends(get_authenticated_user)],
)


@router.post("", response_model=UserResponse, status_code=status.HTTP_201_CREATED)
async def create_user(
    user_input: NewExternalUserInput,
    user_service: UserService = Depends(get_user_service),
) -> UserResponse:
    """Register a user coming from an external identity provider."""
    user = await user_service.create_external(
        NewExternalUser(
            source=user_input.source,
            source_id=user_input.source_id,
            firstname=user_input.firstname,
            lastname=user_input.lastname,
            email=user_input.email,
            username=user_input.username,
        )
    )
    return UserResponse.from_entity(user)


@router.get("", response_model=ListResponse[UserResponse])
async def list_users(
    request: Request,
    pagination: PaginationParams = Depends(get_pagination),
    user_service: UserService = Depends(get_user_service),
) -> dict:
    items = [UserResponse.from_entity(user) for user in await user_service.find_all()]
    return create_list_response(items, pagination, request.url)


@router.get("/{user_id}", response_model=UserResponse)
async def get_user(user_id: str, user_service: UserService = Depends(get_user_service)) -> UserResponse:
    return UserResponse.from_entity(await user_service.get(user_id))
