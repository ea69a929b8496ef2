"""Portal endpoints for the applications of the authenticated user."""

from fastapi import APIRouter, Depends, HTTPException, Query, Request, Response, status

from application.services import ApplicationService
from application.use_cases import ListUserApplicationsUseCase
from domain.enums import HookScope, list_hooks
from domain.value_objects import InlinePicture
from presentation.api.v1.dependencies import (
    get_application_service,
    get_authenticated_user,
    get_list_user_applications_use_case,
)
from presentation.api.v1.pagination import PaginationParams, create_list_response, get_pagination
from presentation.schemas import (
    ApplicationInput,
    ApplicationResponse,
    HookResponse,
    ListResponse,
)

router = APIRouter(prefix="/applications", tags=["applications"])


def _collection_url(request: Request) -> str:
    return str(request.url.replace(query="")).rstrip("/")


@router.post("", response_model=ApplicationResponse, status_code=status.HTTP_201_CREATED)
async def create_application(
    application_input: ApplicationInput,
    request: Request,
    user_id: str = Depends(get_authenticated_user),
    application_service: ApplicationService = Depends(get_application_service),
) -> ApplicationResponse:
    """Create an application owned by the authenticated user."""
    application = await application_service.create(
        owner_id=user_id,
        name=application_input.name,
        description=application_input.description,
        groups=application_input.groups,
        picture=application_input.picture,
        settings=application_input.to_settings(),
    )
    return ApplicationResponse.from_entity(
        application, f"{_collection_url(request)}/{application.id}"
    )


@router.get("", response_model=ListResponse[ApplicationResponse])
async def list_applications(
    request: Request,
    order: str = Query("name", description="name, -name, nbSubscriptions or -nbSubscriptions"),
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_authenticated_user),
    use_case: ListUserApplicationsUseCase = Depends(get_list_user_applications_use_case),
) -> dict:
    """
    List the applications of the authenticated user.

    Ordered by subscription count, the response metadata carries the
    count of every application under ``subscriptions``.
    """
    result = await use_case.execute(user_id, order)
    base_path = _collection_url(request)
    items = [
        ApplicationResponse.from_entity(application, f"{base_path}/{application.id}")
        for application in result.applications
    ]
    return create_list_response(items, pagination, request.url, metadata=result.metadata)


@router.get("/hooks", response_model=list[HookResponse])
async def list_application_hooks() -> list[HookResponse]:
    """Notification hooks an application can subscribe to."""
    return [HookResponse.from_info(info) for info in list_hooks(HookScope.APPLICATION)]


@router.get("/{application_id}", response_model=ApplicationResponse)
async def get_application(
    application_id: str,
    request: Request,
    user_id: str = Depends(get_authenticated_user),
    application_service: ApplicationService = Depends(get_application_service),
) -> ApplicationResponse:
    application = await application_service.get_for_user(application_id, user_id)
    return ApplicationResponse.from_entity(application, _collection_url(request))


@router.put("/{application_id}", response_model=ApplicationResponse)
async def update_application(
    application_id: str,
    application_input: ApplicationInput,
    request: Request,
    user_id: str = Depends(get_authenticated_user),
    application_service: ApplicationService = Depends(get_application_service),
) -> ApplicationResponse:
    """Replace the editable fields of an application."""
    application = await application_service.update(
        application_id,
        user_id,
        name=application_input.name,
        description=application_input.description,
        groups=application_input.groups,
        picture=application_input.picture,
        settings=application_input.to_settings() if application_input.settings else None,
    )
    return ApplicationResponse.from_entity(application, _collection_url(request))


@router.delete("/{application_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_application(
    application_id: str,
    user_id: str = Depends(get_authenticated_user),
    application_service: ApplicationService = Depends(get_application_service),
) -> Response:
    """Archive an application and close its subscriptions."""
    await application_service.archive(application_id, user_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/{application_id}/picture")
async def get_application_picture(
    application_id: str,
    user_id: str = Depends(get_authenticated_user),
    application_service: ApplicationService = Depends(get_application_service),
) -> Response:
    application = await application_service.get_for_user(application_id, user_id)
    picture = InlinePicture.from_data_uri(application.picture)
    if picture is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No picture")
    return Response(content=picture.content, media_type=picture.content_type)
