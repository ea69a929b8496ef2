"""Management endpoints listing the applications of the environment."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from application.use_cases import ListEnvironmentApplicationsUseCase
from domain.enums import ApplicationStatus
from infrastructure.config import get_settings
from presentation.api.v1.dependencies import (
    get_authenticated_user,
    get_list_environment_applications_use_case,
)
from presentation.api.v1.pagination import PaginationParams, create_list_response, get_pagination
from presentation.schemas import ApplicationResponse, ListResponse

router = APIRouter(prefix="/applications", tags=["management"])


@router.get("", response_model=ListResponse[ApplicationResponse])
async def list_applications(
    request: Request,
    status: Optional[ApplicationStatus] = Query(None, description="ACTIVE or ARCHIVED"),
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_authenticated_user),
    use_case: ListEnvironmentApplicationsUseCase = Depends(get_list_environment_applications_use_case),
) -> dict:
    """
    List applications.

    Administrators see every application of the environment and may filter
    on archived ones; other users only see their own active applications.
    """
    settings = get_settings()
    applications = await use_case.execute(
        user_id,
        is_admin=settings.is_admin(user_id),
        status=status,
    )
    # Links target the portal resource, the only one serving a single application.
    base_path = f"{str(request.base_url).rstrip('/')}{settings.portal_prefix}/applications"
    items = [
        ApplicationResponse.from_entity(application, f"{base_path}/{application.id}")
        for application in applications
    ]
    return create_list_response(items, pagination, request.url)
