"""Management endpoints for the environment configuration.

Covers the headers displayed on API pages, the portal views, the portal
notification hooks and the roles of each scope.
"""

from fastapi import APIRouter, Depends, HTTPException, Response, status

from application.services import ApiHeaderService, RoleService, ViewService, ViewUpdate
from domain.enums import HookScope, RoleScope, list_hooks
from presentation.api.v1.dependencies import (
    get_api_header_service,
    get_authenticated_user,
    get_role_service,
    get_view_service,
)
from presentation.schemas import (
    ApiHeaderInput,
    ApiHeaderResponse,
    HookResponse,
    RoleInput,
    RoleResponse,
    UpdateApiHeaderInput,
    UpdateRoleInput,
    UpdateViewInput,
    ViewInput,
    ViewResponse,
)

router = APIRouter(
    prefix="/configuration",
    tags=["configuration"],
    dependencies=[Depends(get_authenticated_user)],
)


# API headers

@router.get("/apiheaders", response_model=list[ApiHeaderResponse])
async def list_api_headers(
    api_header_service: ApiHeaderService = Depends(get_api_header_service),
) -> list[ApiHeaderResponse]:
    return [ApiHeaderResponse.from_entity(h) for h in await api_header_service.find_all()]


@router.post("/apiheaders", response_model=ApiHeaderResponse, status_code=status.HTTP_201_CREATED)
async def create_api_header(
    header_input: ApiHeaderInput,
    api_header_service: ApiHeaderService = Depends(get_api_header_service),
) -> ApiHeaderResponse:
    """Append a header after the existing ones."""
    header = await api_header_service.create(header_input.name, header_input.value)
    return ApiHeaderResponse.from_entity(header)


@router.get("/apiheaders/{header_id}", response_model=ApiHeaderResponse)
async def get_api_header(
    header_id: str,
    api_header_service: ApiHeaderService = Depends(get_api_header_service),
) -> ApiHeaderResponse:
    return ApiHeaderResponse.from_entity(await api_header_service.get(header_id))


@router.put("/apiheaders/{header_id}", response_model=ApiHeaderResponse)
async def update_api_header(
    header_id: str,
    header_input: UpdateApiHeaderInput,
    api_header_service: ApiHeaderService = Depends(get_api_header_service),
) -> ApiHeaderResponse:
    """Update a header, moving it to the requested position."""
    header = await api_header_service.update(
        header_id, header_input.name, header_input.value, header_input.order
    )
    return ApiHeaderResponse.from_entity(header)


@router.delete("/apiheaders/{header_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_api_header(
    header_id: str,
    api_header_service: ApiHeaderService = Depends(get_api_header_service),
) -> Response:
    await api_header_service.delete(header_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


# Views

@router.get("/views", response_model=list[ViewResponse])
async def list_views(view_service: ViewService = Depends(get_view_service)) -> list[ViewResponse]:
    return [ViewResponse.from_entity(view) for view in await view_service.find_all()]


@router.post("/views", response_model=ViewResponse, status_code=status.HTTP_201_CREATED)
async def create_view(
    view_input: ViewInput,
    view_service: ViewService = Depends(get_view_service),
) -> ViewResponse:
    view = await view_service.create(
        name=view_input.name,
        description=view_input.description,
        hidden=view_input.hidden,
        picture=view_input.picture,
    )
    return ViewResponse.from_entity(view)


@router.put("/views", response_model=list[ViewResponse])
async def update_views(
    views_input: list[UpdateViewInput],
    view_service: ViewService = Depends(get_view_service),
) -> list[ViewResponse]:
    """Update several views at once, typically to reorder them."""
    if any(view_input.id is None for view_input in views_input):
        raise HTTPException(
            status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
            detail="Every view must carry its id",
        )
    views = await view_service.update_many([
        _to_view_update(view_input.id, view_input) for view_input in views_input
    ])
    return [ViewResponse.from_entity(view) for view in views]


@router.get("/views/{view_id}", response_model=ViewResponse)
async def get_view(view_id: str, view_service: ViewService = Depends(get_view_service)) -> ViewResponse:
    """Get a view by id or key."""
    return ViewResponse.from_entity(await view_service.get(view_id))


@router.put("/views/{view_id}", response_model=ViewResponse)
async def update_view(
    view_id: str,
    view_input: UpdateViewInput,
    view_service: ViewService = Depends(get_view_service),
) -> ViewResponse:
    view = await view_service.update(_to_view_update(view_id, view_input))
    return ViewResponse.from_entity(view)


@router.delete("/views/{view_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_view(view_id: str, view_service: ViewService = Depends(get_view_service)) -> Response:
    await view_service.delete(view_id)
    return Response(status_code=status.HTTP_204_NO_CONTENT)


@router.get("/views/{view_id}/picture")
async def get_view_picture(view_id: str, view_service: ViewService = Depends(get_view_service)) -> Response:
    picture = await view_service.get_picture(view_id)
    if picture is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="No picture")
    return Response(content=picture.content, media_type=picture.content_type)


def _to_view_update(view_id: str, view_input: UpdateViewInput) -> ViewUpdate:
    return ViewUpdate(
        id=view_id,
        name=view_input.name,
        description=view_input.description,
        order=view_input.order,
        hidden=view_input.hidden,
        picture=view_input.picture,
    )


# Hooks

@router.get("/hooks", response_model=list[HookResponse])
async def list_portal_hooks() -> list[HookResponse]:
    """Portal notification hooks, hidden ones excluded."""
    return [HookResponse.from_info(info) for info in list_hooks(HookScope.PORTAL)]


# Roles

@router.get("/rolescopes/{scope}/roles", response_model=list[RoleResponse])
async def list_roles(
    scope: RoleScope,
    role_service: RoleService = Depends(get_role_service),
) -> list[RoleResponse]:
    return [RoleResponse.from_entity(role) for role in await role_service.find_by_scope(scope)]


@router.post(
    "/rolescopes/{scope}/roles",
    response_model=RoleResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_role(
    scope: RoleScope,
    role_input: RoleInput,
    role_service: RoleService = Depends(get_role_service),
) -> RoleResponse:
    """Create a role; names are unique within a scope, case-insensitively."""
    role = await role_service.create(
        scope,
        role_input.name,
        description=role_input.description,
        default_role=role_input.default_role,
        permissions=role_input.permissions,
    )
    return RoleResponse.from_entity(role)


@router.get("/rolescopes/{scope}/roles/{role}", response_model=RoleResponse)
async def get_role(
    scope: RoleScope,
    role: str,
    role_service: RoleService = Depends(get_role_service),
) -> RoleResponse:
    return RoleResponse.from_entity(await role_service.get(scope, role))


@router.put("/rolescopes/{scope}/roles/{role}", response_model=RoleResponse)
async def update_role(
    scope: RoleScope,
    role: str,
    role_input: UpdateRoleInput,
    role_service: RoleService = Depends(get_role_service),
) -> RoleResponse:
    updated = await role_service.update(
        scope,
        role,
        description=role_input.description,
        default_role=role_input.default_role,
        permissions=role_input.permissions,
    )
    return RoleResponse.from_entity(updated)


@router.delete("/rolescopes/{scope}/roles/{role}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_role(
    scope: RoleScope,
    role: str,
    role_service: RoleService = Depends(get_role_service),
) -> Response:
    await role_service.delete(scope, role)
    return Response(status_code=status.HTTP_204_NO_CONTENT)
