"""Management endpoints for APIs and their plans."""

from fastapi import APIRouter, Depends, status

from application.services import ApiService
from presentation.api.v1.dependencies import get_api_service, get_authenticated_user
from presentation.schemas import ApiInput, ApiResponse, PlanInput, PlanResponse

router = APIRouter(prefix="/apis", tags=["management"])


@router.post("", response_model=ApiResponse, status_code=status.HTTP_201_CREATED)
async def create_api(
    api_input: ApiInput,
    user_id: str = Depends(get_authenticated_user),
    api_service: ApiService = Depends(get_api_service),
) -> ApiResponse:
    api = await api_service.create(
        name=api_input.name,
        version=api_input.version,
        owner_id=user_id,
        description=api_input.description,
    )
    return ApiResponse.from_entity(api)


@router.get("", response_model=list[ApiResponse], dependencies=[Depends(get_authenticated_user)])
async def list_apis(api_service: ApiService = Depends(get_api_service)) -> list[ApiResponse]:
    return [ApiResponse.from_entity(api) for api in await api_service.find_all()]


@router.get("/{api_id}", response_model=ApiResponse, dependencies=[Depends(get_authenticated_user)])
async def get_api(api_id: str, api_service: ApiService = Depends(get_api_service)) -> ApiResponse:
    return ApiResponse.from_entity(await api_service.get(api_id))


@router.post(
    "/{api_id}/plans",
    response_model=PlanResponse,
    status_code=status.HTTP_201_CREATED,
    dependencies=[Depends(get_authenticated_user)],
)
async def create_plan(
    api_id: str,
    plan_input: PlanInput,
    api_service: ApiService = Depends(get_api_service),
) -> PlanResponse:
    """Add a plan to an API; AUTO plans accept subscriptions on creation."""
    plan = await api_service.create_plan(
        api_id,
        name=plan_input.name,
        validation=plan_input.validation,
        description=plan_input.description,
    )
    return PlanResponse.from_entity(plan)


@router.get(
    "/{api_id}/plans",
    response_model=list[PlanResponse],
    dependencies=[Depends(get_authenticated_user)],
)
async def list_plans(api_id: str, api_service: ApiService = Depends(get_api_service)) -> list[PlanResponse]:
    return [PlanResponse.from_entity(plan) for plan in await api_service.find_plans(api_id)]
