"""Portal endpoints for the subscriptions of the authenticated user."""

from typing import Optional

from fastapi import APIRouter, Depends, Query, Request

from application.services import SubscriptionService
from application.use_cases import ListSubscriptionsUseCase, NAMES_METADATA_KEY
from domain.enums import SubscriptionStatus
from presentation.api.v1.dependencies import (
    get_authenticated_user,
    get_list_subscriptions_use_case,
    get_subscription_service,
)
from presentation.api.v1.pagination import (
    PaginationParams,
    build_list_response,
    get_pagination,
    paginate,
)
from presentation.schemas import ListResponse, SubscriptionInput, SubscriptionResponse

router = APIRouter(prefix="/subscriptions", tags=["subscriptions"])


@router.post("", response_model=SubscriptionResponse)
async def create_subscription(
    subscription_input: SubscriptionInput,
    user_id: str = Depends(get_authenticated_user),
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    """Subscribe one of the user's applications to a plan."""
    subscription = await subscription_service.create(
        application_id=subscription_input.application,
        plan_id=subscription_input.plan,
        user_id=user_id,
        request=subscription_input.request,
    )
    return SubscriptionResponse.from_entity(subscription)


@router.get("", response_model=ListResponse[SubscriptionResponse])
async def list_subscriptions(
    request: Request,
    api_id: Optional[str] = Query(None, alias="apiId"),
    application_id: Optional[str] = Query(None, alias="applicationId"),
    statuses: Optional[list[SubscriptionStatus]] = Query(None),
    pagination: PaginationParams = Depends(get_pagination),
    user_id: str = Depends(get_authenticated_user),
    use_case: ListSubscriptionsUseCase = Depends(get_list_subscriptions_use_case),
) -> dict:
    """
    Search the subscriptions of the user's applications.

    ``metadata.names`` maps the ids referenced by the returned page to
    display names.
    """
    subscriptions, names = await use_case.execute(
        user_id,
        api_id=api_id,
        application_id=application_id,
        statuses=statuses,
    )
    page = paginate(subscriptions, pagination)
    names.update(await use_case.resolve_names(page.items))
    page.items = [SubscriptionResponse.from_entity(subscription) for subscription in page.items]
    return build_list_response(page, request.url, metadata={NAMES_METADATA_KEY: names})


@router.get("/{subscription_id}", response_model=SubscriptionResponse)
async def get_subscription(
    subscription_id: str,
    user_id: str = Depends(get_authenticated_user),
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    subscription = await subscription_service.get_for_user(subscription_id, user_id)
    return SubscriptionResponse.from_entity(subscription)


@router.post("/{subscription_id}/_close", response_model=SubscriptionResponse)
async def close_subscription(
    subscription_id: str,
    user_id: str = Depends(get_authenticated_user),
    subscription_service: SubscriptionService = Depends(get_subscription_service),
) -> SubscriptionResponse:
    """Close a subscription of one of the user's applications."""
    subscription = await subscription_service.close(subscription_id, user_id)
    return SubscriptionResponse.from_entity(subscription)
