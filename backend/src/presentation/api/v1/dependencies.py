"""FastAPI dependency injection setup."""

from fastapi import Depends, HTTPException, Request, status
from sqlalchemy.ext.asyncio import AsyncSession

from infrastructure.config import get_settings
from infrastructure.database import get_session
from infrastructure.database.repositories import (
    SQLAlchemyApplicationRepository,
    SQLAlchemySubscriptionRepository,
    SQLAlchemyApiRepository,
    SQLAlchemyPlanRepository,
    SQLAlchemyUserRepository,
    SQLAlchemyRoleRepository,
    SQLAlchemyViewRepository,
    SQLAlchemyApiHeaderRepository,
)
from application.services import (
    ApplicationService,
    SubscriptionService,
    SubscriptionAggregator,
    ApiService,
    UserService,
    RoleService,
    ViewService,
    ApiHeaderService,
)
from application.use_cases import (
    ListUserApplicationsUseCase,
    ListEnvironmentApplicationsUseCase,
    ListSubscriptionsUseCase,
)
from domain.repositories import (
    IApplicationRepository,
    ISubscriptionRepository,
    IApiRepository,
    IPlanRepository,
    IUserRepository,
    IRoleRepository,
    IViewRepository,
    IApiHeaderRepository,
)


# Database session dependency, one session per request
get_db_session = get_session


# Authentication
async def get_authenticated_user(request: Request) -> str:
    """
    Identify the caller from the user header set by the gateway.

    Raises:
        HTTPException: 401 when the header is missing
    """
    user_id = request.headers.get(get_settings().user_header)
    if not user_id:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="Authentication required",
        )
    return user_id


# Repository dependencies
def get_application_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IApplicationRepository:
    return SQLAlchemyApplicationRepository(session)


def get_subscription_repository(
    session: AsyncSession = Depends(get_db_session),
) -> ISubscriptionRepository:
    return SQLAlchemySubscriptionRepository(session)


def get_api_repository(session: AsyncSession = Depends(get_db_session)) -> IApiRepository:
    return SQLAlchemyApiRepository(session)


def get_plan_repository(session: AsyncSession = Depends(get_db_session)) -> IPlanRepository:
    return SQLAlchemyPlanRepository(session)


def get_user_repository(session: AsyncSession = Depends(get_db_session)) -> IUserRepository:
    return SQLAlchemyUserRepository(session)


def get_role_repository(session: AsyncSession = Depends(get_db_session)) -> IRoleRepository:
    return SQLAlchemyRoleRepository(session)


def get_view_repository(session: AsyncSession = Depends(get_db_session)) -> IViewRepository:
    return SQLAlchemyViewRepository(session)


def get_api_header_repository(
    session: AsyncSession = Depends(get_db_session),
) -> IApiHeaderRepository:
    return SQLAlchemyApiHeaderRepository(session)


# Service dependencies
def get_application_service(
    application_repo: IApplicationRepository = Depends(get_application_repository),
    subscription_repo: ISubscriptionRepository = Depends(get_subscription_repository),
) -> ApplicationService:
    return ApplicationService(application_repo, subscription_repo)


def get_subscription_service(
    subscription_repo: ISubscriptionRepository = Depends(get_subscription_repository),
    application_repo: IApplicationRepository = Depends(get_application_repository),
    plan_repo: IPlanRepository = Depends(get_plan_repository),
) -> SubscriptionService:
    return SubscriptionService(subscription_repo, application_repo, plan_repo)


def get_subscription_aggregator(
    subscription_repo: ISubscriptionRepository = Depends(get_subscription_repository),
) -> SubscriptionAggregator:
    return SubscriptionAggregator(subscription_repo)


def get_api_service(
    api_repo: IApiRepository = Depends(get_api_repository),
    plan_repo: IPlanRepository = Depends(get_plan_repository),
) -> ApiService:
    return ApiService(api_repo, plan_repo)


def get_user_service(user_repo: IUserRepository = Depends(get_user_repository)) -> UserService:
    return UserService(user_repo, get_settings().environment_id)


def get_role_service(role_repo: IRoleRepository = Depends(get_role_repository)) -> RoleService:
    return RoleService(role_repo)


def get_view_service(view_repo: IViewRepository = Depends(get_view_repository)) -> ViewService:
    return ViewService(view_repo)


def get_api_header_service(
    api_header_repo: IApiHeaderRepository = Depends(get_api_header_repository),
) -> ApiHeaderService:
    return ApiHeaderService(api_header_repo)


# Use case dependencies
def get_list_user_applications_use_case(
    application_service: ApplicationService = Depends(get_application_service),
    aggregator: SubscriptionAggregator = Depends(get_subscription_aggregator),
) -> ListUserApplicationsUseCase:
    return ListUserApplicationsUseCase(application_service, aggregator)


def get_list_environment_applications_use_case(
    application_service: ApplicationService = Depends(get_application_service),
) -> ListEnvironmentApplicationsUseCase:
    return ListEnvironmentApplicationsUseCase(application_service)


def get_list_subscriptions_use_case(
    subscription_repo: ISubscriptionRepository = Depends(get_subscription_repository),
    application_repo: IApplicationRepository = Depends(get_application_repository),
    api_repo: IApiRepository = Depends(get_api_repository),
    plan_repo: IPlanRepository = Depends(get_plan_repository),
    user_repo: IUserRepository = Depends(get_user_repository),
) -> ListSubscriptionsUseCase:
    return ListSubscriptionsUseCase(
        subscription_repository=subscription_repo,
        application_repository=application_repo,
        api_repository=api_repo,
        plan_repository=plan_repo,
        user_repository=user_repo,
    )
