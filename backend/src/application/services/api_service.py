"""API and plan service."""

from typing import Optional

from domain.entities import Api, Plan
from domain.enums import PlanValidation
from domain.errors import ErrorKind, ManagementError
from domain.repositories import IApiRepository, IPlanRepository
from infrastructure.config import get_logger


class ApiService:
    """Publish APIs and their plans."""

    def __init__(self, api_repository: IApiRepository, plan_repository: IPlanRepository):
        self.api_repo = api_repository
        self.plan_repo = plan_repository
        self.logger = get_logger(self.__class__.__name__)

    async def create(
        self,
        name: str,
        version: str,
        owner_id: str,
        description: Optional[str] = None,
    ) -> Api:
        api = await self.api_repo.create(
            Api(name=name, version=version, description=description, owner_id=owner_id)
        )
        self.logger.info(f"API {api.id} ({api.name} {api.version}) created by {owner_id}")
        return api

    async def find_all(self) -> list[Api]:
        apis = await self.api_repo.find_all()
        return sorted(apis, key=lambda api: api.name.casefold())

    async def get(self, api_id: str) -> Api:
        """
        Get an API.

        Raises:
            ManagementError: API_NOT_FOUND
        """
        api = await self.api_repo.get_by_id(api_id)
        if api is None:
            raise ManagementError.of(ErrorKind.API_NOT_FOUND, api=api_id)
        return api

    async def create_plan(
        self,
        api_id: str,
        name: str,
        validation: PlanValidation = PlanValidation.MANUAL,
        description: Optional[str] = None,
    ) -> Plan:
        api = await self.get(api_id)
        plan = await self.plan_repo.create(
            Plan(api_id=api.id, name=name, validation=validation, description=description)
        )
        self.logger.info(f"Plan {plan.id} created for API {api.id}")
        return plan

    async def find_plans(self, api_id: str) -> list[Plan]:
        api = await self.get(api_id)
        return await self.plan_repo.find_by_api(api.id)

    async def get_plan(self, plan_id: str) -> Plan:
        plan = await self.plan_repo.get_by_id(plan_id)
        if plan is None:
            raise ManagementError.of(ErrorKind.PLAN_NOT_FOUND, plan=plan_id)
        return plan
