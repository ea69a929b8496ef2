"""API and plan repository interfaces - Abstract definitions."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import Api, Plan


class IApiRepository(ABC):
    """Abstract repository interface for Api entity."""

    @abstractmethod
    async def create(self, api: Api) -> Api:
        """Create a new API."""
        pass

    @abstractmethod
    async def get_by_id(self, api_id: str) -> Optional[Api]:
        """Retrieve an API by ID, None if not found."""
        pass

    @abstractmethod
    async def find_all(self) -> list[Api]:
        """Retrieve every API."""
        pass


class IPlanRepository(ABC):
    """Abstract repository interface for Plan entity."""

    @abstractmethod
    async def create(self, plan: Plan) -> Plan:
        """Create a new plan."""
        pass

    @abstractmethod
    async def get_by_id(self, plan_id: str) -> Optional[Plan]:
        """Retrieve a plan by ID, None if not found."""
        pass

    @abstractmethod
    async def find_by_api(self, api_id: str) -> list[Plan]:
        """Retrieve the plans of an API."""
        pass
