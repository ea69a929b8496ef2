"""API header repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import ApiHeader


class IApiHeaderRepository(ABC):
    """Abstract repository interface for ApiHeader entity."""

    @abstractmethod
    async def create(self, header: ApiHeader) -> ApiHeader:
        """Create a new API header."""
        pass

    @abstractmethod
    async def get_by_id(self, header_id: str) -> Optional[ApiHeader]:
        """Retrieve an API header by ID, None if not found."""
        pass

    @abstractmethod
    async def find_all(self) -> list[ApiHeader]:
        """Retrieve every API header, by ascending order."""
        pass

    @abstractmethod
    async def update(self, header: ApiHeader) -> ApiHeader:
        """Update an existing API header."""
        pass

    @abstractmethod
    async def delete(self, header_id: str) -> bool:
        """
        Delete an API header.

        Returns:
            True if deleted, False if not found
        """
        pass
