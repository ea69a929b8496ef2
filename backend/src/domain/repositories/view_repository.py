"""View repository interface - Abstract definition."""

from abc import ABC, abstractmethod
from typing import Optional

from domain.entities import View


class IViewRepository(ABC):
    """Abstract repository interface for View entity."""

    @abstractmethod
    async def create(self, view: View) -> View:
        """Create a new view."""
        pass

    @abstractmethod
    async def get_by_id(self, view_id: str) -> Optional[View]:
        """Retrieve a view by ID, None if not found."""
        pass

    @abstractmethod
    async def get_by_key(self, key: str) -> Optional[View]:
        """Retrieve a view by key, None if not found."""
        pass

    @abstractmethod
    async def find_all(self) -> list[View]:
        """Retrieve every view."""
        pass

    @abstractmethod
    async def update(self, view: View) -> View:
        """Update an existing view."""
        pass

    @abstractmethod
    async def delete(self, view_id: str) -> bool:
        """
        Delete a view.

        Returns:
            True if deleted, False if not found
        """
        pass
