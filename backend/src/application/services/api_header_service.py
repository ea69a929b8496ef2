"""API header service."""

from typing import Optional

from domain.entities import ApiHeader
from domain.errors import ErrorKind, ManagementError
from domain.repositories import IApiHeaderRepository
from infrastructure.config import get_logger


class ApiHeaderService:
    """
    Manage the headers displayed on every API page of the portal.

    Orders are kept contiguous, starting at 1.
    """

    def __init__(self, api_header_repository: IApiHeaderRepository):
        self.header_repo = api_header_repository
        self.logger = get_logger(self.__class__.__name__)

    async def find_all(self) -> list[ApiHeader]:
        headers = await self.header_repo.find_all()
        return sorted(headers, key=lambda h: h.order)

    async def get(self, header_id: str) -> ApiHeader:
        header = await self.header_repo.get_by_id(header_id)
        if header is None:
            raise ManagementError.of(ErrorKind.API_HEADER_NOT_FOUND, apiHeader=header_id)
        return header

    async def create(self, name: str, value: str) -> ApiHeader:
        """Append a header after the existing ones."""
        existing = await self.header_repo.find_all()
        header = ApiHeader(name=name, value=value, order=len(existing) + 1)
        created = await self.header_repo.create(header)
        self.logger.info(f"API header {created.id} created")
        return created

    async def update(self, header_id: str, name: str, value: str, order: int) -> ApiHeader:
        """
        Update a header, moving it to ``order``.

        The other headers are shifted so that orders stay contiguous.
        """
        header = await self.get(header_id)
        headers = [h for h in await self.find_all() if h.id != header.id]
        position = min(max(order, 1), len(headers) + 1)
        headers.insert(position - 1, header)

        header.name = name
        header.value = value
        await self._renumber(headers, always=header.id)
        return await self.get(header_id)

    async def delete(self, header_id: str) -> None:
        """Delete a header; the following ones move up."""
        header = await self.get(header_id)
        await self.header_repo.delete(header.id)
        remaining = [h for h in await self.find_all() if h.id != header.id]
        await self._renumber(remaining)
        self.logger.info(f"API header {header_id} deleted")

    async def _renumber(self, headers: list[ApiHeader], always: Optional[str] = None) -> None:
        for index, header in enumerate(headers, start=1):
            if header.order != index or header.id == always:
                header.order = index
                header.touch()
                await self.header_repo.update(header)
