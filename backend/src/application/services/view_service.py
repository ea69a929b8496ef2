"""View service."""

from dataclasses import dataclass
from typing import Optional

from domain.entities import ALL_VIEW_KEY, View, to_view_key
from domain.errors import ErrorKind, ManagementError
from domain.repositories import IViewRepository
from domain.value_objects import InlinePicture
from infrastructure.config import get_logger


@dataclass(frozen=True)
class ViewUpdate:
    """Editable fields of a view, used by single and bulk updates."""

    id: str
    name: str
    description: Optional[str] = None
    order: Optional[int] = None
    hidden: bool = False
    picture: Optional[str] = None


class ViewService:
    """Manage the portal views."""

    def __init__(self, view_repository: IViewRepository):
        self.view_repo = view_repository
        self.logger = get_logger(self.__class__.__name__)

    async def find_all(self) -> list[View]:
        """Every view, by order then name."""
        views = await self.view_repo.find_all()
        return sorted(views, key=lambda v: (v.order, v.name.casefold()))

    async def get(self, view_id: str) -> View:
        """
        Get a view by id, falling back to its key.

        Raises:
            ManagementError: VIEW_NOT_FOUND
        """
        view = await self.view_repo.get_by_id(view_id)
        if view is None:
            view = await self.view_repo.get_by_key(view_id)
        if view is None:
            raise ManagementError.of(ErrorKind.VIEW_NOT_FOUND, view=view_id)
        return view

    async def create(
        self,
        name: str,
        description: Optional[str] = None,
        hidden: bool = False,
        picture: Optional[str] = None,
    ) -> View:
        """
        Create a view, appended after the existing ones.

        Raises:
            ManagementError: VIEW_ALREADY_EXISTS when the derived key is taken
        """
        key = to_view_key(name)
        if await self.view_repo.get_by_key(key) is not None:
            raise ManagementError.of(ErrorKind.VIEW_ALREADY_EXISTS, view=key)

        existing = await self.view_repo.find_all()
        view = View(
            key=key,
            name=name,
            description=description,
            hidden=hidden,
            picture=picture,
            order=len(existing),
        )
        created = await self.view_repo.create(view)
        self.logger.info(f"View {created.key} created")
        return created

    async def update(self, view_update: ViewUpdate) -> View:
        view = await self.get(view_update.id)
        view.name = view_update.name
        view.description = view_update.description
        view.hidden = view_update.hidden
        view.picture = view_update.picture
        if view_update.order is not None:
            view.order = view_update.order
        view.touch()
        return await self.view_repo.update(view)

    async def update_many(self, view_updates: list[ViewUpdate]) -> list[View]:
        """Apply several updates, typically a reordering."""
        return [await self.update(view_update) for view_update in view_updates]

    async def delete(self, view_id: str) -> None:
        view = await self.get(view_id)
        await self.view_repo.delete(view.id)
        self.logger.info(f"View {view.key} deleted")

    async def create_default_view(self) -> View:
        """Create the default "All" view unless it already exists."""
        existing = await self.view_repo.get_by_key(ALL_VIEW_KEY)
        if existing is not None:
            return existing

        view = View(key=ALL_VIEW_KEY, name="All", default_view=True, order=0)
        created = await self.view_repo.create(view)
        self.logger.info("Default view created")
        return created

    async def get_picture(self, view_id: str) -> Optional[InlinePicture]:
        view = await self.get(view_id)
        return InlinePicture.from_data_uri(view.picture)
