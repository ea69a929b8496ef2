"""User service."""

from dataclasses import dataclass
from typing import Optional

from domain.entities import User
from domain.errors import ErrorKind, ManagementError
from domain.repositories import IUserRepository
from infrastructure.config import get_logger


@dataclass(frozen=True)
class NewExternalUser:
    """
    A user provisioned from an external identity provider.

    Attributes:
        source: Identity provider name
        source_id: Reference of the user inside the provider
        firstname: First name
        lastname: Last name
        email: Email address
        username: Login, defaults to the source reference
    """

    source: str
    source_id: str
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    username: Optional[str] = None


class UserService:
    """Provision and read users."""

    def __init__(self, user_repository: IUserRepository, environment_id: str):
        self.user_repo = user_repository
        self.environment_id = environment_id
        self.logger = get_logger(self.__class__.__name__)

    async def create_external(self, new_user: NewExternalUser) -> User:
        """
        Register a user coming from an external identity provider.

        Raises:
            ManagementError: USER_ALREADY_EXISTS when the provider reference
                is already registered
        """
        existing = await self.user_repo.get_by_source(new_user.source, new_user.source_id)
        if existing is not None:
            raise ManagementError.of(
                ErrorKind.USER_ALREADY_EXISTS,
                user=new_user.source_id,
                environment=self.environment_id,
                source=new_user.source,
            )

        user = User(
            source=new_user.source,
            source_id=new_user.source_id,
            username=new_user.username or new_user.source_id,
            firstname=new_user.firstname,
            lastname=new_user.lastname,
            email=new_user.email,
        )
        created = await self.user_repo.create(user)
        self.logger.info(f"User created: {created}")
        return created

    async def get(self, user_id: str) -> User:
        """
        Get a user.

        Raises:
            ManagementError: USER_NOT_FOUND
        """
        user = await self.user_repo.get_by_id(user_id)
        if user is None:
            raise ManagementError.of(ErrorKind.USER_NOT_FOUND, user=user_id)
        return user

    async def find_all(self) -> list[User]:
        users = await self.user_repo.find_all()
        return sorted(users, key=lambda u: u.display_name.casefold())
