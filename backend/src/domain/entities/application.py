"""Application entity: a registered consumer of APIs."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.enums import ApplicationStatus
from domain.value_objects import ApplicationSettings


@dataclass
class Application:
    """
    Entity representing an API consumer.

    Attributes:
        id: Unique application identifier
        name: Display name
        description: Free text description
        owner_id: Id of the user who created the application
        groups: Ids of the groups the application belongs to
        picture: Optional data URI of the application picture
        settings: Simple and/or OAuth client settings
        status: ACTIVE or ARCHIVED
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    description: Optional[str] = None
    owner_id: Optional[str] = None
    groups: list[str] = field(default_factory=list)
    picture: Optional[str] = None
    settings: ApplicationSettings = field(default_factory=ApplicationSettings)
    status: ApplicationStatus = ApplicationStatus.ACTIVE
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        """Validate application."""
        if not self.name or not self.name.strip():
            raise ValueError("Application name cannot be empty")

    @property
    def type(self) -> str:
        """Application type derived from its settings."""
        if self.settings.oauth is not None and self.settings.oauth.application_type:
            return self.settings.oauth.application_type.upper()
        return "SIMPLE"

    @property
    def is_archived(self) -> bool:
        return self.status == ApplicationStatus.ARCHIVED

    def is_owned_by(self, user_id: str) -> bool:
        return self.owner_id == user_id

    def update(
        self,
        name: str,
        description: Optional[str],
        groups: list[str],
        picture: Optional[str],
        settings: ApplicationSettings,
    ) -> None:
        """Replace the editable fields of the application."""
        if not name or not name.strip():
            raise ValueError("Application name cannot be empty")
        self.name = name
        self.description = description
        self.groups = list(groups)
        self.picture = picture
        self.settings = settings
        self._mark_updated()

    def archive(self) -> None:
        self.status = ApplicationStatus.ARCHIVED
        self._mark_updated()

    def _mark_updated(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()

    def __str__(self) -> str:
        return f"Application(id={self.id}, name={self.name})"
