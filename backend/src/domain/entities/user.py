"""User entity."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4


@dataclass
class User:
    """
    A user known to the platform, possibly provisioned from an external
    identity provider.

    Attributes:
        id: Unique user identifier
        source: Identity provider the user comes from (e.g. "gravitee", "ldap")
        source_id: Reference of the user inside its source
        username: Login
        firstname: First name
        lastname: Last name
        email: Email address
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    source: str = "memory"
    source_id: str = ""
    username: Optional[str] = None
    firstname: Optional[str] = None
    lastname: Optional[str] = None
    email: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    @property
    def display_name(self) -> str:
        """Full name when known, login otherwise."""
        if self.firstname and self.lastname:
            return f"{self.firstname} {self.lastname}"
        return self.username or self.source_id or self.id

    def __str__(self) -> str:
        return (
            f"User(username='{self.username}', source='{self.source}', "
            f"external_reference='{self.source_id}', firstname='{self.firstname}', "
            f"lastname='{self.lastname}', mail='{self.email}')"
        )
