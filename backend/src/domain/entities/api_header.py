"""API header entity: a name/value pair displayed on every API page."""

from dataclasses import dataclass, field
from datetime import datetime
from uuid import uuid4


@dataclass
class ApiHeader:
    """Portal API header, displayed in ascending ``order``."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    value: str = ""
    order: int = 1
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("API header name cannot be empty")

    def touch(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()
