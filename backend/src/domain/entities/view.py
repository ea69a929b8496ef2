"""View entity: a named grouping of APIs shown in the portal."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

ALL_VIEW_KEY = "all"


@dataclass
class View:
    """Portal view (API category)."""

    id: str = field(default_factory=lambda: str(uuid4()))
    key: str = ""
    name: str = ""
    description: Optional[str] = None
    order: int = 0
    hidden: bool = False
    default_view: bool = False
    picture: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("View name cannot be empty")
        if not self.key:
            self.key = to_view_key(self.name)

    def touch(self) -> None:
        """Mark the entity as updated."""
        self.updated_at = datetime.utcnow()


def to_view_key(name: str) -> str:
    """Derive a url friendly key from a view name."""
    key = "".join(c if c.isalnum() else "-" for c in name.strip().lower())
    while "--" in key:
        key = key.replace("--", "-")
    return key.strip("-")
