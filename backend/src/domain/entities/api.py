"""API and plan entities."""

from dataclasses import dataclass, field
from datetime import datetime
from typing import Optional
from uuid import uuid4

from domain.enums import PlanValidation


@dataclass
class Api:
    """An API published through the platform."""

    id: str = field(default_factory=lambda: str(uuid4()))
    name: str = ""
    version: str = "1.0"
    description: Optional[str] = None
    owner_id: Optional[str] = None
    created_at: datetime = field(default_factory=datetime.utcnow)
    updated_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("API name cannot be empty")


@dataclass
class Plan:
    """
    Access plan of an API.

    Subscriptions to an AUTO plan are accepted on creation, those to a
    MANUAL plan wait for a publisher decision.
    """

    id: str = field(default_factory=lambda: str(uuid4()))
    api_id: str = ""
    name: str = ""
    description: Optional[str] = None
    validation: PlanValidation = PlanValidation.MANUAL
    created_at: datetime = field(default_factory=datetime.utcnow)

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValueError("Plan name cannot be empty")

    @property
    def is_auto_validated(self) -> bool:
        return self.validation == PlanValidation.AUTO
