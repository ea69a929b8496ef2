"""Statuses of an application."""

from enum import Enum


class ApplicationStatus(str, Enum):
    """Applications are archived instead of being physically deleted."""

    ACTIVE = "ACTIVE"
    ARCHIVED = "ARCHIVED"

    def __str__(self) -> str:
        return self.value
