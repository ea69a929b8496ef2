"""Validation modes of a plan."""

from enum import Enum


class PlanValidation(str, Enum):
    """How new subscriptions to a plan are validated."""

    AUTO = "AUTO"
    MANUAL = "MANUAL"

    def __str__(self) -> str:
        return self.value
