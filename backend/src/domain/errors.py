"""Domain error catalog.

Every failure a service can report is one member of ``ErrorKind``. The member
carries the HTTP status, the machine readable technical code and a message
template filled from the error parameters.
"""

from dataclasses import dataclass, field
from enum import Enum


class ErrorKind(Enum):
    """Closed set of domain error kinds."""

    ROLE_ALREADY_EXISTS = (400, "role.exists", "Role [{scope},{name}] already exists.")
    USER_ALREADY_EXISTS = (
        400,
        "user.exists",
        "A user [{user}] already exists for environment {environment}.",
    )
    VIEW_ALREADY_EXISTS = (400, "view.exists", "A view with key [{view}] already exists.")
    SUBSCRIPTION_NOT_CLOSABLE = (
        400,
        "subscription.notClosable",
        "Subscription [{subscription}] with status {status} can not be closed.",
    )
    ROLE_DELETION_FORBIDDEN = (
        400,
        "role.deletion.forbidden",
        "Role [{scope},{name}] is a system role and can not be deleted.",
    )
    PAGINATION_INVALID = (400, "pagination.invalid", "Pagination is not valid.")
    FORBIDDEN_ACCESS = (
        403,
        "forbidden",
        "You do not have sufficient rights to access this resource",
    )
    APPLICATION_NOT_FOUND = (
        404,
        "application.notFound",
        "Application [{application}] can not be found.",
    )
    SUBSCRIPTION_NOT_FOUND = (
        404,
        "subscription.notFound",
        "Subscription [{subscription}] can not be found.",
    )
    API_NOT_FOUND = (404, "api.notFound", "Api [{api}] can not be found.")
    PLAN_NOT_FOUND = (404, "plan.notFound", "Plan [{plan}] can not be found.")
    USER_NOT_FOUND = (404, "user.notFound", "User [{user}] can not be found.")
    ROLE_NOT_FOUND = (404, "role.notFound", "Role [{role}] can not be found.")
    VIEW_NOT_FOUND = (404, "view.notFound", "View [{view}] can not be found.")
    API_HEADER_NOT_FOUND = (
        404,
        "apiHeader.notFound",
        "API header [{apiHeader}] can not be found.",
    )

    def __init__(self, http_status: int, technical_code: str, template: str):
        self.http_status = http_status
        self.technical_code = technical_code
        self.template = template


@dataclass(frozen=True)
class DomainError:
    """
    A concrete occurrence of an error kind.

    Attributes:
        kind: What went wrong
        parameters: Values substituted in the message, also exposed to clients
    """

    kind: ErrorKind
    parameters: dict[str, str] = field(default_factory=dict)

    @property
    def message(self) -> str:
        return self.kind.template.format(**self.parameters)

    @property
    def http_status(self) -> int:
        return self.kind.http_status

    @property
    def technical_code(self) -> str:
        return self.kind.technical_code

    def to_dict(self) -> dict:
        """Convert the error to its wire representation."""
        return {
            "message": self.message,
            "http_status": self.http_status,
            "technicalCode": self.technical_code,
            "parameters": dict(self.parameters),
        }


class ManagementError(Exception):
    """Raised by services; carries the ``DomainError`` describing the failure."""

    def __init__(self, error: DomainError):
        super().__init__(error.message)
        self.error = error

    @classmethod
    def of(cls, kind: ErrorKind, **parameters: object) -> "ManagementError":
        """Build an error of ``kind`` with stringified parameters."""
        return cls(DomainError(kind, {k: str(v) for k, v in parameters.items()}))

    @property
    def kind(self) -> ErrorKind:
        return self.error.kind
