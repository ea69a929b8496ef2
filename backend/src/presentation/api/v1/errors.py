"""Translation of domain errors into HTTP responses."""

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from domain.errors import ManagementError
from presentation.schemas import ErrorResponse
from infrastructure.config import get_logger

logger = get_logger(__name__)


async def management_error_handler(request: Request, exc: ManagementError) -> JSONResponse:
    """Render a domain error as the error envelope with its own status."""
    logger.warning(
        f"Request failed: {exc.error.message}",
        extra={"technical_code": exc.error.technical_code},
    )
    return JSONResponse(status_code=exc.error.http_status, content=exc.error.to_dict())


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ManagementError, management_error_handler)


# Documented on every router raising domain errors
ERROR_RESPONSES = {
    400: {"model": ErrorResponse, "description": "Invalid request or conflict"},
    403: {"model": ErrorResponse, "description": "Access forbidden"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
}
