"""RFC 9457 error handling for the JSON API."""

from docshelf.presentation.api.v1.errors.exception_handlers import (
    register_exception_handlers,
)
from docshelf.presentation.api.v1.errors.problem_details import (
    ErrorDetail,
    ProblemDetails,
)

__all__ = ["ErrorDetail", "ProblemDetails", "register_exception_handlers"]
