"""
Error taxonomy shared by the loaders and the response assemblers.

Handlers translate these into ``HTTPException`` at the request boundary;
request validation failures (bad path/query/body) never reach this layer and
are turned into 400 responses by the application exception handler.
"""
from fastapi import status


class IsupipeError(Exception):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(IsupipeError):
    """A required single-row lookup returned no rows."""
    status_code = status.HTTP_404_NOT_FOUND


class InternalError(IsupipeError):
    """Persistence or composition failure. The original error is kept as ``__cause__``."""
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
