# catalog_server/core/errors.py

from fastapi import status


class CatalogError(Exception):
    """
    Base class for errors that map straight onto an HTTP response.
    The exception handler in main.py renders them as
    {"status": "error", "statusCode": ..., "message": ...}.
    """
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str, status_code: int | None = None):
        super().__init__(message)
        self.message = message
        if status_code is not None:
            self.status_code = status_code


class InvalidFieldError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST


class UnauthorizedError(CatalogError):
    status_code = status.HTTP_401_UNAUTHORIZED


class NotFoundError(CatalogError):
    status_code = status.HTTP_404_NOT_FOUND


class ConflictError(CatalogError):
    status_code = status.HTTP_409_CONFLICT


class UploadRejectedError(CatalogError):
    status_code = status.HTTP_400_BAD_REQUEST
