from fastapi import status


class AppException(Exception):
    """Base class for errors rendered as ``{"error": message}``."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class NotFoundError(AppException):
    status_code = status.HTTP_404_NOT_FOUND


class DuplicateError(AppException):
    status_code = status.HTTP_409_CONFLICT


class BusinessValidationError(AppException):
    status_code = status.HTTP_409_CONFLICT


class CommunicationError(AppException):
    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR

    DEFAULT_MESSAGE = "Error communicating with the data service"

    def __init__(self, message: str = DEFAULT_MESSAGE):
        super().__init__(message)
