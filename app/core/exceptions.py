from fastapi import HTTPException


class AppError(Exception):
    """Base class for errors that map to a fixed HTTP status and a user-safe message"""

    status_code = 500

    def __init__(self, message: str, is_form_error: bool = False):
        super().__init__(message)
        self.message = message
        self.is_form_error = is_form_error


class NotFoundError(AppError):
    """Entity is absent, or exists but is not owned by the caller"""

    status_code = 404


class ForbiddenError(AppError):
    """Entity exists but the requested state transition is not allowed"""

    status_code = 403


class UnauthenticatedError(AppError):
    status_code = 401


class ProviderError(AppError):
    """The outbound completion provider failed or returned something unusable"""

    status_code = 500


class FormAwareHTTPException(HTTPException):
    """HTTPException that remembers whether the failure concerns form input"""

    def __init__(self, status_code: int, detail: str, is_form_error: bool = False):
        super().__init__(status_code=status_code, detail=detail)
        self.is_form_error = is_form_error


def to_http_exception(error: AppError) -> FormAwareHTTPException:
    return FormAwareHTTPException(
        status_code=error.status_code,
        detail=error.message,
        is_form_error=error.is_form_error,
    )
