from fastapi import status

class BaseAppException(Exception):
    def __init__(self, code: str, message: str, http_status: int):
        self.code = code
        self.message = message
        self.http_status = http_status
        super().__init__(message)

class ValidationAppError(BaseAppException):
    def __init__(self, code: str, message: str):
        super().__init__(code, message, status.HTTP_400_BAD_REQUEST)

class InvalidRangeError(ValidationAppError):
    def __init__(self, message: str = "the start time should be before the end time"):
        super().__init__("INVALID_RANGE", message)

class ProviderFailure(BaseAppException):
    """Raised by a provider gateway when the calendar service call fails."""

    def __init__(self, message: str, code: str = "PROVIDER_ERROR"):
        super().__init__(code, message, status.HTTP_502_BAD_GATEWAY)

class ProviderNotConfigured(BaseAppException):
    def __init__(self, message: str = "calendar provider credentials are not configured"):
        super().__init__("PROVIDER_NOT_CONFIGURED", message, status.HTTP_503_SERVICE_UNAVAILABLE)
