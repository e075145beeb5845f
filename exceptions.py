"""Domain errors raised by the services and mapped to HTTP responses in main."""


class DomainError(Exception):
    def __init__(self, message: str, status_code: int = 400):
        self.message = message
        self.status_code = status_code
        super().__init__(message)


class NotFoundError(DomainError):
    def __init__(self, message: str):
        super().__init__(message, 404)


class ValidationError(DomainError):
    """A required field is missing or blank."""

    def __init__(self, message: str):
        super().__init__(message, 422)
