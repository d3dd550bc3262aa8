"""Domain exceptions raised by services.

Each carries the HTTP status it should be answered with. The exception
handlers in main.py turn them into the error envelope
{"error": {"message": "...", "status": ...}}. Anything raised that is not a
DomainError is an unclassified fault and answers 500.
"""


class DomainError(Exception):
    """Base class for all domain exceptions."""

    status: int = 400

    def __init__(self, message: str, status: int | None = None) -> None:
        if status is not None:
            if not 400 <= status <= 599:
                raise ValueError(f"error status must be within 400-599, got {status}")
            self.status = status
        self.message = message
        super().__init__(message)


class NotFoundError(DomainError):
    """Raised when a requested entity does not exist."""

    status = 404
