from __future__ import annotations


class BusinessValidationError(Exception):
    """Raised when a domain/business rule is violated."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class EmptyMessageError(BusinessValidationError):
    """Raised when a chat message is missing, empty or whitespace-only."""

    def __init__(self, message: str = "Message cannot be empty."):
        super().__init__(message)
