"""
Domain exceptions for the booking core.

Services raise these; the API layer renders them as
{"error": message, "code": code, "details": {...}} with the class's HTTP status.
"""

from typing import Any, Optional

from fastapi import status


class DomainException(Exception):
    """Base exception for all domain-specific errors."""

    status_code: int = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_code: str = "DOMAIN_ERROR"

    def __init__(
        self,
        message: str,
        code: Optional[str] = None,
        details: Optional[dict[str, Any]] = None,
    ) -> None:
        self.message = message
        self.code = code or self.default_code
        self.details = details or {}
        super().__init__(self.message)

    def to_dict(self) -> dict[str, Any]:
        return {"error": self.message, "code": self.code, "details": self.details}


class ValidationException(DomainException):
    """Raised when request data is structurally invalid."""

    status_code = status.HTTP_400_BAD_REQUEST
    default_code = "VALIDATION_ERROR"


class EntitlementException(DomainException):
    """Raised when the salon owner has no active subscription."""

    status_code = status.HTTP_403_FORBIDDEN
    default_code = "SUBSCRIPTION_INACTIVE"


class NotFoundException(DomainException):
    """Raised when a requested resource is not found in the caller's tenant."""

    status_code = status.HTTP_404_NOT_FOUND
    default_code = "NOT_FOUND"


class ConflictException(DomainException):
    status_code = status.HTTP_409_CONFLICT
    default_code = "CONFLICT"


class BookingConflictException(ConflictException):
    """Raised when a slot already holds a non-cancelled appointment."""

    default_code = "BOOKING_CONFLICT"

    def __init__(
        self,
        message: Optional[str] = None,
        *,
        details: Optional[dict[str, Any]] = None,
    ):
        super().__init__(
            message=message or "This time slot is already booked",
            details=details,
        )


class InvalidTransitionException(ConflictException):
    """Raised when a lifecycle action is not allowed from the current status."""

    default_code = "INVALID_TRANSITION"

    def __init__(self, action: str, current_status: str, allowed_actions: list[str]):
        super().__init__(
            message=f"Cannot {action} an appointment that is {current_status}",
            details={
                "action": action,
                "current_status": current_status,
                "allowed_actions": allowed_actions,
            },
        )


class PersistenceException(DomainException):
    """Raised when the data store fails for a reason other than a slot conflict."""

    default_code = "PERSISTENCE_ERROR"

    def __init__(self, message: Optional[str] = None, *, details: Optional[dict[str, Any]] = None):
        super().__init__(
            message=message or "Failed to create appointment",
            details=details,
        )
