from .exceptions import (
    BookingCreationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InsufficientSeatsException,
    PaymentGatewayException,
    ResourceNotFoundException,
    ValidationException,
)

__all__ = [
    "DomainException",
    "ResourceNotFoundException",
    "BusinessRuleViolationException",
    "DuplicateResourceException",
    "ValidationException",
    "InsufficientSeatsException",
    "PaymentGatewayException",
    "BookingCreationException",
]
