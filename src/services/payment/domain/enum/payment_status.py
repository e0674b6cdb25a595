from __future__ import annotations

from enum import Enum

from services.shared.domain.exception import ValidationException


class PaymentStatus(str, Enum):
    """決済ステータス

    PENDING → SUCCESS | FAILED、SUCCESS → REFUNDED
    """

    PENDING = "PENDING"
    SUCCESS = "SUCCESS"
    FAILED = "FAILED"
    REFUNDED = "REFUNDED"

    @classmethod
    def parse(cls, value: str) -> PaymentStatus:
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValidationException(
                "status", f"Unknown payment status: {value}"
            ) from None
