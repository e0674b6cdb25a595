from __future__ import annotations

from enum import Enum

from services.shared.domain.exception import ValidationException


class PaymentMethod(str, Enum):
    """支払い方法"""

    CREDIT_CARD = "CREDIT_CARD"
    DEBIT_CARD = "DEBIT_CARD"
    PAYPAL = "PAYPAL"
    BANK_TRANSFER = "BANK_TRANSFER"

    @classmethod
    def parse(cls, value: str | PaymentMethod) -> PaymentMethod:
        if isinstance(value, PaymentMethod):
            return value
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValidationException(
                "payment_method", f"Unsupported payment method: {value}"
            ) from None
