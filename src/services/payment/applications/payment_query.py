from datetime import datetime

from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentStatus
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import (
    ResourceNotFoundException,
    ValidationException,
)


class PaymentQueryService:
    """決済の参照系ユースケース"""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get_by_transaction_id(self, transaction_id: str) -> Payment:
        with self._uow:
            payment = self._uow.payments.find_by_transaction_id(transaction_id)
        if payment is None:
            raise ResourceNotFoundException(
                f"Payment not found for transaction ID: {transaction_id}"
            )
        return payment

    def get_by_booking_id(self, booking_id: int) -> Payment:
        with self._uow:
            payment = self._uow.payments.find_by_booking_id(booking_id)
        if payment is None:
            raise ResourceNotFoundException(
                f"Payment not found for booking ID: {booking_id}"
            )
        return payment

    def get_by_status(self, status: str) -> list[Payment]:
        payment_status = PaymentStatus.parse(status)
        with self._uow:
            return self._uow.payments.find_by_status(payment_status)

    def get_by_date_range(self, start: datetime, end: datetime) -> list[Payment]:
        if start > end:
            raise ValidationException("start", "Start date must not be after end date")
        with self._uow:
            return self._uow.payments.find_by_date_range(start, end)
