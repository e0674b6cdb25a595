from decimal import Decimal

from aws_lambda_powertools import Logger

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.domain.enum import BookingStatus
from services.payment.domain.entity import Payment
from services.payment.domain.gateway import GatewayError, PaymentGateway
from services.shared.domain import Money, UnitOfWork
from services.shared.domain.exception import (
    PaymentGatewayException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class RefundPaymentService:
    """払い戻しユースケース

    払い戻し成功時は予約をキャンセルし、座席を返却する。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        gateway: PaymentGateway,
        cancel_service: CancelBookingService,
    ) -> None:
        self._uow = uow
        self._gateway = gateway
        self._cancel_service = cancel_service

    def refund(self, transaction_id: str, amount: Decimal | None = None) -> Payment:
        """払い戻しを行う（金額省略時は全額）"""
        logger.info("Refunding payment", extra={"transaction_id": transaction_id})

        with self._uow:
            payment = self._uow.payments.find_by_transaction_id(transaction_id)
            if payment is None:
                raise ResourceNotFoundException(
                    f"Payment not found with transaction ID: {transaction_id}"
                )
            refund_amount = (
                payment.amount
                if amount is None
                else Money(amount=amount, currency=payment.amount.currency)
            )
            payment.ensure_refundable(refund_amount)

            try:
                response = self._gateway.process_refund(
                    transaction_id, refund_amount.amount
                )
            except GatewayError as e:
                logger.error(
                    "Refund failed",
                    extra={"transaction_id": transaction_id, "error": str(e)},
                )
                raise PaymentGatewayException(f"Refund processing failed: {e}") from e

            payment.refund(refund_amount, response)
            self._uow.payments.save(payment)

            booking = self._uow.bookings.find_by_id(payment.booking_id)
            if booking is not None and booking.status != BookingStatus.CANCELLED:
                self._cancel_service.cancel(booking.reference.value)
            self._uow.commit()

        logger.info("Refund successful", extra={"transaction_id": transaction_id})
        return payment
