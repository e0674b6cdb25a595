from decimal import Decimal

from aws_lambda_powertools import Logger

from services.booking.applications.confirm_booking import ConfirmBookingService
from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.factory import PaymentFactory
from services.payment.domain.gateway import GatewayError, PaymentGateway
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    PaymentGatewayException,
    ResourceNotFoundException,
)

logger = Logger(child=True)


class ProcessPaymentService:
    """決済処理ユースケース

    PENDING の決済レコードをコミットしてからゲートウェイを呼び出す。
    成功時は予約を確定し、失敗時は FAILED をコミットしたうえで例外を送出する。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        gateway: PaymentGateway,
        confirm_service: ConfirmBookingService,
        factory: PaymentFactory | None = None,
    ) -> None:
        self._uow = uow
        self._gateway = gateway
        self._confirm_service = confirm_service
        self._factory = factory or PaymentFactory()

    def process(
        self,
        booking_id: int,
        amount: Decimal,
        method: PaymentMethod | str,
        details: dict[str, str] | None = None,
    ) -> Payment:
        logger.info("Processing payment", extra={"booking_id": booking_id})
        payment_method = PaymentMethod.parse(method)

        with self._uow:
            booking = self._uow.bookings.find_by_id(booking_id)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found with ID: {booking_id}")
            if not booking.is_pending:
                raise BusinessRuleViolationException(
                    "Booking must be in PENDING status for payment"
                )
            latest = self._uow.payments.find_by_booking_id(booking_id)
            if latest is not None and latest.status == PaymentStatus.SUCCESS:
                raise BusinessRuleViolationException(
                    "Payment already completed for this booking"
                )

            transaction_id = self._factory.generate_transaction_id(
                self._uow.payments.exists_by_transaction_id
            )
            payment = self._factory.create(
                transaction_id=transaction_id,
                booking_id=booking_id,
                amount=amount,
                currency=booking.total_amount.currency,
                method=payment_method,
            )
            self._uow.payments.save(payment)
            self._uow.commit()

            try:
                response = self._gateway.process_payment(
                    transaction_id.value, amount, payment_method, details or {}
                )
            except GatewayError as e:
                logger.error(
                    "Payment failed",
                    extra={"transaction_id": transaction_id.value, "error": str(e)},
                )
                payment.fail(str(e))
                self._uow.payments.save(payment)
                self._uow.commit()
                raise PaymentGatewayException(f"Payment processing failed: {e}") from e

            payment.succeed(response)
            self._uow.payments.save(payment)
            self._confirm_service.confirm(booking.reference.value)
            self._uow.commit()

        logger.info(
            "Payment successful", extra={"transaction_id": transaction_id.value}
        )
        return payment
