from datetime import datetime, timezone

from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.value_object import TransactionId
from services.shared.domain import AggregateRoot, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Payment(AggregateRoot[int]):
    """決済エンティティ"""

    def __init__(
        self,
        transaction_id: TransactionId,
        booking_id: int,
        amount: Money,
        method: PaymentMethod,
        status: PaymentStatus = PaymentStatus.PENDING,
        gateway_response: str | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        id: int | None = None,
    ) -> None:
        super().__init__(id)
        self._transaction_id = transaction_id
        self._booking_id = booking_id
        self._amount = amount
        self._method = method
        self._status = status
        self._gateway_response = gateway_response
        self._created_at = created_at or datetime.now(timezone.utc)
        self._updated_at = updated_at or self._created_at

    @property
    def transaction_id(self) -> TransactionId:
        return self._transaction_id

    @property
    def booking_id(self) -> int:
        return self._booking_id

    @property
    def amount(self) -> Money:
        return self._amount

    @property
    def method(self) -> PaymentMethod:
        return self._method

    @property
    def status(self) -> PaymentStatus:
        return self._status

    @property
    def gateway_response(self) -> str | None:
        return self._gateway_response

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def _transition(self, status: PaymentStatus, gateway_response: str) -> None:
        self._status = status
        self._gateway_response = gateway_response
        self._updated_at = datetime.now(timezone.utc)

    def succeed(self, gateway_response: str) -> None:
        """決済を成功にする"""
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot complete payment in {self._status.value} status"
            )
        self._transition(PaymentStatus.SUCCESS, gateway_response)

    def fail(self, error_message: str) -> None:
        """決済を失敗にする（同じトランザクションIDでの再試行はしない）"""
        if self._status != PaymentStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot fail payment in {self._status.value} status"
            )
        self._transition(PaymentStatus.FAILED, error_message)

    def ensure_refundable(self, refund_amount: Money) -> None:
        """払い戻し可能か検査する（SUCCESS かつ元の金額以下）"""
        if self._status != PaymentStatus.SUCCESS:
            raise BusinessRuleViolationException(
                f"Payment cannot be refunded. Current status: {self._status.value}"
            )
        if refund_amount.exceeds(self._amount):
            raise BusinessRuleViolationException(
                "Refund amount cannot exceed original payment amount"
            )

    def refund(self, refund_amount: Money, gateway_response: str) -> None:
        """払い戻しを行う"""
        self.ensure_refundable(refund_amount)
        self._transition(PaymentStatus.REFUNDED, gateway_response)
