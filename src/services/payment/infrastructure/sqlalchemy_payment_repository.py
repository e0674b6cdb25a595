from datetime import datetime

from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.repository import PaymentRepository
from services.payment.domain.value_object import TransactionId
from services.shared.domain import Currency, Money
from services.shared.infrastructure.orm import PaymentRecord, as_utc


class SqlAlchemyPaymentRepository(PaymentRepository):
    """SQLAlchemy を使用した PaymentRepository の具象実装"""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, payment: Payment) -> Payment:
        record = None
        if payment.id is not None:
            record = self._session.get(PaymentRecord, payment.id)
        if record is None:
            record = PaymentRecord(id=payment.id)
            self._session.add(record)
        self._apply(payment, record)
        self._session.flush()
        payment.assign_id(record.id)
        return payment

    def find_by_id(self, payment_id: int) -> Payment | None:
        record = self._session.get(PaymentRecord, payment_id)
        return self._to_entity(record) if record else None

    def find_by_transaction_id(self, transaction_id: str) -> Payment | None:
        stmt = select(PaymentRecord).where(
            PaymentRecord.transaction_id == transaction_id
        )
        record = self._session.execute(stmt).scalar_one_or_none()
        return self._to_entity(record) if record else None

    def find_by_booking_id(self, booking_id: int) -> Payment | None:
        stmt = (
            select(PaymentRecord)
            .where(PaymentRecord.booking_id == booking_id)
            .order_by(PaymentRecord.id.desc())
            .limit(1)
        )
        record = self._session.execute(stmt).scalar_one_or_none()
        return self._to_entity(record) if record else None

    def find_by_status(self, status: PaymentStatus) -> list[Payment]:
        stmt = (
            select(PaymentRecord)
            .where(PaymentRecord.status == status.value)
            .order_by(PaymentRecord.id)
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def find_by_date_range(self, start: datetime, end: datetime) -> list[Payment]:
        stmt = (
            select(PaymentRecord)
            .where(PaymentRecord.created_at.between(start, end))
            .order_by(PaymentRecord.created_at)
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def delete(self, payment: Payment) -> None:
        if payment.id is None:
            return
        self._session.execute(
            delete(PaymentRecord).where(PaymentRecord.id == payment.id)
        )
        self._session.flush()

    def exists_by_transaction_id(self, transaction_id: str) -> bool:
        return self.find_by_transaction_id(transaction_id) is not None

    def _apply(self, payment: Payment, record: PaymentRecord) -> None:
        record.transaction_id = payment.transaction_id.value
        record.booking_id = payment.booking_id
        record.amount = payment.amount.amount
        record.currency = payment.amount.currency.code
        record.payment_method = payment.method.value
        record.status = payment.status.value
        record.gateway_response = payment.gateway_response
        record.created_at = payment.created_at
        record.updated_at = payment.updated_at

    def _to_entity(self, record: PaymentRecord) -> Payment:
        return Payment(
            id=record.id,
            transaction_id=TransactionId(record.transaction_id),
            booking_id=record.booking_id,
            amount=Money(amount=record.amount, currency=Currency(record.currency)),
            method=PaymentMethod(record.payment_method),
            status=PaymentStatus(record.status),
            gateway_response=record.gateway_response,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
