from sqlalchemy import delete, select
from sqlalchemy.orm import Session

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.repository import BookingRepository
from services.booking.domain.value_object import BookingReference
from services.inventory.domain import FareClass
from services.shared.domain import Currency, Money
from services.shared.infrastructure.orm import (
    BookingRecord,
    PassengerRecord,
    PaymentRecord,
    as_utc,
)


class SqlAlchemyBookingRepository(BookingRepository):
    """SQLAlchemy を使用した BookingRepository の具象実装"""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, booking: Booking) -> Booking:
        record = None
        if booking.id is not None:
            record = self._session.get(BookingRecord, booking.id)
        if record is None:
            record = BookingRecord(id=booking.id)
            self._session.add(record)
        self._apply(booking, record)
        self._session.flush()
        booking.assign_id(record.id)
        return booking

    def find_by_id(self, booking_id: int) -> Booking | None:
        record = self._session.get(BookingRecord, booking_id)
        return self._to_entity(record) if record else None

    def find_by_reference(self, reference: str) -> Booking | None:
        stmt = select(BookingRecord).where(
            BookingRecord.booking_reference == reference.strip().upper()
        )
        record = self._session.execute(stmt).scalar_one_or_none()
        return self._to_entity(record) if record else None

    def find_by_user_id(self, user_id: int) -> list[Booking]:
        stmt = (
            select(BookingRecord)
            .where(BookingRecord.user_id == user_id)
            .order_by(BookingRecord.created_at.desc(), BookingRecord.id.desc())
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def find_by_status(self, status: BookingStatus) -> list[Booking]:
        stmt = (
            select(BookingRecord)
            .where(BookingRecord.status == status.value)
            .order_by(BookingRecord.id)
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def delete(self, booking: Booking) -> None:
        if booking.id is None:
            return
        self._session.execute(
            delete(PassengerRecord).where(PassengerRecord.booking_id == booking.id)
        )
        self._session.execute(
            delete(PaymentRecord).where(PaymentRecord.booking_id == booking.id)
        )
        self._session.execute(
            delete(BookingRecord).where(BookingRecord.id == booking.id)
        )
        self._session.flush()

    def exists_by_reference(self, reference: str) -> bool:
        return self.find_by_reference(reference) is not None

    def _apply(self, booking: Booking, record: BookingRecord) -> None:
        record.booking_reference = booking.reference.value
        record.user_id = booking.user_id
        record.flight_id = booking.flight_id
        record.fare_class = booking.fare_class.value
        record.passenger_count = booking.passenger_count
        record.total_amount = booking.total_amount.amount
        record.currency = booking.total_amount.currency.code
        record.status = booking.status.value
        record.created_at = booking.created_at
        record.updated_at = booking.updated_at

    def _to_entity(self, record: BookingRecord) -> Booking:
        return Booking(
            id=record.id,
            reference=BookingReference(record.booking_reference),
            user_id=record.user_id,
            flight_id=record.flight_id,
            fare_class=FareClass(record.fare_class),
            passenger_count=record.passenger_count,
            total_amount=Money(
                amount=record.total_amount, currency=Currency(record.currency)
            ),
            status=BookingStatus(record.status),
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
