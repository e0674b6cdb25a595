from sqlalchemy import delete, func, select
from sqlalchemy.orm import Session

from services.booking.domain.enum import BookingStatus
from services.passenger.domain.entity import Passenger
from services.passenger.domain.enum import Gender, PassengerType
from services.passenger.domain.repository import PassengerRepository
from services.passenger.domain.value_object import SeatNumber
from services.shared.infrastructure.orm import BookingRecord, PassengerRecord, as_utc


class SqlAlchemyPassengerRepository(PassengerRepository):
    """SQLAlchemy を使用した PassengerRepository の具象実装"""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, passenger: Passenger) -> Passenger:
        record = None
        if passenger.id is not None:
            record = self._session.get(PassengerRecord, passenger.id)
        if record is None:
            record = PassengerRecord(id=passenger.id)
            self._session.add(record)
        self._apply(passenger, record)
        self._session.flush()
        passenger.assign_id(record.id)
        return passenger

    def find_by_id(self, passenger_id: int) -> Passenger | None:
        record = self._session.get(PassengerRecord, passenger_id)
        return self._to_entity(record) if record else None

    def find_by_booking_id(self, booking_id: int) -> list[Passenger]:
        stmt = (
            select(PassengerRecord)
            .where(PassengerRecord.booking_id == booking_id)
            .order_by(PassengerRecord.id)
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def find_by_flight_id(
        self, flight_id: int, exclude_cancelled: bool = False
    ) -> list[Passenger]:
        stmt = (
            select(PassengerRecord)
            .join(BookingRecord, PassengerRecord.booking_id == BookingRecord.id)
            .where(BookingRecord.flight_id == flight_id)
        )
        if exclude_cancelled:
            stmt = stmt.where(BookingRecord.status != BookingStatus.CANCELLED.value)
        stmt = stmt.order_by(PassengerRecord.id)
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def find_by_passport_number(self, passport_number: str) -> list[Passenger]:
        stmt = (
            select(PassengerRecord)
            .where(
                func.upper(PassengerRecord.passport_number)
                == passport_number.strip().upper()
            )
            .order_by(PassengerRecord.id)
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def delete(self, passenger: Passenger) -> None:
        if passenger.id is None:
            return
        self._session.execute(
            delete(PassengerRecord).where(PassengerRecord.id == passenger.id)
        )
        self._session.flush()

    def exists_by_id(self, passenger_id: int) -> bool:
        return self._session.get(PassengerRecord, passenger_id) is not None

    def _apply(self, passenger: Passenger, record: PassengerRecord) -> None:
        record.booking_id = passenger.booking_id
        record.first_name = passenger.first_name
        record.last_name = passenger.last_name
        record.date_of_birth = passenger.date_of_birth
        record.gender = passenger.gender.value
        record.passport_number = passenger.passport_number
        record.nationality = passenger.nationality
        record.passenger_type = passenger.passenger_type.value
        record.seat_number = passenger.seat_number.value if passenger.seat_number else None
        record.created_at = passenger.created_at
        record.updated_at = passenger.updated_at

    def _to_entity(self, record: PassengerRecord) -> Passenger:
        return Passenger(
            id=record.id,
            booking_id=record.booking_id,
            first_name=record.first_name,
            last_name=record.last_name,
            date_of_birth=record.date_of_birth,
            gender=Gender(record.gender),
            passport_number=record.passport_number,
            nationality=record.nationality,
            passenger_type=PassengerType(record.passenger_type),
            seat_number=SeatNumber(record.seat_number) if record.seat_number else None,
            created_at=as_utc(record.created_at),
            updated_at=as_utc(record.updated_at),
        )
