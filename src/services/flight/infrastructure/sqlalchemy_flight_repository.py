from datetime import datetime
from decimal import Decimal

from sqlalchemy import or_, select
from sqlalchemy.orm import Session

from services.flight.domain.entity import Flight
from services.flight.domain.enum import FlightStatus
from services.flight.domain.repository import FlightRepository
from services.flight.domain.value_object import FlightNumber
from services.shared.domain import Currency, Money
from services.shared.infrastructure.orm import FlightRecord


class SqlAlchemyFlightRepository(FlightRepository):
    """SQLAlchemy を使用した FlightRepository の具象実装"""

    def __init__(self, session: Session) -> None:
        self._session = session

    def save(self, flight: Flight) -> Flight:
        record = None
        if flight.id is not None:
            record = self._session.get(FlightRecord, flight.id)
        if record is None:
            record = FlightRecord(id=flight.id)
            self._session.add(record)
        self._apply(flight, record)
        self._session.flush()
        flight.assign_id(record.id)
        return flight

    def find_by_id(self, flight_id: int, for_update: bool = False) -> Flight | None:
        stmt = select(FlightRecord).where(FlightRecord.id == flight_id)
        if for_update:
            # SQLite では FOR UPDATE は出力されない
            stmt = stmt.with_for_update().execution_options(populate_existing=True)
        record = self._session.execute(stmt).scalar_one_or_none()
        return self._to_entity(record) if record else None

    def find_by_flight_number(self, flight_number: str) -> Flight | None:
        stmt = select(FlightRecord).where(
            FlightRecord.flight_number == flight_number.strip().upper()
        )
        record = self._session.execute(stmt).scalar_one_or_none()
        return self._to_entity(record) if record else None

    def exists_by_id(self, flight_id: int) -> bool:
        return self._session.get(FlightRecord, flight_id) is not None

    def exists_by_flight_number(self, flight_number: str) -> bool:
        return self.find_by_flight_number(flight_number) is not None

    def find_available(
        self,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_from: datetime,
        departure_until: datetime,
    ) -> list[Flight]:
        stmt = (
            select(FlightRecord)
            .where(
                FlightRecord.departure_airport_id == departure_airport_id,
                FlightRecord.arrival_airport_id == arrival_airport_id,
                FlightRecord.departure_time >= departure_from,
                FlightRecord.departure_time < departure_until,
                FlightRecord.active.is_(True),
                or_(
                    FlightRecord.economy_seats > 0,
                    FlightRecord.business_seats > 0,
                    FlightRecord.first_class_seats > 0,
                ),
            )
            .order_by(FlightRecord.departure_time)
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    def find_upcoming(self, after: datetime) -> list[Flight]:
        stmt = (
            select(FlightRecord)
            .where(FlightRecord.departure_time > after, FlightRecord.active.is_(True))
            .order_by(FlightRecord.departure_time)
        )
        return [self._to_entity(r) for r in self._session.execute(stmt).scalars()]

    @staticmethod
    def _amount(money: Money | None) -> Decimal | None:
        return money.amount if money else None

    def _apply(self, flight: Flight, record: FlightRecord) -> None:
        """ドメインエンティティの状態をレコードに反映する"""
        record.flight_number = flight.flight_number.value
        record.airline_id = flight.airline_id
        record.departure_airport_id = flight.departure_airport_id
        record.arrival_airport_id = flight.arrival_airport_id
        record.departure_time = flight.departure_time
        record.arrival_time = flight.arrival_time
        record.duration_minutes = flight.duration_minutes
        record.currency = flight.base_price.currency.code
        record.base_price = flight.base_price.amount
        record.economy_price = self._amount(flight.economy_price)
        record.business_price = self._amount(flight.business_price)
        record.first_class_price = self._amount(flight.first_class_price)
        record.total_seats = flight.total_seats
        record.economy_seats = flight.economy_seats
        record.business_seats = flight.business_seats
        record.first_class_seats = flight.first_class_seats
        record.status = flight.status.value
        record.active = flight.active
        record.aircraft = flight.aircraft

    def _to_entity(self, record: FlightRecord) -> Flight:
        """レコードをドメインエンティティに変換する"""
        currency = Currency(record.currency)

        def money(amount: Decimal | None) -> Money | None:
            return Money(amount=amount, currency=currency) if amount is not None else None

        return Flight(
            id=record.id,
            flight_number=FlightNumber(record.flight_number),
            airline_id=record.airline_id,
            departure_airport_id=record.departure_airport_id,
            arrival_airport_id=record.arrival_airport_id,
            departure_time=record.departure_time,
            arrival_time=record.arrival_time,
            base_price=Money(amount=record.base_price, currency=currency),
            economy_price=money(record.economy_price),
            business_price=money(record.business_price),
            first_class_price=money(record.first_class_price),
            total_seats=record.total_seats,
            economy_seats=record.economy_seats or 0,
            business_seats=record.business_seats or 0,
            first_class_seats=record.first_class_seats or 0,
            status=FlightStatus(record.status),
            active=record.active,
            aircraft=record.aircraft,
        )
