from datetime import date, datetime, timezone
from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingReference
from services.flight.domain.entity import Flight
from services.flight.domain.value_object import FlightNumber
from services.inventory.domain import FareClass
from services.passenger.domain.entity import Passenger
from services.passenger.domain.enum import Gender, PassengerType
from services.shared.domain import Currency, Money

TODAY = date(2026, 10, 16)


@pytest.fixture
def today():
    """テストで使う固定日付"""
    return TODAY


@pytest.fixture
def mock_uow():
    """UnitOfWork のモックフィクスチャ（各リポジトリも MagicMock）"""
    return MagicMock()


@pytest.fixture
def create_flight():
    """Flight を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        flight_id: int | None = 1,
        flight_number: str = "AA123",
        base_price: Decimal = Decimal("100"),
        economy_seats: int = 10,
        business_seats: int = 4,
        first_class_seats: int = 2,
        economy_price: Decimal | None = None,
        business_price: Decimal | None = None,
        first_class_price: Decimal | None = None,
    ) -> Flight:
        usd = Currency.usd()

        def _money(amount: Decimal | None) -> Money | None:
            return None if amount is None else Money(amount=amount, currency=usd)

        return Flight(
            id=flight_id,
            flight_number=FlightNumber(flight_number),
            airline_id=1,
            departure_airport_id=1,
            arrival_airport_id=2,
            departure_time=datetime(2026, 11, 1, 10, 0, tzinfo=timezone.utc),
            arrival_time=datetime(2026, 11, 1, 13, 30, tzinfo=timezone.utc),
            base_price=Money(amount=base_price, currency=usd),
            economy_price=_money(economy_price),
            business_price=_money(business_price),
            first_class_price=_money(first_class_price),
            total_seats=economy_seats + business_seats + first_class_seats,
            economy_seats=economy_seats,
            business_seats=business_seats,
            first_class_seats=first_class_seats,
        )

    return _factory


@pytest.fixture
def create_booking():
    """Booking を生成する Factory fixture"""

    def _factory(
        status: BookingStatus = BookingStatus.PENDING,
        booking_id: int | None = 10,
        reference: str = "BK17000000000000042",
        fare_class: FareClass = FareClass.ECONOMY,
        passenger_count: int = 2,
        total_amount: Decimal = Decimal("200"),
        flight_id: int = 1,
    ) -> Booking:
        return Booking(
            id=booking_id,
            reference=BookingReference(reference),
            user_id=7,
            flight_id=flight_id,
            fare_class=fare_class,
            passenger_count=passenger_count,
            total_amount=Money(amount=total_amount, currency=Currency.usd()),
            status=status,
        )

    return _factory


@pytest.fixture
def passenger_details():
    """乗客入力（PassengerDetails）を生成する Factory fixture"""

    def _factory(**overrides):
        details = {
            "first_name": "Taro",
            "last_name": "Yamada",
            "date_of_birth": date(1990, 5, 1),
            "gender": "MALE",
            "passport_number": "P123",
            "nationality": "Japan",
        }
        details.update(overrides)
        return details

    return _factory


@pytest.fixture
def create_passenger():
    """Passenger を生成する Factory fixture"""

    def _factory(
        passenger_id: int | None = 100,
        booking_id: int = 10,
        passport_number: str = "P123",
        seat_number=None,
    ) -> Passenger:
        return Passenger(
            id=passenger_id,
            booking_id=booking_id,
            first_name="Taro",
            last_name="Yamada",
            date_of_birth=date(1990, 5, 1),
            gender=Gender.MALE,
            passport_number=passport_number,
            nationality="Japan",
            passenger_type=PassengerType.ADULT,
            seat_number=seat_number,
        )

    return _factory
