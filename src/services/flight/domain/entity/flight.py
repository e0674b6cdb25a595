from datetime import datetime

from services.flight.domain.enum import FlightStatus
from services.flight.domain.value_object import FlightNumber
from services.shared.domain import AggregateRoot, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Flight(AggregateRoot[int]):
    """フライト

    座席在庫は運賃クラスごとの3つのカウンタで管理する。
    カウンタの増減は services.inventory の座席在庫関数経由でのみ行う。
    """

    def __init__(
        self,
        flight_number: FlightNumber,
        airline_id: int,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_time: datetime,
        arrival_time: datetime,
        base_price: Money,
        total_seats: int,
        economy_seats: int,
        business_seats: int,
        first_class_seats: int,
        economy_price: Money | None = None,
        business_price: Money | None = None,
        first_class_price: Money | None = None,
        status: FlightStatus = FlightStatus.SCHEDULED,
        active: bool = True,
        aircraft: str | None = None,
        id: int | None = None,
    ) -> None:
        super().__init__(id)

        self._flight_number = flight_number
        self._airline_id = airline_id
        self._departure_airport_id = departure_airport_id
        self._arrival_airport_id = arrival_airport_id
        self._departure_time = departure_time
        self._arrival_time = arrival_time
        self._base_price = base_price
        self._economy_price = economy_price
        self._business_price = business_price
        self._first_class_price = first_class_price
        self._total_seats = total_seats
        self._economy_seats = 0
        self._business_seats = 0
        self._first_class_seats = 0
        self._status = status
        self._active = active
        self._aircraft = aircraft

        self.economy_seats = economy_seats
        self.business_seats = business_seats
        self.first_class_seats = first_class_seats

        self._validate_schedule()

    def _validate_schedule(self) -> None:
        """出発時刻 < 到着時刻"""
        if self._departure_time >= self._arrival_time:
            raise BusinessRuleViolationException(
                "Departure time must be before arrival time"
            )

    @staticmethod
    def _non_negative(name: str, value: int) -> int:
        if value < 0:
            raise ValueError(f"{name} cannot be negative")
        return value

    @property
    def flight_number(self) -> FlightNumber:
        return self._flight_number

    @property
    def airline_id(self) -> int:
        return self._airline_id

    @property
    def departure_airport_id(self) -> int:
        return self._departure_airport_id

    @property
    def arrival_airport_id(self) -> int:
        return self._arrival_airport_id

    @property
    def departure_time(self) -> datetime:
        return self._departure_time

    @property
    def arrival_time(self) -> datetime:
        return self._arrival_time

    @property
    def duration_minutes(self) -> int:
        """飛行時間（分）"""
        return int((self._arrival_time - self._departure_time).total_seconds() // 60)

    @property
    def base_price(self) -> Money:
        return self._base_price

    @property
    def economy_price(self) -> Money | None:
        return self._economy_price

    @property
    def business_price(self) -> Money | None:
        return self._business_price

    @property
    def first_class_price(self) -> Money | None:
        return self._first_class_price

    @property
    def total_seats(self) -> int:
        return self._total_seats

    @property
    def economy_seats(self) -> int:
        return self._economy_seats

    @economy_seats.setter
    def economy_seats(self, value: int) -> None:
        self._economy_seats = self._non_negative("economy_seats", value)

    @property
    def business_seats(self) -> int:
        return self._business_seats

    @business_seats.setter
    def business_seats(self, value: int) -> None:
        self._business_seats = self._non_negative("business_seats", value)

    @property
    def first_class_seats(self) -> int:
        return self._first_class_seats

    @first_class_seats.setter
    def first_class_seats(self, value: int) -> None:
        self._first_class_seats = self._non_negative("first_class_seats", value)

    @property
    def available_seats(self) -> int:
        """全クラスの空席数（3つのカウンタの合計から導出）"""
        return self._economy_seats + self._business_seats + self._first_class_seats

    @property
    def status(self) -> FlightStatus:
        return self._status

    @property
    def active(self) -> bool:
        return self._active

    @property
    def aircraft(self) -> str | None:
        return self._aircraft

    def deactivate(self) -> None:
        """論理削除する"""
        self._active = False
