from datetime import datetime
from decimal import Decimal
from typing import NotRequired, TypedDict

from services.flight.domain.entity import Flight
from services.flight.domain.enum import FlightStatus
from services.flight.domain.value_object import FlightNumber
from services.shared.domain import Currency, Money


class FlightDetails(TypedDict):
    """フライト登録の入力データ構造"""

    flight_number: str
    airline_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: datetime
    arrival_time: datetime
    base_price: Decimal
    economy_seats: int
    business_seats: int
    first_class_seats: int
    currency: NotRequired[str | None]
    economy_price: NotRequired[Decimal | None]
    business_price: NotRequired[Decimal | None]
    first_class_price: NotRequired[Decimal | None]
    aircraft: NotRequired[str | None]


class FlightFactory:
    """フライトエンティティのファクトリ

    - プリミティブ型から Value Object への変換
    - 総座席数はクラス別座席数の合計
    - 初期状態は SCHEDULED / active
    """

    def create(self, details: FlightDetails) -> Flight:
        """新規フライトエンティティを生成する"""
        currency_code = details.get("currency")
        currency = Currency(currency_code) if currency_code else Currency.default()

        def _optional_price(key: str) -> Money | None:
            amount = details.get(key)
            return None if amount is None else Money(amount=amount, currency=currency)

        economy = details["economy_seats"]
        business = details["business_seats"]
        first = details["first_class_seats"]

        return Flight(
            flight_number=FlightNumber(details["flight_number"]),
            airline_id=details["airline_id"],
            departure_airport_id=details["departure_airport_id"],
            arrival_airport_id=details["arrival_airport_id"],
            departure_time=details["departure_time"],
            arrival_time=details["arrival_time"],
            base_price=Money(amount=details["base_price"], currency=currency),
            economy_price=_optional_price("economy_price"),
            business_price=_optional_price("business_price"),
            first_class_price=_optional_price("first_class_price"),
            total_seats=economy + business + first,
            economy_seats=economy,
            business_seats=business,
            first_class_seats=first,
            status=FlightStatus.SCHEDULED,
            active=True,
            aircraft=details.get("aircraft"),
        )
