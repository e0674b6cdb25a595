from __future__ import annotations

from pydantic import BaseModel

from services.flight.applications.search_flights import FlightOffer, FlightSearchResult
from services.flight.domain.entity import Flight
from services.inventory.domain import FareClass, price_for_class
from services.shared.domain import Money


class FlightData(BaseModel):
    """フライトデータのレスポンスモデル"""

    id: int | None
    flight_number: str
    airline_id: int
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: str
    arrival_time: str
    duration_minutes: int
    currency: str
    base_price: str
    economy_price: str
    business_price: str
    first_class_price: str
    total_seats: int
    available_seats: int
    economy_seats: int
    business_seats: int
    first_class_seats: int
    status: str
    active: bool
    aircraft: str | None


def _amount(money: Money) -> str:
    return str(money.amount)


def to_flight_data(flight: Flight) -> dict:
    """Flight エンティティをレスポンス辞書に変換する（クラス別運賃は適用後の値）"""
    return FlightData(
        id=flight.id,
        flight_number=flight.flight_number.value,
        airline_id=flight.airline_id,
        departure_airport_id=flight.departure_airport_id,
        arrival_airport_id=flight.arrival_airport_id,
        departure_time=flight.departure_time.isoformat(),
        arrival_time=flight.arrival_time.isoformat(),
        duration_minutes=flight.duration_minutes,
        currency=str(flight.base_price.currency),
        base_price=_amount(flight.base_price),
        economy_price=_amount(price_for_class(flight, FareClass.ECONOMY)),
        business_price=_amount(price_for_class(flight, FareClass.BUSINESS)),
        first_class_price=_amount(price_for_class(flight, FareClass.FIRST)),
        total_seats=flight.total_seats,
        available_seats=flight.available_seats,
        economy_seats=flight.economy_seats,
        business_seats=flight.business_seats,
        first_class_seats=flight.first_class_seats,
        status=flight.status.value,
        active=flight.active,
        aircraft=flight.aircraft,
    ).model_dump()


class FlightOfferData(BaseModel):
    """検索結果1件のレスポンスモデル（運賃・空席は指定クラスの値）"""

    id: int | None
    flight_number: str
    departure_airport_id: int
    arrival_airport_id: int
    departure_time: str
    arrival_time: str
    duration_minutes: int
    seat_class: str
    price: str
    currency: str
    available_seats: int
    aircraft: str | None


def to_flight_offer_data(offer: FlightOffer) -> dict:
    flight = offer.flight
    return FlightOfferData(
        id=flight.id,
        flight_number=flight.flight_number.value,
        departure_airport_id=flight.departure_airport_id,
        arrival_airport_id=flight.arrival_airport_id,
        departure_time=flight.departure_time.isoformat(),
        arrival_time=flight.arrival_time.isoformat(),
        duration_minutes=flight.duration_minutes,
        seat_class=offer.fare_class.value,
        price=_amount(offer.price),
        currency=str(offer.price.currency),
        available_seats=offer.available_seats,
        aircraft=flight.aircraft,
    ).model_dump()


def to_search_result_data(result: FlightSearchResult) -> dict:
    return {
        "outbound_flights": [to_flight_offer_data(o) for o in result.outbound],
        "return_flights": (
            [to_flight_offer_data(o) for o in result.inbound]
            if result.inbound is not None
            else None
        ),
        "is_round_trip": result.is_round_trip,
    }
