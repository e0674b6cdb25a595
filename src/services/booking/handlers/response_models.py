from __future__ import annotations

from pydantic import BaseModel

from services.booking.domain.entity import Booking


class BookingData(BaseModel):
    """予約データのレスポンスモデル"""

    id: int | None
    booking_reference: str
    user_id: int
    flight_id: int
    fare_class: str
    passenger_count: int
    total_amount: str
    currency: str
    status: str
    created_at: str
    updated_at: str
    passengers: list[dict] | None = None


def to_booking_data(booking: Booking, passengers: list[dict] | None = None) -> dict:
    """Booking エンティティをレスポンス辞書に変換する"""
    return BookingData(
        id=booking.id,
        booking_reference=booking.reference.value,
        user_id=booking.user_id,
        flight_id=booking.flight_id,
        fare_class=booking.fare_class.value,
        passenger_count=booking.passenger_count,
        total_amount=str(booking.total_amount.amount),
        currency=str(booking.total_amount.currency),
        status=booking.status.value,
        created_at=booking.created_at.isoformat(),
        updated_at=booking.updated_at.isoformat(),
        passengers=passengers,
    ).model_dump()
