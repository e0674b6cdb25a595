from __future__ import annotations

from pydantic import BaseModel

from services.passenger.domain.entity import Passenger


class PassengerData(BaseModel):
    """乗客データのレスポンスモデル"""

    id: int | None
    booking_id: int
    first_name: str
    last_name: str
    date_of_birth: str
    gender: str
    passport_number: str
    nationality: str
    passenger_type: str
    seat_number: str | None


def to_passenger_data(passenger: Passenger) -> dict:
    """Passenger エンティティをレスポンス辞書に変換する"""
    return PassengerData(
        id=passenger.id,
        booking_id=passenger.booking_id,
        first_name=passenger.first_name,
        last_name=passenger.last_name,
        date_of_birth=passenger.date_of_birth.isoformat(),
        gender=passenger.gender.value,
        passport_number=passenger.passport_number,
        nationality=passenger.nationality,
        passenger_type=passenger.passenger_type.value,
        seat_number=str(passenger.seat_number) if passenger.seat_number else None,
    ).model_dump()
