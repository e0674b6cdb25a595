from datetime import date
from typing import NotRequired, TypedDict


class PassengerDetails(TypedDict):
    """乗客の入力データ構造（検証前）"""

    first_name: str | None
    last_name: str | None
    date_of_birth: date | None
    gender: str | None
    passport_number: str | None
    nationality: str | None
    passenger_type: NotRequired[str | None]
