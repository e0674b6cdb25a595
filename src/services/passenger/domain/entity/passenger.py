from datetime import date, datetime, timezone

from services.passenger.domain.enum import Gender, PassengerType
from services.passenger.domain.value_object import SeatNumber
from services.shared.domain import Entity


class Passenger(Entity[int]):
    """乗客

    所属する予約は booking_id で参照する。
    座席番号は明示的に割り当てられるまで None。
    """

    def __init__(
        self,
        booking_id: int,
        first_name: str,
        last_name: str,
        date_of_birth: date,
        gender: Gender,
        passport_number: str,
        nationality: str,
        passenger_type: PassengerType,
        seat_number: SeatNumber | None = None,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        id: int | None = None,
    ) -> None:
        super().__init__(id)
        self._booking_id = booking_id
        self._first_name = first_name
        self._last_name = last_name
        self._date_of_birth = date_of_birth
        self._gender = gender
        self._passport_number = passport_number
        self._nationality = nationality
        self._passenger_type = passenger_type
        self._seat_number = seat_number
        self._created_at = created_at or datetime.now(timezone.utc)
        self._updated_at = updated_at or self._created_at

    @property
    def booking_id(self) -> int:
        return self._booking_id

    @property
    def first_name(self) -> str:
        return self._first_name

    @property
    def last_name(self) -> str:
        return self._last_name

    @property
    def date_of_birth(self) -> date:
        return self._date_of_birth

    @property
    def gender(self) -> Gender:
        return self._gender

    @property
    def passport_number(self) -> str:
        return self._passport_number

    @property
    def nationality(self) -> str:
        return self._nationality

    @property
    def passenger_type(self) -> PassengerType:
        return self._passenger_type

    @property
    def seat_number(self) -> SeatNumber | None:
        return self._seat_number

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    def has_passport(self, passport_number: str) -> bool:
        """パスポート番号が一致するか（大文字小文字を区別しない）"""
        return self._passport_number.strip().upper() == passport_number.strip().upper()

    def assign_seat(self, seat_number: SeatNumber) -> None:
        self._seat_number = seat_number
        self._updated_at = datetime.now(timezone.utc)

    def update_details(self, other: "Passenger") -> None:
        """他のエンティティ（入力から生成したもの）の個人情報で上書きする"""
        self._first_name = other.first_name
        self._last_name = other.last_name
        self._date_of_birth = other.date_of_birth
        self._gender = other.gender
        self._passport_number = other.passport_number
        self._nationality = other.nationality
        self._passenger_type = other.passenger_type
        self._updated_at = datetime.now(timezone.utc)
