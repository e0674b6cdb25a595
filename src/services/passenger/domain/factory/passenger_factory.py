from datetime import date
from typing import cast

from services.passenger.domain.entity import Passenger
from services.passenger.domain.enum import Gender, PassengerType
from services.passenger.domain.factory.passenger_details import PassengerDetails
from services.passenger.domain.service.passenger_validator import (
    age_on,
    validate_passenger,
)
from services.shared.domain.exception import ValidationException


class PassengerFactory:
    """乗客エンティティのファクトリ

    - 入力の検証
    - 乗客区分の既定値（生年月日から決定）
    """

    def create(
        self, details: PassengerDetails, booking_id: int, today: date
    ) -> Passenger:
        validate_passenger(details, today)

        date_of_birth = cast(date, details["date_of_birth"])
        return Passenger(
            booking_id=booking_id,
            first_name=(details["first_name"] or "").strip(),
            last_name=(details["last_name"] or "").strip(),
            date_of_birth=date_of_birth,
            gender=self._parse_gender(details.get("gender")),
            passport_number=(details["passport_number"] or "").strip(),
            nationality=(details["nationality"] or "").strip(),
            passenger_type=self._resolve_type(
                details.get("passenger_type"), date_of_birth, today
            ),
        )

    @staticmethod
    def _parse_gender(value: str | None) -> Gender:
        try:
            return Gender((value or "").strip().upper())
        except ValueError:
            raise ValidationException("gender", f"Invalid gender: {value}") from None

    @staticmethod
    def _resolve_type(
        value: str | None, date_of_birth: date, today: date
    ) -> PassengerType:
        """明示指定がなければ年齢から決める"""
        if value is None or not value.strip():
            return PassengerType.for_age(age_on(date_of_birth, today))
        try:
            return PassengerType(value.strip().upper())
        except ValueError:
            raise ValidationException(
                "passenger_type", f"Invalid passenger type: {value}"
            ) from None
