from datetime import date

from services.passenger.domain.factory.passenger_details import PassengerDetails
from services.shared.domain.exception import ValidationException

MAX_AGE_YEARS = 120


def age_on(date_of_birth: date, today: date) -> int:
    """満年齢"""
    had_birthday = (today.month, today.day) >= (date_of_birth.month, date_of_birth.day)
    return today.year - date_of_birth.year - (0 if had_birthday else 1)


def _is_blank(value: str | None) -> bool:
    return value is None or not value.strip()


def validate_passenger(details: PassengerDetails, today: date) -> None:
    """乗客入力を検証する

    氏名 → 生年月日 → パスポート番号 → 国籍 → 年齢上限 の順に検査し、
    最初の違反で ValidationException を送出する。
    """
    if _is_blank(details.get("first_name")):
        raise ValidationException("first_name", "First name is required")
    if _is_blank(details.get("last_name")):
        raise ValidationException("last_name", "Last name is required")

    date_of_birth = details.get("date_of_birth")
    if date_of_birth is None:
        raise ValidationException("date_of_birth", "Date of birth is required")
    if date_of_birth > today:
        raise ValidationException(
            "date_of_birth", "Date of birth cannot be in the future"
        )

    if _is_blank(details.get("passport_number")):
        raise ValidationException("passport_number", "Passport number is required")
    if _is_blank(details.get("nationality")):
        raise ValidationException("nationality", "Nationality is required")

    if age_on(date_of_birth, today) > MAX_AGE_YEARS:
        raise ValidationException(
            "date_of_birth", f"Passenger age cannot exceed {MAX_AGE_YEARS} years"
        )
