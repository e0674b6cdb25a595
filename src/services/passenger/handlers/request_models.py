from datetime import date

from pydantic import BaseModel, Field

from services.passenger.domain.factory import PassengerDetails


class PassengerRequest(BaseModel):
    """乗客の入力スキーマ

    必須項目の欠落はドメインの検証で扱うため、ここでは任意とする。
    """

    first_name: str | None = Field(default=None, max_length=100, examples=["Taro"])
    last_name: str | None = Field(default=None, max_length=100, examples=["Yamada"])
    date_of_birth: date | None = Field(default=None, examples=["1990-05-01"])
    gender: str | None = Field(default=None, examples=["MALE", "female"])
    passport_number: str | None = Field(
        default=None, max_length=50, examples=["TK1234567"]
    )
    nationality: str | None = Field(default=None, max_length=100, examples=["Japan"])
    passenger_type: str | None = Field(
        default=None, description="ADULT / CHILD / INFANT（省略時は年齢から決定）"
    )

    def to_details(self) -> PassengerDetails:
        return {
            "first_name": self.first_name,
            "last_name": self.last_name,
            "date_of_birth": self.date_of_birth,
            "gender": self.gender,
            "passport_number": self.passport_number,
            "nationality": self.nationality,
            "passenger_type": self.passenger_type,
        }


class AssignSeatRequest(BaseModel):
    """座席割り当てリクエスト"""

    seat_number: str = Field(..., max_length=10, examples=["12A"])


class PassengerSearchQuery(BaseModel):
    passport_number: str = Field(..., min_length=1)
