from datetime import date, datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator

from services.flight.domain.factory import FlightDetails
from services.shared.utils.validators import to_decimal


class RegisterFlightRequest(BaseModel):
    """フライト登録リクエストスキーマ"""

    flight_number: str = Field(
        ..., min_length=3, max_length=6, examples=["NH001", "JL123"]
    )
    airline_id: int = Field(..., gt=0)
    departure_airport_id: int = Field(..., gt=0)
    arrival_airport_id: int = Field(..., gt=0)
    departure_time: datetime = Field(
        ..., description="出発時刻（ISO 8601形式）", examples=["2025-01-01T10:00:00"]
    )
    arrival_time: datetime = Field(
        ..., description="到着時刻（ISO 8601形式）", examples=["2025-01-01T12:00:00"]
    )
    base_price: Decimal = Field(..., gt=0, description="基本運賃", examples=[300])
    currency: str | None = Field(
        default=None,
        pattern="^[A-Za-z]{3}$",
        description="通貨コード（ISO 4217、省略時は既定通貨）",
    )
    economy_price: Decimal | None = Field(default=None, gt=0)
    business_price: Decimal | None = Field(default=None, gt=0)
    first_class_price: Decimal | None = Field(default=None, gt=0)
    economy_seats: int = Field(..., ge=0)
    business_seats: int = Field(default=0, ge=0)
    first_class_seats: int = Field(default=0, ge=0)
    aircraft: str | None = Field(default=None, max_length=50)

    @field_validator(
        "base_price",
        "economy_price",
        "business_price",
        "first_class_price",
        mode="before",
    )
    @classmethod
    def convert_price_to_decimal(cls, v):
        """Decimalに変換する"""
        return to_decimal(v)

    def to_details(self) -> FlightDetails:
        return {
            "flight_number": self.flight_number,
            "airline_id": self.airline_id,
            "departure_airport_id": self.departure_airport_id,
            "arrival_airport_id": self.arrival_airport_id,
            "departure_time": self.departure_time,
            "arrival_time": self.arrival_time,
            "base_price": self.base_price,
            "currency": self.currency,
            "economy_price": self.economy_price,
            "business_price": self.business_price,
            "first_class_price": self.first_class_price,
            "economy_seats": self.economy_seats,
            "business_seats": self.business_seats,
            "first_class_seats": self.first_class_seats,
            "aircraft": self.aircraft,
        }


class FlightSearchQuery(BaseModel):
    flight_number: str = Field(..., min_length=1)


class FlightOfferSearchQuery(BaseModel):
    """区間・出発日によるフライト検索条件（return_date 指定で往復）"""

    departure_airport_id: int = Field(..., gt=0)
    arrival_airport_id: int = Field(..., gt=0)
    departure_date: date
    return_date: date | None = None
    passengers: int = Field(default=1, ge=1)
    seat_class: str | None = Field(default=None, examples=["ECONOMY", "business"])
    direct_only: bool = False
