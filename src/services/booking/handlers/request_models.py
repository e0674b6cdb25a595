from pydantic import BaseModel, Field

from services.passenger.handlers.request_models import PassengerRequest


class CreateBookingRequest(BaseModel):
    """予約作成リクエストスキーマ"""

    flight_id: int = Field(..., gt=0, description="フライトID", examples=[1])
    fare_class: str | None = Field(
        default=None,
        description="運賃クラス（ECONOMY / BUSINESS / FIRST、省略・不明時は ECONOMY）",
        examples=["economy", "BUSINESS"],
    )
    passengers: list[PassengerRequest] = Field(..., min_length=1)

    model_config = {
        "json_schema_extra": {
            "examples": [
                {
                    "flight_id": 1,
                    "fare_class": "ECONOMY",
                    "passengers": [
                        {
                            "first_name": "Taro",
                            "last_name": "Yamada",
                            "date_of_birth": "1990-05-01",
                            "gender": "MALE",
                            "passport_number": "TK1234567",
                            "nationality": "Japan",
                        }
                    ],
                }
            ]
        }
    }


class UpdateBookingRequest(BaseModel):
    """予約変更リクエストスキーマ（指定した項目のみ変更）"""

    fare_class: str | None = None
    passengers: list[PassengerRequest] | None = None


class BookingSearchQuery(BaseModel):
    status: str | None = None
