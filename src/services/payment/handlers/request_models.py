from datetime import datetime
from decimal import Decimal

from pydantic import BaseModel, Field, field_validator, model_validator

from services.shared.utils.validators import to_decimal, to_utc


class ProcessPaymentRequest(BaseModel):
    """決済処理リクエストモデル"""

    booking_id: int = Field(..., gt=0)
    amount: Decimal = Field(
        ...,
        gt=0,
        description="決済金額（0より大きい値）",
    )
    payment_method: str = Field(
        ...,
        description="CREDIT_CARD / DEBIT_CARD / PAYPAL / BANK_TRANSFER",
        examples=["CREDIT_CARD"],
    )
    payment_details: dict[str, str] = Field(default_factory=dict)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)


class RefundPaymentRequest(BaseModel):
    """払い戻しリクエストモデル（金額省略時は全額）"""

    amount: Decimal | None = Field(default=None, gt=0)

    @field_validator("amount", mode="before")
    @classmethod
    def convert_amount_to_decimal(cls, v):
        return to_decimal(v)


class PaymentSearchQuery(BaseModel):
    """決済検索条件（status / booking_id / 期間のいずれか）"""

    status: str | None = None
    booking_id: int | None = Field(default=None, gt=0)
    start: datetime | None = None
    end: datetime | None = None

    @field_validator("start", "end")
    @classmethod
    def normalize_timezone(cls, v: datetime | None) -> datetime | None:
        return None if v is None else to_utc(v)

    @model_validator(mode="after")
    def require_complete_range(self):
        if (self.start is None) != (self.end is None):
            raise ValueError("start and end must be given together")
        return self
