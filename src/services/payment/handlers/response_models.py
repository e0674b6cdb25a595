from __future__ import annotations

from pydantic import BaseModel

from services.payment.domain.entity import Payment


class PaymentData(BaseModel):
    """決済データのレスポンスモデル"""

    id: int | None
    transaction_id: str
    booking_id: int
    amount: str
    currency: str
    payment_method: str
    status: str
    gateway_response: str | None
    created_at: str
    updated_at: str


def to_payment_data(payment: Payment) -> dict:
    """Payment エンティティをレスポンス辞書に変換する"""
    return PaymentData(
        id=payment.id,
        transaction_id=payment.transaction_id.value,
        booking_id=payment.booking_id,
        amount=str(payment.amount.amount),
        currency=str(payment.amount.currency),
        payment_method=payment.method.value,
        status=payment.status.value,
        gateway_response=payment.gateway_response,
        created_at=payment.created_at.isoformat(),
        updated_at=payment.updated_at.isoformat(),
    ).model_dump()
