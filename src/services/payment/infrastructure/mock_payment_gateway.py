import os
import random
import time
import uuid
from decimal import Decimal
from typing import Callable

from aws_lambda_powertools import Logger

from services.payment.domain.enum import PaymentMethod
from services.payment.domain.gateway import GatewayError, PaymentGateway

logger = Logger(child=True)


class MockPaymentGateway(PaymentGateway):
    """外部決済ゲートウェイのモック

    応答遅延と一定割合の失敗をシミュレートする。
    遅延・失敗率・乱数源は注入可能（未指定時は環境変数から）。
    """

    def __init__(
        self,
        latency_seconds: float | None = None,
        failure_rate: float | None = None,
        rng: random.Random | None = None,
        sleep: Callable[[float], None] = time.sleep,
    ) -> None:
        if latency_seconds is None:
            latency_seconds = float(os.getenv("PAYMENT_GATEWAY_LATENCY_SECONDS", "1.0"))
        if failure_rate is None:
            failure_rate = float(os.getenv("PAYMENT_GATEWAY_FAILURE_RATE", "0.1"))
        self._latency_seconds = latency_seconds
        self._failure_rate = failure_rate
        self._rng = rng or random.Random()
        self._sleep = sleep

    def process_payment(
        self,
        transaction_id: str,
        amount: Decimal,
        method: PaymentMethod,
        details: dict[str, str],
    ) -> str:
        logger.info(
            "Processing payment",
            extra={
                "transaction_id": transaction_id,
                "amount": str(amount),
                "payment_method": method.value,
            },
        )
        self._sleep(self._latency_seconds)

        if self._rng.random() < self._failure_rate:
            raise GatewayError("Payment gateway returned error: Insufficient funds")

        return f"Payment successful. Gateway Transaction ID: {uuid.uuid4()}"

    def process_refund(self, transaction_id: str, amount: Decimal) -> str:
        logger.info(
            "Processing refund",
            extra={"transaction_id": transaction_id, "amount": str(amount)},
        )
        self._sleep(self._latency_seconds / 2)
        return f"Refund successful. Refund Transaction ID: {uuid.uuid4()}"
