from decimal import Decimal
from unittest.mock import MagicMock

import pytest

from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.value_object import TransactionId
from services.shared.domain import Money


@pytest.fixture
def create_payment():
    """Payment を生成する Factory fixture（Factories as fixtures パターン）"""

    def _factory(
        status: PaymentStatus = PaymentStatus.PENDING,
        payment_id: int | None = 50,
        transaction_id: str = "TXN_0123456789ABCDEF",
        booking_id: int = 10,
        amount: Decimal = Decimal("200"),
    ) -> Payment:
        return Payment(
            id=payment_id,
            transaction_id=TransactionId(transaction_id),
            booking_id=booking_id,
            amount=Money.usd(amount),
            method=PaymentMethod.CREDIT_CARD,
            status=status,
        )

    return _factory


@pytest.fixture
def mock_gateway():
    gateway = MagicMock()
    gateway.process_payment.return_value = "Payment successful. Gateway Transaction ID: g-1"
    gateway.process_refund.return_value = "Refund successful. Refund Transaction ID: r-1"
    return gateway
