from decimal import Decimal

from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.factory import PaymentFactory
from services.payment.domain.value_object import TransactionId
from services.shared.domain import Currency


class TestPaymentFactory:
    def test_generate_skips_existing_ids(self):
        candidates = iter(
            [
                TransactionId.from_hex("0" * 16),
                TransactionId.from_hex("1" * 16),
            ]
        )
        factory = PaymentFactory(id_source=lambda: next(candidates))

        transaction_id = factory.generate_transaction_id(
            lambda value: value == "TXN_0000000000000000"
        )

        assert transaction_id.value == "TXN_1111111111111111"

    def test_create_pending_payment(self):
        factory = PaymentFactory()

        payment = factory.create(
            transaction_id=TransactionId.random(),
            booking_id=10,
            amount=Decimal("200"),
            currency=Currency.usd(),
            method=PaymentMethod.DEBIT_CARD,
        )

        assert payment.status == PaymentStatus.PENDING
        assert payment.gateway_response is None
        assert payment.amount.amount == Decimal("200")
