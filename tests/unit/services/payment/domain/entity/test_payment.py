from decimal import Decimal

import pytest

from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.shared.domain import Money
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    ValidationException,
)


class TestPayment:
    """Payment Entity のテスト"""

    def test_succeed_records_response(self, create_payment):
        payment = create_payment()

        payment.succeed("ok")

        assert payment.status == PaymentStatus.SUCCESS
        assert payment.gateway_response == "ok"

    def test_fail_records_error(self, create_payment):
        payment = create_payment()

        payment.fail("Insufficient funds")

        assert payment.status == PaymentStatus.FAILED
        assert payment.gateway_response == "Insufficient funds"

    def test_cannot_succeed_twice(self, create_payment):
        payment = create_payment(status=PaymentStatus.SUCCESS)
        with pytest.raises(BusinessRuleViolationException):
            payment.succeed("ok")

    def test_refund_successful_payment(self, create_payment):
        payment = create_payment(status=PaymentStatus.SUCCESS)

        payment.refund(Money.usd(Decimal("150")), "refunded")

        assert payment.status == PaymentStatus.REFUNDED

    @pytest.mark.parametrize(
        "status", [PaymentStatus.PENDING, PaymentStatus.FAILED, PaymentStatus.REFUNDED]
    )
    def test_only_successful_payment_is_refundable(self, create_payment, status):
        payment = create_payment(status=status)

        with pytest.raises(
            BusinessRuleViolationException,
            match=f"Payment cannot be refunded. Current status: {status.value}",
        ):
            payment.ensure_refundable(Money.usd(Decimal("1")))

    def test_refund_cannot_exceed_original(self, create_payment):
        payment = create_payment(status=PaymentStatus.SUCCESS, amount=Decimal("200"))

        with pytest.raises(
            BusinessRuleViolationException,
            match="Refund amount cannot exceed original payment amount",
        ):
            payment.refund(Money.usd(Decimal("200.01")), "refunded")

        assert payment.status == PaymentStatus.SUCCESS


class TestPaymentMethod:
    def test_parse_is_case_insensitive(self):
        assert PaymentMethod.parse("paypal") == PaymentMethod.PAYPAL

    def test_unknown_method(self):
        with pytest.raises(ValidationException):
            PaymentMethod.parse("CASH")
