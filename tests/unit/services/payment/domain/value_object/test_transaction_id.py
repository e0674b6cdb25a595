import pytest

from services.payment.domain.value_object import TransactionId


class TestTransactionId:
    def test_random_format(self):
        transaction_id = TransactionId.random()
        assert TransactionId.PATTERN.match(transaction_id.value)

    def test_from_hex_uses_first_sixteen_digits(self):
        transaction_id = TransactionId.from_hex("0123456789abcdef0123")
        assert transaction_id.value == "TXN_0123456789ABCDEF"

    def test_invalid_value(self):
        with pytest.raises(ValueError):
            TransactionId("TXN_123")
