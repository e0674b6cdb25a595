from decimal import Decimal
from typing import Callable

from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentMethod, PaymentStatus
from services.payment.domain.value_object import TransactionId
from services.shared.domain import Currency, Money


class PaymentFactory:
    """決済ファクトリ

    - トランザクションIDの生成（ストアに存在しない値が出るまで再生成する）
    """

    def __init__(
        self, id_source: Callable[[], TransactionId] = TransactionId.random
    ) -> None:
        self._id_source = id_source

    def generate_transaction_id(
        self, exists: Callable[[str], bool]
    ) -> TransactionId:
        """一意なトランザクションIDを生成する"""
        while True:
            transaction_id = self._id_source()
            if not exists(transaction_id.value):
                return transaction_id

    def create(
        self,
        transaction_id: TransactionId,
        booking_id: int,
        amount: Decimal,
        currency: Currency,
        method: PaymentMethod,
    ) -> Payment:
        """新規決済エンティティを生成する（PENDING状態）"""
        return Payment(
            transaction_id=transaction_id,
            booking_id=booking_id,
            amount=Money(amount=amount, currency=currency),
            method=method,
            status=PaymentStatus.PENDING,
        )
