from abc import ABC, abstractmethod
from decimal import Decimal

from services.payment.domain.enum import PaymentMethod


class GatewayError(Exception):
    """決済ゲートウェイが処理エラーを返した場合"""

    pass


class PaymentGateway(ABC):
    """外部決済ゲートウェイのインターフェース"""

    @abstractmethod
    def process_payment(
        self,
        transaction_id: str,
        amount: Decimal,
        method: PaymentMethod,
        details: dict[str, str],
    ) -> str:
        """決済を実行し、ゲートウェイの応答テキストを返す"""
        raise NotImplementedError

    @abstractmethod
    def process_refund(self, transaction_id: str, amount: Decimal) -> str:
        """払い戻しを実行し、ゲートウェイの応答テキストを返す"""
        raise NotImplementedError
