from abc import abstractmethod
from datetime import datetime

from services.payment.domain.entity import Payment
from services.payment.domain.enum import PaymentStatus
from services.shared.domain import Repository


class PaymentRepository(Repository[Payment, int]):
    """決済リポジトリのインターフェース"""

    @abstractmethod
    def save(self, payment: Payment) -> Payment:
        """決済を保存する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, payment_id: int) -> Payment | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_transaction_id(self, transaction_id: str) -> Payment | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: int) -> Payment | None:
        """予約の最新の決済を返す"""
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: PaymentStatus) -> list[Payment]:
        raise NotImplementedError

    @abstractmethod
    def find_by_date_range(self, start: datetime, end: datetime) -> list[Payment]:
        """作成日時が start 以上 end 以下の決済"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, payment: Payment) -> None:
        raise NotImplementedError

    @abstractmethod
    def exists_by_transaction_id(self, transaction_id: str) -> bool:
        raise NotImplementedError
