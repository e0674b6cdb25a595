from abc import abstractmethod

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.shared.domain import Repository


class BookingRepository(Repository[Booking, int]):
    """予約リポジトリのインターフェース"""

    @abstractmethod
    def save(self, booking: Booking) -> Booking:
        """予約を保存する（新規の場合は ID を採番する）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, booking_id: int) -> Booking | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_reference(self, reference: str) -> Booking | None:
        """予約番号で検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_by_user_id(self, user_id: int) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def find_by_status(self, status: BookingStatus) -> list[Booking]:
        raise NotImplementedError

    @abstractmethod
    def delete(self, booking: Booking) -> None:
        """予約を削除する（配下の乗客・決済も削除される）"""
        raise NotImplementedError

    @abstractmethod
    def exists_by_reference(self, reference: str) -> bool:
        raise NotImplementedError
