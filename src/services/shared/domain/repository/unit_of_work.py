from __future__ import annotations

from abc import ABC, abstractmethod
from types import TracebackType
from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from services.booking.domain.repository import BookingRepository
    from services.flight.domain.repository import FlightRepository, UserRepository
    from services.passenger.domain.repository import PassengerRepository
    from services.payment.domain.repository import PaymentRepository


class UnitOfWork(ABC):
    """作業単位（トランザクション境界）

    - with ブロックの最も外側でセッションを開始・終了する（再入可能）
    - commit() を呼ばずに抜けた変更はロールバックされる
    - 例外で抜けた場合もロールバックされ、例外はそのまま伝播する
    """

    flights: FlightRepository
    users: UserRepository
    bookings: BookingRepository
    passengers: PassengerRepository
    payments: PaymentRepository

    def __init__(self) -> None:
        self._depth = 0

    def __enter__(self) -> UnitOfWork:
        if self._depth == 0:
            self._begin()
        self._depth += 1
        return self

    def __exit__(
        self,
        exc_type: type[BaseException] | None,
        exc: BaseException | None,
        tb: TracebackType | None,
    ) -> None:
        self._depth -= 1
        if self._depth > 0:
            return
        try:
            self.rollback()
        finally:
            self._end()

    @abstractmethod
    def _begin(self) -> None:
        """セッションを開始し、リポジトリを束縛する"""
        raise NotImplementedError

    @abstractmethod
    def _end(self) -> None:
        """セッションを閉じる"""
        raise NotImplementedError

    @abstractmethod
    def commit(self) -> None:
        raise NotImplementedError

    @abstractmethod
    def rollback(self) -> None:
        raise NotImplementedError
