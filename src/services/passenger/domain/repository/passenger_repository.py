from abc import abstractmethod

from services.passenger.domain.entity import Passenger
from services.shared.domain import Repository


class PassengerRepository(Repository[Passenger, int]):
    """乗客リポジトリのインターフェース"""

    @abstractmethod
    def save(self, passenger: Passenger) -> Passenger:
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, passenger_id: int) -> Passenger | None:
        raise NotImplementedError

    @abstractmethod
    def find_by_booking_id(self, booking_id: int) -> list[Passenger]:
        raise NotImplementedError

    @abstractmethod
    def find_by_flight_id(
        self, flight_id: int, exclude_cancelled: bool = False
    ) -> list[Passenger]:
        """フライトの乗客を予約経由で検索する

        exclude_cancelled=True の場合、キャンセル済み予約の乗客を除く。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_passport_number(self, passport_number: str) -> list[Passenger]:
        """パスポート番号で検索する（大文字小文字を区別しない）"""
        raise NotImplementedError

    @abstractmethod
    def delete(self, passenger: Passenger) -> None:
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, passenger_id: int) -> bool:
        raise NotImplementedError
