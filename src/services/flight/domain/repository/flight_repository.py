from abc import abstractmethod
from datetime import datetime

from services.flight.domain.entity import Flight
from services.shared.domain import Repository


class FlightRepository(Repository[Flight, int]):
    """フライトリポジトリのインターフェース"""

    @abstractmethod
    def save(self, flight: Flight) -> Flight:
        """フライトを保存する（座席カウンタ・ステータスを含む）"""
        raise NotImplementedError

    @abstractmethod
    def find_by_id(self, flight_id: int, for_update: bool = False) -> Flight | None:
        """IDで検索する

        for_update=True の場合、トランザクション終了まで行ロックを取得する。
        """
        raise NotImplementedError

    @abstractmethod
    def find_by_flight_number(self, flight_number: str) -> Flight | None:
        raise NotImplementedError

    @abstractmethod
    def exists_by_id(self, flight_id: int) -> bool:
        raise NotImplementedError

    @abstractmethod
    def exists_by_flight_number(self, flight_number: str) -> bool:
        raise NotImplementedError

    @abstractmethod
    def find_available(
        self,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_from: datetime,
        departure_until: datetime,
    ) -> list[Flight]:
        """区間・出発時刻の範囲 [from, until) で空席のある運航中フライトを検索する"""
        raise NotImplementedError

    @abstractmethod
    def find_upcoming(self, after: datetime) -> list[Flight]:
        """指定時刻より後に出発する運航中フライト（出発時刻順）"""
        raise NotImplementedError
