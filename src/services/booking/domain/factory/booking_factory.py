import random
import time
from typing import Callable, Protocol

from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingReference
from services.inventory.domain import FareClass
from services.shared.domain import Money


class RandomSource(Protocol):
    def randrange(self, stop: int) -> int: ...


class BookingFactory:
    """フライト予約エンティティのファクトリ

    - 予約番号の生成（ストアに存在しない値が出るまで再生成する）
    - 初期状態の設定（PENDING）
    """

    SUFFIX_SPACE = 10_000

    def __init__(
        self,
        clock: Callable[[], float] = time.time,
        rng: RandomSource | None = None,
    ) -> None:
        self._clock = clock
        self._rng = rng or random.Random()

    def generate_reference(
        self, exists: Callable[[str], bool]
    ) -> BookingReference:
        """一意な予約番号を生成する

        Args:
            exists: 予約番号がストアに存在するかを返す関数

        Returns:
            BookingReference: ストアに存在しない予約番号
        """
        while True:
            reference = BookingReference.from_parts(
                epoch_millis=int(self._clock() * 1000),
                suffix=self._rng.randrange(self.SUFFIX_SPACE),
            )
            if not exists(reference.value):
                return reference

    def create(
        self,
        reference: BookingReference,
        user_id: int,
        flight_id: int,
        fare_class: FareClass,
        passenger_count: int,
        total_amount: Money,
    ) -> Booking:
        """新規予約エンティティを生成する（PENDING状態）"""
        return Booking(
            reference=reference,
            user_id=user_id,
            flight_id=flight_id,
            fare_class=fare_class,
            passenger_count=passenger_count,
            total_amount=total_amount,
            status=BookingStatus.PENDING,
        )
