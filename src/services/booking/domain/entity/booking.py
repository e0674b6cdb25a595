from datetime import datetime, timezone

from services.booking.domain.enum import BookingStatus
from services.booking.domain.value_object import BookingReference
from services.inventory.domain import FareClass
from services.shared.domain import AggregateRoot, Money
from services.shared.domain.exception import BusinessRuleViolationException


class Booking(AggregateRoot[int]):
    """フライト予約

    利用者・フライトは ID で参照する。
    乗客・決済はそれぞれのストアが booking_id で保持する。
    """

    def __init__(
        self,
        reference: BookingReference,
        user_id: int,
        flight_id: int,
        fare_class: FareClass,
        passenger_count: int,
        total_amount: Money,
        status: BookingStatus = BookingStatus.PENDING,
        created_at: datetime | None = None,
        updated_at: datetime | None = None,
        id: int | None = None,
    ) -> None:
        super().__init__(id)

        self._reference = reference
        self._user_id = user_id
        self._flight_id = flight_id
        self._fare_class = fare_class
        self._passenger_count = passenger_count
        self._total_amount = total_amount
        self._status = status
        self._created_at = created_at or datetime.now(timezone.utc)
        self._updated_at = updated_at or self._created_at

    @property
    def reference(self) -> BookingReference:
        return self._reference

    @property
    def user_id(self) -> int:
        return self._user_id

    @property
    def flight_id(self) -> int:
        return self._flight_id

    @property
    def fare_class(self) -> FareClass:
        return self._fare_class

    @property
    def passenger_count(self) -> int:
        return self._passenger_count

    @property
    def total_amount(self) -> Money:
        return self._total_amount

    @property
    def status(self) -> BookingStatus:
        return self._status

    @property
    def created_at(self) -> datetime:
        return self._created_at

    @property
    def updated_at(self) -> datetime:
        return self._updated_at

    @property
    def is_pending(self) -> bool:
        return self._status == BookingStatus.PENDING

    def _touch(self) -> None:
        self._updated_at = datetime.now(timezone.utc)

    def ensure_pending(self, action: str) -> None:
        """PENDING 以外での変更操作を拒否する"""
        if not self.is_pending:
            raise BusinessRuleViolationException(
                f"Cannot {action} for booking {self._reference} "
                f"in {self._status.value} status"
            )

    def confirm(self) -> bool:
        """予約を確定する

        確定済みの場合は何もしない（False を返す）。
        """
        if self._status == BookingStatus.CONFIRMED:
            return False
        if self._status == BookingStatus.CANCELLED:
            raise BusinessRuleViolationException("Cannot confirm a cancelled booking")
        if self._status != BookingStatus.PENDING:
            raise BusinessRuleViolationException(
                f"Cannot confirm booking in {self._status.value} status"
            )
        self._status = BookingStatus.CONFIRMED
        self._touch()
        return True

    def cancel(self) -> None:
        """予約をキャンセルする"""
        if self._status == BookingStatus.CANCELLED:
            raise BusinessRuleViolationException("Booking is already cancelled")
        if self._status == BookingStatus.COMPLETED:
            raise BusinessRuleViolationException("Cannot cancel a completed booking")
        self._status = BookingStatus.CANCELLED
        self._touch()

    def revise(
        self, fare_class: FareClass, passenger_count: int, total_amount: Money
    ) -> None:
        """運賃クラス・人数・合計金額を変更する（PENDING のみ）"""
        self.ensure_pending("update booking")
        self._fare_class = fare_class
        self._passenger_count = passenger_count
        self._total_amount = total_amount
        self._touch()
