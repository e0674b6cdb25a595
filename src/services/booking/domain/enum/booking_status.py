from __future__ import annotations

from enum import Enum

from services.shared.domain.exception import ValidationException


class BookingStatus(str, Enum):
    """予約ステータス

    PENDING → CONFIRMED | CANCELLED。COMPLETED は搭乗後に外部から設定される。
    """

    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    CANCELLED = "CANCELLED"
    COMPLETED = "COMPLETED"

    @classmethod
    def parse(cls, value: str) -> BookingStatus:
        """大文字小文字を区別せずに変換する（未知の値は ValidationException）"""
        try:
            return cls(value.strip().upper())
        except ValueError:
            raise ValidationException(
                "status", f"Unknown booking status: {value}"
            ) from None
