from __future__ import annotations

import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class BookingReference:
    """予約番号（利用者向けの一意な文字列）

    形式: "BK" + エポックミリ秒 + 4桁のゼロ埋め乱数
    例: "BK17000000000000042"
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^BK\d{5,}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized):
            raise ValueError(f"Invalid booking reference: {self.value}")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_parts(cls, epoch_millis: int, suffix: int) -> BookingReference:
        """エポックミリ秒と乱数サフィックスから生成"""
        return cls(value=f"BK{epoch_millis}{suffix:04d}")
