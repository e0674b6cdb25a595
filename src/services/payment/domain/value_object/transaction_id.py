from __future__ import annotations

import re
import uuid
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class TransactionId:
    """決済トランザクションID（Value Object）

    形式: "TXN_" + 16桁の大文字16進数
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^TXN_[0-9A-F]{16}$")

    def __post_init__(self) -> None:
        if not self.PATTERN.match(self.value):
            raise ValueError(f"Invalid transaction ID: {self.value}")

    def __str__(self) -> str:
        return self.value

    @classmethod
    def from_hex(cls, hex_digits: str) -> TransactionId:
        """16進文字列の先頭16文字から生成"""
        return cls(value=f"TXN_{hex_digits[:16].upper()}")

    @classmethod
    def random(cls) -> TransactionId:
        return cls.from_hex(uuid.uuid4().hex)
