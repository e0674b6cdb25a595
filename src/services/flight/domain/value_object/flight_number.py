import re
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class FlightNumber:
    """フライト番号

    航空会社コード（英数字2文字、IATA）+ 便名番号（1-4桁）の形式。
    例: NH001, JL123, W52001
    """

    value: str

    PATTERN: ClassVar[re.Pattern[str]] = re.compile(r"^[A-Z0-9]{2}\d{1,4}$")

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not self.PATTERN.match(normalized) or normalized[:2].isdigit():
            raise ValueError(
                f"Invalid flight number format: {self.value}. "
                "Expected format: AA123 (2-character airline code + 1-4 digits)"
            )
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value

    @property
    def airline_code(self) -> str:
        """航空会社コード（冒頭2文字）"""
        return self.value[:2]
