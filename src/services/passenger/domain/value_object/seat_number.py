from dataclasses import dataclass


@dataclass(frozen=True)
class SeatNumber:
    """座席番号（前後の空白を除去し大文字に正規化）

    例: "12A"
    """

    value: str

    def __post_init__(self) -> None:
        normalized = self.value.strip().upper()
        if not normalized:
            raise ValueError("Seat number cannot be blank")
        object.__setattr__(self, "value", normalized)

    def __str__(self) -> str:
        return self.value
