from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from .currency import Currency


@dataclass(frozen=True)
class Money:
    """金額（通貨情報含む）"""

    amount: Decimal
    currency: Currency

    def __post_init__(self) -> None:
        if self.amount < 0:
            raise ValueError("Amount cannot be negative")

    def __str__(self) -> str:
        return f"{self.amount} {self.currency}"

    def _require_same_currency(self, other: Money) -> None:
        if self.currency != other.currency:
            raise ValueError("Cannot combine money with different currencies")

    def add(self, other: Money) -> Money:
        """金額を加算する"""
        self._require_same_currency(other)
        return Money(amount=self.amount + other.amount, currency=self.currency)

    def multiply(self, factor: int) -> Money:
        """金額を整数倍する（人数分の運賃など）"""
        return Money(amount=self.amount * factor, currency=self.currency)

    def exceeds(self, other: Money) -> bool:
        """他の金額より大きいかどうか"""
        self._require_same_currency(other)
        return self.amount > other.amount

    @classmethod
    def of(cls, amount: Decimal | int | str, currency: Currency | None = None) -> Money:
        """プリミティブ値から Money を生成（通貨省略時は既定通貨）"""
        return cls(Decimal(str(amount)), currency or Currency.default())

    @classmethod
    def usd(cls, amount: Decimal) -> Money:
        """米ドルで Money を生成"""
        return cls(amount, Currency.usd())
