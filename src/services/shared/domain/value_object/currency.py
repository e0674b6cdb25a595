from __future__ import annotations

import os
from dataclasses import dataclass
from typing import ClassVar


@dataclass(frozen=True)
class Currency:
    """通貨コード（ISO 4217）

    サポート対象: EUR, JPY, USD
    """

    SUPPORTED: ClassVar[frozenset[str]] = frozenset({"EUR", "JPY", "USD"})

    code: str

    def __post_init__(self) -> None:
        normalized = self.code.strip().upper()
        if normalized not in self.SUPPORTED:
            raise ValueError(
                f"Unsupported currency: {self.code}. "
                f"Supported: {', '.join(sorted(self.SUPPORTED))}"
            )
        object.__setattr__(self, "code", normalized)

    def __str__(self) -> str:
        return self.code

    @classmethod
    def default(cls) -> Currency:
        """環境変数 DEFAULT_CURRENCY で指定された通貨（未指定時は USD）"""
        return cls(os.getenv("DEFAULT_CURRENCY", "USD"))

    @classmethod
    def usd(cls) -> Currency:
        """米ドル"""
        return cls("USD")
