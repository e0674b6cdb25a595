from __future__ import annotations

from enum import Enum


class FareClass(str, Enum):
    """運賃クラス（クラスごとに独立した座席在庫と運賃を持つ）"""

    ECONOMY = "ECONOMY"
    BUSINESS = "BUSINESS"
    FIRST = "FIRST"

    @classmethod
    def parse(cls, value: str | FareClass | None) -> FareClass:
        """文字列から運賃クラスへ変換する

        大文字小文字・前後の空白を無視する。
        空文字・未知の値は ECONOMY として扱う（後方互換のため例外にしない）。
        """
        if isinstance(value, FareClass):
            return value
        if value is None:
            return cls.ECONOMY
        try:
            return cls(value.strip().upper())
        except ValueError:
            return cls.ECONOMY
