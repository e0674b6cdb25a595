from __future__ import annotations

from enum import Enum

# 年齢区分の境界（未満）
INFANT_AGE_LIMIT = 2
CHILD_AGE_LIMIT = 12


class PassengerType(str, Enum):
    """乗客区分（運賃クラスとは独立）"""

    ADULT = "ADULT"
    CHILD = "CHILD"
    INFANT = "INFANT"

    @classmethod
    def for_age(cls, age: int) -> PassengerType:
        """年齢から乗客区分を決める（2歳未満: INFANT, 12歳未満: CHILD）"""
        if age < INFANT_AGE_LIMIT:
            return cls.INFANT
        if age < CHILD_AGE_LIMIT:
            return cls.CHILD
        return cls.ADULT
