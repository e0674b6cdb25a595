from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from services.inventory.domain.enum import FareClass
from services.shared.domain import Money

if TYPE_CHECKING:
    from services.flight.domain.entity import Flight

# 個別運賃が未設定の場合の基本運賃に対する倍率
CLASS_MULTIPLIERS: dict[FareClass, int] = {
    FareClass.ECONOMY: 1,
    FareClass.BUSINESS: 2,
    FareClass.FIRST: 3,
}


def price_for_class(flight: Flight, fare_class: FareClass) -> Money:
    """1席あたりの運賃（個別運賃があればそれを、なければ基本運賃 × 倍率）"""
    match fare_class:
        case FareClass.ECONOMY:
            override = flight.economy_price
        case FareClass.BUSINESS:
            override = flight.business_price
        case FareClass.FIRST:
            override = flight.first_class_price
        case _:
            assert_never(fare_class)

    if override is not None:
        return override
    return flight.base_price.multiply(CLASS_MULTIPLIERS[fare_class])


def total_price(flight: Flight, fare_class: FareClass, passenger_count: int) -> Money:
    """予約の合計金額"""
    return price_for_class(flight, fare_class).multiply(passenger_count)
