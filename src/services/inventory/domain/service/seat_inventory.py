"""座席在庫の計算

フライトが持つ運賃クラス別の3つの座席カウンタに対する関数群。
カウンタの更新はこのモジュールの adjust_seats のみが行う。
"""

from __future__ import annotations

from typing import TYPE_CHECKING, assert_never

from services.inventory.domain.enum import FareClass
from services.shared.domain.exception import InsufficientSeatsException

if TYPE_CHECKING:
    from services.flight.domain.entity import Flight


def available_seats_for_class(flight: Flight, fare_class: FareClass) -> int:
    """指定クラスの空席数（未設定は 0）"""
    match fare_class:
        case FareClass.ECONOMY:
            seats = flight.economy_seats
        case FareClass.BUSINESS:
            seats = flight.business_seats
        case FareClass.FIRST:
            seats = flight.first_class_seats
        case _:
            assert_never(fare_class)
    return seats or 0


def has_enough_seats(flight: Flight, fare_class: FareClass, count: int) -> bool:
    return available_seats_for_class(flight, fare_class) >= count


def adjust_seats(
    flight: Flight, fare_class: FareClass, count: int, restoring: bool
) -> int:
    """座席を消費（restoring=False）または返却（restoring=True）する

    結果は 0 未満にならないよう切り上げる。更新後の空席数を返す。
    """
    change = count if restoring else -count
    new_count = max(0, available_seats_for_class(flight, fare_class) + change)

    match fare_class:
        case FareClass.ECONOMY:
            flight.economy_seats = new_count
        case FareClass.BUSINESS:
            flight.business_seats = new_count
        case FareClass.FIRST:
            flight.first_class_seats = new_count
        case _:
            assert_never(fare_class)
    return new_count


def require_availability(flight: Flight, fare_class: FareClass, count: int) -> None:
    """空席が不足していれば InsufficientSeatsException を送出する"""
    if not has_enough_seats(flight, fare_class, count):
        raise InsufficientSeatsException(
            fare_class=fare_class.value.lower(),
            required=count,
            available=available_seats_for_class(flight, fare_class),
        )
