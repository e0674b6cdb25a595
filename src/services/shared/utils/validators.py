from datetime import datetime, timezone
from decimal import Decimal, InvalidOperation


def to_decimal(v: object) -> Decimal | None:
    """任意の値を Decimal に変換する

    Pydantic の field_validator (mode="before") から呼び出すことを想定。
    すでに Decimal の場合や None の場合はそのまま返し、それ以外は str 経由で変換する。
    """
    if v is None or isinstance(v, Decimal):
        return v
    try:
        return Decimal(str(v))
    except InvalidOperation:
        raise ValueError(f"Invalid decimal value: {v}") from None


def to_utc(v: datetime) -> datetime:
    """タイムゾーンなしの日時は UTC とみなし、ありの場合は UTC に変換する"""
    if v.tzinfo is None:
        return v.replace(tzinfo=timezone.utc)
    return v.astimezone(timezone.utc)
