from typing import TypeVar

from .entity import Entity

ID = TypeVar("ID")


class AggregateRoot(Entity[ID]):
    """AggregateRoot 基底クラス

    - 配下のエンティティは ID で参照し、オブジェクトグラフを辿らない
    - トランザクション境界 = UnitOfWork
    """

    def __init__(self, id: ID | None = None) -> None:
        super().__init__(id)
