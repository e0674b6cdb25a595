from abc import ABC
from typing import Generic, TypeVar

ID = TypeVar("ID")


class Entity(ABC, Generic[ID]):
    """Entity 基底クラス

    ID はストアが採番するため、永続化前は None となる。
    """

    def __init__(self, id: ID | None = None) -> None:
        self._id = id

    @property
    def id(self) -> ID | None:
        return self._id

    def assign_id(self, id: ID) -> None:
        """ストアが採番した ID を設定する（一度だけ）"""
        if self._id is not None and self._id != id:
            raise ValueError(f"{type(self).__name__} already has id {self._id}")
        self._id = id

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if self._id is None or other._id is None:
            return self is other
        return self._id == other._id

    def __hash__(self) -> int:
        if self._id is None:
            return id(self)
        return hash((type(self).__name__, self._id))
