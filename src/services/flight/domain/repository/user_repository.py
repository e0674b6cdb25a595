from abc import ABC, abstractmethod

from services.flight.domain.entity import User


class UserRepository(ABC):
    """利用者リポジトリのインターフェース（参照のみ）"""

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        raise NotImplementedError
