from services.shared.domain import Entity


class User(Entity[int]):
    """予約を所有する利用者（参照専用）"""

    def __init__(self, id: int, email: str, name: str | None = None) -> None:
        super().__init__(id)
        self._email = email
        self._name = name

    @property
    def email(self) -> str:
        return self._email

    @property
    def name(self) -> str | None:
        return self._name
