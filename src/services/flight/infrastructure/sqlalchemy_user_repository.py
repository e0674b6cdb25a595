from sqlalchemy.orm import Session

from services.flight.domain.entity import User
from services.flight.domain.repository import UserRepository
from services.shared.infrastructure.orm import UserRecord


class SqlAlchemyUserRepository(UserRepository):
    """SQLAlchemy を使用した UserRepository の具象実装"""

    def __init__(self, session: Session) -> None:
        self._session = session

    def find_by_id(self, user_id: int) -> User | None:
        record = self._session.get(UserRecord, user_id)
        if record is None:
            return None
        return User(id=record.id, email=record.email, name=record.name)
