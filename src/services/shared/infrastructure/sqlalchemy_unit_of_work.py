from sqlalchemy.orm import Session, sessionmaker

from services.booking.infrastructure.sqlalchemy_booking_repository import (
    SqlAlchemyBookingRepository,
)
from services.flight.infrastructure.sqlalchemy_flight_repository import (
    SqlAlchemyFlightRepository,
)
from services.flight.infrastructure.sqlalchemy_user_repository import (
    SqlAlchemyUserRepository,
)
from services.passenger.infrastructure.sqlalchemy_passenger_repository import (
    SqlAlchemyPassengerRepository,
)
from services.payment.infrastructure.sqlalchemy_payment_repository import (
    SqlAlchemyPaymentRepository,
)
from services.shared.domain import UnitOfWork
from services.shared.infrastructure.database import get_session_factory


class SqlAlchemyUnitOfWork(UnitOfWork):
    """SQLAlchemy セッションを用いた UnitOfWork 実装

    session_factory 未指定の場合は環境変数から構成したファクトリを使う。
    """

    def __init__(self, session_factory: sessionmaker[Session] | None = None) -> None:
        super().__init__()
        self._session_factory = session_factory
        self._session: Session | None = None

    @property
    def session(self) -> Session:
        if self._session is None:
            raise RuntimeError("Unit of work is not active")
        return self._session

    def _begin(self) -> None:
        factory = self._session_factory or get_session_factory()
        self._session = factory()
        self.flights = SqlAlchemyFlightRepository(self._session)
        self.users = SqlAlchemyUserRepository(self._session)
        self.bookings = SqlAlchemyBookingRepository(self._session)
        self.passengers = SqlAlchemyPassengerRepository(self._session)
        self.payments = SqlAlchemyPaymentRepository(self._session)

    def _end(self) -> None:
        self.session.close()
        self._session = None

    def commit(self) -> None:
        self.session.commit()

    def rollback(self) -> None:
        self.session.rollback()
