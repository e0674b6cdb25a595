from unittest.mock import MagicMock

import pytest

from services.flight.domain.entity import User


@pytest.fixture
def booking_uow(mock_uow, create_flight):
    """予約ユースケース用の UnitOfWork モック

    - 利用者・フライトは存在する
    - 予約番号は重複しない
    - 保存時に ID を採番する
    """
    flight = create_flight(economy_seats=10)
    mock_uow.users.find_by_id.return_value = User(id=7, email="user@example.com")
    mock_uow.flights.find_by_id.return_value = flight
    mock_uow.bookings.exists_by_reference.return_value = False

    def _save(booking):
        if booking.id is None:
            booking.assign_id(10)
        return booking

    mock_uow.bookings.save.side_effect = _save
    mock_uow.flight = flight
    return mock_uow


@pytest.fixture
def passenger_service():
    return MagicMock()
