import pytest

from services.booking.domain.enum import BookingStatus
from services.passenger.applications.assign_seat import AssignSeatService
from services.passenger.applications.create_passengers import CreatePassengersService
from services.passenger.applications.passenger_query import PassengerQueryService
from services.passenger.applications.update_passenger import UpdatePassengerService
from services.passenger.domain.value_object import SeatNumber
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)


@pytest.fixture
def update_service(mock_uow, today):
    return UpdatePassengerService(
        mock_uow,
        passenger_service=CreatePassengersService(mock_uow, today=lambda: today),
        today=lambda: today,
    )


class TestUpdatePassengerService:
    def test_update_details(
        self, update_service, mock_uow, create_passenger, create_booking, passenger_details
    ):
        passenger = create_passenger()
        mock_uow.passengers.find_by_id.return_value = passenger
        mock_uow.bookings.find_by_id.return_value = create_booking()
        mock_uow.passengers.find_by_booking_id.return_value = [passenger]

        result = update_service.update(100, passenger_details(last_name="Suzuki"))

        assert result.last_name == "Suzuki"
        mock_uow.passengers.save.assert_called_once_with(passenger)
        mock_uow.commit.assert_called_once()

    def test_update_rejects_passport_of_other_passenger(
        self, update_service, mock_uow, create_passenger, create_booking, passenger_details
    ):
        passenger = create_passenger(passenger_id=100, passport_number="P1")
        other = create_passenger(passenger_id=101, passport_number="P2")
        mock_uow.passengers.find_by_id.return_value = passenger
        mock_uow.bookings.find_by_id.return_value = create_booking()
        mock_uow.passengers.find_by_booking_id.return_value = [passenger, other]

        with pytest.raises(DuplicateResourceException):
            update_service.update(100, passenger_details(passport_number="p2"))

    @pytest.mark.parametrize(
        "status", [BookingStatus.CONFIRMED, BookingStatus.CANCELLED]
    )
    def test_delete_requires_pending_booking(
        self, update_service, mock_uow, create_passenger, create_booking, status
    ):
        mock_uow.passengers.find_by_id.return_value = create_passenger()
        mock_uow.bookings.find_by_id.return_value = create_booking(status=status)

        with pytest.raises(BusinessRuleViolationException):
            update_service.delete(100)

        mock_uow.passengers.delete.assert_not_called()

    def test_delete_missing_passenger(self, update_service, mock_uow):
        mock_uow.passengers.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            update_service.delete(100)


class TestAssignSeatService:
    def test_assign_normalizes_seat(
        self, mock_uow, create_passenger, create_booking
    ):
        passenger = create_passenger()
        mock_uow.passengers.find_by_id.return_value = passenger
        mock_uow.bookings.find_by_id.return_value = create_booking()
        mock_uow.passengers.find_by_flight_id.return_value = [passenger]

        result = AssignSeatService(mock_uow).assign(100, " 12a ")

        assert result.seat_number == SeatNumber("12A")
        mock_uow.passengers.find_by_flight_id.assert_called_once_with(
            1, exclude_cancelled=True
        )
        mock_uow.commit.assert_called_once()

    def test_seat_taken_on_same_flight(
        self, mock_uow, create_passenger, create_booking
    ):
        other = create_passenger(
            passenger_id=200, booking_id=11, seat_number=SeatNumber("12A")
        )
        mock_uow.passengers.find_by_id.return_value = create_passenger()
        mock_uow.bookings.find_by_id.return_value = create_booking()
        mock_uow.passengers.find_by_flight_id.return_value = [other]

        with pytest.raises(DuplicateResourceException, match="12A"):
            AssignSeatService(mock_uow).assign(100, "12A")

    @pytest.mark.parametrize("seat", ["", "   ", None])
    def test_blank_seat(self, mock_uow, seat):
        with pytest.raises(ValidationException):
            AssignSeatService(mock_uow).assign(100, seat)


class TestPassengerQueryService:
    def test_get_missing_passenger(self, mock_uow):
        mock_uow.passengers.find_by_id.return_value = None

        with pytest.raises(ResourceNotFoundException):
            PassengerQueryService(mock_uow).get(1)
