from decimal import Decimal

import pytest

from services.booking.applications.update_booking import UpdateBookingService
from services.booking.domain.enum import BookingStatus
from services.inventory.domain import FareClass
from services.shared.domain import Money
from services.shared.domain.exception import (
    BusinessRuleViolationException,
    InsufficientSeatsException,
)


class TestUpdateBookingService:
    def test_change_fare_class_moves_seats(
        self, mock_uow, passenger_service, create_booking, create_flight
    ):
        booking = create_booking(fare_class=FareClass.ECONOMY, passenger_count=2)
        flight = create_flight(economy_seats=8, business_seats=4)
        mock_uow.bookings.find_by_reference.return_value = booking
        mock_uow.flights.find_by_id.return_value = flight
        service = UpdateBookingService(mock_uow, passenger_service=passenger_service)

        result = service.update(booking.reference.value, fare_class="business")

        assert result.fare_class == FareClass.BUSINESS
        assert result.total_amount == Money.usd(Decimal("400"))
        assert flight.economy_seats == 10
        assert flight.business_seats == 2
        passenger_service.replace_passengers.assert_not_called()
        mock_uow.commit.assert_called_once()

    def test_replace_passengers_recomputes_total(
        self, mock_uow, passenger_service, create_booking, create_flight, passenger_details
    ):
        booking = create_booking(passenger_count=2)
        flight = create_flight(economy_seats=8)
        mock_uow.bookings.find_by_reference.return_value = booking
        mock_uow.flights.find_by_id.return_value = flight
        service = UpdateBookingService(mock_uow, passenger_service=passenger_service)
        passengers = [
            passenger_details(passport_number="A1"),
            passenger_details(passport_number="A2"),
            passenger_details(passport_number="A3"),
        ]

        result = service.update(booking.reference.value, passengers=passengers)

        assert result.passenger_count == 3
        assert result.total_amount == Money.usd(Decimal("300"))
        assert flight.economy_seats == 7
        passenger_service.replace_passengers.assert_called_once_with(passengers, 10)

    def test_new_class_without_availability(
        self, mock_uow, passenger_service, create_booking, create_flight
    ):
        booking = create_booking(passenger_count=2)
        mock_uow.bookings.find_by_reference.return_value = booking
        mock_uow.flights.find_by_id.return_value = create_flight(first_class_seats=1)
        service = UpdateBookingService(mock_uow, passenger_service=passenger_service)

        with pytest.raises(InsufficientSeatsException):
            service.update(booking.reference.value, fare_class=FareClass.FIRST)

        assert booking.fare_class == FareClass.ECONOMY
        mock_uow.flights.save.assert_not_called()
        mock_uow.commit.assert_not_called()

    def test_confirmed_booking_cannot_be_updated(
        self, mock_uow, passenger_service, create_booking
    ):
        mock_uow.bookings.find_by_reference.return_value = create_booking(
            status=BookingStatus.CONFIRMED
        )
        service = UpdateBookingService(mock_uow, passenger_service=passenger_service)

        with pytest.raises(BusinessRuleViolationException):
            service.update("BK17000000000000042", fare_class="FIRST")
