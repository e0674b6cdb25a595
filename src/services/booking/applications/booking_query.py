from services.booking.domain.entity import Booking
from services.booking.domain.enum import BookingStatus
from services.passenger.domain.entity import Passenger
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import ResourceNotFoundException


class BookingQueryService:
    """予約の参照系ユースケース"""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get_by_reference(self, reference: str) -> Booking:
        with self._uow:
            booking = self._uow.bookings.find_by_reference(reference)
        if booking is None:
            raise ResourceNotFoundException(f"Booking not found: {reference}")
        return booking

    def get_by_user(self, user_id: int) -> list[Booking]:
        with self._uow:
            return self._uow.bookings.find_by_user_id(user_id)

    def get_by_status(self, status: str) -> list[Booking]:
        """ステータス文字列は大文字小文字を区別しない"""
        booking_status = BookingStatus.parse(status)
        with self._uow:
            return self._uow.bookings.find_by_status(booking_status)

    def get_passengers(self, reference: str) -> list[Passenger]:
        with self._uow:
            booking = self.get_by_reference(reference)
            return self._uow.passengers.find_by_booking_id(booking.id)
