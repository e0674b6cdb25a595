from aws_lambda_powertools import Logger

from services.passenger.domain.entity import Passenger
from services.passenger.domain.value_object import SeatNumber
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import (
    DuplicateResourceException,
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger(child=True)


class AssignSeatService:
    """座席割り当てユースケース

    同一フライト上の他の乗客（キャンセル済み予約を除く）と
    座席番号が重複する場合は拒否する。
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def assign(self, passenger_id: int, seat_number: str | None) -> Passenger:
        if seat_number is None or not seat_number.strip():
            raise ValidationException("seat_number", "Seat number is required")
        seat = SeatNumber(seat_number)

        logger.info(
            "Assigning seat",
            extra={"passenger_id": passenger_id, "seat_number": seat.value},
        )
        with self._uow:
            passenger = self._uow.passengers.find_by_id(passenger_id)
            if passenger is None:
                raise ResourceNotFoundException(
                    f"Passenger not found with ID: {passenger_id}"
                )
            booking = self._uow.bookings.find_by_id(passenger.booking_id)
            if booking is None:
                raise ResourceNotFoundException(
                    f"Booking not found with ID: {passenger.booking_id}"
                )
            booking.ensure_pending("assign seat")

            for other in self._uow.passengers.find_by_flight_id(
                booking.flight_id, exclude_cancelled=True
            ):
                if other.id != passenger.id and other.seat_number == seat:
                    raise DuplicateResourceException(
                        f"Seat {seat} is already assigned on this flight"
                    )

            passenger.assign_seat(seat)
            self._uow.passengers.save(passenger)
            self._uow.commit()
        return passenger
