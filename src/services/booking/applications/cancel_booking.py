from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.inventory.domain import adjust_seats
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class CancelBookingService:
    """予約キャンセルユースケース

    予約の人数分の座席を元の運賃クラスに返却する。
    """

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def cancel(self, reference: str) -> Booking:
        with self._uow:
            booking = self._uow.bookings.find_by_reference(reference)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found: {reference}")
            booking.cancel()

            flight = self._uow.flights.find_by_id(booking.flight_id, for_update=True)
            if flight is None:
                raise ResourceNotFoundException(
                    f"Flight not found with ID: {booking.flight_id}"
                )
            adjust_seats(
                flight, booking.fare_class, booking.passenger_count, restoring=True
            )

            self._uow.bookings.save(booking)
            self._uow.flights.save(flight)
            self._uow.commit()

        logger.info(
            "Booking cancelled",
            extra={
                "booking_reference": reference,
                "restored_seats": booking.passenger_count,
            },
        )
        return booking
