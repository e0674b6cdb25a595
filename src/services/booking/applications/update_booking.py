from aws_lambda_powertools import Logger

from services.booking.domain.entity import Booking
from services.inventory.domain import (
    FareClass,
    adjust_seats,
    require_availability,
    total_price,
)
from services.passenger.applications.create_passengers import CreatePassengersService
from services.passenger.domain.factory import PassengerDetails
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import (
    ResourceNotFoundException,
    ValidationException,
)

logger = Logger(child=True)


class UpdateBookingService:
    """予約変更ユースケース（PENDING の間のみ）

    旧クラスの座席を返却してから新クラス・新人数分を確保し直す。
    乗客リストが指定された場合は入れ替える。
    """

    def __init__(
        self, uow: UnitOfWork, passenger_service: CreatePassengersService
    ) -> None:
        self._uow = uow
        self._passenger_service = passenger_service

    def update(
        self,
        reference: str,
        fare_class: FareClass | str | None = None,
        passengers: list[PassengerDetails] | None = None,
    ) -> Booking:
        logger.info("Updating booking", extra={"booking_reference": reference})
        if passengers is not None and not passengers:
            raise ValidationException("passengers", "At least one passenger is required")

        with self._uow:
            booking = self._uow.bookings.find_by_reference(reference)
            if booking is None:
                raise ResourceNotFoundException(f"Booking not found: {reference}")
            booking.ensure_pending("update booking")

            if fare_class is None:
                new_class = booking.fare_class
            elif isinstance(fare_class, FareClass):
                new_class = fare_class
            else:
                new_class = FareClass.parse(fare_class)
            new_count = booking.passenger_count if passengers is None else len(passengers)

            flight = self._uow.flights.find_by_id(booking.flight_id, for_update=True)
            if flight is None:
                raise ResourceNotFoundException(
                    f"Flight not found with ID: {booking.flight_id}"
                )

            adjust_seats(
                flight, booking.fare_class, booking.passenger_count, restoring=True
            )
            require_availability(flight, new_class, new_count)
            adjust_seats(flight, new_class, new_count, restoring=False)

            if passengers is not None:
                self._passenger_service.replace_passengers(passengers, booking.id)

            booking.revise(new_class, new_count, total_price(flight, new_class, new_count))
            self._uow.flights.save(flight)
            self._uow.bookings.save(booking)
            self._uow.commit()
        return booking
