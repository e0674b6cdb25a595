from datetime import date
from typing import Callable

from aws_lambda_powertools import Logger

from services.passenger.applications.create_passengers import CreatePassengersService
from services.passenger.domain.entity import Passenger
from services.passenger.domain.factory import PassengerDetails, PassengerFactory
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import ResourceNotFoundException

logger = Logger(child=True)


class UpdatePassengerService:
    """乗客情報の更新・削除ユースケース（予約が PENDING の間のみ）"""

    def __init__(
        self,
        uow: UnitOfWork,
        passenger_service: CreatePassengersService,
        factory: PassengerFactory | None = None,
        today: Callable[[], date] = date.today,
    ) -> None:
        self._uow = uow
        self._passenger_service = passenger_service
        self._factory = factory or PassengerFactory()
        self._today = today

    def update(self, passenger_id: int, details: PassengerDetails) -> Passenger:
        logger.info("Updating passenger", extra={"passenger_id": passenger_id})
        with self._uow:
            passenger = self._find_mutable(passenger_id, "update passenger")
            revised = self._factory.create(details, passenger.booking_id, self._today())
            self._passenger_service.check_duplicate_passport_in_booking(
                revised.passport_number,
                passenger.booking_id,
                exclude_passenger_id=passenger.id,
            )
            passenger.update_details(revised)
            self._uow.passengers.save(passenger)
            self._uow.commit()
        return passenger

    def delete(self, passenger_id: int) -> None:
        logger.info("Deleting passenger", extra={"passenger_id": passenger_id})
        with self._uow:
            passenger = self._find_mutable(passenger_id, "delete passenger")
            self._uow.passengers.delete(passenger)
            self._uow.commit()

    def _find_mutable(self, passenger_id: int, action: str) -> Passenger:
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
        booking.ensure_pending(action)
        return passenger
