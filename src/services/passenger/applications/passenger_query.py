from services.passenger.domain.entity import Passenger
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import ResourceNotFoundException


class PassengerQueryService:
    """乗客の参照系ユースケース"""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get(self, passenger_id: int) -> Passenger:
        with self._uow:
            passenger = self._uow.passengers.find_by_id(passenger_id)
        if passenger is None:
            raise ResourceNotFoundException(
                f"Passenger not found with ID: {passenger_id}"
            )
        return passenger

    def get_by_booking(self, booking_id: int) -> list[Passenger]:
        with self._uow:
            return self._uow.passengers.find_by_booking_id(booking_id)

    def get_by_flight(self, flight_id: int) -> list[Passenger]:
        with self._uow:
            return self._uow.passengers.find_by_flight_id(flight_id)

    def get_by_passport(self, passport_number: str) -> list[Passenger]:
        with self._uow:
            return self._uow.passengers.find_by_passport_number(passport_number)
