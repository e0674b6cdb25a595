from services.flight.domain.entity import Flight
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import ResourceNotFoundException


class FlightQueryService:
    """フライトの参照系ユースケース"""

    def __init__(self, uow: UnitOfWork) -> None:
        self._uow = uow

    def get(self, flight_id: int) -> Flight:
        with self._uow:
            flight = self._uow.flights.find_by_id(flight_id)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found with ID: {flight_id}")
        return flight

    def get_by_number(self, flight_number: str) -> Flight:
        with self._uow:
            flight = self._uow.flights.find_by_flight_number(flight_number)
        if flight is None:
            raise ResourceNotFoundException(f"Flight not found: {flight_number}")
        return flight
