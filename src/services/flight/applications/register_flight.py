from aws_lambda_powertools import Logger

from services.flight.domain.entity import Flight
from services.flight.domain.factory import FlightDetails, FlightFactory
from services.shared.domain import UnitOfWork
from services.shared.domain.exception import (
    DuplicateResourceException,
    ValidationException,
)

logger = Logger(child=True)


class RegisterFlightService:
    """フライト登録ユースケース"""

    def __init__(self, uow: UnitOfWork, factory: FlightFactory | None = None) -> None:
        self._uow = uow
        self._factory = factory or FlightFactory()

    def register(self, details: FlightDetails) -> Flight:
        try:
            flight = self._factory.create(details)
        except ValueError as e:
            raise ValidationException("flight", str(e)) from e
        with self._uow:
            if self._uow.flights.exists_by_flight_number(flight.flight_number.value):
                raise DuplicateResourceException(
                    f"Flight number already exists: {flight.flight_number}"
                )
            self._uow.flights.save(flight)
            self._uow.commit()
        logger.info(
            "Flight registered",
            extra={"flight_id": flight.id, "flight_number": flight.flight_number.value},
        )
        return flight
