from collections.abc import Callable
from dataclasses import dataclass
from datetime import date, datetime, time, timedelta, timezone

from aws_lambda_powertools import Logger

from services.flight.domain.entity import Flight
from services.inventory.domain import (
    FareClass,
    available_seats_for_class,
    has_enough_seats,
    price_for_class,
)
from services.shared.domain import Money, UnitOfWork
from services.shared.domain.exception import ValidationException

logger = Logger(child=True)


@dataclass(frozen=True)
class FlightOffer:
    """検索結果の1件（指定クラスでの運賃と空席数を伴う）"""

    flight: Flight
    fare_class: FareClass
    price: Money
    available_seats: int


@dataclass(frozen=True)
class FlightSearchResult:
    outbound: list[FlightOffer]
    inbound: list[FlightOffer] | None

    @property
    def is_round_trip(self) -> bool:
        return self.inbound is not None


def _day_window(day: date) -> tuple[datetime, datetime]:
    """出発日を UTC の [00:00, 翌日 00:00) に変換する"""
    start = datetime.combine(day, time.min, tzinfo=timezone.utc)
    return start, start + timedelta(days=1)


def _offer(flight: Flight, fare_class: FareClass) -> FlightOffer:
    return FlightOffer(
        flight=flight,
        fare_class=fare_class,
        price=price_for_class(flight, fare_class),
        available_seats=available_seats_for_class(flight, fare_class),
    )


class SearchFlightsService:
    """フライト検索ユースケース

    区間と出発日で運航中のフライトを探し、指定クラスに必要な空席が
    あるものだけを返す。復路日付を指定すると往復検索になり、
    復路は出発空港と到着空港を入れ替えて検索する。
    """

    def __init__(
        self,
        uow: UnitOfWork,
        now: Callable[[], datetime] = lambda: datetime.now(timezone.utc),
    ) -> None:
        self._uow = uow
        self._now = now

    def search(
        self,
        departure_airport_id: int,
        arrival_airport_id: int,
        departure_date: date,
        return_date: date | None = None,
        passengers: int = 1,
        fare_class: str | FareClass | None = None,
        direct_only: bool = False,
    ) -> FlightSearchResult:
        if passengers < 1:
            raise ValidationException("passengers", "At least one passenger is required")
        if departure_airport_id == arrival_airport_id:
            raise ValidationException(
                "arrival_airport_id", "Arrival airport must differ from departure airport"
            )
        if return_date is not None and return_date < departure_date:
            raise ValidationException(
                "return_date", "Return date must not be before departure date"
            )
        seat_class = FareClass.parse(fare_class)

        # 乗り継ぎ便は扱わないため direct_only は結果に影響しない
        with self._uow:
            outbound = self._find(
                departure_airport_id, arrival_airport_id, departure_date, seat_class, passengers
            )
            inbound = None
            if return_date is not None:
                inbound = self._find(
                    arrival_airport_id, departure_airport_id, return_date, seat_class, passengers
                )

        logger.info(
            "Flights searched",
            extra={
                "departure_airport_id": departure_airport_id,
                "arrival_airport_id": arrival_airport_id,
                "fare_class": seat_class.value,
                "direct_only": direct_only,
                "outbound_count": len(outbound),
                "inbound_count": len(inbound) if inbound is not None else None,
            },
        )
        return FlightSearchResult(outbound=outbound, inbound=inbound)

    def upcoming(self) -> list[FlightOffer]:
        """これから出発する運航中フライト（エコノミー運賃で表示）"""
        with self._uow:
            flights = self._uow.flights.find_upcoming(self._now())
        return [_offer(flight, FareClass.ECONOMY) for flight in flights]

    def _find(
        self,
        departure_airport_id: int,
        arrival_airport_id: int,
        day: date,
        fare_class: FareClass,
        passengers: int,
    ) -> list[FlightOffer]:
        start, end = _day_window(day)
        flights = self._uow.flights.find_available(
            departure_airport_id, arrival_airport_id, start, end
        )
        return [
            _offer(flight, fare_class)
            for flight in flights
            if has_enough_seats(flight, fare_class, passengers)
        ]
