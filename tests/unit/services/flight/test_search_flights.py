from datetime import date, datetime, timezone
from decimal import Decimal

import pytest

from services.flight.applications.search_flights import SearchFlightsService
from services.inventory.domain import FareClass
from services.shared.domain.exception import ValidationException

NOW = datetime(2026, 10, 16, 9, 0, tzinfo=timezone.utc)


@pytest.fixture
def service(mock_uow):
    return SearchFlightsService(mock_uow, now=lambda: NOW)


class TestSearchFlightsService:
    def test_one_way_search_uses_utc_day_window(
        self, service, mock_uow, create_flight
    ):
        mock_uow.flights.find_available.return_value = [create_flight()]

        result = service.search(1, 2, date(2026, 11, 1))

        mock_uow.flights.find_available.assert_called_once_with(
            1,
            2,
            datetime(2026, 11, 1, tzinfo=timezone.utc),
            datetime(2026, 11, 2, tzinfo=timezone.utc),
        )
        assert result.inbound is None
        assert result.is_round_trip is False
        assert [o.flight.flight_number.value for o in result.outbound] == ["AA123"]

    def test_offer_carries_class_price_and_seats(
        self, service, mock_uow, create_flight
    ):
        mock_uow.flights.find_available.return_value = [
            create_flight(business_seats=4, business_price=Decimal("450"))
        ]

        result = service.search(1, 2, date(2026, 11, 1), fare_class=" business ")

        offer = result.outbound[0]
        assert offer.fare_class == FareClass.BUSINESS
        assert offer.price.amount == Decimal("450")
        assert offer.available_seats == 4

    def test_unknown_class_falls_back_to_economy(
        self, service, mock_uow, create_flight
    ):
        mock_uow.flights.find_available.return_value = [create_flight()]

        result = service.search(1, 2, date(2026, 11, 1), fare_class="premium")

        assert result.outbound[0].fare_class == FareClass.ECONOMY
        assert result.outbound[0].price.amount == Decimal("100")

    def test_flights_without_enough_seats_in_class_are_excluded(
        self, service, mock_uow, create_flight
    ):
        mock_uow.flights.find_available.return_value = [
            create_flight(flight_id=1, flight_number="AA100", first_class_seats=1),
            create_flight(flight_id=2, flight_number="AA200", first_class_seats=3),
        ]

        result = service.search(
            1, 2, date(2026, 11, 1), passengers=2, fare_class=FareClass.FIRST
        )

        assert [o.flight.id for o in result.outbound] == [2]

    def test_round_trip_swaps_airports_for_return_leg(
        self, service, mock_uow, create_flight
    ):
        mock_uow.flights.find_available.side_effect = [[create_flight()], []]

        result = service.search(1, 2, date(2026, 11, 1), return_date=date(2026, 11, 8))

        second_call = mock_uow.flights.find_available.call_args_list[1]
        assert second_call.args[:2] == (2, 1)
        assert second_call.args[2] == datetime(2026, 11, 8, tzinfo=timezone.utc)
        assert result.is_round_trip is True
        assert result.inbound == []

    def test_direct_only_does_not_filter(self, service, mock_uow, create_flight):
        mock_uow.flights.find_available.return_value = [create_flight()]

        result = service.search(1, 2, date(2026, 11, 1), direct_only=True)

        assert len(result.outbound) == 1

    @pytest.mark.parametrize(
        "kwargs, field",
        [
            ({"passengers": 0}, "passengers"),
            ({"return_date": date(2026, 10, 31)}, "return_date"),
            ({"arrival_airport_id": 1}, "arrival_airport_id"),
        ],
    )
    def test_invalid_criteria(self, service, mock_uow, kwargs, field):
        criteria = {
            "departure_airport_id": 1,
            "arrival_airport_id": 2,
            "departure_date": date(2026, 11, 1),
        }
        criteria.update(kwargs)

        with pytest.raises(ValidationException) as exc_info:
            service.search(**criteria)

        assert exc_info.value.field == field
        mock_uow.flights.find_available.assert_not_called()

    def test_upcoming_is_priced_at_economy(self, service, mock_uow, create_flight):
        mock_uow.flights.find_upcoming.return_value = [
            create_flight(economy_price=Decimal("120"))
        ]

        offers = service.upcoming()

        mock_uow.flights.find_upcoming.assert_called_once_with(NOW)
        assert offers[0].fare_class == FareClass.ECONOMY
        assert offers[0].price.amount == Decimal("120")
