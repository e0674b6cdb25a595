import pytest

from services.inventory.domain import (
    FareClass,
    adjust_seats,
    available_seats_for_class,
    has_enough_seats,
    require_availability,
)
from services.shared.domain.exception import InsufficientSeatsException


class TestFareClass:
    @pytest.mark.parametrize(
        ("text", "expected"),
        [
            ("business", FareClass.BUSINESS),
            (" First ", FareClass.FIRST),
            ("ECONOMY", FareClass.ECONOMY),
            ("premium", FareClass.ECONOMY),
            ("", FareClass.ECONOMY),
            (None, FareClass.ECONOMY),
        ],
    )
    def test_parse(self, text, expected):
        assert FareClass.parse(text) == expected


class TestSeatInventory:
    def test_available_seats_per_class(self, create_flight):
        flight = create_flight(economy_seats=10, business_seats=4, first_class_seats=2)

        assert available_seats_for_class(flight, FareClass.ECONOMY) == 10
        assert available_seats_for_class(flight, FareClass.BUSINESS) == 4
        assert available_seats_for_class(flight, FareClass.FIRST) == 2
        assert flight.available_seats == 16

    def test_has_enough_seats(self, create_flight):
        flight = create_flight(business_seats=2)

        assert has_enough_seats(flight, FareClass.BUSINESS, 2)
        assert not has_enough_seats(flight, FareClass.BUSINESS, 3)

    def test_consume_and_restore(self, create_flight):
        flight = create_flight(economy_seats=5)

        assert adjust_seats(flight, FareClass.ECONOMY, 3, restoring=False) == 2
        assert adjust_seats(flight, FareClass.ECONOMY, 3, restoring=True) == 5
        assert flight.economy_seats == 5

    def test_consume_never_goes_below_zero(self, create_flight):
        flight = create_flight(first_class_seats=1)

        adjust_seats(flight, FareClass.FIRST, 4, restoring=False)

        assert flight.first_class_seats == 0

    def test_only_target_class_changes(self, create_flight):
        flight = create_flight(economy_seats=10, business_seats=4, first_class_seats=2)

        adjust_seats(flight, FareClass.BUSINESS, 1, restoring=False)

        assert (flight.economy_seats, flight.business_seats, flight.first_class_seats) == (
            10,
            3,
            2,
        )

    def test_require_availability_raises_with_counts(self, create_flight):
        flight = create_flight(economy_seats=1)

        with pytest.raises(InsufficientSeatsException) as exc_info:
            require_availability(flight, FareClass.ECONOMY, 3)

        assert exc_info.value.required == 3
        assert exc_info.value.available == 1
        assert str(exc_info.value) == (
            "Insufficient economy class seats available. Required: 3, Available: 1"
        )
