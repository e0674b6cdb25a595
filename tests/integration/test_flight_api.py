import json
from decimal import Decimal

import pytest

from services.flight.handlers import api

pytestmark = pytest.mark.usefixtures("api_database")

SEARCH_ROUTE = "GET /api/v1/flights/search"


class TestFlightSearchApi:
    def test_one_way_search(self, http_event, lambda_context, register_flight):
        flight = register_flight("AA100", economy_seats=2)
        register_flight("AA200", economy_seats=1)
        event = http_event(
            SEARCH_ROUTE,
            "/api/v1/flights/search",
            query_parameters={
                "departure_airport_id": "1",
                "arrival_airport_id": "2",
                "departure_date": "2026-11-01",
                "passengers": "2",
                "seat_class": "economy",
            },
        )

        response = api.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 200
        data = json.loads(response["body"])["data"]
        assert data["is_round_trip"] is False
        assert data["return_flights"] is None
        assert [o["id"] for o in data["outbound_flights"]] == [flight.id]
        offer = data["outbound_flights"][0]
        assert offer["seat_class"] == "ECONOMY"
        assert Decimal(offer["price"]) == Decimal("100")
        assert offer["available_seats"] == 2

    def test_round_trip_without_return_flights(
        self, http_event, lambda_context, register_flight
    ):
        register_flight("AA100")
        event = http_event(
            SEARCH_ROUTE,
            "/api/v1/flights/search",
            query_parameters={
                "departure_airport_id": "1",
                "arrival_airport_id": "2",
                "departure_date": "2026-11-01",
                "return_date": "2026-11-08",
            },
        )

        response = api.lambda_handler(event, lambda_context)

        data = json.loads(response["body"])["data"]
        assert data["is_round_trip"] is True
        assert len(data["outbound_flights"]) == 1
        assert data["return_flights"] == []

    def test_missing_departure_date(self, http_event, lambda_context):
        event = http_event(
            SEARCH_ROUTE,
            "/api/v1/flights/search",
            query_parameters={"departure_airport_id": "1", "arrival_airport_id": "2"},
        )

        response = api.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
        assert json.loads(response["body"])["error_code"] == "VALIDATION_ERROR"

    def test_return_before_departure(self, http_event, lambda_context):
        event = http_event(
            SEARCH_ROUTE,
            "/api/v1/flights/search",
            query_parameters={
                "departure_airport_id": "1",
                "arrival_airport_id": "2",
                "departure_date": "2026-11-08",
                "return_date": "2026-11-01",
            },
        )

        response = api.lambda_handler(event, lambda_context)

        assert response["statusCode"] == 400
