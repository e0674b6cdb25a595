from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.flight.applications.flight_query import FlightQueryService
from services.flight.applications.register_flight import RegisterFlightService
from services.flight.applications.search_flights import SearchFlightsService
from services.flight.handlers.request_models import (
    FlightOfferSearchQuery,
    FlightSearchQuery,
    RegisterFlightRequest,
)
from services.flight.handlers.response_models import (
    to_flight_data,
    to_flight_offer_data,
    to_search_result_data,
)
from services.shared.infrastructure.sqlalchemy_unit_of_work import SqlAlchemyUnitOfWork
from services.shared.utils.api_gateway import (
    dispatch,
    int_path_param,
    parse_body,
    parse_query,
)
from services.shared.utils.http_response import success_response

logger = Logger()

uow = SqlAlchemyUnitOfWork()
register_service = RegisterFlightService(uow)
query_service = FlightQueryService(uow)
search_service = SearchFlightsService(uow)


def register_flight(event: APIGatewayProxyEventV2) -> dict:
    request = parse_body(event, RegisterFlightRequest)
    flight = register_service.register(request.to_details())
    return success_response(to_flight_data(flight), status_code=201)


def get_flight(event: APIGatewayProxyEventV2) -> dict:
    flight = query_service.get(int_path_param(event, "flight_id"))
    return success_response(to_flight_data(flight))


def find_flight(event: APIGatewayProxyEventV2) -> dict:
    query = parse_query(event, FlightSearchQuery)
    flight = query_service.get_by_number(query.flight_number)
    return success_response(to_flight_data(flight))


def search_flights(event: APIGatewayProxyEventV2) -> dict:
    query = parse_query(event, FlightOfferSearchQuery)
    result = search_service.search(
        departure_airport_id=query.departure_airport_id,
        arrival_airport_id=query.arrival_airport_id,
        departure_date=query.departure_date,
        return_date=query.return_date,
        passengers=query.passengers,
        fare_class=query.seat_class,
        direct_only=query.direct_only,
    )
    return success_response(to_search_result_data(result))


def upcoming_flights(event: APIGatewayProxyEventV2) -> dict:
    offers = search_service.upcoming()
    return success_response([to_flight_offer_data(o) for o in offers])


ROUTES = {
    "POST /api/v1/flights": register_flight,
    "GET /api/v1/flights": find_flight,
    "GET /api/v1/flights/search": search_flights,
    "GET /api/v1/flights/upcoming": upcoming_flights,
    "GET /api/v1/flights/{flight_id}": get_flight,
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """フライト API Lambda Handler"""

    logger.info("Received flight request", extra={"route_key": event.route_key})
    return dispatch(event, ROUTES)
