from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.passenger.applications.assign_seat import AssignSeatService
from services.passenger.applications.create_passengers import CreatePassengersService
from services.passenger.applications.passenger_query import PassengerQueryService
from services.passenger.applications.update_passenger import UpdatePassengerService
from services.passenger.handlers.request_models import (
    AssignSeatRequest,
    PassengerRequest,
    PassengerSearchQuery,
)
from services.passenger.handlers.response_models import to_passenger_data
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
create_service = CreatePassengersService(uow)
update_service = UpdatePassengerService(uow, passenger_service=create_service)
seat_service = AssignSeatService(uow)
query_service = PassengerQueryService(uow)


def get_passenger(event: APIGatewayProxyEventV2) -> dict:
    passenger = query_service.get(int_path_param(event, "passenger_id"))
    return success_response(to_passenger_data(passenger))


def search_passengers(event: APIGatewayProxyEventV2) -> dict:
    query = parse_query(event, PassengerSearchQuery)
    passengers = query_service.get_by_passport(query.passport_number)
    return success_response([to_passenger_data(p) for p in passengers])


def update_passenger(event: APIGatewayProxyEventV2) -> dict:
    request = parse_body(event, PassengerRequest)
    passenger = update_service.update(
        int_path_param(event, "passenger_id"), request.to_details()
    )
    return success_response(to_passenger_data(passenger))


def delete_passenger(event: APIGatewayProxyEventV2) -> dict:
    update_service.delete(int_path_param(event, "passenger_id"))
    return success_response(None)


def assign_seat(event: APIGatewayProxyEventV2) -> dict:
    request = parse_body(event, AssignSeatRequest)
    passenger = seat_service.assign(
        int_path_param(event, "passenger_id"), request.seat_number
    )
    return success_response(to_passenger_data(passenger))


def list_flight_passengers(event: APIGatewayProxyEventV2) -> dict:
    passengers = query_service.get_by_flight(int_path_param(event, "flight_id"))
    return success_response([to_passenger_data(p) for p in passengers])


ROUTES = {
    "GET /api/v1/passengers": search_passengers,
    "GET /api/v1/passengers/{passenger_id}": get_passenger,
    "PUT /api/v1/passengers/{passenger_id}": update_passenger,
    "DELETE /api/v1/passengers/{passenger_id}": delete_passenger,
    "PUT /api/v1/passengers/{passenger_id}/seat": assign_seat,
    "GET /api/v1/flights/{flight_id}/passengers": list_flight_passengers,
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """乗客 API Lambda Handler"""

    logger.info("Received passenger request", extra={"route_key": event.route_key})
    return dispatch(event, ROUTES)
