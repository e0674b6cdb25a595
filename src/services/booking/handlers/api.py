from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.booking_query import BookingQueryService
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.booking.applications.update_booking import UpdateBookingService
from services.booking.domain.entity import Booking
from services.booking.handlers.request_models import (
    BookingSearchQuery,
    CreateBookingRequest,
    UpdateBookingRequest,
)
from services.booking.handlers.response_models import to_booking_data
from services.passenger.applications.create_passengers import CreatePassengersService
from services.passenger.handlers.response_models import to_passenger_data
from services.shared.infrastructure.sqlalchemy_unit_of_work import SqlAlchemyUnitOfWork
from services.shared.utils.api_gateway import (
    current_user_id,
    dispatch,
    parse_body,
    parse_query,
    path_param,
)
from services.shared.utils.http_response import success_response

logger = Logger()

uow = SqlAlchemyUnitOfWork()
passenger_service = CreatePassengersService(uow)
create_service = CreateBookingService(uow, passenger_service=passenger_service)
update_service = UpdateBookingService(uow, passenger_service=passenger_service)
cancel_service = CancelBookingService(uow)
query_service = BookingQueryService(uow)


def _with_passengers(booking: Booking) -> dict:
    passengers = query_service.get_passengers(booking.reference.value)
    return to_booking_data(booking, [to_passenger_data(p) for p in passengers])


def create_booking(event: APIGatewayProxyEventV2) -> dict:
    user_id = current_user_id(event)
    request = parse_body(event, CreateBookingRequest)
    booking = create_service.create(
        flight_id=request.flight_id,
        fare_class=request.fare_class,
        passengers=[p.to_details() for p in request.passengers],
        user_id=user_id,
    )
    return success_response(_with_passengers(booking), status_code=201)


def get_booking(event: APIGatewayProxyEventV2) -> dict:
    booking = query_service.get_by_reference(path_param(event, "reference"))
    return success_response(_with_passengers(booking))


def list_bookings(event: APIGatewayProxyEventV2) -> dict:
    """status 指定時はステータスで、未指定時は利用者本人の予約を返す"""
    query = parse_query(event, BookingSearchQuery)
    if query.status is not None:
        bookings = query_service.get_by_status(query.status)
    else:
        bookings = query_service.get_by_user(current_user_id(event))
    return success_response([to_booking_data(b) for b in bookings])


def update_booking(event: APIGatewayProxyEventV2) -> dict:
    request = parse_body(event, UpdateBookingRequest)
    passengers = (
        None
        if request.passengers is None
        else [p.to_details() for p in request.passengers]
    )
    booking = update_service.update(
        path_param(event, "reference"),
        fare_class=request.fare_class,
        passengers=passengers,
    )
    return success_response(_with_passengers(booking))


def cancel_booking(event: APIGatewayProxyEventV2) -> dict:
    booking = cancel_service.cancel(path_param(event, "reference"))
    return success_response(to_booking_data(booking))


def list_booking_passengers(event: APIGatewayProxyEventV2) -> dict:
    passengers = query_service.get_passengers(path_param(event, "reference"))
    return success_response([to_passenger_data(p) for p in passengers])


ROUTES = {
    "POST /api/v1/bookings": create_booking,
    "GET /api/v1/bookings": list_bookings,
    "GET /api/v1/bookings/{reference}": get_booking,
    "PUT /api/v1/bookings/{reference}": update_booking,
    "POST /api/v1/bookings/{reference}/cancel": cancel_booking,
    "GET /api/v1/bookings/{reference}/passengers": list_booking_passengers,
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """予約 API Lambda Handler"""

    logger.info("Received booking request", extra={"route_key": event.route_key})
    return dispatch(event, ROUTES)
