from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import (
    APIGatewayProxyEventV2,
    event_source,
)
from aws_lambda_powertools.utilities.typing import LambdaContext

from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.confirm_booking import ConfirmBookingService
from services.payment.applications.delete_payment import DeletePaymentService
from services.payment.applications.payment_query import PaymentQueryService
from services.payment.applications.process_payment import ProcessPaymentService
from services.payment.applications.refund_payment import RefundPaymentService
from services.payment.handlers.request_models import (
    PaymentSearchQuery,
    ProcessPaymentRequest,
    RefundPaymentRequest,
)
from services.payment.handlers.response_models import to_payment_data
from services.payment.infrastructure.mock_payment_gateway import MockPaymentGateway
from services.shared.domain.exception import ValidationException
from services.shared.infrastructure.sqlalchemy_unit_of_work import SqlAlchemyUnitOfWork
from services.shared.utils.api_gateway import (
    dispatch,
    parse_body,
    parse_query,
    path_param,
)
from services.shared.utils.http_response import success_response

logger = Logger()

uow = SqlAlchemyUnitOfWork()
gateway = MockPaymentGateway()
process_service = ProcessPaymentService(
    uow, gateway=gateway, confirm_service=ConfirmBookingService(uow)
)
refund_service = RefundPaymentService(
    uow, gateway=gateway, cancel_service=CancelBookingService(uow)
)
query_service = PaymentQueryService(uow)
delete_service = DeletePaymentService(uow)


def process_payment(event: APIGatewayProxyEventV2) -> dict:
    request = parse_body(event, ProcessPaymentRequest)
    payment = process_service.process(
        booking_id=request.booking_id,
        amount=request.amount,
        method=request.payment_method,
        details=request.payment_details,
    )
    return success_response(to_payment_data(payment), status_code=201)


def get_payment(event: APIGatewayProxyEventV2) -> dict:
    payment = query_service.get_by_transaction_id(path_param(event, "transaction_id"))
    return success_response(to_payment_data(payment))


def search_payments(event: APIGatewayProxyEventV2) -> dict:
    query = parse_query(event, PaymentSearchQuery)
    if query.booking_id is not None:
        payment = query_service.get_by_booking_id(query.booking_id)
        return success_response(to_payment_data(payment))
    if query.start is not None and query.end is not None:
        payments = query_service.get_by_date_range(query.start, query.end)
    elif query.status is not None:
        payments = query_service.get_by_status(query.status)
    else:
        raise ValidationException(
            "status", "One of status, booking_id or start/end is required"
        )
    return success_response([to_payment_data(p) for p in payments])


def refund_payment(event: APIGatewayProxyEventV2) -> dict:
    request = parse_body(event, RefundPaymentRequest)
    payment = refund_service.refund(
        path_param(event, "transaction_id"), amount=request.amount
    )
    return success_response(to_payment_data(payment))


def delete_payment(event: APIGatewayProxyEventV2) -> dict:
    payment = query_service.get_by_transaction_id(path_param(event, "transaction_id"))
    delete_service.delete(payment.id)
    return success_response(None)


ROUTES = {
    "POST /api/v1/payments": process_payment,
    "GET /api/v1/payments": search_payments,
    "GET /api/v1/payments/{transaction_id}": get_payment,
    "DELETE /api/v1/payments/{transaction_id}": delete_payment,
    "POST /api/v1/payments/{transaction_id}/refund": refund_payment,
}


@logger.inject_lambda_context
@event_source(data_class=APIGatewayProxyEventV2)
def lambda_handler(event: APIGatewayProxyEventV2, context: LambdaContext) -> dict:
    """決済 API Lambda Handler"""

    logger.info("Received payment request", extra={"route_key": event.route_key})
    return dispatch(event, ROUTES)
