import json
from dataclasses import dataclass
from datetime import date, datetime, timezone
from decimal import Decimal
from types import SimpleNamespace
from urllib.parse import urlencode

import pytest

from services.booking.applications.booking_query import BookingQueryService
from services.booking.applications.cancel_booking import CancelBookingService
from services.booking.applications.confirm_booking import ConfirmBookingService
from services.booking.applications.create_booking import CreateBookingService
from services.flight.applications.register_flight import RegisterFlightService
from services.passenger.applications.create_passengers import CreatePassengersService
from services.payment.applications.process_payment import ProcessPaymentService
from services.payment.applications.refund_payment import RefundPaymentService
from services.payment.infrastructure.mock_payment_gateway import MockPaymentGateway
from services.shared.infrastructure.database import (
    create_database_engine,
    create_schema,
    create_session_factory,
)
from services.shared.infrastructure.orm import UserRecord
from services.shared.infrastructure.sqlalchemy_unit_of_work import SqlAlchemyUnitOfWork

USER_ID = 1


@pytest.fixture
def engine():
    """テスト用のインメモリ SQLite エンジン"""
    engine = create_database_engine("sqlite:///:memory:")
    create_schema(engine)
    yield engine
    engine.dispose()


@pytest.fixture
def session_factory(engine):
    factory = create_session_factory(engine)
    with factory() as session:
        session.add(UserRecord(id=USER_ID, email="taro@example.com", name="Taro"))
        session.commit()
    return factory


@pytest.fixture
def uow(session_factory):
    return SqlAlchemyUnitOfWork(session_factory)


@pytest.fixture
def register_flight(uow):
    """フライトを登録する Factory fixture"""

    def _factory(flight_number: str = "AA123", economy_seats: int = 2):
        return RegisterFlightService(uow).register(
            {
                "flight_number": flight_number,
                "airline_id": 1,
                "departure_airport_id": 1,
                "arrival_airport_id": 2,
                "departure_time": datetime(2026, 11, 1, 10, 0, tzinfo=timezone.utc),
                "arrival_time": datetime(2026, 11, 1, 13, 30, tzinfo=timezone.utc),
                "base_price": Decimal("100"),
                "economy_seats": economy_seats,
                "business_seats": 0,
                "first_class_seats": 0,
                "currency": "USD",
            }
        )

    return _factory


@pytest.fixture
def services(uow):
    """ハンドラと同様に UnitOfWork を共有するユースケース群"""
    passengers = CreatePassengersService(uow)
    confirm = ConfirmBookingService(uow)
    cancel = CancelBookingService(uow)
    return SimpleNamespace(
        passengers=passengers,
        bookings=CreateBookingService(uow, passenger_service=passengers),
        confirm=confirm,
        cancel=cancel,
        query=BookingQueryService(uow),
    )


@pytest.fixture
def payment_services(uow, services):
    """決済・払い戻しユースケースの Factory fixture（ゲートウェイは遅延なし）"""

    def _factory(failure_rate: float = 0.0):
        gateway = MockPaymentGateway(latency_seconds=0, failure_rate=failure_rate)
        return (
            ProcessPaymentService(uow, gateway=gateway, confirm_service=services.confirm),
            RefundPaymentService(uow, gateway=gateway, cancel_service=services.cancel),
        )

    return _factory


@pytest.fixture
def passenger_input():
    def _factory(passport_number: str, first_name: str = "Taro") -> dict:
        return {
            "first_name": first_name,
            "last_name": "Yamada",
            "date_of_birth": date(1990, 5, 1),
            "gender": "MALE",
            "passport_number": passport_number,
            "nationality": "Japan",
        }

    return _factory


@dataclass
class LambdaContext:
    function_name: str = "airline-api"
    memory_limit_in_mb: int = 128
    invoked_function_arn: str = (
        "arn:aws:lambda:ap-northeast-1:123456789012:function:airline-api"
    )
    aws_request_id: str = "52fdfc07-2182-154f-163f-5f0f9a621d72"


@pytest.fixture
def lambda_context():
    return LambdaContext()


@pytest.fixture
def api_database(monkeypatch, session_factory):
    """ハンドラの UnitOfWork をテスト用の SQLite に向ける"""
    monkeypatch.setattr(
        "services.shared.infrastructure.sqlalchemy_unit_of_work.get_session_factory",
        lambda: session_factory,
    )


@pytest.fixture
def http_event():
    """API Gateway HTTP API (v2) イベントを生成する Factory fixture"""

    def _factory(
        route_key: str,
        path: str,
        body: dict | None = None,
        path_parameters: dict | None = None,
        user_id: str | None = str(USER_ID),
        query_parameters: dict | None = None,
    ) -> dict:
        method, _ = route_key.split(" ", 1)
        request_context = {
            "http": {"method": method, "path": path, "sourceIp": "127.0.0.1"},
            "requestId": "req-1",
            "routeKey": route_key,
            "stage": "$default",
        }
        if user_id is not None:
            request_context["authorizer"] = {"lambda": {"user_id": user_id}}
        return {
            "version": "2.0",
            "routeKey": route_key,
            "rawPath": path,
            "rawQueryString": urlencode(query_parameters or {}),
            "headers": {"content-type": "application/json"},
            "requestContext": request_context,
            "pathParameters": path_parameters,
            "queryStringParameters": query_parameters,
            "body": None if body is None else json.dumps(body),
            "isBase64Encoded": False,
        }

    return _factory
