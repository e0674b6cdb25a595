import json

import pytest
from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import (
    BookingCreationException,
    BusinessRuleViolationException,
    DuplicateResourceException,
    InsufficientSeatsException,
    PaymentGatewayException,
    ResourceNotFoundException,
    ValidationException,
)
from services.shared.utils.http_response import (
    UnauthorizedError,
    error_response,
    error_status,
    success_response,
)


class _Model(BaseModel):
    value: int


class TestErrorStatus:
    @pytest.mark.parametrize(
        ("error", "expected"),
        [
            (ResourceNotFoundException("x"), (404, "NOT_FOUND")),
            (ValidationException("f", "x"), (400, "VALIDATION_ERROR")),
            (InsufficientSeatsException("economy", 3, 1), (409, "INSUFFICIENT_SEATS")),
            (DuplicateResourceException("x"), (409, "CONFLICT")),
            (BusinessRuleViolationException("x"), (422, "BOOKING_STATE")),
            (PaymentGatewayException("x"), (502, "PAYMENT_GATEWAY_ERROR")),
            (UnauthorizedError("x"), (401, "UNAUTHORIZED")),
            (RuntimeError("x"), (500, "INTERNAL_ERROR")),
        ],
    )
    def test_mapping(self, error, expected):
        assert error_status(error) == expected

    def test_booking_creation_uses_cause(self):
        error = BookingCreationException(
            "Failed", DuplicateResourceException("duplicate passport")
        )
        assert error_status(error) == (409, "CONFLICT")

    def test_pydantic_validation_error(self):
        with pytest.raises(ValidationError) as exc_info:
            _Model.model_validate({"value": "abc"})

        response = error_response(exc_info.value)

        assert response["statusCode"] == 400
        body = json.loads(response["body"])
        assert body["error_code"] == "VALIDATION_ERROR"
        assert body["details"][0]["loc"] == ["value"]


class TestResponses:
    def test_success_response(self):
        response = success_response({"id": 1}, status_code=201)

        assert response["statusCode"] == 201
        assert json.loads(response["body"]) == {"status": "success", "data": {"id": 1}}

    def test_error_response_carries_seat_details(self):
        response = error_response(InsufficientSeatsException("economy", 3, 1))

        body = json.loads(response["body"])
        assert body["status"] == "error"
        assert body["message"] == (
            "Insufficient economy class seats available. Required: 3, Available: 1"
        )
        assert body["details"] == {"required": 3, "available": 1}
