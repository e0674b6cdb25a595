import json
from typing import Any

from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import (
    BookingCreationException,
    BusinessRuleViolationException,
    DomainException,
    DuplicateResourceException,
    InsufficientSeatsException,
    PaymentGatewayException,
    ResourceNotFoundException,
    ValidationException,
)


class UnauthorizedError(Exception):
    """認可コンテキストから利用者を特定できない場合"""

    pass


class SuccessResponse(BaseModel):
    """成功レスポンスモデル"""

    status: str = "success"
    data: Any


class ErrorResponse(BaseModel):
    """エラーレスポンスモデル"""

    status: str = "error"
    error_code: str
    message: str
    details: Any = None


# 先に一致したものを採用する（サブクラスを先に並べる）
_ERROR_STATUS: list[tuple[type[Exception], int, str]] = [
    (ResourceNotFoundException, 404, "NOT_FOUND"),
    (ValidationException, 400, "VALIDATION_ERROR"),
    (InsufficientSeatsException, 409, "INSUFFICIENT_SEATS"),
    (DuplicateResourceException, 409, "CONFLICT"),
    (BusinessRuleViolationException, 422, "BOOKING_STATE"),
    (PaymentGatewayException, 502, "PAYMENT_GATEWAY_ERROR"),
    (UnauthorizedError, 401, "UNAUTHORIZED"),
]


def api_response(status_code: int, body: dict) -> dict:
    """API Gateway HTTP API のレスポンス形式を生成する"""
    return {
        "statusCode": status_code,
        "headers": {"Content-Type": "application/json"},
        "body": json.dumps(body, default=str),
    }


def success_response(data: Any, status_code: int = 200) -> dict:
    return api_response(status_code, SuccessResponse(data=data).model_dump())


def error_status(error: Exception) -> tuple[int, str]:
    """例外を HTTP ステータスとエラーコードに対応づける

    BookingCreationException は原因となった例外の種別で判定する。
    """
    if isinstance(error, BookingCreationException):
        return error_status(error.cause)
    if isinstance(error, ValidationError):
        return 400, "VALIDATION_ERROR"
    for error_type, status_code, error_code in _ERROR_STATUS:
        if isinstance(error, error_type):
            return status_code, error_code
    if isinstance(error, DomainException):
        return 400, "DOMAIN_ERROR"
    return 500, "INTERNAL_ERROR"


def _details(error: Exception) -> Any:
    if isinstance(error, BookingCreationException):
        return _details(error.cause)
    if isinstance(error, ValidationError):
        return error.errors(include_url=False, include_context=False)
    if isinstance(error, ValidationException):
        return {"field": error.field}
    if isinstance(error, InsufficientSeatsException):
        return {"required": error.required, "available": error.available}
    return None


def error_response(error: Exception) -> dict:
    """例外からエラーレスポンスを生成する"""
    status_code, error_code = error_status(error)
    message = "Invalid request" if isinstance(error, ValidationError) else str(error)
    body = ErrorResponse(
        error_code=error_code, message=message, details=_details(error)
    ).model_dump()
    return api_response(status_code, body)
