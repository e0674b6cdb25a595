from typing import Callable, TypeVar

from aws_lambda_powertools import Logger
from aws_lambda_powertools.utilities.data_classes import APIGatewayProxyEventV2
from pydantic import BaseModel, ValidationError

from services.shared.domain.exception import DomainException, ValidationException
from services.shared.utils.http_response import (
    ErrorResponse,
    UnauthorizedError,
    api_response,
    error_response,
)

logger = Logger(child=True)

M = TypeVar("M", bound=BaseModel)
Route = Callable[[APIGatewayProxyEventV2], dict]


def dispatch(event: APIGatewayProxyEventV2, routes: dict[str, Route]) -> dict:
    """routeKey（例: "GET /api/v1/bookings/{reference}"）でハンドラを選んで実行する

    ドメイン例外・入力エラーはエラーレスポンスに変換し、
    それ以外は 500 としてスタックトレースを記録する。
    """
    route = routes.get(event.route_key)
    if route is None:
        return api_response(
            404,
            ErrorResponse(
                error_code="ROUTE_NOT_FOUND",
                message=f"No route for {event.route_key}",
            ).model_dump(),
        )

    try:
        return route(event)
    except (DomainException, ValidationError, UnauthorizedError) as e:
        logger.info(
            "Request rejected",
            extra={"route_key": event.route_key, "error": str(e)},
        )
        return error_response(e)
    except Exception:
        logger.exception("Unhandled error", extra={"route_key": event.route_key})
        return api_response(
            500,
            ErrorResponse(
                error_code="INTERNAL_ERROR", message="Internal server error"
            ).model_dump(),
        )


def parse_body(event: APIGatewayProxyEventV2, model: type[M]) -> M:
    """リクエストボディ（JSON）をモデルに変換する"""
    return model.model_validate_json(event.decoded_body or "{}")


def parse_query(event: APIGatewayProxyEventV2, model: type[M]) -> M:
    return model.model_validate(event.query_string_parameters or {})


def path_param(event: APIGatewayProxyEventV2, name: str) -> str:
    value = (event.path_parameters or {}).get(name)
    if not value:
        raise ValidationException(name, f"{name} is required")
    return value


def int_path_param(event: APIGatewayProxyEventV2, name: str) -> int:
    value = path_param(event, name)
    try:
        return int(value)
    except ValueError:
        raise ValidationException(name, f"{name} must be an integer") from None


def current_user_id(event: APIGatewayProxyEventV2) -> int:
    """Lambda オーソライザーのコンテキストから利用者IDを取り出す"""
    authorizer = event.raw_event.get("requestContext", {}).get("authorizer") or {}
    user_id = (authorizer.get("lambda") or {}).get("user_id")
    if user_id is None:
        raise UnauthorizedError("User is not authenticated")
    try:
        return int(user_id)
    except (TypeError, ValueError):
        raise UnauthorizedError(f"Invalid user id in authorizer context: {user_id}") from None
