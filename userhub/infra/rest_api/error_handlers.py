from fastapi import Request, status
from fastapi.responses import JSONResponse
from fastapi.exceptions import RequestValidationError
from fastapi.encoders import jsonable_encoder
from typing import Dict, Any
from userhub.infra.logging_config import get_logger
from ...domain.exception.user_exceptions import (
    DuplicateEmailError,
    DuplicateIdentifierError,
    DuplicateTagNameError,
    InvalidFieldError,
    StoreUnavailableError,
    UserAlreadyExistsError,
)

logger = get_logger("api.errors")


def create_error_response(
    error_type: str,
    user_message: str,
    detail: Any = None,
    status_code: int = 500,
    retry_available: bool = False,
    additional_data: Dict[str, Any] = None
) -> JSONResponse:
    """統一されたエラーレスポンスを作成"""
    content = {
        "error_type": error_type,
        "user_message": user_message,
        "retry_available": retry_available
    }

    if detail:
        content["detail"] = detail

    if additional_data:
        content.update(additional_data)

    return JSONResponse(
        status_code=status_code,
        content=jsonable_encoder(content)
    )


def _request_context(request: Request) -> Dict[str, Any]:
    return {
        "path": request.url.path,
        "method": request.method,
        "request_id": getattr(request.state, "request_id", None),
    }


_DUPLICATE_MESSAGES = {
    DuplicateIdentifierError: "このユーザーIDは既に使用されています。",
    DuplicateEmailError: "このメールアドレスは既に使用されています。",
    DuplicateTagNameError: "このタグ名は既に使用されています。",
}


async def handle_user_already_exists(request: Request, exc: UserAlreadyExistsError):
    """一意性違反（409 Conflict）のハンドリング"""
    logger.warning(
        f"Registration conflict: {exc.__class__.__name__}",
        extra={**_request_context(request), "error_code": exc.error_code, "error": str(exc)}
    )

    return create_error_response(
        error_type=(exc.error_code or "user_already_exists").lower(),
        user_message=_DUPLICATE_MESSAGES.get(type(exc), "このユーザーは既に登録されています。"),
        detail=str(exc),
        status_code=status.HTTP_409_CONFLICT,
        retry_available=False
    )


async def handle_invalid_field(request: Request, exc: InvalidFieldError):
    """入力値検証エラーのハンドリング"""
    logger.warning(
        "Invalid field",
        extra={**_request_context(request), "field": exc.field, "error": str(exc)}
    )

    return create_error_response(
        error_type="validation_error",
        user_message="入力内容に問題があります。内容を確認してください。",
        detail=str(exc),
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        retry_available=False,
        additional_data={"field": exc.field}
    )


async def handle_validation_exception(request: Request, exc: RequestValidationError):
    """FastAPIバリデーションエラーのハンドリング"""
    # 入力値（パスワードを含む）はログにもレスポンスにも含めない
    errors = [
        {"loc": error.get("loc"), "msg": error.get("msg"), "type": error.get("type")}
        for error in exc.errors()
    ]
    logger.warning(
        "FastAPI validation error",
        extra={**_request_context(request), "errors": errors}
    )

    return create_error_response(
        error_type="validation_error",
        user_message="入力データが無効です",
        detail=errors,
        status_code=status.HTTP_422_UNPROCESSABLE_ENTITY,
        retry_available=False
    )


async def handle_store_unavailable(request: Request, exc: StoreUnavailableError):
    """ストア障害のハンドリング"""
    logger.error(
        "User store unavailable",
        extra={**_request_context(request), "error": str(exc)}
    )

    return create_error_response(
        error_type="store_unavailable",
        user_message="現在サービスを利用できません。しばらく待ってから再試行してください。",
        status_code=status.HTTP_503_SERVICE_UNAVAILABLE,
        retry_available=True
    )


async def handle_generic_error(request: Request, exc: Exception):
    """その他のエラーのハンドリング"""
    logger.error(
        "Unhandled exception",
        extra={
            **_request_context(request),
            "error": str(exc),
            "error_type": type(exc).__name__
        },
        exc_info=exc
    )

    return create_error_response(
        error_type="internal_error",
        user_message="予期しないエラーが発生しました。問題が続く場合はサポートにお問い合わせください。",
        detail=str(exc) if request.app.debug else None,
        status_code=status.HTTP_500_INTERNAL_SERVER_ERROR,
        retry_available=True
    )
