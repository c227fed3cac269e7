from slowapi import Limiter
from slowapi.util import get_remote_address
from slowapi.errors import RateLimitExceeded
from fastapi import Request
from fastapi.responses import JSONResponse

from ..config import get_settings

# 登録エンドポイントは未認証のため、クライアントIPで制限する
limiter = Limiter(
    key_func=get_remote_address,
    enabled=get_settings().rate_limit_enabled,
)

def rate_limit_error_handler(request: Request, exc: RateLimitExceeded) -> JSONResponse:
    return JSONResponse(
        status_code=429,
        content={
            "error_type": "rate_limited",
            "user_message": "リクエストが多すぎます。しばらく待ってから再試行してください。",
            "retry_available": True,
            "detail": str(exc.detail),
        },
        headers={"Retry-After": str(getattr(exc, "retry_after", 60))},
    )
