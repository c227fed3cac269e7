from contextlib import asynccontextmanager

from fastapi import FastAPI
from fastapi.exceptions import RequestValidationError
from fastapi.middleware.cors import CORSMiddleware
from slowapi.errors import RateLimitExceeded
from tortoise.contrib.fastapi import RegisterTortoise

from userhub.infra.config import get_settings
from userhub.infra.logging_config import LoggingMiddleware, get_logger, set_log_level
from userhub.infra.tortoise_client.config import get_tortoise_config
from userhub.domain.exception.user_exceptions import (
    InvalidFieldError,
    StoreUnavailableError,
    UserAlreadyExistsError,
)

from .routers.users import router as users_router
from .error_handlers import (
    handle_generic_error,
    handle_invalid_field,
    handle_store_unavailable,
    handle_user_already_exists,
    handle_validation_exception,
)
from .rate_limiter import limiter, rate_limit_error_handler

VERSION = "0.1.0"

settings = get_settings()
logger = get_logger("app", level=settings.log_level_value)

@asynccontextmanager
async def lifespan(app: FastAPI):
    """アプリケーションの起動・終了処理"""
    set_log_level(settings.log_level_value)
    logger.info("Application starting up", extra={"environment": settings.environment})

    async with RegisterTortoise(
        app,
        config=get_tortoise_config(settings.database_url),
        generate_schemas=settings.generate_schemas,
    ):
        logger.info("Tortoise ORM initialized")
        yield

    logger.info("Application shutdown complete")

app = FastAPI(
    title="User Registration API",
    version=VERSION,
    lifespan=lifespan
)

# レート制限の設定
app.state.limiter = limiter
app.add_exception_handler(RateLimitExceeded, rate_limit_error_handler)

app.add_middleware(LoggingMiddleware)

# CORS 設定（環境設定に基づく）
app.add_middleware(
    CORSMiddleware,
    allow_origins=settings.cors_origins,
    allow_credentials=True,
    allow_methods=["*"],
    allow_headers=["*"],
)

app.include_router(users_router)

@app.get("/api/v1/health")
async def health_check():
    """ヘルスチェックエンドポイント"""
    return {"status": "healthy", "version": VERSION}

# エラーハンドラーの登録
app.add_exception_handler(UserAlreadyExistsError, handle_user_already_exists)
app.add_exception_handler(InvalidFieldError, handle_invalid_field)
app.add_exception_handler(StoreUnavailableError, handle_store_unavailable)
app.add_exception_handler(RequestValidationError, handle_validation_exception)
app.add_exception_handler(Exception, handle_generic_error)


#uvicorn userhub.infra.rest_api.main:app --reload
