import logging
import json
import sys
from datetime import datetime, timezone
from pathlib import Path
from typing import Optional, Dict
from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware
import time
import uuid

# LogRecord attributes that are not user-supplied extras
_RESERVED_ATTRS = frozenset(
    logging.LogRecord("", 0, "", 0, "", (), None).__dict__.keys()
) | {"message", "asctime", "taskName"}


class JSONFormatter(logging.Formatter):
    def format(self, record: logging.LogRecord) -> str:
        log_obj = {
            "timestamp": datetime.fromtimestamp(record.created, timezone.utc).isoformat(),
            "level": record.levelname,
            "logger": record.name,
            "message": record.getMessage(),
            "module": record.module,
            "function": record.funcName,
            "line": record.lineno,
        }

        for key, value in record.__dict__.items():
            if key not in _RESERVED_ATTRS:
                log_obj[key] = value

        if record.exc_info:
            log_obj["exception"] = self.formatException(record.exc_info)

        return json.dumps(log_obj, default=str, ensure_ascii=False)


def setup_logging(
    name: str,
    level: int = logging.INFO,
    log_file: Optional[str] = None,
    console: bool = False
) -> logging.Logger:
    logger = logging.getLogger(name)
    logger.setLevel(level)
    logger.handlers.clear()
    logger.propagate = False

    json_formatter = JSONFormatter()

    if log_file:
        Path(log_file).parent.mkdir(parents=True, exist_ok=True)
        file_handler = logging.FileHandler(log_file, encoding="utf-8")
        file_handler.setFormatter(json_formatter)
        logger.addHandler(file_handler)

    # Console is the fallback when no file is given
    if console or not log_file:
        console_handler = logging.StreamHandler(sys.stdout)
        console_handler.setFormatter(json_formatter)
        logger.addHandler(console_handler)

    return logger


_loggers: Dict[str, logging.Logger] = {}


def get_logger(name: str, **kwargs) -> logging.Logger:
    if name not in _loggers:
        _loggers[name] = setup_logging(name, **kwargs)
    return _loggers[name]


def set_log_level(level: int) -> None:
    """Apply a level to every logger created through get_logger"""
    for logger in _loggers.values():
        logger.setLevel(level)


class LoggingMiddleware(BaseHTTPMiddleware):
    def __init__(self, app):
        super().__init__(app)
        self.logger = get_logger("api.access")

    async def dispatch(self, request: Request, call_next):
        request_id = request.headers.get("X-Request-ID") or str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.perf_counter()
        base = {
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
        }

        self.logger.info(
            "Request started",
            extra={**base, "client": request.client.host if request.client else None},
        )

        try:
            response = await call_next(request)
        except Exception as e:
            self.logger.error(
                "Request failed",
                extra={
                    **base,
                    "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
                    "error": str(e),
                },
                exc_info=True,
            )
            raise

        self.logger.info(
            "Request completed",
            extra={
                **base,
                "status_code": response.status_code,
                "duration_ms": round((time.perf_counter() - start_time) * 1000, 2),
            }
        )
        response.headers["X-Request-ID"] = request_id
        return response
