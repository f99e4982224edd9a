"""
Exception handlers that turn server-side failures into error envelopes.

Every response body the console API produces, failures included, has the
``{"ok", "message", "data"}`` shape the request helper expects.
"""
from __future__ import annotations

import logging

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException

from liteconsole.core.envelope import error as envelope_error

log = logging.getLogger(__name__)


def _envelope_response(status_code: int, message: str) -> JSONResponse:
    return JSONResponse(status_code=status_code, content=envelope_error(message))


async def bad_argument_handler(request: Request, exc: ValueError) -> JSONResponse:
    log.warning("[接口] 参数错误: %s", exc)
    return _envelope_response(400, str(exc))


async def validation_handler(request: Request, exc: RequestValidationError) -> JSONResponse:
    details = "; ".join(
        f"{'.'.join(str(p) for p in err.get('loc', ()))}: {err.get('msg', '')}" for err in exc.errors()
    )
    log.warning("[接口] 参数校验失败: %s", details)
    return _envelope_response(400, f"参数校验失败: {details}")


async def http_error_handler(request: Request, exc: StarletteHTTPException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=envelope_error(str(exc.detail)),
        headers=getattr(exc, "headers", None),
    )


async def state_error_handler(request: Request, exc: RuntimeError) -> JSONResponse:
    log.error("[接口] 状态异常", exc_info=exc)
    return _envelope_response(500, str(exc))


async def unhandled_handler(request: Request, exc: Exception) -> JSONResponse:
    log.error("[接口] 未处理异常", exc_info=exc)
    return _envelope_response(500, f"系统内部异常: {exc}")


def register_exception_handlers(app: FastAPI) -> None:
    app.add_exception_handler(ValueError, bad_argument_handler)
    app.add_exception_handler(RequestValidationError, validation_handler)
    app.add_exception_handler(StarletteHTTPException, http_error_handler)
    app.add_exception_handler(RuntimeError, state_error_handler)
    app.add_exception_handler(Exception, unhandled_handler)
