from __future__ import annotations

import json
import os
from typing import Any, Mapping, Optional, Union

import httpx
from pydantic import BaseModel

from liteconsole.core.envelope import ResponseEnvelope, fallback_message
from liteconsole.core.errors import ApplicationError, ParseError

LITE_CONSOLE_URL = os.getenv("LITE_CONSOLE_URL", "http://localhost:8080").rstrip("/")


class RequestOptions(BaseModel):
    method: Optional[str] = None
    body: Any = None


OptionsLike = Union[RequestOptions, Mapping[str, Any], None]


def _resolve_url(path: str) -> str:
    if httpx.URL(path).is_absolute_url:
        return path
    if not path.startswith("/"):
        path = "/" + path
    return f"{LITE_CONSOLE_URL}{path}"


def _coerce_options(options: OptionsLike) -> RequestOptions:
    if options is None:
        return RequestOptions()
    if isinstance(options, RequestOptions):
        return options
    return RequestOptions(**options)


def _encode_body(body: Any) -> bytes:
    return json.dumps(body, ensure_ascii=False, separators=(",", ":"), allow_nan=False).encode("utf-8")


def _send_kwargs(opts: RequestOptions) -> dict:
    if opts.body is None:
        return {}
    return {
        "content": _encode_body(opts.body),
        "headers": {"Content-Type": "application/json"},
    }


def _read_envelope(payload: Any) -> Optional[ResponseEnvelope]:
    if not isinstance(payload, dict):
        return None
    return ResponseEnvelope.model_validate(payload)


def unwrap(response: httpx.Response) -> Any:
    """
    Decode a console response and return its envelope ``data``.

    Raises ParseError when the body is not JSON and ApplicationError when
    either the HTTP status or the envelope ``ok`` flag reports failure.
    """
    status = response.status_code
    try:
        payload = response.json()
    except ValueError:
        raise ParseError(status) from None

    envelope = _read_envelope(payload)
    if not response.is_success or envelope is None or not bool(envelope.ok):
        message = envelope.failure_message(status) if envelope is not None else fallback_message(status)
        raise ApplicationError(message, status, envelope)
    return envelope.data


async def request(
    path: str,
    options: OptionsLike = None,
    client: Optional[httpx.AsyncClient] = None,
) -> Any:
    opts = _coerce_options(options)
    method = (opts.method or "GET").upper()
    url = _resolve_url(path)
    kwargs = _send_kwargs(opts)

    if client is not None:
        r = await client.request(method, url, **kwargs)
    else:
        async with httpx.AsyncClient(timeout=None) as owned:
            r = await owned.request(method, url, **kwargs)
    return unwrap(r)
