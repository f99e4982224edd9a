from __future__ import annotations

from typing import Optional

from liteconsole.core.envelope import ResponseEnvelope


class RequestError(Exception):
    """Base error for a failed console API call."""

    def __init__(self, message: str, status_code: int):
        super().__init__(message)
        self.message = message
        self.status_code = status_code


class ParseError(RequestError):
    """The response body could not be decoded as JSON."""

    def __init__(self, status_code: int):
        super().__init__(f"接口返回无法解析: {status_code}", status_code)


class ApplicationError(RequestError):
    """HTTP failure status or an envelope with ``ok`` false."""

    def __init__(self, message: str, status_code: int, envelope: Optional[ResponseEnvelope] = None):
        super().__init__(message, status_code)
        self.envelope = envelope
