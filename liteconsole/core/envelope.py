from __future__ import annotations

from typing import Any

from pydantic import BaseModel, ConfigDict


class ResponseEnvelope(BaseModel):
    """Decoded body of every console API response."""

    model_config = ConfigDict(extra="allow")

    ok: Any = None
    message: Any = None
    data: Any = None

    def failure_message(self, status_code: int) -> str:
        if self.message:
            return str(self.message)
        return fallback_message(status_code)


def fallback_message(status_code: int) -> str:
    return f"请求失败: {status_code}"


def ok(data: Any = None) -> dict:
    return ResponseEnvelope(ok=True, data=data).model_dump()


def error(message: str) -> dict:
    return ResponseEnvelope(ok=False, message=message).model_dump()
