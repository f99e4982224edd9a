from __future__ import annotations

from fastapi import FastAPI

from liteconsole.core.envelope import ok
from liteconsole.web.handlers import register_exception_handlers


app = FastAPI(title="Lite Console", version="0.1.0")
register_exception_handlers(app)


@app.get("/api/health")
def health():
    return ok({"status": "ok", "service": "lite-console"})
