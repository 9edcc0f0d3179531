"""
API key gate.

Presence-only check: the key's value is not compared against anything.
Installed as HTTP middleware so it answers before any body parsing or
token validation happens.
"""

from typing import Callable

from fastapi import FastAPI, Request, Response
from fastapi.responses import JSONResponse

from modules.auth.exceptions import MissingAPIKeyError

# Probe endpoints reachable without a key
OPEN_PATHS = frozenset({"/health", "/ready"})


def install_api_key_gate(app: FastAPI, header_name: str) -> None:
    """Reject every request outside OPEN_PATHS that lacks a non-blank key header."""

    @app.middleware("http")
    async def require_api_key(request: Request, call_next: Callable) -> Response:
        if request.url.path not in OPEN_PATHS and not request.headers.get(header_name, "").strip():
            error = MissingAPIKeyError()
            return JSONResponse(
                status_code=error.status_code,
                content=error.to_dict(),
                headers={"WWW-Authenticate": "Bearer"},
            )
        return await call_next(request)
