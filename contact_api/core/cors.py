"""
CORS policy.

The allow-list is a static table built once from settings. CorsPolicy sits in
front of everything: it answers every OPTIONS request itself with a 200 and
the advertised methods/headers, and rejects any other request carrying an
Origin outside the table before it reaches routing. Requests without an
Origin header (curl, server-to-server) are let through. CORSMiddleware only
decorates the responses of allowed, non-preflight requests.
"""

import logging
from typing import Iterable, Optional

from fastapi import FastAPI, Request
from fastapi.middleware.cors import CORSMiddleware
from fastapi.responses import JSONResponse, PlainTextResponse
from starlette.middleware.base import BaseHTTPMiddleware

logger = logging.getLogger(__name__)

ALLOWED_METHODS = ["GET", "POST", "PUT", "DELETE", "OPTIONS"]
ALLOWED_HEADERS = ["Content-Type", "Authorization"]


def preflight_headers(origin: Optional[str]) -> dict:
    headers = {
        "Access-Control-Allow-Credentials": "true",
        "Access-Control-Allow-Methods": ",".join(ALLOWED_METHODS),
        "Access-Control-Allow-Headers": ", ".join(ALLOWED_HEADERS),
        "Vary": "Origin",
    }
    if origin:
        headers["Access-Control-Allow-Origin"] = origin
    return headers


class CorsPolicy(BaseHTTPMiddleware):
    def __init__(self, app, allowed_origins: Iterable[str]):
        super().__init__(app)
        self.allowed_origins = frozenset(allowed_origins)

    async def dispatch(self, request: Request, call_next):
        origin = request.headers.get("origin")
        if origin and origin not in self.allowed_origins:
            logger.warning(f"Blocked {request.method} {request.url.path} from origin {origin}")
            return JSONResponse(status_code=403, content={"msg": "Not allowed by CORS"})

        # Requested headers are advertised against, never checked
        if request.method == "OPTIONS":
            return PlainTextResponse("OK", status_code=200, headers=preflight_headers(origin))

        return await call_next(request)


def install_cors(app: FastAPI, allowed_origins: Iterable[str]) -> None:
    origins = frozenset(allowed_origins)

    app.add_middleware(
        CORSMiddleware,
        allow_origins=sorted(origins),
        allow_credentials=True,
        allow_methods=ALLOWED_METHODS,
        allow_headers=ALLOWED_HEADERS,
    )
    # Added last so it runs first
    app.add_middleware(CorsPolicy, allowed_origins=origins)
