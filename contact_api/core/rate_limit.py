"""
Rate limiting for the contact form.

A single in-memory fixed-window limiter keyed by client address. Counters
live for the life of the process; every request to a limited route counts,
whatever its outcome.
"""

import logging
from typing import Optional

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address

from contact_api.core.config import get_settings

logger = logging.getLogger(__name__)

RATE_LIMIT_MESSAGE = "Too many requests from this IP, please try again later."

limiter = Limiter(key_func=get_remote_address, strategy="fixed-window")

# Set by create_app from its settings; the limiter itself is process-wide
_contact_limit: Optional[str] = None


def configure_contact_limit(limit: str) -> None:
    global _contact_limit
    _contact_limit = limit


def contact_rate_limit() -> str:
    """Limit for POST /api/contact, e.g. "5/15 minutes" """
    return _contact_limit or get_settings().contact_rate_limit


async def rate_limit_exceeded_handler(request: Request, exc: RateLimitExceeded):
    logger.warning(f"Rate limit exceeded for {get_remote_address(request)} on {request.url.path}")
    return JSONResponse(status_code=429, content={"msg": RATE_LIMIT_MESSAGE})
