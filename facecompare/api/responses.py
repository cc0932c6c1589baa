"""Fixed-shape JSON replies shared by all endpoints."""
from typing import Any, Dict

from fastapi.responses import JSONResponse

from facecompare.core.config import settings

ALLOWED_METHODS = "OPTIONS,GET,POST"
# Header name used by the original deployment, kept for byte-compatible clients
LEGACY_METHODS_HEADER = "Access-Conrol-Allow-Methods"


def cors_headers() -> Dict[str, str]:
    """Headers attached to every reply."""
    methods_header = (
        LEGACY_METHODS_HEADER if settings.LEGACY_METHODS_HEADER
        else "Access-Control-Allow-Methods"
    )
    return {
        "Access-Control-Allow-Origin": "*",
        methods_header: ALLOWED_METHODS,
    }


def reply(content: Any, status_code: int = 200) -> JSONResponse:
    """Encode ``content`` as a JSON reply with CORS headers."""
    return JSONResponse(content=content, status_code=status_code, headers=cors_headers())


def error_reply(message: str, status_code: int = 400) -> JSONResponse:
    """JSON string body carrying a fixed, human readable error message."""
    return reply(message, status_code=status_code)
