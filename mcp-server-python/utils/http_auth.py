"""
API key gate for the streamable HTTP transport.

Every HTTP request must carry a credential, either ``Authorization: Bearer
<key>`` or ``X-API-Key: <key>``. Requests without one are rejected with 401
before they reach the MCP session manager.
"""

import logging
from typing import Mapping, Optional

from starlette.datastructures import Headers
from starlette.responses import JSONResponse
from starlette.types import ASGIApp, Receive, Scope, Send

logger = logging.getLogger(__name__)

BEARER_PREFIX = "Bearer "
MISSING_KEY_MESSAGE = "Missing API key. Provide Authorization: Bearer <key> or X-API-Key header."


def extract_api_key(headers: Mapping[str, str]) -> Optional[str]:
    """
    Return the caller's API key, or None when no usable credential is present.

    A Bearer token takes precedence over X-API-Key. Surrounding whitespace is
    stripped and an empty key counts as missing.
    """
    authorization = headers.get("authorization")
    if authorization and authorization.startswith(BEARER_PREFIX):
        api_key = authorization[len(BEARER_PREFIX):].strip()
    else:
        api_key = (headers.get("x-api-key") or "").strip()
    return api_key or None


class ApiKeyAuthMiddleware:
    """Pure ASGI middleware so streamed MCP responses pass through untouched."""

    def __init__(self, app: ASGIApp):
        self.app = app

    async def __call__(self, scope: Scope, receive: Receive, send: Send) -> None:
        if scope["type"] != "http":
            await self.app(scope, receive, send)
            return

        api_key = extract_api_key(Headers(scope=scope))
        if api_key is None:
            logger.warning("Rejected %s %s: no API key", scope.get("method"), scope.get("path"))
            response = JSONResponse({"error": MISSING_KEY_MESSAGE}, status_code=401)
            await response(scope, receive, send)
            return

        scope.setdefault("state", {})["api_key"] = api_key
        await self.app(scope, receive, send)
