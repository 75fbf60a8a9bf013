"""FastAPI application exposing the shared Fibonacci cursor.

Endpoints:
* ``GET /next`` - advance the cursor and return the new term
* ``GET /previous`` - step the cursor back and return the new term
* ``GET /current`` - return the current term without moving

Every response body is the term as plain base-10 text. Calling
``/current`` before any ``/next`` returns 0.
"""

from __future__ import annotations

import logging
from typing import Optional

from fastapi import FastAPI, Request
from fastapi.responses import PlainTextResponse

from .access import SharedCursor
from .exceptions import CursorAccessError

logger = logging.getLogger(__name__)


def create_app(shared: Optional[SharedCursor] = None) -> FastAPI:
    """Build the application around one shared cursor.

    Args:
        shared: Cursor handle served by every request (default: a fresh one)
    """
    app = FastAPI(title="fibcursor")
    app.state.cursor = shared if shared is not None else SharedCursor()

    @app.exception_handler(CursorAccessError)
    async def cursor_access_error(request: Request, exc: CursorAccessError) -> PlainTextResponse:
        logger.error(f"{request.url.path} failed: {exc}")
        return PlainTextResponse(str(exc), status_code=503)

    @app.get("/next", response_class=PlainTextResponse)
    def fib_next(request: Request) -> str:
        """Get the next value for the shared sequence."""
        return request.app.state.cursor.advance()

    @app.get("/previous", response_class=PlainTextResponse)
    def fib_previous(request: Request) -> str:
        """Get the previous value for the shared sequence."""
        return request.app.state.cursor.retreat()

    @app.get("/current", response_class=PlainTextResponse)
    def fib_current(request: Request) -> str:
        """Get the current value of the shared sequence."""
        return request.app.state.cursor.peek()

    return app
