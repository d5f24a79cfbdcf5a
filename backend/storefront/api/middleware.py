"""API middleware for request processing."""

import logging
import math
import time
from collections import deque
from typing import Callable, Optional

from fastapi import Request, Response
from starlette.middleware.base import BaseHTTPMiddleware
from starlette.responses import JSONResponse

from storefront.utils.helpers import generate_uuid

logger = logging.getLogger(__name__)

_EVICT_EVERY = 1000  # requests between sweeps of idle clients


class LoggingMiddleware(BaseHTTPMiddleware):
    """Log each request with its status and timing, tagged with a request id."""

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        request_id = request.headers.get("X-Request-ID") or generate_uuid()
        start_time = time.monotonic()

        logger.info(
            "Request: %s %s",
            request.method,
            request.url.path,
            extra={
                "request_id": request_id,
                "method": request.method,
                "path": request.url.path,
                "client": request.client.host if request.client else "unknown",
            },
        )

        try:
            response = await call_next(request)
        except Exception as e:
            process_time = time.monotonic() - start_time
            logger.error(
                "Request failed after %.3fs: %s",
                process_time,
                e,
                extra={"request_id": request_id, "process_time_s": round(process_time, 3)},
            )
            raise

        process_time = time.monotonic() - start_time
        logger.info(
            "Response: %s in %.3fs",
            response.status_code,
            process_time,
            extra={
                "request_id": request_id,
                "status_code": response.status_code,
                "process_time_s": round(process_time, 3),
            },
        )

        response.headers["X-Request-ID"] = request_id
        response.headers["X-Process-Time"] = f"{process_time:.3f}"
        return response


class SlidingWindow:
    """Per-client request timestamps within the last ``period`` seconds."""

    def __init__(self, limit: int, period: float, clock: Callable[[], float] = time.monotonic) -> None:
        self.limit = limit
        self.period = period
        self.clock = clock
        self._hits: dict[str, deque[float]] = {}

    def hit(self, client_id: str) -> Optional[float]:
        """Record a request and return ``None``, or the seconds to wait if over the limit."""
        now = self.clock()
        hits = self._hits.setdefault(client_id, deque())
        while hits and hits[0] <= now - self.period:
            hits.popleft()

        if len(hits) >= self.limit:
            return hits[0] + self.period - now

        hits.append(now)
        return None

    def evict_idle(self) -> int:
        """Drop clients with no request inside the window; returns how many went."""
        cutoff = self.clock() - self.period
        idle = [cid for cid, hits in self._hits.items() if not hits or hits[-1] <= cutoff]
        for cid in idle:
            del self._hits[cid]
        return len(idle)

    def __len__(self) -> int:
        return len(self._hits)


class RateLimitMiddleware(BaseHTTPMiddleware):
    """Answer 429 once a client address exceeds its request budget."""

    def __init__(self, app, requests_per_period: int = 60, period: int = 60) -> None:
        super().__init__(app)
        self.window = SlidingWindow(requests_per_period, period)
        self._requests_seen = 0

    async def dispatch(self, request: Request, call_next: Callable) -> Response:
        client_id = request.client.host if request.client else "unknown"

        self._requests_seen += 1
        if self._requests_seen % _EVICT_EVERY == 0:
            self.window.evict_idle()

        wait = self.window.hit(client_id)
        if wait is not None:
            retry_after = max(1, math.ceil(wait))
            logger.warning(
                "Rate limit exceeded for %s",
                client_id,
                extra={"client": client_id, "path": request.url.path, "retry_after": retry_after},
            )
            return JSONResponse(
                status_code=429,
                content={"error": "Rate limit exceeded", "retry_after": retry_after},
                headers={"Retry-After": str(retry_after)},
            )

        return await call_next(request)
