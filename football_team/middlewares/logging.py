import json
import logging
import time
import uuid
from typing import Callable

from fastapi import Request
from starlette.middleware.base import BaseHTTPMiddleware

from football_team.config import LOG_LEVEL

logger = logging.getLogger("football_team_service")
handler = logging.StreamHandler()
handler.setFormatter(logging.Formatter("%(message)s"))
logger.addHandler(handler)
logger.setLevel(LOG_LEVEL)


class LoggingMiddleware(BaseHTTPMiddleware):
    async def dispatch(self, request: Request, call_next: Callable):
        request_id = str(uuid.uuid4())
        request.state.request_id = request_id
        start_time = time.time()

        body_bytes = await request.body()
        request_body = body_bytes.decode("utf-8", errors="replace") if body_bytes else None

        response = await call_next(request)

        body_chunks = []
        async for chunk in response.body_iterator:
            body_chunks.append(chunk)
        response_body_bytes = b"".join(body_chunks)

        async def async_iterator(data: bytes):
            yield data

        response.body_iterator = async_iterator(response_body_bytes)

        response_body = response_body_bytes.decode("utf-8", errors="replace") or None
        if response_body and response.headers.get("content-type", "").startswith(
            "application/json"
        ):
            try:
                response_body = json.loads(response_body)
            except json.JSONDecodeError:
                pass

        duration_ms = (time.time() - start_time) * 1000

        log_data = {
            "timestamp": time.strftime("%Y-%m-%dT%H:%M:%S", time.gmtime()),
            "request_id": request_id,
            "method": request.method,
            "path": request.url.path,
            "status_code": response.status_code,
            "duration_ms": round(duration_ms, 2),
            "request_body": request_body,
            "response_body": response_body,
        }

        logger.info(json.dumps(log_data))

        response.headers["X-Request-ID"] = request_id
        return response
