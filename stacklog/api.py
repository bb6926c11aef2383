"""FastAPI dashboard exposing the in-memory log history."""

import logging
import time as _time
from datetime import datetime, timezone

from fastapi import FastAPI, HTTPException, Query, Request, Response
from fastapi.responses import PlainTextResponse
from prometheus_client import CONTENT_TYPE_LATEST, generate_latest
from starlette.middleware.base import BaseHTTPMiddleware

from .bridge import get_default_logger
from .metrics import DASHBOARD_REQUEST_DURATION

logger = logging.getLogger(__name__)

app = FastAPI(
    title="stacklog dashboard",
    description="Recent log records held in memory",
    version="0.1.0",
)


class MetricsMiddleware(BaseHTTPMiddleware):
    """Record request duration for dashboard endpoints."""

    async def dispatch(self, request: Request, call_next):
        # Skip the /metrics endpoint itself to avoid recursion
        if request.url.path == '/metrics':
            return await call_next(request)

        start = _time.monotonic()
        response = await call_next(request)
        duration = _time.monotonic() - start

        DASHBOARD_REQUEST_DURATION.labels(
            method=request.method,
            endpoint=request.url.path,
            status_code=str(response.status_code),
        ).observe(duration)

        return response


app.add_middleware(MetricsMiddleware)


@app.on_event("startup")
async def startup_event():
    """Attach the default logger to the root logger."""
    log = get_default_logger()
    logger.info("=== stacklog dashboard started (capacity=%d) ===", log.capacity)


@app.get("/health")
async def health():
    log = get_default_logger()
    return {
        "status": "ok",
        "records": len(log),
        "capacity": log.capacity,
        "timestamp": datetime.now(timezone.utc).isoformat(),
    }


@app.get("/metrics")
async def prometheus_metrics():
    """Expose Prometheus metrics."""
    return Response(content=generate_latest(), media_type=CONTENT_TYPE_LATEST)


@app.get("/api/logs")
async def get_logs(lines: int = Query(100, ge=1, le=1000)):
    """Get recent formatted log lines."""
    try:
        log_lines = get_default_logger().recent(lines)
        return {
            "lines": log_lines,
            "count": len(log_lines),
            "timestamp": datetime.now(timezone.utc).isoformat(),
        }
    except Exception as e:
        logger.error("Failed to fetch logs: %s", e)
        raise HTTPException(status_code=500, detail=f"Failed to fetch logs: {str(e)}")


@app.get("/api/logs/text", response_class=PlainTextResponse)
async def get_logs_text():
    """Get the whole retained history as newline-joined text."""
    try:
        return get_default_logger().snapshot_formatted()
    except Exception as e:
        logger.error("Failed to render logs: %s", e)
        raise HTTPException(status_code=500, detail=f"Failed to render logs: {str(e)}")


@app.get("/api/records")
async def get_records(lines: int = Query(100, ge=1, le=1000)):
    """Get recent records as structured objects."""
    try:
        log = get_default_logger()
        records = log.snapshot()[-lines:]
        return {
            "records": [record.to_dict() for record in records],
            "count": len(records),
            "capacity": log.capacity,
        }
    except Exception as e:
        logger.error("Failed to fetch records: %s", e)
        raise HTTPException(status_code=500, detail=f"Failed to fetch records: {str(e)}")


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host="0.0.0.0", port=8000)
