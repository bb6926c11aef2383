#!/usr/bin/env python3
"""Custom uvicorn runner with proper logging configuration."""

import logging
import os

import uvicorn
from dotenv import load_dotenv

from stacklog.bridge import get_default_logger

if __name__ == "__main__":
    load_dotenv()

    # Configure logging BEFORE starting uvicorn
    logging.basicConfig(
        level=logging.INFO,
        format='%(asctime)s [%(levelname)s] %(name)s: %(message)s',
        datefmt='%Y-%m-%d %H:%M:%S',
    )

    # The stacklog console sink mirrors application records; the stream
    # handler only carries stacklog's own diagnostics
    for handler in logging.getLogger().handlers:
        handler.addFilter(logging.Filter('stacklog'))

    # Attach the default logger so every stdlib record is retained
    log = get_default_logger()

    host = os.getenv('STACKLOG_API_HOST', '0.0.0.0')
    port = int(os.getenv('STACKLOG_API_PORT', '8000'))
    print(f"Log history initialized (capacity {log.capacity})")
    print(f"Starting uvicorn on {host}:{port}...")

    uvicorn.run(
        "stacklog.api:app",
        host=host,
        port=port,
        log_level="info",
        access_log=False,  # Disable access logs to reduce noise
    )
