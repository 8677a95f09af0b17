"""Startup script for container deployment."""
import logging
import os

import uvicorn

HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8080"))
LOG_LEVEL = os.environ.get("LOG_LEVEL", "info").lower()

logging.basicConfig(level=LOG_LEVEL.upper(), format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger(__name__)


def main():
    logger.info("Starting message service on %s:%d", HOST, PORT)
    uvicorn.run("app:app", host=HOST, port=PORT, log_level=LOG_LEVEL)


if __name__ == "__main__":
    main()
