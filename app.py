"""Message Service — FastAPI application serving a single static message.

Architecture:
  - GET /message → handler builds a fresh Message → FastAPI serializes it to JSON
  - No state, no I/O; routing and error responses (404/405) are FastAPI defaults
  - Auto-generated docs routes are disabled so /message is the whole route table
"""

import logging
import os
from contextlib import asynccontextmanager

from fastapi import FastAPI
from pydantic import BaseModel, ConfigDict

logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(name)s] %(levelname)s: %(message)s")
logger = logging.getLogger(__name__)

# --- Config ---
HOST = os.environ.get("HOST", "0.0.0.0")
PORT = int(os.environ.get("PORT", "8080"))

MESSAGE_TEXT = "Hello from Google Cloud"
MESSAGE_PRIORITY = "High"


# --- Pydantic models ---
class Message(BaseModel):
    """Payload returned by GET /message."""
    model_config = ConfigDict(frozen=True)

    text: str
    priority: str


# --- Lifespan ---
@asynccontextmanager
async def lifespan(app: FastAPI):
    logger.info("Message service started (routes: %s)",
                ", ".join(sorted(r.path for r in app.routes)))
    yield
    logger.info("Message service stopped")


# --- App ---
app = FastAPI(
    title="Message Service",
    lifespan=lifespan,
    docs_url=None,
    redoc_url=None,
    openapi_url=None,
)


# --- API Routes ---
@app.api_route("/message", methods=["GET", "HEAD"])
async def get_message() -> Message:
    return Message(text=MESSAGE_TEXT, priority=MESSAGE_PRIORITY)


if __name__ == "__main__":
    import uvicorn
    uvicorn.run(app, host=HOST, port=PORT)
