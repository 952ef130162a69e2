"""Configuration for the L-system generator server."""

import logging
import os
from dotenv import load_dotenv

load_dotenv()

# Server
HOST = os.getenv("HOST", "0.0.0.0")
PORT = int(os.getenv("PORT", "8000"))
LOG_LEVEL = os.getenv("LOG_LEVEL", "INFO").upper()

# Request limits. Output grows exponentially with iterations, so both are
# enforced before any rewriting starts.
MAX_ITERATIONS = int(os.getenv("MAX_ITERATIONS", "12"))
DEFAULT_BUFFER_CAPACITY = int(os.getenv("DEFAULT_BUFFER_CAPACITY", str(1 << 16)))
MAX_BUFFER_CAPACITY = int(os.getenv("MAX_BUFFER_CAPACITY", str(1 << 22)))


def configure_logging(level: str | None = None) -> None:
    level = level or LOG_LEVEL
    logging.basicConfig(
        level=level,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )
    # basicConfig is a no-op once the root has handlers (uvicorn, pytest).
    logging.getLogger().setLevel(level)
