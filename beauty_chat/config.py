# Role: Widget settings. The worker URL, request timeout and greeting are fixed literals; the only
# environment input is DEBUG, read from .env so diagnostics can be switched on without code changes.

from __future__ import annotations

import os
from dotenv import load_dotenv

DEBUG: bool = False

# Key line: the worker holds the model credentials, the client only knows where it lives.
WORKER_URL: str = "https://gca-loreal-worker.nhoekstr.workers.dev/"

# Key line: a hung worker surfaces as a transport failure instead of a forever-disabled input.
REQUEST_TIMEOUT_SECONDS: float = 30

GREETING: str = "👋 Hello! How can I help you today?"


def load_env() -> None:
    """Read .env (without overriding real environment variables) and refresh DEBUG from it."""
    global DEBUG
    load_dotenv()
    DEBUG = os.getenv("DEBUG", "0").lower() in {"1", "true", "yes"}
