"""
Settings for the Squares web service

This module provides functions to:
- Resolve the squares JSON file path (from .env or default)
- Resolve host/port settings for uvicorn
- Resolve the log level

Every value is read from the environment on each call, so tests can monkeypatch it.
"""

import os

from dotenv import load_dotenv

# Load environment variables from .env if present (working directory)
load_dotenv()

DEFAULT_SQUARES_FILE = "squares.json"
DEFAULT_HOST = "127.0.0.1"
DEFAULT_PORT = 8000


def squares_file() -> str:
    """Resolve the backing JSON file from env or use squares.json in the working directory."""
    path = os.getenv("SQUARES_FILE", DEFAULT_SQUARES_FILE)
    if not os.path.isabs(path):
        path = os.path.join(os.getcwd(), path)
    return path


def server_host() -> str:
    return os.getenv("HOST", DEFAULT_HOST)


def server_port() -> int:
    return int(os.getenv("PORT", str(DEFAULT_PORT)))


def log_level() -> str:
    return os.getenv("LOG_LEVEL", "INFO").upper()
