"""
Logging setup shared by the server entrypoint and the request handlers.
"""

import logging
import sys

from fastapi import Request

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"


def configure_logging(level: str = "INFO") -> None:
    """Configure the root logger to write to stdout.

    Args:
        level: The log level name (DEBUG, INFO, WARNING, ERROR).
    """
    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        format=LOG_FORMAT,
        datefmt=LOG_DATE_FORMAT,
        stream=sys.stdout,
        force=True,
    )

    # request lines are logged by the handlers themselves
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)


def request_context(request: Request) -> str:
    """Render the request attributes attached to every handler log line."""
    remote_addr = request.client.host if request.client else "-"
    user_agent = request.headers.get("user-agent", "-")
    return (
        f"method={request.method} path={request.url.path} "
        f"remote_addr={remote_addr} user_agent={user_agent!r}"
    )
