import logging

from fastapi import APIRouter, Request
from fastapi.responses import PlainTextResponse

from app.utils.logging_config import request_context

logger = logging.getLogger(__name__)

system_Router = APIRouter()


@system_Router.get("/health", response_class=PlainTextResponse, tags=["system"])
def health_check(request: Request):
    """
    Liveness probe. Never touches the database.
    """
    logger.info(f"Health check requested: {request_context(request)}")
    return "OK"
