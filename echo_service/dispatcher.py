"""Explicit method+path dispatch for the echo service.

Every route the service answers is listed in ``ROUTES``. A known path with an
unlisted method is a 405; anything else is a 404.
"""
import logging
from typing import Callable, Dict

from .echo import echo
from .errors import EchoServiceError, MethodNotAllowed, NotFound
from .health import health
from .models import Request, Response

logger = logging.getLogger(__name__)

Handler = Callable[[Request], Response]

ROUTES: Dict[str, Dict[str, Handler]] = {
    "/": {"POST": echo},
    "/health": {"GET": health},
}


def resolve(method: str, path: str) -> Handler:
    """Return the handler for method+path or raise NotFound / MethodNotAllowed."""
    methods = ROUTES.get(path)
    if methods is None:
        raise NotFound(f"No route for {path}")

    handler = methods.get(method.upper())
    if handler is None:
        raise MethodNotAllowed(methods.keys(), f"{method.upper()} not allowed on {path}")
    return handler


def dispatch(request: Request) -> Response:
    logger.info("Received request: %s %s", request.method, request.path)
    try:
        handler = resolve(request.method, request.path)
        response = handler(request)
    except EchoServiceError as e:
        logger.info("Rejected %s %s (%d): %s", request.method, request.path, e.status_code, e.detail)
        raise

    logger.info("Request processed successfully: %s %s -> %d", request.method, request.path, response.status_code)
    return response
