import json
import logging
from decimal import Decimal

from .errors import MalformedBody, UnsupportedMediaType
from .models import JSON_MEDIA_TYPE, Request

logger = logging.getLogger(__name__)


def media_type(content_type):
    """Strip parameters (charset etc.) and normalise case."""
    if not content_type:
        return None
    return content_type.split(";", 1)[0].strip().lower()


def is_json_media_type(content_type) -> bool:
    mtype = media_type(content_type)
    if not mtype:
        return False
    if mtype == JSON_MEDIA_TYPE:
        return True
    # structured syntax suffix, e.g. application/vnd.api+json
    return mtype.startswith("application/") and mtype.endswith("+json")


def _reject_constant(name):
    raise ValueError(f"Non-standard JSON literal: {name}")


def parse_json_body(request: Request):
    """Decode the echo payload.

    Fractional numbers come back as ``Decimal`` so that values outside the
    float range (``1e400``) survive the round trip.
    """
    content_type = request.header("Content-Type")
    if not is_json_media_type(content_type):
        logger.debug("Rejected Content-Type %r", content_type)
        raise UnsupportedMediaType()

    try:
        text = request.body.decode("utf-8")
        return json.loads(text, parse_float=Decimal, parse_constant=_reject_constant)
    except (ValueError, RecursionError) as e:
        # JSONDecodeError and UnicodeDecodeError are both ValueErrors
        logger.debug("Malformed JSON body: %s", e)
        raise MalformedBody() from e
