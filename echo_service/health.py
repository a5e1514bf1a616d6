from .models import Request, Response, json_response

HEALTH_BODY = b'{"status":"ok"}'


def health(request: Request) -> Response:
    return json_response(HEALTH_BODY)
