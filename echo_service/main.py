from fastapi import FastAPI
from fastapi import Request as HTTPRequest
from fastapi import Response as HTTPResponse

from .dispatcher import dispatch
from .models import Request

app = FastAPI(title="Echo Service", docs_url=None, redoc_url=None, openapi_url=None)


class DispatchEndpoint:
    """ASGI endpoint mounted for every method; the dispatcher picks 404/405."""

    async def __call__(self, scope, receive, send):
        request = HTTPRequest(scope, receive)
        req = Request(
            method=request.method,
            path=request.url.path,
            headers=dict(request.headers),
            body=await request.body(),
        )
        resp = dispatch(req)
        response = HTTPResponse(content=resp.body, status_code=resp.status_code, headers=resp.headers)
        await response(scope, receive, send)


# A non-function endpoint registered without methods matches any method.
app.add_route("/{path:path}", DispatchEndpoint(), include_in_schema=False)
