from fastapi import HTTPException


class EchoServiceError(HTTPException):
    status_code = 500
    message = "Internal error"

    def __init__(self, detail: str = None, headers: dict = None):
        super().__init__(status_code=self.status_code, detail=detail or self.message, headers=headers)


class MalformedBody(EchoServiceError):
    status_code = 400
    message = "Request body is not valid JSON"


class UnsupportedMediaType(EchoServiceError):
    status_code = 415
    message = "Content-Type must be application/json"


class MethodNotAllowed(EchoServiceError):
    status_code = 405
    message = "Method not allowed"

    def __init__(self, allowed, detail: str = None):
        self.allowed = sorted(allowed)
        super().__init__(detail=detail, headers={"Allow": ", ".join(self.allowed)})


class NotFound(EchoServiceError):
    status_code = 404
    message = "Not found"
