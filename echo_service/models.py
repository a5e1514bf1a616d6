from typing import Dict, Optional
from pydantic import BaseModel

JSON_MEDIA_TYPE = "application/json"


class Request(BaseModel):
    method: str
    path: str
    headers: Dict[str, str] = {}
    body: bytes = b""

    def header(self, name: str) -> Optional[str]:
        """Case-insensitive header lookup."""
        name = name.lower()
        for key, value in self.headers.items():
            if key.lower() == name:
                return value
        return None


class Response(BaseModel):
    status_code: int = 200
    headers: Dict[str, str] = {}
    body: bytes = b""


def json_response(body: bytes, status_code: int = 200) -> Response:
    return Response(status_code=status_code, headers={"Content-Type": JSON_MEDIA_TYPE}, body=body)
