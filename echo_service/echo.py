import json
from decimal import Decimal

from .body_parser import parse_json_body
from .models import Request, Response, json_response


class _Chunk(str):
    """Already-encoded output, as opposed to a string value still to encode."""


def dump_json(value) -> str:
    """Compact JSON encoding that writes ``Decimal`` numbers as parsed.

    Iterative so nesting depth is bounded by memory, not the recursion limit.
    """
    out = []
    stack = [value]
    while stack:
        item = stack.pop()
        if isinstance(item, _Chunk):
            out.append(item)
        elif isinstance(item, Decimal):
            out.append(str(item))
        elif isinstance(item, dict):
            parts = [_Chunk("{")]
            for i, (key, val) in enumerate(item.items()):
                prefix = "," if i else ""
                parts.append(_Chunk(prefix + json.dumps(key, ensure_ascii=False) + ":"))
                parts.append(val)
            parts.append(_Chunk("}"))
            stack.extend(reversed(parts))
        elif isinstance(item, list):
            parts = [_Chunk("[")]
            for i, val in enumerate(item):
                if i:
                    parts.append(_Chunk(","))
                parts.append(val)
            parts.append(_Chunk("]"))
            stack.extend(reversed(parts))
        else:
            out.append(json.dumps(item, ensure_ascii=False, allow_nan=False))
    return "".join(out)


def echo(request: Request) -> Response:
    data = parse_json_body(request)
    return json_response(dump_json(data).encode("utf-8"))
