from fastapi import Request
from fastapi.responses import Response

from chainrelay.constants import CORS_HEADERS


def apply_cors_headers(response: Response) -> Response:
    for name, value in CORS_HEADERS.items():
        response.headers[name] = value
    return response


def preflight_response(request: Request) -> Response | None:
    """Answer a CORS preflight, or return None for any other method."""
    if request.method != "OPTIONS":
        return None
    return apply_cors_headers(Response(status_code=200))
