from fastapi.responses import JSONResponse, Response

from chainrelay.constants import RELAY_ERROR_HEADER
from chainrelay.datastructures import UpstreamResponse
from chainrelay.exceptions import RelayException

TEXT_MEDIA_TYPE = "text/plain; charset=utf-8"


def relay_upstream_response(upstream: UpstreamResponse) -> Response:
    """Pass the upstream status and body back to the caller.

    A JSON body is returned as the original bytes rather than re-serialized,
    which keeps key order and number formatting intact. Anything that does not
    parse is returned verbatim as text.
    """
    try:
        upstream.json()
    except ValueError:
        return Response(
            content=upstream.content,
            status_code=upstream.status_code,
            media_type=upstream.content_type or TEXT_MEDIA_TYPE,
        )

    return Response(
        content=upstream.content,
        status_code=upstream.status_code,
        media_type="application/json",
    )


def relay_error_response(exc: RelayException) -> JSONResponse:
    return JSONResponse(
        status_code=exc.status_code,
        content=exc.to_content(),
        headers={RELAY_ERROR_HEADER: "proxy"},
    )


def internal_error_response(correlation_id: str) -> JSONResponse:
    return JSONResponse(
        status_code=500,
        content={
            "error": "Proxy request failed",
            "message": "An unexpected error occurred.",
            "correlation_id": correlation_id,
        },
        headers={RELAY_ERROR_HEADER: "proxy"},
    )
