import logging

import httpx

from chainrelay.datastructures import OutboundRequest, UpstreamResponse
from chainrelay.exceptions import UpstreamTransportException

logger = logging.getLogger("chainrelay")


class UpstreamForwarder:
    def __init__(self, *, timeout: float):
        self.timeout = timeout

    async def forward(self, outbound: OutboundRequest, correlation_id: str | None = None) -> UpstreamResponse:
        logger.debug(
            "Forwarding request upstream",
            extra={"correlation_id": correlation_id, "target_url": outbound.url},
        )
        # Single attempt; the caller decides whether to retry.
        async with httpx.AsyncClient(timeout=self.timeout) as client:
            try:
                response = await client.post(
                    outbound.url,
                    headers=outbound.headers,
                    content=outbound.content,
                )
            except httpx.TransportError as e:
                raise UpstreamTransportException(str(e) or e.__class__.__name__) from e

        return UpstreamResponse(
            status_code=response.status_code,
            content=response.content,
            content_type=response.headers.get("content-type"),
        )
