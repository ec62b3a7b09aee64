import json
import logging
import typing

import httpx
from fastapi import Request

from chainrelay.allowlist import Allowlist
from chainrelay.datastructures import OutboundRequest
from chainrelay.exceptions import (
    ForbiddenHostException,
    MethodNotAllowedException,
    ValidationException,
)

logger = logging.getLogger("chainrelay")

ALLOWED_SCHEMES = ("http", "https")


class RequestValidator:
    """Turns an inbound request into an :class:`OutboundRequest`.

    The target is taken from the body's ``targetUrl`` when present, otherwise
    from the ``url``/``path`` query parameters, with ``url`` falling back to
    the configured default target. Either way the hostname goes
    through the allowlist before an outbound request exists.
    """

    def __init__(self, *, allowlist: Allowlist, default_target_url: str):
        self.allowlist = allowlist
        self.default_target_url = default_target_url

    async def validate(self, request: Request) -> OutboundRequest:
        if request.method != "POST":
            raise MethodNotAllowedException()

        body = await self._read_body(request)
        target_url = self.resolve_target(body, request.query_params)
        url = self.parse_target(target_url)

        if not self.allowlist.is_allowed(url.host):
            logger.warning(
                "Rejected target host",
                extra={
                    "correlation_id": getattr(request.state, "correlation_id", None),
                    "target_host": url.host,
                },
            )
            raise ForbiddenHostException(url.host)

        request.state.target_host = url.host
        payload = {"query": body.get("query"), "variables": body.get("variables")}
        return OutboundRequest.build(str(url), payload)

    @staticmethod
    async def _read_body(request: Request) -> typing.Dict[str, typing.Any]:
        raw = await request.body()
        if not raw.strip():
            return {}
        try:
            body = json.loads(raw)
        except ValueError as e:
            raise ValidationException("Invalid JSON body") from e
        if not isinstance(body, dict):
            raise ValidationException("Invalid JSON body")
        return body

    def resolve_target(self, body: typing.Mapping[str, typing.Any], query_params: typing.Mapping[str, str]) -> str:
        if "targetUrl" in body:
            target_url = body["targetUrl"]
            if not isinstance(target_url, str) or not target_url.strip():
                raise ValidationException()
            return target_url.strip()

        base = query_params.get("url") or self.default_target_url
        return f"{base}{query_params.get('path', '')}"

    @staticmethod
    def parse_target(target_url: str) -> httpx.URL:
        try:
            url = httpx.URL(target_url)
        except (httpx.InvalidURL, TypeError, ValueError) as e:
            raise ValidationException("Invalid targetUrl") from e
        if url.scheme not in ALLOWED_SCHEMES or not url.host:
            raise ValidationException("Invalid targetUrl")
        return url
