import functools
import logging
import time
import uuid

from fastapi import FastAPI, Request
from fastapi.responses import JSONResponse

from chainrelay.allowlist import Allowlist, load_allowlist
from chainrelay.config import ConfigManager
from chainrelay.cors import apply_cors_headers, preflight_response
from chainrelay.exceptions import MethodNotAllowedException, RelayException
from chainrelay.forwarder import UpstreamForwarder
from chainrelay.logging import setup_logging
from chainrelay.relay import (
    internal_error_response,
    relay_error_response,
    relay_upstream_response,
)
from chainrelay.validation import RequestValidator
from chainrelay.version import VERSION

RELAY_METHODS = ["GET", "POST", "PUT", "DELETE", "HEAD", "OPTIONS", "PATCH"]


setup_logging()

logger = logging.getLogger("chainrelay")


def relay_route():
    def wrapper(func):
        @functools.wraps(func)
        async def wrapped(*args, **kwargs):
            request: Request = kwargs.get('request') or args[-1]
            correlation_id = str(uuid.uuid4())
            request.state.correlation_id = correlation_id

            preflight = preflight_response(request)
            if preflight is not None:
                return preflight

            logger.info(
                "Incoming relay request",
                extra={
                    "correlation_id": correlation_id,
                    "method": request.method,
                    "url": str(request.url),
                    "client_host": request.client.host if request.client else "unknown",
                }
            )
            start_time = time.time()

            try:
                response = await func(*args, **kwargs)
                elapsed_time = time.time() - start_time
                logger.info(
                    "Relay request processed successfully",
                    extra={
                        "correlation_id": correlation_id,
                        "status_code": response.status_code,
                        "content_type": response.headers.get("Content-Type", "unknown"),
                        "target_host": getattr(request.state, "target_host", None),
                        "elapsed_time": f"{elapsed_time:.3f}s",
                    }
                )
            except RelayException as rex:
                elapsed_time = time.time() - start_time
                logger.error(
                    "RelayException encountered",
                    extra={
                        "correlation_id": correlation_id,
                        "exception": rex.__class__.__name__,
                        "status_code": rex.status_code,
                        "details": rex.to_content(),
                        "elapsed_time": f"{elapsed_time:.3f}s",
                    }
                )
                response = relay_error_response(rex)
            except Exception as exc:
                elapsed_time = time.time() - start_time
                logger.error(
                    "Unexpected error occurred",
                    exc_info=True,
                    extra={
                        "correlation_id": correlation_id,
                        "exception": str(exc),
                        "elapsed_time": f"{elapsed_time:.3f}s",
                    }
                )
                response = internal_error_response(correlation_id)
            return apply_cors_headers(response)
        return wrapped
    return wrapper


class Relay:
    def __init__(self, allowlist: Allowlist | None = None, config: ConfigManager | None = None):
        self.config = config or ConfigManager()
        self.allowlist = allowlist or load_allowlist(self.config.ALLOWLIST_PATH)

        logger.info(
            "Relay allowlist loaded",
            extra={"allowed_hosts": sorted(self.allowlist.hosts)},
        )

        self.validator = RequestValidator(
            allowlist=self.allowlist,
            default_target_url=self.config.DEFAULT_TARGET_URL,
        )
        self.forwarder = UpstreamForwarder(timeout=self.config.CLIENT_TIMEOUT_SECS)

    @relay_route()
    async def _meta_route(self, request: Request):
        if request.method != "GET":
            raise MethodNotAllowedException()
        return JSONResponse(
            content={
                "version": VERSION,
                "allowlist": {
                    "version": self.allowlist.version,
                    "hosts": sorted(self.allowlist.hosts),
                },
                "default_target_url": self.config.DEFAULT_TARGET_URL,
            },
            status_code=200,
        )

    @relay_route()
    async def _proxy_route(self, request: Request):
        outbound = await self.validator.validate(request)
        upstream = await self.forwarder.forward(
            outbound, correlation_id=request.state.correlation_id,
        )
        return relay_upstream_response(upstream)

    def to_fastapi(self, app: FastAPI):
        app.api_route("/_relay/meta", methods=RELAY_METHODS)(self._meta_route)
        app.api_route(self.config.ROUTE_PATH, methods=RELAY_METHODS)(self._proxy_route)
