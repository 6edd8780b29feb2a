# workout_tracker/deps/context.py
from __future__ import annotations
from dataclasses import dataclass, field
import logging
import uuid

from fastapi import Request

log = logging.getLogger("workout_tracker")


@dataclass(slots=True)
class RequestContext:
    """Structured fields describing one request, carried on ``request.state``.

    Created by the logging middleware; the URL params are filled in once the
    router has matched a route.
    """
    request_id: str
    method: str
    path: str
    client: str | None = None
    url_params: dict[str, str] = field(default_factory=dict)

    @classmethod
    def from_request(cls, request: Request) -> RequestContext:
        return cls(
            request_id=request.headers.get("X-Request-ID") or str(uuid.uuid4()),
            method=request.method,
            path=request.url.path,
            client=request.client.host if request.client else None,
        )

    def fields(self) -> dict[str, object]:
        return {
            "request_id": self.request_id,
            "method": self.method,
            "path": self.path,
            "url_params": dict(self.url_params),
        }

    def logger(self) -> RequestLogger:
        return RequestLogger(log, self.fields())


class RequestLogger(logging.LoggerAdapter):
    """Prefixes messages with the request id and attaches the context as ``extra``."""

    def process(self, msg, kwargs):
        kwargs.setdefault("extra", {}).update(self.extra)
        return f"rid={self.extra['request_id']} {msg}", kwargs


def get_request_context(request: Request) -> RequestContext:
    ctx = getattr(request.state, "context", None)
    if ctx is None:  # middleware not installed, e.g. a bare test app
        ctx = RequestContext.from_request(request)
        request.state.context = ctx
    ctx.url_params = {k: str(v) for k, v in request.path_params.items()}
    return ctx


def get_request_logger(request: Request) -> RequestLogger:
    return get_request_context(request).logger()
