"""Subject middleware - reads the caller identity set by an authenticating gateway."""

import falcon
import falcon.asgi

from aclgraph.domain.exceptions import ValidationError
from aclgraph.domain.value_objects import ModelRef


class TrustedSubjectMiddleware:
    """Sets req.context.subject from a ``Type:id`` header.

    Only for deployments where a gateway authenticates the caller and
    overwrites the header; requests without it get no subject.
    """

    def __init__(self, header: str = "X-Subject") -> None:
        self._header = header

    async def process_request(
        self, req: falcon.asgi.Request, resp: falcon.asgi.Response
    ) -> None:
        raw = req.get_header(self._header)
        if not raw:
            req.context.subject = None
            return
        try:
            req.context.subject = ModelRef.parse(raw)
        except ValidationError as e:
            raise falcon.HTTPBadRequest(description=str(e)) from None
