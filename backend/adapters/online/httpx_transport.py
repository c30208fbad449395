import logging
import re
from time import monotonic

import httpx

from core.exceptions import TransportError
from core.interfaces import HttpTransport, TransportResponse

logger = logging.getLogger(__name__)

CONNECT_TIMEOUT_S = 2.0
TOTAL_TIMEOUT_S = 10.0

_KEY_PARAM = re.compile(r"(\bkey=)[^&\s\"']+")


def redact_key(text: str) -> str:
    return _KEY_PARAM.sub(r"\1***", text)


class RedactKeyFilter(logging.Filter):
    """Masks the `key=` query value in records httpx/httpcore emit."""

    def filter(self, record: logging.LogRecord) -> bool:
        message = record.getMessage()
        redacted = redact_key(message)
        if redacted != message:
            record.msg = redacted
            record.args = ()
        return True


_redact_filter = RedactKeyFilter()
for _name in ("httpx", "httpcore"):
    logging.getLogger(_name).addFilter(_redact_filter)


class HttpxTransport(HttpTransport):
    """
    Blocking GET over httpx; one client per request, closed on every path.

    httpx timeouts apply per connect/read/write, so the overall budget is
    checked against a wall clock while the body streams in.
    """

    def __init__(
        self,
        connect_timeout: float = CONNECT_TIMEOUT_S,
        timeout: float = TOTAL_TIMEOUT_S,
    ):
        self.total_timeout = timeout
        self.timeout = httpx.Timeout(timeout, connect=connect_timeout)

    def get(self, url: str) -> TransportResponse:
        deadline = monotonic() + self.total_timeout
        try:
            with httpx.Client(timeout=self.timeout) as client:
                with client.stream("GET", url) as r:
                    chunks = []
                    for chunk in r.iter_bytes():
                        chunks.append(chunk)
                        self._check_deadline(deadline)
                    self._check_deadline(deadline)
                    body = b"".join(chunks)
                    text = body.decode(r.encoding or "utf-8", errors="replace")
                    return TransportResponse(status_code=r.status_code, text=text)
        except (httpx.HTTPError, httpx.InvalidURL) as e:
            logger.warning("Distance matrix transport failure: %s", type(e).__name__)
            raise TransportError() from e

    def _check_deadline(self, deadline: float) -> None:
        if monotonic() > deadline:
            logger.warning(
                "Distance matrix response exceeded %.1fs total budget",
                self.total_timeout,
            )
            raise TransportError()
