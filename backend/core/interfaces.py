from __future__ import annotations
from abc import ABC, abstractmethod
from dataclasses import dataclass


@dataclass(frozen=True)
class TransportResponse:
    status_code: int
    text: str


class HttpTransport(ABC):
    """Anything that can send a GET and hand back status + body."""

    @abstractmethod
    def get(self, url: str) -> TransportResponse: ...
