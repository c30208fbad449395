# adapters/online/google_distance_adapter.py
from __future__ import annotations

import json
import logging
from typing import Any, Dict, List, Optional, Sequence, Union
from urllib.parse import quote

from adapters.online.httpx_transport import HttpxTransport
from core.batching import (
    DEFAULT_BATCH_SIZE,
    chunk_destinations,
    merge_batch_results,
)
from core.exceptions import (
    ApiError,
    ConfigurationError,
    TransportError,
)
from core.interfaces import HttpTransport
from models.distance_matrix import DistanceQuery

logger = logging.getLogger(__name__)

GOOGLE_MATRIX_URL = "https://maps.googleapis.com/maps/api/distancematrix/json"


def _encode(value: str) -> str:
    return quote(value, safe="")


class GoogleDistanceClient:
    """
    Driving distances from one origin to many destinations via the Google
    Distance Matrix API.

    - Destinations above `batch_size` are split into sequential batches and
      merged under the origin key.
    - A single batch returns the decoded payload untouched.
    - Any failing batch aborts the whole call.
    """

    def __init__(
        self,
        api_key: Optional[str],
        batch_size: int = DEFAULT_BATCH_SIZE,
        transport: Optional[HttpTransport] = None,
    ):
        if not api_key:
            raise ConfigurationError("Empty API key provided")
        if batch_size < 1:
            raise ConfigurationError(f"Batch size must be >= 1, got {batch_size}")
        self.api_key = api_key
        self.batch_size = batch_size
        if transport is None:
            transport = HttpxTransport()
        self.transport = transport

    def get_driving_distances(
        self, origin: str, destinations: Union[str, Sequence[str]]
    ) -> Dict[str, Any]:
        query = DistanceQuery(origin=origin, destinations=destinations)

        if len(query.destinations) <= self.batch_size:
            return self.process_batch(query.origin, query.destinations)

        chunks = chunk_destinations(query.destinations, self.batch_size)
        payloads: List[Dict[str, Any]] = []
        for i, chunk in enumerate(chunks):
            logger.debug(
                "Distance batch %d/%d for %r (%d destinations)",
                i + 1,
                len(chunks),
                query.origin,
                len(chunk),
            )
            payloads.append(self.process_batch(query.origin, chunk))
        return merge_batch_results(query.origin, chunks, payloads)

    def build_url(self, origin: str, destinations: Sequence[str]) -> str:
        # Parameter order is fixed: origins, destinations, units, key
        params = "&".join(
            [
                f"origins={_encode(origin)}",
                f"destinations={_encode('|'.join(destinations))}",
                "units=imperial",
                f"key={_encode(self.api_key)}",
            ]
        )
        return f"{GOOGLE_MATRIX_URL}?{params}"

    def process_batch(self, origin: str, destinations: Sequence[str]) -> Dict[str, Any]:
        response = self.transport.get(self.build_url(origin, destinations))
        if response.status_code != 200 or not response.text:
            logger.warning(
                "Distance matrix answered HTTP %s (%d bytes)",
                response.status_code,
                len(response.text or ""),
            )
            raise TransportError()
        return self.process_response(response.text)

    @staticmethod
    def process_response(body: str) -> Dict[str, Any]:
        try:
            data = json.loads(body)
        except ValueError as e:
            raise TransportError() from e

        if not isinstance(data, dict) or not data.get("status"):
            raise TransportError()

        status = data["status"]
        if status == "OK":
            return data

        logger.warning("Distance matrix returned status %s", status)
        # Unrecognized statuses collapse to UNKNOWN_ERROR inside ApiError
        raise ApiError(status)
