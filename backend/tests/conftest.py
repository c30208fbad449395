# backend/tests/conftest.py
import json
import os
import sys
from typing import List, Optional

import pytest
from fastapi.testclient import TestClient

# Make /Project/backend importable as top-level
BACKEND_DIR = os.path.abspath(os.path.join(os.path.dirname(__file__), ".."))
if BACKEND_DIR not in sys.path:
    sys.path.insert(0, BACKEND_DIR)

from core.interfaces import HttpTransport, TransportResponse
from main import app


class FakeTransport(HttpTransport):
    """Records every URL and replays queued responses (the last one repeats)."""

    def __init__(self, responses: Optional[List[TransportResponse]] = None):
        self.responses = list(responses or [])
        self.urls: List[str] = []

    def get(self, url: str) -> TransportResponse:
        self.urls.append(url)
        if len(self.responses) > 1:
            return self.responses.pop(0)
        return self.responses[0]


def ok_payload(origin: str, destinations: List[str]) -> dict:
    """Minimal upstream OK body for one origin row."""
    return {
        "status": "OK",
        "origin_addresses": [f"{origin}, UK"],
        "destination_addresses": [f"{d}, UK" for d in destinations],
        "rows": [
            {
                "elements": [
                    {
                        "status": "OK",
                        "distance": {"text": f"{i + 1} mi", "value": 1609 * (i + 1)},
                        "duration": {"text": f"{i + 1} mins", "value": 60 * (i + 1)},
                    }
                    for i, _ in enumerate(destinations)
                ]
            }
        ],
    }


def json_response(body, status_code: int = 200) -> TransportResponse:
    return TransportResponse(status_code=status_code, text=json.dumps(body))


@pytest.fixture
def fake_transport():
    def _make(*responses: TransportResponse) -> FakeTransport:
        return FakeTransport(list(responses))

    return _make


@pytest.fixture
def client():
    with TestClient(app) as c:
        yield c
    app.dependency_overrides.clear()
