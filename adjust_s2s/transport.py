"""
HTTP transports used by the tracking client.
"""

import io
from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import BinaryIO, Dict, Mapping, Optional

import requests


@dataclass
class TransportResponse:
    """Status, headers and a readable body stream of an HTTP response."""
    status_code: int
    body: BinaryIO
    headers: Mapping[str, str] = field(default_factory=dict)


class Transport(ABC):
    """Sends a form-encoded POST and returns the raw response.

    Implementations raise their own exception type when no response is
    received; the client passes it through to the caller untouched.
    """

    @abstractmethod
    def post_form(self, url: str, data: Dict[str, str]) -> TransportResponse:
        ...


class RequestsTransport(Transport):
    """Transport backed by a requests.Session.

    The whole body is read inside post_form, so a connection dropped
    mid-body surfaces as a requests.RequestException.
    """

    def __init__(self, timeout: float = 30, session: Optional[requests.Session] = None):
        """
        Initialize the transport.

        Args:
            timeout: Request timeout in seconds
            session: Session to reuse; a new one is created if omitted
        """
        self.timeout = timeout
        self.session = session or requests.Session()

    def post_form(self, url: str, data: Dict[str, str]) -> TransportResponse:
        response = self.session.post(url, data=data, timeout=self.timeout)
        return TransportResponse(
            status_code=response.status_code,
            body=io.BytesIO(response.content),
            headers=dict(response.headers)
        )

