"""
Adjust S2S SDK

A simple Python SDK for tracking events through the Adjust server-to-server API.
"""

from .events import Environment, DeviceIDType, TrackEvent, RevenueEvent
from .models import TrackingResponse
from .exceptions import (
    TrackingError, DeviceNotFoundError, EventFailedError, ResponseDecodeError
)
from .transport import Transport, TransportResponse, RequestsTransport
from .client import TrackingClient

__version__ = "1.0.0"

__all__ = [
    "Environment",
    "DeviceIDType",
    "TrackEvent",
    "RevenueEvent",
    "TrackingResponse",
    "TrackingError",
    "DeviceNotFoundError",
    "EventFailedError",
    "ResponseDecodeError",
    "Transport",
    "TransportResponse",
    "RequestsTransport",
    "TrackingClient"
]
