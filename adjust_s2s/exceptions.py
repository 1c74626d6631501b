"""
Errors raised by the Adjust S2S SDK.

Transport failures (e.g. ``requests.ConnectionError``) are not wrapped and
reach the caller as raised by the transport.
"""


class TrackingError(Exception):
    """Base class for errors reported by the tracking API."""


class DeviceNotFoundError(TrackingError):
    """Adjust did not recognise the device."""

    def __init__(self, message: str = "Device not found"):
        super().__init__(message)


class EventFailedError(TrackingError):
    """Adjust rejected the event; message is the response body."""

    def __init__(self, message: str):
        super().__init__(message)
        self.message = message


class ResponseDecodeError(TrackingError):
    """Response body could not be decoded into a TrackingResponse."""

    def __init__(self, message: str, body: str):
        super().__init__(message)
        self.body = body
