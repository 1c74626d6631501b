"""
HTTP client for sending events to the Adjust S2S API.
"""

import json
import logging
import os
from datetime import datetime
from typing import Dict, Optional, Union

from pydantic import ValidationError

from .events import (
    BaseEvent, DeviceIDType, Environment, RevenueEvent, TrackEvent, encode_params
)
from .exceptions import DeviceNotFoundError, EventFailedError, ResponseDecodeError
from .models import TrackingResponse
from .transport import RequestsTransport, Transport

logger = logging.getLogger(__name__)

DEFAULT_API_URL = "https://s2s.adjust.com"

DEVICE_NOT_FOUND_PREFIX = "Event failed (Device not found, contact support@adjust.com)"
EVENT_FAILED_PREFIX = "Event failed"


class TrackingClient:
    """Client for sending events to the Adjust S2S API."""

    def __init__(self, app_token: str, environment: Optional[Union[Environment, str]] = None,
                 transport: Optional[Transport] = None, base_url: str = DEFAULT_API_URL):
        """
        Initialize the client.

        Args:
            app_token: Adjust application token
            environment: Production or sandbox; omitted from requests if None
            transport: HTTP transport; a RequestsTransport with its own
                session is created if None
            base_url: API base URL
        """
        self.app_token = app_token
        self.environment = Environment(environment) if environment else None
        self.transport = transport or RequestsTransport()
        self.base_url = base_url.rstrip('/')

    @classmethod
    def from_env(cls, **overrides) -> "TrackingClient":
        """Build a client from ADJUST_* environment variables.

        Keyword arguments take precedence over the environment.
        """
        settings = {
            'app_token': os.getenv("ADJUST_APP_TOKEN"),
            'environment': os.getenv("ADJUST_ENVIRONMENT") or None,
            'base_url': os.getenv("ADJUST_API_URL", DEFAULT_API_URL),
        }
        settings.update(overrides)
        if not settings['app_token']:
            raise ValueError("ADJUST_APP_TOKEN is required")
        return cls(**settings)

    def track_event(self, device_id_type: Union[DeviceIDType, str], device_id: str,
                    event_token: str, created_at: Optional[datetime] = None) -> TrackingResponse:
        """Track a non-revenue event."""
        return self.track_event_with_params(device_id_type, device_id, event_token, None, created_at)

    def track_event_with_params(self, device_id_type: Union[DeviceIDType, str], device_id: str,
                                event_token: str, params: Optional[Dict[str, str]],
                                created_at: Optional[datetime] = None) -> TrackingResponse:
        """Track a non-revenue event with custom parameters."""
        event = TrackEvent(device_id_type, device_id, event_token, created_at)
        return self._send_event(event, params)

    def track_revenue(self, device_id_type: Union[DeviceIDType, str], device_id: str,
                      event_token: str, amount: int,
                      created_at: Optional[datetime] = None) -> TrackingResponse:
        """
        Track a revenue event.

        Args:
            device_id_type: Which device identifier device_id is
            device_id: Device identifier
            event_token: Adjust event token
            amount: Revenue in minor currency units (e.g. cents)
            created_at: Event time; defaults to now

        Returns:
            Decoded API response
        """
        return self.track_revenue_with_params(
            device_id_type, device_id, event_token, amount, None, created_at
        )

    def track_revenue_with_params(self, device_id_type: Union[DeviceIDType, str], device_id: str,
                                  event_token: str, amount: int, params: Optional[Dict[str, str]],
                                  created_at: Optional[datetime] = None) -> TrackingResponse:
        """Track a revenue event with custom parameters."""
        event = RevenueEvent(device_id_type, device_id, event_token, amount, created_at)
        return self._send_event(event, params)

    def _send_event(self, event: BaseEvent, params: Optional[Dict[str, str]]) -> TrackingResponse:
        return self.send(event.path, event.to_form(), params)

    def send(self, path: str, fields: Dict[str, str],
             params: Optional[Dict[str, str]] = None) -> TrackingResponse:
        """
        POST a form to the API and decode the reply.

        Raises:
            DeviceNotFoundError: Adjust did not recognise the device
            EventFailedError: Adjust rejected the event
            ResponseDecodeError: Reply was not a valid tracking response
        """
        form = dict(fields)
        form['s2s'] = '1'
        form['app_token'] = self.app_token
        if self.environment is not None:
            form['environment'] = self.environment.value
        form['params'] = encode_params(params)

        url = f"{self.base_url}{path}"
        logger.debug(f"Sending request to {url}: {form}")

        try:
            response = self.transport.post_form(url, form)
        except Exception as e:
            logger.error(f"Received error when sending request: {e}")
            raise

        try:
            body = response.body.read().decode('utf-8', errors='replace')
        finally:
            response.body.close()

        if body.startswith(DEVICE_NOT_FOUND_PREFIX):
            logger.error("Received error from Adjust: Device not found")
            raise DeviceNotFoundError()
        if body.startswith(EVENT_FAILED_PREFIX):
            message = body.strip()
            logger.error(f"Received error from Adjust: {message}")
            raise EventFailedError(message)

        logger.debug(f"Received HTTP {response.status_code} response: {body}")
        return self._decode_response(body)

    @staticmethod
    def _decode_response(body: str) -> TrackingResponse:
        try:
            data = json.loads(body)
            if not isinstance(data, dict):
                raise TypeError(f"expected a JSON object, got {type(data).__name__}")
            return TrackingResponse(**data)
        except (ValueError, TypeError, ValidationError) as e:
            logger.error(f"Received error when decoding response {body!r}: {e}")
            raise ResponseDecodeError(f"Malformed response from Adjust: {e}", body) from e
