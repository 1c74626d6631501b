"""
Event data models for the Adjust S2S SDK.
"""

import base64
import json
from datetime import datetime, timezone
from enum import Enum
from typing import Optional, Dict, Union

TIME_FORMAT = "%Y-%m-%dT%H:%M:%SZ%z"

# base64 of "{}"; sent when an event carries no custom parameters
EMPTY_PARAMS = base64.b64encode(b"{}").decode("ascii")


class Environment(str, Enum):
    """Where Adjust stores the tracked data."""
    PRODUCTION = "production"
    SANDBOX = "sandbox"


class DeviceIDType(str, Enum):
    """Kind of device identifier; the value is the form field carrying the id."""
    IDFA = "idfa"              # iOS ID for Advertisers
    IDFV = "idfv"              # iOS ID for Vendors
    MAC = "mac"                # MAC address without ":" (Android only)
    MAC_MD5 = "mac_md5"        # MD5 of upper case MAC without ":" (Android only)
    MAC_SHA1 = "mac_sha1"      # SHA1 of upper case MAC with ":" (Android only)
    ANDROID_ID = "android_id"
    GPS_ADID = "gps_adid"      # Google Play Advertiser ID


def format_timestamp(value: datetime) -> str:
    """Format a datetime for the created_at field. Naive values are taken as UTC."""
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value.strftime(TIME_FORMAT)


def encode_params(params: Optional[Dict[str, str]]) -> str:
    """Encode custom parameters as base64 of a compact JSON object."""
    if not params:
        return EMPTY_PARAMS
    payload = json.dumps(params, separators=(",", ":"), sort_keys=True, ensure_ascii=False)
    return base64.b64encode(payload.encode("utf-8")).decode("ascii")


def decode_params(value: str) -> Dict[str, str]:
    """Inverse of encode_params."""
    return json.loads(base64.b64decode(value).decode("utf-8"))


class BaseEvent:
    """Base class for all events."""

    def __init__(self, device_id_type: Union[DeviceIDType, str], device_id: str,
                 event_token: str, created_at: Optional[datetime] = None):
        self.device_id_type = DeviceIDType(device_id_type)
        self.device_id = device_id
        self.event_token = event_token
        self.created_at = created_at or datetime.now(timezone.utc)

    def to_form(self) -> Dict[str, str]:
        """Convert event to form fields."""
        return {
            'event_token': self.event_token,
            'created_at': format_timestamp(self.created_at),
            self.device_id_type.value: self.device_id
        }


class TrackEvent(BaseEvent):
    """Non-revenue event."""

    path = "/event"


class RevenueEvent(BaseEvent):
    """Revenue event; amount is in minor currency units (e.g. cents)."""

    path = "/revenue"

    def __init__(self, device_id_type: Union[DeviceIDType, str], device_id: str,
                 event_token: str, amount: int, created_at: Optional[datetime] = None):
        super().__init__(device_id_type, device_id, event_token, created_at)
        if not isinstance(amount, int) or isinstance(amount, bool):
            raise TypeError("amount must be an integer number of minor currency units")
        self.amount = amount

    def to_form(self) -> Dict[str, str]:
        data = super().to_form()
        data['amount'] = str(self.amount)
        return data
