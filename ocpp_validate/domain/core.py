"""Core profile payloads.

These dataclasses represent the transport-independent payloads of the
OCPP 1.6 Core profile.  Required fields come first; optional fields default
to ``None`` and are left out of the wire tree when unset.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import List, Optional

from ocpp.v16.enums import (
    AvailabilityStatus,
    AvailabilityType,
    ChargePointErrorCode,
    ChargePointStatus,
    ClearCacheStatus,
    ConfigurationStatus,
    DataTransferStatus,
    Reason,
    RegistrationStatus,
    RemoteStartStopStatus,
    ResetStatus,
    ResetType,
    UnlockStatus,
)

from .base import Request, Response
from .common import ChargingProfile, IdTagInfo, KeyValue, MeterValue


@dataclass(slots=True)
class AuthorizeRequest(Request):
    id_tag: str


@dataclass(slots=True)
class AuthorizeResponse(Response):
    id_tag_info: IdTagInfo


@dataclass(slots=True)
class BootNotificationRequest(Request):
    """Payload sent by a charge point when announcing itself."""

    charge_point_vendor: str
    charge_point_model: str
    charge_point_serial_number: Optional[str] = None
    charge_box_serial_number: Optional[str] = None
    firmware_version: Optional[str] = None
    iccid: Optional[str] = None
    imsi: Optional[str] = None
    meter_type: Optional[str] = None
    meter_serial_number: Optional[str] = None


@dataclass(slots=True)
class BootNotificationResponse(Response):
    """Response returned by the central system after BootNotification."""

    status: RegistrationStatus
    current_time: datetime
    interval: int


@dataclass(slots=True)
class ChangeAvailabilityRequest(Request):
    connector_id: int
    type: AvailabilityType


@dataclass(slots=True)
class ChangeAvailabilityResponse(Response):
    status: AvailabilityStatus


@dataclass(slots=True)
class ChangeConfigurationRequest(Request):
    key: str
    value: str


@dataclass(slots=True)
class ChangeConfigurationResponse(Response):
    status: ConfigurationStatus


@dataclass(slots=True)
class ClearCacheRequest(Request):
    pass


@dataclass(slots=True)
class ClearCacheResponse(Response):
    status: ClearCacheStatus


@dataclass(slots=True)
class DataTransferRequest(Request):
    """Vendor specific data exchange, possible in both directions."""

    vendor_id: str
    message_id: Optional[str] = None
    data: Optional[str] = None


@dataclass(slots=True)
class DataTransferResponse(Response):
    status: DataTransferStatus
    data: Optional[str] = None


@dataclass(slots=True)
class GetConfigurationRequest(Request):
    key: Optional[List[str]] = None


@dataclass(slots=True)
class GetConfigurationResponse(Response):
    configuration_key: Optional[List[KeyValue]] = None
    unknown_key: Optional[List[str]] = None


@dataclass(slots=True)
class HeartbeatRequest(Request):
    """Empty payload for heartbeat calls."""

    pass


@dataclass(slots=True)
class HeartbeatResponse(Response):
    """Return the central system's current time."""

    current_time: datetime


@dataclass(slots=True)
class MeterValuesRequest(Request):
    connector_id: int
    meter_value: List[MeterValue]
    transaction_id: Optional[int] = None


@dataclass(slots=True)
class MeterValuesResponse(Response):
    pass


@dataclass(slots=True)
class RemoteStartTransactionRequest(Request):
    id_tag: str
    connector_id: Optional[int] = None
    charging_profile: Optional[ChargingProfile] = None


@dataclass(slots=True)
class RemoteStartTransactionResponse(Response):
    status: RemoteStartStopStatus


@dataclass(slots=True)
class RemoteStopTransactionRequest(Request):
    transaction_id: int


@dataclass(slots=True)
class RemoteStopTransactionResponse(Response):
    status: RemoteStartStopStatus


@dataclass(slots=True)
class ResetRequest(Request):
    type: ResetType


@dataclass(slots=True)
class ResetResponse(Response):
    status: ResetStatus


@dataclass(slots=True)
class StartTransactionRequest(Request):
    connector_id: int
    id_tag: str
    meter_start: int
    timestamp: datetime
    reservation_id: Optional[int] = None


@dataclass(slots=True)
class StartTransactionResponse(Response):
    id_tag_info: IdTagInfo
    transaction_id: int


@dataclass(slots=True)
class StatusNotificationRequest(Request):
    """Notify the central system about a connector status change."""

    connector_id: int
    error_code: ChargePointErrorCode
    status: ChargePointStatus
    info: Optional[str] = None
    timestamp: Optional[datetime] = None
    vendor_id: Optional[str] = None
    vendor_error_code: Optional[str] = None


@dataclass(slots=True)
class StatusNotificationResponse(Response):
    """Acknowledge a :class:`StatusNotificationRequest`."""

    pass


@dataclass(slots=True)
class StopTransactionRequest(Request):
    """Sent when a transaction ends.

    ``id_tag`` is optional because a charge point may stop charging without
    one, e.g. after a reset.
    """

    transaction_id: int
    meter_stop: int
    timestamp: datetime
    id_tag: Optional[str] = None
    reason: Optional[Reason] = None
    transaction_data: Optional[List[MeterValue]] = None


@dataclass(slots=True)
class StopTransactionResponse(Response):
    id_tag_info: Optional[IdTagInfo] = None


@dataclass(slots=True)
class UnlockConnectorRequest(Request):
    connector_id: int


@dataclass(slots=True)
class UnlockConnectorResponse(Response):
    status: UnlockStatus
