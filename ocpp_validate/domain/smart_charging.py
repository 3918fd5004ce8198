"""Smart Charging profile payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ocpp.v16.enums import (
    ChargingProfilePurposeType,
    ChargingProfileStatus,
    ChargingRateUnitType,
    ClearChargingProfileStatus,
    GetCompositeScheduleStatus,
)

from .base import Request, Response
from .common import ChargingProfile, ChargingSchedule


@dataclass(slots=True)
class ClearChargingProfileRequest(Request):
    """Every field is a filter; an empty request clears all profiles."""

    id: Optional[int] = None
    connector_id: Optional[int] = None
    charging_profile_purpose: Optional[ChargingProfilePurposeType] = None
    stack_level: Optional[int] = None


@dataclass(slots=True)
class ClearChargingProfileResponse(Response):
    status: ClearChargingProfileStatus


@dataclass(slots=True)
class GetCompositeScheduleRequest(Request):
    connector_id: int
    duration: int
    charging_rate_unit: Optional[ChargingRateUnitType] = None


@dataclass(slots=True)
class GetCompositeScheduleResponse(Response):
    status: GetCompositeScheduleStatus
    connector_id: Optional[int] = None
    schedule_start: Optional[datetime] = None
    charging_schedule: Optional[ChargingSchedule] = None


@dataclass(slots=True)
class SetChargingProfileRequest(Request):
    connector_id: int
    cs_charging_profiles: ChargingProfile


@dataclass(slots=True)
class SetChargingProfileResponse(Response):
    status: ChargingProfileStatus
