"""Firmware Management profile payloads."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ocpp.v16.enums import DiagnosticsStatus, FirmwareStatus

from .base import Request, Response


@dataclass(slots=True)
class DiagnosticsStatusNotificationRequest(Request):
    status: DiagnosticsStatus


@dataclass(slots=True)
class DiagnosticsStatusNotificationResponse(Response):
    pass


@dataclass(slots=True)
class FirmwareStatusNotificationRequest(Request):
    status: FirmwareStatus


@dataclass(slots=True)
class FirmwareStatusNotificationResponse(Response):
    pass


@dataclass(slots=True)
class GetDiagnosticsRequest(Request):
    """Ask the charge point to upload a diagnostics file to ``location``."""

    location: str
    retries: Optional[int] = None
    retry_interval: Optional[int] = None
    start_time: Optional[datetime] = None
    stop_time: Optional[datetime] = None


@dataclass(slots=True)
class GetDiagnosticsResponse(Response):
    """``file_name`` is absent when no diagnostics are available."""

    file_name: Optional[str] = None


@dataclass(slots=True)
class UpdateFirmwareRequest(Request):
    location: str
    retrieve_date: datetime
    retries: Optional[int] = None
    retry_interval: Optional[int] = None


@dataclass(slots=True)
class UpdateFirmwareResponse(Response):
    pass
