"""
Shared test fixtures for pytest
"""

from datetime import datetime, timezone

import pytest
from ocpp.v16.enums import ChargePointErrorCode, ChargePointStatus, RegistrationStatus

from ocpp_validate import SchemaRegistry, Validator
from ocpp_validate.domain import (
    BootNotificationRequest,
    BootNotificationResponse,
    StatusNotificationRequest,
)


@pytest.fixture
def registry():
    """Fresh registry per test so lazy loading can be observed"""
    return SchemaRegistry()


@pytest.fixture
def validator(registry):
    return Validator(registry)


@pytest.fixture
def now():
    return datetime(2024, 5, 1, 12, 30, 0, tzinfo=timezone.utc)


@pytest.fixture
def boot_request():
    """BootNotification with required fields only"""
    return BootNotificationRequest(
        charge_point_vendor="EVerest",
        charge_point_model="DC-120",
    )


@pytest.fixture
def boot_response(now):
    return BootNotificationResponse(
        status=RegistrationStatus.accepted,
        current_time=now,
        interval=300,
    )


@pytest.fixture
def status_request(now):
    return StatusNotificationRequest(
        connector_id=1,
        error_code=ChargePointErrorCode.no_error,
        status=ChargePointStatus.available,
        timestamp=now,
    )
