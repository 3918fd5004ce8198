"""Composite types shared by several OCPP 1.6 messages."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime
from typing import List, Optional

from ocpp.v16.enums import (
    AuthorizationStatus,
    ChargingProfileKindType,
    ChargingProfilePurposeType,
    ChargingRateUnitType,
    Location,
    Measurand,
    Phase,
    ReadingContext,
    RecurrencyKind,
    UnitOfMeasure,
    ValueFormat,
)


@dataclass(slots=True)
class IdTagInfo:
    """Status information about an identifier.

    Returned in Authorize, StartTransaction and StopTransaction responses and
    carried by local authorization list entries.  Without ``expiry_date`` the
    status has no end date.
    """

    status: AuthorizationStatus
    expiry_date: Optional[datetime] = None
    parent_id_tag: Optional[str] = None


@dataclass(slots=True)
class SampledValue:
    """A single measured value.

    ``value`` is a string so signed meter data can be carried as well as
    decimal readings.
    """

    value: str
    context: Optional[ReadingContext] = None
    format: Optional[ValueFormat] = None
    measurand: Optional[Measurand] = None
    phase: Optional[Phase] = None
    location: Optional[Location] = None
    unit: Optional[UnitOfMeasure] = None


@dataclass(slots=True)
class MeterValue:
    """One or more sampled values taken at the same time."""

    timestamp: datetime
    sampled_value: List[SampledValue]


@dataclass(slots=True)
class ChargingSchedulePeriod:
    start_period: int
    limit: float
    number_phases: Optional[int] = None


@dataclass(slots=True)
class ChargingSchedule:
    """Power or current limits over time.

    The first period must start at 0.  ``limit`` and ``min_charging_rate``
    accept at most one decimal digit (e.g. 8.1).
    """

    charging_rate_unit: ChargingRateUnitType
    charging_schedule_period: List[ChargingSchedulePeriod] = field(default_factory=list)
    duration: Optional[int] = None
    start_schedule: Optional[datetime] = None
    min_charging_rate: Optional[float] = None


@dataclass(slots=True)
class ChargingProfile:
    """A charging schedule plus the rules for when and where it applies."""

    charging_profile_id: int
    stack_level: int
    charging_profile_purpose: ChargingProfilePurposeType
    charging_profile_kind: ChargingProfileKindType
    charging_schedule: ChargingSchedule
    transaction_id: Optional[int] = None
    recurrency_kind: Optional[RecurrencyKind] = None
    valid_from: Optional[datetime] = None
    valid_to: Optional[datetime] = None

    @classmethod
    def tx_profile(
        cls,
        limit: float,
        charging_profile_id: int,
        stack_level: int,
        charging_rate_unit: ChargingRateUnitType = ChargingRateUnitType.amps,
        *,
        transaction_id: Optional[int] = None,
        number_phases: Optional[int] = None,
    ) -> "ChargingProfile":
        """Build a relative TxProfile that caps the current transaction.

        The schedule has a single period starting at 0 and no duration, so the
        limit holds until the transaction ends.
        """
        schedule = ChargingSchedule(
            charging_rate_unit=charging_rate_unit,
            charging_schedule_period=[
                ChargingSchedulePeriod(
                    start_period=0, limit=limit, number_phases=number_phases
                )
            ],
        )
        return cls(
            charging_profile_id=charging_profile_id,
            stack_level=stack_level,
            charging_profile_purpose=ChargingProfilePurposeType.tx_profile,
            charging_profile_kind=ChargingProfileKindType.relative,
            charging_schedule=schedule,
            transaction_id=transaction_id,
        )

    def add_period(
        self, start_period: int, limit: float, number_phases: Optional[int] = None
    ) -> "ChargingProfile":
        self.charging_schedule.charging_schedule_period.append(
            ChargingSchedulePeriod(start_period, limit, number_phases)
        )
        return self


@dataclass(slots=True)
class KeyValue:
    """A configuration key reported in GetConfiguration responses."""

    key: str
    readonly: bool
    value: Optional[str] = None


@dataclass(slots=True)
class AuthorizationData:
    """An entry of a local authorization list."""

    id_tag: str
    id_tag_info: Optional[IdTagInfo] = None
