"""
Validation engine tests

Verifies:
- valid messages produce an empty result
- every independent violation is reported, in schema order
- entries carry a JSON pointer and a readable description
- unknown message types are a separate error from schema violations
- validation is repeatable and safe to run from many threads
"""

import logging
import math
import threading
from dataclasses import dataclass

import pytest
from ocpp.v16.enums import ChargingRateUnitType, UnitOfMeasure

import ocpp_validate
from ocpp_validate import (
    SchemaRegistry,
    SchemaViolation,
    UnknownMessageType,
    ValidationErrorEntry,
    ValidationResult,
    Validator,
)
from ocpp_validate.domain import (
    BootNotificationRequest,
    ChargingProfile,
    GetCompositeScheduleRequest,
    HeartbeatRequest,
    MeterValue,
    MeterValuesRequest,
    Request,
    SampledValue,
    SetChargingProfileRequest,
    StatusNotificationRequest,
)


@dataclass
class ReserveNowRequest(Request):
    connector_id: int


class TestValidMessages:
    """Messages within bounds validate successfully"""

    def test_required_fields_only(self, validator, boot_request):
        result = validator.validate(boot_request)
        assert result.is_valid
        assert result.entries == ()
        assert result.message_type == "BootNotificationRequest"

    def test_response(self, validator, boot_response):
        assert validator.validate(boot_response).is_valid

    def test_empty_payload(self, validator):
        assert validator.validate(HeartbeatRequest()).is_valid

    def test_status_notification(self, validator, status_request):
        assert validator.validate(status_request).is_valid


class TestScenario:
    """A 132 character model against a 20 character maximum"""

    def test_single_entry_for_long_model(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="EVerest", charge_point_model="x" * 132
        )
        result = validator.validate(message)

        assert not result.is_valid
        assert len(result.entries) == 1
        entry = result.entries[0]
        assert entry.path == "/chargePointModel"
        assert entry.keyword == "maxLength"
        assert "132" in entry.description
        assert "20" in entry.description
        assert str(entry) == "string length 132 exceeds maximum 20 at /chargePointModel"


class TestBoundaries:
    """Exact limits pass, one past the limit fails"""

    def test_string_at_limit(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="v" * 20, charge_point_model="m" * 20
        )
        assert validator.validate(message).is_valid

    def test_string_one_past_limit(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="v" * 20, charge_point_model="m" * 21
        )
        result = validator.validate(message)
        assert result.paths == ("/chargePointModel",)

    def test_decimal_limit_is_multiple_of_tenth(self, validator):
        request = SetChargingProfileRequest(
            connector_id=1,
            cs_charging_profiles=ChargingProfile.tx_profile(8.1, 1, 0),
        )
        assert validator.validate(request).is_valid

    def test_two_decimal_limit_rejected(self, validator):
        request = SetChargingProfileRequest(
            connector_id=1,
            cs_charging_profiles=ChargingProfile.tx_profile(
                8.15, 1, 0, ChargingRateUnitType.amps
            ),
        )
        result = validator.validate(request)
        assert len(result.entries) == 1
        entry = result.entries[0]
        assert entry.path == "/csChargingProfiles/chargingSchedule/chargingSchedulePeriod/0/limit"
        assert entry.keyword == "multipleOf"
        assert entry.description == "value 8.15 is not a multiple of 0.1"
        assert entry.value == 8.15

    @pytest.mark.parametrize("limit", [math.inf, -math.inf, math.nan])
    def test_non_finite_limit_reported(self, validator, limit):
        request = SetChargingProfileRequest(
            connector_id=1,
            cs_charging_profiles=ChargingProfile.tx_profile(limit, 1, 0),
        )
        result = validator.validate(request)
        assert result.paths == (
            "/csChargingProfiles/chargingSchedule/chargingSchedulePeriod/0/limit",
        )
        assert result.entries[0].description == f"value {limit} is not a finite number"

    def test_non_finite_alongside_other_errors(self, validator):
        request = SetChargingProfileRequest(
            connector_id="1",
            cs_charging_profiles=ChargingProfile.tx_profile(math.inf, 1, 0),
        )
        result = validator.validate(request)
        assert result.paths == (
            "/connectorId",
            "/csChargingProfiles/chargingSchedule/chargingSchedulePeriod/0/limit",
        )


class TestMeterValues:
    """Readings follow the ocpp enums and must not be empty"""

    def test_hertz_unit_accepted(self, validator, now):
        message = MeterValuesRequest(
            connector_id=1,
            meter_value=[
                MeterValue(
                    timestamp=now,
                    sampled_value=[SampledValue(value="50", unit=UnitOfMeasure.hertz)],
                )
            ],
        )
        assert validator.validate(message).is_valid

    def test_empty_meter_value_rejected(self, validator):
        result = validator.validate(MeterValuesRequest(connector_id=1, meter_value=[]))
        assert result.paths == ("/meterValue",)
        assert result.entries[0].keyword == "minItems"
        assert result.entries[0].description == "array length 0 is below minimum 1"

    def test_empty_sampled_value_rejected(self, validator, now):
        message = MeterValuesRequest(
            connector_id=1, meter_value=[MeterValue(timestamp=now, sampled_value=[])]
        )
        result = validator.validate(message)
        assert result.paths == ("/meterValue/0/sampledValue",)


class TestExhaustiveness:
    """k independent violations give k entries"""

    def test_three_independent_violations(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="v" * 21,
            charge_point_model="m" * 30,
            firmware_version="f" * 51,
        )
        result = validator.validate(message)
        assert result.paths == (
            "/chargePointVendor",
            "/chargePointModel",
            "/firmwareVersion",
        )

    def test_mixed_keywords(self, validator, now):
        message = StatusNotificationRequest(
            connector_id="1",
            error_code="Broken",
            status="Sleeping",
            info="i" * 51,
            timestamp=now,
        )
        result = validator.validate(message)
        assert [e.keyword for e in result.entries] == ["type", "enum", "maxLength", "enum"]
        assert result.paths == ("/connectorId", "/errorCode", "/info", "/status")
        assert result.entries[0].description == 'expected integer but got string "1"'
        assert result.entries[1].description.startswith('value "Broken" is not one of: ')

    def test_each_missing_property_reported(self, validator):
        result = validator.validate_payload("StartTransactionRequest", {"connectorId": 1})
        assert result.paths == ("/idTag", "/meterStart", "/timestamp")
        assert all(e.keyword == "required" for e in result.entries)
        assert result.entries[0].description == 'required property "idTag" is missing'

    def test_each_unexpected_property_reported(self, validator):
        result = validator.validate_payload("HeartbeatRequest", {"foo": 1, "bar": 2})
        assert result.paths == ("/bar", "/foo")
        assert {e.value for e in result.entries} == {1, 2}
        assert str(result.entries[1]) == 'property "foo" is not allowed at /foo'


class TestOrdering:
    """Depth first, parent before child, siblings in declaration order"""

    def test_nested_order(self, validator, now):
        message = MeterValuesRequest(
            connector_id="2",
            meter_value=[
                MeterValue(
                    timestamp=now,
                    sampled_value=[SampledValue(value=None, measurand="Energy")],
                ),
                MeterValue(timestamp=None, sampled_value=[SampledValue(value="1")]),
            ],
        )
        result = validator.validate(message)
        assert result.paths == (
            "/connectorId",
            "/meterValue/0/sampledValue/0/value",
            "/meterValue/0/sampledValue/0/measurand",
            "/meterValue/1/timestamp",
        )

    def test_parent_type_error_before_children(self, validator):
        result = validator.validate_payload(
            "MeterValuesRequest", {"connectorId": 1, "meterValue": "none"}
        )
        assert result.paths == ("/meterValue",)

    def test_root_type_error(self, validator):
        result = validator.validate_payload("HeartbeatRequest", [])
        assert result.paths == ("/",)
        assert result.entries[0].description == "expected object but got array"


class TestRoundTripStability:
    """Adding one bad optional field adds exactly one entry"""

    def test_one_extra_entry(self, validator):
        base = BootNotificationRequest(
            charge_point_vendor="v" * 25, charge_point_model="DC-120"
        )
        before = validator.validate(base).entries

        base.meter_type = "t" * 26
        after = validator.validate(base).entries

        assert len(after) == len(before) + 1
        assert [e for e in after if e.path != "/meterType"] == list(before)

    def test_wrong_type_for_enum_field_adds_one_entry(self, validator):
        request = GetCompositeScheduleRequest(connector_id=1, duration=10)
        assert validator.validate(request).is_valid

        request.charging_rate_unit = 7
        result = validator.validate(request)

        assert len(result.entries) == 1
        assert result.entries[0].keyword == "type"
        assert str(result.entries[0]) == "expected string but got integer 7 at /chargingRateUnit"

    def test_wrong_type_for_formatted_field_adds_one_entry(self, validator):
        result = validator.validate_payload("HeartbeatResponse", {"currentTime": 5})
        assert [e.keyword for e in result.entries] == ["type"]


class TestPurity:
    """Repeated validation gives identical results"""

    def test_same_result_twice(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="v" * 40, charge_point_model="m" * 40
        )
        assert validator.validate(message) == validator.validate(message)

    def test_message_not_mutated(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="v" * 40, charge_point_model="DC-120"
        )
        validator.validate(message)
        assert message.charge_point_vendor == "v" * 40
        assert message.firmware_version is None

    def test_payload_not_mutated(self, validator):
        payload = {"connectorId": 1, "duration": 60}
        validator.validate_payload("GetCompositeScheduleRequest", payload)
        assert payload == {"connectorId": 1, "duration": 60}

    def test_concurrent_validation(self, registry):
        validator = Validator(registry)
        good = BootNotificationRequest(charge_point_vendor="v", charge_point_model="m")
        bad = BootNotificationRequest(charge_point_vendor="v", charge_point_model="m" * 50)
        expected_good = validator.validate(good)
        expected_bad = validator.validate(bad)
        mismatches = []

        def worker():
            for _ in range(50):
                if validator.validate(good) != expected_good:
                    mismatches.append("good")
                if validator.validate(bad) != expected_bad:
                    mismatches.append("bad")

        threads = [threading.Thread(target=worker) for _ in range(8)]
        for t in threads:
            t.start()
        for t in threads:
            t.join()

        assert mismatches == []


class TestUnknownType:
    """Unregistered identifiers raise instead of returning a result"""

    def test_validate_unknown_message(self, validator):
        with pytest.raises(UnknownMessageType) as exc_info:
            validator.validate(ReserveNowRequest(connector_id=1))
        assert not isinstance(exc_info.value, SchemaViolation)

    def test_validate_payload_unknown(self, validator):
        with pytest.raises(UnknownMessageType):
            validator.validate_payload("ReserveNowRequest", {"connectorId": 1})

    def test_custom_registered_schema(self):
        registry = SchemaRegistry()
        registry.register(
            "ReserveNowRequest",
            {
                "type": "object",
                "properties": {"connectorId": {"type": "integer", "minimum": 0}},
                "required": ["connectorId"],
            },
        )
        validator = Validator(registry)
        assert validator.validate(ReserveNowRequest(connector_id=1)).is_valid
        result = validator.validate(ReserveNowRequest(connector_id=-1))
        assert result.entries[0].description == "value -1 is below minimum 0"


class TestFormats:
    """String formats are checked when enabled"""

    def test_bad_date_time(self, validator):
        result = validator.validate_payload("HeartbeatResponse", {"currentTime": "yesterday"})
        assert result.paths == ("/currentTime",)
        assert result.entries[0].keyword == "format"
        assert result.entries[0].description == 'value "yesterday" is not a valid date-time'

    def test_format_checks_disabled(self):
        validator = Validator(SchemaRegistry(check_formats=False))
        result = validator.validate_payload("HeartbeatResponse", {"currentTime": "yesterday"})
        assert result.is_valid


class TestResultAndErrors:
    """Result helpers and the exception form"""

    def test_render_one_line_per_entry(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="v" * 21, charge_point_model="m" * 21
        )
        rendered = validator.validate(message).render()
        assert rendered.splitlines() == [
            "string length 21 exceeds maximum 20 at /chargePointVendor",
            "string length 21 exceeds maximum 20 at /chargePointModel",
        ]

    def test_raise_for_violations(self, validator):
        message = BootNotificationRequest(
            charge_point_vendor="v", charge_point_model="m" * 21
        )
        with pytest.raises(SchemaViolation) as exc_info:
            validator.validate(message).raise_for_violations()
        assert exc_info.value.message_type == "BootNotificationRequest"
        assert len(exc_info.value.entries) == 1
        assert isinstance(exc_info.value, ValueError)

    def test_success_does_not_raise(self, validator, boot_request):
        validator.validate(boot_request).raise_for_violations()

    def test_ensure_valid_returns_message(self, validator, boot_request):
        assert validator.ensure_valid(boot_request) is boot_request

    def test_ensure_valid_raises(self, validator):
        with pytest.raises(SchemaViolation):
            validator.ensure_valid(
                BootNotificationRequest(charge_point_vendor="v" * 21, charge_point_model="m")
            )

    def test_failure_requires_entries(self):
        with pytest.raises(ValueError):
            ValidationResult.failure("HeartbeatRequest", [])

    def test_result_str(self):
        assert str(ValidationResult.success("HeartbeatRequest")) == "HeartbeatRequest: valid"
        entry = ValidationErrorEntry("/x", "bad", "type")
        assert str(ValidationResult.failure("HeartbeatRequest", [entry])) == "bad at /x"


class TestDefaultValidator:
    """Module level helper backed by the process-wide registry"""

    def test_validate_function(self, boot_request):
        assert ocpp_validate.validate(boot_request).is_valid

    def test_default_registry_is_shared(self):
        assert ocpp_validate.default_registry() is ocpp_validate.default_registry()
        assert Validator().registry is ocpp_validate.default_registry()

    def test_reset_builds_new_registry(self):
        before = ocpp_validate.default_registry()
        ocpp_validate.reset_default_registry()
        after = ocpp_validate.default_registry()
        assert after is not before
        assert after is ocpp_validate.default_registry()


class TestLogging:
    """Failures are logged and still returned"""

    def test_failure_logged_at_warning(self, validator, caplog):
        message = BootNotificationRequest(
            charge_point_vendor="v", charge_point_model="m" * 21
        )
        with caplog.at_level(logging.WARNING, logger="ocpp_validate.validation.engine"):
            result = validator.validate(message)
        assert not result.is_valid
        assert "BootNotificationRequest failed validation with 1 error(s)" in caplog.text

    def test_success_not_logged_at_warning(self, validator, boot_request, caplog):
        with caplog.at_level(logging.WARNING, logger="ocpp_validate.validation.engine"):
            validator.validate(boot_request)
        assert caplog.records == []
