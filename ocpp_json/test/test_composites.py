"""
SPDX-License-Identifier: AGPL-3.0-or-later
Copyright (C) 2025 Lappeenrannan-Lahden teknillinen yliopisto LUT
Author: Aleksei Romanenko <aleksei.romanenko@lut.fi>


This program is free software: you can redistribute it and/or modify
it under the terms of the GNU Affero General Public License as published by
the Free Software Foundation, either version 3 of the License, or
(at your option) any later version.

This program is distributed in the hope that it will be useful,
but WITHOUT ANY WARRANTY; without even the implied warranty of
MERCHANTABILITY or FITNESS FOR A PARTICULAR PURPOSE.  See the
GNU Affero General Public License for more details.

You should have received a copy of the GNU Affero General Public License
along with this program.  If not, see <https://www.gnu.org/licenses/>.

Funded by the European Union and UKRI. Views and opinions expressed are however those of the author(s)
only and do not necessarily reflect those of the European Union, CINEA or UKRI. Neither the European
Union nor the granting authority can be held responsible for them.
"""
from datetime import timedelta

import pytest

import messages as m
from ocpp_json.errors import InvalidAcceptanceStatus, InvalidURI, MissingOccupiedReason, UnrecognizedEnumValue, \
    UnrecognizedChargePointStatus, UnrecognizedProfileKind, UnrecognizedTriggerMessage
from ocpp_json.v16.composites import accepted_from_v16, accepted_to_v16, uri_from_v16, uri_to_v16, \
    meter_value_to_v16, meter_value_from_v16, charge_point_status_to_v16, charge_point_status_from_v16, \
    profile_kind_to_v16, profile_kind_from_v16, period_to_v16, auth_list_version_to_v16, \
    auth_list_version_from_v16, update_status_to_v16_and_hash, update_status_from_v16, trigger_to_v16, \
    trigger_from_v16, authorisation_data_to_v16, authorisation_data_from_v16
from ocpp_json.test.samples import ACCEPTED_TAG
from ocpp_models.v16.composite_types import SampledValue


def test_acceptance_literals():
    assert accepted_to_v16(True) == "Accepted"
    assert accepted_to_v16(False) == "Rejected"
    assert accepted_from_v16("Accepted") is True
    assert accepted_from_v16("Rejected") is False


@pytest.mark.parametrize("status", ["Maybe", "accepted", ""])
def test_other_acceptance_literals_fail(status):
    with pytest.raises(InvalidAcceptanceStatus) as exc_info:
        accepted_from_v16(status)
    assert exc_info.value.value == status


def test_uri_is_kept_in_canonical_form():
    uri = uri_from_v16("ftp://diagnostics.example.com/upload")
    assert uri.scheme == "ftp"
    assert uri_to_v16(uri) == "ftp://diagnostics.example.com/upload"


def test_invalid_uri():
    with pytest.raises(InvalidURI):
        uri_from_v16("not a uri")


def test_relative_reference_is_refused():
    with pytest.raises(InvalidURI):
        uri_from_v16("diag/upload")


def test_default_sampled_value_fields_are_omitted():
    wire = meter_value_to_v16(m.MeterValue("1520"))
    assert wire == SampledValue(value="1520")
    assert wire.model_dump(exclude_none=True) == {"value": "1520"}


def test_non_default_sampled_value_fields_are_written():
    wire = meter_value_to_v16(m.MeterValue("230.1", measurand=m.Measurand.voltage, phase=m.Phase.l2_n,
                                           unit=m.UnitOfMeasure.volt, location=m.Location.inlet))
    assert wire.measurand == "Voltage"
    assert wire.phase == "L2-N"
    assert wire.unit == "V"
    assert wire.location == "Inlet"
    assert wire.context is None
    assert wire.format is None


def test_absent_sampled_value_fields_read_as_defaults():
    value = meter_value_from_v16(SampledValue(value="7"))
    assert value == m.MeterValue("7")
    assert value.measurand is m.Measurand.energy_active_import_register
    assert value.unit is m.UnitOfMeasure.wh


def test_explicit_default_literal_still_decodes():
    value = meter_value_from_v16(SampledValue(value="7", unit="Wh", context="Sample.Periodic"))
    assert value == m.MeterValue("7")


def test_unknown_sampled_value_literal():
    with pytest.raises(UnrecognizedEnumValue):
        meter_value_from_v16(SampledValue(value="7", unit="Bananas"))


def test_faulted_status_fields():
    status = m.Faulted(m.ChargePointErrorCode.ground_failure, info="RCD", vendor_error_code="E42")
    assert charge_point_status_to_v16(status) == ("Faulted", "GroundFailure", "RCD", "E42")
    assert charge_point_status_from_v16("Faulted", "GroundFailure", "RCD", "E42") == status


def test_faulted_without_code_uses_no_error():
    assert charge_point_status_to_v16(m.Faulted()) == ("Faulted", "NoError", None, None)
    assert charge_point_status_from_v16("Faulted", "NoError", None, None) == m.Faulted()


@pytest.mark.parametrize("status, literal", [
    (m.Available(), "Available"),
    (m.Unavailable("maintenance"), "Unavailable"),
    (m.Reserved(), "Reserved"),
    (m.Occupied(m.OccupancyKind.preparing), "Preparing"),
    (m.Occupied(m.OccupancyKind.charging, "slow"), "Charging"),
    (m.Occupied(m.OccupancyKind.suspended_ev), "SuspendedEV"),
    (m.Occupied(m.OccupancyKind.finishing), "Finishing"),
])
def test_simple_statuses(status, literal):
    wire = charge_point_status_to_v16(status)
    assert wire == (literal, "NoError", status.info, None)
    assert charge_point_status_from_v16(*wire) == status


def test_error_code_is_only_kept_for_faulted():
    assert charge_point_status_from_v16("Available", "HighTemperature", None, "V1") == m.Available()


def test_error_code_is_validated_for_every_status():
    with pytest.raises(UnrecognizedEnumValue):
        charge_point_status_from_v16("Available", "NotARealCode", None, None)


def test_occupied_needs_a_reason():
    with pytest.raises(MissingOccupiedReason):
        charge_point_status_to_v16(m.Occupied())


def test_unknown_status():
    with pytest.raises(UnrecognizedChargePointStatus) as exc_info:
        charge_point_status_from_v16("Sleeping", "NoError", None, None)
    assert exc_info.value.value == "Sleeping"


@pytest.mark.parametrize("kind, literal", [
    (m.Absolute(), "Absolute"),
    (m.Relative(), "Relative"),
    (m.Recurring(m.RecurrencyKind.daily), "Daily"),
    (m.Recurring(m.RecurrencyKind.weekly), "Weekly"),
])
def test_profile_kinds(kind, literal):
    assert profile_kind_to_v16(kind) == literal
    assert profile_kind_from_v16(literal) == kind


def test_recurring_profile_kind_with_separate_recurrency():
    assert profile_kind_from_v16("Recurring", "Weekly") == m.Recurring(m.RecurrencyKind.weekly)


@pytest.mark.parametrize("literal", ["Monthly", "Recurring", "absolute"])
def test_unknown_profile_kind(literal):
    with pytest.raises(UnrecognizedProfileKind):
        profile_kind_from_v16(literal)


@pytest.mark.parametrize("kind, recurrency", [
    ("Daily", "Weekly"), ("Absolute", "Daily"), ("Relative", "Weekly"), ("Absolute", "Absolute")])
def test_conflicting_recurrency_kind(kind, recurrency):
    with pytest.raises(UnrecognizedProfileKind):
        profile_kind_from_v16(kind, recurrency)


def test_matching_recurrency_kind():
    assert profile_kind_from_v16("Weekly", "Weekly") == m.Recurring(m.RecurrencyKind.weekly)


def test_period_offset_is_whole_seconds():
    period = m.ChargingSchedulePeriod(timedelta(seconds=90, milliseconds=700), 10.0)
    assert period_to_v16(period).startPeriod == 90


def test_local_list_version():
    assert auth_list_version_to_v16(m.AuthListNotSupported()) == -1
    assert auth_list_version_to_v16(m.AuthListSupported(0)) == 0
    assert auth_list_version_from_v16(-1) == m.AuthListNotSupported()
    assert auth_list_version_from_v16(-5) == m.AuthListNotSupported()
    assert auth_list_version_from_v16(3) == m.AuthListSupported(3)


def test_negative_supported_version_is_refused():
    with pytest.raises(ValueError):
        m.AuthListSupported(-1)


def test_authorisation_data():
    add = authorisation_data_to_v16(m.AuthorisationAdd("TAG1", ACCEPTED_TAG))
    assert add.idTagInfo.status == "Accepted"
    assert authorisation_data_from_v16(add) == m.AuthorisationAdd("TAG1", ACCEPTED_TAG)
    remove = authorisation_data_to_v16(m.AuthorisationRemove("TAG2"))
    assert remove.idTagInfo is None
    assert authorisation_data_from_v16(remove) == m.AuthorisationRemove("TAG2")


def test_update_status_hash_is_not_restored():
    literal, digest = update_status_to_v16_and_hash(m.UpdateStatus(m.UpdateStatusKind.accepted, "abc123"))
    assert (literal, digest) == ("Accepted", "abc123")
    assert update_status_from_v16(literal) == m.UpdateStatus(m.UpdateStatusKind.accepted)


def test_only_accepted_update_carries_hash():
    with pytest.raises(ValueError):
        m.UpdateStatus(m.UpdateStatusKind.failed, "abc123")


@pytest.mark.parametrize("literal, kind", [
    ("HashError", m.UpdateStatusKind.hash_error),
    ("NotSupported", m.UpdateStatusKind.not_supported),
    ("VersionMismatch", m.UpdateStatusKind.version_mismatch),
])
def test_update_status_literals(literal, kind):
    assert update_status_from_v16(literal) == m.UpdateStatus(kind)


def test_trigger_with_connector():
    trigger = m.MessageTrigger(m.TriggerKind.meter_values, m.ConnectorScope(1))
    assert trigger_to_v16(trigger) == ("MeterValues", 2)
    assert trigger_from_v16("MeterValues", 2) == trigger


def test_trigger_connector_is_ignored_where_meaningless():
    assert trigger_from_v16("Heartbeat", 1) == m.MessageTrigger(m.TriggerKind.heartbeat)
    with pytest.raises(ValueError):
        m.MessageTrigger(m.TriggerKind.heartbeat, m.ConnectorScope(0))


def test_unknown_trigger():
    with pytest.raises(UnrecognizedTriggerMessage):
        trigger_from_v16("SignCertificate", None)
