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
from ocpp_json.errors import UnsupportedMessageVariant, UnrecognizedEnumValue, InvalidAcceptanceStatus, InvalidURI
from ocpp_json.test.samples import SAMPLES, NOW, LATER, ACCEPTED_TAG, FIRMWARE_URI
from ocpp_json.v16 import to_v16, from_v16, registered_message_types, registered_wire_types
from ocpp_json.v16.converters import REJECTED_MESSAGES, REJECTED_WIRE_MESSAGES
from ocpp_models import v16
from ocpp_models.v16 import MODEL_PAIRS
from ocpp_models.v16.composite_types import IdTagInfo, AuthorisationData


def _name(message):
    return type(message).__name__


@pytest.mark.parametrize("message", SAMPLES, ids=_name)
def test_round_trip(message):
    assert from_v16(to_v16(message)) == message


@pytest.mark.parametrize("message", SAMPLES, ids=_name)
def test_wire_model_matches_message_direction(message):
    wire = to_v16(message)
    assert wire.is_response == _name(message).endswith("Res")


def test_every_domain_message_is_sampled_or_rejected():
    sampled = {type(s) for s in SAMPLES}
    assert set(m.ALL_MESSAGES) == sampled | set(REJECTED_MESSAGES)
    assert set(m.ALL_MESSAGES) <= registered_message_types()


def test_every_wire_model_has_a_rule():
    wire_models = {model for pair in MODEL_PAIRS for model in pair}
    assert wire_models == registered_wire_types()


@pytest.mark.parametrize("message", [
    m.CentralSystemDataTransferReq("com.example", "Ping", "{}"),
    m.CentralSystemDataTransferRes(m.DataTransferStatus.accepted),
    m.ChargePointDataTransferReq("com.example"),
    m.ChargePointDataTransferRes(m.DataTransferStatus.unknown_vendor_id, "nope"),
], ids=_name)
def test_data_transfer_is_not_encoded(message):
    with pytest.raises(UnsupportedMessageVariant) as exc_info:
        to_v16(message)
    assert exc_info.value.variant is message


@pytest.mark.parametrize("wire", [
    v16.DataTransferRequest(vendorId="com.example"),
    v16.DataTransferResponse(status="Accepted"),
], ids=_name)
def test_data_transfer_is_not_decoded(wire):
    assert type(wire) in REJECTED_WIRE_MESSAGES
    with pytest.raises(UnsupportedMessageVariant):
        from_v16(wire)


def test_foreign_value_is_unsupported():
    with pytest.raises(UnsupportedMessageVariant):
        to_v16(m.KeyValue("HeartbeatInterval", False))


def test_boot_notification_interval_in_seconds():
    wire = to_v16(m.BootNotificationRes(m.RegistrationStatus.pending, NOW, timedelta(minutes=2)))
    assert wire.status == "Pending"
    assert wire.interval == 120


def test_connector_numbering():
    wire = to_v16(m.StartTransactionReq(m.ConnectorScope(0), "TAG1", NOW, 0))
    assert wire.connectorId == 1
    assert to_v16(m.ChangeAvailabilityReq(m.ChargePointScope(), m.AvailabilityType.operative)).connectorId == 0
    decoded = from_v16(v16.ChangeAvailabilityRequest(connectorId=0, type="Operative"))
    assert decoded.scope == m.ChargePointScope()


def test_status_notification_unknown_error_code():
    wire = v16.StatusNotificationRequest(connectorId=1, status="Faulted", errorCode="NotARealCode")
    with pytest.raises(UnrecognizedEnumValue):
        from_v16(wire)


def test_status_notification_faulted_without_code():
    wire = to_v16(m.StatusNotificationReq(m.ConnectorScope(0), m.Faulted()))
    assert (wire.status, wire.errorCode, wire.info, wire.vendorErrorCode) == ("Faulted", "NoError", None, None)
    assert from_v16(wire).status == m.Faulted()


def test_reset_response_acceptance():
    assert from_v16(v16.ResetResponse(status="Accepted")) == m.ResetRes(True)
    with pytest.raises(InvalidAcceptanceStatus):
        from_v16(v16.ResetResponse(status="Maybe"))


def test_stop_reason_is_always_written():
    wire = to_v16(m.StopTransactionReq(99, None, LATER, 100))
    assert wire.reason == "Local"
    assert wire.transactionData == []


def test_missing_stop_reason_reads_as_local():
    wire = v16.StopTransactionRequest(transactionId=99, timestamp=LATER, meterStop=100)
    assert from_v16(wire) == m.StopTransactionReq(99, None, LATER, 100, reason=m.StopReason.local)


def test_get_configuration_without_keys():
    assert to_v16(m.GetConfigurationReq()).key == []
    assert from_v16(v16.GetConfigurationRequest()) == m.GetConfigurationReq()


def test_send_local_list_encoding():
    wire = to_v16(m.SendLocalListReq(m.UpdateType.full, m.AuthListSupported(3),
                                     [m.AuthorisationAdd("TAG1", m.IdTagInfo(m.AuthorizationStatus.accepted))]))
    assert wire.model_dump(exclude_none=True) == {
        "updateType": "Full",
        "listVersion": 3,
        "localAuthorisationList": [{"idTag": "TAG1", "idTagInfo": {"status": "Accepted"}}],
    }


def test_send_local_list_hash_is_dropped():
    message = m.SendLocalListReq(m.UpdateType.full, m.AuthListSupported(3), hash="abc123")
    decoded = from_v16(to_v16(message))
    assert decoded.hash is None
    assert decoded == m.SendLocalListReq(m.UpdateType.full, m.AuthListSupported(3))


def test_send_local_list_response_hash_is_dropped():
    message = m.SendLocalListRes(m.UpdateStatus(m.UpdateStatusKind.accepted, "abc123"))
    wire = to_v16(message)
    assert wire.model_dump() == {"status": "Accepted"}
    assert from_v16(wire) == m.SendLocalListRes(m.UpdateStatus(m.UpdateStatusKind.accepted))


def test_local_list_not_supported():
    wire = to_v16(m.GetLocalListVersionRes(m.AuthListNotSupported()))
    assert wire.model_dump() == {"listVersion": -1}
    assert from_v16(wire) == m.GetLocalListVersionRes(m.AuthListNotSupported())


def test_trigger_message_connector():
    wire = to_v16(m.TriggerMessageReq(m.MessageTrigger(m.TriggerKind.meter_values, m.ConnectorScope(0))))
    assert (wire.requestedMessage, wire.connectorId) == ("MeterValues", 1)
    plain = to_v16(m.TriggerMessageReq(m.MessageTrigger(m.TriggerKind.boot_notification)))
    assert plain.connectorId is None


def test_recurring_profile_in_schema_form():
    wire = to_v16(m.SetChargingProfileReq(m.ConnectorScope(0), m.ChargingProfile(
        1, 0, m.ChargingProfilePurpose.tx_default_profile, m.Recurring(m.RecurrencyKind.weekly),
        m.ChargingSchedule(m.ChargingRateUnit.watts, [m.ChargingSchedulePeriod(timedelta(0), 7400.0)]))))
    assert wire.csChargingProfiles.chargingProfileKind == "Weekly"
    schema_form = wire.model_copy(update={"csChargingProfiles": wire.csChargingProfiles.model_copy(
        update={"chargingProfileKind": "Recurring", "recurrencyKind": "Weekly"})})
    assert from_v16(schema_form) == from_v16(wire)


def test_retries_interval_in_seconds():
    wire = to_v16(m.UpdateFirmwareReq(NOW, FIRMWARE_URI, m.Retries(1, timedelta(minutes=1))))
    assert (wire.retries, wire.retryInterval) == (1, 60)
    assert from_v16(wire).retries == m.Retries.from_ints(1, 60)


def test_authorize_response():
    wire = to_v16(m.AuthorizeRes(ACCEPTED_TAG))
    assert wire.idTagInfo.parentIdTag == "PARENT01"
    assert from_v16(wire) == m.AuthorizeRes(ACCEPTED_TAG)


def test_unknown_authorization_status():
    with pytest.raises(UnrecognizedEnumValue):
        from_v16(v16.AuthorizeResponse(idTagInfo=IdTagInfo(status="Bogus")))


def test_unknown_authorization_status_in_local_list():
    wire = v16.SendLocalListRequest(updateType="Full", listVersion=3, localAuthorisationList=[
        AuthorisationData(idTag="TAG01", idTagInfo=IdTagInfo(status="Accepted")),
        AuthorisationData(idTag="TAG02", idTagInfo=IdTagInfo(status="Bogus"))])
    with pytest.raises(UnrecognizedEnumValue):
        from_v16(wire)


@pytest.mark.parametrize("wire", [
    v16.UpdateFirmwareRequest(location="not a uri", retrieveDate=NOW),
    v16.GetDiagnosticsRequest(location="not a uri"),
], ids=_name)
def test_invalid_location(wire):
    with pytest.raises(InvalidURI):
        from_v16(wire)
