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

Message level conversion between domain messages and OCPP 1.6 wire payloads.

One rule per message type and direction, registered with :func:`to_v16_rule` / :func:`from_v16_rule`.

>>> from datetime import timedelta
>>> from messages import BootNotificationRes, RegistrationStatus
>>> from datetime import datetime, timezone
>>> wire = to_v16(BootNotificationRes(RegistrationStatus.pending, datetime(2025, 1, 1, tzinfo=timezone.utc),
...                                   timedelta(minutes=5)))
>>> wire.status, wire.interval
('Pending', 300)
>>> from_v16(wire).interval
datetime.timedelta(seconds=300)
"""
from logging import getLogger
from typing import Any, Callable

from beartype import beartype

import messages as m
from ocpp_json.errors import UnsupportedMessageVariant
from ocpp_json.v16.composites import id_tag_info_to_v16, id_tag_info_from_v16, accepted_to_v16, accepted_from_v16, \
    uri_to_v16, uri_from_v16, duration_to_seconds, seconds_to_duration, meter_to_v16, meter_from_v16, \
    charge_point_status_to_v16, charge_point_status_from_v16, charging_profile_to_v16, charging_profile_from_v16, \
    schedule_to_v16, schedule_from_v16, authorisation_data_to_v16, authorisation_data_from_v16, \
    auth_list_version_to_v16, auth_list_version_from_v16, update_status_to_v16_and_hash, update_status_from_v16, \
    trigger_to_v16, trigger_from_v16, key_value_to_v16, key_value_from_v16
from ocpp_json.v16.tables import to_wire, from_wire
from ocpp_models import v16
from ocpp_models.v16 import WireMessage

logger = getLogger(__name__)

_TO_V16 : dict[type, Callable[[Any], WireMessage]] = {}
_FROM_V16 : dict[type[WireMessage], Callable[[Any], Any]] = {}

REJECTED_MESSAGES = (m.CentralSystemDataTransferReq, m.CentralSystemDataTransferRes,
                     m.ChargePointDataTransferReq, m.ChargePointDataTransferRes)
REJECTED_WIRE_MESSAGES = (v16.DataTransferRequest, v16.DataTransferResponse)


def to_v16_rule(message_type : type):
    def register(f):
        _TO_V16[message_type] = f
        return f
    return register


def from_v16_rule(wire_type : type[WireMessage]):
    def register(f):
        _FROM_V16[wire_type] = f
        return f
    return register


def registered_message_types() -> frozenset[type]:
    return frozenset(_TO_V16)


def registered_wire_types() -> frozenset[type]:
    return frozenset(_FROM_V16)


@beartype
def to_v16(message : Any) -> WireMessage:
    rule = _TO_V16.get(type(message))
    if rule is None:
        logger.debug(f"No OCPP 1.6 encoding for {type(message).__name__}")
        raise UnsupportedMessageVariant(message)
    return rule(message)


@beartype
def from_v16(message : WireMessage) -> Any:
    rule = _FROM_V16.get(type(message))
    if rule is None:
        logger.debug(f"No domain decoding for {type(message).__name__}")
        raise UnsupportedMessageVariant(message)
    return rule(message)


# Authorize

@to_v16_rule(m.AuthorizeReq)
def _(msg : m.AuthorizeReq):
    return v16.AuthorizeRequest(idTag=msg.id_tag)


@from_v16_rule(v16.AuthorizeRequest)
def _(msg : v16.AuthorizeRequest):
    return m.AuthorizeReq(msg.idTag)


@to_v16_rule(m.AuthorizeRes)
def _(msg : m.AuthorizeRes):
    return v16.AuthorizeResponse(idTagInfo=id_tag_info_to_v16(msg.id_tag_info))


@from_v16_rule(v16.AuthorizeResponse)
def _(msg : v16.AuthorizeResponse):
    return m.AuthorizeRes(id_tag_info_from_v16(msg.idTagInfo))


# BootNotification

@to_v16_rule(m.BootNotificationReq)
def _(msg : m.BootNotificationReq):
    return v16.BootNotificationRequest(chargePointVendor=msg.charge_point_vendor,
                                       chargePointModel=msg.charge_point_model,
                                       chargePointSerialNumber=msg.charge_point_serial_number,
                                       chargeBoxSerialNumber=msg.charge_box_serial_number,
                                       firmwareVersion=msg.firmware_version,
                                       iccid=msg.iccid,
                                       imsi=msg.imsi,
                                       meterType=msg.meter_type,
                                       meterSerialNumber=msg.meter_serial_number)


@from_v16_rule(v16.BootNotificationRequest)
def _(msg : v16.BootNotificationRequest):
    return m.BootNotificationReq(charge_point_vendor=msg.chargePointVendor,
                                 charge_point_model=msg.chargePointModel,
                                 charge_point_serial_number=msg.chargePointSerialNumber,
                                 charge_box_serial_number=msg.chargeBoxSerialNumber,
                                 firmware_version=msg.firmwareVersion,
                                 iccid=msg.iccid,
                                 imsi=msg.imsi,
                                 meter_type=msg.meterType,
                                 meter_serial_number=msg.meterSerialNumber)


@to_v16_rule(m.BootNotificationRes)
def _(msg : m.BootNotificationRes):
    return v16.BootNotificationResponse(status=to_wire(msg.status),
                                        currentTime=msg.current_time,
                                        interval=duration_to_seconds(msg.interval))


@from_v16_rule(v16.BootNotificationResponse)
def _(msg : v16.BootNotificationResponse):
    return m.BootNotificationRes(status=from_wire(m.RegistrationStatus, msg.status),
                                 current_time=msg.currentTime,
                                 interval=seconds_to_duration(msg.interval))


# CancelReservation

@to_v16_rule(m.CancelReservationReq)
def _(msg : m.CancelReservationReq):
    return v16.CancelReservationRequest(reservationId=msg.reservation_id)


@from_v16_rule(v16.CancelReservationRequest)
def _(msg : v16.CancelReservationRequest):
    return m.CancelReservationReq(msg.reservationId)


@to_v16_rule(m.CancelReservationRes)
def _(msg : m.CancelReservationRes):
    return v16.CancelReservationResponse(status=accepted_to_v16(msg.accepted))


@from_v16_rule(v16.CancelReservationResponse)
def _(msg : v16.CancelReservationResponse):
    return m.CancelReservationRes(accepted_from_v16(msg.status))


# ChangeAvailability

@to_v16_rule(m.ChangeAvailabilityReq)
def _(msg : m.ChangeAvailabilityReq):
    return v16.ChangeAvailabilityRequest(connectorId=msg.scope.to_ocpp(), type=to_wire(msg.availability_type))


@from_v16_rule(v16.ChangeAvailabilityRequest)
def _(msg : v16.ChangeAvailabilityRequest):
    return m.ChangeAvailabilityReq(scope=m.Scope.from_ocpp(msg.connectorId),
                                   availability_type=from_wire(m.AvailabilityType, msg.type))


@to_v16_rule(m.ChangeAvailabilityRes)
def _(msg : m.ChangeAvailabilityRes):
    return v16.ChangeAvailabilityResponse(status=to_wire(msg.status))


@from_v16_rule(v16.ChangeAvailabilityResponse)
def _(msg : v16.ChangeAvailabilityResponse):
    return m.ChangeAvailabilityRes(from_wire(m.AvailabilityStatus, msg.status))


# ChangeConfiguration

@to_v16_rule(m.ChangeConfigurationReq)
def _(msg : m.ChangeConfigurationReq):
    return v16.ChangeConfigurationRequest(key=msg.key, value=msg.value)


@from_v16_rule(v16.ChangeConfigurationRequest)
def _(msg : v16.ChangeConfigurationRequest):
    return m.ChangeConfigurationReq(msg.key, msg.value)


@to_v16_rule(m.ChangeConfigurationRes)
def _(msg : m.ChangeConfigurationRes):
    return v16.ChangeConfigurationResponse(status=to_wire(msg.status))


@from_v16_rule(v16.ChangeConfigurationResponse)
def _(msg : v16.ChangeConfigurationResponse):
    return m.ChangeConfigurationRes(from_wire(m.ConfigurationStatus, msg.status))


# ClearCache

@to_v16_rule(m.ClearCacheReq)
def _(msg : m.ClearCacheReq):
    return v16.ClearCacheRequest()


@from_v16_rule(v16.ClearCacheRequest)
def _(msg : v16.ClearCacheRequest):
    return m.ClearCacheReq()


@to_v16_rule(m.ClearCacheRes)
def _(msg : m.ClearCacheRes):
    return v16.ClearCacheResponse(status=accepted_to_v16(msg.accepted))


@from_v16_rule(v16.ClearCacheResponse)
def _(msg : v16.ClearCacheResponse):
    return m.ClearCacheRes(accepted_from_v16(msg.status))


# ClearChargingProfile

@to_v16_rule(m.ClearChargingProfileReq)
def _(msg : m.ClearChargingProfileReq):
    return v16.ClearChargingProfileRequest(
        id=msg.id,
        connectorId=None if msg.scope is None else msg.scope.to_ocpp(),
        chargingProfilePurpose=None if msg.purpose is None else to_wire(msg.purpose),
        stackLevel=msg.stack_level)


@from_v16_rule(v16.ClearChargingProfileRequest)
def _(msg : v16.ClearChargingProfileRequest):
    return m.ClearChargingProfileReq(
        id=msg.id,
        scope=None if msg.connectorId is None else m.Scope.from_ocpp(msg.connectorId),
        purpose=None if msg.chargingProfilePurpose is None else from_wire(m.ChargingProfilePurpose,
                                                                          msg.chargingProfilePurpose),
        stack_level=msg.stackLevel)


@to_v16_rule(m.ClearChargingProfileRes)
def _(msg : m.ClearChargingProfileRes):
    return v16.ClearChargingProfileResponse(status=to_wire(msg.status))


@from_v16_rule(v16.ClearChargingProfileResponse)
def _(msg : v16.ClearChargingProfileResponse):
    return m.ClearChargingProfileRes(from_wire(m.ClearChargingProfileStatus, msg.status))


# DataTransfer payloads are vendor specific and are never converted

def _reject(msg):
    logger.debug(f"Refusing to convert {type(msg).__name__}")
    raise UnsupportedMessageVariant(msg)


for _rejected in REJECTED_MESSAGES:
    to_v16_rule(_rejected)(_reject)
for _rejected in REJECTED_WIRE_MESSAGES:
    from_v16_rule(_rejected)(_reject)


# DiagnosticsStatusNotification

@to_v16_rule(m.DiagnosticsStatusNotificationReq)
def _(msg : m.DiagnosticsStatusNotificationReq):
    return v16.DiagnosticsStatusNotificationRequest(status=to_wire(msg.status))


@from_v16_rule(v16.DiagnosticsStatusNotificationRequest)
def _(msg : v16.DiagnosticsStatusNotificationRequest):
    return m.DiagnosticsStatusNotificationReq(from_wire(m.DiagnosticsStatus, msg.status))


@to_v16_rule(m.DiagnosticsStatusNotificationRes)
def _(msg : m.DiagnosticsStatusNotificationRes):
    return v16.DiagnosticsStatusNotificationResponse()


@from_v16_rule(v16.DiagnosticsStatusNotificationResponse)
def _(msg : v16.DiagnosticsStatusNotificationResponse):
    return m.DiagnosticsStatusNotificationRes()


# FirmwareStatusNotification

@to_v16_rule(m.FirmwareStatusNotificationReq)
def _(msg : m.FirmwareStatusNotificationReq):
    return v16.FirmwareStatusNotificationRequest(status=to_wire(msg.status))


@from_v16_rule(v16.FirmwareStatusNotificationRequest)
def _(msg : v16.FirmwareStatusNotificationRequest):
    return m.FirmwareStatusNotificationReq(from_wire(m.FirmwareStatus, msg.status))


@to_v16_rule(m.FirmwareStatusNotificationRes)
def _(msg : m.FirmwareStatusNotificationRes):
    return v16.FirmwareStatusNotificationResponse()


@from_v16_rule(v16.FirmwareStatusNotificationResponse)
def _(msg : v16.FirmwareStatusNotificationResponse):
    return m.FirmwareStatusNotificationRes()


# GetCompositeSchedule

@to_v16_rule(m.GetCompositeScheduleReq)
def _(msg : m.GetCompositeScheduleReq):
    return v16.GetCompositeScheduleRequest(
        connectorId=msg.scope.to_ocpp(),
        duration=duration_to_seconds(msg.duration),
        chargingRateUnit=None if msg.charging_rate_unit is None else to_wire(msg.charging_rate_unit))


@from_v16_rule(v16.GetCompositeScheduleRequest)
def _(msg : v16.GetCompositeScheduleRequest):
    return m.GetCompositeScheduleReq(
        scope=m.Scope.from_ocpp(msg.connectorId),
        duration=seconds_to_duration(msg.duration),
        charging_rate_unit=None if msg.chargingRateUnit is None else from_wire(m.ChargingRateUnit,
                                                                               msg.chargingRateUnit))


@to_v16_rule(m.GetCompositeScheduleRes)
def _(msg : m.GetCompositeScheduleRes):
    return v16.GetCompositeScheduleResponse(
        status=to_wire(msg.status),
        connectorId=None if msg.scope is None else msg.scope.to_ocpp(),
        scheduleStart=msg.schedule_start,
        chargingSchedule=None if msg.charging_schedule is None else schedule_to_v16(msg.charging_schedule))


@from_v16_rule(v16.GetCompositeScheduleResponse)
def _(msg : v16.GetCompositeScheduleResponse):
    return m.GetCompositeScheduleRes(
        status=from_wire(m.CompositeScheduleStatus, msg.status),
        scope=None if msg.connectorId is None else m.Scope.from_ocpp(msg.connectorId),
        schedule_start=msg.scheduleStart,
        charging_schedule=None if msg.chargingSchedule is None else schedule_from_v16(msg.chargingSchedule))


# GetConfiguration

@to_v16_rule(m.GetConfigurationReq)
def _(msg : m.GetConfigurationReq):
    return v16.GetConfigurationRequest(key=list(msg.keys))


@from_v16_rule(v16.GetConfigurationRequest)
def _(msg : v16.GetConfigurationRequest):
    return m.GetConfigurationReq(msg.key or ())


@to_v16_rule(m.GetConfigurationRes)
def _(msg : m.GetConfigurationRes):
    return v16.GetConfigurationResponse(configurationKey=[key_value_to_v16(kv) for kv in msg.values],
                                        unknownKey=list(msg.unknown_keys))


@from_v16_rule(v16.GetConfigurationResponse)
def _(msg : v16.GetConfigurationResponse):
    return m.GetConfigurationRes(values=[key_value_from_v16(e) for e in msg.configurationKey or ()],
                                 unknown_keys=msg.unknownKey or ())


# GetDiagnostics

@to_v16_rule(m.GetDiagnosticsReq)
def _(msg : m.GetDiagnosticsReq):
    return v16.GetDiagnosticsRequest(location=uri_to_v16(msg.location),
                                     retries=msg.retries.number_of_retries,
                                     retryInterval=msg.retries.interval_in_seconds,
                                     startTime=msg.start_time,
                                     stopTime=msg.stop_time)


@from_v16_rule(v16.GetDiagnosticsRequest)
def _(msg : v16.GetDiagnosticsRequest):
    return m.GetDiagnosticsReq(location=uri_from_v16(msg.location),
                               start_time=msg.startTime,
                               stop_time=msg.stopTime,
                               retries=m.Retries.from_ints(msg.retries, msg.retryInterval))


@to_v16_rule(m.GetDiagnosticsRes)
def _(msg : m.GetDiagnosticsRes):
    return v16.GetDiagnosticsResponse(fileName=msg.file_name)


@from_v16_rule(v16.GetDiagnosticsResponse)
def _(msg : v16.GetDiagnosticsResponse):
    return m.GetDiagnosticsRes(msg.fileName)


# GetLocalListVersion

@to_v16_rule(m.GetLocalListVersionReq)
def _(msg : m.GetLocalListVersionReq):
    return v16.GetLocalListVersionRequest()


@from_v16_rule(v16.GetLocalListVersionRequest)
def _(msg : v16.GetLocalListVersionRequest):
    return m.GetLocalListVersionReq()


@to_v16_rule(m.GetLocalListVersionRes)
def _(msg : m.GetLocalListVersionRes):
    return v16.GetLocalListVersionResponse(listVersion=auth_list_version_to_v16(msg.version))


@from_v16_rule(v16.GetLocalListVersionResponse)
def _(msg : v16.GetLocalListVersionResponse):
    return m.GetLocalListVersionRes(auth_list_version_from_v16(msg.listVersion))


# Heartbeat

@to_v16_rule(m.HeartbeatReq)
def _(msg : m.HeartbeatReq):
    return v16.HeartbeatRequest()


@from_v16_rule(v16.HeartbeatRequest)
def _(msg : v16.HeartbeatRequest):
    return m.HeartbeatReq()


@to_v16_rule(m.HeartbeatRes)
def _(msg : m.HeartbeatRes):
    return v16.HeartbeatResponse(currentTime=msg.current_time)


@from_v16_rule(v16.HeartbeatResponse)
def _(msg : v16.HeartbeatResponse):
    return m.HeartbeatRes(msg.currentTime)


# MeterValues

@to_v16_rule(m.MeterValuesReq)
def _(msg : m.MeterValuesReq):
    return v16.MeterValuesRequest(connectorId=msg.scope.to_ocpp(),
                                  transactionId=msg.transaction_id,
                                  meterValue=[meter_to_v16(meter) for meter in msg.meters])


@from_v16_rule(v16.MeterValuesRequest)
def _(msg : v16.MeterValuesRequest):
    return m.MeterValuesReq(scope=m.Scope.from_ocpp(msg.connectorId),
                            transaction_id=msg.transactionId,
                            meters=[meter_from_v16(meter) for meter in msg.meterValue])


@to_v16_rule(m.MeterValuesRes)
def _(msg : m.MeterValuesRes):
    return v16.MeterValuesResponse()


@from_v16_rule(v16.MeterValuesResponse)
def _(msg : v16.MeterValuesResponse):
    return m.MeterValuesRes()


# RemoteStartTransaction

@to_v16_rule(m.RemoteStartTransactionReq)
def _(msg : m.RemoteStartTransactionReq):
    return v16.RemoteStartTransactionRequest(
        idTag=msg.id_tag,
        connectorId=None if msg.connector is None else msg.connector.to_ocpp(),
        chargingProfile=None if msg.charging_profile is None else charging_profile_to_v16(msg.charging_profile))


@from_v16_rule(v16.RemoteStartTransactionRequest)
def _(msg : v16.RemoteStartTransactionRequest):
    return m.RemoteStartTransactionReq(
        id_tag=msg.idTag,
        connector=None if msg.connectorId is None else m.ConnectorScope.from_ocpp(msg.connectorId),
        charging_profile=None if msg.chargingProfile is None else charging_profile_from_v16(msg.chargingProfile))


@to_v16_rule(m.RemoteStartTransactionRes)
def _(msg : m.RemoteStartTransactionRes):
    return v16.RemoteStartTransactionResponse(status=accepted_to_v16(msg.accepted))


@from_v16_rule(v16.RemoteStartTransactionResponse)
def _(msg : v16.RemoteStartTransactionResponse):
    return m.RemoteStartTransactionRes(accepted_from_v16(msg.status))


# RemoteStopTransaction

@to_v16_rule(m.RemoteStopTransactionReq)
def _(msg : m.RemoteStopTransactionReq):
    return v16.RemoteStopTransactionRequest(transactionId=msg.transaction_id)


@from_v16_rule(v16.RemoteStopTransactionRequest)
def _(msg : v16.RemoteStopTransactionRequest):
    return m.RemoteStopTransactionReq(msg.transactionId)


@to_v16_rule(m.RemoteStopTransactionRes)
def _(msg : m.RemoteStopTransactionRes):
    return v16.RemoteStopTransactionResponse(status=accepted_to_v16(msg.accepted))


@from_v16_rule(v16.RemoteStopTransactionResponse)
def _(msg : v16.RemoteStopTransactionResponse):
    return m.RemoteStopTransactionRes(accepted_from_v16(msg.status))


# ReserveNow

@to_v16_rule(m.ReserveNowReq)
def _(msg : m.ReserveNowReq):
    return v16.ReserveNowRequest(connectorId=msg.connector.to_ocpp(),
                                 expiryDate=msg.expiry_date,
                                 idTag=msg.id_tag,
                                 parentIdTag=msg.parent_id_tag,
                                 reservationId=msg.reservation_id)


@from_v16_rule(v16.ReserveNowRequest)
def _(msg : v16.ReserveNowRequest):
    return m.ReserveNowReq(connector=m.Scope.from_ocpp(msg.connectorId),
                           expiry_date=msg.expiryDate,
                           id_tag=msg.idTag,
                           reservation_id=msg.reservationId,
                           parent_id_tag=msg.parentIdTag)


@to_v16_rule(m.ReserveNowRes)
def _(msg : m.ReserveNowRes):
    return v16.ReserveNowResponse(status=to_wire(msg.status))


@from_v16_rule(v16.ReserveNowResponse)
def _(msg : v16.ReserveNowResponse):
    return m.ReserveNowRes(from_wire(m.ReservationStatus, msg.status))


# Reset

@to_v16_rule(m.ResetReq)
def _(msg : m.ResetReq):
    return v16.ResetRequest(type=to_wire(msg.reset_type))


@from_v16_rule(v16.ResetRequest)
def _(msg : v16.ResetRequest):
    return m.ResetReq(from_wire(m.ResetType, msg.type))


@to_v16_rule(m.ResetRes)
def _(msg : m.ResetRes):
    return v16.ResetResponse(status=accepted_to_v16(msg.accepted))


@from_v16_rule(v16.ResetResponse)
def _(msg : v16.ResetResponse):
    return m.ResetRes(accepted_from_v16(msg.status))


# SendLocalList
# The hash of the request and of an accepted status has no 1.6 field and is dropped.

@to_v16_rule(m.SendLocalListReq)
def _(msg : m.SendLocalListReq):
    return v16.SendLocalListRequest(
        updateType=to_wire(msg.update_type),
        listVersion=auth_list_version_to_v16(msg.list_version),
        localAuthorisationList=[authorisation_data_to_v16(d) for d in msg.local_authorisation_list])


@from_v16_rule(v16.SendLocalListRequest)
def _(msg : v16.SendLocalListRequest):
    return m.SendLocalListReq(
        update_type=from_wire(m.UpdateType, msg.updateType),
        list_version=auth_list_version_from_v16(msg.listVersion),
        local_authorisation_list=[authorisation_data_from_v16(d) for d in msg.localAuthorisationList or ()],
        hash=None)


@to_v16_rule(m.SendLocalListRes)
def _(msg : m.SendLocalListRes):
    status, _hash = update_status_to_v16_and_hash(msg.status)
    return v16.SendLocalListResponse(status=status)


@from_v16_rule(v16.SendLocalListResponse)
def _(msg : v16.SendLocalListResponse):
    return m.SendLocalListRes(update_status_from_v16(msg.status))


# SetChargingProfile

@to_v16_rule(m.SetChargingProfileReq)
def _(msg : m.SetChargingProfileReq):
    return v16.SetChargingProfileRequest(connectorId=msg.scope.to_ocpp(),
                                         csChargingProfiles=charging_profile_to_v16(msg.charging_profile))


@from_v16_rule(v16.SetChargingProfileRequest)
def _(msg : v16.SetChargingProfileRequest):
    return m.SetChargingProfileReq(scope=m.Scope.from_ocpp(msg.connectorId),
                                   charging_profile=charging_profile_from_v16(msg.csChargingProfiles))


@to_v16_rule(m.SetChargingProfileRes)
def _(msg : m.SetChargingProfileRes):
    return v16.SetChargingProfileResponse(status=to_wire(msg.status))


@from_v16_rule(v16.SetChargingProfileResponse)
def _(msg : v16.SetChargingProfileResponse):
    return m.SetChargingProfileRes(from_wire(m.ChargingProfileStatus, msg.status))


# StartTransaction

@to_v16_rule(m.StartTransactionReq)
def _(msg : m.StartTransactionReq):
    return v16.StartTransactionRequest(connectorId=msg.connector.to_ocpp(),
                                       idTag=msg.id_tag,
                                       timestamp=msg.timestamp,
                                       meterStart=msg.meter_start,
                                       reservationId=msg.reservation_id)


@from_v16_rule(v16.StartTransactionRequest)
def _(msg : v16.StartTransactionRequest):
    return m.StartTransactionReq(connector=m.ConnectorScope.from_ocpp(msg.connectorId),
                                 id_tag=msg.idTag,
                                 timestamp=msg.timestamp,
                                 meter_start=msg.meterStart,
                                 reservation_id=msg.reservationId)


@to_v16_rule(m.StartTransactionRes)
def _(msg : m.StartTransactionRes):
    return v16.StartTransactionResponse(transactionId=msg.transaction_id,
                                        idTagInfo=id_tag_info_to_v16(msg.id_tag_info))


@from_v16_rule(v16.StartTransactionResponse)
def _(msg : v16.StartTransactionResponse):
    return m.StartTransactionRes(transaction_id=msg.transactionId,
                                 id_tag_info=id_tag_info_from_v16(msg.idTagInfo))


# StatusNotification

@to_v16_rule(m.StatusNotificationReq)
def _(msg : m.StatusNotificationReq):
    status, error_code, info, vendor_error_code = charge_point_status_to_v16(msg.status)
    return v16.StatusNotificationRequest(connectorId=msg.scope.to_ocpp(),
                                         status=status,
                                         errorCode=error_code,
                                         info=info,
                                         timestamp=msg.timestamp,
                                         vendorId=msg.vendor_id,
                                         vendorErrorCode=vendor_error_code)


@from_v16_rule(v16.StatusNotificationRequest)
def _(msg : v16.StatusNotificationRequest):
    return m.StatusNotificationReq(
        scope=m.Scope.from_ocpp(msg.connectorId),
        status=charge_point_status_from_v16(msg.status, msg.errorCode, msg.info, msg.vendorErrorCode),
        timestamp=msg.timestamp,
        vendor_id=msg.vendorId)


@to_v16_rule(m.StatusNotificationRes)
def _(msg : m.StatusNotificationRes):
    return v16.StatusNotificationResponse()


@from_v16_rule(v16.StatusNotificationResponse)
def _(msg : v16.StatusNotificationResponse):
    return m.StatusNotificationRes()


# StopTransaction

@to_v16_rule(m.StopTransactionReq)
def _(msg : m.StopTransactionReq):
    return v16.StopTransactionRequest(transactionId=msg.transaction_id,
                                      idTag=msg.id_tag,
                                      timestamp=msg.timestamp,
                                      meterStop=msg.meter_stop,
                                      reason=to_wire(msg.reason),
                                      transactionData=[meter_to_v16(meter) for meter in msg.meters])


@from_v16_rule(v16.StopTransactionRequest)
def _(msg : v16.StopTransactionRequest):
    return m.StopTransactionReq(
        transaction_id=msg.transactionId,
        id_tag=msg.idTag,
        timestamp=msg.timestamp,
        meter_stop=msg.meterStop,
        reason=m.StopReason.local if msg.reason is None else from_wire(m.StopReason, msg.reason),
        meters=[meter_from_v16(meter) for meter in msg.transactionData or ()])


@to_v16_rule(m.StopTransactionRes)
def _(msg : m.StopTransactionRes):
    return v16.StopTransactionResponse(
        idTagInfo=None if msg.id_tag_info is None else id_tag_info_to_v16(msg.id_tag_info))


@from_v16_rule(v16.StopTransactionResponse)
def _(msg : v16.StopTransactionResponse):
    return m.StopTransactionRes(None if msg.idTagInfo is None else id_tag_info_from_v16(msg.idTagInfo))


# TriggerMessage

@to_v16_rule(m.TriggerMessageReq)
def _(msg : m.TriggerMessageReq):
    requested_message, connector_id = trigger_to_v16(msg.requested_message)
    return v16.TriggerMessageRequest(requestedMessage=requested_message, connectorId=connector_id)


@from_v16_rule(v16.TriggerMessageRequest)
def _(msg : v16.TriggerMessageRequest):
    return m.TriggerMessageReq(trigger_from_v16(msg.requestedMessage, msg.connectorId))


@to_v16_rule(m.TriggerMessageRes)
def _(msg : m.TriggerMessageRes):
    return v16.TriggerMessageResponse(status=to_wire(msg.status))


@from_v16_rule(v16.TriggerMessageResponse)
def _(msg : v16.TriggerMessageResponse):
    return m.TriggerMessageRes(from_wire(m.TriggerMessageStatus, msg.status))


# UnlockConnector

@to_v16_rule(m.UnlockConnectorReq)
def _(msg : m.UnlockConnectorReq):
    return v16.UnlockConnectorRequest(connectorId=msg.connector.to_ocpp())


@from_v16_rule(v16.UnlockConnectorRequest)
def _(msg : v16.UnlockConnectorRequest):
    return m.UnlockConnectorReq(m.ConnectorScope.from_ocpp(msg.connectorId))


@to_v16_rule(m.UnlockConnectorRes)
def _(msg : m.UnlockConnectorRes):
    return v16.UnlockConnectorResponse(status=to_wire(msg.status))


@from_v16_rule(v16.UnlockConnectorResponse)
def _(msg : v16.UnlockConnectorResponse):
    return m.UnlockConnectorRes(from_wire(m.UnlockStatus, msg.status))


# UpdateFirmware

@to_v16_rule(m.UpdateFirmwareReq)
def _(msg : m.UpdateFirmwareReq):
    return v16.UpdateFirmwareRequest(location=uri_to_v16(msg.location),
                                     retries=msg.retries.number_of_retries,
                                     retrieveDate=msg.retrieve_date,
                                     retryInterval=msg.retries.interval_in_seconds)


@from_v16_rule(v16.UpdateFirmwareRequest)
def _(msg : v16.UpdateFirmwareRequest):
    return m.UpdateFirmwareReq(retrieve_date=msg.retrieveDate,
                               location=uri_from_v16(msg.location),
                               retries=m.Retries.from_ints(msg.retries, msg.retryInterval))


@to_v16_rule(m.UpdateFirmwareRes)
def _(msg : m.UpdateFirmwareRes):
    return v16.UpdateFirmwareResponse()


@from_v16_rule(v16.UpdateFirmwareResponse)
def _(msg : v16.UpdateFirmwareResponse):
    return m.UpdateFirmwareRes()
