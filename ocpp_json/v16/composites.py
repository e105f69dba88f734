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

Converters for the structured parts of OCPP 1.6 payloads that do not map field for field.

>>> from messages.types import Faulted, Occupied
>>> from messages.enums import OccupancyKind
>>> charge_point_status_to_v16(Faulted(info="lid open"))
('Faulted', 'NoError', 'lid open', None)
>>> charge_point_status_to_v16(Occupied(kind=OccupancyKind.suspended_evse))
('SuspendedEVSE', 'NoError', None, None)
>>> charge_point_status_from_v16("Faulted", "NoError", None, None)
Faulted(error_code=None, info=None, vendor_error_code=None)
>>> accepted_from_v16("Maybe")
Traceback (most recent call last):
...
ocpp_json.errors.InvalidAcceptanceStatus: Did not recognize status 'Maybe' (expected 'Accepted' or 'Rejected')
"""
import datetime
from logging import getLogger
from typing import Optional

from beartype import beartype
from pydantic import AnyUrl, TypeAdapter, ValidationError

from messages.enums import AuthorizationStatus, ChargePointErrorCode, Phase, ChargingRateUnit, ChargingProfilePurpose, \
    RecurrencyKind, UpdateStatusKind
from messages.types import IdTagInfo, Meter, MeterValue, ChargePointStatus, Available, Occupied, Unavailable, \
    Reserved, Faulted, ChargingProfile, ChargingProfileKind, Absolute, Relative, Recurring, ChargingSchedule, \
    ChargingSchedulePeriod, AuthorisationData, AuthorisationAdd, AuthorisationRemove, AuthListVersion, \
    AuthListNotSupported, AuthListSupported, UpdateStatus, MessageTrigger, ConnectorScope, KeyValue, Uri, \
    DEFAULT_MEASURAND, DEFAULT_READING_CONTEXT, DEFAULT_VALUE_FORMAT, DEFAULT_LOCATION, DEFAULT_UNIT
from ocpp_json.enum_codec import EnumMapping
from ocpp_json.errors import InvalidAcceptanceStatus, InvalidURI, MissingOccupiedReason, UnrecognizedProfileKind, \
    UnrecognizedTriggerMessage, UnrecognizedChargePointStatus, UnrecognizedEnumValue
from ocpp_json.v16 import tables
from ocpp_json.v16.tables import to_wire, from_wire
from ocpp_models.v16 import composite_types as v16

logger = getLogger(__name__)

NO_ERROR = "NoError"
ACCEPTED = "Accepted"
REJECTED = "Rejected"
AUTH_LIST_NOT_SUPPORTED = -1
RECURRING = "Recurring"

# Only absolute URIs with a scheme pass; relative references such as "diag/upload" are refused.
_URI_ADAPTER = TypeAdapter(AnyUrl)

SIMPLE_STATUSES = {
    Available: "Available",
    Unavailable: "Unavailable",
    Reserved: "Reserved",
}


def accepted_to_v16(accepted : bool) -> str:
    return ACCEPTED if accepted else REJECTED


def accepted_from_v16(status : str) -> bool:
    if status == ACCEPTED:
        return True
    if status == REJECTED:
        return False
    logger.debug(f"Rejected acceptance status {status!r}")
    raise InvalidAcceptanceStatus(status)


def uri_to_v16(uri : Uri) -> str:
    return str(uri)


def uri_from_v16(location : str) -> Uri:
    try:
        return _URI_ADAPTER.validate_python(location)
    except ValidationError:
        logger.debug(f"Rejected URI {location!r}")
        raise InvalidURI(location) from None


def duration_to_seconds(duration : datetime.timedelta) -> int:
    return int(duration.total_seconds())


def seconds_to_duration(seconds : int) -> datetime.timedelta:
    return datetime.timedelta(seconds=seconds)


@beartype
def id_tag_info_to_v16(info : IdTagInfo) -> v16.IdTagInfo:
    return v16.IdTagInfo(status=tables.AUTHORIZATION_STATUS.to_wire(info.status),
                         expiryDate=info.expiry_date,
                         parentIdTag=info.parent_id_tag)


@beartype
def id_tag_info_from_v16(info : v16.IdTagInfo) -> IdTagInfo:
    return IdTagInfo(status=from_wire(AuthorizationStatus, info.status),
                     expiry_date=info.expiryDate,
                     parent_id_tag=info.parentIdTag)


def _none_if_default(table : EnumMapping, default, actual) -> Optional[str]:
    if actual == default:
        return None
    return table.to_wire(actual)


def _default_if_none(table : EnumMapping, default, literal : Optional[str]):
    if literal is None:
        return default
    return table.from_wire(literal)


def meter_value_to_v16(value : MeterValue) -> v16.SampledValue:
    return v16.SampledValue(
        value=value.value,
        measurand=_none_if_default(tables.MEASURAND, DEFAULT_MEASURAND, value.measurand),
        phase=None if value.phase is None else to_wire(value.phase),
        context=_none_if_default(tables.READING_CONTEXT, DEFAULT_READING_CONTEXT, value.context),
        format=_none_if_default(tables.VALUE_FORMAT, DEFAULT_VALUE_FORMAT, value.format),
        location=_none_if_default(tables.LOCATION, DEFAULT_LOCATION, value.location),
        unit=_none_if_default(tables.UNIT_OF_MEASURE, DEFAULT_UNIT, value.unit),
    )


def meter_value_from_v16(value : v16.SampledValue) -> MeterValue:
    return MeterValue(
        value=value.value,
        measurand=_default_if_none(tables.MEASURAND, DEFAULT_MEASURAND, value.measurand),
        phase=None if value.phase is None else from_wire(Phase, value.phase),
        context=_default_if_none(tables.READING_CONTEXT, DEFAULT_READING_CONTEXT, value.context),
        format=_default_if_none(tables.VALUE_FORMAT, DEFAULT_VALUE_FORMAT, value.format),
        location=_default_if_none(tables.LOCATION, DEFAULT_LOCATION, value.location),
        unit=_default_if_none(tables.UNIT_OF_MEASURE, DEFAULT_UNIT, value.unit),
    )


@beartype
def meter_to_v16(meter : Meter) -> v16.MeterValue:
    return v16.MeterValue(timestamp=meter.timestamp,
                          sampledValue=[meter_value_to_v16(v) for v in meter.values])


@beartype
def meter_from_v16(meter : v16.MeterValue) -> Meter:
    return Meter(timestamp=meter.timestamp,
                 values=[meter_value_from_v16(v) for v in meter.sampledValue])


@beartype
def charge_point_status_to_v16(status : ChargePointStatus) -> tuple[str, str, Optional[str], Optional[str]]:
    """Split a status into the (status, errorCode, info, vendorErrorCode) wire fields."""
    if type(status) in SIMPLE_STATUSES:
        return SIMPLE_STATUSES[type(status)], NO_ERROR, status.info, None
    if isinstance(status, Occupied):
        if status.kind is None:
            raise MissingOccupiedReason()
        return to_wire(status.kind), NO_ERROR, status.info, None
    if isinstance(status, Faulted):
        error_code = NO_ERROR if status.error_code is None else to_wire(status.error_code)
        return "Faulted", error_code, status.info, status.vendor_error_code
    raise TypeError(f"Unknown charge point status {status!r}")


@beartype
def charge_point_status_from_v16(status : str, error_code : str, info : Optional[str],
                                 vendor_error_code : Optional[str]) -> ChargePointStatus:
    code = None if error_code == NO_ERROR else from_wire(ChargePointErrorCode, error_code)

    if status == "Faulted":
        return Faulted(error_code=code, info=info, vendor_error_code=vendor_error_code)
    for variant, name in SIMPLE_STATUSES.items():
        if status == name:
            return variant(info=info)
    try:
        kind = tables.OCCUPANCY_KIND.from_wire(status)
    except UnrecognizedEnumValue:
        raise UnrecognizedChargePointStatus(status) from None
    return Occupied(kind=kind, info=info)


def profile_kind_to_v16(kind : ChargingProfileKind) -> str:
    if isinstance(kind, Absolute):
        return "Absolute"
    if isinstance(kind, Relative):
        return "Relative"
    if isinstance(kind, Recurring):
        return to_wire(kind.recurrency_kind)
    raise TypeError(f"Unknown charging profile kind {kind!r}")


def profile_kind_from_v16(kind : str, recurrency_kind : Optional[str] = None) -> ChargingProfileKind:
    """Besides the four single literals, also reads the schema form "Recurring" plus a separate recurrencyKind.

    A recurrencyKind that disagrees with the kind is refused.
    """
    if recurrency_kind is not None:
        if kind == RECURRING:
            return Recurring(from_wire(RecurrencyKind, recurrency_kind))
        if kind != recurrency_kind or kind not in tables.RECURRENCY_KIND.wire_values:
            logger.debug(f"Rejected charging profile kind {kind!r} with recurrency {recurrency_kind!r}")
            raise UnrecognizedProfileKind(kind)
    if kind == "Absolute":
        return Absolute()
    if kind == "Relative":
        return Relative()
    if kind in tables.RECURRENCY_KIND.wire_values:
        return Recurring(tables.RECURRENCY_KIND.from_wire(kind))
    logger.debug(f"Rejected charging profile kind {kind!r}")
    raise UnrecognizedProfileKind(kind)


def period_to_v16(period : ChargingSchedulePeriod) -> v16.ChargingSchedulePeriod:
    return v16.ChargingSchedulePeriod(startPeriod=duration_to_seconds(period.start_offset),
                                      limit=period.limit,
                                      numberPhases=period.number_phases)


def period_from_v16(period : v16.ChargingSchedulePeriod) -> ChargingSchedulePeriod:
    return ChargingSchedulePeriod(start_offset=seconds_to_duration(period.startPeriod),
                                  limit=period.limit,
                                  number_phases=period.numberPhases)


@beartype
def schedule_to_v16(schedule : ChargingSchedule) -> v16.ChargingSchedule:
    return v16.ChargingSchedule(
        duration=None if schedule.duration is None else duration_to_seconds(schedule.duration),
        startSchedule=schedule.starts_at,
        chargingRateUnit=to_wire(schedule.charging_rate_unit),
        chargingSchedulePeriod=[period_to_v16(p) for p in schedule.periods],
        minChargingRate=schedule.min_charging_rate,
    )


@beartype
def schedule_from_v16(schedule : v16.ChargingSchedule) -> ChargingSchedule:
    return ChargingSchedule(
        charging_rate_unit=from_wire(ChargingRateUnit, schedule.chargingRateUnit),
        periods=[period_from_v16(p) for p in schedule.chargingSchedulePeriod],
        min_charging_rate=schedule.minChargingRate,
        starts_at=schedule.startSchedule,
        duration=None if schedule.duration is None else seconds_to_duration(schedule.duration),
    )


@beartype
def charging_profile_to_v16(profile : ChargingProfile) -> v16.ChargingProfile:
    return v16.ChargingProfile(
        chargingProfileId=profile.id,
        transactionId=profile.transaction_id,
        stackLevel=profile.stack_level,
        chargingProfilePurpose=to_wire(profile.purpose),
        chargingProfileKind=profile_kind_to_v16(profile.kind),
        validFrom=profile.valid_from,
        validTo=profile.valid_to,
        chargingSchedule=schedule_to_v16(profile.schedule),
    )


@beartype
def charging_profile_from_v16(profile : v16.ChargingProfile) -> ChargingProfile:
    return ChargingProfile(
        id=profile.chargingProfileId,
        stack_level=profile.stackLevel,
        purpose=from_wire(ChargingProfilePurpose, profile.chargingProfilePurpose),
        kind=profile_kind_from_v16(profile.chargingProfileKind, profile.recurrencyKind),
        schedule=schedule_from_v16(profile.chargingSchedule),
        transaction_id=profile.transactionId,
        valid_from=profile.validFrom,
        valid_to=profile.validTo,
    )


def authorisation_data_to_v16(data : AuthorisationData) -> v16.AuthorisationData:
    if isinstance(data, AuthorisationAdd):
        return v16.AuthorisationData(idTag=data.id_tag, idTagInfo=id_tag_info_to_v16(data.id_tag_info))
    return v16.AuthorisationData(idTag=data.id_tag)


def authorisation_data_from_v16(data : v16.AuthorisationData) -> AuthorisationData:
    if data.idTagInfo is None:
        return AuthorisationRemove(data.idTag)
    return AuthorisationAdd(data.idTag, id_tag_info_from_v16(data.idTagInfo))


def auth_list_version_to_v16(version : AuthListVersion) -> int:
    if isinstance(version, AuthListSupported):
        return version.version
    if isinstance(version, AuthListNotSupported):
        return AUTH_LIST_NOT_SUPPORTED
    raise TypeError(f"Unknown local list version {version!r}")


def auth_list_version_from_v16(version : int) -> AuthListVersion:
    return AuthListVersion.from_ocpp(version)


def update_status_to_v16_and_hash(status : UpdateStatus) -> tuple[str, Optional[str]]:
    """Wire status plus the hash the status carried; the 1.6 payloads have nowhere to put the hash."""
    return to_wire(status.kind), status.hash


def update_status_from_v16(status : str) -> UpdateStatus:
    return UpdateStatus(from_wire(UpdateStatusKind, status))


def trigger_to_v16(trigger : MessageTrigger) -> tuple[str, Optional[int]]:
    connector_id = None if trigger.connector is None else trigger.connector.to_ocpp()
    return to_wire(trigger.kind), connector_id


def trigger_from_v16(requested_message : str, connector_id : Optional[int]) -> MessageTrigger:
    try:
        kind = tables.TRIGGER_KIND.from_wire(requested_message)
    except UnrecognizedEnumValue:
        raise UnrecognizedTriggerMessage(requested_message) from None
    if kind not in MessageTrigger.CONNECTOR_TRIGGERS or connector_id is None:
        return MessageTrigger(kind)
    return MessageTrigger(kind, ConnectorScope.from_ocpp(connector_id))


def key_value_to_v16(kv : KeyValue) -> v16.ConfigurationKey:
    return v16.ConfigurationKey(key=kv.key, readonly=kv.readonly, value=kv.value)


def key_value_from_v16(entry : v16.ConfigurationKey) -> KeyValue:
    return KeyValue(key=entry.key, readonly=entry.readonly, value=entry.value)
