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
import dataclasses
import datetime
from abc import ABC, abstractmethod
from typing import Optional, Sequence

from pydantic import AnyUrl

from messages.enums import AuthorizationStatus, ChargePointErrorCode, OccupancyKind, UpdateStatusKind, Measurand, \
    ReadingContext, ValueFormat, Location, UnitOfMeasure, Phase, ChargingRateUnit, ChargingProfilePurpose, \
    RecurrencyKind, TriggerKind
from util.types import IdTag, TransactionId, ChargingProfileId

Uri = AnyUrl


def freeze_sequence(instance, field_name : str):
    object.__setattr__(instance, field_name, tuple(getattr(instance, field_name)))


class Scope(ABC):

    @abstractmethod
    def to_ocpp(self) -> int:
        pass

    @staticmethod
    def from_ocpp(connector_id : int) -> "Scope":
        if connector_id == 0:
            return ChargePointScope()
        return ConnectorScope.from_ocpp(connector_id)


@dataclasses.dataclass(frozen=True)
class ChargePointScope(Scope):

    def to_ocpp(self) -> int:
        return 0


@dataclasses.dataclass(frozen=True)
class ConnectorScope(Scope):
    """Connector numbering starts at zero here, the wire numbering starts at one."""
    id : int

    def to_ocpp(self) -> int:
        return self.id + 1

    @staticmethod
    def from_ocpp(connector_id : int) -> "ConnectorScope":
        return ConnectorScope(connector_id - 1)


@dataclasses.dataclass(frozen=True)
class IdTagInfo:
    status : AuthorizationStatus
    expiry_date : Optional[datetime.datetime] = None
    parent_id_tag : Optional[IdTag] = None


DEFAULT_MEASURAND = Measurand.energy_active_import_register
DEFAULT_READING_CONTEXT = ReadingContext.sample_periodic
DEFAULT_VALUE_FORMAT = ValueFormat.raw
DEFAULT_LOCATION = Location.outlet
DEFAULT_UNIT = UnitOfMeasure.wh


@dataclasses.dataclass(frozen=True)
class MeterValue:
    value : str
    measurand : Measurand = DEFAULT_MEASURAND
    phase : Optional[Phase] = None
    context : ReadingContext = DEFAULT_READING_CONTEXT
    format : ValueFormat = DEFAULT_VALUE_FORMAT
    location : Location = DEFAULT_LOCATION
    unit : UnitOfMeasure = DEFAULT_UNIT


@dataclasses.dataclass(frozen=True)
class Meter:
    timestamp : datetime.datetime
    values : Sequence[MeterValue]

    def __post_init__(self):
        freeze_sequence(self, "values")


class ChargePointStatus:
    info : Optional[str]


@dataclasses.dataclass(frozen=True)
class Available(ChargePointStatus):
    info : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Occupied(ChargePointStatus):
    kind : Optional[OccupancyKind] = None
    info : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Unavailable(ChargePointStatus):
    info : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Reserved(ChargePointStatus):
    info : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class Faulted(ChargePointStatus):
    error_code : Optional[ChargePointErrorCode] = None
    info : Optional[str] = None
    vendor_error_code : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ChargingSchedulePeriod:
    start_offset : datetime.timedelta
    limit : float
    number_phases : Optional[int] = None


@dataclasses.dataclass(frozen=True)
class ChargingSchedule:
    charging_rate_unit : ChargingRateUnit
    periods : Sequence[ChargingSchedulePeriod]
    min_charging_rate : Optional[float] = None
    starts_at : Optional[datetime.datetime] = None
    duration : Optional[datetime.timedelta] = None

    def __post_init__(self):
        freeze_sequence(self, "periods")


class ChargingProfileKind:
    pass


@dataclasses.dataclass(frozen=True)
class Absolute(ChargingProfileKind):
    pass


@dataclasses.dataclass(frozen=True)
class Relative(ChargingProfileKind):
    pass


@dataclasses.dataclass(frozen=True)
class Recurring(ChargingProfileKind):
    recurrency_kind : RecurrencyKind


@dataclasses.dataclass(frozen=True)
class ChargingProfile:
    id : ChargingProfileId
    stack_level : int
    purpose : ChargingProfilePurpose
    kind : ChargingProfileKind
    schedule : ChargingSchedule
    transaction_id : Optional[TransactionId] = None
    valid_from : Optional[datetime.datetime] = None
    valid_to : Optional[datetime.datetime] = None


class AuthListVersion:

    @staticmethod
    def from_ocpp(version : int) -> "AuthListVersion":
        if version < 0:
            return AuthListNotSupported()
        return AuthListSupported(version)


@dataclasses.dataclass(frozen=True)
class AuthListNotSupported(AuthListVersion):
    pass


@dataclasses.dataclass(frozen=True)
class AuthListSupported(AuthListVersion):
    version : int

    def __post_init__(self):
        if self.version < 0:
            raise ValueError(f"Local list version must not be negative, got {self.version}")


@dataclasses.dataclass(frozen=True)
class AuthorisationData:
    id_tag : IdTag


@dataclasses.dataclass(frozen=True)
class AuthorisationAdd(AuthorisationData):
    id_tag_info : IdTagInfo


@dataclasses.dataclass(frozen=True)
class AuthorisationRemove(AuthorisationData):
    pass


@dataclasses.dataclass(frozen=True)
class UpdateStatus:
    kind : UpdateStatusKind
    hash : Optional[str] = None

    def __post_init__(self):
        if self.hash is not None and self.kind != UpdateStatusKind.accepted:
            raise ValueError(f"Only an accepted update carries a hash, got {self.kind}")


@dataclasses.dataclass(frozen=True)
class MessageTrigger:
    kind : TriggerKind
    connector : Optional[ConnectorScope] = None

    CONNECTOR_TRIGGERS = (TriggerKind.meter_values, TriggerKind.status_notification)

    def __post_init__(self):
        if self.connector is not None and self.kind not in self.CONNECTOR_TRIGGERS:
            raise ValueError(f"Trigger {self.kind} does not take a connector")


@dataclasses.dataclass(frozen=True)
class Retries:
    number_of_retries : Optional[int] = None
    interval : Optional[datetime.timedelta] = None

    @property
    def interval_in_seconds(self) -> Optional[int]:
        if self.interval is None:
            return None
        return int(self.interval.total_seconds())

    @staticmethod
    def from_ints(number_of_retries : Optional[int], interval_seconds : Optional[int]) -> "Retries":
        interval = None if interval_seconds is None else datetime.timedelta(seconds=interval_seconds)
        return Retries(number_of_retries, interval)


@dataclasses.dataclass(frozen=True)
class KeyValue:
    key : str
    readonly : bool
    value : Optional[str] = None
