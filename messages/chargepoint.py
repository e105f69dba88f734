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

Operations initiated by the central system and answered by the charge point.
"""
import dataclasses
import datetime
from typing import Optional, Sequence

from messages.enums import UnlockStatus, ResetType, AvailabilityType, AvailabilityStatus, ConfigurationStatus, \
    UpdateType, ReservationStatus, TriggerMessageStatus, ChargingProfileStatus, ClearChargingProfileStatus, \
    ChargingProfilePurpose, ChargingRateUnit, CompositeScheduleStatus, DataTransferStatus
from messages.types import Scope, ConnectorScope, ChargingProfile, ChargingSchedule, Retries, KeyValue, \
    AuthListVersion, AuthorisationData, UpdateStatus, MessageTrigger, Uri, freeze_sequence
from util.types import IdTag, TransactionId, ReservationId, ChargingProfileId


@dataclasses.dataclass(frozen=True)
class CancelReservationReq:
    reservation_id : ReservationId


@dataclasses.dataclass(frozen=True)
class CancelReservationRes:
    accepted : bool


@dataclasses.dataclass(frozen=True)
class CentralSystemDataTransferReq:
    vendor_id : str
    message_id : Optional[str] = None
    data : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class CentralSystemDataTransferRes:
    status : DataTransferStatus
    data : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ChangeAvailabilityReq:
    scope : Scope
    availability_type : AvailabilityType


@dataclasses.dataclass(frozen=True)
class ChangeAvailabilityRes:
    status : AvailabilityStatus


@dataclasses.dataclass(frozen=True)
class ChangeConfigurationReq:
    key : str
    value : str


@dataclasses.dataclass(frozen=True)
class ChangeConfigurationRes:
    status : ConfigurationStatus


@dataclasses.dataclass(frozen=True)
class ClearCacheReq:
    pass


@dataclasses.dataclass(frozen=True)
class ClearCacheRes:
    accepted : bool


@dataclasses.dataclass(frozen=True)
class ClearChargingProfileReq:
    id : Optional[ChargingProfileId] = None
    scope : Optional[Scope] = None
    purpose : Optional[ChargingProfilePurpose] = None
    stack_level : Optional[int] = None


@dataclasses.dataclass(frozen=True)
class ClearChargingProfileRes:
    status : ClearChargingProfileStatus


@dataclasses.dataclass(frozen=True)
class GetCompositeScheduleReq:
    scope : Scope
    duration : datetime.timedelta
    charging_rate_unit : Optional[ChargingRateUnit] = None


@dataclasses.dataclass(frozen=True)
class GetCompositeScheduleRes:
    status : CompositeScheduleStatus
    scope : Optional[Scope] = None
    schedule_start : Optional[datetime.datetime] = None
    charging_schedule : Optional[ChargingSchedule] = None


@dataclasses.dataclass(frozen=True)
class GetConfigurationReq:
    keys : Sequence[str] = ()

    def __post_init__(self):
        freeze_sequence(self, "keys")


@dataclasses.dataclass(frozen=True)
class GetConfigurationRes:
    values : Sequence[KeyValue] = ()
    unknown_keys : Sequence[str] = ()

    def __post_init__(self):
        freeze_sequence(self, "values")
        freeze_sequence(self, "unknown_keys")


@dataclasses.dataclass(frozen=True)
class GetDiagnosticsReq:
    location : Uri
    start_time : Optional[datetime.datetime] = None
    stop_time : Optional[datetime.datetime] = None
    retries : Retries = Retries()


@dataclasses.dataclass(frozen=True)
class GetDiagnosticsRes:
    file_name : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class GetLocalListVersionReq:
    pass


@dataclasses.dataclass(frozen=True)
class GetLocalListVersionRes:
    version : AuthListVersion


@dataclasses.dataclass(frozen=True)
class RemoteStartTransactionReq:
    id_tag : IdTag
    connector : Optional[ConnectorScope] = None
    charging_profile : Optional[ChargingProfile] = None


@dataclasses.dataclass(frozen=True)
class RemoteStartTransactionRes:
    accepted : bool


@dataclasses.dataclass(frozen=True)
class RemoteStopTransactionReq:
    transaction_id : TransactionId


@dataclasses.dataclass(frozen=True)
class RemoteStopTransactionRes:
    accepted : bool


@dataclasses.dataclass(frozen=True)
class ReserveNowReq:
    connector : Scope
    expiry_date : datetime.datetime
    id_tag : IdTag
    reservation_id : ReservationId
    parent_id_tag : Optional[IdTag] = None


@dataclasses.dataclass(frozen=True)
class ReserveNowRes:
    status : ReservationStatus


@dataclasses.dataclass(frozen=True)
class ResetReq:
    reset_type : ResetType


@dataclasses.dataclass(frozen=True)
class ResetRes:
    accepted : bool


@dataclasses.dataclass(frozen=True)
class SendLocalListReq:
    update_type : UpdateType
    list_version : AuthListVersion
    local_authorisation_list : Sequence[AuthorisationData] = ()
    hash : Optional[str] = None

    def __post_init__(self):
        freeze_sequence(self, "local_authorisation_list")


@dataclasses.dataclass(frozen=True)
class SendLocalListRes:
    status : UpdateStatus


@dataclasses.dataclass(frozen=True)
class SetChargingProfileReq:
    scope : Scope
    charging_profile : ChargingProfile


@dataclasses.dataclass(frozen=True)
class SetChargingProfileRes:
    status : ChargingProfileStatus


@dataclasses.dataclass(frozen=True)
class TriggerMessageReq:
    requested_message : MessageTrigger


@dataclasses.dataclass(frozen=True)
class TriggerMessageRes:
    status : TriggerMessageStatus


@dataclasses.dataclass(frozen=True)
class UnlockConnectorReq:
    connector : ConnectorScope


@dataclasses.dataclass(frozen=True)
class UnlockConnectorRes:
    status : UnlockStatus


@dataclasses.dataclass(frozen=True)
class UpdateFirmwareReq:
    retrieve_date : datetime.datetime
    location : Uri
    retries : Retries = Retries()


@dataclasses.dataclass(frozen=True)
class UpdateFirmwareRes:
    pass
