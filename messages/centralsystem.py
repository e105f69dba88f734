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

Operations initiated by the charge point and answered by the central system.
"""
import dataclasses
import datetime
from typing import Optional, Sequence

from messages.enums import RegistrationStatus, StopReason, FirmwareStatus, DiagnosticsStatus, DataTransferStatus
from messages.types import IdTagInfo, ConnectorScope, Scope, ChargePointStatus, Meter, freeze_sequence
from util.types import IdTag, TransactionId, ReservationId


@dataclasses.dataclass(frozen=True)
class AuthorizeReq:
    id_tag : IdTag


@dataclasses.dataclass(frozen=True)
class AuthorizeRes:
    id_tag_info : IdTagInfo


@dataclasses.dataclass(frozen=True)
class BootNotificationReq:
    charge_point_vendor : str
    charge_point_model : str
    charge_point_serial_number : Optional[str] = None
    charge_box_serial_number : Optional[str] = None
    firmware_version : Optional[str] = None
    iccid : Optional[str] = None
    imsi : Optional[str] = None
    meter_type : Optional[str] = None
    meter_serial_number : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class BootNotificationRes:
    status : RegistrationStatus
    current_time : datetime.datetime
    interval : datetime.timedelta


@dataclasses.dataclass(frozen=True)
class ChargePointDataTransferReq:
    vendor_id : str
    message_id : Optional[str] = None
    data : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class ChargePointDataTransferRes:
    status : DataTransferStatus
    data : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class DiagnosticsStatusNotificationReq:
    status : DiagnosticsStatus


@dataclasses.dataclass(frozen=True)
class DiagnosticsStatusNotificationRes:
    pass


@dataclasses.dataclass(frozen=True)
class FirmwareStatusNotificationReq:
    status : FirmwareStatus


@dataclasses.dataclass(frozen=True)
class FirmwareStatusNotificationRes:
    pass


@dataclasses.dataclass(frozen=True)
class HeartbeatReq:
    pass


@dataclasses.dataclass(frozen=True)
class HeartbeatRes:
    current_time : datetime.datetime


@dataclasses.dataclass(frozen=True)
class MeterValuesReq:
    scope : Scope
    transaction_id : Optional[TransactionId]
    meters : Sequence[Meter]

    def __post_init__(self):
        freeze_sequence(self, "meters")


@dataclasses.dataclass(frozen=True)
class MeterValuesRes:
    pass


@dataclasses.dataclass(frozen=True)
class StartTransactionReq:
    connector : ConnectorScope
    id_tag : IdTag
    timestamp : datetime.datetime
    meter_start : int
    reservation_id : Optional[ReservationId] = None


@dataclasses.dataclass(frozen=True)
class StartTransactionRes:
    transaction_id : TransactionId
    id_tag_info : IdTagInfo


@dataclasses.dataclass(frozen=True)
class StatusNotificationReq:
    scope : Scope
    status : ChargePointStatus
    timestamp : Optional[datetime.datetime] = None
    vendor_id : Optional[str] = None


@dataclasses.dataclass(frozen=True)
class StatusNotificationRes:
    pass


@dataclasses.dataclass(frozen=True)
class StopTransactionReq:
    transaction_id : TransactionId
    id_tag : Optional[IdTag]
    timestamp : datetime.datetime
    meter_stop : int
    reason : StopReason = StopReason.local
    meters : Sequence[Meter] = ()

    def __post_init__(self):
        freeze_sequence(self, "meters")


@dataclasses.dataclass(frozen=True)
class StopTransactionRes:
    id_tag_info : Optional[IdTagInfo] = None
