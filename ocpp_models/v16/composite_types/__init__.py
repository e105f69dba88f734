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
import datetime
from typing import Optional

from ocpp_models.v16.base_types import WireModel, CiString20Type, CiString50Type, CiString500Type


class IdTagInfo(WireModel):
    status : str
    expiryDate : Optional[datetime.datetime] = None
    parentIdTag : Optional[CiString20Type] = None


class SampledValue(WireModel):
    value : str
    context : Optional[str] = None
    format : Optional[str] = None
    measurand : Optional[str] = None
    phase : Optional[str] = None
    location : Optional[str] = None
    unit : Optional[str] = None


class MeterValue(WireModel):
    timestamp : datetime.datetime
    sampledValue : list[SampledValue]


class ChargingSchedulePeriod(WireModel):
    startPeriod : int
    limit : float
    numberPhases : Optional[int] = None


class ChargingSchedule(WireModel):
    duration : Optional[int] = None
    startSchedule : Optional[datetime.datetime] = None
    chargingRateUnit : str
    chargingSchedulePeriod : list[ChargingSchedulePeriod]
    minChargingRate : Optional[float] = None


class ChargingProfile(WireModel):
    chargingProfileId : int
    transactionId : Optional[int] = None
    stackLevel : int
    chargingProfilePurpose : str
    chargingProfileKind : str
    recurrencyKind : Optional[str] = None
    validFrom : Optional[datetime.datetime] = None
    validTo : Optional[datetime.datetime] = None
    chargingSchedule : ChargingSchedule


class AuthorisationData(WireModel):
    idTag : CiString20Type
    idTagInfo : Optional[IdTagInfo] = None


class ConfigurationKey(WireModel):
    key : CiString50Type
    readonly : bool
    value : Optional[CiString500Type] = None
