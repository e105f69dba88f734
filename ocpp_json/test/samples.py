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

One representative instance of every convertible domain message.
"""
from datetime import datetime, timezone, timedelta

import messages as m
from ocpp_json.v16.composites import uri_from_v16

NOW = datetime(2025, 3, 1, 12, 0, tzinfo=timezone.utc)
LATER = NOW + timedelta(hours=2)

ACCEPTED_TAG = m.IdTagInfo(m.AuthorizationStatus.accepted, expiry_date=LATER, parent_id_tag="PARENT01")

METER = m.Meter(NOW, [
    m.MeterValue("1520"),
    m.MeterValue("16.2", measurand=m.Measurand.current_import, phase=m.Phase.l1, unit=m.UnitOfMeasure.amp,
                 context=m.ReadingContext.transaction_begin),
    m.MeterValue("55", measurand=m.Measurand.soc, location=m.Location.ev, unit=m.UnitOfMeasure.percent),
])

DAILY_PROFILE = m.ChargingProfile(
    id=7,
    stack_level=1,
    purpose=m.ChargingProfilePurpose.tx_default_profile,
    kind=m.Recurring(m.RecurrencyKind.daily),
    schedule=m.ChargingSchedule(m.ChargingRateUnit.amperes,
                                [m.ChargingSchedulePeriod(timedelta(0), 32.0),
                                 m.ChargingSchedulePeriod(timedelta(hours=1), 16.0, number_phases=3)],
                                min_charging_rate=6.0,
                                starts_at=NOW,
                                duration=timedelta(hours=8)),
    valid_from=NOW,
    valid_to=LATER,
)

TX_PROFILE = m.ChargingProfile(
    id=8,
    stack_level=0,
    purpose=m.ChargingProfilePurpose.tx_profile,
    kind=m.Absolute(),
    schedule=m.ChargingSchedule(m.ChargingRateUnit.watts, [m.ChargingSchedulePeriod(timedelta(0), 11000.0)]),
    transaction_id=99,
)

DIAGNOSTICS_URI = uri_from_v16("ftp://diagnostics.example.com/upload")
FIRMWARE_URI = uri_from_v16("https://firmware.example.com/cp/2.1.bin")

CENTRAL_SYSTEM_SAMPLES = [
    m.AuthorizeReq("TAG0001"),
    m.AuthorizeRes(ACCEPTED_TAG),
    m.BootNotificationReq("Vendor", "Model X", charge_point_serial_number="SN-1", firmware_version="1.0.3",
                          iccid="8935", imsi="2440", meter_type="DC meter", meter_serial_number="M-77"),
    m.BootNotificationRes(m.RegistrationStatus.accepted, NOW, timedelta(seconds=300)),
    m.DiagnosticsStatusNotificationReq(m.DiagnosticsStatus.uploading),
    m.DiagnosticsStatusNotificationRes(),
    m.FirmwareStatusNotificationReq(m.FirmwareStatus.installation_failed),
    m.FirmwareStatusNotificationRes(),
    m.HeartbeatReq(),
    m.HeartbeatRes(NOW),
    m.MeterValuesReq(m.ConnectorScope(0), 99, [METER]),
    m.MeterValuesRes(),
    m.StartTransactionReq(m.ConnectorScope(1), "TAG0001", NOW, 1520, reservation_id=4),
    m.StartTransactionRes(99, m.IdTagInfo(m.AuthorizationStatus.concurrent_tx)),
    m.StatusNotificationReq(m.ConnectorScope(0), m.Faulted(m.ChargePointErrorCode.ground_failure, "RCD tripped", "E42"),
                            timestamp=NOW, vendor_id="Vendor"),
    m.StatusNotificationRes(),
    m.StopTransactionReq(99, "TAG0001", LATER, 9800, reason=m.StopReason.ev_disconnected, meters=[METER]),
    m.StopTransactionRes(ACCEPTED_TAG),
]

CHARGE_POINT_SAMPLES = [
    m.CancelReservationReq(4),
    m.CancelReservationRes(False),
    m.ChangeAvailabilityReq(m.ChargePointScope(), m.AvailabilityType.inoperative),
    m.ChangeAvailabilityRes(m.AvailabilityStatus.scheduled),
    m.ChangeConfigurationReq("HeartbeatInterval", "600"),
    m.ChangeConfigurationRes(m.ConfigurationStatus.reboot_required),
    m.ClearCacheReq(),
    m.ClearCacheRes(True),
    m.ClearChargingProfileReq(id=7, scope=m.ConnectorScope(0), purpose=m.ChargingProfilePurpose.tx_default_profile,
                              stack_level=1),
    m.ClearChargingProfileRes(m.ClearChargingProfileStatus.unknown),
    m.GetCompositeScheduleReq(m.ConnectorScope(0), timedelta(hours=1), m.ChargingRateUnit.watts),
    m.GetCompositeScheduleRes(m.CompositeScheduleStatus.accepted, m.ConnectorScope(0), NOW, TX_PROFILE.schedule),
    m.GetConfigurationReq(["HeartbeatInterval", "MeterValueSampleInterval"]),
    m.GetConfigurationRes([m.KeyValue("HeartbeatInterval", False, "600"), m.KeyValue("ChargeProfileMaxStackLevel", True)],
                          ["NoSuchKey"]),
    m.GetDiagnosticsReq(DIAGNOSTICS_URI, start_time=NOW, stop_time=LATER, retries=m.Retries(3, timedelta(seconds=30))),
    m.GetDiagnosticsRes("diagnostics-2025-03-01.zip"),
    m.GetLocalListVersionReq(),
    m.GetLocalListVersionRes(m.AuthListSupported(12)),
    m.RemoteStartTransactionReq("TAG0001", m.ConnectorScope(0), TX_PROFILE),
    m.RemoteStartTransactionRes(True),
    m.RemoteStopTransactionReq(99),
    m.RemoteStopTransactionRes(False),
    m.ReserveNowReq(m.ConnectorScope(1), LATER, "TAG0001", 4, parent_id_tag="PARENT01"),
    m.ReserveNowRes(m.ReservationStatus.occupied),
    m.ResetReq(m.ResetType.hard),
    m.ResetRes(True),
    m.SendLocalListReq(m.UpdateType.differential, m.AuthListSupported(13),
                       [m.AuthorisationAdd("TAG0002", ACCEPTED_TAG), m.AuthorisationRemove("TAG0003")]),
    m.SendLocalListRes(m.UpdateStatus(m.UpdateStatusKind.version_mismatch)),
    m.SetChargingProfileReq(m.ChargePointScope(), DAILY_PROFILE),
    m.SetChargingProfileRes(m.ChargingProfileStatus.not_supported),
    m.TriggerMessageReq(m.MessageTrigger(m.TriggerKind.status_notification, m.ConnectorScope(1))),
    m.TriggerMessageRes(m.TriggerMessageStatus.not_implemented),
    m.UnlockConnectorReq(m.ConnectorScope(0)),
    m.UnlockConnectorRes(m.UnlockStatus.unlock_failed),
    m.UpdateFirmwareReq(NOW, FIRMWARE_URI, m.Retries(2)),
    m.UpdateFirmwareRes(),
]

SAMPLES = CENTRAL_SYSTEM_SAMPLES + CHARGE_POINT_SAMPLES
