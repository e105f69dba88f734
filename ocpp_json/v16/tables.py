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

OCPP 1.6 wire literals for every enumerated field.

>>> to_wire(AuthorizationStatus.id_tag_blocked)
'Blocked'
>>> from_wire(Measurand, "SoC")
<Measurand.soc: 'soc'>
"""
from beartype import beartype

from messages.enums import AuthorizationStatus, RegistrationStatus, ResetType, AvailabilityType, AvailabilityStatus, \
    UnlockStatus, ChargePointErrorCode, OccupancyKind, StopReason, UpdateType, UpdateStatusKind, Measurand, \
    ReadingContext, ValueFormat, Location, UnitOfMeasure, Phase, ChargingRateUnit, ChargingProfilePurpose, \
    RecurrencyKind, ReservationStatus, ConfigurationStatus, FirmwareStatus, DiagnosticsStatus, TriggerKind, \
    TriggerMessageStatus, ChargingProfileStatus, ClearChargingProfileStatus, CompositeScheduleStatus
from ocpp_json.enum_codec import EnumMapping, EnumRegistry, ET

AUTHORIZATION_STATUS = EnumMapping(AuthorizationStatus, [
    (AuthorizationStatus.accepted, "Accepted"),
    (AuthorizationStatus.id_tag_blocked, "Blocked"),
    (AuthorizationStatus.id_tag_expired, "Expired"),
    (AuthorizationStatus.id_tag_invalid, "Invalid"),
    (AuthorizationStatus.concurrent_tx, "ConcurrentTx"),
])

REGISTRATION_STATUS = EnumMapping(RegistrationStatus, [
    (RegistrationStatus.accepted, "Accepted"),
    (RegistrationStatus.pending, "Pending"),
    (RegistrationStatus.rejected, "Rejected"),
])

RESET_TYPE = EnumMapping(ResetType, [
    (ResetType.hard, "Hard"),
    (ResetType.soft, "Soft"),
])

AVAILABILITY_TYPE = EnumMapping(AvailabilityType, [
    (AvailabilityType.operative, "Operative"),
    (AvailabilityType.inoperative, "Inoperative"),
])

AVAILABILITY_STATUS = EnumMapping(AvailabilityStatus, [
    (AvailabilityStatus.accepted, "Accepted"),
    (AvailabilityStatus.rejected, "Rejected"),
    (AvailabilityStatus.scheduled, "Scheduled"),
])

UNLOCK_STATUS = EnumMapping(UnlockStatus, [
    (UnlockStatus.unlocked, "Unlocked"),
    (UnlockStatus.unlock_failed, "UnlockFailed"),
    (UnlockStatus.not_supported, "NotSupported"),
])

CHARGE_POINT_ERROR_CODE = EnumMapping(ChargePointErrorCode, [
    (ChargePointErrorCode.connector_lock_failure, "ConnectorLockFailure"),
    (ChargePointErrorCode.ev_communication_error, "EVCommunicationError"),
    (ChargePointErrorCode.ground_failure, "GroundFailure"),
    (ChargePointErrorCode.high_temperature, "HighTemperature"),
    (ChargePointErrorCode.internal_error, "InternalError"),
    (ChargePointErrorCode.local_list_conflict, "LocalListConflict"),
    (ChargePointErrorCode.other_error, "OtherError"),
    (ChargePointErrorCode.over_current_failure, "OverCurrentFailure"),
    (ChargePointErrorCode.over_voltage, "OverVoltage"),
    (ChargePointErrorCode.power_meter_failure, "PowerMeterFailure"),
    (ChargePointErrorCode.power_switch_failure, "PowerSwitchFailure"),
    (ChargePointErrorCode.reader_failure, "ReaderFailure"),
    (ChargePointErrorCode.reset_failure, "ResetFailure"),
    (ChargePointErrorCode.under_voltage, "UnderVoltage"),
    (ChargePointErrorCode.weak_signal, "WeakSignal"),
])

OCCUPANCY_KIND = EnumMapping(OccupancyKind, [
    (OccupancyKind.preparing, "Preparing"),
    (OccupancyKind.charging, "Charging"),
    (OccupancyKind.suspended_evse, "SuspendedEVSE"),
    (OccupancyKind.suspended_ev, "SuspendedEV"),
    (OccupancyKind.finishing, "Finishing"),
])

STOP_REASON = EnumMapping(StopReason, [
    (StopReason.emergency_stop, "EmergencyStop"),
    (StopReason.ev_disconnected, "EVDisconnected"),
    (StopReason.hard_reset, "HardReset"),
    (StopReason.local, "Local"),
    (StopReason.other, "Other"),
    (StopReason.power_loss, "PowerLoss"),
    (StopReason.reboot, "Reboot"),
    (StopReason.remote, "Remote"),
    (StopReason.soft_reset, "SoftReset"),
    (StopReason.unlock_command, "UnlockCommand"),
    (StopReason.de_authorized, "DeAuthorized"),
])

UPDATE_TYPE = EnumMapping(UpdateType, [
    (UpdateType.differential, "Differential"),
    (UpdateType.full, "Full"),
])

UPDATE_STATUS = EnumMapping(UpdateStatusKind, [
    (UpdateStatusKind.accepted, "Accepted"),
    (UpdateStatusKind.failed, "Failed"),
    (UpdateStatusKind.hash_error, "HashError"),
    (UpdateStatusKind.not_supported, "NotSupported"),
    (UpdateStatusKind.version_mismatch, "VersionMismatch"),
])

MEASURAND = EnumMapping(Measurand, [
    (Measurand.current_export, "Current.Export"),
    (Measurand.current_import, "Current.Import"),
    (Measurand.current_offered, "Current.Offered"),
    (Measurand.energy_active_export_register, "Energy.Active.Export.Register"),
    (Measurand.energy_active_import_register, "Energy.Active.Import.Register"),
    (Measurand.energy_reactive_export_register, "Energy.Reactive.Export.Register"),
    (Measurand.energy_reactive_import_register, "Energy.Reactive.Import.Register"),
    (Measurand.energy_active_export_interval, "Energy.Active.Export.Interval"),
    (Measurand.energy_active_import_interval, "Energy.Active.Import.Interval"),
    (Measurand.energy_reactive_export_interval, "Energy.Reactive.Export.Interval"),
    (Measurand.energy_reactive_import_interval, "Energy.Reactive.Import.Interval"),
    (Measurand.frequency, "Frequency"),
    (Measurand.power_active_export, "Power.Active.Export"),
    (Measurand.power_active_import, "Power.Active.Import"),
    (Measurand.power_factor, "Power.Factor"),
    (Measurand.power_offered, "Power.Offered"),
    (Measurand.power_reactive_export, "Power.Reactive.Export"),
    (Measurand.power_reactive_import, "Power.Reactive.Import"),
    (Measurand.rpm, "RPM"),
    (Measurand.soc, "SoC"),
    (Measurand.temperature, "Temperature"),
    (Measurand.voltage, "Voltage"),
])

READING_CONTEXT = EnumMapping(ReadingContext, [
    (ReadingContext.interruption_begin, "Interruption.Begin"),
    (ReadingContext.interruption_end, "Interruption.End"),
    (ReadingContext.other, "Other"),
    (ReadingContext.sample_clock, "Sample.Clock"),
    (ReadingContext.sample_periodic, "Sample.Periodic"),
    (ReadingContext.transaction_begin, "Transaction.Begin"),
    (ReadingContext.transaction_end, "Transaction.End"),
    (ReadingContext.trigger, "Trigger"),
])

VALUE_FORMAT = EnumMapping(ValueFormat, [
    (ValueFormat.raw, "Raw"),
    (ValueFormat.signed_data, "SignedData"),
])

LOCATION = EnumMapping(Location, [
    (Location.body, "Body"),
    (Location.cable, "Cable"),
    (Location.ev, "EV"),
    (Location.inlet, "Inlet"),
    (Location.outlet, "Outlet"),
])

UNIT_OF_MEASURE = EnumMapping(UnitOfMeasure, [
    (UnitOfMeasure.wh, "Wh"),
    (UnitOfMeasure.kwh, "kWh"),
    (UnitOfMeasure.varh, "varh"),
    (UnitOfMeasure.kvarh, "kvarh"),
    (UnitOfMeasure.w, "W"),
    (UnitOfMeasure.kw, "kW"),
    (UnitOfMeasure.va, "VA"),
    (UnitOfMeasure.kva, "kVA"),
    (UnitOfMeasure.var, "var"),
    (UnitOfMeasure.kvar, "kvar"),
    (UnitOfMeasure.amp, "A"),
    (UnitOfMeasure.volt, "V"),
    (UnitOfMeasure.celsius, "Celsius"),
    (UnitOfMeasure.fahrenheit, "Fahrenheit"),
    (UnitOfMeasure.kelvin, "K"),
    (UnitOfMeasure.percent, "Percent"),
])

PHASE = EnumMapping(Phase, [
    (Phase.l1, "L1"),
    (Phase.l2, "L2"),
    (Phase.l3, "L3"),
    (Phase.n, "N"),
    (Phase.l1_n, "L1-N"),
    (Phase.l2_n, "L2-N"),
    (Phase.l3_n, "L3-N"),
    (Phase.l1_l2, "L1-L2"),
    (Phase.l2_l3, "L2-L3"),
    (Phase.l3_l1, "L3-L1"),
])

CHARGING_RATE_UNIT = EnumMapping(ChargingRateUnit, [
    (ChargingRateUnit.watts, "W"),
    (ChargingRateUnit.amperes, "A"),
])

CHARGING_PROFILE_PURPOSE = EnumMapping(ChargingProfilePurpose, [
    (ChargingProfilePurpose.charge_point_max_profile, "ChargePointMaxProfile"),
    (ChargingProfilePurpose.tx_default_profile, "TxDefaultProfile"),
    (ChargingProfilePurpose.tx_profile, "TxProfile"),
])

RECURRENCY_KIND = EnumMapping(RecurrencyKind, [
    (RecurrencyKind.daily, "Daily"),
    (RecurrencyKind.weekly, "Weekly"),
])

RESERVATION_STATUS = EnumMapping(ReservationStatus, [
    (ReservationStatus.accepted, "Accepted"),
    (ReservationStatus.faulted, "Faulted"),
    (ReservationStatus.occupied, "Occupied"),
    (ReservationStatus.rejected, "Rejected"),
    (ReservationStatus.unavailable, "Unavailable"),
])

CONFIGURATION_STATUS = EnumMapping(ConfigurationStatus, [
    (ConfigurationStatus.accepted, "Accepted"),
    (ConfigurationStatus.rejected, "Rejected"),
    (ConfigurationStatus.reboot_required, "RebootRequired"),
    (ConfigurationStatus.not_supported, "NotSupported"),
])

FIRMWARE_STATUS = EnumMapping(FirmwareStatus, [
    (FirmwareStatus.downloaded, "Downloaded"),
    (FirmwareStatus.download_failed, "DownloadFailed"),
    (FirmwareStatus.downloading, "Downloading"),
    (FirmwareStatus.idle, "Idle"),
    (FirmwareStatus.installation_failed, "InstallationFailed"),
    (FirmwareStatus.installing, "Installing"),
    (FirmwareStatus.installed, "Installed"),
])

DIAGNOSTICS_STATUS = EnumMapping(DiagnosticsStatus, [
    (DiagnosticsStatus.idle, "Idle"),
    (DiagnosticsStatus.uploaded, "Uploaded"),
    (DiagnosticsStatus.upload_failed, "UploadFailed"),
    (DiagnosticsStatus.uploading, "Uploading"),
])

TRIGGER_KIND = EnumMapping(TriggerKind, [
    (TriggerKind.boot_notification, "BootNotification"),
    (TriggerKind.diagnostics_status_notification, "DiagnosticsStatusNotification"),
    (TriggerKind.firmware_status_notification, "FirmwareStatusNotification"),
    (TriggerKind.heartbeat, "Heartbeat"),
    (TriggerKind.meter_values, "MeterValues"),
    (TriggerKind.status_notification, "StatusNotification"),
])

TRIGGER_MESSAGE_STATUS = EnumMapping(TriggerMessageStatus, [
    (TriggerMessageStatus.accepted, "Accepted"),
    (TriggerMessageStatus.rejected, "Rejected"),
    (TriggerMessageStatus.not_implemented, "NotImplemented"),
])

CHARGING_PROFILE_STATUS = EnumMapping(ChargingProfileStatus, [
    (ChargingProfileStatus.accepted, "Accepted"),
    (ChargingProfileStatus.rejected, "Rejected"),
    (ChargingProfileStatus.not_supported, "NotSupported"),
])

CLEAR_CHARGING_PROFILE_STATUS = EnumMapping(ClearChargingProfileStatus, [
    (ClearChargingProfileStatus.accepted, "Accepted"),
    (ClearChargingProfileStatus.unknown, "Unknown"),
])

COMPOSITE_SCHEDULE_STATUS = EnumMapping(CompositeScheduleStatus, [
    (CompositeScheduleStatus.accepted, "Accepted"),
    (CompositeScheduleStatus.rejected, "Rejected"),
])

ENUM_TABLES = EnumRegistry(
    AUTHORIZATION_STATUS,
    REGISTRATION_STATUS,
    RESET_TYPE,
    AVAILABILITY_TYPE,
    AVAILABILITY_STATUS,
    UNLOCK_STATUS,
    CHARGE_POINT_ERROR_CODE,
    OCCUPANCY_KIND,
    STOP_REASON,
    UPDATE_TYPE,
    UPDATE_STATUS,
    MEASURAND,
    READING_CONTEXT,
    VALUE_FORMAT,
    LOCATION,
    UNIT_OF_MEASURE,
    PHASE,
    CHARGING_RATE_UNIT,
    CHARGING_PROFILE_PURPOSE,
    RECURRENCY_KIND,
    RESERVATION_STATUS,
    CONFIGURATION_STATUS,
    FIRMWARE_STATUS,
    DIAGNOSTICS_STATUS,
    TRIGGER_KIND,
    TRIGGER_MESSAGE_STATUS,
    CHARGING_PROFILE_STATUS,
    CLEAR_CHARGING_PROFILE_STATUS,
    COMPOSITE_SCHEDULE_STATUS,
)


def to_wire(value) -> str:
    return ENUM_TABLES.to_wire(value)


@beartype
def from_wire(enum_type : type[ET], literal : str) -> ET:
    return ENUM_TABLES.from_wire(enum_type, literal)
