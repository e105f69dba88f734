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
from enum import Enum


class AuthorizationStatus(str, Enum):
    accepted = 'accepted'
    id_tag_blocked = 'id_tag_blocked'
    id_tag_expired = 'id_tag_expired'
    id_tag_invalid = 'id_tag_invalid'
    concurrent_tx = 'concurrent_tx'


class RegistrationStatus(str, Enum):
    accepted = 'accepted'
    pending = 'pending'
    rejected = 'rejected'


class ResetType(str, Enum):
    hard = 'hard'
    soft = 'soft'


class AvailabilityType(str, Enum):
    operative = 'operative'
    inoperative = 'inoperative'


class AvailabilityStatus(str, Enum):
    accepted = 'accepted'
    rejected = 'rejected'
    scheduled = 'scheduled'


class UnlockStatus(str, Enum):
    unlocked = 'unlocked'
    unlock_failed = 'unlock_failed'
    not_supported = 'not_supported'


class ChargePointErrorCode(str, Enum):
    """Explicit fault causes. "No error" is not a member, it is the absence of a code."""
    connector_lock_failure = 'connector_lock_failure'
    ev_communication_error = 'ev_communication_error'
    ground_failure = 'ground_failure'
    high_temperature = 'high_temperature'
    internal_error = 'internal_error'
    local_list_conflict = 'local_list_conflict'
    other_error = 'other_error'
    over_current_failure = 'over_current_failure'
    over_voltage = 'over_voltage'
    power_meter_failure = 'power_meter_failure'
    power_switch_failure = 'power_switch_failure'
    reader_failure = 'reader_failure'
    reset_failure = 'reset_failure'
    under_voltage = 'under_voltage'
    weak_signal = 'weak_signal'


class OccupancyKind(str, Enum):
    preparing = 'preparing'
    charging = 'charging'
    suspended_evse = 'suspended_evse'
    suspended_ev = 'suspended_ev'
    finishing = 'finishing'


class StopReason(str, Enum):
    emergency_stop = 'emergency_stop'
    ev_disconnected = 'ev_disconnected'
    hard_reset = 'hard_reset'
    local = 'local'
    other = 'other'
    power_loss = 'power_loss'
    reboot = 'reboot'
    remote = 'remote'
    soft_reset = 'soft_reset'
    unlock_command = 'unlock_command'
    de_authorized = 'de_authorized'


class UpdateType(str, Enum):
    differential = 'differential'
    full = 'full'


class UpdateStatusKind(str, Enum):
    accepted = 'accepted'
    failed = 'failed'
    hash_error = 'hash_error'
    not_supported = 'not_supported'
    version_mismatch = 'version_mismatch'


class Measurand(str, Enum):
    current_export = 'current_export'
    current_import = 'current_import'
    current_offered = 'current_offered'
    energy_active_export_register = 'energy_active_export_register'
    energy_active_import_register = 'energy_active_import_register'
    energy_reactive_export_register = 'energy_reactive_export_register'
    energy_reactive_import_register = 'energy_reactive_import_register'
    energy_active_export_interval = 'energy_active_export_interval'
    energy_active_import_interval = 'energy_active_import_interval'
    energy_reactive_export_interval = 'energy_reactive_export_interval'
    energy_reactive_import_interval = 'energy_reactive_import_interval'
    frequency = 'frequency'
    power_active_export = 'power_active_export'
    power_active_import = 'power_active_import'
    power_factor = 'power_factor'
    power_offered = 'power_offered'
    power_reactive_export = 'power_reactive_export'
    power_reactive_import = 'power_reactive_import'
    rpm = 'rpm'
    soc = 'soc'
    temperature = 'temperature'
    voltage = 'voltage'


class ReadingContext(str, Enum):
    interruption_begin = 'interruption_begin'
    interruption_end = 'interruption_end'
    other = 'other'
    sample_clock = 'sample_clock'
    sample_periodic = 'sample_periodic'
    transaction_begin = 'transaction_begin'
    transaction_end = 'transaction_end'
    trigger = 'trigger'


class ValueFormat(str, Enum):
    raw = 'raw'
    signed_data = 'signed_data'


class Location(str, Enum):
    body = 'body'
    cable = 'cable'
    ev = 'ev'
    inlet = 'inlet'
    outlet = 'outlet'


class UnitOfMeasure(str, Enum):
    wh = 'wh'
    kwh = 'kwh'
    varh = 'varh'
    kvarh = 'kvarh'
    w = 'w'
    kw = 'kw'
    va = 'va'
    kva = 'kva'
    var = 'var'
    kvar = 'kvar'
    amp = 'amp'
    volt = 'volt'
    celsius = 'celsius'
    fahrenheit = 'fahrenheit'
    kelvin = 'kelvin'
    percent = 'percent'


class Phase(str, Enum):
    l1 = 'l1'
    l2 = 'l2'
    l3 = 'l3'
    n = 'n'
    l1_n = 'l1_n'
    l2_n = 'l2_n'
    l3_n = 'l3_n'
    l1_l2 = 'l1_l2'
    l2_l3 = 'l2_l3'
    l3_l1 = 'l3_l1'


class ChargingRateUnit(str, Enum):
    watts = 'watts'
    amperes = 'amperes'


class ChargingProfilePurpose(str, Enum):
    charge_point_max_profile = 'charge_point_max_profile'
    tx_default_profile = 'tx_default_profile'
    tx_profile = 'tx_profile'


class RecurrencyKind(str, Enum):
    daily = 'daily'
    weekly = 'weekly'


class ReservationStatus(str, Enum):
    accepted = 'accepted'
    faulted = 'faulted'
    occupied = 'occupied'
    rejected = 'rejected'
    unavailable = 'unavailable'


class ConfigurationStatus(str, Enum):
    accepted = 'accepted'
    rejected = 'rejected'
    reboot_required = 'reboot_required'
    not_supported = 'not_supported'


class FirmwareStatus(str, Enum):
    downloaded = 'downloaded'
    download_failed = 'download_failed'
    downloading = 'downloading'
    idle = 'idle'
    installation_failed = 'installation_failed'
    installing = 'installing'
    installed = 'installed'


class DiagnosticsStatus(str, Enum):
    idle = 'idle'
    uploaded = 'uploaded'
    upload_failed = 'upload_failed'
    uploading = 'uploading'


class TriggerKind(str, Enum):
    boot_notification = 'boot_notification'
    diagnostics_status_notification = 'diagnostics_status_notification'
    firmware_status_notification = 'firmware_status_notification'
    heartbeat = 'heartbeat'
    meter_values = 'meter_values'
    status_notification = 'status_notification'


class TriggerMessageStatus(str, Enum):
    accepted = 'accepted'
    rejected = 'rejected'
    not_implemented = 'not_implemented'


class ChargingProfileStatus(str, Enum):
    accepted = 'accepted'
    rejected = 'rejected'
    not_supported = 'not_supported'


class ClearChargingProfileStatus(str, Enum):
    accepted = 'accepted'
    unknown = 'unknown'


class CompositeScheduleStatus(str, Enum):
    accepted = 'accepted'
    rejected = 'rejected'


class DataTransferStatus(str, Enum):
    accepted = 'accepted'
    rejected = 'rejected'
    unknown_message_id = 'unknown_message_id'
    unknown_vendor_id = 'unknown_vendor_id'
