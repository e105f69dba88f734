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

OCPP-J 1.6 payload schemas, one module per action.
"""
from ocpp.v16.enums import Action

from ocpp_models.v16.base_types import WireMessage, WireRequest, WireResponse
from ocpp_models.v16.authorize import AuthorizeRequest, AuthorizeResponse
from ocpp_models.v16.boot_notification import BootNotificationRequest, BootNotificationResponse
from ocpp_models.v16.cancel_reservation import CancelReservationRequest, CancelReservationResponse
from ocpp_models.v16.change_availability import ChangeAvailabilityRequest, ChangeAvailabilityResponse
from ocpp_models.v16.change_configuration import ChangeConfigurationRequest, ChangeConfigurationResponse
from ocpp_models.v16.clear_cache import ClearCacheRequest, ClearCacheResponse
from ocpp_models.v16.clear_charging_profile import ClearChargingProfileRequest, ClearChargingProfileResponse
from ocpp_models.v16.data_transfer import DataTransferRequest, DataTransferResponse
from ocpp_models.v16.diagnostics_status_notification import DiagnosticsStatusNotificationRequest, \
    DiagnosticsStatusNotificationResponse
from ocpp_models.v16.firmware_status_notification import FirmwareStatusNotificationRequest, \
    FirmwareStatusNotificationResponse
from ocpp_models.v16.get_composite_schedule import GetCompositeScheduleRequest, GetCompositeScheduleResponse
from ocpp_models.v16.get_configuration import GetConfigurationRequest, GetConfigurationResponse
from ocpp_models.v16.get_diagnostics import GetDiagnosticsRequest, GetDiagnosticsResponse
from ocpp_models.v16.get_local_list_version import GetLocalListVersionRequest, GetLocalListVersionResponse
from ocpp_models.v16.heartbeat import HeartbeatRequest, HeartbeatResponse
from ocpp_models.v16.meter_values import MeterValuesRequest, MeterValuesResponse
from ocpp_models.v16.remote_start_transaction import RemoteStartTransactionRequest, RemoteStartTransactionResponse
from ocpp_models.v16.remote_stop_transaction import RemoteStopTransactionRequest, RemoteStopTransactionResponse
from ocpp_models.v16.reserve_now import ReserveNowRequest, ReserveNowResponse
from ocpp_models.v16.reset import ResetRequest, ResetResponse
from ocpp_models.v16.send_local_list import SendLocalListRequest, SendLocalListResponse
from ocpp_models.v16.set_charging_profile import SetChargingProfileRequest, SetChargingProfileResponse
from ocpp_models.v16.start_transaction import StartTransactionRequest, StartTransactionResponse
from ocpp_models.v16.status_notification import StatusNotificationRequest, StatusNotificationResponse
from ocpp_models.v16.stop_transaction import StopTransactionRequest, StopTransactionResponse
from ocpp_models.v16.trigger_message import TriggerMessageRequest, TriggerMessageResponse
from ocpp_models.v16.unlock_connector import UnlockConnectorRequest, UnlockConnectorResponse
from ocpp_models.v16.update_firmware import UpdateFirmwareRequest, UpdateFirmwareResponse

MODEL_PAIRS : tuple[tuple[type[WireRequest], type[WireResponse]], ...] = (
    (AuthorizeRequest, AuthorizeResponse),
    (BootNotificationRequest, BootNotificationResponse),
    (CancelReservationRequest, CancelReservationResponse),
    (ChangeAvailabilityRequest, ChangeAvailabilityResponse),
    (ChangeConfigurationRequest, ChangeConfigurationResponse),
    (ClearCacheRequest, ClearCacheResponse),
    (ClearChargingProfileRequest, ClearChargingProfileResponse),
    (DataTransferRequest, DataTransferResponse),
    (DiagnosticsStatusNotificationRequest, DiagnosticsStatusNotificationResponse),
    (FirmwareStatusNotificationRequest, FirmwareStatusNotificationResponse),
    (GetCompositeScheduleRequest, GetCompositeScheduleResponse),
    (GetConfigurationRequest, GetConfigurationResponse),
    (GetDiagnosticsRequest, GetDiagnosticsResponse),
    (GetLocalListVersionRequest, GetLocalListVersionResponse),
    (HeartbeatRequest, HeartbeatResponse),
    (MeterValuesRequest, MeterValuesResponse),
    (RemoteStartTransactionRequest, RemoteStartTransactionResponse),
    (RemoteStopTransactionRequest, RemoteStopTransactionResponse),
    (ReserveNowRequest, ReserveNowResponse),
    (ResetRequest, ResetResponse),
    (SendLocalListRequest, SendLocalListResponse),
    (SetChargingProfileRequest, SetChargingProfileResponse),
    (StartTransactionRequest, StartTransactionResponse),
    (StatusNotificationRequest, StatusNotificationResponse),
    (StopTransactionRequest, StopTransactionResponse),
    (TriggerMessageRequest, TriggerMessageResponse),
    (UnlockConnectorRequest, UnlockConnectorResponse),
    (UpdateFirmwareRequest, UpdateFirmwareResponse),
)

REQUEST_MODELS : dict[Action, type[WireRequest]] = {rq.action: rq for rq, _ in MODEL_PAIRS}
RESPONSE_MODELS : dict[Action, type[WireResponse]] = {rs.action: rs for _, rs in MODEL_PAIRS}
