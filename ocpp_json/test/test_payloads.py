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
import asyncio
import dataclasses
import json

import pytest
from ocpp.v16 import call, call_result
from ocpp.v16.enums import Action
from pydantic import ValidationError

import messages as m
from ocpp_json.errors import UnknownAction
from ocpp_json.test.samples import SAMPLES
from ocpp_json.v16 import parse_payload, dump_payload, to_ocpp_payload, from_ocpp_payload, decode, encode, \
    to_v16, with_domain_message
from ocpp_models import v16


@pytest.mark.parametrize("message", SAMPLES, ids=lambda s: type(s).__name__)
def test_json_round_trip(message):
    wire = to_v16(message)
    payload = json.loads(json.dumps(encode(message)))
    assert decode(wire.action, payload, wire.is_response) == message


def test_parse_by_action_and_direction():
    request = parse_payload(Action.heartbeat, {})
    response = parse_payload(Action.heartbeat, {"currentTime": "2025-03-01T12:00:00Z"}, response=True)
    assert isinstance(request, v16.HeartbeatRequest)
    assert isinstance(response, v16.HeartbeatResponse)


def test_snake_case_payload_is_accepted():
    wire = parse_payload(Action.start_transaction, {"connector_id": 2, "id_tag": "TAG1", "meter_start": 10,
                                                    "timestamp": "2025-03-01T12:00:00Z"})
    assert wire.connectorId == 2
    assert wire.idTag == "TAG1"


def test_schema_spelling_of_local_list():
    wire = parse_payload(Action.send_local_list, {"updateType": "Full", "listVersion": 1,
                                                  "localAuthorizationList": [{"idTag": "TAG1"}]})
    assert wire.localAuthorisationList[0].idTag == "TAG1"


def test_wrong_shape_is_a_validation_error():
    with pytest.raises(ValidationError):
        parse_payload(Action.reset, {"type": "Soft", "when": "now"})
    with pytest.raises(ValidationError):
        parse_payload(Action.authorize, {"idTag": "X" * 21})


def test_dump_omits_absent_fields():
    assert dump_payload(v16.StopTransactionResponse()) == {}
    assert dump_payload(v16.StopTransactionRequest(transactionId=1, meterStop=2,
                                                   timestamp="2025-03-01T12:00:00Z")) == {
        "transactionId": 1, "meterStop": 2, "timestamp": "2025-03-01T12:00:00Z"}


def test_to_ocpp_payload():
    payload = to_ocpp_payload(v16.ResetRequest(type="Hard"))
    assert isinstance(payload, call.Reset)
    assert payload.type == "Hard"
    result = to_ocpp_payload(v16.GetLocalListVersionResponse(listVersion=-1))
    assert isinstance(result, call_result.GetLocalListVersion)
    assert result.list_version == -1


def test_to_ocpp_payload_local_list_spelling():
    payload = to_ocpp_payload(to_v16(m.SendLocalListReq(m.UpdateType.full, m.AuthListSupported(2),
                                                        [m.AuthorisationRemove("TAG1")])))
    assert payload.list_version == 2
    assert len(payload.local_authorization_list) == 1


def test_from_ocpp_payload():
    wire = from_ocpp_payload(call.Reset(type="Soft"))
    assert wire == v16.ResetRequest(type="Soft")
    wire = from_ocpp_payload(call_result.Heartbeat(current_time="2025-03-01T12:00:00Z"))
    assert isinstance(wire, v16.HeartbeatResponse)


def test_from_ocpp_payload_unknown_action():

    @dataclasses.dataclass
    class NotAnAction:
        value : int = 0

    with pytest.raises(UnknownAction):
        from_ocpp_payload(NotAnAction())


def test_handler_receives_domain_message():

    class Handler:

        def __init__(self):
            self.received = None

        @with_domain_message(Action.authorize)
        async def on_authorize(self, message):
            self.received = message
            return m.AuthorizeRes(m.IdTagInfo(m.AuthorizationStatus.id_tag_invalid))

    handler = Handler()
    result = asyncio.run(handler.on_authorize(id_tag="TAG1"))
    assert handler.received == m.AuthorizeReq("TAG1")
    assert isinstance(result, call_result.Authorize)
    assert result.id_tag_info["status"] == "Invalid"
