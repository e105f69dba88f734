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

Generic JSON payloads and ``ocpp`` package payload dataclasses to and from domain messages.

>>> from ocpp.v16.enums import Action
>>> decode(Action.heartbeat, {"currentTime": "2025-03-01T12:00:00Z"}, response=True).current_time.isoformat()
'2025-03-01T12:00:00+00:00'
>>> encode(decode(Action.reset, {"type": "Soft"}))
{'type': 'Soft'}
"""
import dataclasses
import json
from functools import wraps
from logging import getLogger
from typing import Any

from beartype import beartype
from camel_converter import dict_to_camel, dict_to_snake
from ocpp.v16 import call, call_result
from ocpp.v16.enums import Action

from ocpp_json.errors import UnknownAction
from ocpp_json.v16.converters import to_v16, from_v16
from ocpp_models.v16 import WireMessage, REQUEST_MODELS, RESPONSE_MODELS

logger = getLogger(__name__)

# Field names whose spelling differs between the 1.6 JSON and the ``ocpp`` package
_OCPP_FIELD_NAMES = {
    "local_authorisation_list": "local_authorization_list",
}


def wire_model_for(action : Action, response : bool = False) -> type[WireMessage]:
    models = RESPONSE_MODELS if response else REQUEST_MODELS
    try:
        return models[action]
    except KeyError:
        logger.debug(f"No wire model for {action!r} ({response=})")
        raise UnknownAction(action) from None


@beartype
def parse_payload(action : Action, payload : dict[str, Any], response : bool = False) -> WireMessage:
    """
    Validate a JSON object into the wire model of ``action``.

    Payloads handed over by ``ocpp`` handlers in snake_case are camelised first.
    """
    if any("_" in key for key in payload):
        payload = dict_to_camel(payload)
    return wire_model_for(action, response).model_validate(payload)


@beartype
def dump_payload(wire : WireMessage) -> dict[str, Any]:
    return wire.model_dump(mode="json", exclude_none=True)


def _ocpp_payload_class(action : Action, response : bool):
    module = call_result if response else call
    payload_class = getattr(module, action.value, None)
    if payload_class is None:
        raise UnknownAction(action)
    return payload_class


@beartype
def to_ocpp_payload(wire : WireMessage):
    """Build the ``ocpp.v16.call`` / ``ocpp.v16.call_result`` payload for a wire model."""
    payload_class = _ocpp_payload_class(wire.action, wire.is_response)
    kwargs = dict_to_snake(dump_payload(wire))
    return payload_class(**{_OCPP_FIELD_NAMES.get(k, k): v for k, v in kwargs.items()})


def from_ocpp_payload(payload) -> WireMessage:
    """Inverse of :func:`to_ocpp_payload`; the action is taken from the payload class name."""
    response = type(payload).__module__ == call_result.__name__
    try:
        action = Action(type(payload).__name__)
    except ValueError:
        raise UnknownAction(type(payload).__name__) from None
    # the json round trip normalises nested dataclasses and enum members to plain JSON values
    fields = json.loads(json.dumps(dataclasses.asdict(payload), default=str))
    return parse_payload(action, {k: v for k, v in fields.items() if v is not None}, response)


def decode(action : Action, payload : dict[str, Any], response : bool = False):
    return from_v16(parse_payload(action, payload, response))


def encode(message) -> dict[str, Any]:
    return dump_payload(to_v16(message))


def with_domain_message(action : Action, response : bool = False):
    """
    Decorate an ``ocpp`` handler so that it receives a domain message and answers with one.

    The handler result is converted back into the matching ``ocpp`` payload dataclass.
    """
    def get_wrapper(f):
        @wraps(f)
        async def wrapper(self, **kwargs):
            message = decode(action, kwargs, response)
            logger.debug(f"{f.__name__} received {message!r}")
            result = await f(self, message)
            return to_ocpp_payload(to_v16(result))
        return wrapper

    return get_wrapper
