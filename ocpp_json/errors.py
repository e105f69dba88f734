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

Failures raised while translating between domain messages and wire payloads.

Every failure is deterministic: the same input always fails the same way, so none of these are worth retrying.

>>> err = UnrecognizedEnumValue("Measurand", "Energy.Bogus")
>>> err.field, err.value
('Measurand', 'Energy.Bogus')
>>> str(err)
"Value 'Energy.Bogus' is not valid for Measurand"
>>> isinstance(InvalidAcceptanceStatus("Maybe"), ConversionError)
True
"""
from typing import Any


class ConversionError(Exception):
    pass


class UnrecognizedLiteral(ConversionError):

    def __init__(self, field : str, value : str):
        super().__init__(f"Value {value!r} is not valid for {field}")
        self.field = field
        self.value = value


class UnrecognizedEnumValue(UnrecognizedLiteral):

    @property
    def enumeration(self) -> str:
        return self.field


class UnrecognizedProfileKind(UnrecognizedLiteral):

    def __init__(self, value : str):
        super().__init__("chargingProfileKind", value)


class UnrecognizedTriggerMessage(UnrecognizedLiteral):

    def __init__(self, value : str):
        super().__init__("requestedMessage", value)


class UnrecognizedChargePointStatus(UnrecognizedLiteral):

    def __init__(self, value : str):
        super().__init__("status", value)


class InvalidAcceptanceStatus(ConversionError):

    def __init__(self, value : str):
        super().__init__(f"Did not recognize status {value!r} (expected 'Accepted' or 'Rejected')")
        self.value = value


class InvalidURI(ConversionError):

    def __init__(self, value : str):
        super().__init__(f"Invalid URI {value!r} in OCPP-JSON message")
        self.value = value


class MissingOccupiedReason(ConversionError):

    def __init__(self):
        super().__init__("Occupied status has no occupancy kind, OCPP 1.6 needs one to pick a status name")


class UnsupportedMessageVariant(ConversionError):

    def __init__(self, variant : Any):
        super().__init__(f"Couldn't convert unexpected OCPP message {type(variant).__name__}")
        self.variant = variant


class UnknownAction(ConversionError):

    def __init__(self, action : str):
        super().__init__(f"No OCPP 1.6 payload schema for action {action!r}")
        self.action = action
