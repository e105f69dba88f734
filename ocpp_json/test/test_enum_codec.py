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

import pytest
from ocpp.v16 import enums as ocpp_enums

import messages.enums as domain_enums
from ocpp_json.enum_codec import EnumMapping, EnumRegistry
from ocpp_json.errors import UnrecognizedEnumValue
from ocpp_json.v16 import tables
from ocpp_json.v16.tables import ENUM_TABLES, to_wire, from_wire


class Fruit(str, Enum):
    apple = 'apple'
    pear = 'pear'


# Enumerations that only appear in payloads this codec rejects
UNTABLED = {domain_enums.DataTransferStatus}


def test_every_domain_enumeration_has_a_table():
    enumerations = [v for v in vars(domain_enums).values()
                    if isinstance(v, type) and issubclass(v, Enum) and v.__module__ == domain_enums.__name__]
    missing = [e.__name__ for e in enumerations if e not in ENUM_TABLES and e not in UNTABLED]
    assert missing == []


@pytest.mark.parametrize("table", list(ENUM_TABLES), ids=repr)
def test_tables_are_total_and_injective(table):
    assert set(table.domain_values) == set(table.enum_type)
    assert len(set(table.wire_values)) == len(table)
    for value in table.enum_type:
        assert table.from_wire(table.to_wire(value)) is value


def test_authorization_status_literals_are_decoupled_from_names():
    assert to_wire(domain_enums.AuthorizationStatus.id_tag_blocked) == "Blocked"
    assert to_wire(domain_enums.AuthorizationStatus.concurrent_tx) == "ConcurrentTx"
    assert from_wire(domain_enums.AuthorizationStatus, "Expired") is domain_enums.AuthorizationStatus.id_tag_expired


def test_unknown_literal_is_rejected():
    with pytest.raises(UnrecognizedEnumValue) as exc_info:
        from_wire(domain_enums.ChargePointErrorCode, "NotARealCode")
    assert exc_info.value.value == "NotARealCode"
    assert exc_info.value.enumeration == "ChargePointErrorCode"


def test_literals_are_case_sensitive():
    with pytest.raises(UnrecognizedEnumValue):
        from_wire(domain_enums.ResetType, "soft")


@pytest.mark.parametrize("table, library_enum", [
    (tables.REGISTRATION_STATUS, ocpp_enums.RegistrationStatus),
    (tables.AUTHORIZATION_STATUS, ocpp_enums.AuthorizationStatus),
    (tables.MEASURAND, ocpp_enums.Measurand),
    (tables.READING_CONTEXT, ocpp_enums.ReadingContext),
    (tables.LOCATION, ocpp_enums.Location),
    (tables.RESET_TYPE, ocpp_enums.ResetType),
    (tables.AVAILABILITY_TYPE, ocpp_enums.AvailabilityType),
    (tables.CHARGE_POINT_ERROR_CODE, ocpp_enums.ChargePointErrorCode),
])
def test_literals_agree_with_ocpp_package(table, library_enum):
    assert set(table.wire_values) <= {e.value for e in library_enum}


def test_incomplete_table_is_refused():
    with pytest.raises(ValueError):
        EnumMapping(Fruit, [(Fruit.apple, "Apple")])


def test_duplicate_literal_is_refused():
    with pytest.raises(ValueError):
        EnumMapping(Fruit, [(Fruit.apple, "Fruit"), (Fruit.pear, "Fruit")])


def test_registry_lookup():
    fruits = EnumMapping(Fruit, [(Fruit.apple, "Apple"), (Fruit.pear, "Pear")])
    registry = EnumRegistry(fruits)
    assert Fruit in registry
    assert registry.to_wire(Fruit.pear) == "Pear"
    assert registry.from_wire(Fruit, "Apple") is Fruit.apple
    with pytest.raises(LookupError):
        registry.table(domain_enums.ResetType)
    with pytest.raises(ValueError):
        EnumRegistry(fruits, fruits)
