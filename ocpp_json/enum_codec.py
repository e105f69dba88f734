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

Bidirectional lookup tables between domain enumerations and the string literals used on the wire.

Tables are plain data: each one lists its (domain value, wire literal) pairs explicitly, nothing is derived from
member names.

>>> from enum import Enum
>>> class Colour(str, Enum):
...     red = 'red'
...     dark_blue = 'dark_blue'
>>> colours = EnumMapping(Colour, [(Colour.red, "Red"), (Colour.dark_blue, "Navy")])
>>> colours.to_wire(Colour.dark_blue)
'Navy'
>>> colours.from_wire("Red")
<Colour.red: 'red'>
>>> colours.from_wire("Blue")
Traceback (most recent call last):
...
ocpp_json.errors.UnrecognizedEnumValue: Value 'Blue' is not valid for Colour
>>> EnumMapping(Colour, [(Colour.red, "Red")])
Traceback (most recent call last):
...
ValueError: Colour table has no wire literal for ['dark_blue']
"""
import logging
from enum import Enum
from logging import getLogger
from types import MappingProxyType
from typing import Generic, TypeVar, Sequence, Iterator, Mapping

from beartype import beartype

from ocpp_json.errors import UnrecognizedEnumValue

logger = getLogger(__name__)

ET = TypeVar("ET", bound=Enum)


class EnumMapping(Generic[ET]):

    def __init__(self, enum_type : type[ET], pairs : Sequence[tuple[ET, str]]):
        self.enum_type = enum_type
        self.name = enum_type.__name__
        self._pairs = tuple(pairs)

        to_wire : dict[ET, str] = {}
        from_wire : dict[str, ET] = {}
        for value, literal in self._pairs:
            if not isinstance(value, enum_type):
                raise TypeError(f"{self.name} table got foreign value {value!r}")
            if value in to_wire:
                raise ValueError(f"{self.name} table maps {value.name} twice")
            if literal in from_wire:
                raise ValueError(f"{self.name} table uses wire literal {literal!r} twice")
            to_wire[value] = literal
            from_wire[literal] = value

        missing = [v.name for v in enum_type if v not in to_wire]
        if missing:
            raise ValueError(f"{self.name} table has no wire literal for {missing}")

        self._to_wire : Mapping[ET, str] = MappingProxyType(to_wire)
        self._from_wire : Mapping[str, ET] = MappingProxyType(from_wire)

    def to_wire(self, value : ET) -> str:
        if not isinstance(value, self.enum_type):
            raise TypeError(f"{value!r} is not a {self.name}")
        return self._to_wire[value]

    def from_wire(self, literal : str) -> ET:
        try:
            return self._from_wire[literal]
        except KeyError:
            logger.debug(f"Rejected wire literal {literal!r} for {self.name}")
            raise UnrecognizedEnumValue(self.name, literal) from None

    @property
    def domain_values(self) -> tuple[ET, ...]:
        return tuple(v for v, _ in self._pairs)

    @property
    def wire_values(self) -> tuple[str, ...]:
        return tuple(s for _, s in self._pairs)

    def __iter__(self) -> Iterator[tuple[ET, str]]:
        return iter(self._pairs)

    def __len__(self) -> int:
        return len(self._pairs)

    def __repr__(self):
        return f"EnumMapping({self.name}, {len(self)} values)"


class EnumRegistry:
    """All enumeration tables of one protocol version, looked up by domain enumeration type."""

    def __init__(self, *tables : EnumMapping):
        by_type = {}
        for table in tables:
            if table.enum_type in by_type:
                raise ValueError(f"Enumeration {table.name} registered twice")
            by_type[table.enum_type] = table
        self._tables : Mapping[type[Enum], EnumMapping] = MappingProxyType(by_type)

    def table(self, enum_type : type[ET]) -> EnumMapping[ET]:
        try:
            return self._tables[enum_type]
        except KeyError:
            raise LookupError(f"No wire table registered for {enum_type.__name__}") from None

    @beartype
    def to_wire(self, value : Enum) -> str:
        return self.table(type(value)).to_wire(value)

    @beartype
    def from_wire(self, enum_type : type[Enum], literal : str) -> Enum:
        return self.table(enum_type).from_wire(literal)

    def __contains__(self, enum_type) -> bool:
        return enum_type in self._tables

    def __iter__(self) -> Iterator[EnumMapping]:
        return iter(self._tables.values())

    def __len__(self) -> int:
        return len(self._tables)
