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

Logging and command line helpers shared by the command line tools.
"""
import logging
from argparse import ArgumentParser
from logging import getLogger
from typing import Optional

from beartype import beartype
from cachetools import cached

from util.app_configurator import ConvertConfig


def setup_logging(name, level=logging.DEBUG):
    formatter = logging.Formatter('%(asctime)s - %(name)s - %(levelname)s - %(message)s')

    l2 = getLogger(name)
    assert l2 is not None
    logger: logging.Logger = l2
    logger.setLevel(level)
    lr: logging.Handler | None = logging.lastResort
    assert lr is not None
    lr.setFormatter(formatter)
    lr.setLevel(level)
    return logger


@cached(cache={})
def get_app_args(argv : Optional[tuple[str, ...]] = None):
    argparse = ArgumentParser(description="Convert OCPP-J 1.6 payloads through the domain message codec.", epilog="""
    Copyright (C) 2025 Lappeenrannan-Lahden teknillinen yliopisto LUT
    Author: Aleksei Romanenko <aleksei.romanenko@lut.fi>

    Funded by the European Union and UKRI. Views and opinions expressed are however those of the author(s) only and do 
    not necessarily reflect those of the European Union, CINEA or UKRI. Neither the European Union nor the granting authority 
    can be held responsible for them.""")
    argparse.add_argument("action", type=str, help="OCPP action name, e.g. BootNotification.")
    argparse.add_argument("payload_file", type=str, nargs="?", default=None,
                          help="JSON file with the payload. Reads standard input when omitted.")
    argparse.add_argument("--response", action="store_true", help="Payload is a CALLRESULT payload.")
    argparse.add_argument("--indent", type=int, help="Indentation of the printed JSON.", default=2)
    argparse.add_argument("--log_level", type=str, help="Logging level.", default="WARNING")
    return argparse.parse_args(argv)


@beartype
def config_from_args(argv : Optional[tuple[str, ...]] = None) -> ConvertConfig:
    return ConvertConfig.model_validate(vars(get_app_args(argv)))
