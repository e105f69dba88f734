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

Decode an OCPP-J 1.6 payload into its domain message and encode it back.

    python ocpp_convert.py BootNotification boot.json
    echo '{"currentTime": "2025-01-01T00:00:00Z"}' | python ocpp_convert.py Heartbeat --response
"""
import json
import logging
import sys

from ocpp_json.v16 import decode, encode
from util import setup_logging, config_from_args
from util.app_configurator import ConvertConfigurator, ConvertConfig

logger = setup_logging(__name__)


def read_payload(config : ConvertConfig) -> dict:
    if config.payload_file is None:
        return json.load(sys.stdin)
    with open(config.payload_file) as f:
        return json.load(f)


def convert(config : ConvertConfig, payload : dict) -> str:
    message = decode(config.action, payload, config.response)
    logger.info(f"Decoded {message!r}")
    return json.dumps(encode(message), indent=config.indent)


def main(argv=None):
    ConvertConfigurator.set_global_config(config_from_args(None if argv is None else tuple(argv)))
    config = ConvertConfigurator.get_global_config()
    logger.setLevel(getattr(logging, config.log_level.upper()))
    print(convert(config, read_payload(config)))


if __name__ == "__main__":
    main()
