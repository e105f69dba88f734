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
import json

import pytest
from ocpp.v16.enums import Action

import ocpp_convert
from util import config_from_args, setup_logging
from util.app_configurator import ConvertConfig, ConvertConfigurator, ConfigNotReadyException, \
    ConfigRedefinedException


@pytest.fixture
def clean_config():
    ConvertConfigurator.clear_global_config()
    yield
    ConvertConfigurator.clear_global_config()


def test_config_from_args():
    config = config_from_args(("BootNotification", "boot.json", "--indent", "0"))
    assert config.action is Action.boot_notification
    assert config.payload_file == "boot.json"
    assert config.indent == 0
    assert config.response is False


def test_config_rejects_unknown_action():
    with pytest.raises(ValueError):
        config_from_args(("Teleport",))


def test_global_config_is_set_once(clean_config):
    with pytest.raises(ConfigNotReadyException):
        ConvertConfigurator.get_global_config()
    ConvertConfigurator.set_global_config(ConvertConfig(action=Action.heartbeat))
    with pytest.raises(ConfigRedefinedException):
        ConvertConfigurator.set_global_config(ConvertConfig(action=Action.reset))


def test_convert_normalises_payload():
    config = ConvertConfig(action=Action.meter_values, indent=0)
    payload = {"connectorId": 1, "meterValue": [{"timestamp": "2025-03-01T12:00:00Z",
                                                 "sampledValue": [{"value": "10", "unit": "Wh"}]}]}
    assert json.loads(ocpp_convert.convert(config, payload)) == {
        "connectorId": 1, "meterValue": [{"timestamp": "2025-03-01T12:00:00Z", "sampledValue": [{"value": "10"}]}]}


def test_main_reads_file(tmp_path, capsys, clean_config):
    source = tmp_path / "reset.json"
    source.write_text('{"status": "Accepted"}')
    ocpp_convert.main(["Reset", str(source), "--response"])
    assert json.loads(capsys.readouterr().out) == {"status": "Accepted"}


def test_setup_logging_returns_named_logger():
    assert setup_logging("ocpp_json.test").name == "ocpp_json.test"
