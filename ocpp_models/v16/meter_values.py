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

>>> import json
>>> from camel_converter import dict_to_camel
>>> data='{"connector_id": 1, "transaction_id": 282683992, "meter_value": [{"timestamp": "2025-11-26T13:20:51.934Z", "sampled_value": [{"unit": "Wh", "value": "0", "location": "Outlet", "measurand": "Energy.Active.Import.Register"}, {"unit": "Percent", "value": "19.5444", "location": "EV", "measurand": "SoC"}]}]}'
>>> jdata = dict_to_camel(json.loads(data))
>>> jdata
{'connectorId': 1, 'transactionId': 282683992, 'meterValue': [{'timestamp': '2025-11-26T13:20:51.934Z', 'sampledValue': [{'unit': 'Wh', 'value': '0', 'location': 'Outlet', 'measurand': 'Energy.Active.Import.Register'}, {'unit': 'Percent', 'value': '19.5444', 'location': 'EV', 'measurand': 'SoC'}]}]}
>>> rq = MeterValuesRequest.model_validate(jdata)
>>> [v.measurand for v in rq.meterValue[0].sampledValue]
['Energy.Active.Import.Register', 'SoC']
>>> rq.meterValue[0].sampledValue[1].context is None
True

Some chargers send the sampled value as a JSON number, which the schema does not allow:

>>> from pydantic import ValidationError
>>> data='{"connector_id": 1, "transaction_id": 282683992, "meter_value": [{"timestamp": "2025-11-26T13:20:51.934Z", "sampled_value": [{"unit": "Wh", "value": 0, "location": "Outlet", "measurand": "Energy.Active.Import.Register"}, {"unit": "Percent", "value": 19.5444, "location": "EV", "measurand": "SoC"}]}]}'
>>> try:
...     MeterValuesRequest.model_validate(dict_to_camel(json.loads(data)))
... except ValidationError as e:
...     sorted({err["loc"][-1] for err in e.errors()})
['value']
"""
from typing import Optional

from ocpp.v16.enums import Action

from ocpp_models.v16.base_types import WireRequest, WireResponse
from ocpp_models.v16.composite_types import MeterValue


class MeterValuesRequest(WireRequest):
    action = Action.meter_values
    connectorId : int
    transactionId : Optional[int] = None
    meterValue : list[MeterValue]


class MeterValuesResponse(WireResponse):
    action = Action.meter_values
