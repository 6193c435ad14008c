from __future__ import annotations

import copy
from typing import Any, Callable, Dict, List, Mapping, Optional

from config.credentials import CredentialStore
from nodes.errors import NodeOperationError

_MISSING = object()

Transport = Callable[[str, Dict[str, Any], Dict[str, Any]], Any]


class NodeExecutionContext:
    """
    What the host hands a node for one run:
    - the input items (each a {"json": {...}} record, read-only here)
    - resolved parameter values; a callable value is evaluated per item against item["json"]
    - the transport bound to the node's credentials
    """

    def __init__(
        self,
        items: List[Dict[str, Any]],
        parameters: Mapping[str, Any],
        transport: Transport,
        credentials: Optional[CredentialStore] = None,
        defaults: Optional[Mapping[str, Any]] = None,
    ):
        self._items = list(items)
        self._parameters = dict(parameters)
        self._transport = transport
        self._credentials = credentials or CredentialStore()
        self._defaults = dict(defaults or {})

    def get_input_data(self) -> List[Dict[str, Any]]:
        return self._items

    def get_node_parameter(self, name: str, index: int, default: Any = _MISSING) -> Any:
        value = self._parameters.get(name, _MISSING)
        if value is _MISSING:
            if default is not _MISSING:
                return default
            if name in self._defaults:
                return copy.deepcopy(self._defaults[name])
            raise NodeOperationError(f'Could not get parameter "{name}"')
        if callable(value):
            item = self._items[index] if index < len(self._items) else {}
            return value(item.get("json") or {})
        return value

    def get_credentials(self, name: str) -> Dict[str, Any]:
        return self._credentials.get(name)

    def api_request(self, method: str, body: Dict[str, Any], qs: Dict[str, Any]) -> Any:
        return self._transport(method, body, qs)


def return_json_array(data: List[Any]) -> List[Dict[str, Any]]:
    out: List[Dict[str, Any]] = []
    for entry in data:
        if isinstance(entry, list):
            out.extend({"json": e} for e in entry)
        else:
            out.append({"json": entry})
    return out
