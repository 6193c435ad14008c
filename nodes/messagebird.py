from __future__ import annotations

import logging
import math
import os
import re
from typing import Any, Dict, List, Mapping, Optional, Tuple, Union

from models.schema import OPERATION_SEND, RESOURCE_SMS
from nodes.errors import UnknownOperationError, UnknownResourceError
from nodes.execution import NodeExecutionContext, return_json_array
from nodes.fields import field_defaults
from nodes.messagebird_description import NODE_DESCRIPTION, PROPERTIES, describe
from ops.metrics import Timer
from utils.redact import dest_hint, recipients_hint

log = logging.getLogger("messagebird.node")

# (additionalFields key, body key); iterated in this order
OPTIONAL_BODY_FIELDS: Tuple[Tuple[str, str], ...] = (
    ("groupIds", "groupIds"),
    ("type", "type"),
    ("reference", "reference"),
    ("reportUrl", "reportUrl"),
    ("validity", "validity"),
    ("gateway", "gateway"),
    ("typeDetails", "typeDetails"),
    ("datacoding", "datacoding"),
    ("mclass", "mclass"),
    ("scheduledDatetime", "scheduledDatetime"),
    ("createdDatetime", "createdDatetime"),
)

_LEADING_INT = re.compile(r"^\s*([+-]?[0-9]+)")


def _parse_int(token: str) -> Union[int, float]:
    m = _LEADING_INT.match(token)
    if not m:
        return math.nan
    return int(m.group(1), 10)


def parse_recipients(value: Any) -> List[Any]:
    """
    "123,456" -> [123, 456]. Leading whitespace is skipped and trailing noise after
    the digits is ignored ("123 ", " 456x" both parse). A token without leading
    digits becomes NaN; it is logged, not raised.
    """
    out: List[Any] = []
    for token in str(value if value is not None else "").split(","):
        n = _parse_int(token)
        if isinstance(n, float):
            log.warning(
                "recipient_token_invalid",
                extra={"extra": {"event": "recipient_token_invalid", "token_hint": dest_hint(token)}},
            )
        out.append(n)
    return out


def _present(v: Any) -> bool:
    # Truthy values, plus numeric 0 (mclass 0 = flash message). False, "", [] and {} are dropped.
    if isinstance(v, bool):
        return v
    return bool(v) or (isinstance(v, (int, float)) and v == 0)


def build_send_body(
    originator: str,
    message: str,
    recipients: Any,
    additional_fields: Optional[Mapping[str, Any]] = None,
) -> Dict[str, Any]:
    body: Dict[str, Any] = {
        "recipients": [],
        "originator": originator,
        "body": message,
    }
    extra = additional_fields or {}
    for source, target in OPTIONAL_BODY_FIELDS:
        v = extra.get(source)
        if _present(v):
            body[target] = v
    body["recipients"] = parse_recipients(recipients)
    return body


class MessageBirdNode:
    description = NODE_DESCRIPTION
    properties = PROPERTIES

    @staticmethod
    def describe() -> Dict[str, Any]:
        return describe()

    @staticmethod
    def defaults() -> Dict[str, Any]:
        return field_defaults(PROPERTIES)

    def execute(self, ctx: NodeExecutionContext) -> List[List[Dict[str, Any]]]:
        rev = os.getenv("K_REVISION") or ""
        items = ctx.get_input_data()
        return_data: List[Any] = []

        for i in range(len(items)):
            qs: Dict[str, Any] = {}
            resource = ctx.get_node_parameter("resource", i)
            operation = ctx.get_node_parameter("operation", i)

            if resource != RESOURCE_SMS:
                raise UnknownResourceError(resource)
            if operation != OPERATION_SEND:
                raise UnknownOperationError(operation)

            request_method = "POST"
            originator = ctx.get_node_parameter("originator", i)
            message = ctx.get_node_parameter("message", i)
            additional_fields = ctx.get_node_parameter("additionalFields", i) or {}
            receivers = ctx.get_node_parameter("recipients", i)

            body = build_send_body(originator, message, receivers, additional_fields)

            timer = Timer()
            log.info(
                "sms_send_attempt",
                extra={
                    "extra": {
                        "event": "sms_send_attempt",
                        "item_index": i,
                        "dest": recipients_hint(str(receivers or "")),
                        "optional_keys": sorted(k for k in body if k not in ("recipients", "originator", "body")),
                        "revision": rev,
                    }
                },
            )
            try:
                response_data = ctx.api_request(request_method, body, qs)
            except Exception as e:
                log.error(
                    "sms_send_exception",
                    extra={
                        "extra": {
                            "event": "sms_send_exception",
                            "item_index": i,
                            "error_type": type(e).__name__,
                            "message": str(e),
                            "latency_ms": timer.ms(),
                            "revision": rev,
                        }
                    },
                )
                raise
            log.info(
                "sms_send_result",
                extra={"extra": {"event": "sms_send_result", "item_index": i, "latency_ms": timer.ms(), "revision": rev}},
            )
            return_data.append(response_data)

        return [return_json_array(return_data)]
