import json
import logging

from ops.structured_logger import JsonFormatter
from utils.request_context import get_request_id, request_scope


def _record(extra=None):
    rec = logging.LogRecord("messagebird.node", logging.INFO, __file__, 1, "sms_send_attempt", None, None)
    if extra is not None:
        rec.extra = extra
    return rec


def test_json_formatter_merges_event_extra():
    out = json.loads(JsonFormatter().format(_record({"event": "sms_send_attempt", "dest": "...5678"})))
    assert out["message"] == "sms_send_attempt"
    assert out["dest"] == "...5678"
    assert out["severity"] == "INFO"


def test_request_scope_tags_log_lines():
    with request_scope("rid-9"):
        out = json.loads(JsonFormatter().format(_record()))
    assert out["request_id"] == "rid-9"
    assert get_request_id() == ""
