from nodes.messagebird import OPTIONAL_BODY_FIELDS, build_send_body


def test_body_without_additional_fields_has_three_keys():
    body = build_send_body("14155238886", "hi", "31612345678", {})
    assert body == {"recipients": [31612345678], "originator": "14155238886", "body": "hi"}


def test_body_copies_only_supplied_optional_keys():
    body = build_send_body("me", "hi", "1", {"reference": "order-42", "type": "flash"})
    assert set(body) == {"recipients", "originator", "body", "reference", "type"}
    assert body["reference"] == "order-42"
    assert body["type"] == "flash"


def test_body_copies_every_optional_key():
    extra = {src: f"v-{src}" for src, _ in OPTIONAL_BODY_FIELDS}
    body = build_send_body("me", "hi", "1", extra)
    for src, target in OPTIONAL_BODY_FIELDS:
        assert body[target] == extra[src]
    assert len(body) == 3 + len(OPTIONAL_BODY_FIELDS)


def test_validity_carries_its_own_value():
    body = build_send_body("me", "hi", "1", {"validity": 3600, "reportUrl": "https://example.com/r"})
    assert body["validity"] == 3600
    assert body["reportUrl"] == "https://example.com/r"


def test_mclass_zero_is_sent():
    body = build_send_body("me", "hi", "1", {"mclass": 0})
    assert body["mclass"] == 0


def test_empty_and_none_optional_values_are_omitted():
    body = build_send_body("me", "hi", "1", {"reference": "", "gateway": None})
    assert "reference" not in body
    assert "gateway" not in body


def test_unknown_additional_keys_are_ignored():
    body = build_send_body("me", "hi", "1", {"premium": True})
    assert "premium" not in body


def test_none_additional_fields():
    body = build_send_body("me", "hi", "1,2", None)
    assert body == {"recipients": [1, 2], "originator": "me", "body": "hi"}


def test_only_numeric_zero_survives_among_falsy_values():
    body = build_send_body("me", "hi", "1", {"mclass": 0, "validity": 0.0, "gateway": False, "typeDetails": {}, "groupIds": []})
    assert body["mclass"] == 0
    assert body["validity"] == 0.0
    assert "gateway" not in body
    assert "typeDetails" not in body
    assert "groupIds" not in body
