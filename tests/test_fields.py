from nodes.fields import DisplayOptions, FieldSpec, visible_fields
from nodes.messagebird import OPTIONAL_BODY_FIELDS
from nodes.messagebird_description import ADDITIONAL_FIELD_OPTIONS, PROPERTIES, describe


def _names(fields):
    return [f.name for f in fields]


def test_sms_send_shows_all_fields():
    shown = visible_fields(PROPERTIES, {"resource": "sms", "operation": "send"})
    assert _names(shown) == ["resource", "operation", "originator", "recipients", "message", "additionalFields"]


def test_other_selection_hides_send_fields():
    shown = visible_fields(PROPERTIES, {"resource": "voice", "operation": "send"})
    assert _names(shown) == ["resource"]


def test_required_fields():
    assert {f.name for f in PROPERTIES if f.required} == {"originator", "recipients", "message"}


def test_collection_options_match_body_table():
    assert _names(ADDITIONAL_FIELD_OPTIONS) == [src for src, _ in OPTIONAL_BODY_FIELDS]


def test_field_without_display_options_is_always_visible():
    f = FieldSpec(name="x", display_name="X", type="string")
    assert f.is_visible({})


def test_display_options_require_every_condition():
    d = DisplayOptions.when(resource=["sms"], operation=["send"])
    assert d.matches({"resource": "sms", "operation": "send"})
    assert not d.matches({"resource": "sms"})


def test_describe_renders_for_the_form():
    desc = describe()
    assert desc["name"] == "messageBird"
    assert desc["credentials"] == [{"name": "messageBirdApi", "required": True}]
    by_name = {p["name"]: p for p in desc["properties"]}
    assert by_name["originator"]["displayOptions"] == {"show": {"operation": ["send"], "resource": ["sms"]}}
    assert by_name["additionalFields"]["default"] == {}
    mclass = {o["name"]: o for o in by_name["additionalFields"]["options"]}["mclass"]
    assert mclass["typeOptions"] == {"minValue": 0, "maxValue": 3}
