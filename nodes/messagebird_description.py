from __future__ import annotations

from typing import Any, Dict, List, Tuple

from models.schema import (
    CREDENTIAL_MESSAGEBIRD_API,
    NODE_DISPLAY_NAME,
    NODE_NAME,
    OPERATION_SEND,
    RESOURCE_SMS,
)
from nodes.fields import (
    COLLECTION,
    NUMBER,
    OPTIONS,
    STRING,
    DisplayOptions,
    FieldOption,
    FieldSpec,
)

_SMS_SEND = DisplayOptions.when(operation=[OPERATION_SEND], resource=[RESOURCE_SMS])
_RFC3339_PLACEHOLDER = "2011-08-30T09:30:16.768-04:00"

ADDITIONAL_FIELD_OPTIONS: Tuple[FieldSpec, ...] = (
    FieldSpec(
        name="groupIds",
        display_name="Group Ids",
        type=STRING,
        placeholder="1,2",
        description="Group ids separated by commas. If provided, recipients can be omitted.",
    ),
    FieldSpec(
        name="type",
        display_name="Type",
        type=OPTIONS,
        options=(
            FieldOption(name="sms", value="sms"),
            FieldOption(name="binary", value="binary"),
            FieldOption(name="flash", value="flash"),
        ),
        description="The type of message. Values can be: sms, binary, or flash.",
    ),
    FieldSpec(name="reference", display_name="Reference", type=STRING, description="A client reference."),
    FieldSpec(
        name="reportUrl",
        display_name="Report Url",
        type=STRING,
        description=(
            "The status report URL to be used on a per-message basis. "
            "Reference is required for a status report webhook to be sent."
        ),
    ),
    FieldSpec(
        name="validity",
        display_name="Validity",
        type=NUMBER,
        description="The amount of seconds that the message is valid.",
    ),
    FieldSpec(
        name="gateway",
        display_name="Gateway",
        type=NUMBER,
        description="The SMS route that is used to send the message.",
    ),
    FieldSpec(
        name="typeDetails",
        display_name="Type Details",
        type=STRING,
        description="A hash with extra information. Is only used when a binary message is sent.",
    ),
    FieldSpec(
        name="datacoding",
        display_name="Datacoding",
        type=STRING,
        description="Using unicode will limit the maximum number of characters to 70 instead of 160.",
    ),
    FieldSpec(
        name="mclass",
        display_name="Mclass",
        type=NUMBER,
        placeholder="permissible values from 0-3",
        type_options=(("minValue", 0), ("maxValue", 3)),
        description="Indicates the message type. 1 is a normal message, 0 is a flash message.",
    ),
    FieldSpec(
        name="scheduledDatetime",
        display_name="Scheduled Date-time",
        type=STRING,
        placeholder=_RFC3339_PLACEHOLDER,
        description="The scheduled date and time of the message in RFC3339 format (Y-m-dTH:i:sP).",
    ),
    FieldSpec(
        name="createdDatetime",
        display_name="Created Date-time",
        type=STRING,
        placeholder=_RFC3339_PLACEHOLDER,
        description="The date and time of the creation of the message in RFC3339 format (Y-m-dTH:i:sP).",
    ),
)

PROPERTIES: Tuple[FieldSpec, ...] = (
    FieldSpec(
        name="resource",
        display_name="Resource",
        type=OPTIONS,
        options=(FieldOption(name="SMS", value=RESOURCE_SMS),),
        default=RESOURCE_SMS,
        description="The resource to operate on.",
    ),
    FieldSpec(
        name="operation",
        display_name="Operation",
        type=OPTIONS,
        display_options=DisplayOptions.when(resource=[RESOURCE_SMS]),
        options=(FieldOption(name="Send", value=OPERATION_SEND, description="Send text messages (SMS)"),),
        default=OPERATION_SEND,
        description="The operation to perform.",
    ),
    # sms:send
    FieldSpec(
        name="originator",
        display_name="From",
        type=STRING,
        placeholder="14155238886",
        required=True,
        display_options=_SMS_SEND,
        description="The number from which to send the message.",
    ),
    FieldSpec(
        name="recipients",
        display_name="To",
        type=STRING,
        placeholder="14155238886",
        required=True,
        display_options=_SMS_SEND,
        description="All recipients separated by commas.",
    ),
    FieldSpec(
        name="message",
        display_name="Message",
        type=STRING,
        required=True,
        display_options=_SMS_SEND,
        description="The message to be sent.",
    ),
    FieldSpec(
        name="additionalFields",
        display_name="Additional Fields",
        type=COLLECTION,
        placeholder="Add Fields",
        default={},
        display_options=_SMS_SEND,
        options=ADDITIONAL_FIELD_OPTIONS,
    ),
)

NODE_DESCRIPTION: Dict[str, Any] = {
    "displayName": NODE_DISPLAY_NAME,
    "name": NODE_NAME,
    "icon": "file:messagebird.png",
    "group": ["transform"],
    "version": 1,
    "subtitle": '={{$parameter["operation"] + ": " + $parameter["resource"]}}',
    "description": "Send SMS",
    "defaults": {"name": NODE_DISPLAY_NAME, "color": "#cf272d"},
    "inputs": ["main"],
    "outputs": ["main"],
    "credentials": [{"name": CREDENTIAL_MESSAGEBIRD_API, "required": True}],
}

CREDENTIAL_DESCRIPTION: Dict[str, Any] = {
    "name": CREDENTIAL_MESSAGEBIRD_API,
    "displayName": "MessageBird API",
    "properties": [
        {"displayName": "API Key", "name": "accessKey", "type": STRING, "typeOptions": {"password": True}, "default": ""},
    ],
}


def describe() -> Dict[str, Any]:
    """Node description as rendered by the host form: metadata plus field list."""
    props: List[Dict[str, Any]] = [p.to_dict() for p in PROPERTIES]
    return {**NODE_DESCRIPTION, "properties": props, "credentialTypes": [CREDENTIAL_DESCRIPTION]}
