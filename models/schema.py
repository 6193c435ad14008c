# Centralized node identifiers to prevent drift between description and execute.

NODE_NAME = "messageBird"
NODE_DISPLAY_NAME = "MessageBird"

CREDENTIAL_MESSAGEBIRD_API = "messageBirdApi"

RESOURCE_SMS = "sms"
OPERATION_SEND = "send"

# MessageBird REST resource for outbound SMS
MESSAGES_RESOURCE = "/messages"
