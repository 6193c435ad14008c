from __future__ import annotations

from models.schema import NODE_DISPLAY_NAME


class NodeOperationError(Exception):
    def __init__(self, message: str, node: str = NODE_DISPLAY_NAME):
        super().__init__(message)
        self.node = node


class UnknownResourceError(NodeOperationError):
    def __init__(self, resource: str):
        super().__init__(f'The resource "{resource}" is not known!')
        self.resource = resource


class UnknownOperationError(NodeOperationError):
    def __init__(self, operation: str):
        super().__init__(f'The operation "{operation}" is not known!')
        self.operation = operation
