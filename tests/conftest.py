import pytest

from nodes.execution import NodeExecutionContext
from nodes.messagebird import MessageBirdNode
from tests.fake_transport import FakeTransport


@pytest.fixture
def make_ctx():
    def _make(parameters, items=None, transport=None):
        return NodeExecutionContext(
            items=items if items is not None else [{"json": {}}],
            parameters=parameters,
            transport=transport or FakeTransport(),
            defaults=MessageBirdNode.defaults(),
        )
    return _make
