from __future__ import annotations

import logging
from typing import Any, Callable, Dict, List

from fastapi import APIRouter, Depends
from pydantic import BaseModel, Field

from config.credentials import CredentialStore
from messaging.messagebird import Transport, transport_for
from models.schema import NODE_NAME
from nodes.execution import NodeExecutionContext
from nodes.messagebird import MessageBirdNode

log = logging.getLogger("messagebird.router.nodes")
router = APIRouter()


class ExecuteRequest(BaseModel):
    items: List[Dict[str, Any]] = Field(default_factory=lambda: [{"json": {}}])
    parameters: Dict[str, Any] = Field(default_factory=dict)


def get_credential_store() -> CredentialStore:
    return CredentialStore.from_settings()


def get_transport_factory() -> Callable[[CredentialStore], Transport]:
    return lambda store: transport_for(store.messagebird())


@router.get(f"/nodes/{NODE_NAME}")
def describe_node():
    return MessageBirdNode.describe()


@router.post(f"/nodes/{NODE_NAME}/execute")
def execute_node(
    req: ExecuteRequest,
    store: CredentialStore = Depends(get_credential_store),
    make_transport: Callable[[CredentialStore], Transport] = Depends(get_transport_factory),
):
    bound: Dict[str, Transport] = {}

    def _transport(method: str, body: Dict[str, Any], qs: Dict[str, Any]) -> Any:
        # Credentials are resolved on the first send, after parameter checks.
        if "t" not in bound:
            bound["t"] = make_transport(store)
        return bound["t"](method, body, qs)

    node = MessageBirdNode()
    ctx = NodeExecutionContext(
        items=req.items,
        parameters=req.parameters,
        transport=_transport,
        credentials=store,
        defaults=node.defaults(),
    )
    data = node.execute(ctx)
    log.info(
        "node_execute_done",
        extra={"extra": {"event": "node_execute_done", "node": NODE_NAME, "items": len(req.items), "outputs": len(data[0])}},
    )
    return {"data": data}
