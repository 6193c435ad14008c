from __future__ import annotations

import os
import time
from typing import Any, Dict

from fastapi import APIRouter

from config.settings import settings
from models.schema import NODE_NAME

router = APIRouter()


@router.get("/health")
def health():
    rev = os.getenv("K_REVISION") or ""
    svc = os.getenv("K_SERVICE") or "messagebird-node"

    payload: Dict[str, Any] = {
        "ok": True,
        "service": "messagebird-node",
        "cloudrun_service": svc,
        "revision": rev,
        "environment": settings.ENVIRONMENT,
        "node": NODE_NAME,
        # Presence only; the key itself never leaves the process.
        "messagebird_configured": bool(settings.MESSAGEBIRD_ACCESS_KEY),
        "time_unix": time.time(),
    }
    return payload
