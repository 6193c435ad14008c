from __future__ import annotations

import json
import logging
import math
import os
from typing import Any, Callable, Dict, List, Optional

import httpx

from config.credentials import MessageBirdApiCredentials
from config.settings import settings
from models.schema import MESSAGES_RESOURCE
from ops.metrics import Timer

log = logging.getLogger("messagebird.client")

Transport = Callable[[str, Dict[str, Any], Dict[str, Any]], Any]


class MessageBirdApiError(Exception):
    """Non-2xx answer from the MessageBird REST API."""

    def __init__(self, status_code: int, errors: Optional[List[Dict[str, Any]]] = None, text: str = ""):
        self.status_code = status_code
        self.errors = errors or []
        descs = [str(e.get("description") or "") for e in self.errors if isinstance(e, dict)]
        detail = " | ".join(d for d in descs if d) or (text or "")[:500]
        super().__init__(f"MessageBird Error response [{status_code}]: {detail}".rstrip())


def _json_safe(value: Any) -> Any:
    # NaN is not valid JSON; the wire carries null in its place.
    if isinstance(value, float) and math.isnan(value):
        return None
    if isinstance(value, dict):
        return {k: _json_safe(v) for k, v in value.items()}
    if isinstance(value, (list, tuple)):
        return [_json_safe(v) for v in value]
    return value


class MessageBirdClient:
    def __init__(
        self,
        access_key: Optional[str] = None,
        base_url: Optional[str] = None,
        timeout_s: Optional[float] = None,
        http_client: Optional[httpx.Client] = None,
    ):
        self.access_key = access_key or settings.MESSAGEBIRD_ACCESS_KEY
        if not self.access_key:
            raise RuntimeError("MESSAGEBIRD_ACCESS_KEY not configured")
        self.base_url = (base_url or settings.MESSAGEBIRD_BASE_URL).rstrip("/")
        self.timeout_s = timeout_s if timeout_s is not None else settings.MESSAGEBIRD_TIMEOUT_S
        # Injected clients are left open; otherwise each request gets its own short-lived client.
        self.http = http_client

    def _headers(self) -> Dict[str, str]:
        return {
            "Accept": "application/json",
            "Content-Type": "application/json",
            "Authorization": f"AccessKey {self.access_key}",
        }

    def request(
        self,
        method: str,
        body: Dict[str, Any],
        qs: Optional[Dict[str, Any]] = None,
        resource: str = MESSAGES_RESOURCE,
    ) -> Any:
        rev = os.getenv("K_REVISION") or ""
        url = f"{self.base_url}{resource}"
        timer = Timer()
        payload = json.dumps(_json_safe(body or {}), ensure_ascii=False).encode("utf-8")
        try:
            if self.http is not None:
                r = self.http.request(method, url, params=qs or None, content=payload, headers=self._headers())
            else:
                with httpx.Client(timeout=self.timeout_s) as http:
                    r = http.request(method, url, params=qs or None, content=payload, headers=self._headers())
        except httpx.HTTPError as e:
            log.error(
                "messagebird_request_exception",
                extra={
                    "extra": {
                        "event": "messagebird_request_exception",
                        "method": method,
                        "resource": resource,
                        "error_type": type(e).__name__,
                        "message": str(e),
                        "latency_ms": timer.ms(),
                        "revision": rev,
                    }
                },
                exc_info=True,
            )
            raise

        try:
            data = r.json()
        except ValueError:
            data = None

        log.info(
            "messagebird_request_result",
            extra={
                "extra": {
                    "event": "messagebird_request_result",
                    "method": method,
                    "resource": resource,
                    "status_code": r.status_code,
                    "latency_ms": timer.ms(),
                    "revision": rev,
                }
            },
        )

        if r.status_code >= 400:
            errors = data.get("errors") if isinstance(data, dict) else None
            err = MessageBirdApiError(r.status_code, errors if isinstance(errors, list) else None, r.text or "")
            log.warning(
                "messagebird_request_failed",
                extra={"extra": {"event": "messagebird_request_failed", "status_code": r.status_code, "message": str(err), "revision": rev}},
            )
            raise err
        return data


def transport_for(credentials: MessageBirdApiCredentials, http_client: Optional[httpx.Client] = None) -> Transport:
    client = MessageBirdClient(access_key=credentials.access_key, http_client=http_client)

    def _send(method: str, body: Dict[str, Any], qs: Dict[str, Any]) -> Any:
        return client.request(method, body, qs)

    return _send
