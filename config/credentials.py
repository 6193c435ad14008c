from __future__ import annotations

from typing import Any, Dict, Optional

from pydantic import BaseModel, ConfigDict, Field

from config.settings import settings
from models.schema import CREDENTIAL_MESSAGEBIRD_API


class CredentialsNotFound(Exception):
    def __init__(self, name: str):
        super().__init__(f"credentials_not_found:{name}")
        self.name = name


class MessageBirdApiCredentials(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    access_key: str = Field(alias="accessKey")


class CredentialStore:
    """Named credential records, resolved by the host on behalf of a node."""

    def __init__(self, records: Optional[Dict[str, Dict[str, Any]]] = None):
        self._records: Dict[str, Dict[str, Any]] = dict(records or {})

    @classmethod
    def from_settings(cls) -> "CredentialStore":
        store = cls()
        if settings.MESSAGEBIRD_ACCESS_KEY:
            store.put(CREDENTIAL_MESSAGEBIRD_API, {"accessKey": settings.MESSAGEBIRD_ACCESS_KEY})
        return store

    def put(self, name: str, data: Dict[str, Any]) -> None:
        self._records[name] = dict(data)

    def has(self, name: str) -> bool:
        return name in self._records

    def get(self, name: str) -> Dict[str, Any]:
        rec = self._records.get(name)
        if rec is None:
            raise CredentialsNotFound(name)
        return dict(rec)

    def messagebird(self) -> MessageBirdApiCredentials:
        return MessageBirdApiCredentials.model_validate(self.get(CREDENTIAL_MESSAGEBIRD_API))
