"""
Pydantic models for backend payloads.

The backend speaks camelCase; models accept those names through aliases and
expose snake_case attributes. Unknown fields are kept so newer backend
versions do not break older SDKs.
"""
from datetime import datetime
from typing import Any, Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class _BackendModel(BaseModel):
    model_config = ConfigDict(populate_by_name=True, extra="allow")


# ============================================================
# Apps
# ============================================================

class AppInfo(_BackendModel):
    """An integrable third-party app (GitHub, Slack, ...)."""

    key: str
    name: str
    app_id: Optional[str] = Field(None, alias="appId")
    description: Optional[str] = None
    logo: Optional[str] = None
    categories: List[str] = Field(default_factory=list)
    enabled: bool = True
    no_auth: bool = False
    meta: Dict[str, Any] = Field(default_factory=dict)


class AppListResponse(_BackendModel):
    items: List[AppInfo] = Field(default_factory=list)
    total_pages: Optional[int] = Field(None, alias="totalPages")


# ============================================================
# Connected accounts
# ============================================================

class ConnectedAccount(_BackendModel):
    """A connection between an entity and an app."""

    id: str
    status: str
    app_unique_id: str = Field(..., alias="appUniqueId")
    app_name: Optional[str] = Field(None, alias="appName")
    integration_id: Optional[str] = Field(None, alias="integrationId")
    client_unique_user_id: Optional[str] = Field(None, alias="clientUniqueUserId")
    connection_params: Dict[str, Any] = Field(default_factory=dict, alias="connectionParams")
    enabled: bool = True
    created_at: Optional[datetime] = Field(None, alias="createdAt")
    updated_at: Optional[datetime] = Field(None, alias="updatedAt")

    @property
    def is_active(self) -> bool:
        return self.status.upper() == "ACTIVE"


class ConnectionListResponse(_BackendModel):
    items: List[ConnectedAccount] = Field(default_factory=list)
    total_pages: int = Field(1, alias="totalPages")
    page: int = 1
