"""Local Authorization List Management profile payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Optional

from ocpp.v16.enums import UpdateStatus, UpdateType

from .base import Request, Response
from .common import AuthorizationData


@dataclass(slots=True)
class GetLocalListVersionRequest(Request):
    pass


@dataclass(slots=True)
class GetLocalListVersionResponse(Response):
    list_version: int


@dataclass(slots=True)
class SendLocalListRequest(Request):
    """Replace (``Full``) or patch (``Differential``) the local list.

    In a differential update an entry without ``id_tag_info`` removes that
    idTag from the list.
    """

    list_version: int
    update_type: UpdateType
    local_authorization_list: Optional[List[AuthorizationData]] = None


@dataclass(slots=True)
class SendLocalListResponse(Response):
    status: UpdateStatus
