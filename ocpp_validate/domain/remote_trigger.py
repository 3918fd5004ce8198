"""Remote Trigger profile payloads."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ocpp.v16.enums import MessageTrigger, TriggerMessageStatus

from .base import Request, Response


@dataclass(slots=True)
class TriggerMessageRequest(Request):
    """Ask the charge point to send one of its own messages now.

    ``connector_id`` is only set when the request targets one connector.
    """

    requested_message: MessageTrigger
    connector_id: Optional[int] = None


@dataclass(slots=True)
class TriggerMessageResponse(Response):
    status: TriggerMessageStatus
