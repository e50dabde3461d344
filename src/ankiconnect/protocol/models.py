"""Action protocol models.

Pydantic models for the request and response envelopes exchanged with
the bridge:

    request:  {"action": "deckNames", "version": 6, "params": {...}}
    response: {"result": [...], "error": null}
"""

from __future__ import annotations

import json
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class ActionRequest(BaseModel):
    """Request envelope.

    Attributes:
        action: Remote action name
        version: Protocol version the client speaks
        params: Action parameters (omitted from the wire when empty)
        key: API key for bridges that require one (omitted when None)

    Example:
        >>> request = ActionRequest(action="loadProfile", version=6, params={"name": "User 1"})
        >>> request.to_payload()
        {'action': 'loadProfile', 'version': 6, 'params': {'name': 'User 1'}}
    """

    action: str = Field(..., min_length=1, description="Remote action name")
    version: int = Field(..., ge=1, description="Protocol version")
    params: dict[str, Any] | None = Field(default=None, description="Action parameters")
    key: str | None = Field(default=None, description="API key")

    model_config = ConfigDict(frozen=True)

    def to_payload(self) -> dict[str, Any]:
        """Build the wire payload, leaving out absent members."""
        payload: dict[str, Any] = {
            "action": self.action,
            "version": self.version,
        }
        if self.key is not None:
            payload["key"] = self.key
        if self.params:
            payload["params"] = self.params
        return payload

    def encode(self) -> bytes:
        """Serialize the payload to a compact UTF-8 JSON body."""
        return json.dumps(
            self.to_payload(),
            ensure_ascii=False,
            separators=(",", ":"),
        ).encode("utf-8")


class ActionResponse(BaseModel):
    """Response envelope.

    Both members are required on the wire; either may be null.

    Attributes:
        result: Action result as a generic JSON value
        error: Error message, or None on success
    """

    result: Any = Field(..., description="Action result")
    error: str | None = Field(..., description="Error message")

    model_config = ConfigDict(frozen=True)

    @property
    def ok(self) -> bool:
        """True when the bridge reported no error."""
        return self.error is None
