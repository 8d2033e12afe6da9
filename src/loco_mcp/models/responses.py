"""Pydantic models for results returned by Loco operations.

Every operation returns a ``NormalizedResult``; callers never see raw
transport exceptions or GraphQL error arrays.
"""

from __future__ import annotations

import json
from enum import Enum
from typing import Any, Dict, Optional

from pydantic import BaseModel, model_validator


class ErrorKind(str, Enum):
    """Failure classes callers can branch on without parsing messages."""

    TRANSPORT = "transport"
    NOT_FOUND = "not_found"
    REMOTE_REJECTED = "remote_rejected"


class NormalizedResult(BaseModel):
    """Uniform ``{success, message, data}`` envelope."""

    success: bool
    message: str
    data: Any = None
    error_kind: Optional[ErrorKind] = None

    @model_validator(mode="after")
    def _check_failure_fields(self) -> NormalizedResult:
        if self.success and self.error_kind is not None:
            raise ValueError("successful results cannot carry an error kind")
        if not self.success and (not self.message or self.error_kind is None):
            raise ValueError("failed results need a message and an error kind")
        return self

    @classmethod
    def ok(cls, message: str, data: Any = None) -> NormalizedResult:
        return cls(success=True, message=message, data=data)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str, data: Any = None) -> NormalizedResult:
        return cls(success=False, message=message, data=data, error_kind=kind)

    def to_tool_payload(self) -> Dict[str, Any]:
        """Fields exposed to the tool host."""
        payload: Dict[str, Any] = {"message": self.message, "data": self.data}
        if self.error_kind is not None:
            payload["error_kind"] = self.error_kind.value
        return payload

    def to_tool_text(self) -> str:
        return json.dumps(self.to_tool_payload(), default=str)
