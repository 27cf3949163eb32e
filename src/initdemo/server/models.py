from __future__ import annotations

from typing import Any, Literal, Optional

from pydantic import BaseModel

SCRIPT_FAILED = "script execution failed"


class SuccessData(BaseModel):
    output: str


class ErrorInfo(BaseModel):
    message: str
    details: Optional[str] = None


class ResponseEnvelope(BaseModel):
    status: Literal["success", "error"]
    data: Optional[SuccessData] = None
    error: Optional[ErrorInfo] = None

    @classmethod
    def success(cls, output: str) -> "ResponseEnvelope":
        return cls(status="success", data=SuccessData(output=output))

    @classmethod
    def failure(cls, details: str | None) -> "ResponseEnvelope":
        return cls(status="error", error=ErrorInfo(message=SCRIPT_FAILED, details=details))

    def to_json(self) -> dict[str, Any]:
        # absent members are left out rather than sent as null
        return self.model_dump(exclude_none=True)
