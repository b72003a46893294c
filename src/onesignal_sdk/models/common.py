"""Response envelopes shared by several endpoints."""

from __future__ import annotations

from typing import List

from pydantic import BaseModel, ConfigDict, Field


class SuccessResponse(BaseModel):
    success: bool = False


class ErrorResponse(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    messages: List[str] = Field(default_factory=list, alias="errors")


__all__ = ["SuccessResponse", "ErrorResponse"]
