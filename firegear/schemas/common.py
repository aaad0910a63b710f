# firegear/schemas/common.py
from typing import Any

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class RequestModel(BaseModel):
    """Request bodies accept snake_case and camelCase keys."""

    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True, extra="ignore")


class ErrorBody(BaseModel):
    code: str = Field(description="machine-readable error code")
    message: str = Field(description="human-readable message")
    detail: Any | None = None


class ErrorResponse(BaseModel):
    error: ErrorBody

    model_config = {
        "json_schema_extra": {
            "examples": [{"error": {"code": "not_found", "message": "equipment not found"}}]
        }
    }


class MessageResponse(BaseModel):
    message: str

    model_config = {"json_schema_extra": {"examples": [{"message": "Station deleted successfully"}]}}
