from __future__ import annotations

from typing import Any, Generic, Literal, TypeVar

from pydantic import BaseModel, ConfigDict, Field, StrictInt

DataT = TypeVar("DataT")


# --- Envelope ---


class SuccessResponse(BaseModel, Generic[DataT]):
    success: Literal[True] = True
    data: DataT


class ErrorResponse(BaseModel):
    success: Literal[False] = False
    error: str
    code: str | None = None
    message: str | None = None
    details: dict[str, Any] | None = None


# --- Requests ---


class CalculateRequest(BaseModel):
    """POST /api/distance/calculate and /api/distance/export."""

    list1: list[StrictInt]
    list2: list[StrictInt]


class ParseRequest(BaseModel):
    content: str


class TransliterateRequest(BaseModel):
    text: str
    reverse: bool = False


# --- Response payloads ---


class ParsedListsData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    list1: list[int]
    list2: list[int]
    row_count: int = Field(alias="rowCount")


class UploadMetadata(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    filename: str
    file_size: int = Field(alias="fileSize")


class UploadData(BaseModel):
    model_config = ConfigDict(populate_by_name=True)

    file_id: str = Field(alias="fileId")
    list1: list[int]
    list2: list[int]
    row_count: int = Field(alias="rowCount")
    metadata: UploadMetadata


class TransliterateData(BaseModel):
    text: str
    result: str


class ApiHealth(BaseModel):
    status: str = "healthy"
    timestamp: str
    version: str
    services: dict[str, str]


class HealthResponse(BaseModel):
    status: str = "ok"
