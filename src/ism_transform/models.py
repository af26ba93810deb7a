"""Unified data models for the derived interface and outline views.

The deriver and section builder read backend payloads as plain dicts and
convert them into these models for the UI layer.
"""

from enum import Enum

from pydantic import BaseModel, ConfigDict, Field


class Role(str, Enum):
    """Which side of an API call a field belongs to."""

    REQUEST = "request"
    RESPONSE = "response"


class NormalizedField(BaseModel):
    """A single request or response field."""

    model_config = ConfigDict(frozen=True)

    id: str
    name: str
    expression: str  # response.data.items[].price
    required: bool = False
    type: str = "string"  # string / number / boolean / object / array
    description: str | None = None


class RequestField(NormalizedField):
    pass


class ResponseField(NormalizedField):
    description: str = ""


class FieldSet(BaseModel):
    """Request and response fields derived for one interface."""

    request_fields: list[RequestField] = []
    response_fields: list[ResponseField] = []


class APIInterface(BaseModel):
    """A derived API interface descriptor."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    name: str
    method: str  # GET / POST / PUT / DELETE
    endpoint: str
    source_section: str = Field(alias="sourceSection")
    request_fields: list[RequestField] = Field(default=[], alias="requestFields")
    response_fields: list[ResponseField] = Field(default=[], alias="responseFields")


class DocumentSection(BaseModel):
    """One entry of the document outline shown beside the interfaces."""

    model_config = ConfigDict(populate_by_name=True)

    id: str
    title: str
    content: str
    is_api: bool = Field(default=False, alias="isAPI")
    chunk_id: str | None = Field(default=None, alias="chunkId")
    chunk_type: str | None = Field(default=None, alias="chunkType")
    importance_score: float | None = Field(default=None, alias="importanceScore")


class TransformOptions(BaseModel):
    """Switches controlling a single transformation pass."""

    outcome_fields: bool = True  # synthesize response.success / response.message
    include_chunks: bool = True


class TransformResult(BaseModel):
    """Everything the UI layer needs from one parsed backend payload."""

    title: str
    interfaces: list[APIInterface]
    sections: list[DocumentSection]
    warnings: list[str] = []
