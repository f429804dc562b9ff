"""Catalog data models for the parsed OpenAPI document.

The extractors convert the vendor's OpenAPI document into these frozen
models. Widget configuration reads them but never mutates them.
"""

from collections.abc import Mapping
from types import MappingProxyType

from pydantic import BaseModel, ConfigDict, Field, field_validator


class _Frozen(BaseModel):
    model_config = ConfigDict(frozen=True)


class PropertyInfo(_Frozen):
    """A single property of a component schema."""

    name: str
    type: str = "string"  # string / integer / number / boolean / object / array
    format: str | None = None
    required: bool = False


class SchemaInfo(_Frozen):
    """A named schema from components.schemas."""

    name: str = Field(min_length=1)
    kind: str = "object"
    properties: tuple[PropertyInfo, ...] = ()


class ParameterInfo(_Frozen):
    """A parameter of a GET endpoint."""

    name: str = ""
    location: str = "query"  # path / query / header
    required: bool = False
    type: str = "string"
    format: str | None = None


class ResponseShape(_Frozen):
    """Summary of the 200 response body.

    element_kind is a bare schema name when the body (or its array items) is a
    $ref; raw_kind is the declared type when no reference is present.
    """

    is_array: bool = False
    element_kind: str | None = None
    raw_kind: str | None = None


class EndpointInfo(_Frozen):
    """A GET operation usable as a widget data source."""

    path: str
    method: str = "GET"
    tag: str = "Other"
    parameters: tuple[ParameterInfo, ...] = ()
    response_shape: ResponseShape | None = None

    @property
    def display_name(self) -> str:
        return f"{self.tag}: {self.path}"


class Catalog(_Frozen):
    """Schemas and GET endpoints of one document, endpoints sorted by (tag, path)."""

    schemas: Mapping[str, SchemaInfo] = Field(default_factory=dict, validate_default=True)
    endpoints: tuple[EndpointInfo, ...] = ()

    @field_validator("schemas", mode="after")
    @classmethod
    def _read_only(cls, value: Mapping[str, SchemaInfo]) -> Mapping[str, SchemaInfo]:
        return MappingProxyType(dict(value))

    @classmethod
    def empty(cls) -> "Catalog":
        return cls()
