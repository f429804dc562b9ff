"""OpenAPI document parser.

Turns an OpenAPI 3.x document (JSON or YAML) into a flat Catalog of
component schemas and GET endpoints. The document comes from the vendor and
is not fully under our control, so every lookup falls back to a default
instead of raising.
"""

import json
from typing import Any

import yaml

from truss_dashboard.errors import MalformedDocumentError

from .base import (
    Catalog,
    EndpointInfo,
    ParameterInfo,
    PropertyInfo,
    ResponseShape,
    SchemaInfo,
)

DEFAULT_TAG = "Other"
JSON_MEDIA_TYPES = ("application/json", "text/json")


def parse_document(raw: bytes | str) -> Catalog:
    """Decode a JSON or YAML document and build its Catalog."""
    return build_catalog(load_document(raw))


def load_document(raw: bytes | str) -> dict:
    """Decode raw document bytes, trying JSON first and then YAML."""
    if isinstance(raw, bytes):
        try:
            raw = raw.decode("utf-8-sig")
        except UnicodeDecodeError as exc:
            raise MalformedDocumentError(f"Document is not UTF-8: {exc}") from exc

    try:
        doc = json.loads(raw)
    except RecursionError as exc:
        raise MalformedDocumentError("Document is nested too deeply") from exc
    except ValueError:
        try:
            doc = yaml.safe_load(raw)
        except RecursionError as exc:
            raise MalformedDocumentError("Document is nested too deeply") from exc
        except yaml.YAMLError as exc:
            raise MalformedDocumentError(f"Document is neither JSON nor YAML: {exc}") from exc

    if not isinstance(doc, dict):
        raise MalformedDocumentError("Document root must be an object")
    return doc


def build_catalog(doc: dict) -> Catalog:
    return Catalog(schemas=extract_schemas(doc), endpoints=tuple(extract_endpoints(doc)))


def extract_schemas(doc: dict) -> dict[str, SchemaInfo]:
    """Parse components.schemas into name -> SchemaInfo, in declaration order."""
    schemas: dict[str, SchemaInfo] = {}
    section = _mapping(_mapping(_mapping(doc).get("components")).get("schemas"))

    for name, schema in section.items():
        if not isinstance(name, str) or not name:
            continue
        schema = _mapping(schema)
        schemas[name] = SchemaInfo(
            name=name,
            kind=_string(schema.get("type")) or "object",
            properties=tuple(_parse_properties(schema)),
        )
    return schemas


def extract_endpoints(doc: dict) -> list[EndpointInfo]:
    """Parse paths into GET endpoints sorted by (tag, path)."""
    endpoints = []
    paths = _mapping(_mapping(doc).get("paths"))

    for path, methods in paths.items():
        for method, operation in _mapping(methods).items():
            if not isinstance(method, str) or method.upper() != "GET":
                continue
            operation = _mapping(operation)

            endpoints.append(
                EndpointInfo(
                    path=str(path),
                    method="GET",
                    tag=_first_tag(operation.get("tags")),
                    parameters=tuple(_parse_parameters(operation.get("parameters"))),
                    response_shape=_parse_response(operation.get("responses")),
                )
            )

    return sorted(endpoints, key=lambda e: (e.tag, e.path))


def _parse_properties(schema: dict) -> list[PropertyInfo]:
    properties = schema.get("properties")
    if not isinstance(properties, dict):
        return []

    required = {r for r in _sequence(schema.get("required")) if isinstance(r, str)}
    result = []
    for name, prop in properties.items():
        prop = _mapping(prop)
        result.append(
            PropertyInfo(
                name=str(name),
                type=_resolve_type(prop.get("type")),
                format=_string(prop.get("format")),
                required=name in required,
            )
        )
    return result


def _resolve_type(declared: Any) -> str:
    # ["null", "string"] is the nullable-union idiom
    if isinstance(declared, list):
        for t in declared:
            if t != "null":
                return _string(t) or "string"
        return "string"
    return _string(declared) or "string"


def _first_tag(tags: Any) -> str:
    tags = _sequence(tags)
    if tags:
        return _string(tags[0]) or DEFAULT_TAG
    return DEFAULT_TAG


def _parse_parameters(params: Any) -> list[ParameterInfo]:
    result = []
    for p in _sequence(params):
        p = _mapping(p)
        schema = _mapping(p.get("schema"))
        result.append(
            ParameterInfo(
                name=_string(p.get("name")) or "",
                location=_string(p.get("in")) or "query",
                required=p.get("required") is True,
                type=_string(schema.get("type")) or "string",
                format=_string(schema.get("format")),
            )
        )
    return result


def _parse_response(responses: Any) -> ResponseShape | None:
    responses = _mapping(responses)
    # YAML loads an unquoted 200 key as an int
    ok = _mapping(responses.get("200", responses.get(200)))
    content = ok.get("content")
    if not isinstance(content, dict):
        return None

    for media_type in JSON_MEDIA_TYPES:
        if media_type in content:
            schema = _mapping(content[media_type]).get("schema")
            if schema is None:
                return None
            return _response_shape(_mapping(schema))
    return None


def _response_shape(schema: dict) -> ResponseShape:
    if "$ref" in schema:
        return ResponseShape(is_array=False, element_kind=_ref_name(schema["$ref"]))
    if schema.get("type") == "array":
        items = _mapping(schema.get("items"))
        element_kind = _ref_name(items.get("$ref"))
        return ResponseShape(is_array=True, element_kind=element_kind)
    return ResponseShape(is_array=False, raw_kind=_string(schema.get("type")) or "object")


def _ref_name(ref: Any) -> str | None:
    """Return the last segment of a $ref, e.g. #/components/schemas/Foo -> Foo."""
    ref = _string(ref)
    return ref.rsplit("/", 1)[-1] if ref is not None else None


def _mapping(value: Any) -> dict:
    return value if isinstance(value, dict) else {}


def _sequence(value: Any) -> list:
    return value if isinstance(value, list) else []


def _string(value: Any) -> str | None:
    return value if isinstance(value, str) else None
