"""JSON Schemas describing the specification document format."""

import json

from pydantic import BaseModel

from api_spec_overlay.parser.base import (
    Endpoint,
    EndpointRequest,
    EndpointResponse,
    Enum,
    Field,
    Object,
    Resource,
    ResourceField,
    Service,
)

SCHEMA_MODELS: dict[str, type[BaseModel]] = {
    "Service": Service,
    "Enum": Enum,
    "Object": Object,
    "Resource": Resource,
    "Field": Field,
    "ResourceField": ResourceField,
    "Endpoint": Endpoint,
    "EndpointRequest": EndpointRequest,
    "EndpointResponse": EndpointResponse,
}


def generate_schemas() -> dict[str, dict]:
    """Schema per model name, as documents are written (aliases applied)."""
    return {name: model.model_json_schema(by_alias=True) for name, model in SCHEMA_MODELS.items()}


def generate_schemas_json() -> str:
    return json.dumps(generate_schemas(), indent=2) + "\n"
