"""Decode specification documents into models and encode them back."""

import json

import pydantic
import yaml

from api_spec_overlay.errors import DecodeError, InputError
from api_spec_overlay.parser.base import Service
from api_spec_overlay.parser.detect import FORMAT_JSON, FORMAT_YAML


def _load_mapping(text: str, fmt: str) -> dict:
    try:
        if fmt == FORMAT_JSON:
            data = json.loads(text)
        else:
            data = yaml.safe_load(text)
    except (json.JSONDecodeError, yaml.YAMLError) as e:
        raise DecodeError(f"failed to decode {fmt} document: {e}") from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise DecodeError(f"failed to decode {fmt} document: expected a mapping at the top level")
    return data


def decode_service(text: str, fmt: str) -> Service:
    """Parse ``text`` in ``fmt`` and build a Service without validating it."""
    data = _load_mapping(text, fmt)
    try:
        return Service.model_validate(data)
    except pydantic.ValidationError as e:
        raise DecodeError(f"failed to decode {fmt} document: {e}") from e


def service_to_dict(service: Service) -> dict:
    return service.model_dump(mode="json", by_alias=True, exclude_none=True)


def dump_service(service: Service, fmt: str = FORMAT_YAML) -> str:
    """Serialise ``service`` as YAML or JSON text."""
    data = service_to_dict(service)
    if fmt == FORMAT_JSON:
        return json.dumps(data, indent=2) + "\n"
    if fmt == FORMAT_YAML:
        return yaml.safe_dump(data, sort_keys=False, allow_unicode=True)
    raise InputError(f"unsupported output format '{fmt}'")
