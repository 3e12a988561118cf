"""Structural validation of declared and expanded services.

Validation walks the service top-down and raises the first violation as a
ValidationError whose message names the path to the offending element,
e.g. ``resource 0 (Users): field 1 (email): field type: invalid field type 'Text'``.
"""

import re
from typing import Callable

from api_spec_overlay.errors import ValidationError
from api_spec_overlay.generator.filters import FILTER_SUFFIX
from api_spec_overlay.parser.base import (
    ERROR_CODE_ENUM_NAME,
    ERROR_FIELD_CODE_ENUM_NAME,
    ERROR_FIELD_OBJECT_NAME,
    ERROR_OBJECT_NAME,
    META_OBJECT_NAME,
    MODIFIERS,
    OPERATIONS,
    PAGINATION_OBJECT_NAME,
    PRIMITIVE_TYPES,
    Endpoint,
    Field,
    Object,
    Resource,
    ResourceField,
    RetryConfiguration,
    Service,
)

RETRY_STRATEGIES = ("backoff",)

# Always present once the service is expanded
RESERVED_TYPES = (
    ERROR_CODE_ENUM_NAME,
    ERROR_OBJECT_NAME,
    ERROR_FIELD_CODE_ENUM_NAME,
    ERROR_FIELD_OBJECT_NAME,
    PAGINATION_OBJECT_NAME,
    META_OBJECT_NAME,
)

_STATUS_RANGE = re.compile(r"^[1-5]XX$")
_STATUS_CODE = re.compile(r"^[1-5]\d\d$")


def _wrapped(prefix: str, check: Callable[..., None], *args) -> None:
    try:
        check(*args)
    except ValidationError as e:
        raise e.wrap(prefix) from None


def validate_operations(operations: list[str]) -> None:
    for operation in operations:
        if operation not in OPERATIONS:
            raise ValidationError(
                f"invalid operation '{operation}', must be one of {', '.join(OPERATIONS)}",
                path="operations",
            )


def validate_field_type(type_name: str, service: Service) -> None:
    """Accept primitives, declared enums and objects, and the names expansion will add.

    Before expansion a resource name stands for its read object, and the
    reserved defaults and the filter of each readable resource do not exist yet.
    """
    if type_name in PRIMITIVE_TYPES or type_name in RESERVED_TYPES:
        return
    if service.has_enum(type_name) or service.has_object(type_name):
        return
    for resource in service.resources:
        if type_name == resource.name:
            return
        if resource.has_read_operation() and type_name == resource.name + FILTER_SUFFIX:
            return
    raise ValidationError(
        f"invalid field type '{type_name}', must be one of {', '.join(PRIMITIVE_TYPES)} "
        "or a declared enum or object",
        path="type",
    )


def validate_modifiers(modifiers: list[str]) -> None:
    for modifier in modifiers:
        if modifier not in MODIFIERS:
            raise ValidationError(
                f"invalid modifier '{modifier}', must be one of {', '.join(MODIFIERS)}",
                path="modifiers",
            )


def validate_field(field: Field, service: Service) -> None:
    _wrapped("field type", validate_field_type, field.type, service)
    _wrapped("field modifiers", validate_modifiers, field.modifiers)


def validate_resource_field(field: ResourceField, service: Service) -> None:
    validate_field(field, service)
    _wrapped("field operations", validate_operations, field.operations)


def _validate_fields(kind: str, fields: list[Field], service: Service) -> None:
    for i, field in enumerate(fields):
        _wrapped(f"{kind} {i} ({field.name})", validate_field, field, service)


def validate_endpoint(endpoint: Endpoint, service: Service) -> None:
    request = endpoint.request
    _validate_fields("request header", request.headers, service)
    _validate_fields("request path param", request.path_params, service)
    _validate_fields("request query param", request.query_params, service)
    _validate_fields("request body param", request.body_params, service)

    response = endpoint.response
    _validate_fields("response header", response.headers, service)
    _validate_fields("response body field", response.body_fields, service)
    if response.body_object is not None:
        _wrapped("response body object", validate_field_type, response.body_object, service)


def validate_resource(resource: Resource, service: Service) -> None:
    _wrapped("resource operations", validate_operations, resource.operations)
    for i, field in enumerate(resource.fields):
        _wrapped(f"field {i} ({field.name})", validate_resource_field, field, service)
    for i, endpoint in enumerate(resource.endpoints):
        _wrapped(f"endpoint {i} ({endpoint.name})", validate_endpoint, endpoint, service)


def validate_object(obj: Object, service: Service) -> None:
    _validate_fields("field", obj.fields, service)


def validate_retry(retry: RetryConfiguration) -> None:
    """Check retry bounds: non-negative intervals, initial <= max, known strategy and status codes."""
    if retry.strategy not in RETRY_STRATEGIES:
        raise ValidationError(
            f"invalid retry strategy '{retry.strategy}', must be one of {', '.join(RETRY_STRATEGIES)}",
            path="retry",
        )

    backoff = retry.backoff
    for name in ("initial_interval", "max_interval", "max_elapsed_time"):
        if getattr(backoff, name) < 0:
            raise ValidationError(f"retry backoff {name} must not be negative", path="retry")
    if backoff.exponent < 0:
        raise ValidationError("retry backoff exponent must not be negative", path="retry")
    if backoff.initial_interval > backoff.max_interval:
        raise ValidationError(
            f"retry backoff initial_interval ({backoff.initial_interval}) must not exceed "
            f"max_interval ({backoff.max_interval})",
            path="retry",
        )

    for code in retry.status_codes:
        if not (_STATUS_RANGE.match(code) or _STATUS_CODE.match(code)):
            raise ValidationError(
                f"invalid retry status code '{code}', must be like '5XX' or a code between 100 and 599",
                path="retry",
            )


def validate_service(service: Service) -> None:
    """Raise the first ValidationError found in ``service``."""
    if service.retry is not None:
        validate_retry(service.retry)
    for i, obj in enumerate(service.objects):
        _wrapped(f"object {i} ({obj.name})", validate_object, obj, service)
    for i, resource in enumerate(service.resources):
        _wrapped(f"resource {i} ({resource.name})", validate_resource, resource, service)
