"""Shadow objects that carry field-level validation errors for request bodies."""

import logging

from api_spec_overlay.generator.classify import is_primitive, object_registry
from api_spec_overlay.parser.base import (
    ENDPOINT_SEARCH,
    ERROR_FIELD_OBJECT_NAME,
    MODIFIER_NULLABLE,
    Field,
    Object,
    Service,
)

logger = logging.getLogger(__name__)

REQUEST_ERROR_SUFFIX = "RequestError"


def reachable_types(service: Service) -> list[str]:
    """Object names reachable from the body of any non-search endpoint.

    Traversal follows object field types transitively; each name is
    visited once, so cyclic object graphs terminate.
    """
    registry = object_registry(service.objects)
    visited: set[str] = set()
    order: list[str] = []

    def visit(type_name: str) -> None:
        if type_name in visited or is_primitive(type_name) or type_name not in registry:
            return
        visited.add(type_name)
        order.append(type_name)
        for field in registry[type_name].fields:
            visit(field.type)

    for resource in service.resources:
        for endpoint in resource.endpoints:
            if endpoint.name == ENDPOINT_SEARCH:
                continue
            for param in endpoint.request.body_params:
                visit(param.type)
    return order


def shadow_field(field: Field, registry: dict[str, Object]) -> Field:
    """Re-type ``field`` to carry an error: objects get their own shadow, the rest ErrorField."""
    if field.type in registry and not is_primitive(field.type):
        type_name = field.type + REQUEST_ERROR_SUFFIX
    else:
        type_name = ERROR_FIELD_OBJECT_NAME
    return Field(name=field.name, description=field.description, type=type_name, modifiers=[MODIFIER_NULLABLE])


def generate_request_errors(service: Service) -> Service:
    """Append ``<Object>RequestError`` and ``<Resource><Endpoint>RequestError`` objects."""
    result = service.model_copy(deep=True)
    registry = object_registry(service.objects)

    for type_name in reachable_types(service):
        name = type_name + REQUEST_ERROR_SUFFIX
        if result.has_object(name):
            continue
        obj = registry[type_name]
        result.objects.append(
            Object(
                name=name,
                description=f"Request error object for {type_name}",
                fields=[shadow_field(f, registry) for f in obj.fields],
            )
        )
        logger.debug("Generated %s", name)

    for resource in service.resources:
        for endpoint in resource.endpoints:
            if endpoint.name == ENDPOINT_SEARCH or not endpoint.request.body_params:
                continue
            name = resource.name + endpoint.name + REQUEST_ERROR_SUFFIX
            if result.has_object(name):
                continue
            result.objects.append(
                Object(
                    name=name,
                    description=f"Request error object for the {endpoint.name} endpoint of {resource.name}",
                    fields=[shadow_field(p, registry) for p in endpoint.request.body_params],
                )
            )
            logger.debug("Generated %s", name)

    return result
