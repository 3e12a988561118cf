"""Standard CRUD, list and search endpoints for every resource."""

import logging
from typing import Callable

from api_spec_overlay.generator.filters import FILTER_SUFFIX
from api_spec_overlay.naming import pluralize as default_pluralize
from api_spec_overlay.parser.base import (
    ENDPOINT_CREATE,
    ENDPOINT_DELETE,
    ENDPOINT_GET,
    ENDPOINT_LIST,
    ENDPOINT_SEARCH,
    ENDPOINT_UPDATE,
    MODIFIER_NULLABLE,
    Endpoint,
    EndpointRequest,
    EndpointResponse,
    Field,
    Resource,
    Service,
    create_data_field,
    create_id_param,
    create_limit_param,
    create_offset_param,
    create_pagination_field,
)

logger = logging.getLogger(__name__)

CONTENT_TYPE_JSON = "application/json"


def create_endpoint(resource: Resource, plural: str) -> Endpoint:
    return Endpoint(
        name=ENDPOINT_CREATE,
        title=f"Create {resource.name}",
        summary=f"Create a new {resource.name}",
        description=f"Create a new {resource.name}",
        method="POST",
        path="",
        request=EndpointRequest(content_type=CONTENT_TYPE_JSON, body_params=resource.get_create_body_params()),
        response=EndpointResponse(content_type=CONTENT_TYPE_JSON, status_code=201, body_object=resource.name),
    )


def update_endpoint(resource: Resource, plural: str) -> Endpoint:
    return Endpoint(
        name=ENDPOINT_UPDATE,
        title=f"Update {resource.name}",
        summary=f"Update a {resource.name}",
        description=f"Update a {resource.name}",
        method="PATCH",
        path="/{id}",
        request=EndpointRequest(
            content_type=CONTENT_TYPE_JSON,
            path_params=[create_id_param(f"The unique identifier of the {resource.name} to update")],
            body_params=resource.get_update_body_params(),
        ),
        response=EndpointResponse(content_type=CONTENT_TYPE_JSON, status_code=200, body_object=resource.name),
    )


def delete_endpoint(resource: Resource, plural: str) -> Endpoint:
    return Endpoint(
        name=ENDPOINT_DELETE,
        title=f"Delete {resource.name}",
        summary=f"Delete a {resource.name}",
        description=f"Delete a {resource.name}",
        method="DELETE",
        path="/{id}",
        request=EndpointRequest(
            path_params=[create_id_param(f"The unique identifier of the {resource.name} to delete")],
        ),
        response=EndpointResponse(status_code=204),
    )


def get_endpoint(resource: Resource, plural: str) -> Endpoint:
    return Endpoint(
        name=ENDPOINT_GET,
        title=f"Get {resource.name}",
        summary=f"Get a {resource.name} by ID",
        description=f"Get a {resource.name} by ID",
        method="GET",
        path="/{id}",
        request=EndpointRequest(
            path_params=[create_id_param(f"The unique identifier of the {resource.name} to retrieve")],
        ),
        response=EndpointResponse(content_type=CONTENT_TYPE_JSON, status_code=200, body_object=resource.name),
    )


def list_endpoint(resource: Resource, plural: str) -> Endpoint:
    return Endpoint(
        name=ENDPOINT_LIST,
        title=f"List {plural}",
        summary=f"List all {plural}",
        description=f"Returns a paginated list of all {plural}",
        method="GET",
        path="",
        request=EndpointRequest(query_params=[create_limit_param(plural), create_offset_param(plural)]),
        response=EndpointResponse(
            content_type=CONTENT_TYPE_JSON,
            status_code=200,
            body_fields=[create_data_field(resource.name), create_pagination_field()],
        ),
    )


def search_endpoint(resource: Resource, plural: str) -> Endpoint:
    return Endpoint(
        name=ENDPOINT_SEARCH,
        title=f"Search {plural}",
        summary=f"Search {plural}",
        description=f"Search {plural} with filters and pagination",
        method="POST",
        path="/_search",
        request=EndpointRequest(
            content_type=CONTENT_TYPE_JSON,
            query_params=[create_limit_param(plural), create_offset_param(plural)],
            body_params=[
                Field(
                    name="Filter",
                    description=f"Filters to apply to the {plural} search",
                    type=resource.name + FILTER_SUFFIX,
                    modifiers=[MODIFIER_NULLABLE],
                )
            ],
        ),
        response=EndpointResponse(
            content_type=CONTENT_TYPE_JSON,
            status_code=200,
            body_fields=[create_data_field(resource.name), create_pagination_field()],
        ),
    )


# (endpoint name, gate, builder) in emission order
STANDARD_ENDPOINTS: list[tuple[str, Callable[[Resource], bool], Callable[[Resource, str], Endpoint]]] = [
    (ENDPOINT_CREATE, Resource.has_create_operation, create_endpoint),
    (ENDPOINT_UPDATE, Resource.has_update_operation, update_endpoint),
    (ENDPOINT_DELETE, Resource.has_delete_operation, delete_endpoint),
    (ENDPOINT_GET, Resource.has_read_operation, get_endpoint),
    (ENDPOINT_LIST, Resource.has_read_operation, list_endpoint),
    (ENDPOINT_SEARCH, Resource.has_read_operation, search_endpoint),
]


def synthesize_endpoints(service: Service, pluralize: Callable[[str], str] = default_pluralize) -> Service:
    """Append the standard endpoints each resource is missing.

    Hand-written endpoints keep their position and are never replaced.
    """
    result = service.model_copy(deep=True)

    for resource in result.resources:
        plural = resource.plural_name(pluralize)
        for name, gate, build in STANDARD_ENDPOINTS:
            if not gate(resource) or resource.has_endpoint(name):
                continue
            resource.endpoints.append(build(resource, plural))
            logger.debug("Added %s endpoint to %s", name, resource.name)

    return result
