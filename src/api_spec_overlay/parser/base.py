"""Data model of the resource-oriented API description language.

YAML and JSON documents are decoded into these models. The expansion
pipeline reads them and always builds new Service values; it never
mutates the models it was given.

Name lookups scan in declaration order and return the first match:
duplicate names are tolerated, never merged.
"""

import datetime
import json
from typing import Any, Callable

import pydantic
from pydantic import BaseModel, ConfigDict, field_validator

from api_spec_overlay.naming import camel_case, pluralize, to_kebab_case

# CRUD operations
OPERATION_CREATE = "Create"
OPERATION_READ = "Read"
OPERATION_UPDATE = "Update"
OPERATION_DELETE = "Delete"
OPERATIONS = (OPERATION_CREATE, OPERATION_READ, OPERATION_UPDATE, OPERATION_DELETE)

# Primitive field types
TYPE_UUID = "UUID"
TYPE_DATE = "Date"
TYPE_TIMESTAMP = "Timestamp"
TYPE_STRING = "String"
TYPE_INT = "Int"
TYPE_BOOL = "Bool"
PRIMITIVE_TYPES = (TYPE_UUID, TYPE_DATE, TYPE_TIMESTAMP, TYPE_STRING, TYPE_INT, TYPE_BOOL)

# Field modifiers
MODIFIER_NULLABLE = "Nullable"
MODIFIER_ARRAY = "Array"
MODIFIERS = (MODIFIER_NULLABLE, MODIFIER_ARRAY)

# Reserved entities injected into every expanded service
ERROR_CODE_ENUM_NAME = "ErrorCode"
ERROR_OBJECT_NAME = "Error"
ERROR_FIELD_CODE_ENUM_NAME = "ErrorFieldCode"
ERROR_FIELD_OBJECT_NAME = "ErrorField"
PAGINATION_OBJECT_NAME = "Pagination"
META_OBJECT_NAME = "Meta"

# Standard endpoint names
ENDPOINT_CREATE = "Create"
ENDPOINT_UPDATE = "Update"
ENDPOINT_DELETE = "Delete"
ENDPOINT_GET = "Get"
ENDPOINT_LIST = "List"
ENDPOINT_SEARCH = "Search"

LIST_LIMIT_DEFAULT = "50"
LIST_OFFSET_DEFAULT = "0"


class SpecModel(BaseModel):
    """Base for all document models: unknown keys are an error."""

    model_config = ConfigDict(extra="forbid", populate_by_name=True)


class EnumValue(SpecModel):
    name: str
    description: str = ""


class Enum(SpecModel):
    """An enumeration with its possible values."""

    name: str
    description: str = ""
    values: list[EnumValue] = []


class Field(SpecModel):
    """A field of an object, resource or endpoint.

    ``type`` is one of the primitive types or the name of a declared enum
    or object. ``default`` and ``example`` are kept as strings.
    """

    name: str
    description: str = ""
    type: str = ""
    default: str | None = None
    example: str | None = None
    modifiers: list[str] = []

    @field_validator("default", "example", mode="before")
    @classmethod
    def _scalar_to_str(cls, value: Any) -> Any:
        if isinstance(value, bool):
            return "true" if value else "false"
        if isinstance(value, (int, float)):
            return str(value)
        if isinstance(value, datetime.date):
            return value.isoformat()
        if isinstance(value, (list, dict)):
            return json.dumps(value)
        return value

    def is_array(self) -> bool:
        return MODIFIER_ARRAY in self.modifiers

    def is_nullable(self) -> bool:
        return MODIFIER_NULLABLE in self.modifiers

    def is_required(self, service: "Service") -> bool:
        """A field is required unless nullable, an array, defaulted or object-typed."""
        if self.is_nullable() or self.is_array():
            return False
        if self.default:
            return False
        return not service.is_object(self.type)

    def tag_json(self) -> str:
        """JSON property name used by generated clients."""
        return camel_case(self.name)


class ResourceField(Field):
    """A resource field, visible only in the listed operations."""

    operations: list[str] = []

    def has_create_operation(self) -> bool:
        return OPERATION_CREATE in self.operations

    def has_read_operation(self) -> bool:
        return OPERATION_READ in self.operations

    def has_update_operation(self) -> bool:
        return OPERATION_UPDATE in self.operations

    def has_delete_operation(self) -> bool:
        return OPERATION_DELETE in self.operations

    def to_field(self) -> Field:
        """Project to a plain Field, dropping the operation set."""
        return Field(**self.model_dump(exclude={"operations"}))


class Object(SpecModel):
    """A named, reusable collection of fields."""

    name: str
    description: str = ""
    fields: list[Field] = []

    def has_field(self, name: str) -> bool:
        return self.get_field(name) is not None

    def get_field(self, name: str) -> Field | None:
        for field in self.fields:
            if field.name == name:
                return field
        return None


class EndpointRequest(SpecModel):
    content_type: str = ""
    headers: list[Field] = []
    path_params: list[Field] = []
    query_params: list[Field] = []
    body_params: list[Field] = []

    def get_required_body_params(self, service: "Service") -> list[str]:
        """Names of the body parameters a client must send."""
        return [p.name for p in self.body_params if p.is_required(service)]


class EndpointResponse(SpecModel):
    """Success response of an endpoint.

    ``body_object`` names an object or resource returned as the whole body;
    it is None when the body is described by ``body_fields`` instead.
    """

    content_type: str = ""
    status_code: int = 0
    headers: list[Field] = []
    body_fields: list[Field] = []
    body_object: str | None = None


class Endpoint(SpecModel):
    """An endpoint of a resource. ``path`` excludes the resource segment."""

    name: str
    title: str = ""
    summary: str = ""
    description: str = ""
    method: str = ""
    path: str = ""
    request: EndpointRequest = pydantic.Field(default_factory=EndpointRequest)
    response: EndpointResponse = pydantic.Field(default_factory=EndpointResponse)

    def get_full_path(self, resource_name: str) -> str:
        return "/" + to_kebab_case(resource_name) + self.path


class Resource(SpecModel):
    """A CRUD entity that drives object and endpoint generation."""

    name: str
    description: str = ""
    operations: list[str] = []
    fields: list[ResourceField] = []
    endpoints: list[Endpoint] = []
    skip_auto_columns: bool = False

    def has_create_operation(self) -> bool:
        return OPERATION_CREATE in self.operations

    def has_read_operation(self) -> bool:
        return OPERATION_READ in self.operations

    def has_update_operation(self) -> bool:
        return OPERATION_UPDATE in self.operations

    def has_delete_operation(self) -> bool:
        return OPERATION_DELETE in self.operations

    def has_endpoint(self, name: str) -> bool:
        return any(e.name == name for e in self.endpoints)

    def get_create_body_params(self) -> list[Field]:
        return [f.to_field() for f in self.fields if f.has_create_operation()]

    def get_update_body_params(self) -> list[Field]:
        return [f.to_field() for f in self.fields if f.has_update_operation()]

    def get_readable_fields(self) -> list[ResourceField]:
        return [f for f in self.fields if f.has_read_operation()]

    def plural_name(self, plural: Callable[[str], str] = pluralize) -> str:
        return plural(self.name)


class SecurityScheme(SpecModel):
    """A security scheme definition, in OpenAPI terms."""

    type: str = ""
    description: str = ""
    name: str = ""
    in_: str = pydantic.Field("", alias="in")
    scheme: str = ""
    bearer_format: str = pydantic.Field("", alias="bearerFormat")


class ServiceContact(SpecModel):
    name: str = ""
    url: str = ""
    email: str = ""


class ServiceLicense(SpecModel):
    name: str = ""
    url: str = ""


class ServiceServer(SpecModel):
    url: str
    description: str = ""
    id: str = ""


class RetryBackoffConfiguration(SpecModel):
    """Backoff timings in milliseconds."""

    initial_interval: int = 500
    max_interval: int = 60000
    max_elapsed_time: int = 3600000
    exponent: float = 1.5


class RetryConfiguration(SpecModel):
    strategy: str = "backoff"
    backoff: RetryBackoffConfiguration = pydantic.Field(default_factory=RetryBackoffConfiguration)
    status_codes: list[str] = ["5XX"]
    retry_connection_errors: bool = True


class TimeoutConfiguration(SpecModel):
    timeout: int = 30000  # milliseconds


class Service(SpecModel):
    """Root of a specification document.

    ``security`` holds either the grouped form (group name -> list of
    scheme declarations) or the flat form (list of AND-lists of scheme
    keys into ``security_schemes``).
    """

    name: str = ""
    version: str = ""
    contact: ServiceContact | None = None
    license: ServiceLicense | None = None
    servers: list[ServiceServer] = []
    security_schemes: dict[str, SecurityScheme] = {}
    security: dict[str, list[dict[str, Any]]] | list[list[str]] | None = None
    retry: RetryConfiguration | None = None
    timeout: TimeoutConfiguration | None = None
    enums: list[Enum] = []
    objects: list[Object] = []
    resources: list[Resource] = []

    def has_enum(self, name: str) -> bool:
        return any(e.name == name for e in self.enums)

    def has_object(self, name: str) -> bool:
        return self.get_object(name) is not None

    def get_object(self, name: str) -> Object | None:
        for obj in self.objects:
            if obj.name == name:
                return obj
        return None

    def is_object(self, type_name: str) -> bool:
        """True when ``type_name`` refers to a declared object, not a primitive."""
        if type_name in PRIMITIVE_TYPES:
            return False
        return self.has_object(type_name)


def create_limit_param(plural: str) -> Field:
    return Field(
        name="limit",
        description=f"The maximum number of {plural} to return (default: {LIST_LIMIT_DEFAULT})",
        type=TYPE_INT,
        default=LIST_LIMIT_DEFAULT,
    )


def create_offset_param(plural: str) -> Field:
    return Field(
        name="offset",
        description=f"The number of {plural} to skip for pagination",
        type=TYPE_INT,
        default=LIST_OFFSET_DEFAULT,
    )


def create_pagination_field() -> Field:
    return Field(name=PAGINATION_OBJECT_NAME, description="Pagination information", type=PAGINATION_OBJECT_NAME)


def create_data_field(resource_name: str) -> Field:
    return Field(
        name="data",
        description=f"Array of {resource_name} objects",
        type=resource_name,
        modifiers=[MODIFIER_ARRAY],
    )


def create_id_param(description: str) -> Field:
    return Field(name="id", description=description, type=TYPE_UUID)
