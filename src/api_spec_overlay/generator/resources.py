"""Materialize readable resources into their read objects."""

import logging

from api_spec_overlay.parser.base import (
    META_OBJECT_NAME,
    MODIFIER_NULLABLE,
    TYPE_BOOL,
    TYPE_DATE,
    TYPE_INT,
    TYPE_STRING,
    TYPE_TIMESTAMP,
    TYPE_UUID,
    Field,
    Object,
    Resource,
    Service,
)

logger = logging.getLogger(__name__)

EXAMPLE_VALUES = {
    TYPE_UUID: "123e4567-e89b-12d3-a456-426614174000",
    TYPE_DATE: "2024-01-15",
    TYPE_TIMESTAMP: "2024-01-15T10:30:00Z",
    TYPE_STRING: "example",
    TYPE_INT: "1",
    TYPE_BOOL: "true",
}


def auto_columns() -> list[Field]:
    """Identity and audit columns prepended to every read object."""
    return [
        Field(name="ID", description="Unique identifier for the resource", type=TYPE_UUID),
        Field(name="CreatedAt", description="Timestamp when the resource was created", type=TYPE_TIMESTAMP),
        Field(
            name="CreatedBy",
            description="User who created the resource",
            type=TYPE_UUID,
            modifiers=[MODIFIER_NULLABLE],
        ),
        Field(name="UpdatedAt", description="Timestamp when the resource was last updated", type=TYPE_TIMESTAMP),
        Field(
            name="UpdatedBy",
            description="User who last updated the resource",
            type=TYPE_UUID,
            modifiers=[MODIFIER_NULLABLE],
        ),
    ]


def meta_column() -> Field:
    return Field(
        name=META_OBJECT_NAME,
        description="Audit information about the creation and modification of the resource",
        type=META_OBJECT_NAME,
    )


def with_example(field: Field) -> Field:
    """Return ``field`` with a sample value filled in for primitive types."""
    if field.example or field.type not in EXAMPLE_VALUES:
        return field
    return field.model_copy(update={"example": EXAMPLE_VALUES[field.type]})


def build_read_object(resource: Resource) -> Object:
    """The read shape of ``resource``: auto columns, then its Read fields in order."""
    if resource.skip_auto_columns:
        fields = [meta_column()]
    else:
        fields = [with_example(f) for f in auto_columns()]

    for resource_field in resource.get_readable_fields():
        fields.append(with_example(resource_field.to_field()))

    return Object(name=resource.name, description=resource.description, fields=fields)


def materialize_resources(service: Service) -> Service:
    """Add a read object for each resource with the Read operation."""
    result = service.model_copy(deep=True)

    for resource in result.resources:
        if not resource.has_read_operation():
            continue
        if result.has_object(resource.name):
            logger.debug("Object %s already exists, not materializing resource", resource.name)
            continue
        result.objects.append(build_read_object(resource))
        logger.debug("Materialized resource %s", resource.name)

    return result
