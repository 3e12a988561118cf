"""Predicates over declared field types, shared by the generators."""

from api_spec_overlay.parser.base import (
    PRIMITIVE_TYPES,
    TYPE_DATE,
    TYPE_INT,
    TYPE_STRING,
    TYPE_TIMESTAMP,
    Field,
    Object,
)

COMPARABLE_TYPES = (TYPE_INT, TYPE_DATE, TYPE_TIMESTAMP)


def is_primitive(type_name: str) -> bool:
    return type_name in PRIMITIVE_TYPES


def is_comparable(type_name: str) -> bool:
    """Types that support range operators."""
    return type_name in COMPARABLE_TYPES


def is_string(type_name: str) -> bool:
    """Types that support LIKE operators."""
    return type_name == TYPE_STRING


def can_be_null(field: Field) -> bool:
    return field.is_nullable() or field.is_array()


def is_object(type_name: str, objects: list[Object]) -> bool:
    """True when ``type_name`` names one of ``objects``. Primitives and enums never do."""
    if is_primitive(type_name):
        return False
    return any(obj.name == type_name for obj in objects)


def object_registry(objects: list[Object]) -> dict[str, Object]:
    """Name -> Object lookup keeping the first declaration of each name."""
    registry: dict[str, Object] = {}
    for obj in objects:
        registry.setdefault(obj.name, obj)
    return registry
