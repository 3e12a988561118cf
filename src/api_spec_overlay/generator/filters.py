"""Filter families for search queries.

For a filterable object ``O`` six objects are derived: the ``OFilter``
dispatch object and one object per operator family (equals, range,
contains, like, null). Nested object fields point at the matching family
of the nested type, so the whole reachable object graph is covered.
"""

import logging

from api_spec_overlay.generator.classify import (
    can_be_null,
    is_comparable,
    is_object,
    is_string,
    object_registry,
)
from api_spec_overlay.parser.base import (
    ENDPOINT_SEARCH,
    MODIFIER_ARRAY,
    MODIFIER_NULLABLE,
    TYPE_BOOL,
    TYPE_TIMESTAMP,
    Field,
    Object,
    Service,
)

logger = logging.getLogger(__name__)

FILTER_SUFFIX = "Filter"
FILTER_EQUALS_SUFFIX = "FilterEquals"
FILTER_RANGE_SUFFIX = "FilterRange"
FILTER_CONTAINS_SUFFIX = "FilterContains"
FILTER_LIKE_SUFFIX = "FilterLike"
FILTER_NULL_SUFFIX = "FilterNull"

FILTER_SUFFIXES = (
    FILTER_SUFFIX,
    FILTER_EQUALS_SUFFIX,
    FILTER_RANGE_SUFFIX,
    FILTER_CONTAINS_SUFFIX,
    FILTER_LIKE_SUFFIX,
    FILTER_NULL_SUFFIX,
)

# (field name, description prefix, family suffix) of the dispatch object
_DISPATCH_FIELDS = (
    ("Equals", "Equality filters for ", FILTER_EQUALS_SUFFIX),
    ("NotEquals", "Inequality filters for ", FILTER_EQUALS_SUFFIX),
    ("GreaterThan", "Greater than filters for ", FILTER_RANGE_SUFFIX),
    ("SmallerThan", "Smaller than filters for ", FILTER_RANGE_SUFFIX),
    ("GreaterOrEqual", "Greater than or equal filters for ", FILTER_RANGE_SUFFIX),
    ("SmallerOrEqual", "Smaller than or equal filters for ", FILTER_RANGE_SUFFIX),
    ("Contains", "Contains filters for ", FILTER_CONTAINS_SUFFIX),
    ("NotContains", "Not contains filters for ", FILTER_CONTAINS_SUFFIX),
    ("Like", "LIKE filters for ", FILTER_LIKE_SUFFIX),
    ("NotLike", "NOT LIKE filters for ", FILTER_LIKE_SUFFIX),
    ("Null", "Null filters for ", FILTER_NULL_SUFFIX),
    ("NotNull", "Not null filters for ", FILTER_NULL_SUFFIX),
)


def family_names(object_name: str) -> list[str]:
    return [object_name + suffix for suffix in FILTER_SUFFIXES]


def _filter_field(field: Field, type_name: str, nullable: bool = False, array: bool = False) -> Field:
    modifiers = []
    if nullable:
        modifiers.append(MODIFIER_NULLABLE)
    if array:
        modifiers.append(MODIFIER_ARRAY)
    return Field(name=field.name, description=field.description, type=type_name, modifiers=modifiers)


def build_dispatch(name: str) -> Object:
    fields = [
        Field(name=field_name, description=prefix + name, type=name + suffix, modifiers=[MODIFIER_NULLABLE])
        for field_name, prefix, suffix in _DISPATCH_FIELDS
    ]
    fields.append(
        Field(
            name="OrCondition",
            description="OrCondition decides if this filter is within an OR-condition or AND-condition",
            type=TYPE_BOOL,
        )
    )
    fields.append(
        Field(
            name="NestedFilters",
            description=f"NestedFilters of the {name}, useful for more complex filters",
            type=name + FILTER_SUFFIX,
            modifiers=[MODIFIER_NULLABLE, MODIFIER_ARRAY],
        )
    )
    return Object(name=name + FILTER_SUFFIX, description="Filter object for " + name, fields=fields)


def build_equals(obj: Object, objects: list[Object]) -> Object:
    fields = []
    for field in obj.fields:
        if is_object(field.type, objects):
            fields.append(_filter_field(field, field.type + FILTER_EQUALS_SUFFIX, nullable=True))
        else:
            fields.append(_filter_field(field, field.type, nullable=True))
    return Object(
        name=obj.name + FILTER_EQUALS_SUFFIX,
        description="Equality/Inequality filter fields for " + obj.name,
        fields=fields,
    )


def build_range(obj: Object, objects: list[Object]) -> Object:
    fields = []
    for field in obj.fields:
        if is_comparable(field.type):
            fields.append(_filter_field(field, field.type, nullable=True))
        elif is_object(field.type, objects):
            fields.append(_filter_field(field, field.type + FILTER_RANGE_SUFFIX, nullable=True))
    return Object(name=obj.name + FILTER_RANGE_SUFFIX, description="Range filter fields for " + obj.name, fields=fields)


def build_contains(obj: Object, objects: list[Object]) -> Object:
    fields = []
    for field in obj.fields:
        if field.type == TYPE_TIMESTAMP:
            continue
        if is_object(field.type, objects):
            fields.append(_filter_field(field, field.type + FILTER_CONTAINS_SUFFIX, nullable=True))
        else:
            fields.append(_filter_field(field, field.type, array=True))
    return Object(
        name=obj.name + FILTER_CONTAINS_SUFFIX,
        description="Contains filter fields for " + obj.name,
        fields=fields,
    )


def build_like(obj: Object, objects: list[Object]) -> Object:
    fields = []
    for field in obj.fields:
        if is_string(field.type):
            fields.append(_filter_field(field, field.type, nullable=True))
        elif is_object(field.type, objects):
            fields.append(_filter_field(field, field.type + FILTER_LIKE_SUFFIX, nullable=True))
    return Object(name=obj.name + FILTER_LIKE_SUFFIX, description="LIKE filter fields for " + obj.name, fields=fields)


def build_null(obj: Object) -> Object:
    # Nested objects get a plain is-null flag, not their own family.
    fields = [_filter_field(field, TYPE_BOOL, nullable=True) for field in obj.fields if can_be_null(field)]
    return Object(name=obj.name + FILTER_NULL_SUFFIX, description="Null filter fields for " + obj.name, fields=fields)


def build_family(obj: Object, objects: list[Object]) -> list[Object]:
    """The six filter objects of ``obj``, dispatch object first."""
    return [
        build_dispatch(obj.name),
        build_equals(obj, objects),
        build_range(obj, objects),
        build_contains(obj, objects),
        build_like(obj, objects),
        build_null(obj),
    ]


def filter_roots(service: Service) -> list[str]:
    """Type names that need a filter family before closing over nested objects.

    Readable resources contribute their read object. Every resource
    contributes the types it accepts in Create and Update bodies and the
    body parameters of its own non-search endpoints. The result is the union
    of both groups, not their intersection, so every body type gets a family.
    """
    roots: list[str] = []
    for resource in service.resources:
        if resource.has_read_operation():
            roots.append(resource.name)
        if resource.has_create_operation():
            roots.extend(p.type for p in resource.get_create_body_params())
        if resource.has_update_operation():
            roots.extend(p.type for p in resource.get_update_body_params())
        for endpoint in resource.endpoints:
            if endpoint.name == ENDPOINT_SEARCH:
                continue
            roots.extend(param.type for param in endpoint.request.body_params)
    return roots


def filterable_objects(service: Service) -> list[Object]:
    """Objects reachable from the filter roots, in discovery order."""
    registry = object_registry(service.objects)
    visited: set[str] = set()
    found: list[Object] = []

    def visit(type_name: str) -> None:
        if type_name in visited or type_name not in registry:
            return
        visited.add(type_name)
        obj = registry[type_name]
        found.append(obj)
        for field in obj.fields:
            visit(field.type)

    for root in filter_roots(service):
        visit(root)
    return found


def generate_filters(service: Service) -> Service:
    """Append filter families for every filterable object that lacks them."""
    result = service.model_copy(deep=True)
    objects = list(result.objects)

    for obj in filterable_objects(result):
        for family_member in build_family(obj, objects):
            if result.has_object(family_member.name):
                logger.debug("Filter object %s already exists", family_member.name)
                continue
            result.objects.append(family_member)
        logger.debug("Generated filter family for %s", obj.name)

    return result
