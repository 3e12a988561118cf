"""Default catalog: error enums and objects, pagination and audit metadata.

Every expanded service carries these building blocks exactly once. An
entity that already exists under a reserved name is left as declared.
"""

import logging

from api_spec_overlay.parser.base import (
    ERROR_CODE_ENUM_NAME,
    ERROR_FIELD_CODE_ENUM_NAME,
    ERROR_FIELD_OBJECT_NAME,
    ERROR_OBJECT_NAME,
    META_OBJECT_NAME,
    MODIFIER_NULLABLE,
    PAGINATION_OBJECT_NAME,
    TYPE_INT,
    TYPE_STRING,
    TYPE_TIMESTAMP,
    TYPE_UUID,
    Enum,
    EnumValue,
    Field,
    Object,
    Service,
)

logger = logging.getLogger(__name__)


def error_code_enum() -> Enum:
    return Enum(
        name=ERROR_CODE_ENUM_NAME,
        description="Standard error codes used in API responses",
        values=[
            EnumValue(
                name="BadRequest",
                description="The request was malformed or contained invalid parameters. 400 status code",
            ),
            EnumValue(
                name="Unauthorized",
                description="The request is missing valid authentication credentials. 401 status code",
            ),
            EnumValue(
                name="Forbidden",
                description="Request is authenticated, but the user is not allowed to perform the operation. "
                "403 status code",
            ),
            EnumValue(
                name="NotFound",
                description="The requested resource or endpoint does not exist. This can happen if a resource ID "
                "is invalid or the route is unknown. 404 status code",
            ),
            EnumValue(
                name="Conflict",
                description="The request could not be completed due to a conflict, such as a resource with "
                "dependencies that prevent deletion. 409 status code",
            ),
            EnumValue(
                name="UnprocessableEntity",
                description="The request was well-formed but failed validation (e.g. invalid field format or "
                "constraints), 422 status code",
            ),
            EnumValue(name="RateLimited", description="When the rate limit has been exceeded, 429 status code"),
            EnumValue(name="Internal", description="Some serverside issue, 5xx status code"),
        ],
    )


def error_field_code_enum() -> Enum:
    return Enum(
        name=ERROR_FIELD_CODE_ENUM_NAME,
        description="Error codes for field-level validation errors",
        values=[
            EnumValue(
                name="AlreadyExists",
                description="The field value already exists and violates a unique constraint "
                "(e.g., duplicate email address or username)",
            ),
            EnumValue(name="Required", description="The field is required but is missing or empty in the request"),
            EnumValue(
                name="NotFound",
                description="A referenced resource or relation does not exist "
                "(e.g., foreign key constraint violation)",
            ),
            EnumValue(
                name="InvalidValue",
                description="The field contains an invalid value "
                "(e.g., invalid enum value, malformed data, or value out of allowed range)",
            ),
        ],
    )


def error_object() -> Object:
    return Object(
        name=ERROR_OBJECT_NAME,
        description="Standard error response object containing error code and message",
        fields=[
            Field(
                name="Code",
                description="The specific error code indicating the type of error",
                type=ERROR_CODE_ENUM_NAME,
            ),
            Field(
                name="Message",
                description="Human-readable error message providing additional details",
                type=TYPE_STRING,
            ),
        ],
    )


def error_field_object() -> Object:
    return Object(
        name=ERROR_FIELD_OBJECT_NAME,
        description="Field-specific error information containing error code and message for validation errors",
        fields=[
            Field(
                name="Code",
                description="The specific error code indicating the type of field validation error",
                type=ERROR_FIELD_CODE_ENUM_NAME,
            ),
            Field(
                name="Message",
                description="Human-readable error message providing details about the field validation error",
                type=TYPE_STRING,
            ),
        ],
    )


def pagination_object() -> Object:
    return Object(
        name=PAGINATION_OBJECT_NAME,
        description="Pagination parameters for controlling result sets in list operations",
        fields=[
            Field(
                name="offset",
                description="Number of items to skip from the beginning of the result set",
                type=TYPE_INT,
            ),
            Field(
                name="limit",
                description="Maximum number of items to return in the result set",
                type=TYPE_INT,
            ),
            Field(
                name="total",
                description="Total number of items available for pagination",
                type=TYPE_INT,
            ),
        ],
    )


def meta_object() -> Object:
    return Object(
        name=META_OBJECT_NAME,
        description="Meta contains information about the creation and modification of a resource "
        "for auditing purposes",
        fields=[
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
        ],
    )


def inject_defaults(service: Service) -> Service:
    """Append the default enums and objects that are not declared yet."""
    result = service.model_copy(deep=True)

    for enum in (error_code_enum(), error_field_code_enum()):
        if result.has_enum(enum.name):
            logger.debug("Enum %s already declared, keeping it", enum.name)
            continue
        result.enums.append(enum)

    for obj in (error_object(), error_field_object(), pagination_object(), meta_object()):
        if result.has_object(obj.name):
            logger.debug("Object %s already declared, keeping it", obj.name)
            continue
        result.objects.append(obj)

    return result
