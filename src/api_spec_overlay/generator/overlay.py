"""Expansion pipeline: derive the complete service from the declared one."""

import logging
from functools import partial
from typing import Callable

from api_spec_overlay.generator.defaults import inject_defaults
from api_spec_overlay.generator.endpoints import synthesize_endpoints
from api_spec_overlay.generator.filters import generate_filters
from api_spec_overlay.generator.request_errors import generate_request_errors
from api_spec_overlay.generator.resources import materialize_resources
from api_spec_overlay.generator.security import apply_security
from api_spec_overlay.naming import pluralize as default_pluralize
from api_spec_overlay.parser.base import Service

logger = logging.getLogger(__name__)

Stage = Callable[[Service], Service]


def overlay_stages(pluralize: Callable[[str], str] = default_pluralize) -> list[tuple[str, Stage]]:
    """The expansion stages in the order they run."""
    return [
        ("defaults", inject_defaults),
        ("resources", materialize_resources),
        ("filters", generate_filters),
        ("endpoints", partial(synthesize_endpoints, pluralize=pluralize)),
        ("request_errors", generate_request_errors),
    ]


def apply_overlay(service: Service, pluralize: Callable[[str], str] = default_pluralize) -> Service:
    """Run every stage; each one returns a new Service and leaves its input untouched.

    Every stage skips names that already exist, so expanding an expanded
    service changes nothing.
    """
    result = service
    for name, stage in overlay_stages(pluralize):
        result = stage(result)
        logger.debug("Stage %s done: %d enums, %d objects", name, len(result.enums), len(result.objects))
    return result


def expand(service: Service, pluralize: Callable[[str], str] = default_pluralize) -> Service:
    """Security flattening followed by the overlay stages."""
    return apply_overlay(apply_security(service), pluralize=pluralize)
