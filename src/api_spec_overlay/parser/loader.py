"""Parse specification documents into fully expanded services.

Every entry point decodes, validates the declared service (with source
positions), expands it and validates the result again.
"""

import logging
from pathlib import Path
from typing import Callable

from api_spec_overlay.errors import DecodeError, InputError, ValidationError
from api_spec_overlay.generator.overlay import expand
from api_spec_overlay.generator.validator import validate_service
from api_spec_overlay.naming import pluralize as default_pluralize
from api_spec_overlay.parser.base import Service
from api_spec_overlay.parser.detect import FORMAT_JSON, FORMAT_YAML, detect_format
from api_spec_overlay.parser.document import decode_service
from api_spec_overlay.parser.position import enhance_error

logger = logging.getLogger(__name__)

VALIDATION_PREFIX = "validation failed"


def validate_document(service: Service, text: str | None = None) -> None:
    """Validate ``service``, annotating failures with positions in ``text``."""
    try:
        validate_service(service)
    except ValidationError as e:
        if text is not None:
            e = enhance_error(e, text)
        raise e.wrap(VALIDATION_PREFIX) from None


def parse_service(text: str, fmt: str, pluralize: Callable[[str], str] = default_pluralize) -> Service:
    service = decode_service(text, fmt)
    validate_document(service, text)
    expanded = expand(service, pluralize=pluralize)
    validate_document(expanded)
    logger.debug(
        "Parsed service %s: %d resources, %d objects after expansion",
        expanded.name,
        len(expanded.resources),
        len(expanded.objects),
    )
    return expanded


def parse_service_from_yaml(data: bytes | str) -> Service:
    return parse_service(_text(data), FORMAT_YAML)


def parse_service_from_json(data: bytes | str) -> Service:
    return parse_service(_text(data), FORMAT_JSON)


def parse_service_from_bytes(data: bytes, ext: str) -> Service:
    """Parse ``data`` using the format implied by the file extension ``ext``."""
    if not ext.startswith("."):
        ext = "." + ext
    return parse_service(_text(data), detect_format(Path("document" + ext)))


def parse_service_from_file(path: Path | str) -> Service:
    path = Path(path)
    fmt = detect_format(path)
    if not path.is_file():
        raise InputError(f"specification file not found: {path}")
    logger.info("Reading specification %s", path)
    return parse_service(_text(path.read_bytes()), fmt)


def _text(data: bytes | str) -> str:
    if isinstance(data, bytes):
        try:
            return data.decode("utf-8")
        except UnicodeDecodeError as e:
            raise DecodeError(f"document is not valid UTF-8: {e}") from e
    return data
