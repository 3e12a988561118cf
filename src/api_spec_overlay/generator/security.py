"""Security declaration processing.

Two document shapes are accepted for ``security``:

* grouped: ``{Group: [{name: Scheme, type: ..., ...}, ...]}``. Each scheme is
  registered as ``Group_Scheme`` and each group becomes one requirement
  whose schemes must all be satisfied.
* flat: ``[[scheme_key, ...], ...]`` referring to ``security_schemes``;
  passed through as is.
"""

import logging

import pydantic

from api_spec_overlay.errors import SecurityConfigError
from api_spec_overlay.parser.base import SecurityScheme, Service

logger = logging.getLogger(__name__)


def process_security(service: Service) -> tuple[dict[str, SecurityScheme], list[list[str]] | None]:
    """Flatten the security declaration of ``service``.

    Returns the scheme catalog and the OR-list of AND-requirements, or None
    for the requirements when nothing is declared.
    """
    schemes = {key: scheme.model_copy() for key, scheme in service.security_schemes.items()}

    if not service.security:
        return schemes, None

    if isinstance(service.security, list):
        return schemes, [list(requirement) for requirement in service.security]

    requirements: list[list[str]] = []
    for group, declarations in service.security.items():
        keys: list[str] = []
        for index, declaration in enumerate(declarations):
            name = declaration.get("name")
            if not name:
                raise SecurityConfigError(f"security group '{group}' scheme {index} must have a 'name' field")
            try:
                scheme = SecurityScheme.model_validate(declaration)
            except pydantic.ValidationError as e:
                raise SecurityConfigError(f"security group '{group}' scheme '{name}': {e}") from e
            key = f"{group}_{name}"
            schemes[key] = scheme
            keys.append(key)
        requirements.append(keys)
        logger.debug("Security group %s expands to %s", group, keys)

    return schemes, requirements


def apply_security(service: Service) -> Service:
    """Return a copy of ``service`` with security in the flat form."""
    schemes, requirements = process_security(service)
    return service.model_copy(update={"security_schemes": schemes, "security": requirements}, deep=True)
