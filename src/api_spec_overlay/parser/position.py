"""Best-effort source positions for validation errors.

This is a keyword heuristic, not a source map: the document is composed
into a PyYAML node tree and the first mapping key equal to the error's
category (``operations``, ``type``, ``modifiers``, ``retry``) is reported.
"""

import logging

import yaml

from api_spec_overlay.errors import ValidationError

logger = logging.getLogger(__name__)


def find_key(node: yaml.Node, key: str) -> yaml.Node | None:
    """First key node named ``key``, in document order."""
    stack = [node]
    while stack:
        current = stack.pop()
        if isinstance(current, yaml.MappingNode):
            children = []
            for key_node, value_node in current.value:
                if isinstance(key_node, yaml.ScalarNode) and key_node.value == key:
                    return key_node
                children.append(value_node)
            stack.extend(reversed(children))
        elif isinstance(current, yaml.SequenceNode):
            stack.extend(reversed(current.value))
    return None


def locate(text: str, key: str) -> tuple[int, int] | None:
    """1-based (line, column) of the first ``key`` in ``text``, or None."""
    root = yaml.compose(text)
    if root is None:
        return None
    node = find_key(root, key)
    if node is None:
        return None
    return node.start_mark.line + 1, node.start_mark.column + 1


def enhance_error(error: ValidationError, text: str) -> ValidationError:
    """Annotate ``error`` with a position in ``text`` when one can be found.

    Any failure to compose the document leaves the error unannotated.
    """
    if not error.path:
        return error
    try:
        position = locate(text, error.path)
    except yaml.YAMLError as e:
        logger.debug("Could not compose document for error position: %s", e)
        return error
    if position is None:
        return error
    return error.with_position(*position)
