"""Name formatting helpers shared by the generators."""

import re

# Upper-cased when they appear after the first word of a camelCase name.
INITIALISMS = {"id", "uuid", "url", "uri", "http", "https", "json", "xml", "html", "sql", "ip", "ui"}

_ES_SUFFIXES = ("s", "x", "z", "ch", "sh")
_SINGULAR_S_SUFFIXES = ("ss", "us", "is")


def to_kebab_case(name: str) -> str:
    """Lower-case ``name`` and turn underscores and spaces into dashes.

    Capital letters do not start a new word: ``UserProfile`` -> ``userprofile``.
    """
    return re.sub(r"[_ ]", "-", name.lower())


def camel_case(name: str) -> str:
    """Convert a snake_case name to lowerCamelCase (``user_id`` -> ``userID``)."""
    words = [w for w in name.split("_") if w]
    if not words:
        return ""

    parts = [words[0].lower()]
    for word in words[1:]:
        if word.lower() in INITIALISMS:
            parts.append(word.upper())
        else:
            parts.append(word[:1].upper() + word[1:].lower())
    return "".join(parts)


def pluralize(name: str) -> str:
    """Plural form of an English noun, using suffix rules only."""
    if not name:
        return name
    lowered = name.lower()
    if lowered.endswith("y") and len(name) > 1 and lowered[-2] not in "aeiou":
        return name[:-1] + "ies"
    # Already plural ("Users"), but not "Address" or "Status".
    if lowered.endswith("s") and not lowered.endswith(_SINGULAR_S_SUFFIXES):
        return name
    if lowered.endswith(_ES_SUFFIXES):
        return name + "es"
    return name + "s"
