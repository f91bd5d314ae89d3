"""Identifier casing helpers."""

from __future__ import annotations

import re

# Words are lowercase runs (optionally led by one capital), acronyms, or digits
_WORD_RE = re.compile(r"[A-Z]?[a-z0-9]+|[A-Z]+(?![a-z])")


def words(value: str) -> list[str]:
    """Split a name on case boundaries, digits and separators."""
    return _WORD_RE.findall(value)


def pascal(value: str) -> str:
    """Convert a name to PascalCase.

    Examples:
        "getPetById" -> "GetPetById"
        "list_pets" -> "ListPets"
        "swagger petstore" -> "SwaggerPetstore"
    """
    return "".join(word[:1].upper() + word[1:] for word in words(value))


def camel(value: str) -> str:
    """Convert a name to camelCase."""
    result = pascal(value)
    return result[:1].lower() + result[1:]


def sanitize(
    value: str,
    *,
    whitespace: str | None = None,
    underscore: str | None = None,
    dash: str | None = None,
    dot: str | None = None,
) -> str:
    """Strip characters that cannot be part of an identifier.

    Whitespace, underscores, dashes and dots are kept unless a replacement is given.
    """
    if whitespace is not None:
        value = re.sub(r"\s+", whitespace, value)
    if underscore is not None:
        value = value.replace("_", underscore)
    if dash is not None:
        value = value.replace("-", dash)
    if dot is not None:
        value = value.replace(".", dot)
    return re.sub(r"[^\w\s.\-$]", "", value)
