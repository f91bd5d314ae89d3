"""Reference resolution against the loaded OpenAPI documents."""

from __future__ import annotations

from typing import TYPE_CHECKING, Any, NamedTuple

from clientgen.core.case import pascal
from clientgen.spec.verbs import GeneratorImport

if TYPE_CHECKING:
    from clientgen.spec.output import GeneratorContext


class RefResolutionError(LookupError):
    """Raised when a $ref cannot be followed."""


class ResolvedRef(NamedTuple):
    """A dereferenced object and the imports its references imply."""

    schema: dict[str, Any]
    imports: list[GeneratorImport]


def split_ref(ref: str) -> tuple[str | None, list[str]]:
    """Split a reference into its document part and unescaped JSON pointer tokens.

    "#/components/parameters/Limit" -> (None, ["components", "parameters", "Limit"])
    "common.yaml#/components/schemas/Pet" -> ("common.yaml", ["components", "schemas", "Pet"])
    """
    document, _, pointer = ref.partition("#")
    tokens = [
        token.replace("~1", "/").replace("~0", "~") for token in pointer.split("/") if token
    ]
    return document or None, tokens


def _spec_key_for(document: str, context: GeneratorContext) -> str:
    if document in context.specs:
        return document
    stem = document.rsplit("/", 1)[-1].rsplit(".", 1)[0]
    if stem in context.specs:
        return stem
    msg = f"Unknown referenced document '{document}'"
    raise RefResolutionError(msg)


def resolve_ref(obj: dict[str, Any], context: GeneratorContext) -> ResolvedRef:
    """Follow a chain of $ref until a concrete object is reached.

    Args:
        obj: A concrete object or a ``{"$ref": ...}`` reference
        context: Run context holding the loaded documents

    Returns:
        ResolvedRef with the concrete object and one import per followed reference

    Raises:
        RefResolutionError: If a reference is dangling or cyclic
    """
    imports: list[GeneratorImport] = []
    seen: set[tuple[str, str]] = set()
    spec_key = context.spec_key
    current = obj

    while isinstance(current, dict) and "$ref" in current:
        ref = current["$ref"]
        document, tokens = split_ref(ref)
        if document:
            spec_key = _spec_key_for(document, context)

        marker = (spec_key, "/".join(tokens))
        if marker in seen:
            msg = f"Cyclic reference '{ref}'"
            raise RefResolutionError(msg)
        seen.add(marker)

        target: Any = context.specs.get(spec_key)
        if target is None:
            msg = f"Spec '{spec_key}' is not loaded (resolving '{ref}')"
            raise RefResolutionError(msg)
        for token in tokens:
            if not isinstance(target, dict) or token not in target:
                msg = f"Dangling reference '{ref}'"
                raise RefResolutionError(msg)
            target = target[token]

        if tokens:
            imports.append(GeneratorImport(name=pascal(tokens[-1]), schema_name=tokens[-1]))
        current = target

    if not isinstance(current, dict):
        msg = f"Reference resolved to a non-object value: {current!r}"
        raise RefResolutionError(msg)

    return ResolvedRef(schema=current, imports=imports)
