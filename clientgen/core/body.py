"""Request body encoding fragments."""

from __future__ import annotations

from clientgen.spec.verbs import GeneratorMutator, GetterBody


def uses_form_payload(body: GetterBody, is_form_data: bool, is_form_url_encoded: bool) -> bool:
    """Whether the body is sent through a form-data or url-encoded payload."""
    return (is_form_data and bool(body.form_data)) or (
        is_form_url_encoded and bool(body.form_url_encoded)
    )


def generate_form_data_and_url_encoded_function(
    body: GetterBody,
    form_data: GeneratorMutator | None = None,
    form_url_encoded: GeneratorMutator | None = None,
    *,
    is_form_data: bool = True,
    is_form_url_encoded: bool = True,
    body_identifier: str | None = None,
) -> str:
    """Build the statements that encode the body into a form payload.

    Args:
        body: Request body description
        form_data: Custom form-data builder replacing the pre-rendered snippet
        form_url_encoded: Custom url-encoded builder replacing the pre-rendered snippet
        is_form_data: Whether form-data encoding is enabled
        is_form_url_encoded: Whether url-encoded encoding is enabled
        body_identifier: Name the body is reachable under, when it differs from
            ``body.implementation``; every occurrence of the original identifier
            in the snippet is replaced

    Returns:
        The encoding statements, or an empty string when no form payload applies
    """
    identifier = body_identifier or body.implementation

    if is_form_data and body.form_data:
        if form_data:
            return f"const formData = {form_data.name}({identifier});"
        return _rename(body.form_data, body.implementation, identifier)

    if is_form_url_encoded and body.form_url_encoded:
        if form_url_encoded:
            return f"const formUrlEncoded = {form_url_encoded.name}({identifier});"
        return _rename(body.form_url_encoded, body.implementation, identifier)

    return ""


def _rename(snippet: str, original: str, identifier: str) -> str:
    if not original or original == identifier:
        return snippet
    return snippet.replace(original, identifier)


def generate_body_options(body: GetterBody, is_form_data: bool, is_form_url_encoded: bool) -> str:
    """Body argument of a transport call (an identifier, or empty)."""
    if is_form_data and body.form_data:
        return "formData"
    if is_form_url_encoded and body.form_url_encoded:
        return "formUrlEncoded"
    return body.implementation


def generate_body_mutator_config(
    body: GetterBody, is_form_data: bool, is_form_url_encoded: bool
) -> str:
    """``data`` entry of a mutator config object (or empty)."""
    data = generate_body_options(body, is_form_data, is_form_url_encoded)
    return f"data: {data}" if data else ""
