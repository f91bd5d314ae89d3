"""Transport call arguments and mutator config objects.

Everything here returns TypeScript source fragments:
- generate_options: arguments of ``axios.<verb>(...)``
- generate_mutator_config: first argument of a mutator call
- generate_mutator_request_options: second argument of a mutator call
"""

from __future__ import annotations

import json
import re
from typing import Any

from clientgen.core.body import generate_body_mutator_config, generate_body_options
from clientgen.spec.verbs import (
    VERBS_WITH_BODY,
    GeneratorMutator,
    GetterBody,
    GetterQueryParam,
    GetterResponse,
    ParamsSerializerOptions,
)

_IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")


def to_ts_literal(value: Any) -> str:
    """Render a JSON-like Python value as a TypeScript literal."""
    if isinstance(value, dict):
        entries = ", ".join(f"{_ts_key(key)}: {to_ts_literal(item)}" for key, item in value.items())
        return f"{{{entries}}}"
    if isinstance(value, (list, tuple)):
        return "[" + ", ".join(to_ts_literal(item) for item in value) + "]"
    if isinstance(value, str):
        return "'" + value.replace("\\", "\\\\").replace("'", "\\'") + "'"
    return json.dumps(value)


def _ts_key(key: str) -> str:
    return key if _IDENTIFIER_RE.match(key) else to_ts_literal(key)


def _literal_entries(options: dict[str, Any]) -> list[str]:
    return [f"{_ts_key(key)}: {to_ts_literal(value)}" for key, value in options.items()]


def _signal_entry(is_exact_optional_property_types: bool) -> str:
    if is_exact_optional_property_types:
        return "...(signal ? { signal } : {})"
    return "signal"


def generate_axios_options(
    response: GetterResponse,
    *,
    query_params: GetterQueryParam | None = None,
    headers: GetterQueryParam | None = None,
    request_options: bool | dict[str, Any] = True,
    has_signal: bool = False,
    is_exact_optional_property_types: bool = False,
    params_serializer: GeneratorMutator | None = None,
    params_serializer_options: ParamsSerializerOptions | None = None,
) -> str:
    """Build the axios config argument.

    Returns ``options`` when the caller's options can be forwarded untouched,
    an object literal when entries have to be added, or an empty string.
    """
    is_request_options = request_options is not False
    needs_config = (
        query_params is not None
        or headers is not None
        or response.is_blob
        or response.definition.success == "string"
    )
    if not needs_config:
        if is_request_options:
            return "options"
        if has_signal:
            return f"{{{_signal_entry(is_exact_optional_property_types)}}}"
        return ""

    entries: list[str] = []
    if not is_request_options:
        if query_params:
            entries.append("params")
        if headers:
            entries.append("headers")
        if has_signal:
            entries.append(_signal_entry(is_exact_optional_property_types))

    overrides_response_type = (
        isinstance(request_options, dict) and "responseType" in request_options
    )
    if not overrides_response_type:
        if response.is_blob:
            entries.append("responseType: 'blob'")
        elif response.content_types[:1] == ["text/plain"]:
            entries.append("responseType: 'text'")

    if isinstance(request_options, dict):
        entries.extend(_literal_entries(request_options))

    if is_request_options:
        entries.append("...options")
        if query_params:
            entries.append("params: {...params, ...options?.params}")
        if headers:
            entries.append("headers: {...headers, ...options?.headers}")

    has_qs_options = bool(params_serializer_options and params_serializer_options.qs)
    if query_params and (params_serializer or has_qs_options):
        if params_serializer:
            entries.append(f"paramsSerializer: {params_serializer.name}")
        else:
            qs_options = json.dumps(params_serializer_options.qs)
            entries.append(f"paramsSerializer: (params) => qs.stringify(params, {qs_options})")

    if not entries:
        return ""
    return "{" + ", ".join(entries) + "}"


def generate_options(
    *,
    route: str,
    body: GetterBody,
    verb: str,
    response: GetterResponse,
    headers: GetterQueryParam | None = None,
    query_params: GetterQueryParam | None = None,
    request_options: bool | dict[str, Any] = True,
    is_form_data: bool = True,
    is_form_url_encoded: bool = True,
    params_serializer: GeneratorMutator | None = None,
    params_serializer_options: ParamsSerializerOptions | None = None,
    is_exact_optional_property_types: bool = False,
    has_signal: bool = False,
) -> str:
    """Build the argument list of ``axios.<verb>(...)``.

    Body verbs take the body as second argument (``undefined`` when there is
    none); ``delete`` moves its body under ``data`` inside the config object.
    """
    is_body_verb = verb in VERBS_WITH_BODY
    body_options = (
        generate_body_options(body, is_form_data, is_form_url_encoded) if is_body_verb else ""
    )
    axios_options = generate_axios_options(
        response,
        query_params=query_params,
        headers=headers,
        request_options=request_options,
        has_signal=has_signal,
        is_exact_optional_property_types=is_exact_optional_property_types,
        params_serializer=params_serializer,
        params_serializer_options=params_serializer_options,
    )
    route_literal = f"`{route}`"

    if verb == "delete":
        if not body_options:
            return ", ".join(arg for arg in (route_literal, axios_options) if arg)
        if axios_options == "options":
            rest = "...options"
        else:
            rest = axios_options[1:-1]
        config = ", ".join(entry for entry in (f"data: {body_options}", rest) if entry)
        return f"{route_literal}, {{{config}}}"

    args = [route_literal]
    if is_body_verb:
        args.append(body_options or "undefined")
    if axios_options:
        args.append(axios_options)
    return ", ".join(args)


def generate_query_params_axios_config(
    response: GetterResponse, query_params: GetterQueryParam | None = None
) -> list[str]:
    """Query and response-type entries of a mutator config object."""
    entries = []
    if query_params:
        entries.append("params")
    if response.is_blob:
        entries.append("responseType: 'blob'")
    return entries


def generate_mutator_config(
    *,
    route: str,
    body: GetterBody,
    verb: str,
    response: GetterResponse,
    headers: GetterQueryParam | None = None,
    query_params: GetterQueryParam | None = None,
    is_form_data: bool = True,
    is_form_url_encoded: bool = True,
    has_signal: bool = False,
    is_exact_optional_property_types: bool = False,
) -> str:
    """Build the config object passed as first argument to a mutator."""
    entries = [f"url: `{route}`", f"method: '{verb.upper()}'"]

    content_type = body.content_type
    if content_type and content_type != "multipart/form-data":
        spread = ", ...headers" if headers else ""
        entries.append(f"headers: {{'Content-Type': '{content_type}'{spread}}}")
    elif headers:
        entries.append("headers")

    if verb in VERBS_WITH_BODY:
        data = generate_body_mutator_config(body, is_form_data, is_form_url_encoded)
        if data:
            entries.append(data)

    entries.extend(generate_query_params_axios_config(response, query_params))

    if has_signal:
        entries.append(_signal_entry(is_exact_optional_property_types))

    return "{" + ", ".join(entries) + "}"


def generate_mutator_request_options(
    request_options: bool | dict[str, Any], has_second_arg: bool
) -> str:
    """Build the second argument of a mutator call (or empty)."""
    if not has_second_arg:
        if isinstance(request_options, dict):
            return "{" + ", ".join(_literal_entries(request_options)) + "}"
        return ""

    if isinstance(request_options, dict):
        return "{" + ", ".join([*_literal_entries(request_options), "...options"]) + "}"
    return "options"
