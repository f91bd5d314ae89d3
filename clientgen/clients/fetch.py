"""Fetch transport: URL builders, per-status response types and fetch calls."""

from __future__ import annotations

import logging

from clientgen.clients.base import HeaderOptions
from clientgen.clients.request import (
    RequestFlags,
    generate_body_form,
    mutator_options_param,
    render_request_function,
)
from clientgen.core.body import generate_body_options
from clientgen.core.case import pascal
from clientgen.core.props import to_object_string
from clientgen.core.templates import render
from clientgen.spec.output import GeneratorOptions
from clientgen.spec.verbs import (
    VERBS_WITH_BODY,
    GeneratorVerbOptions,
    GetterProp,
    ResponseTypeValue,
)

logger = logging.getLogger(__name__)

URL_PROP_TYPES = ("param", "named_path_params", "query_param")

# Status codes whose responses never carry a body
NO_BODY_STATUSES = "[204, 205, 304]"


def fetch_response_type_name(
    include_http_response_return_type: bool, success: str, operation_name: str
) -> str:
    """Name of the type a fetch request function resolves to."""
    if include_http_response_return_type:
        return f"{operation_name}Response"
    return success or "unknown"


def generate_fetch_header(options: HeaderOptions) -> str:
    """Shared types of a fetch group.

    The ``HTTPStatusCodes`` union is only emitted when the generated
    implementation references it.
    """
    return render(
        "fetch_header.ts.j2",
        has_status_codes="HTTPStatusCodes" in options.client_implementation,
        is_request_options=options.is_request_options,
        is_mutator=options.is_mutator,
    )


def url_function_name(operation_name: str) -> str:
    return f"get{pascal(operation_name)}Url"


def _url_argument(prop: GetterProp) -> str:
    if prop.type == "named_path_params" and prop.destructured:
        return prop.destructured
    return prop.name


def generate_url_function(verb_options: GeneratorVerbOptions, options: GeneratorOptions) -> str:
    """Function building the request URL from path and query parameters."""
    props = verb_options.props_of(*URL_PROP_TYPES)
    route = options.route
    if not verb_options.query_params:
        return render_request_function(
            name=url_function_name(verb_options.operation_name),
            export=True,
            params=[to_object_string(props, "implementation")],
            call=f"`{route}`",
        )

    statements = [
        "const normalizedParams = new URLSearchParams();",
        "Object.entries(params || {}).forEach(([key, value]) => {\n"
        "  if (value !== undefined) {\n"
        "    normalizedParams.append(key, value === null ? 'null' : value.toString());\n"
        "  }\n"
        "});",
        "const stringifiedParams = normalizedParams.toString();",
    ]
    return render_request_function(
        name=url_function_name(verb_options.operation_name),
        export=True,
        params=[to_object_string(props, "implementation")],
        statements=statements,
        call=f"stringifiedParams.length > 0 ? `{route}?${{stringifiedParams}}` : `{route}`",
    )


def _status_type(entry: ResponseTypeValue, explicit_codes: list[str]) -> str:
    if entry.key.isdigit():
        return entry.key
    if entry.key == "default":
        if not explicit_codes:
            return "HTTPStatusCodes"
        return f"Exclude<HTTPStatusCodes, {' | '.join(explicit_codes)}>"
    # Ranges such as "4XX"
    return f"HTTPStatusCode{entry.key[:1]}xx"


def generate_response_types(verb_options: GeneratorVerbOptions) -> list[str]:
    """One type per documented status, their union, and the full response type."""
    response = verb_options.response
    name = f"{verb_options.operation_name}Response"
    by_status = {entry.key: entry for entry in response.types.success + response.types.errors}
    entries = list(by_status.values())

    if not entries:
        return [
            f"export type {name} = {{\n"
            f"  data: {response.success_type};\n"
            "  status: number;\n"
            "  headers: Headers;\n"
            "};"
        ]

    explicit_codes = [entry.key for entry in entries if entry.key.isdigit()]
    declarations = []
    members = []
    for entry in entries:
        member = f"{name}{pascal(entry.key)}"
        members.append(member)
        declarations.append(
            f"export type {member} = {{\n"
            f"  data: {entry.value or 'unknown'};\n"
            f"  status: {_status_type(entry, explicit_codes)};\n"
            "};"
        )
    declarations.append(f"export type {name}Composite = {' | '.join(members)};")
    declarations.append(f"export type {name} = {name}Composite & {{\n  headers: Headers;\n}};")
    return declarations


def _fetch_init(
    verb_options: GeneratorVerbOptions, flags: RequestFlags, spread_options: bool
) -> str:
    entries = ["...options"] if spread_options else []
    entries.append(f"method: '{verb_options.verb.upper()}'")

    body = verb_options.body
    has_body = verb_options.verb in VERBS_WITH_BODY and bool(body.definition)
    is_json = has_body and not flags.uses_form_payload

    header_entries = []
    if is_json:
        header_entries.append("'Content-Type': 'application/json'")
    if verb_options.headers:
        header_entries.append("...headers")
    if header_entries:
        if spread_options:
            header_entries.append("...options?.headers")
        entries.append(f"headers: {{ {', '.join(header_entries)} }}")

    if has_body:
        payload = generate_body_options(body, flags.is_form_data, flags.is_form_url_encoded)
        entries.append(f"body: JSON.stringify({payload})" if is_json else f"body: {payload}")

    return "{ " + ", ".join(entries) + " }"


def generate_request_function(
    verb_options: GeneratorVerbOptions, options: GeneratorOptions
) -> str:
    """URL builder, response types and request function of one operation.

    Without a mutator the function calls ``fetch`` and decodes the JSON body;
    with one, the URL and init object are handed to the mutator.
    """
    operation_name = verb_options.operation_name
    output = options.context.output
    flags = RequestFlags.from_options(verb_options, options)
    mutator = verb_options.mutator
    include_response = output.include_http_response_return_type
    response_type = fetch_response_type_name(
        include_response, verb_options.response.definition.success, operation_name
    )
    logger.debug("Generating fetch request function for %s", operation_name)

    url_args = ", ".join(_url_argument(prop) for prop in verb_options.props_of(*URL_PROP_TYPES))
    url_call = f"{url_function_name(operation_name)}({url_args})"
    props = to_object_string(verb_options.props, "implementation")
    body_form = generate_body_form(verb_options, flags)

    parts = [generate_url_function(verb_options, options)]
    if include_response:
        parts.append("\n\n".join(generate_response_types(verb_options)) + "\n")

    if mutator is not None:
        options_param = mutator_options_param(verb_options, options)
        init = _fetch_init(verb_options, flags, spread_options=bool(options_param))
        parts.append(
            render_request_function(
                name=operation_name,
                export=True,
                params=[props, options_param],
                statements=[body_form],
                call=f"{mutator.name}<{response_type}>({url_call}, {init})",
            )
        )
        return "\n".join(parts)

    options_param = "options?: RequestInit" if flags.is_request_options else ""
    init = _fetch_init(verb_options, flags, spread_options=flags.is_request_options)
    data_type = f"{response_type}['data']" if include_response else response_type
    statements = [
        body_form,
        f"const res = await fetch({url_call}, {init});",
        f"const body = {NO_BODY_STATUSES}.includes(res.status) ? null : await res.text();",
        f"const data: {data_type} = body ? JSON.parse(body) : {{}};",
    ]
    if include_response:
        call = f"{{ data, status: res.status, headers: res.headers }} as {response_type}"
    else:
        call = "data"
    parts.append(
        render_request_function(
            name=operation_name,
            export=True,
            is_async=True,
            params=[props, options_param],
            return_type=f"Promise<{response_type}>",
            statements=statements,
            call=call,
        )
    )
    return "\n".join(parts)
