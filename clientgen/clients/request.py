"""Request function assembly shared by the axios and SWR generators.

Provides a unified way to turn an operation descriptor into a request function:
- RequestFlags: feature flags derived from overrides and output config
- ParameterNames: query/header/path names re-read from the OpenAPI document
- SingleRequestArgument: the collapsed ``request`` parameter, its type and destructuring
- build_mutator_request / build_axios_request: one code path per transport variant
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass
import re
from typing import Any

from clientgen.core.body import (
    generate_form_data_and_url_encoded_function,
    uses_form_payload,
)
from clientgen.core.case import pascal
from clientgen.core.imports import is_synthetic_default_imports_allow
from clientgen.core.options import (
    generate_mutator_config,
    generate_mutator_request_options,
    generate_options,
)
from clientgen.core.props import to_object_string
from clientgen.core.refs import resolve_ref
from clientgen.core.templates import render
from clientgen.spec.output import GeneratorOptions
from clientgen.spec.verbs import GeneratorVerbOptions, GetterBody, GetterProp

IDENTIFIER_RE = re.compile(r"^[A-Za-z_$][A-Za-z0-9_$]*$")
BRACE_PARAM_RE = re.compile(r"\{([^}]+)\}")
TEMPLATE_PARAM_RE = re.compile(r"\$\{([^}]+)\}")
# Keys of a rendered type literal, one per line: "\n  petId: string;" or "\n  tag?: string;"
MODEL_KEY_RE = re.compile(r"\n\s*([A-Za-z_$][A-Za-z0-9_$]*)\??:")

EMPTY_REQUEST_TYPE = "Record<string, never>"


def is_valid_identifier(name: str) -> bool:
    """Whether ``name`` can be used as a JavaScript binding."""
    return bool(IDENTIFIER_RE.match(name))


def unique(names: Iterable[str]) -> list[str]:
    """Deduplicate names, keeping the order of first occurrence."""
    return list(dict.fromkeys(names))


def route_param_names(path_route: str, route: str) -> list[str]:
    """Parameter names found in ``{name}`` placeholders and ``${name}`` interpolations."""
    brace_params = [name for name in BRACE_PARAM_RE.findall(path_route) if name]
    template_params = TEMPLATE_PARAM_RE.findall(route)
    return [name for name in unique([*brace_params, *template_params]) if is_valid_identifier(name)]


def named_path_param_names(prop: GetterProp | None) -> list[str]:
    """Names bound by a named path params prop.

    Uses the explicit destructure list when there is one, else the keys of
    the schema's rendered type literal.
    """
    if prop is None:
        return []
    names = [name.strip() for name in re.sub(r"[{}]", "", prop.destructured).split(",")]
    names = [name for name in names if name]
    if names:
        return names
    model = prop.schema_ref.model if prop.schema_ref else ""
    return MODEL_KEY_RE.findall(model)


def object_entries(names: Iterable[str], source: str = "request") -> str:
    """Object literal body using shorthand for identifiers and bracket access otherwise."""
    entries = [
        name if is_valid_identifier(name) else f"'{name}': {source}['{name}']" for name in names
    ]
    return ", ".join(entries)


@dataclass(frozen=True)
class RequestFlags:
    """Feature flags of one operation."""

    is_request_options: bool
    is_form_data: bool
    is_form_url_encoded: bool
    is_exact_optional_property_types: bool
    is_synthetic_default_imports_allowed: bool
    use_single_request_argument: bool
    uses_form_payload: bool

    @classmethod
    def from_options(
        cls, verb_options: GeneratorVerbOptions, options: GeneratorOptions
    ) -> RequestFlags:
        """Derive the flags from overrides and the output config."""
        override = verb_options.override
        output = options.context.output
        is_form_data = not override.form_data.disabled
        is_form_url_encoded = override.form_url_encoded is not False
        return cls(
            is_request_options=override.request_options is not False,
            is_form_data=is_form_data,
            is_form_url_encoded=is_form_url_encoded,
            is_exact_optional_property_types=output.is_exact_optional_property_types,
            is_synthetic_default_imports_allowed=is_synthetic_default_imports_allow(
                output.tsconfig
            ),
            use_single_request_argument=override.use_single_request_argument,
            uses_form_payload=uses_form_payload(
                verb_options.body, is_form_data, is_form_url_encoded
            ),
        )


@dataclass
class ParameterNames:
    """Raw parameter names of an operation, in document order.

    Attributes:
        query: Names of ``in: query`` parameters
        header: Names of ``in: header`` parameters
        path: Names of the path param props
    """

    query: list[str]
    header: list[str]
    path: list[str]


def collect_parameter_names(
    verb_options: GeneratorVerbOptions, options: GeneratorOptions
) -> ParameterNames:
    """Re-read query and header parameter names from the OpenAPI document."""
    context = options.context
    path_item: dict[str, Any] = (context.spec.get("paths") or {}).get(options.path_route) or {}
    if "$ref" in path_item:
        path_item = resolve_ref(path_item, context).schema
    operation = path_item.get(verb_options.verb) or {}
    parameters = [resolve_ref(param, context).schema for param in operation.get("parameters") or []]

    def names_in(location: str) -> list[str]:
        return [p["name"] for p in parameters if p.get("in") == location and p.get("name")]

    return ParameterNames(
        query=names_in("query"),
        header=names_in("header"),
        path=[prop.name for prop in verb_options.props_of("param")],
    )


@dataclass
class SingleRequestArgument:
    """The ``request`` object parameter replacing a flat parameter list."""

    type_name: str
    intersection: list[str]
    path_params_type: str
    destructure_names: list[str]
    has_data_spread: bool
    query_names: list[str] | None
    header_names: list[str] | None

    @property
    def has_request(self) -> bool:
        """Whether the request type has any member."""
        return bool(self.intersection)

    @property
    def type_definition(self) -> str:
        members = " & ".join(self.intersection) or EMPTY_REQUEST_TYPE
        return f"export type {self.type_name} = {members};"

    @property
    def declarations(self) -> list[str]:
        """Type declarations emitted after the function."""
        return [d for d in (self.type_definition, self.path_params_type) if d]

    @property
    def destructure_statement(self) -> str:
        content = list(self.destructure_names)
        if self.has_data_spread:
            content.append("...data")
        if not content:
            return ""
        return f"const {{ {', '.join(content)} }} = request;"

    @property
    def params_statement(self) -> str:
        if self.query_names is None:
            return ""
        return f"const params = {{ {object_entries(self.query_names)} }};"

    @property
    def headers_statement(self) -> str:
        if self.header_names is None:
            return ""
        return f"const headers = {{ {object_entries(self.header_names)} }};"

    def statements(self, body_form: str) -> list[str]:
        """Function body statements preceding the transport call."""
        candidates = [
            self.destructure_statement,
            body_form,
            self.params_statement,
            self.headers_statement,
        ]
        return [statement for statement in candidates if statement]


def build_single_request_argument(
    verb_options: GeneratorVerbOptions,
    options: GeneratorOptions,
    flags: RequestFlags,
    names: ParameterNames | None = None,
) -> SingleRequestArgument:
    """Collapse the operation's parameters into one ``request`` object."""
    if names is None:
        names = collect_parameter_names(verb_options, options)
    operation_pascal = pascal(verb_options.operation_name)
    body = verb_options.body

    intersection = []
    if body.definition:
        intersection.append(body.definition)
    if verb_options.query_params:
        intersection.append(verb_options.query_params.schema_ref.name)
    if verb_options.headers:
        intersection.append(verb_options.headers.schema_ref.name)

    path_params_type = ""
    named = verb_options.named_path_params
    if named and named.schema_ref:
        intersection.append(named.schema_ref.name)
    elif names.path:
        path_type_name = f"{operation_pascal}PathParams"
        members = "\n".join(f"  {prop.definition};" for prop in verb_options.props_of("param"))
        path_params_type = f"export type {path_type_name} = {{\n{members}\n}};"
        intersection.append(path_type_name)

    destructure_names = unique(
        name
        for name in (
            *names.path,
            *route_param_names(options.path_route, options.route),
            *named_path_param_names(named),
            *names.query,
            *names.header,
        )
        if is_valid_identifier(name)
    )

    return SingleRequestArgument(
        type_name=f"{operation_pascal}Request",
        intersection=intersection,
        path_params_type=path_params_type,
        destructure_names=destructure_names,
        has_data_spread=bool(body.definition) and not flags.uses_form_payload,
        query_names=names.query if verb_options.query_params else None,
        header_names=names.header if verb_options.headers else None,
    )


def generate_body_form(
    verb_options: GeneratorVerbOptions, flags: RequestFlags, *, single_request: bool = False
) -> str:
    """Form payload statements, reading the body from ``request`` in single-argument mode."""
    identifier = "request" if single_request and verb_options.body.definition else None
    return generate_form_data_and_url_encoded_function(
        verb_options.body,
        verb_options.form_data,
        verb_options.form_url_encoded,
        is_form_data=flags.is_form_data,
        is_form_url_encoded=flags.is_form_url_encoded,
        body_identifier=identifier,
    )


def transport_body(verb_options: GeneratorVerbOptions, flags: RequestFlags) -> GetterBody:
    """Body as seen by the transport call (``data`` once spread out of ``request``)."""
    body = verb_options.body
    if flags.use_single_request_argument and body.definition:
        return body.model_copy(update={"implementation": "data"})
    return body


def render_request_function(
    *,
    name: str,
    params: list[str],
    call: str,
    statements: Iterable[str] = (),
    export: bool = False,
    generic: str = "",
    return_type: str | None = None,
    declarations: Iterable[str] = (),
    is_async: bool = False,
) -> str:
    """Render a request function followed by its type declarations."""
    return render(
        "request_function.ts.j2",
        name=name,
        params=[param for param in params if param],
        call=call,
        statements=[statement for statement in statements if statement],
        export=export,
        generic=generic,
        return_type=return_type,
        declarations=list(declarations),
        is_async=is_async,
    )


def mutator_options_param(verb_options: GeneratorVerbOptions, options: GeneratorOptions) -> str:
    """Second parameter of a mutator-backed function (or empty)."""
    mutator = verb_options.mutator
    is_request_options = verb_options.override.request_options is not False
    if mutator is None or not (is_request_options and mutator.has_second_arg):
        return ""
    optional = "" if options.context.output.options_param_required else "?"
    return f"options{optional}: SecondParameter<typeof {mutator.name}>"


def wrap_body_type(props_text: str, body: GetterBody, wrapper: str) -> str:
    """Wrap the body parameter's type in the mutator's body wrapper type."""
    pattern = re.compile(rf"(\w*):\s?{re.escape(body.definition)}(?![\w$])")
    return pattern.sub(lambda m: f"{m.group(1)}: {wrapper}<{body.definition}>", props_text, count=1)


def build_mutator_request(
    verb_options: GeneratorVerbOptions, options: GeneratorOptions, *, export: bool = False
) -> str:
    """Request function delegating to a custom mutator."""
    mutator = verb_options.mutator
    if mutator is None:
        msg = f"Operation '{verb_options.operation_name}' has no mutator configured"
        raise ValueError(msg)

    flags = RequestFlags.from_options(verb_options, options)
    config = generate_mutator_config(
        route=options.route,
        body=transport_body(verb_options, flags),
        verb=verb_options.verb,
        response=verb_options.response,
        headers=verb_options.headers,
        query_params=verb_options.query_params,
        is_form_data=flags.is_form_data,
        is_form_url_encoded=flags.is_form_url_encoded,
        has_signal=False,
        is_exact_optional_property_types=flags.is_exact_optional_property_types,
    )
    options_param = mutator_options_param(verb_options, options)
    callee = f"{mutator.name}<{verb_options.response.success_type}>"

    if flags.use_single_request_argument:
        request = build_single_request_argument(verb_options, options, flags)
        args = [config, "options"] if options_param else [config]
        return render_request_function(
            name=verb_options.operation_name,
            export=export,
            params=[f"request: {request.type_name}", options_param],
            statements=request.statements(
                generate_body_form(verb_options, flags, single_request=True)
            ),
            call=f"{callee}({', '.join(args)})",
            declarations=request.declarations,
        )

    props_text = to_object_string(verb_options.props, "implementation")
    if mutator.body_type_name and verb_options.body.definition:
        props_text = wrap_body_type(props_text, verb_options.body, mutator.body_type_name)

    request_options = ""
    if flags.is_request_options:
        request_options = generate_mutator_request_options(
            verb_options.override.request_options, mutator.has_second_arg
        )
    args = [config, request_options] if request_options else [config]
    return render_request_function(
        name=verb_options.operation_name,
        export=export,
        params=[props_text, options_param],
        statements=[generate_body_form(verb_options, flags)],
        call=f"{callee}({', '.join(args)})",
    )


def build_axios_request(
    verb_options: GeneratorVerbOptions,
    options: GeneratorOptions,
    *,
    export: bool = False,
    generic_result: bool = True,
) -> str:
    """Request function calling the axios client directly.

    With ``generic_result`` the function is generic over the resolved type,
    defaulting to the axios response; otherwise it returns the axios response.
    """
    flags = RequestFlags.from_options(verb_options, options)
    override = verb_options.override
    call_options = generate_options(
        route=options.route,
        body=transport_body(verb_options, flags),
        verb=verb_options.verb,
        response=verb_options.response,
        headers=verb_options.headers,
        query_params=verb_options.query_params,
        request_options=override.request_options,
        is_form_data=flags.is_form_data,
        is_form_url_encoded=flags.is_form_url_encoded,
        params_serializer=verb_options.params_serializer,
        params_serializer_options=override.params_serializer_options,
        is_exact_optional_property_types=flags.is_exact_optional_property_types,
        has_signal=False,
    )
    client = "axios" if flags.is_synthetic_default_imports_allowed else "axios.default"
    call = f"{client}.{verb_options.verb}({call_options})"

    response_wrapper = f"AxiosResponse<{verb_options.response.success_type}>"
    if generic_result:
        generic = f"<TData = {response_wrapper}>"
        return_type = "Promise<TData>"
    else:
        generic = ""
        return_type = f"Promise<{response_wrapper}>"
    options_param = "options?: AxiosRequestConfig" if flags.is_request_options else ""

    if flags.use_single_request_argument:
        request = build_single_request_argument(verb_options, options, flags)
        if request.has_request:
            params = [f"request: {request.type_name}", options_param]
            statements = request.statements(
                generate_body_form(verb_options, flags, single_request=True)
            )
        else:
            params = [options_param]
            statements = [generate_body_form(verb_options, flags)]
        return render_request_function(
            name=verb_options.operation_name,
            export=export,
            generic=generic,
            params=params,
            return_type=return_type,
            statements=statements,
            call=call,
            declarations=request.declarations,
        )

    return render_request_function(
        name=verb_options.operation_name,
        export=export,
        generic=generic,
        params=[to_object_string(verb_options.props, "implementation"), options_param],
        return_type=return_type,
        statements=[generate_body_form(verb_options, flags)],
        call=call,
    )
