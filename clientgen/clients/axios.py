"""Axios client generator.

Emits one request function per operation plus the group header (shared
helper types, optional factory opening) and footer (factory return,
per-operation ``<Name>Result`` aliases).
"""

from __future__ import annotations

import logging

from clientgen.clients.base import (
    ClientGeneratorsBuilder,
    ClientOutput,
    FooterOptions,
    HeaderOptions,
    Transport,
    resolve_transport,
)
from clientgen.clients.request import build_axios_request, build_mutator_request
from clientgen.core.case import pascal, sanitize
from clientgen.core.imports import GeneratorDependency, generate_verb_imports
from clientgen.core.templates import render
from clientgen.spec.output import GeneratorOptions, ReturnTypeProducer
from clientgen.spec.verbs import GeneratorImport, GeneratorVerbOptions

logger = logging.getLogger(__name__)

AXIOS_DEPENDENCIES = [
    GeneratorDependency(
        exports=[
            GeneratorImport(name="axios", default=True, values=True, synthetic_default_import=True),
            GeneratorImport(name="AxiosRequestConfig"),
            GeneratorImport(name="AxiosResponse"),
        ],
        dependency="axios",
    ),
]

PARAMS_SERIALIZER_DEPENDENCIES = [
    GeneratorDependency(
        exports=[
            GeneratorImport(name="qs", default=True, values=True, synthetic_default_import=True),
        ],
        dependency="qs",
    ),
]


def get_axios_dependencies(
    has_global_mutator: bool, has_params_serializer_options: bool
) -> list[GeneratorDependency]:
    """Packages the generated axios code imports from."""
    dependencies = [] if has_global_mutator else list(AXIOS_DEPENDENCIES)
    if has_params_serializer_options:
        dependencies.extend(PARAMS_SERIALIZER_DEPENDENCIES)
    return dependencies


def mutator_result_type(operation_name: str) -> ReturnTypeProducer:
    """Result alias reading the resolved return type of the generated function."""

    def produce(title: str | None = None) -> str:
        if title:
            target = f"ReturnType<typeof {title}>['{operation_name}']"
        else:
            target = f"typeof {operation_name}"
        return (
            f"export type {pascal(operation_name)}Result = "
            f"NonNullable<Awaited<ReturnType<{target}>>>"
        )

    return produce


def axios_result_type(operation_name: str, success_type: str) -> ReturnTypeProducer:
    """Result alias wrapping the success type in the axios response."""

    def produce(title: str | None = None) -> str:
        return f"export type {pascal(operation_name)}Result = AxiosResponse<{success_type}>"

    return produce


def generate_axios_implementation(
    verb_options: GeneratorVerbOptions, options: GeneratorOptions
) -> str:
    """Generate the request function of one operation (without ``export``).

    Registers the operation's deferred result type on the run's table.
    """
    operation_name = verb_options.operation_name
    return_types = options.context.return_types
    transport = resolve_transport(Transport.AXIOS.value, verb_options.mutator)
    logger.debug("Generating %s with %s transport", operation_name, transport.value)

    if transport is Transport.MUTATOR:
        return_types.register(operation_name, mutator_result_type(operation_name))
        return build_mutator_request(verb_options, options)

    return_types.register(
        operation_name, axios_result_type(operation_name, verb_options.response.success_type)
    )
    return build_axios_request(verb_options, options, generic_result=True)


def generate_axios_title(title: str) -> str:
    """Name of the factory function wrapping a group's operations."""
    return f"get{pascal(sanitize(title))}"


def generate_axios_header(options: HeaderOptions) -> str:
    """Shared helper types and, unless functions are top level, the factory opening."""
    return render(
        "axios_header.ts.j2",
        title=options.title,
        is_request_options=options.is_request_options,
        is_mutator=options.is_mutator,
        no_function=options.no_function,
    )


def generate_axios_footer(options: FooterOptions) -> str:
    """Close the factory and emit the deferred result types of the group."""
    title = None if options.no_function else options.title
    return render(
        "axios_footer.ts.j2",
        operation_names=options.operation_names,
        no_function=options.no_function,
        has_mutator=options.has_mutator,
        has_awaited_type=options.has_awaited_type,
        return_types=options.return_types.render(options.operation_names, title),
    )


def generate_axios(verb_options: GeneratorVerbOptions, options: GeneratorOptions) -> ClientOutput:
    """Generate implementation and imports of one operation."""
    imports = generate_verb_imports(verb_options)
    implementation = generate_axios_implementation(verb_options, options)
    return ClientOutput(implementation=implementation, imports=imports)


def generate_axios_functions(
    verb_options: GeneratorVerbOptions, options: GeneratorOptions
) -> ClientOutput:
    """Same as generate_axios, exported at top level."""
    output = generate_axios(verb_options, options)
    return ClientOutput(implementation="export " + output.implementation, imports=output.imports)


def _functions_header(options: HeaderOptions) -> str:
    options.no_function = True
    return generate_axios_header(options)


def _functions_footer(options: FooterOptions) -> str:
    options.no_function = True
    return generate_axios_footer(options)


axios_client_builder = ClientGeneratorsBuilder(
    client=generate_axios,
    header=generate_axios_header,
    dependencies=get_axios_dependencies,
    footer=generate_axios_footer,
    title=generate_axios_title,
)

axios_functions_client_builder = ClientGeneratorsBuilder(
    client=generate_axios_functions,
    header=_functions_header,
    dependencies=get_axios_dependencies,
    footer=_functions_footer,
    title=generate_axios_title,
)

BUILDERS: dict[str, ClientGeneratorsBuilder] = {
    "axios": axios_client_builder,
    "axios-functions": axios_functions_client_builder,
}


def builder(client_type: str = "axios-functions") -> ClientGeneratorsBuilder:
    """Return the builder bundle of an axios client style."""
    if client_type not in BUILDERS:
        msg = f"Unknown axios client type '{client_type}'"
        raise ValueError(msg)
    return BUILDERS[client_type]
