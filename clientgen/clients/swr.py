"""SWR client generator.

Generates the exported request functions the SWR hooks call, plus the small
type helpers the hook layer uses to describe fetcher arguments, errors and
results. All helpers are pure and total.
"""

from __future__ import annotations

import logging

from clientgen.clients.axios import PARAMS_SERIALIZER_DEPENDENCIES, generate_axios_title
from clientgen.clients.base import (
    ClientGeneratorsBuilder,
    ClientOutput,
    FooterOptions,
    HeaderOptions,
    Transport,
    resolve_transport,
)
from clientgen.clients.fetch import (
    fetch_response_type_name,
    generate_fetch_header,
)
from clientgen.clients.fetch import (
    generate_request_function as generate_fetch_request_function,
)
from clientgen.clients.request import build_axios_request, build_mutator_request
from clientgen.core.imports import GeneratorDependency, generate_verb_imports
from clientgen.core.templates import render
from clientgen.spec.output import GeneratorOptions
from clientgen.spec.verbs import (
    GeneratorImport,
    GeneratorMutator,
    GeneratorVerbOptions,
    GetterResponse,
)

logger = logging.getLogger(__name__)

AXIOS_DEPENDENCIES = [
    GeneratorDependency(
        exports=[
            GeneratorImport(name="axios", default=True, values=True, synthetic_default_import=True),
            GeneratorImport(name="AxiosRequestConfig"),
            GeneratorImport(name="AxiosResponse"),
            GeneratorImport(name="AxiosError"),
        ],
        dependency="axios",
    ),
]

SWR_DEPENDENCIES = [
    GeneratorDependency(
        exports=[
            GeneratorImport(name="useSwr", default=True, values=True),
            GeneratorImport(name="SWRConfiguration"),
            GeneratorImport(name="Key"),
            GeneratorImport(name="Arguments"),
        ],
        dependency="swr",
    ),
    GeneratorDependency(
        exports=[
            GeneratorImport(name="useSWRMutation", default=True, values=True),
            GeneratorImport(name="SWRMutationConfiguration"),
        ],
        dependency="swr/mutation",
    ),
]


def get_swr_dependencies(
    has_global_mutator: bool, has_params_serializer_options: bool
) -> list[GeneratorDependency]:
    """Packages the generated SWR code imports from."""
    dependencies = [] if has_global_mutator else list(AXIOS_DEPENDENCIES)
    if has_params_serializer_options:
        dependencies.extend(PARAMS_SERIALIZER_DEPENDENCIES)
    dependencies.extend(SWR_DEPENDENCIES)
    return dependencies


def generate_swr_request_function(
    verb_options: GeneratorVerbOptions, options: GeneratorOptions
) -> str:
    """Generate the exported request function of one operation.

    Unlike the promise client the axios variant always resolves to the axios
    response, and nothing is registered in the result type table.
    """
    http_client = options.context.output.http_client
    transport = resolve_transport(http_client, verb_options.mutator)
    logger.debug(
        "Generating SWR request function for %s with %s transport",
        verb_options.operation_name,
        transport.value,
    )

    if transport is Transport.FETCH:
        return generate_fetch_request_function(verb_options, options)
    if transport is Transport.MUTATOR:
        return build_mutator_request(verb_options, options, export=True)
    return build_axios_request(verb_options, options, export=True, generic_result=False)


def get_swr_request_options(http_client: str, mutator: GeneratorMutator | None = None) -> str:
    """Hook parameter carrying request customisation (or empty)."""
    if mutator is None:
        if http_client == Transport.AXIOS.value:
            return "axios?: AxiosRequestConfig"
        return "fetch?: RequestInit"
    if mutator.has_second_arg:
        return f"request?: SecondParameter<typeof {mutator.name}>"
    return ""


def get_swr_error_type(
    response: GetterResponse, http_client: str, mutator: GeneratorMutator | None = None
) -> str:
    """Error type exposed by the hooks."""
    if mutator is not None:
        if mutator.has_error_type:
            return f"ErrorType<{response.error_type}>"
        return response.error_type
    wrapper = "AxiosError" if http_client == Transport.AXIOS.value else "Promise"
    return f"{wrapper}<{response.error_type}>"


def get_swr_request_second_arg(http_client: str, mutator: GeneratorMutator | None = None) -> str:
    """Binding of the customisation argument when destructuring hook options."""
    if mutator is None:
        if http_client == Transport.AXIOS.value:
            return "axios: axiosOptions"
        return "fetch: fetchOptions"
    if mutator.has_second_arg:
        return "request: requestOptions"
    return ""


def get_http_request_second_arg(http_client: str, mutator: GeneratorMutator | None = None) -> str:
    """Identifier forwarded as second argument of the request function."""
    if mutator is None:
        return "axiosOptions" if http_client == Transport.AXIOS.value else "fetchOptions"
    if mutator.has_second_arg:
        return "requestOptions"
    return ""


def get_swr_mutation_fetcher_option_type(
    http_client: str, mutator: GeneratorMutator | None = None
) -> str:
    if mutator is None:
        return "AxiosRequestConfig" if http_client == Transport.AXIOS.value else "RequestInit"
    if mutator.has_second_arg:
        return f"SecondParameter<typeof {mutator.name}>"
    return ""


def get_swr_mutation_fetcher_type(
    response: GetterResponse,
    http_client: str,
    include_http_response_return_type: bool,
    operation_name: str,
    mutator: GeneratorMutator | None = None,
) -> str:
    """Return type of a mutation fetcher."""
    if http_client == Transport.FETCH.value:
        response_type = fetch_response_type_name(
            include_http_response_return_type, response.definition.success, operation_name
        )
        return f"Promise<{response_type}>"
    if mutator is not None:
        return f"Promise<{response.success_type}>"
    return f"Promise<AxiosResponse<{response.success_type}>>"


def get_swr_header(options: HeaderOptions) -> str:
    """Fetch groups get the fetch header; axios groups need nothing here."""
    if options.output.http_client == Transport.FETCH.value:
        return generate_fetch_header(options)
    return ""


def generate_swr_header(options: HeaderOptions) -> str:
    """Group header, adding the ``SecondParameter`` alias axios mutators reference."""
    if options.output.http_client == Transport.FETCH.value:
        return get_swr_header(options)
    return render(
        "axios_header.ts.j2",
        title=options.title,
        is_request_options=options.is_request_options,
        is_mutator=options.is_mutator,
        no_function=True,
    )


def generate_swr_footer(options: FooterOptions) -> str:
    return ""


def generate_swr(verb_options: GeneratorVerbOptions, options: GeneratorOptions) -> ClientOutput:
    """Generate implementation and imports of one operation."""
    imports = generate_verb_imports(verb_options)
    implementation = generate_swr_request_function(verb_options, options)
    return ClientOutput(implementation=implementation, imports=imports)


swr_client_builder = ClientGeneratorsBuilder(
    client=generate_swr,
    header=generate_swr_header,
    dependencies=get_swr_dependencies,
    footer=generate_swr_footer,
    title=generate_axios_title,
)
