"""Shared types of the client generators."""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass, field
from enum import Enum

from clientgen.core.imports import GeneratorDependency
from clientgen.spec.output import GeneratorOptions, OutputConfig, ReturnTypesTable
from clientgen.spec.verbs import GeneratorImport, GeneratorMutator, GeneratorVerbOptions


class Transport(str, Enum):
    """How a generated request function sends its request."""

    AXIOS = "axios"
    FETCH = "fetch"
    MUTATOR = "mutator"


def resolve_transport(http_client: str, mutator: GeneratorMutator | None) -> Transport:
    """Pick the transport variant for an operation.

    The fetch client handles its own mutators, so a mutator only wins over axios.
    """
    if http_client == Transport.FETCH.value:
        return Transport.FETCH
    if mutator is not None:
        return Transport.MUTATOR
    return Transport.AXIOS


@dataclass
class ClientOutput:
    """Generated code of one operation."""

    implementation: str
    imports: list[GeneratorImport] = field(default_factory=list)


@dataclass
class HeaderOptions:
    """Inputs of a group header builder."""

    title: str
    is_request_options: bool = True
    is_mutator: bool = False
    no_function: bool = False
    output: OutputConfig = field(default_factory=OutputConfig)
    client_implementation: str = ""


@dataclass
class FooterOptions:
    """Inputs of a group footer builder."""

    operation_names: list[str]
    title: str
    return_types: ReturnTypesTable
    no_function: bool = False
    has_mutator: bool = False
    has_awaited_type: bool = True


ClientBuilder = Callable[[GeneratorVerbOptions, GeneratorOptions], ClientOutput]
ClientHeaderBuilder = Callable[[HeaderOptions], str]
ClientFooterBuilder = Callable[[FooterOptions], str]
ClientDependenciesBuilder = Callable[[bool, bool], list[GeneratorDependency]]
ClientTitleBuilder = Callable[[str], str]


@dataclass(frozen=True)
class ClientGeneratorsBuilder:
    """Everything needed to emit one client style for a group of operations."""

    client: ClientBuilder
    header: ClientHeaderBuilder
    dependencies: ClientDependenciesBuilder
    footer: ClientFooterBuilder
    title: ClientTitleBuilder
