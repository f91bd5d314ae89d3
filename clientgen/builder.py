"""Group assembly: one TypeScript file per group of operations.

Runs the client generator of the configured style over every operation,
then renders the header, footer and the import statements the generated
code actually uses.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging

from clientgen.clients import get_client_builder
from clientgen.clients.base import FooterOptions, HeaderOptions
from clientgen.core.imports import (
    GeneratorDependency,
    generate_dependency_imports,
    generate_model_imports,
    generate_mutator_imports,
    is_synthetic_default_imports_allow,
)
from clientgen.core.templates import render
from clientgen.spec.output import GeneratorContext, GeneratorOptions
from clientgen.spec.verbs import GeneratorImport, GeneratorMutator, GeneratorVerbOptions

logger = logging.getLogger(__name__)


@dataclass
class GroupOutput:
    """Generated code of one group, ready to be written to a file."""

    title: str
    header: str
    implementations: list[str]
    footer: str
    imports: list[GeneratorImport] = field(default_factory=list)
    dependencies: list[GeneratorDependency] = field(default_factory=list)
    mutators: list[GeneratorMutator] = field(default_factory=list)
    schemas: str | None = None
    is_synthetic_default_imports_allowed: bool = True

    @property
    def code(self) -> str:
        """Header, implementations and footer, without imports."""
        return "\n".join([self.header, *self.implementations, self.footer])

    def import_lines(self) -> list[str]:
        """Dependency, mutator and model imports, in that order."""
        lines = generate_dependency_imports(
            self.dependencies,
            self.code,
            is_synthetic_default_imports_allowed=self.is_synthetic_default_imports_allowed,
        )
        lines.extend(generate_mutator_imports(self.mutators))
        if self.schemas:
            lines.extend(generate_model_imports(self.imports, self.schemas))
        return lines

    def render(self) -> str:
        """Render the complete file."""
        return render(
            "group.ts.j2",
            title=self.title,
            import_lines=self.import_lines(),
            header=self.header,
            implementations=self.implementations,
            footer=self.footer,
        )


def _operation_mutators(verb_options: GeneratorVerbOptions) -> list[GeneratorMutator]:
    candidates = [
        verb_options.mutator,
        verb_options.form_data,
        verb_options.form_url_encoded,
        verb_options.params_serializer,
    ]
    return [mutator for mutator in candidates if mutator is not None]


class ClientGroupBuilder:
    """Build the code of a group of operations for one client style."""

    def __init__(self, context: GeneratorContext, client: str | None = None) -> None:
        """Initialize with the run context; the client defaults to the output config's."""
        self.context = context
        self.client = client or context.output.client
        self.generators = get_client_builder(self.client)

    def build(
        self, title: str, operations: list[tuple[GeneratorVerbOptions, GeneratorOptions]]
    ) -> GroupOutput:
        """Generate every operation and assemble the group.

        The run's result type table is cleared first so that nothing
        registered by an earlier build leaks into this group.
        """
        context = self.context
        output = context.output
        context.return_types.clear()
        logger.info("Building %s client '%s' (%d operations)", self.client, title, len(operations))

        implementations = []
        imports: list[GeneratorImport] = []
        mutators: list[GeneratorMutator] = []
        for verb_options, options in operations:
            client_output = self.generators.client(verb_options, options)
            implementations.append(client_output.implementation)
            imports.extend(client_output.imports)
            mutators.extend(_operation_mutators(verb_options))

        verb_options_list = [verb_options for verb_options, _ in operations]
        operation_names = [verb_options.operation_name for verb_options in verb_options_list]
        is_request_options = any(
            verb_options.override.request_options is not False for verb_options in verb_options_list
        )
        has_mutator = any(verb_options.mutator is not None for verb_options in verb_options_list)
        has_qs_options = any(
            verb_options.override.params_serializer_options is not None
            and bool(verb_options.override.params_serializer_options.qs)
            for verb_options in verb_options_list
        )
        factory_title = self.generators.title(title)

        header = self.generators.header(
            HeaderOptions(
                title=factory_title,
                is_request_options=is_request_options,
                is_mutator=has_mutator,
                output=output,
                client_implementation="\n".join(implementations),
            )
        )
        footer = self.generators.footer(
            FooterOptions(
                operation_names=operation_names,
                title=factory_title,
                return_types=context.return_types,
                has_mutator=has_mutator,
                has_awaited_type=output.has_awaited_type,
            )
        )
        dependencies = self.generators.dependencies(output.mutator is not None, has_qs_options)

        return GroupOutput(
            title=title,
            header=header,
            implementations=implementations,
            footer=footer,
            imports=imports,
            dependencies=dependencies,
            mutators=mutators,
            schemas=output.schemas,
            is_synthetic_default_imports_allowed=is_synthetic_default_imports_allow(
                output.tsconfig
            ),
        )
