# noqa: D104
"""Shared building blocks of the client generators.

Identifier casing, reference resolution, body encoding, transport options
and import handling used by every client style.
"""

from clientgen.core.body import generate_form_data_and_url_encoded_function
from clientgen.core.case import pascal, sanitize
from clientgen.core.imports import (
    GeneratorDependency,
    generate_dependency_imports,
    generate_verb_imports,
    is_synthetic_default_imports_allow,
)
from clientgen.core.options import (
    generate_mutator_config,
    generate_mutator_request_options,
    generate_options,
)
from clientgen.core.props import to_object_string
from clientgen.core.refs import RefResolutionError, resolve_ref

__all__ = [
    "pascal",
    "sanitize",
    "resolve_ref",
    "RefResolutionError",
    "to_object_string",
    "generate_form_data_and_url_encoded_function",
    "generate_options",
    "generate_mutator_config",
    "generate_mutator_request_options",
    "GeneratorDependency",
    "generate_verb_imports",
    "generate_dependency_imports",
    "is_synthetic_default_imports_allow",
]
