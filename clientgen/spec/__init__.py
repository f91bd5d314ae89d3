# noqa: D104
"""Pydantic models for operation descriptors, output config and job files."""

from clientgen.spec.loader import ClientJob, LoadedJob, SpecValidationError, load_job
from clientgen.spec.output import (
    GeneratorContext,
    GeneratorOptions,
    OutputConfig,
    ReturnTypesTable,
)
from clientgen.spec.verbs import (
    GeneratorMutator,
    GeneratorSchema,
    GeneratorVerbOptions,
    GetterBody,
    GetterProp,
    GetterQueryParam,
    GetterResponse,
    OperationOverride,
)

__all__ = [
    "load_job",
    "ClientJob",
    "LoadedJob",
    "SpecValidationError",
    "GeneratorContext",
    "GeneratorOptions",
    "OutputConfig",
    "ReturnTypesTable",
    "GeneratorMutator",
    "GeneratorSchema",
    "GeneratorVerbOptions",
    "GetterBody",
    "GetterProp",
    "GetterQueryParam",
    "GetterResponse",
    "OperationOverride",
]
