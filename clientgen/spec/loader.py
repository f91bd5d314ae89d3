"""Job file loader with validation.

A job file (YAML or JSON) describes one generation run: the OpenAPI document,
the output configuration and the resolved operations of one group.
Provides clear error messages for spec violations.
"""

from __future__ import annotations

from dataclasses import dataclass, field
import logging
from pathlib import Path
from typing import Any

from pydantic import BaseModel, Field, ValidationError
import yaml

from clientgen.spec.output import GeneratorContext, GeneratorOptions, OutputConfig
from clientgen.spec.verbs import GeneratorVerbOptions

logger = logging.getLogger(__name__)


class SpecValidationError(Exception):
    """Raised when a job file or OpenAPI document is invalid."""

    def __init__(self, message: str, file_path: str | None = None) -> None:
        self.file_path = file_path
        self.message = message
        super().__init__(self._format_message())

    def _format_message(self) -> str:
        if self.file_path:
            return f"{self.file_path}: {self.message}"
        return self.message


class OperationEntry(GeneratorVerbOptions):
    """An operation descriptor together with its routes."""

    route: str
    path_route: str

    def to_verb_options(self) -> GeneratorVerbOptions:
        """Drop the route fields, keeping the operation descriptor."""
        return GeneratorVerbOptions.model_validate(
            self.model_dump(by_alias=True, exclude={"route", "path_route"})
        )


class ClientJob(BaseModel):
    """Top-level structure of a job file."""

    title: str
    openapi: str | None = None  # path to the OpenAPI document, relative to the job file
    spec_key: str | None = None
    output: OutputConfig = Field(default_factory=OutputConfig)
    operations: list[OperationEntry] = Field(default_factory=list)

    model_config = {"extra": "forbid"}


@dataclass
class LoadedJob:
    """A validated job together with the context built for it."""

    job: ClientJob
    context: GeneratorContext
    operations: list[tuple[GeneratorVerbOptions, GeneratorOptions]] = field(default_factory=list)
    path: Path | None = None


def load_yaml_file(file_path: Path) -> dict[str, Any]:
    """Load and parse a YAML (or JSON) file."""
    if not file_path.exists():
        raise SpecValidationError("File not found", str(file_path))

    try:
        with file_path.open(encoding="utf-8") as f:
            data = yaml.safe_load(f)
    except yaml.YAMLError as e:
        raise SpecValidationError(f"Invalid YAML syntax: {e}", str(file_path)) from e

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise SpecValidationError("Top-level value must be a mapping", str(file_path))
    return data


def format_pydantic_error(error: ValidationError, context: str = "") -> str:
    """Format Pydantic validation error for human readability."""
    messages = []
    for err in error.errors():
        loc = ".".join(str(x) for x in err["loc"])
        msg = err["msg"]
        if context:
            messages.append(f"{context}.{loc}: {msg}")
        else:
            messages.append(f"{loc}: {msg}")
    return "\n".join(messages)


def load_openapi(spec_file: Path) -> dict[str, Any]:
    """Load an OpenAPI document and check it looks like one."""
    data = load_yaml_file(spec_file)
    if "openapi" not in data and "swagger" not in data:
        raise SpecValidationError("Missing 'openapi' (or 'swagger') version field", str(spec_file))
    if not isinstance(data.get("paths", {}), dict):
        raise SpecValidationError("'paths' must be a mapping", str(spec_file))
    return data


def parse_job(data: dict[str, Any], file_path: str | None = None) -> ClientJob:
    """Validate raw job data."""
    try:
        return ClientJob.model_validate(data)
    except ValidationError as e:
        raise SpecValidationError(format_pydantic_error(e, "job"), file_path) from e


def build_job(
    job: ClientJob,
    specs: dict[str, dict[str, Any]] | None = None,
    spec_key: str | None = None,
) -> LoadedJob:
    """Build the run context and per-operation options of a validated job."""
    key = job.spec_key or spec_key or "default"
    context = GeneratorContext(spec_key=key, specs=dict(specs or {}), output=job.output)

    operations = []
    for entry in job.operations:
        options = GeneratorOptions(route=entry.route, path_route=entry.path_route, context=context)
        operations.append((entry.to_verb_options(), options))

    return LoadedJob(job=job, context=context, operations=operations)


def load_job(job_file: Path) -> LoadedJob:
    """Load and validate a job file and the OpenAPI document it points to.

    Args:
        job_file: Path to the YAML or JSON job file

    Returns:
        LoadedJob ready to be handed to the group builder

    Raises:
        SpecValidationError: If the job or the OpenAPI document is invalid
    """
    data = load_yaml_file(job_file)
    job = parse_job(data, str(job_file))

    specs: dict[str, dict[str, Any]] = {}
    spec_key = None
    if job.openapi:
        spec_file = (job_file.parent / job.openapi).resolve()
        spec_key = job.spec_key or spec_file.stem
        specs[spec_key] = load_openapi(spec_file)
        logger.info("Loaded OpenAPI document %s as '%s'", spec_file, spec_key)

    loaded = build_job(job, specs, spec_key)
    loaded.path = job_file
    logger.info("Loaded job '%s' with %d operations", job.title, len(loaded.operations))
    return loaded
