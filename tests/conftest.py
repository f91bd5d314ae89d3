"""Shared fixtures for the clientgen test suite."""

from __future__ import annotations

from collections.abc import Callable, Generator
from typing import Any

import pytest

from clientgen.lib.settings import get_settings
from clientgen.spec.output import GeneratorContext, GeneratorOptions, OutputConfig
from clientgen.spec.verbs import GeneratorVerbOptions

PETSTORE: dict[str, Any] = {
    "openapi": "3.0.0",
    "info": {"title": "Swagger Petstore", "version": "1.0.0"},
    "paths": {
        "/pets": {
            "get": {
                "operationId": "listPets",
                "parameters": [
                    {"name": "limit", "in": "query", "schema": {"type": "integer"}},
                    {"name": "page-size", "in": "query", "schema": {"type": "integer"}},
                    {"$ref": "#/components/parameters/RequestId"},
                ],
            },
            "post": {"operationId": "createPets"},
        },
        "/pets/{petId}": {
            "get": {
                "operationId": "showPetById",
                "parameters": [
                    {"name": "petId", "in": "path", "required": True},
                    {"name": "x-trace", "in": "header"},
                ],
            },
        },
    },
    "components": {
        "parameters": {
            "RequestId": {"name": "requestId", "in": "header", "schema": {"type": "string"}},
        },
    },
}


@pytest.fixture(autouse=True)
def fresh_settings() -> Generator[None, None, None]:
    """Drop cached settings so environment changes in a test take effect."""
    get_settings.cache_clear()
    yield
    get_settings.cache_clear()


@pytest.fixture
def petstore() -> dict[str, Any]:
    """A small OpenAPI document with query and header parameters."""
    return PETSTORE


@pytest.fixture
def context(petstore: dict[str, Any]) -> GeneratorContext:
    """Run context with the petstore document loaded."""
    return GeneratorContext(spec_key="petstore", specs={"petstore": petstore})


@pytest.fixture
def make_options(context: GeneratorContext) -> Callable[..., GeneratorOptions]:
    """Factory for per-operation route options sharing the run context."""

    def _make(
        route: str, path_route: str, output: OutputConfig | None = None
    ) -> GeneratorOptions:
        if output is not None:
            context.output = output
        return GeneratorOptions(route=route, path_route=path_route, context=context)

    return _make


@pytest.fixture
def get_pet_by_id() -> Callable[..., GeneratorVerbOptions]:
    """Factory for the getPetById operation, with optional overrides."""

    def _make(**overrides: Any) -> GeneratorVerbOptions:
        data: dict[str, Any] = {
            "verb": "get",
            "operation_name": "getPetById",
            "response": {
                "imports": [{"name": "Pet"}],
                "definition": {"success": "Pet", "errors": "Error"},
            },
            "props": [{"name": "id", "definition": "id: string", "implementation": "id: string"}],
        }
        data.update(overrides)
        return GeneratorVerbOptions.model_validate(data)

    return _make


@pytest.fixture
def custom_instance() -> dict[str, Any]:
    """A mutator accepting request options as its second argument."""
    return {"name": "customInstance", "path": "../mutator", "has_second_arg": True}
