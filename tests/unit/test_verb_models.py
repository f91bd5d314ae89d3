"""Tests for clientgen.spec.verbs and clientgen.spec.output models."""

from pydantic import ValidationError
import pytest

from clientgen.spec.output import CompilerOptions, OutputConfig, TsConfig
from clientgen.spec.verbs import GeneratorVerbOptions, GetterProp, GetterResponse


class TestGeneratorVerbOptions:
    """Tests for GeneratorVerbOptions."""

    def test_verb_is_normalized(self) -> None:
        """Verbs are lowercased."""
        verb_options = GeneratorVerbOptions(verb="GET", operation_name="listPets")
        assert verb_options.verb == "get"

    def test_unknown_verb(self) -> None:
        """Unsupported verbs are rejected."""
        with pytest.raises(ValidationError):
            GeneratorVerbOptions(verb="trace", operation_name="listPets")

    def test_extra_fields_forbidden(self) -> None:
        """Typos fail loudly."""
        with pytest.raises(ValidationError, match="Extra inputs"):
            GeneratorVerbOptions.model_validate(
                {"verb": "get", "operation_name": "listPets", "operationName": "x"}
            )

    def test_defaults(self) -> None:
        """Overrides default to request options on, single argument off."""
        verb_options = GeneratorVerbOptions(verb="get", operation_name="listPets")
        assert verb_options.override.request_options is True
        assert verb_options.override.use_single_request_argument is False
        assert verb_options.mutator is None
        assert verb_options.named_path_params is None

    def test_props_of(self) -> None:
        """Props are filtered by type, keeping their order."""
        verb_options = GeneratorVerbOptions.model_validate(
            {
                "verb": "get",
                "operation_name": "showPet",
                "props": [
                    {"name": "a", "definition": "a: string", "implementation": "a: string"},
                    {
                        "name": "params",
                        "definition": "params?: P",
                        "implementation": "params?: P",
                        "type": "query_param",
                    },
                    {"name": "b", "definition": "b: string", "implementation": "b: string"},
                ],
            }
        )
        assert [prop.name for prop in verb_options.props_of("param")] == ["a", "b"]
        assert [prop.name for prop in verb_options.props_of("query_param")] == ["params"]


def test_prop_schema_alias() -> None:
    """The schema of a prop is read from the ``schema`` key or by field name."""
    by_alias = GetterProp.model_validate(
        {"name": "p", "definition": "p: P", "implementation": "p: P", "schema": {"name": "P"}}
    )
    by_name = GetterProp(
        name="p", definition="p: P", implementation="p: P", schema_ref={"name": "P"}
    )
    assert by_alias.schema_ref is not None
    assert by_alias.schema_ref.name == by_name.schema_ref.name == "P"


def test_response_type_fallbacks() -> None:
    """Missing success and error types read as unknown."""
    response = GetterResponse()
    assert response.success_type == "unknown"
    assert response.error_type == "unknown"


def test_exact_optional_property_types() -> None:
    """The flag is read from the tsconfig compiler options."""
    assert OutputConfig().is_exact_optional_property_types is False
    output = OutputConfig(
        tsconfig=TsConfig(compiler_options=CompilerOptions(exact_optional_property_types=True))
    )
    assert output.is_exact_optional_property_types is True
