"""Tests for clientgen.core.case module."""

import pytest

from clientgen.core.case import camel, pascal, sanitize, words


class TestPascal:
    """Tests for pascal and camel."""

    @pytest.mark.parametrize(
        ("value", "expected"),
        [
            ("getPetById", "GetPetById"),
            ("list_pets", "ListPets"),
            ("swagger petstore", "SwaggerPetstore"),
            ("HTTPClient", "HTTPClient"),
            ("v2-pets", "V2Pets"),
            ("", ""),
        ],
    )
    def test_pascal(self, value: str, expected: str) -> None:
        """Words are split on case boundaries and separators."""
        assert pascal(value) == expected

    def test_camel(self) -> None:
        """camel lowercases the first letter only."""
        assert camel("get-pet-by-id") == "getPetById"

    def test_words(self) -> None:
        """Acronyms stay together."""
        assert words("parseHTTPResponse") == ["parse", "HTTP", "Response"]


class TestSanitize:
    """Tests for sanitize."""

    def test_strips_invalid_characters(self) -> None:
        """Punctuation is removed, separators are kept."""
        assert sanitize("Swagger Petstore!") == "Swagger Petstore"

    def test_replacements(self) -> None:
        """Separators are replaced when asked."""
        assert sanitize("pet store", whitespace="") == "petstore"
        assert sanitize("pet-store", dash="_") == "pet_store"
        assert sanitize("pet.store", dot="") == "petstore"
        assert sanitize("pet_store", underscore="-") == "pet-store"
