"""Tests for using Language in pydantic models."""

import pytest

pydantic = pytest.importorskip("pydantic")

from pydantic import BaseModel, ValidationError  # noqa: E402

from isolang import Language  # noqa: E402


class Book(BaseModel):
    """Model with a required and an optional language field."""

    title: str
    language: Language
    original_language: Language | None = None


class TestValidation:
    """Tests for validating languages."""

    def test_from_639_3_string(self) -> None:
        book = Book(title="Der Process", language="deu")
        assert book.language is Language.Deu

    def test_from_member(self) -> None:
        book = Book(title="Don Quijote", language=Language.Spa)
        assert book.language is Language.Spa

    def test_from_json(self) -> None:
        book = Book.model_validate_json('{"title": "Kanzi", "language": "swa"}')
        assert book.language is Language.Swa
        assert book.original_language is None

    @pytest.mark.parametrize("value", ["xyz", "de", "German", ""])
    def test_unknown_code(self, value: str) -> None:
        with pytest.raises(ValidationError, match="Unknown ISO 639-3 code"):
            Book(title="?", language=value)

    def test_unknown_code_from_json(self) -> None:
        with pytest.raises(ValidationError):
            Book.model_validate_json('{"title": "?", "language": "xyz"}')


class TestSerialization:
    """Tests for serializing languages."""

    def test_model_dump(self) -> None:
        book = Book(title="Der Process", language="deu", original_language="ces")
        assert book.model_dump() == {
            "title": "Der Process",
            "language": "deu",
            "original_language": "ces",
        }

    def test_model_dump_json(self) -> None:
        book = Book(title="Don Quijote", language=Language.Spa)
        assert book.model_dump_json() == (
            '{"title":"Don Quijote","language":"spa","original_language":null}'
        )

    def test_json_round_trip(self) -> None:
        book = Book(title="Kanzi", language="swa", original_language="swh")
        assert Book.model_validate_json(book.model_dump_json()) == book


class TestJsonSchema:
    """Tests for schema reflection."""

    def test_field_schema(self) -> None:
        schema = Book.model_json_schema()
        language = schema["properties"]["language"]
        assert language["type"] == "string"
        assert language["pattern"] == "^[a-z]{3}$"
        assert "language" in schema["required"]
