"""
Tests for JSON Schema Contract Validators

Тестирование JSON Schema валидаторов:
- Валидность самой схемы
- Валидация правильных данных
- Детекция нарушений required полей
- Детекция нарушений constraints (maxLength/pattern/const)
- Интеграция с Pydantic моделями
"""

import json

import pytest
from jsonschema import ValidationError

from src.core.contracts import (
    ContractValidator,
    NotesDocumentValidator,
    SchemaLoader,
    validate_notes_document,
)
from src.core.domain import Note, NotesDocument


# =============================================================================
# FIXTURES - VALID DATA SAMPLES
# =============================================================================


@pytest.fixture
def valid_notes_document():
    """Валидный notes_document для тестирования."""
    return {
        "schema_version": "1",
        "storage_key": "notes-0a1b2c",
        "notes": [
            {"title": "Sum", "text": "2+3"},
            {"title": "Chain", "text": "2+3*4"},
        ],
    }


# =============================================================================
# SCHEMA LOADER
# =============================================================================


class TestSchemaLoader:
    def test_loads_notes_schema(self):
        schema = SchemaLoader().load_schema("notes_document")
        assert schema["title"] == "notes_document"

    def test_schema_cached(self):
        loader = SchemaLoader()
        assert loader.load_schema("notes_document") is loader.load_schema("notes_document")

    def test_missing_schema(self):
        with pytest.raises(FileNotFoundError):
            SchemaLoader().load_schema("does_not_exist")

    def test_invalid_schema_rejected(self, tmp_path):
        (tmp_path / "broken.json").write_text(json.dumps({"type": 12}), encoding="utf-8")
        with pytest.raises(ValueError, match="Invalid JSON Schema"):
            SchemaLoader(schema_dir=tmp_path).load_schema("broken")

    def test_missing_schema_dir(self, tmp_path):
        with pytest.raises(RuntimeError):
            SchemaLoader(schema_dir=tmp_path / "nope")

    def test_custom_loader_for_validator(self, tmp_path):
        schema = {"$schema": "https://json-schema.org/draft/2020-12/schema", "type": "object"}
        (tmp_path / "anything.json").write_text(json.dumps(schema), encoding="utf-8")
        validator = ContractValidator("anything", loader=SchemaLoader(schema_dir=tmp_path))
        assert validator.is_valid({})
        assert not validator.is_valid([])


# =============================================================================
# NOTES DOCUMENT CONTRACT
# =============================================================================


class TestNotesDocumentContract:
    def test_valid_document(self, valid_notes_document):
        validate_notes_document(valid_notes_document)

    def test_empty_notes_allowed(self, valid_notes_document):
        valid_notes_document["notes"] = []
        validate_notes_document(valid_notes_document)

    @pytest.mark.parametrize("field", ["schema_version", "storage_key", "notes"])
    def test_required_fields(self, valid_notes_document, field):
        del valid_notes_document[field]
        with pytest.raises(ValidationError):
            validate_notes_document(valid_notes_document)

    def test_wrong_schema_version(self, valid_notes_document):
        valid_notes_document["schema_version"] = "2"
        assert not NotesDocumentValidator().is_valid(valid_notes_document)

    def test_unsafe_storage_key(self, valid_notes_document):
        valid_notes_document["storage_key"] = "../etc/passwd"
        assert not NotesDocumentValidator().is_valid(valid_notes_document)

    def test_title_too_long(self, valid_notes_document):
        valid_notes_document["notes"][0]["title"] = "x" * 51
        assert not NotesDocumentValidator().is_valid(valid_notes_document)

    def test_extra_note_field(self, valid_notes_document):
        valid_notes_document["notes"][0]["password"] = "secret"
        assert not NotesDocumentValidator().is_valid(valid_notes_document)

    def test_iter_errors_reports_all(self, valid_notes_document):
        valid_notes_document["schema_version"] = "2"
        valid_notes_document["notes"][1]["text"] = ""
        errors = list(NotesDocumentValidator().iter_errors(valid_notes_document))
        assert len(errors) == 2

    def test_pydantic_dump_conforms(self):
        doc = NotesDocument(
            storage_key="notes-abc",
            notes=(Note(title="Sum", text="2+3"),),
        )
        validate_notes_document(doc.model_dump(mode="json"))
