"""Tests for board files, save slots and PNG export."""

import pytest
from PIL import Image

from playboard.models import SceneDocument
from playboard.services import (
    BoardPersistenceError,
    MalformedDocumentError,
    SlotNotFoundError,
    slot_stem,
)


class TestFiles:
    def test_write_then_read(self, layout_service, sample_document, tmp_path):
        path = layout_service.write(tmp_path / "nested" / "play.json", sample_document)
        assert path.exists()
        assert layout_service.read(path) == sample_document

    def test_read_missing_file(self, layout_service, tmp_path):
        with pytest.raises(BoardPersistenceError) as excinfo:
            layout_service.read(tmp_path / "missing.json")
        assert excinfo.value.path == tmp_path / "missing.json"

    def test_read_malformed_file(self, layout_service, tmp_path):
        path = tmp_path / "bad.json"
        path.write_text("{ not json", encoding="utf-8")
        with pytest.raises(MalformedDocumentError):
            layout_service.read(path)

    def test_read_non_utf8_file(self, layout_service, tmp_path):
        path = tmp_path / "latin.json"
        path.write_bytes(b'{"players": [], "label": "\xff\xfe"}')
        with pytest.raises(MalformedDocumentError) as excinfo:
            layout_service.read(path)
        assert excinfo.value.path == path
        assert isinstance(excinfo.value.__cause__, UnicodeDecodeError)


class TestSlots:
    def test_slot_stem(self):
        assert slot_stem("  Zone Press #2 ") == "Zone_Press_2"
        assert slot_stem("../../etc") == "etc"
        assert slot_stem("!!!") == ""

    def test_save_and_load_slot(self, layout_service, sample_document):
        path = layout_service.save_slot("Inbound Play", sample_document)
        assert path.name == "Inbound_Play.json"
        assert layout_service.load_slot("Inbound Play") == sample_document

    def test_list_and_delete(self, layout_service):
        assert layout_service.list_slots() == []
        layout_service.save_slot("b", SceneDocument())
        layout_service.save_slot("a", SceneDocument())
        assert layout_service.list_slots() == ["a", "b"]

        assert layout_service.delete_slot("a")
        assert not layout_service.delete_slot("a")
        assert layout_service.list_slots() == ["b"]

    def test_missing_slot(self, layout_service):
        with pytest.raises(SlotNotFoundError):
            layout_service.load_slot("nothing here")

    def test_invalid_slot_name(self, layout_service):
        with pytest.raises(BoardPersistenceError):
            layout_service.save_slot("???", SceneDocument())


class TestExport:
    def test_export_default_path(self, layout_service, sample_document, settings):
        path = layout_service.export(sample_document)
        assert path == layout_service.exports_dir / "board.png"
        with Image.open(path) as image:
            assert image.size == (settings.width, settings.height)

    def test_export_explicit_path(self, layout_service, tmp_path):
        path = layout_service.export(SceneDocument(), tmp_path / "out" / "empty.png")
        assert path.read_bytes().startswith(b"\x89PNG")
