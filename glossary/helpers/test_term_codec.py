"""Unit tests for term_codec.

Validates:
- build_wire_term returns None for absent terms or empty locales
- content is trimmed only for translation terms; comment always trimmed
- build_wire_entry drops locale-less terms and copies src metadata
- build_entry_for_save never mutates the caller's entry and strips status
"""

from __future__ import annotations

import json

import pytest

from glossary.helpers.term_codec import build_entry_for_save, build_wire_entry, build_wire_term
from glossary.models import EditableEntry, EditableTerm, EntryStatus, GlossaryTerm


def _make_entry(
    src_content: str = "  cat ",
    trans_content: str = " chat  ",
    trans_locale: str = "fr",
) -> EditableEntry:
    """Helper: create an editable entry with padded values."""
    return EditableEntry(
        id=1,
        pos=" noun ",
        description="  a small animal ",
        terms_count=1,
        src_term=EditableTerm(
            content=src_content,
            locale="en",
            comment=" src note ",
            reference="r1",
        ),
        trans_term=EditableTerm(
            content=trans_content,
            locale=trans_locale,
            comment="  trans note",
        ),
        status=EntryStatus(is_trans_modified=True, is_saving=True),
    )


# ---------------------------------------------------------------------------
# build_wire_term
# ---------------------------------------------------------------------------

class TestBuildWireTerm:

    def test_none_term(self):
        assert build_wire_term(None, True) is None

    @pytest.mark.parametrize("locale", ["", None])
    def test_empty_locale(self, locale):
        term = EditableTerm(content="chat", locale="fr")
        term.locale = locale
        assert build_wire_term(term, True) is None

    def test_content_kept_verbatim_without_trim(self):
        term = EditableTerm(content="  cat ", locale="en", comment=" note ")
        result = build_wire_term(term, False)
        assert result == GlossaryTerm(content="  cat ", locale="en", comment="note")

    def test_content_trimmed(self):
        term = EditableTerm(content=" chat ", locale="fr", comment="")
        result = build_wire_term(term, True)
        assert result.content == "chat"
        assert result.to_dict() == {"content": "chat", "locale": "fr", "comment": ""}

    def test_accepts_wire_term(self):
        term = GlossaryTerm(content="chat", locale="fr", comment=None)
        assert build_wire_term(term, True).comment == ""


# ---------------------------------------------------------------------------
# build_wire_entry
# ---------------------------------------------------------------------------

class TestBuildWireEntry:

    def test_full_entry(self):
        wire = build_wire_entry(_make_entry())
        assert wire.id == 1
        assert wire.pos == "noun"
        assert wire.description == "a small animal"
        assert wire.src_lang == "en"
        assert wire.source_reference == "r1"
        assert [t.to_dict() for t in wire.glossary_terms] == [
            {"content": "  cat ", "locale": "en", "comment": "src note"},
            {"content": "chat", "locale": "fr", "comment": "trans note"},
        ]

    def test_translation_without_locale_dropped(self):
        wire = build_wire_entry(_make_entry(trans_locale=""))
        assert len(wire.glossary_terms) == 1
        assert wire.glossary_terms[0].locale == "en"

    def test_no_terms_when_no_locales(self):
        entry = _make_entry(trans_locale="")
        entry.src_term.locale = ""
        wire = build_wire_entry(entry)
        assert wire.glossary_terms == []
        assert wire.src_lang == ""

    def test_every_emitted_term_has_locale(self):
        wire = build_wire_entry(_make_entry())
        assert len(wire.glossary_terms) <= 2
        assert all(t.locale for t in wire.glossary_terms)

    def test_status_not_in_wire_dict(self):
        assert "status" not in build_wire_entry(_make_entry()).to_dict()


# ---------------------------------------------------------------------------
# build_entry_for_save
# ---------------------------------------------------------------------------

class TestBuildEntryForSave:

    def test_single_element_list_without_status(self):
        payload = json.loads(build_entry_for_save(_make_entry()))
        assert isinstance(payload, list)
        assert len(payload) == 1
        assert "status" not in payload[0]
        assert "status" not in json.dumps(payload)

    def test_trims_pos_and_description(self):
        payload = json.loads(build_entry_for_save(_make_entry()))[0]
        assert payload["pos"] == "noun"
        assert payload["description"] == "a small animal"
        # term content is left as-is
        assert payload["srcTerm"]["content"] == "  cat "

    def test_caller_entry_not_mutated(self):
        entry = _make_entry()
        build_entry_for_save(entry)
        assert entry.pos == " noun "
        assert entry.description == "  a small animal "
        assert entry.status.is_saving is True

    def test_non_ascii_kept(self):
        entry = _make_entry(trans_content="注意力")
        assert "注意力" in build_entry_for_save(entry)
