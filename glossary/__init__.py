"""术语条目编辑核心

服务端 GlossaryEntry（wire DTO）与界面可编辑条目之间的转换、
编辑状态比对，以及列表排序参数的编解码。

用法:
    from glossary import build_ui_entry, compute_status, build_entry_for_save

    editable = build_ui_entry(GlossaryEntry.from_dict(data), "fr")
    editable.trans_term.content = "chat"
    status = compute_status(editable, original)
    payload = build_entry_for_save(editable)
"""
from .errors import GlossaryError, MalformedEntryError
from .models import (
    DEFAULT_ENTRY_STATUS,
    EditableEntry,
    EditableTerm,
    EntryStatus,
    GlossaryEntry,
    GlossaryTerm,
)
from .helpers.entry_decoder import (
    build_ui_entry,
    generate_empty_term,
    generate_src_term,
    get_term_by_locale,
)
from .helpers.entry_status import SavingTracker, can_update_trans_comment, compute_status
from .helpers.sort_params import parse_sort_token, serialize_sort_spec
from .helpers.term_codec import build_entry_for_save, build_wire_entry, build_wire_term

__all__ = [
    "GlossaryError",
    "MalformedEntryError",
    "DEFAULT_ENTRY_STATUS",
    "EditableEntry",
    "EditableTerm",
    "EntryStatus",
    "GlossaryEntry",
    "GlossaryTerm",
    "build_ui_entry",
    "generate_empty_term",
    "generate_src_term",
    "get_term_by_locale",
    "SavingTracker",
    "can_update_trans_comment",
    "compute_status",
    "parse_sort_token",
    "serialize_sort_spec",
    "build_entry_for_save",
    "build_wire_entry",
    "build_wire_term",
]
